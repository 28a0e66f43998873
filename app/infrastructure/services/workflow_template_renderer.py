"""Workflow action templates: Jinja rendering of action texts against a task."""

from __future__ import annotations

from dataclasses import asdict
from typing import Any

from jinja2 import Template, TemplateError
from jinja2.sandbox import SandboxedEnvironment

from app.domain.entities.task import TaskEntity
from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class WorkflowTemplateRenderer:
    """Renders action texts such as ``"{{ task.title }} is overdue"``.

    Context: ``task`` (TaskEntity fields as a dict) plus any extra values
    (the executor passes ``rule``). Undefined names render as empty strings;
    a template that fails to parse or render is returned unchanged.
    Rule authors write these templates, so they run in a sandbox: attribute
    access to internals (dunders, function globals) raises SecurityError.
    """

    def __init__(self, cache_size: int = 256) -> None:
        self._env = SandboxedEnvironment(autoescape=False)
        self._cache: dict[str, Template] = {}
        self._cache_size = cache_size

    def _compile(self, template: str) -> Template:
        compiled = self._cache.get(template)
        if compiled is None:
            compiled = self._env.from_string(template)
            if len(self._cache) >= self._cache_size:
                self._cache.pop(next(iter(self._cache)))
            self._cache[template] = compiled
        return compiled

    def render(
        self,
        template: str,
        task: TaskEntity,
        extra: dict[str, Any] | None = None,
    ) -> str:
        """Render template with the task in context."""
        if "{" not in template:
            return template
        ctx = {**(extra or {}), "task": asdict(task)}
        try:
            return self._compile(template).render(**ctx)
        except TemplateError as e:
            logger.warning("Workflow template could not be rendered: %s", e)
            return template
