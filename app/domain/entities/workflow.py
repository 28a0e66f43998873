"""Workflow rule domain entity.

A rule is a project-scoped automation: one trigger, conditions that must all
hold, and actions executed in order. Rules are read-only to the engine.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from app.domain.value_objects.workflow import WorkflowAction, WorkflowCondition
from app.shared.enums import WorkflowTrigger


@dataclass(frozen=True)
class WorkflowRuleEntity:
    """Typed workflow rule. Unknown trigger strings are kept and never match."""

    id: str
    project_id: str
    name: str
    trigger: WorkflowTrigger | str
    enabled: bool = True
    description: str | None = None
    conditions: list[WorkflowCondition] = field(default_factory=list)
    actions: list[WorkflowAction] = field(default_factory=list)
    created_by: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def belongs_to_project(self, project_id: str) -> bool:
        """Return whether this rule belongs to the given project."""
        return self.project_id == project_id
