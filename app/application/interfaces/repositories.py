"""Repository interfaces (ports) for the application layer.

Protocols define the persistence contracts the workflow engine depends on
(DIP). Infrastructure provides SQLAlchemy implementations; tests pass fakes.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Protocol

from app.application.dtos.task import TaskCreate
from app.application.dtos.workflow import (
    WorkflowExecutionCreate,
    WorkflowExecutionResult,
    WorkflowRuleResult,
)
from app.domain.entities.task import TaskEntity


class ITaskStore(Protocol):
    """Task reads/writes, rule loading and the execution audit log."""

    async def get_task(self, task_id: str) -> TaskEntity | None:
        """Return the task or None."""

    async def update_task(self, task_id: str, changes: dict[str, Any]) -> TaskEntity:
        """Write only the given fields and return the updated task."""

    async def insert_task(self, data: TaskCreate) -> TaskEntity:
        """Insert a task and return it."""

    async def list_enabled_rules(self, project_id: str) -> list[WorkflowRuleResult]:
        """Return enabled rules for the project in store order."""

    async def append_execution_log(
        self, record: WorkflowExecutionCreate
    ) -> WorkflowExecutionResult:
        """Append one workflow execution record (never updated afterwards)."""


class IDueTaskRepository(Protocol):
    """Queries used by the periodic due-date scan."""

    async def get_project_ids_with_triggers(self, triggers: list[str]) -> list[str]:
        """Return projects that have an enabled rule with any of the given triggers."""

    async def get_open_tasks_due_before(
        self, project_id: str, cutoff: datetime, *, limit: int = 500
    ) -> list[TaskEntity]:
        """Return tasks not done whose due date is set and before cutoff."""
