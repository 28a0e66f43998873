"""Task domain entity.

The subject of workflow automation: a card on a project's Kanban board.
The entity is an immutable snapshot; writes go through the task store and
return a new snapshot.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from app.shared.enums import ConditionField, TaskStatus


@dataclass(frozen=True)
class TaskEntity:
    """Immutable snapshot of a task as seen by the workflow engine."""

    id: str
    project_id: str
    title: str
    status: str = TaskStatus.TODO.value
    priority: str = "medium"
    description: str | None = None
    client_id: str | None = None
    assignees: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    due_at: datetime | None = None
    completed_at: datetime | None = None
    created_by: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_done(self) -> bool:
        """Return whether the task sits in the terminal stage."""
        return self.status == TaskStatus.DONE.value

    def field_value(self, field_name: ConditionField) -> Any:
        """Return the attribute a workflow condition refers to."""
        return _FIELD_GETTERS[field_name](self)


_FIELD_GETTERS: dict[ConditionField, Callable[[TaskEntity], Any]] = {
    ConditionField.TITLE: lambda t: t.title,
    ConditionField.DESCRIPTION: lambda t: t.description,
    ConditionField.STATUS: lambda t: t.status,
    ConditionField.PRIORITY: lambda t: t.priority,
    ConditionField.ASSIGNEES: lambda t: t.assignees,
    ConditionField.TAGS: lambda t: t.tags,
    ConditionField.DUE_AT: lambda t: t.due_at,
    ConditionField.COMPLETED_AT: lambda t: t.completed_at,
    ConditionField.CLIENT_ID: lambda t: t.client_id,
    ConditionField.CREATED_AT: lambda t: t.created_at,
    ConditionField.UPDATED_AT: lambda t: t.updated_at,
    ConditionField.CREATED_BY: lambda t: t.created_by,
}
