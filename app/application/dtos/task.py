"""DTOs for task writes (no dependency on ORM)."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from app.shared.enums import TaskPriority, TaskStatus


@dataclass(frozen=True)
class TaskCreate:
    """Fields for inserting a task (API create or workflow create_task action)."""

    project_id: str
    title: str
    client_id: str | None = None
    description: str | None = None
    status: str = TaskStatus.TODO.value
    priority: str = TaskPriority.MEDIUM.value
    assignees: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    due_at: datetime | None = None
    created_by: str | None = None
