"""Task repository: task CRUD and the due-date scan query."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.task import TaskCreate
from app.domain.entities.task import TaskEntity
from app.domain.exceptions import ResourceNotFoundException
from app.infrastructure.persistence.models.task import Task
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.shared.enums import TaskStatus


def to_entity(t: Task) -> TaskEntity:
    """Map Task ORM to an immutable TaskEntity snapshot."""
    return TaskEntity(
        id=t.id,
        project_id=t.project_id,
        client_id=t.client_id,
        title=t.title,
        description=t.description,
        status=t.status,
        priority=t.priority,
        assignees=list(t.assignees or []),
        tags=list(t.tags or []),
        due_at=t.due_at,
        completed_at=t.completed_at,
        created_by=t.created_by,
        created_at=t.created_at,
        updated_at=t.updated_at,
    )


class TaskRepository(BaseRepository[Task]):
    """Task repository."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Task)

    async def get_or_raise(self, task_id: str) -> Task:
        """Return the task or raise ResourceNotFoundException."""
        task = await self.get_by_id(task_id)
        if task is None:
            raise ResourceNotFoundException("task", task_id)
        return task

    async def get_by_project(
        self,
        project_id: str,
        skip: int = 0,
        limit: int = 100,
        status: str | None = None,
    ) -> list[Task]:
        q = select(Task).where(Task.project_id == project_id)
        if status is not None:
            q = q.where(Task.status == status)
        q = q.order_by(Task.created_at.asc(), Task.id.asc()).offset(skip).limit(limit)
        result = await self.db.execute(q)
        return list(result.scalars().all())

    async def create_task(self, data: TaskCreate) -> Task:
        """Create a task from the write DTO and return the ORM row."""
        task = Task(
            project_id=data.project_id,
            client_id=data.client_id,
            title=data.title,
            description=data.description,
            status=data.status,
            priority=data.priority,
            assignees=list(data.assignees),
            tags=list(data.tags),
            due_at=data.due_at,
            completed_at=None,
            created_by=data.created_by,
        )
        return await self.create(task)

    async def update_task(self, task_id: str, changes: dict[str, Any]) -> Task:
        """Write only the given fields and return the updated row."""
        task = await self.get_or_raise(task_id)
        return await self.update_fields(task, changes)

    async def get_open_tasks_due_before(
        self, project_id: str, cutoff: datetime, *, limit: int = 500
    ) -> list[Task]:
        """Return tasks not yet done with a due date before cutoff, earliest first."""
        result = await self.db.execute(
            select(Task)
            .where(
                Task.project_id == project_id,
                Task.status != TaskStatus.DONE.value,
                Task.due_at.is_not(None),
                Task.due_at < cutoff,
            )
            .order_by(Task.due_at.asc())
            .limit(limit)
        )
        return list(result.scalars().all())
