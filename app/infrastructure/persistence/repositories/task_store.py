"""SQL-backed task store and due-task queries for the workflow engine.

Each write runs in its own SAVEPOINT so a failing action rolls back only
itself: writes made by earlier actions of the same rule stay in the
surrounding transaction, as does the execution record written afterwards.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.task import TaskCreate
from app.application.dtos.workflow import (
    WorkflowExecutionCreate,
    WorkflowExecutionResult,
    WorkflowRuleResult,
)
from app.domain.entities.task import TaskEntity
from app.infrastructure.persistence.repositories.task_repo import (
    TaskRepository,
    to_entity,
)
from app.infrastructure.persistence.repositories.workflow_repo import (
    WorkflowExecutionRepository,
    WorkflowRuleRepository,
)


class SqlTaskStore:
    """ITaskStore over one AsyncSession (caller owns commit)."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db
        self._tasks = TaskRepository(db)
        self._rules = WorkflowRuleRepository(db)
        self._executions = WorkflowExecutionRepository(db)

    async def get_task(self, task_id: str) -> TaskEntity | None:
        task = await self._tasks.get_by_id(task_id)
        return to_entity(task) if task is not None else None

    async def update_task(self, task_id: str, changes: dict[str, Any]) -> TaskEntity:
        async with self.db.begin_nested():
            task = await self._tasks.update_task(task_id, changes)
        return to_entity(task)

    async def insert_task(self, data: TaskCreate) -> TaskEntity:
        async with self.db.begin_nested():
            task = await self._tasks.create_task(data)
        return to_entity(task)

    async def list_enabled_rules(self, project_id: str) -> list[WorkflowRuleResult]:
        return await self._rules.get_enabled_by_project(project_id)

    async def append_execution_log(
        self, record: WorkflowExecutionCreate
    ) -> WorkflowExecutionResult:
        async with self.db.begin_nested():
            return await self._executions.append(record)


class SqlDueTaskRepository:
    """IDueTaskRepository over one AsyncSession."""

    def __init__(self, db: AsyncSession) -> None:
        self._tasks = TaskRepository(db)
        self._rules = WorkflowRuleRepository(db)

    async def get_project_ids_with_triggers(self, triggers: list[str]) -> list[str]:
        return await self._rules.get_project_ids_with_triggers(triggers)

    async def get_open_tasks_due_before(
        self, project_id: str, cutoff: datetime, *, limit: int = 500
    ) -> list[TaskEntity]:
        tasks = await self._tasks.get_open_tasks_due_before(
            project_id, cutoff, limit=limit
        )
        return [to_entity(t) for t in tasks]
