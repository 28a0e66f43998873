"""WorkflowRule and WorkflowExecution repositories."""

from __future__ import annotations

from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.workflow import (
    WorkflowExecutionCreate,
    WorkflowExecutionResult,
    WorkflowRuleResult,
)
from app.infrastructure.persistence.models.workflow import (
    WorkflowExecution,
    WorkflowRule,
)
from app.infrastructure.persistence.repositories.base import BaseRepository


def rule_to_result(r: WorkflowRule) -> WorkflowRuleResult:
    """Map WorkflowRule ORM to WorkflowRuleResult DTO (raw JSON kept)."""
    return WorkflowRuleResult(
        id=r.id,
        project_id=r.project_id,
        name=r.name,
        description=r.description,
        enabled=r.enabled,
        trigger=r.trigger,
        conditions=list(r.conditions or []),
        actions=list(r.actions or []),
        created_by=r.created_by,
        created_at=r.created_at,
        updated_at=r.updated_at,
    )


def execution_to_result(e: WorkflowExecution) -> WorkflowExecutionResult:
    """Map WorkflowExecution ORM to WorkflowExecutionResult DTO."""
    return WorkflowExecutionResult(
        id=e.id,
        workflow_rule_id=e.workflow_rule_id,
        task_id=e.task_id,
        executed_at=e.executed_at,
        success=e.success,
        actions_executed=e.actions_executed,
        error_message=e.error_message,
    )


class WorkflowRuleRepository(BaseRepository[WorkflowRule]):
    """Workflow rule repository."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, WorkflowRule)

    async def get_by_id_and_project(
        self, rule_id: str, project_id: str
    ) -> WorkflowRule | None:
        result = await self.db.execute(
            select(WorkflowRule).where(
                WorkflowRule.id == rule_id,
                WorkflowRule.project_id == project_id,
            )
        )
        return result.scalar_one_or_none()

    async def get_by_project(
        self,
        project_id: str,
        skip: int = 0,
        limit: int = 100,
        include_disabled: bool = True,
    ) -> list[WorkflowRule]:
        q = select(WorkflowRule).where(WorkflowRule.project_id == project_id)
        if not include_disabled:
            q = q.where(WorkflowRule.enabled.is_(True))
        q = (
            q.order_by(WorkflowRule.created_at.asc(), WorkflowRule.id.asc())
            .offset(skip)
            .limit(limit)
        )
        result = await self.db.execute(q)
        return list(result.scalars().all())

    async def get_enabled_by_project(self, project_id: str) -> list[WorkflowRuleResult]:
        """Return enabled rules in creation order (the order they are evaluated in)."""
        result = await self.db.execute(
            select(WorkflowRule)
            .where(
                WorkflowRule.project_id == project_id,
                WorkflowRule.enabled.is_(True),
            )
            .order_by(WorkflowRule.created_at.asc(), WorkflowRule.id.asc())
        )
        return [rule_to_result(r) for r in result.scalars().all()]

    async def get_project_ids_with_triggers(self, triggers: list[str]) -> list[str]:
        result = await self.db.execute(
            select(WorkflowRule.project_id)
            .where(
                WorkflowRule.trigger.in_(triggers),
                WorkflowRule.enabled.is_(True),
            )
            .distinct()
            .order_by(WorkflowRule.project_id)
        )
        return list(result.scalars().all())

    async def create_rule(
        self,
        project_id: str,
        name: str,
        trigger: str,
        conditions: list[dict[str, Any]],
        actions: list[dict[str, Any]],
        description: str | None = None,
        enabled: bool = True,
        created_by: str | None = None,
    ) -> WorkflowRule:
        """Create workflow rule; return created entity."""
        rule = WorkflowRule(
            project_id=project_id,
            name=name,
            description=description,
            enabled=enabled,
            trigger=trigger,
            conditions=conditions,
            actions=actions,
            created_by=created_by,
        )
        return await self.create(rule)


class WorkflowExecutionRepository(BaseRepository[WorkflowExecution]):
    """Append-only workflow execution audit log."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, WorkflowExecution)

    async def append(self, record: WorkflowExecutionCreate) -> WorkflowExecutionResult:
        execution = WorkflowExecution(
            workflow_rule_id=record.workflow_rule_id,
            task_id=record.task_id,
            executed_at=record.executed_at,
            success=record.success,
            actions_executed=record.actions_executed,
            error_message=record.error_message,
        )
        return execution_to_result(await self.create(execution))

    async def get_by_rule(
        self, rule_id: str, skip: int = 0, limit: int = 100
    ) -> list[WorkflowExecutionResult]:
        """Return execution records for a rule, newest first."""
        result = await self.db.execute(
            select(WorkflowExecution)
            .where(WorkflowExecution.workflow_rule_id == rule_id)
            .order_by(WorkflowExecution.executed_at.desc())
            .offset(skip)
            .limit(limit)
        )
        return [execution_to_result(e) for e in result.scalars().all()]
