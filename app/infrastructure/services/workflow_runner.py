"""Workflow runner: composes the engine over a fresh session and runs one pass.

Task endpoints schedule run() as a background task after their own
transaction has committed, so rule evaluation sees the committed task and
never delays or fails the response.
"""

from __future__ import annotations

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager

import httpx
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.services.workflow_action_executor import WorkflowActionExecutor
from app.application.use_cases.workflows import (
    DueScanResult,
    ScanDueTasksUseCase,
    WorkflowEngine,
)
from app.core.config import get_settings
from app.domain.entities.task import TaskEntity
from app.infrastructure.external.slack import SlackNotificationDispatcher
from app.infrastructure.persistence.database import session_scope
from app.infrastructure.persistence.repositories import (
    CommentRepository,
    SlackIntegrationRepository,
    SqlDueTaskRepository,
    SqlTaskStore,
)
from app.infrastructure.services.workflow_notification_service import (
    LogOnlyEmailSender,
)
from app.infrastructure.services.workflow_template_renderer import (
    WorkflowTemplateRenderer,
)
from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

SessionScope = Callable[[], AbstractAsyncContextManager[AsyncSession]]


def build_workflow_engine(
    db: AsyncSession, http_client: httpx.AsyncClient
) -> WorkflowEngine:
    """Wire the engine with SQL, Slack, email and template collaborators."""
    settings = get_settings()
    task_store = SqlTaskStore(db)
    executor = WorkflowActionExecutor(
        task_store,
        notification_dispatcher=SlackNotificationDispatcher(
            SlackIntegrationRepository(db),
            http_client,
            api_url=settings.slack_api_url,
            timeout_seconds=settings.slack_timeout_seconds,
        ),
        email_sender=LogOnlyEmailSender(),
        comment_writer=CommentRepository(db),
        template_renderer=WorkflowTemplateRenderer(),
    )
    return WorkflowEngine(task_store, executor)


class WorkflowRunner:
    """Runs workflow passes in their own transaction (fire-and-forget)."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        session_factory: SessionScope = session_scope,
    ) -> None:
        self._http_client = http_client
        self._session_factory = session_factory

    async def run(
        self,
        project_id: str,
        task: TaskEntity,
        event_type: str,
        old_task: TaskEntity | None = None,
    ) -> None:
        """Evaluate the project's rules for one task event; never raises."""
        try:
            async with self._session_factory() as db:
                engine = build_workflow_engine(db, self._http_client)
                await engine.process_task_workflows(
                    project_id, task, event_type, old_task
                )
        except Exception:
            logger.exception(
                "Workflow pass aborted (project_id=%s, task_id=%s, event_type=%s)",
                project_id,
                task.id,
                event_type,
            )

    async def scan_due_tasks(self, *, project_id: str | None = None) -> DueScanResult:
        """Run the due-date scan in one transaction and return its counts."""
        async with self._session_factory() as db:
            use_case = ScanDueTasksUseCase(
                SqlDueTaskRepository(db),
                build_workflow_engine(db, self._http_client),
            )
            return await use_case.execute(project_id=project_id)
