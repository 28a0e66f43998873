"""Performs a single workflow action against the task store and collaborators.

Errors are not caught here: the engine stops the rule at the first failing
action and records the partial count.
"""

from __future__ import annotations

from typing import Any

from app.application.dtos.task import TaskCreate
from app.application.interfaces.repositories import ITaskStore
from app.application.interfaces.services import (
    ICommentWriter,
    IEmailSender,
    INotificationDispatcher,
    ITemplateRenderer,
)
from app.domain.entities.task import TaskEntity
from app.domain.entities.workflow import WorkflowRuleEntity
from app.domain.value_objects.workflow import (
    AddCommentAction,
    AssignUserAction,
    ChangeStatusAction,
    CreateTaskAction,
    SendEmailAction,
    SendSlackAction,
    SetDueDateAction,
    UpdateTaskAction,
    WorkflowAction,
)
from app.shared.enums import TaskStatus
from app.shared.telemetry.logging import get_logger
from app.shared.utils.datetime import utc_now

logger = get_logger(__name__)


class WorkflowActionExecutor:
    """Executes typed workflow actions; returns the task snapshot after each one."""

    def __init__(
        self,
        task_store: ITaskStore,
        *,
        notification_dispatcher: INotificationDispatcher | None = None,
        email_sender: IEmailSender | None = None,
        comment_writer: ICommentWriter | None = None,
        template_renderer: ITemplateRenderer | None = None,
    ) -> None:
        self._task_store = task_store
        self._notification_dispatcher = notification_dispatcher
        self._email_sender = email_sender
        self._comment_writer = comment_writer
        self._template_renderer = template_renderer

    def _render(
        self, template: str, task: TaskEntity, rule: WorkflowRuleEntity
    ) -> str:
        if self._template_renderer is None:
            return template
        return self._template_renderer.render(template, task, {"rule": rule})

    async def execute(
        self,
        task: TaskEntity,
        action: WorkflowAction,
        rule: WorkflowRuleEntity,
    ) -> TaskEntity:
        """Run one action and return the (possibly updated) task snapshot.

        Raises:
            Exception: Whatever the store or a collaborator raised.
        """
        match action:
            case SendEmailAction():
                await self._send_email(task, action, rule)
            case SendSlackAction():
                await self._send_slack(task, action, rule)
            case CreateTaskAction():
                await self._create_task(task, action, rule)
            case UpdateTaskAction():
                changes = action.changes()
                if changes:
                    return await self._task_store.update_task(task.id, changes)
            case AssignUserAction():
                return await self._assign_user(task, action)
            case SetDueDateAction():
                return await self._task_store.update_task(
                    task.id, {"due_at": action.due_date}
                )
            case ChangeStatusAction():
                return await self._change_status(task, action)
            case AddCommentAction():
                await self._add_comment(task, action, rule)
            case _:
                logger.warning(
                    "Unknown workflow action type %r in rule %s; skipping",
                    action.type,
                    rule.id,
                )
        return task

    async def _send_email(
        self, task: TaskEntity, action: SendEmailAction, rule: WorkflowRuleEntity
    ) -> None:
        if self._email_sender is None:
            logger.info(
                "send_email skipped for task %s: no email sender configured (rule %s)",
                task.id,
                rule.id,
            )
            return
        await self._email_sender.send(
            list(action.to),
            self._render(action.subject, task, rule),
            self._render(action.body, task, rule),
        )

    async def _send_slack(
        self, task: TaskEntity, action: SendSlackAction, rule: WorkflowRuleEntity
    ) -> None:
        if self._notification_dispatcher is None:
            logger.info(
                "send_slack skipped for task %s: no dispatcher configured", task.id
            )
            return
        config = await self._notification_dispatcher.get_channel_config(task.project_id)
        if config is None:
            logger.info(
                "send_slack skipped: project %s has no notification channel",
                task.project_id,
            )
            return
        message = self._render(action.message, task, rule) if action.message else ""
        await self._notification_dispatcher.send(config, message or task.title)

    async def _create_task(
        self, task: TaskEntity, action: CreateTaskAction, rule: WorkflowRuleEntity
    ) -> None:
        created = await self._task_store.insert_task(
            TaskCreate(
                project_id=task.project_id,
                client_id=task.client_id,
                title=self._render(action.title, task, rule),
                description=action.description,
                status=action.status.value,
                priority=action.priority.value,
                assignees=list(action.assignees),
                created_by=rule.created_by,
            )
        )
        logger.info(
            "Workflow rule %s created task %s from task %s", rule.id, created.id, task.id
        )

    async def _assign_user(
        self, task: TaskEntity, action: AssignUserAction
    ) -> TaskEntity:
        current = list(task.assignees or [])
        if action.email in current:
            return task
        return await self._task_store.update_task(
            task.id, {"assignees": [*current, action.email]}
        )

    async def _change_status(
        self, task: TaskEntity, action: ChangeStatusAction
    ) -> TaskEntity:
        changes: dict[str, Any] = {
            "status": action.status.value,
            "completed_at": utc_now() if action.status == TaskStatus.DONE else None,
        }
        return await self._task_store.update_task(task.id, changes)

    async def _add_comment(
        self, task: TaskEntity, action: AddCommentAction, rule: WorkflowRuleEntity
    ) -> None:
        if self._comment_writer is None:
            logger.info(
                "add_comment skipped for task %s: no comment writer configured", task.id
            )
            return
        await self._comment_writer.add_comment(
            task.id,
            self._render(action.content, task, rule),
            created_by=rule.created_by,
        )
