"""WorkflowActionExecutor unit tests with mocked store and collaborators."""

from dataclasses import replace
from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

from app.application.dtos.notification import ChannelConfig
from app.application.services import WorkflowActionExecutor
from app.domain.entities.workflow import WorkflowRuleEntity
from app.domain.exceptions import NotificationDeliveryException
from app.domain.value_objects import (
    AddCommentAction,
    AssignUserAction,
    ChangeStatusAction,
    CreateTaskAction,
    SendEmailAction,
    SendSlackAction,
    SetDueDateAction,
    UnknownAction,
    UpdateTaskAction,
)
from app.infrastructure.services.workflow_template_renderer import (
    WorkflowTemplateRenderer,
)

RULE = WorkflowRuleEntity(
    id="rule1",
    project_id="proj1",
    name="Escalate",
    trigger="task_updated",
    created_by="owner@x.io",
)


@pytest.fixture
def task_store():
    """Store whose update_task applies the changes to the given snapshot."""
    store = AsyncMock()
    store.insert_task = AsyncMock(side_effect=lambda data: MagicMock(id="new1"))
    return store


def _applying_update(store, task):
    store.update_task = AsyncMock(side_effect=lambda task_id, changes: replace(task, **changes))


async def test_change_status_to_done_sets_completed_at(task_store, make_task) -> None:
    task = make_task(status="review")
    _applying_update(task_store, task)
    executor = WorkflowActionExecutor(task_store)

    result = await executor.execute(task, ChangeStatusAction(status="done"), RULE)

    assert result.status == "done"
    assert result.completed_at is not None
    changes = task_store.update_task.await_args.args[1]
    assert changes["status"] == "done"


async def test_change_status_out_of_done_clears_completed_at(task_store, make_task) -> None:
    task = make_task(status="done", completed_at=datetime(2025, 1, 1, tzinfo=UTC))
    _applying_update(task_store, task)
    executor = WorkflowActionExecutor(task_store)

    result = await executor.execute(task, ChangeStatusAction(status="todo"), RULE)

    assert result.status == "todo"
    assert result.completed_at is None


async def test_assign_user_appends_once(task_store, make_task) -> None:
    task = make_task(assignees=["a@x.io"])
    _applying_update(task_store, task)
    executor = WorkflowActionExecutor(task_store)

    result = await executor.execute(task, AssignUserAction(email="b@x.io"), RULE)
    assert result.assignees == ["a@x.io", "b@x.io"]

    task_store.update_task.reset_mock()
    same = await executor.execute(task, AssignUserAction(email="a@x.io"), RULE)
    assert same is task
    task_store.update_task.assert_not_awaited()


async def test_set_due_date_writes_due_at(task_store, make_task) -> None:
    task = make_task()
    _applying_update(task_store, task)
    due = datetime(2025, 4, 1, tzinfo=UTC)

    result = await WorkflowActionExecutor(task_store).execute(
        task, SetDueDateAction(due_date=due), RULE
    )

    task_store.update_task.assert_awaited_once_with("task1", {"due_at": due})
    assert result.due_at == due


async def test_update_task_without_fields_does_nothing(task_store, make_task) -> None:
    task = make_task()
    result = await WorkflowActionExecutor(task_store).execute(
        task, UpdateTaskAction(), RULE
    )
    assert result is task
    task_store.update_task.assert_not_awaited()


async def test_create_task_inherits_project_and_client(task_store, make_task) -> None:
    task = make_task(client_id="client9")
    renderer = WorkflowTemplateRenderer()
    executor = WorkflowActionExecutor(task_store, template_renderer=renderer)

    result = await executor.execute(
        task,
        CreateTaskAction(title="Review: {{ task.title }}", priority="high"),
        RULE,
    )

    assert result is task
    data = task_store.insert_task.await_args.args[0]
    assert data.project_id == "proj1"
    assert data.client_id == "client9"
    assert data.title == "Review: Write release notes"
    assert data.priority == "high"
    assert data.created_by == "owner@x.io"


async def test_send_slack_posts_rendered_message(task_store, make_task) -> None:
    dispatcher = AsyncMock()
    config = ChannelConfig(access_token="xoxb-1", channel_id="C1")
    dispatcher.get_channel_config = AsyncMock(return_value=config)
    executor = WorkflowActionExecutor(
        task_store,
        notification_dispatcher=dispatcher,
        template_renderer=WorkflowTemplateRenderer(),
    )

    await executor.execute(
        make_task(), SendSlackAction(message="{{ rule.name }}: {{ task.title }}"), RULE
    )

    dispatcher.send.assert_awaited_once_with(config, "Escalate: Write release notes")


async def test_send_slack_defaults_to_task_title(task_store, make_task) -> None:
    dispatcher = AsyncMock()
    dispatcher.get_channel_config = AsyncMock(
        return_value=ChannelConfig(access_token="t", channel_id="C1")
    )
    await WorkflowActionExecutor(task_store, notification_dispatcher=dispatcher).execute(
        make_task(), SendSlackAction(), RULE
    )
    assert dispatcher.send.await_args.args[1] == "Write release notes"


async def test_send_slack_without_channel_is_skipped(task_store, make_task) -> None:
    dispatcher = AsyncMock()
    dispatcher.get_channel_config = AsyncMock(return_value=None)
    await WorkflowActionExecutor(task_store, notification_dispatcher=dispatcher).execute(
        make_task(), SendSlackAction(message="hi"), RULE
    )
    dispatcher.send.assert_not_awaited()


async def test_send_slack_delivery_error_propagates(task_store, make_task) -> None:
    dispatcher = AsyncMock()
    dispatcher.get_channel_config = AsyncMock(
        return_value=ChannelConfig(access_token="t", channel_id="C1")
    )
    dispatcher.send = AsyncMock(
        side_effect=NotificationDeliveryException("slack", "channel_not_found")
    )
    executor = WorkflowActionExecutor(task_store, notification_dispatcher=dispatcher)

    with pytest.raises(NotificationDeliveryException):
        await executor.execute(make_task(), SendSlackAction(message="hi"), RULE)


async def test_send_email_renders_subject_and_body(task_store, make_task) -> None:
    sender = AsyncMock()
    executor = WorkflowActionExecutor(
        task_store, email_sender=sender, template_renderer=WorkflowTemplateRenderer()
    )

    await executor.execute(
        make_task(),
        SendEmailAction(to=["a@x.io"], body="Status: {{ task.status }}"),
        RULE,
    )

    sender.send.assert_awaited_once_with(
        ["a@x.io"], "Task update: Write release notes", "Status: todo"
    )


async def test_add_comment_uses_rule_owner(task_store, make_task) -> None:
    writer = AsyncMock()
    await WorkflowActionExecutor(task_store, comment_writer=writer).execute(
        make_task(), AddCommentAction(content="Escalated"), RULE
    )
    writer.add_comment.assert_awaited_once_with(
        "task1", "Escalated", created_by="owner@x.io"
    )


async def test_unknown_action_is_skipped(task_store, make_task) -> None:
    task = make_task()
    result = await WorkflowActionExecutor(task_store).execute(
        task, UnknownAction(type="archive_task"), RULE
    )
    assert result is task
    task_store.update_task.assert_not_awaited()
    task_store.insert_task.assert_not_awaited()
