"""Typed workflow actions and conditions built from stored JSON."""

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from app.domain.value_objects import (
    AssignUserAction,
    ChangeStatusAction,
    CreateTaskAction,
    SendEmailAction,
    SendSlackAction,
    SetDueDateAction,
    UnknownAction,
    UpdateTaskAction,
    parse_action,
    parse_condition,
)
from app.shared.enums import ConditionField, ConditionOperator, TaskPriority, TaskStatus


def test_parse_change_status_action() -> None:
    action = parse_action({"type": "change_status", "params": {"status": "done"}})
    assert isinstance(action, ChangeStatusAction)
    assert action.status == TaskStatus.DONE


def test_parse_create_task_action_applies_defaults() -> None:
    action = parse_action({"type": "create_task", "params": {"title": "Follow up"}})
    assert isinstance(action, CreateTaskAction)
    assert action.status == TaskStatus.TODO
    assert action.priority == TaskPriority.MEDIUM
    assert action.assignees == []


def test_parse_create_task_without_title_raises() -> None:
    with pytest.raises(ValidationError):
        parse_action({"type": "create_task", "params": {}})


def test_parse_change_status_with_unknown_status_raises() -> None:
    with pytest.raises(ValidationError):
        parse_action({"type": "change_status", "params": {"status": "archived"}})


def test_parse_send_email_splits_comma_separated_recipients() -> None:
    action = parse_action(
        {"type": "send_email", "params": {"to": "a@x.io, b@x.io,", "body": "hi"}}
    )
    assert isinstance(action, SendEmailAction)
    assert action.to == ["a@x.io", "b@x.io"]


def test_parse_send_slack_without_params() -> None:
    action = parse_action({"type": "send_slack"})
    assert isinstance(action, SendSlackAction)
    assert action.message is None


def test_parse_set_due_date_accepts_date_only() -> None:
    action = parse_action({"type": "set_due_date", "params": {"due_date": "2025-04-01"}})
    assert isinstance(action, SetDueDateAction)
    assert action.due_date == datetime(2025, 4, 1, tzinfo=UTC)


def test_parse_set_due_date_rejects_garbage() -> None:
    with pytest.raises(ValidationError):
        parse_action({"type": "set_due_date", "params": {"due_date": "next week"}})


def test_parse_assign_user_requires_email() -> None:
    assert isinstance(
        parse_action({"type": "assign_user", "params": {"email": "a@x.io"}}),
        AssignUserAction,
    )
    with pytest.raises(ValidationError):
        parse_action({"type": "assign_user", "params": {}})


def test_update_task_changes_only_include_given_fields() -> None:
    action = parse_action(
        {"type": "update_task", "params": {"status": "review", "title": "Renamed"}}
    )
    assert isinstance(action, UpdateTaskAction)
    assert action.changes() == {"status": "review", "title": "Renamed"}


def test_unknown_action_type_is_kept() -> None:
    action = parse_action({"type": "archive_task", "params": {"reason": "stale"}})
    assert isinstance(action, UnknownAction)
    assert action.type == "archive_task"
    assert action.params == {"reason": "stale"}


def test_parse_condition_with_known_operator() -> None:
    condition = parse_condition({"field": "priority", "operator": "equals", "value": "high"})
    assert condition.field == ConditionField.PRIORITY
    assert condition.operator == ConditionOperator.EQUALS
    assert condition.value == "high"


def test_parse_condition_keeps_unknown_operator() -> None:
    condition = parse_condition({"field": "title", "operator": "starts_with", "value": "x"})
    assert condition.operator == "starts_with"
    assert not isinstance(condition.operator, ConditionOperator)


def test_parse_condition_with_unknown_field_raises() -> None:
    with pytest.raises(ValidationError):
        parse_condition({"field": "estimate", "operator": "equals", "value": 3})
