"""Trigger matching for created/updated/scheduled events."""

from datetime import UTC, datetime, timedelta

import pytest

from app.application.services import trigger_matches

NOW = datetime(2025, 3, 1, 12, 0, tzinfo=UTC)


def test_task_created_matches_only_created_event(make_task) -> None:
    task = make_task()
    assert trigger_matches("task_created", "created", task) is True
    assert trigger_matches("task_created", "updated", task, task) is False
    assert trigger_matches("task_created", "scheduled", task) is False


def test_task_updated_matches_any_update(make_task) -> None:
    task = make_task()
    assert trigger_matches("task_updated", "updated", task, task) is True
    assert trigger_matches("task_updated", "created", task) is False


def test_status_changed(make_task) -> None:
    old = make_task(status="todo")
    assert trigger_matches("status_changed", "updated", make_task(status="review"), old) is True
    assert trigger_matches("status_changed", "updated", make_task(status="todo"), old) is False
    assert trigger_matches("status_changed", "created", make_task(status="review")) is False


def test_status_changed_without_previous_snapshot(make_task) -> None:
    """An update without a before-snapshot counts as a change from nothing."""
    assert trigger_matches("status_changed", "updated", make_task(status="todo")) is True


@pytest.mark.parametrize(
    ("before", "after", "added", "removed"),
    [
        ([], ["a@x.io"], True, False),
        (["a@x.io", "b@x.io"], ["a@x.io"], False, True),
        (["a@x.io"], ["b@x.io"], False, False),
        (["a@x.io"], ["a@x.io"], False, False),
    ],
)
def test_assignee_triggers_compare_counts(make_task, before, after, added, removed) -> None:
    old, new = make_task(assignees=before), make_task(assignees=after)
    assert trigger_matches("assignee_added", "updated", new, old) is added
    assert trigger_matches("assignee_removed", "updated", new, old) is removed


def test_assignee_triggers_need_previous_snapshot(make_task) -> None:
    task = make_task(assignees=["a@x.io"])
    assert trigger_matches("assignee_added", "updated", task) is False
    assert trigger_matches("assignee_added", "created", task) is False


def test_task_completed(make_task) -> None:
    old = make_task(status="review")
    assert trigger_matches("task_completed", "updated", make_task(status="done"), old) is True
    assert trigger_matches("task_completed", "updated", make_task(status="review"), old) is False
    assert trigger_matches("task_completed", "created", make_task(status="done")) is False


def test_task_completed_fires_on_any_update_of_done_task(make_task) -> None:
    done = make_task(status="done")
    assert trigger_matches("task_completed", "updated", done, done) is True


@pytest.mark.parametrize(
    ("offset", "approaching", "passed"),
    [
        (timedelta(hours=2), True, False),
        (timedelta(hours=24), True, False),
        (timedelta(hours=25), False, False),
        (timedelta(hours=-1), False, True),
    ],
)
def test_due_date_triggers(make_task, offset, approaching, passed) -> None:
    task = make_task(due_at=NOW + offset)
    assert trigger_matches("due_date_approaching", "scheduled", task, now=NOW) is approaching
    assert trigger_matches("due_date_passed", "scheduled", task, now=NOW) is passed


def test_due_date_triggers_ignore_tasks_without_due_date(make_task) -> None:
    task = make_task(due_at=None)
    assert trigger_matches("due_date_approaching", "scheduled", task, now=NOW) is False
    assert trigger_matches("due_date_passed", "scheduled", task, now=NOW) is False


def test_naive_due_date_is_treated_as_utc(make_task) -> None:
    task = make_task(due_at=datetime(2025, 3, 1, 11, 0))
    assert trigger_matches("due_date_passed", "scheduled", task, now=NOW) is True


def test_unknown_trigger_never_matches(make_task) -> None:
    task = make_task()
    assert trigger_matches("task_archived", "created", task) is False
    assert trigger_matches("task_archived", "updated", task, task) is False
