"""Decides whether a task lifecycle event satisfies a rule's trigger.

Assignee triggers compare list sizes, not membership: swapping one assignee
for another leaves the count unchanged and fires neither trigger.
Due-date triggers ignore the event type; they are meant for the periodic scan.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from app.core.constants import DUE_SOON_WINDOW_HOURS
from app.domain.entities.task import TaskEntity
from app.shared.enums import TaskEventType, TaskStatus, WorkflowTrigger
from app.shared.utils.datetime import ensure_utc, utc_now


def _assignee_delta(task: TaskEntity, old_task: TaskEntity | None) -> int | None:
    if old_task is None:
        return None
    return len(task.assignees or []) - len(old_task.assignees or [])


def _time_until_due(task: TaskEntity, now: datetime) -> timedelta | None:
    due_at = ensure_utc(task.due_at)
    if due_at is None:
        return None
    return due_at - now


def trigger_matches(
    trigger: WorkflowTrigger | str,
    event_type: TaskEventType | str,
    task: TaskEntity,
    old_task: TaskEntity | None = None,
    *,
    now: datetime | None = None,
) -> bool:
    """Return whether the event (with before/after snapshots) fires the trigger.

    Args:
        trigger: Rule trigger; unrecognized values never match.
        event_type: "created", "updated" or "scheduled".
        task: Task state after the event.
        old_task: Task state before the event (updates only).
        now: Reference time for due-date triggers (defaults to current UTC).
    """
    is_update = event_type == TaskEventType.UPDATED

    match trigger:
        case WorkflowTrigger.TASK_CREATED:
            return event_type == TaskEventType.CREATED
        case WorkflowTrigger.TASK_UPDATED:
            return is_update
        case WorkflowTrigger.STATUS_CHANGED:
            old_status = old_task.status if old_task is not None else None
            return is_update and task.status != old_status
        case WorkflowTrigger.ASSIGNEE_ADDED:
            delta = _assignee_delta(task, old_task)
            return is_update and delta is not None and delta > 0
        case WorkflowTrigger.ASSIGNEE_REMOVED:
            delta = _assignee_delta(task, old_task)
            return is_update and delta is not None and delta < 0
        case WorkflowTrigger.TASK_COMPLETED:
            return is_update and task.status == TaskStatus.DONE
        case WorkflowTrigger.DUE_DATE_APPROACHING:
            remaining = _time_until_due(task, now or utc_now())
            return remaining is not None and (
                timedelta(0) < remaining <= timedelta(hours=DUE_SOON_WINDOW_HOURS)
            )
        case WorkflowTrigger.DUE_DATE_PASSED:
            remaining = _time_until_due(task, now or utc_now())
            return remaining is not None and remaining < timedelta(0)
        case _:
            return False
