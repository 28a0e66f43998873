"""Evaluates workflow conditions against a task snapshot.

Pure and total: every operator resolves to a bool, unknown operators to False.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from typing import Any

from app.domain.entities.task import TaskEntity
from app.domain.value_objects.workflow import WorkflowCondition
from app.shared.enums import ConditionOperator
from app.shared.utils.datetime import parse_datetime


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _equals(field_value: Any, value: Any) -> bool:
    """Strict equality: booleans only equal booleans; datetimes compare by instant."""
    if isinstance(field_value, bool) or isinstance(value, bool):
        return type(field_value) is type(value) and field_value == value
    if isinstance(field_value, datetime):
        other = parse_datetime(value)
        return other is not None and field_value == other
    return field_value == value


def _contains(field_value: Any, value: Any) -> bool | None:
    """Return membership result, or None when the types are incompatible."""
    if isinstance(field_value, str) and isinstance(value, str):
        return value.lower() in field_value.lower()
    if isinstance(field_value, list) and value is not None:
        return value in field_value
    return None


def _compare(field_value: Any, value: Any) -> int | None:
    """Return -1/0/1 comparing field to value, or None when not comparable."""
    if _is_number(field_value) and _is_number(value):
        left, right = field_value, value
    else:
        if not isinstance(field_value, (str, datetime)) or not isinstance(value, str):
            return None
        left, right = parse_datetime(field_value), parse_datetime(value)
        if left is None or right is None:
            return None
    return (left > right) - (left < right)


def _is_empty(field_value: Any) -> bool:
    return field_value is None or field_value == "" or field_value == []


def evaluate_condition(task: TaskEntity, condition: WorkflowCondition) -> bool:
    """Return whether a single condition holds for the task."""
    field_value = task.field_value(condition.field)
    value = condition.value

    match condition.operator:
        case ConditionOperator.EQUALS:
            return _equals(field_value, value)
        case ConditionOperator.NOT_EQUALS:
            return not _equals(field_value, value)
        case ConditionOperator.CONTAINS:
            return _contains(field_value, value) is True
        case ConditionOperator.NOT_CONTAINS:
            found = _contains(field_value, value)
            return True if found is None else not found
        case ConditionOperator.GREATER_THAN:
            return _compare(field_value, value) == 1
        case ConditionOperator.LESS_THAN:
            return _compare(field_value, value) == -1
        case ConditionOperator.IS_EMPTY:
            return _is_empty(field_value)
        case ConditionOperator.IS_NOT_EMPTY:
            return not _is_empty(field_value)
        case _:
            return False


def evaluate_conditions(
    task: TaskEntity, conditions: Sequence[WorkflowCondition]
) -> bool:
    """Return True iff every condition holds (an empty list always matches)."""
    return all(evaluate_condition(task, condition) for condition in conditions)
