"""Shared utilities: enums, telemetry, and cross-cutting helpers.

Used by domain, application, and infrastructure. No business logic.
"""

from app.shared.enums import (
    ConditionField,
    ConditionOperator,
    TaskEventType,
    TaskPriority,
    TaskStatus,
    WorkflowActionType,
    WorkflowTrigger,
)
from app.shared.utils import ensure_utc, generate_cuid, parse_datetime, utc_now

__all__ = [
    "ConditionField",
    "ConditionOperator",
    "TaskEventType",
    "TaskPriority",
    "TaskStatus",
    "WorkflowActionType",
    "WorkflowTrigger",
    "generate_cuid",
    "utc_now",
    "ensure_utc",
    "parse_datetime",
]
