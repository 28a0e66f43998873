"""Application DTOs: plain dataclasses passed between layers (no ORM)."""

from app.application.dtos.notification import ChannelConfig
from app.application.dtos.task import TaskCreate
from app.application.dtos.workflow import (
    WorkflowExecutionCreate,
    WorkflowExecutionResult,
    WorkflowOutcome,
    WorkflowRuleResult,
)

__all__ = [
    "ChannelConfig",
    "TaskCreate",
    "WorkflowExecutionCreate",
    "WorkflowExecutionResult",
    "WorkflowOutcome",
    "WorkflowRuleResult",
]
