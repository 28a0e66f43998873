"""DTOs for workflow rules, execution records and outcomes."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class WorkflowRuleResult:
    """Workflow rule as stored: conditions and actions are raw JSON."""

    id: str
    project_id: str
    name: str
    trigger: str
    enabled: bool
    description: str | None = None
    conditions: list[dict[str, Any]] = field(default_factory=list)
    actions: list[dict[str, Any]] = field(default_factory=list)
    created_by: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class WorkflowExecutionCreate:
    """Audit record appended once per rule that reached action execution."""

    workflow_rule_id: str
    task_id: str
    executed_at: datetime
    success: bool
    actions_executed: int
    error_message: str | None = None


@dataclass(frozen=True)
class WorkflowExecutionResult:
    """Stored workflow execution record."""

    id: str
    workflow_rule_id: str
    task_id: str
    executed_at: datetime
    success: bool
    actions_executed: int
    error_message: str | None


@dataclass(frozen=True)
class WorkflowOutcome:
    """Result of evaluating one rule against one event."""

    success: bool
    actions_executed: int
    error: str | None = None
