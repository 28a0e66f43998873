"""Workflow use cases: rule evaluation engine and due-date scan."""

from app.application.use_cases.workflows.scan_due_tasks import (
    DueScanResult,
    ScanDueTasksUseCase,
)
from app.application.use_cases.workflows.workflow_engine import (
    WorkflowEngine,
    build_rule,
)

__all__ = [
    "DueScanResult",
    "ScanDueTasksUseCase",
    "WorkflowEngine",
    "build_rule",
]
