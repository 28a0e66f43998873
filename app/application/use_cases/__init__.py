"""Application use cases: one entry point per workflow."""

from app.application.use_cases.workflows import (
    DueScanResult,
    ScanDueTasksUseCase,
    WorkflowEngine,
    build_rule,
)

__all__ = [
    "DueScanResult",
    "ScanDueTasksUseCase",
    "WorkflowEngine",
    "build_rule",
]
