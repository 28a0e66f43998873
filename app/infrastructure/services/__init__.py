"""Infrastructure services: workflow collaborators and runner."""

from app.infrastructure.services.workflow_notification_service import (
    LogOnlyEmailSender,
)
from app.infrastructure.services.workflow_runner import (
    WorkflowRunner,
    build_workflow_engine,
)
from app.infrastructure.services.workflow_template_renderer import (
    WorkflowTemplateRenderer,
)

__all__ = [
    "LogOnlyEmailSender",
    "WorkflowRunner",
    "WorkflowTemplateRenderer",
    "build_workflow_engine",
]
