"""Persistence models: ORM entities and mixins."""

from app.infrastructure.persistence.models.comment import Comment
from app.infrastructure.persistence.models.mixins import (
    CuidMixin,
    ProjectMixin,
    ProjectScopedModel,
    TimestampMixin,
)
from app.infrastructure.persistence.models.project import Project
from app.infrastructure.persistence.models.slack_integration import SlackIntegration
from app.infrastructure.persistence.models.task import Task
from app.infrastructure.persistence.models.workflow import (
    WorkflowExecution,
    WorkflowRule,
)

__all__ = [
    "Comment",
    "Project",
    "SlackIntegration",
    "Task",
    "WorkflowExecution",
    "WorkflowRule",
    "CuidMixin",
    "ProjectMixin",
    "TimestampMixin",
    "ProjectScopedModel",
]
