"""Persistence repositories. Re-exports for dependency injection."""

from app.infrastructure.persistence.repositories.base import BaseRepository
from app.infrastructure.persistence.repositories.comment_repo import CommentRepository
from app.infrastructure.persistence.repositories.slack_integration_repo import (
    SlackIntegrationRepository,
)
from app.infrastructure.persistence.repositories.task_repo import TaskRepository
from app.infrastructure.persistence.repositories.task_store import (
    SqlDueTaskRepository,
    SqlTaskStore,
)
from app.infrastructure.persistence.repositories.workflow_repo import (
    WorkflowExecutionRepository,
    WorkflowRuleRepository,
)

__all__ = [
    "BaseRepository",
    "CommentRepository",
    "SlackIntegrationRepository",
    "SqlDueTaskRepository",
    "SqlTaskStore",
    "TaskRepository",
    "WorkflowExecutionRepository",
    "WorkflowRuleRepository",
]
