"""Service interfaces (ports) for the application layer.

Protocols define contracts for collaborators the workflow engine calls
out to (DIP): notification channel, email, comments and templating.
"""

from __future__ import annotations

from typing import Any, Protocol

from app.application.dtos.notification import ChannelConfig
from app.domain.entities.task import TaskEntity


# Notification dispatcher (send_slack action)
class INotificationDispatcher(Protocol):
    """Protocol for the project's chat notification channel."""

    async def get_channel_config(self, project_id: str) -> ChannelConfig | None:
        """Return the channel configured for the project, or None."""

    async def send(self, config: ChannelConfig, message: str) -> None:
        """Post message to the channel. Raises NotificationDeliveryException on failure."""


# Email sender (send_email action)
class IEmailSender(Protocol):
    """Protocol for sending email to a list of recipients."""

    async def send(self, to_emails: list[str], subject: str, body: str) -> None:
        """Send email to the given addresses. No-op or log if not configured."""


# Comment writer (add_comment action)
class ICommentWriter(Protocol):
    """Protocol for leaving a comment on a task."""

    async def add_comment(
        self, task_id: str, content: str, *, created_by: str | None = None
    ) -> Any:
        """Create a comment on the task and return it."""


# Template renderer for action texts
class ITemplateRenderer(Protocol):
    """Protocol for rendering action text templates against a task."""

    def render(
        self, template: str, task: TaskEntity, extra: dict[str, Any] | None = None
    ) -> str:
        """Render template with the task in context."""


# Workflow engine (inbound trigger from task mutations)
class IWorkflowEngine(Protocol):
    """Protocol for workflow evaluation triggered by task events."""

    async def process_task_workflows(
        self,
        project_id: str,
        task: TaskEntity,
        event_type: str,
        old_task: TaskEntity | None = None,
    ) -> None:
        """Evaluate all enabled rules of the project for this event."""
