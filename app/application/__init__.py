"""Application layer: DTOs, interfaces, workflow services and use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (task store, Slack, email, comments).
"""

from app.application.interfaces import (
    ICommentWriter,
    IDueTaskRepository,
    IEmailSender,
    INotificationDispatcher,
    ITaskStore,
    ITemplateRenderer,
    IWorkflowEngine,
)

__all__ = [
    "ICommentWriter",
    "IDueTaskRepository",
    "IEmailSender",
    "INotificationDispatcher",
    "ITaskStore",
    "ITemplateRenderer",
    "IWorkflowEngine",
]
