"""Application interfaces (ports): repository and service protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from app.infrastructure or app.api.
"""

from app.application.interfaces.repositories import IDueTaskRepository, ITaskStore
from app.application.interfaces.services import (
    ICommentWriter,
    IEmailSender,
    INotificationDispatcher,
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
