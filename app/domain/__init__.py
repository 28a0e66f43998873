"""Domain layer: entities, value objects, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.entities import TaskEntity, WorkflowRuleEntity
from app.domain.exceptions import (
    NotificationDeliveryException,
    ResourceNotFoundException,
    TaskboardException,
    ValidationException,
    WorkflowRuleInvalidException,
)

__all__ = [
    # Entities
    "TaskEntity",
    "WorkflowRuleEntity",
    # Exceptions
    "NotificationDeliveryException",
    "ResourceNotFoundException",
    "TaskboardException",
    "ValidationException",
    "WorkflowRuleInvalidException",
]
