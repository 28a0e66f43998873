"""Domain exceptions for the Taskboard application.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class TaskboardException(Exception):
    """Base exception for all Taskboard application errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON body used by the HTTP exception handler."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(TaskboardException):
    """Raised when input validation fails (e.g. invalid format or range)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class ResourceNotFoundException(TaskboardException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'task', 'workflow').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class SqlNotConfiguredException(TaskboardException):
    """Raised when an operation requires Postgres but the backend is not configured."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )


class WorkflowRuleInvalidException(TaskboardException):
    """Raised when a stored workflow rule cannot be turned into a typed rule."""

    def __init__(self, rule_id: str, reason: str) -> None:
        """Initialize with the rule id and a short reason.

        Args:
            rule_id: Workflow rule that failed to load.
            reason: Human-readable reason (e.g. validation errors).
        """
        super().__init__(
            f"Workflow rule {rule_id} is invalid: {reason}",
            "WORKFLOW_RULE_INVALID",
            {"rule_id": rule_id, "reason": reason},
        )


class NotificationDeliveryException(TaskboardException):
    """Raised when an outbound notification (e.g. Slack message) is rejected or fails."""

    def __init__(self, channel: str, reason: str) -> None:
        """Initialize with channel name and failure reason.

        Args:
            channel: Delivery channel (e.g. 'slack').
            reason: Error reported by the channel or transport.
        """
        super().__init__(
            f"Notification to {channel} failed: {reason}",
            "NOTIFICATION_DELIVERY_FAILED",
            {"channel": channel, "reason": reason},
        )
