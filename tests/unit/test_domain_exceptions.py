"""Tests for domain exceptions (error_code, message, details)."""

from app.domain.exceptions import (
    NotificationDeliveryException,
    ResourceNotFoundException,
    SqlNotConfiguredException,
    TaskboardException,
    ValidationException,
    WorkflowRuleInvalidException,
)


def test_taskboard_exception_default_error_code() -> None:
    """Base TaskboardException uses class name as error_code when not provided."""
    exc = TaskboardException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "TaskboardException"
    assert exc.details == {}


def test_taskboard_exception_custom_error_code_and_details() -> None:
    """TaskboardException accepts custom error_code and details."""
    exc = TaskboardException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.to_dict() == {
        "error": "CUSTOM",
        "message": "Oops",
        "details": {"key": "value"},
    }


def test_validation_exception() -> None:
    """ValidationException sets VALIDATION_ERROR and optional field in details."""
    exc = ValidationException("Invalid format", field="due_at")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {"field": "due_at"}
    assert ValidationException("Invalid").details == {}


def test_resource_not_found_exception() -> None:
    exc = ResourceNotFoundException("task", "t1")
    assert exc.message == "task not found: t1"
    assert exc.error_code == "RESOURCE_NOT_FOUND"
    assert exc.details == {"resource_type": "task", "resource_id": "t1"}


def test_sql_not_configured_exception() -> None:
    exc = SqlNotConfiguredException()
    assert exc.error_code == "SERVICE_UNAVAILABLE"


def test_workflow_rule_invalid_exception() -> None:
    exc = WorkflowRuleInvalidException("r1", "missing title")
    assert exc.error_code == "WORKFLOW_RULE_INVALID"
    assert exc.details == {"rule_id": "r1", "reason": "missing title"}
    assert "r1" in str(exc)


def test_notification_delivery_exception() -> None:
    exc = NotificationDeliveryException("slack", "channel_not_found")
    assert exc.error_code == "NOTIFICATION_DELIVERY_FAILED"
    assert exc.message == "Notification to slack failed: channel_not_found"
    assert isinstance(exc, TaskboardException)
