"""Domain value objects: workflow conditions and typed actions."""

from app.domain.value_objects.workflow import (
    AddCommentAction,
    AssignUserAction,
    ChangeStatusAction,
    CreateTaskAction,
    SendEmailAction,
    SendSlackAction,
    SetDueDateAction,
    UnknownAction,
    UpdateTaskAction,
    WorkflowAction,
    WorkflowCondition,
    parse_action,
    parse_condition,
)

__all__ = [
    "AddCommentAction",
    "AssignUserAction",
    "ChangeStatusAction",
    "CreateTaskAction",
    "SendEmailAction",
    "SendSlackAction",
    "SetDueDateAction",
    "UnknownAction",
    "UpdateTaskAction",
    "WorkflowAction",
    "WorkflowCondition",
    "parse_action",
    "parse_condition",
]
