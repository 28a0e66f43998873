"""Workflow value objects: conditions and typed actions.

Actions are a tagged union keyed on ``type``; each variant carries its own
validated parameters. Stored rows use the ``{"type": ..., "params": {...}}``
shape, which parse_action() flattens into the matching variant.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from app.shared.enums import (
    ConditionField,
    ConditionOperator,
    TaskPriority,
    TaskStatus,
    WorkflowActionType,
)
from app.shared.utils.datetime import parse_datetime

ConditionValue = bool | int | float | str | None


class WorkflowCondition(BaseModel):
    """A single predicate on a task field. Unknown operators are kept and fail closed."""

    model_config = ConfigDict(frozen=True)

    field: ConditionField
    operator: ConditionOperator | str
    value: ConditionValue = None

    @field_validator("operator", mode="before")
    @classmethod
    def _coerce_operator(cls, v: Any) -> Any:
        if isinstance(v, str) and v in ConditionOperator.values():
            return ConditionOperator(v)
        return v


class _Action(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class SendEmailAction(_Action):
    """Send an email through the configured mail collaborator."""

    type: Literal["send_email"] = WorkflowActionType.SEND_EMAIL.value
    to: list[str] = Field(default_factory=list)
    subject: str = "Task update: {{ task.title }}"
    body: str = ""

    @field_validator("to", mode="before")
    @classmethod
    def _split_recipients(cls, v: Any) -> Any:
        if isinstance(v, str):
            return [part.strip() for part in v.split(",") if part.strip()]
        return v


class SendSlackAction(_Action):
    """Post a message to the project's notification channel."""

    type: Literal["send_slack"] = WorkflowActionType.SEND_SLACK.value
    message: str | None = None


class CreateTaskAction(_Action):
    """Create a derived task in the same project."""

    type: Literal["create_task"] = WorkflowActionType.CREATE_TASK.value
    title: str = Field(..., min_length=1, max_length=500)
    description: str | None = None
    status: TaskStatus = TaskStatus.TODO
    priority: TaskPriority = TaskPriority.MEDIUM
    assignees: list[str] = Field(default_factory=list)


class UpdateTaskAction(_Action):
    """Patch the task; only the fields given are written."""

    type: Literal["update_task"] = WorkflowActionType.UPDATE_TASK.value
    title: str | None = Field(default=None, min_length=1, max_length=500)
    description: str | None = None
    status: TaskStatus | None = None
    assignees: list[str] | None = None

    def changes(self) -> dict[str, Any]:
        """Return the task fields this action writes."""
        return self.model_dump(exclude={"type"}, exclude_none=True, mode="json")


class AssignUserAction(_Action):
    """Add a user to the task's assignees (no duplicates)."""

    type: Literal["assign_user"] = WorkflowActionType.ASSIGN_USER.value
    email: str = Field(..., min_length=1)


class SetDueDateAction(_Action):
    """Overwrite the task's due timestamp."""

    type: Literal["set_due_date"] = WorkflowActionType.SET_DUE_DATE.value
    due_date: datetime

    @field_validator("due_date", mode="before")
    @classmethod
    def _parse_due_date(cls, v: Any) -> Any:
        parsed = parse_datetime(v)
        if parsed is None:
            raise ValueError("due_date must be an ISO-8601 date or timestamp")
        return parsed


class ChangeStatusAction(_Action):
    """Move the task to another stage."""

    type: Literal["change_status"] = WorkflowActionType.CHANGE_STATUS.value
    status: TaskStatus


class AddCommentAction(_Action):
    """Leave a comment on the task."""

    type: Literal["add_comment"] = WorkflowActionType.ADD_COMMENT.value
    content: str = Field(..., min_length=1)


class UnknownAction(_Action):
    """Action whose type this service does not know; skipped at execution."""

    type: str
    params: dict[str, Any] = Field(default_factory=dict)


KnownAction = Annotated[
    SendEmailAction
    | SendSlackAction
    | CreateTaskAction
    | UpdateTaskAction
    | AssignUserAction
    | SetDueDateAction
    | ChangeStatusAction
    | AddCommentAction,
    Field(discriminator="type"),
]

WorkflowAction = (
    SendEmailAction
    | SendSlackAction
    | CreateTaskAction
    | UpdateTaskAction
    | AssignUserAction
    | SetDueDateAction
    | ChangeStatusAction
    | AddCommentAction
    | UnknownAction
)

_known_action_adapter: TypeAdapter[Any] = TypeAdapter(KnownAction)


def parse_action(raw: dict[str, Any]) -> WorkflowAction:
    """Build a typed action from a stored ``{"type", "params"}`` mapping.

    Raises:
        pydantic.ValidationError: When a known action type has missing or invalid params.
    """
    action_type = raw.get("type")
    params = raw.get("params") or {}
    if action_type not in WorkflowActionType.values():
        return UnknownAction(type=str(action_type), params=dict(params))
    return _known_action_adapter.validate_python({**params, "type": action_type})


def parse_condition(raw: dict[str, Any]) -> WorkflowCondition:
    """Build a condition from a stored mapping (raises ValidationError on unknown field)."""
    return WorkflowCondition.model_validate(raw)
