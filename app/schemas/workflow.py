"""Workflow rule API schemas."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from app.domain.value_objects.workflow import WorkflowCondition, parse_action
from app.shared.enums import ConditionOperator, WorkflowActionType, WorkflowTrigger


class WorkflowActionSchema(BaseModel):
    """Single workflow action: type plus its parameters."""

    type: WorkflowActionType = Field(..., description="Action type")
    params: dict[str, Any] = Field(default_factory=dict)

    def to_stored(self) -> dict[str, Any]:
        """Return the ``{"type", "params"}`` shape stored on the rule row.

        Raises:
            ValueError: If the params are invalid for the action type.
        """
        stored = {"type": self.type.value, "params": self.params}
        try:
            parse_action(stored)
        except ValidationError as e:
            raise ValueError(
                f"Invalid params for action {self.type.value!r}: {e.errors(include_url=False)}"
            ) from e
        return stored


def _stored_actions(actions: list[WorkflowActionSchema]) -> list[WorkflowActionSchema]:
    for action in actions:
        action.to_stored()
    return actions


def _known_operators(conditions: list[WorkflowCondition]) -> list[WorkflowCondition]:
    for condition in conditions:
        if not isinstance(condition.operator, ConditionOperator):
            raise ValueError(f"Unknown condition operator: {condition.operator!r}")
    return conditions


class WorkflowRuleCreateRequest(BaseModel):
    """Request body for creating a workflow rule."""

    project_id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=255)
    trigger: WorkflowTrigger
    description: str | None = None
    enabled: bool = True
    conditions: list[WorkflowCondition] = Field(default_factory=list)
    actions: list[WorkflowActionSchema] = Field(..., min_length=1)
    created_by: str | None = None

    @field_validator("conditions")
    @classmethod
    def _validate_conditions(cls, v: list[WorkflowCondition]) -> list[WorkflowCondition]:
        return _known_operators(v)

    @field_validator("actions")
    @classmethod
    def _validate_actions(cls, v: list[WorkflowActionSchema]) -> list[WorkflowActionSchema]:
        return _stored_actions(v)


class WorkflowRuleUpdate(BaseModel):
    """Request body for updating a workflow rule (partial)."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    enabled: bool | None = None
    trigger: WorkflowTrigger | None = None
    conditions: list[WorkflowCondition] | None = None
    actions: list[WorkflowActionSchema] | None = Field(default=None, min_length=1)

    @field_validator("conditions")
    @classmethod
    def _validate_conditions(
        cls, v: list[WorkflowCondition] | None
    ) -> list[WorkflowCondition] | None:
        return _known_operators(v) if v is not None else v

    @field_validator("actions")
    @classmethod
    def _validate_actions(
        cls, v: list[WorkflowActionSchema] | None
    ) -> list[WorkflowActionSchema] | None:
        return _stored_actions(v) if v is not None else v


class WorkflowRuleResponse(BaseModel):
    """Workflow rule response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    project_id: str
    name: str
    description: str | None
    enabled: bool
    trigger: str
    conditions: list[dict[str, Any]]
    actions: list[dict[str, Any]]
    created_by: str | None
    created_at: datetime
    updated_at: datetime


class WorkflowExecutionResponse(BaseModel):
    """Workflow execution audit record response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    workflow_rule_id: str
    task_id: str
    executed_at: datetime
    success: bool
    actions_executed: int
    error_message: str | None
