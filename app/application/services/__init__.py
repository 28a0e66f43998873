"""Application services: workflow condition evaluation, trigger matching, action execution."""

from app.application.services.workflow_action_executor import WorkflowActionExecutor
from app.application.services.workflow_condition_evaluator import (
    evaluate_condition,
    evaluate_conditions,
)
from app.application.services.workflow_trigger_matcher import trigger_matches

__all__ = [
    "WorkflowActionExecutor",
    "evaluate_condition",
    "evaluate_conditions",
    "trigger_matches",
]
