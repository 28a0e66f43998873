"""Workflow engine: evaluate a project's rules for a task event (implements IWorkflowEngine).

Per rule: trigger match -> condition match -> actions in order -> one audit
record. A rule that does not match is skipped silently. Errors raised by an
action stop that rule only; errors outside action execution (bad rule data,
audit write failure) are logged per rule and never reach the caller.
"""

from __future__ import annotations

from pydantic import ValidationError

from app.application.dtos.workflow import (
    WorkflowExecutionCreate,
    WorkflowOutcome,
    WorkflowRuleResult,
)
from app.application.interfaces.repositories import ITaskStore
from app.application.services.workflow_action_executor import WorkflowActionExecutor
from app.application.services.workflow_condition_evaluator import evaluate_conditions
from app.application.services.workflow_trigger_matcher import trigger_matches
from app.domain.entities.task import TaskEntity
from app.domain.entities.workflow import WorkflowRuleEntity
from app.domain.exceptions import WorkflowRuleInvalidException
from app.domain.value_objects.workflow import parse_action, parse_condition
from app.shared.enums import TaskEventType, WorkflowTrigger
from app.shared.telemetry.logging import get_logger
from app.shared.telemetry.tracing import add_span_attributes, set_span_error, traced
from app.shared.utils.datetime import utc_now

logger = get_logger(__name__)


def build_rule(record: WorkflowRuleResult) -> WorkflowRuleEntity:
    """Turn a stored rule into a typed rule.

    Raises:
        WorkflowRuleInvalidException: If a condition field or action params are invalid.
    """
    try:
        conditions = [parse_condition(c) for c in record.conditions or []]
        actions = [parse_action(a) for a in record.actions or []]
    except (ValidationError, AttributeError, TypeError) as e:
        raise WorkflowRuleInvalidException(record.id, str(e)) from e
    trigger: WorkflowTrigger | str = (
        WorkflowTrigger(record.trigger)
        if record.trigger in WorkflowTrigger.values()
        else record.trigger
    )
    return WorkflowRuleEntity(
        id=record.id,
        project_id=record.project_id,
        name=record.name,
        description=record.description,
        enabled=record.enabled,
        trigger=trigger,
        conditions=conditions,
        actions=actions,
        created_by=record.created_by,
        created_at=record.created_at,
        updated_at=record.updated_at,
    )


class WorkflowEngine:
    """Runs workflow rules for task events against an injected task store."""

    def __init__(
        self,
        task_store: ITaskStore,
        action_executor: WorkflowActionExecutor,
    ) -> None:
        self._task_store = task_store
        self._action_executor = action_executor

    async def execute_workflow(
        self,
        rule: WorkflowRuleEntity,
        task: TaskEntity,
        event_type: TaskEventType | str,
        old_task: TaskEntity | None = None,
    ) -> WorkflowOutcome:
        """Evaluate one rule for one event and write its audit record if it ran."""
        if not rule.enabled:
            return WorkflowOutcome(success=True, actions_executed=0)
        if not trigger_matches(rule.trigger, event_type, task, old_task):
            return WorkflowOutcome(success=True, actions_executed=0)
        if not evaluate_conditions(task, rule.conditions):
            return WorkflowOutcome(success=True, actions_executed=0)

        actions_executed = 0
        error: str | None = None
        current = task
        for action in rule.actions:
            try:
                current = await self._action_executor.execute(current, action, rule)
            except Exception as e:
                logger.warning(
                    "Workflow rule %s action %r failed on task %s after %d action(s): %s",
                    rule.id,
                    action.type,
                    task.id,
                    actions_executed,
                    e,
                )
                set_span_error(e)
                error = str(e) or e.__class__.__name__
                break
            actions_executed += 1

        outcome = WorkflowOutcome(
            success=error is None,
            actions_executed=actions_executed,
            error=error,
        )
        await self._task_store.append_execution_log(
            WorkflowExecutionCreate(
                workflow_rule_id=rule.id,
                task_id=task.id,
                executed_at=utc_now(),
                success=outcome.success,
                actions_executed=outcome.actions_executed,
                error_message=outcome.error,
            )
        )
        add_span_attributes(
            rule_id=rule.id,
            actions_executed=actions_executed,
            success=outcome.success,
        )
        logger.info(
            "Workflow rule %s ran on task %s: success=%s actions_executed=%d",
            rule.id,
            task.id,
            outcome.success,
            actions_executed,
        )
        return outcome

    @traced("workflow.process_task_workflows")
    async def process_task_workflows(
        self,
        project_id: str,
        task: TaskEntity,
        event_type: TaskEventType | str,
        old_task: TaskEntity | None = None,
    ) -> None:
        """Evaluate every enabled rule of the project, one after another.

        Never raises: a failing rule is logged and the remaining rules still run.
        """
        try:
            records = await self._task_store.list_enabled_rules(project_id)
        except Exception:
            logger.exception(
                "Failed to load workflow rules (project_id=%s, task_id=%s)",
                project_id,
                task.id,
            )
            return

        for record in records:
            try:
                if not record.enabled:
                    continue
                rule = build_rule(record)
                await self.execute_workflow(rule, task, event_type, old_task)
            except Exception:
                logger.exception(
                    "Workflow rule %s failed (project_id=%s, task_id=%s, event_type=%s)",
                    record.id,
                    project_id,
                    task.id,
                    event_type,
                )
