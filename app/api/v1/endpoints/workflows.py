"""Workflow rule API: thin routes delegating to WorkflowRuleRepository and WorkflowExecutionRepository."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from app.api.v1.dependencies import (
    get_workflow_execution_repo,
    get_workflow_rule_repo,
    get_workflow_rule_repo_for_write,
)
from app.core.limiter import limit_writes
from app.domain.exceptions import ResourceNotFoundException
from app.infrastructure.persistence.repositories import (
    WorkflowExecutionRepository,
    WorkflowRuleRepository,
)
from app.schemas.workflow import (
    WorkflowExecutionResponse,
    WorkflowRuleCreateRequest,
    WorkflowRuleResponse,
    WorkflowRuleUpdate,
)

router = APIRouter()


@router.post("", response_model=WorkflowRuleResponse, status_code=201)
@limit_writes
async def create_workflow_rule(
    request: Request,
    body: WorkflowRuleCreateRequest,
    rule_repo: Annotated[
        WorkflowRuleRepository, Depends(get_workflow_rule_repo_for_write)
    ],
):
    """Create a workflow rule for a project."""
    rule = await rule_repo.create_rule(
        project_id=body.project_id,
        name=body.name,
        trigger=body.trigger.value,
        conditions=[c.model_dump(mode="json") for c in body.conditions],
        actions=[a.to_stored() for a in body.actions],
        description=body.description,
        enabled=body.enabled,
        created_by=body.created_by,
    )
    return WorkflowRuleResponse.model_validate(rule)


@router.get("", response_model=list[WorkflowRuleResponse])
async def list_workflow_rules(
    project_id: str,
    rule_repo: Annotated[WorkflowRuleRepository, Depends(get_workflow_rule_repo)],
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    include_disabled: bool = True,
):
    """List a project's workflow rules in evaluation order (paginated)."""
    rules = await rule_repo.get_by_project(
        project_id,
        skip=skip,
        limit=limit,
        include_disabled=include_disabled,
    )
    return [WorkflowRuleResponse.model_validate(r) for r in rules]


@router.get("/{rule_id}", response_model=WorkflowRuleResponse)
async def get_workflow_rule(
    rule_id: str,
    project_id: str,
    rule_repo: Annotated[WorkflowRuleRepository, Depends(get_workflow_rule_repo)],
):
    """Get workflow rule by id (project-scoped)."""
    rule = await rule_repo.get_by_id_and_project(rule_id, project_id)
    if not rule:
        raise ResourceNotFoundException("workflow_rule", rule_id)
    return WorkflowRuleResponse.model_validate(rule)


@router.put("/{rule_id}", response_model=WorkflowRuleResponse)
@limit_writes
async def update_workflow_rule(
    request: Request,
    rule_id: str,
    project_id: str,
    body: WorkflowRuleUpdate,
    rule_repo: Annotated[
        WorkflowRuleRepository, Depends(get_workflow_rule_repo_for_write)
    ],
):
    """Update workflow rule (project-scoped, partial)."""
    rule = await rule_repo.get_by_id_and_project(rule_id, project_id)
    if not rule:
        raise ResourceNotFoundException("workflow_rule", rule_id)
    changes = body.model_dump(exclude_unset=True, exclude={"conditions", "actions"})
    if changes.get("trigger") is not None:
        changes["trigger"] = body.trigger.value
    changes = {k: v for k, v in changes.items() if v is not None or k == "description"}
    if body.conditions is not None:
        changes["conditions"] = [c.model_dump(mode="json") for c in body.conditions]
    if body.actions is not None:
        changes["actions"] = [a.to_stored() for a in body.actions]
    updated = await rule_repo.update_fields(rule, changes)
    return WorkflowRuleResponse.model_validate(updated)


@router.delete("/{rule_id}", status_code=204)
@limit_writes
async def delete_workflow_rule(
    request: Request,
    rule_id: str,
    project_id: str,
    rule_repo: Annotated[
        WorkflowRuleRepository, Depends(get_workflow_rule_repo_for_write)
    ],
):
    """Delete workflow rule and its execution history (project-scoped)."""
    rule = await rule_repo.get_by_id_and_project(rule_id, project_id)
    if not rule:
        raise ResourceNotFoundException("workflow_rule", rule_id)
    await rule_repo.delete(rule)


@router.get(
    "/{rule_id}/executions",
    response_model=list[WorkflowExecutionResponse],
)
async def get_workflow_rule_executions(
    rule_id: str,
    project_id: str,
    rule_repo: Annotated[WorkflowRuleRepository, Depends(get_workflow_rule_repo)],
    execution_repo: Annotated[
        WorkflowExecutionRepository, Depends(get_workflow_execution_repo)
    ],
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
):
    """Get execution history for a workflow rule, newest first."""
    rule = await rule_repo.get_by_id_and_project(rule_id, project_id)
    if not rule:
        raise ResourceNotFoundException("workflow_rule", rule_id)
    executions = await execution_repo.get_by_rule(rule_id, skip=skip, limit=limit)
    return [WorkflowExecutionResponse.model_validate(e) for e in executions]
