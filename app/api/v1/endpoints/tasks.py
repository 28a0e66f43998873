"""Task API: create, read and update tasks; schedules the workflow pass.

Each write commits first and then queues a background workflow run with the
committed snapshot (and the previous one for updates). Rule failures are
logged by the engine and never change the response.
"""

from typing import Annotated, Any

from fastapi import APIRouter, BackgroundTasks, Depends, Query, Request

from app.api.v1.dependencies import get_task_repo, get_workflow_runner
from app.application.dtos.task import TaskCreate
from app.core.config import get_settings
from app.core.limiter import limit_writes
from app.domain.entities.task import TaskEntity
from app.infrastructure.persistence.repositories import TaskRepository
from app.infrastructure.persistence.repositories.task_repo import to_entity
from app.infrastructure.services import WorkflowRunner
from app.schemas.task import TaskCreateRequest, TaskResponse, TaskUpdate
from app.shared.enums import TaskEventType, TaskStatus
from app.shared.utils.datetime import utc_now

router = APIRouter()

# Non-nullable columns: an explicit null in a patch leaves them untouched.
_REQUIRED_FIELDS = frozenset({"title", "status", "priority", "assignees", "tags"})


def _schedule_workflows(
    background_tasks: BackgroundTasks,
    runner: WorkflowRunner,
    task: TaskEntity,
    event_type: TaskEventType,
    old_task: TaskEntity | None = None,
) -> None:
    if not get_settings().workflows_enabled:
        return
    background_tasks.add_task(
        runner.run, task.project_id, task, event_type.value, old_task
    )


def _completion_changes(old: TaskEntity, changes: dict[str, Any]) -> dict[str, Any]:
    """Set or clear completed_at when a patch moves the task into or out of done."""
    status = changes.get("status")
    if status is None or status == old.status:
        return changes
    completed_at = utc_now() if status == TaskStatus.DONE.value else None
    return {**changes, "completed_at": completed_at}


@router.post("", response_model=TaskResponse, status_code=201)
@limit_writes
async def create_task(
    request: Request,
    body: TaskCreateRequest,
    background_tasks: BackgroundTasks,
    task_repo: Annotated[TaskRepository, Depends(get_task_repo)],
    runner: Annotated[WorkflowRunner, Depends(get_workflow_runner)],
):
    """Create a task and run the project's task_created rules in the background."""
    row = await task_repo.create_task(
        TaskCreate(
            project_id=body.project_id,
            client_id=body.client_id,
            title=body.title,
            description=body.description,
            status=body.status.value,
            priority=body.priority.value,
            assignees=body.assignees,
            tags=body.tags,
            due_at=body.due_at,
            created_by=body.created_by,
        )
    )
    await task_repo.db.commit()
    task = to_entity(row)
    _schedule_workflows(background_tasks, runner, task, TaskEventType.CREATED)
    return TaskResponse.model_validate(task)


@router.get("/{task_id}", response_model=TaskResponse)
async def get_task(
    task_id: str,
    task_repo: Annotated[TaskRepository, Depends(get_task_repo)],
):
    """Get task by id."""
    row = await task_repo.get_or_raise(task_id)
    return TaskResponse.model_validate(to_entity(row))


@router.get("", response_model=list[TaskResponse])
async def list_tasks(
    project_id: str,
    task_repo: Annotated[TaskRepository, Depends(get_task_repo)],
    status: TaskStatus | None = None,
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
):
    """List a project's tasks (paginated, optional status filter)."""
    rows = await task_repo.get_by_project(
        project_id,
        skip=skip,
        limit=limit,
        status=status.value if status is not None else None,
    )
    return [TaskResponse.model_validate(to_entity(r)) for r in rows]


@router.patch("/{task_id}", response_model=TaskResponse)
@limit_writes
async def update_task(
    request: Request,
    task_id: str,
    body: TaskUpdate,
    background_tasks: BackgroundTasks,
    task_repo: Annotated[TaskRepository, Depends(get_task_repo)],
    runner: Annotated[WorkflowRunner, Depends(get_workflow_runner)],
):
    """Update a task (partial) and run the project's update rules in the background."""
    row = await task_repo.get_or_raise(task_id)
    old_task = to_entity(row)
    changes = {
        key: value
        for key, value in body.model_dump(exclude_unset=True).items()
        if value is not None or key not in _REQUIRED_FIELDS
    }
    for key in ("status", "priority"):
        if key in changes:
            changes[key] = changes[key].value
    changes = _completion_changes(old_task, changes)
    row = await task_repo.update_fields(row, changes)
    await task_repo.db.commit()
    task = to_entity(row)
    _schedule_workflows(
        background_tasks, runner, task, TaskEventType.UPDATED, old_task
    )
    return TaskResponse.model_validate(task)
