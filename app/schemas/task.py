"""Task API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.shared.enums import TaskPriority, TaskStatus


class TaskCreateRequest(BaseModel):
    """Request body for creating a task."""

    project_id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1, max_length=500)
    client_id: str | None = None
    description: str | None = None
    status: TaskStatus = TaskStatus.TODO
    priority: TaskPriority = TaskPriority.MEDIUM
    assignees: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    due_at: datetime | None = None
    created_by: str | None = None


class TaskUpdate(BaseModel):
    """Request body for updating a task (partial; only sent fields change)."""

    title: str | None = Field(default=None, min_length=1, max_length=500)
    description: str | None = None
    client_id: str | None = None
    status: TaskStatus | None = None
    priority: TaskPriority | None = None
    assignees: list[str] | None = None
    tags: list[str] | None = None
    due_at: datetime | None = None


class TaskResponse(BaseModel):
    """Task response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    project_id: str
    client_id: str | None
    title: str
    description: str | None
    status: str
    priority: str
    assignees: list[str]
    tags: list[str]
    due_at: datetime | None
    completed_at: datetime | None
    created_by: str | None
    created_at: datetime
    updated_at: datetime
