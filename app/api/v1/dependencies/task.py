"""Task dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

import httpx
from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.persistence.database import get_db
from app.infrastructure.persistence.repositories import TaskRepository
from app.infrastructure.services import WorkflowRunner


async def get_task_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TaskRepository:
    """Task repository for reads and for writes that commit explicitly.

    Task writes commit inside the endpoint, before the workflow pass is
    scheduled, so the background run always sees the committed row.
    """
    return TaskRepository(db)


def get_http_client(request: Request) -> httpx.AsyncClient:
    """Shared outbound HTTP client created in the application lifespan."""
    return request.app.state.http_client


def get_workflow_runner(
    http_client: Annotated[httpx.AsyncClient, Depends(get_http_client)],
) -> WorkflowRunner:
    """Runner used to schedule workflow passes after task writes."""
    return WorkflowRunner(http_client)
