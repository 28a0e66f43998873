"""Pytest configuration and fixtures for taskboard.

Uses app.main:app for HTTP tests and app.infrastructure.persistence.database
for DB-dependent fixtures. All imports use app.*.
"""

from collections.abc import AsyncIterator
from datetime import UTC, datetime

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.limiter import limiter
from app.domain.entities.task import TaskEntity
from app.infrastructure.persistence import database
from app.main import app

FIXED_NOW = datetime(2025, 3, 1, 12, 0, 0, tzinfo=UTC)


def _make_task(**overrides) -> TaskEntity:
    fields = {
        "id": "task1",
        "project_id": "proj1",
        "title": "Write release notes",
        "status": "todo",
        "priority": "medium",
        "assignees": [],
        "tags": [],
        "created_at": FIXED_NOW,
        "updated_at": FIXED_NOW,
    }
    fields.update(overrides)
    return TaskEntity(**fields)


@pytest.fixture
def make_task():
    """Factory for task snapshots with sensible defaults (override any field)."""
    return _make_task


@pytest.fixture(autouse=True)
def _reset_rate_limits() -> None:
    """Keep the in-memory rate limit counters independent between tests."""
    limiter.reset()


@pytest.fixture
async def client() -> AsyncIterator[AsyncClient]:
    """Async HTTP client against the FastAPI app (ASGI). Clears overrides afterwards."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
async def db_session() -> AsyncIterator[AsyncSession]:
    """Database session for repository/integration tests. Rolls back after test.

    Requires DATABASE_URL (postgresql+asyncpg) and the schema from
    scripts/init_db.py. Skips (pytest.skip) when Postgres is not configured.
    Use @pytest.mark.requires_db to mark tests that need this fixture; run
    without DB via: pytest -m 'not requires_db'.
    """
    database._ensure_engine()
    if database.AsyncSessionLocal is None:
        pytest.skip(
            "Postgres not configured: set DATABASE_URL, "
            "then run: python -m scripts.init_db"
        )
    async with database.AsyncSessionLocal() as session:
        yield session
        await session.rollback()
