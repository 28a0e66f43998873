"""WorkflowRunner: background workflow passes never raise."""

from contextlib import asynccontextmanager
from unittest.mock import AsyncMock, MagicMock

import httpx

from app.infrastructure.services import WorkflowRunner


async def test_run_swallows_session_errors(make_task) -> None:
    @asynccontextmanager
    async def broken_scope():
        raise ConnectionError("database unavailable")
        yield  # pragma: no cover

    runner = WorkflowRunner(MagicMock(spec=httpx.AsyncClient), session_factory=broken_scope)

    await runner.run("proj1", make_task(), "created")


async def test_run_processes_event_inside_session(make_task, monkeypatch) -> None:
    session = MagicMock()
    engine = AsyncMock()
    built_with = []

    @asynccontextmanager
    async def scope():
        yield session

    def fake_build(db, http_client):
        built_with.append(db)
        return engine

    monkeypatch.setattr(
        "app.infrastructure.services.workflow_runner.build_workflow_engine", fake_build
    )
    task, old = make_task(status="review"), make_task(status="todo")

    await WorkflowRunner(MagicMock(spec=httpx.AsyncClient), session_factory=scope).run(
        "proj1", task, "updated", old
    )

    assert built_with == [session]
    engine.process_task_workflows.assert_awaited_once_with("proj1", task, "updated", old)
