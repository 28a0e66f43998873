"""Task API tests with repository and workflow runner overridden."""

from datetime import UTC, datetime
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest
from httpx import AsyncClient

from app.api.v1.dependencies import get_task_repo, get_workflow_runner
from app.domain.exceptions import ResourceNotFoundException
from app.main import app

CREATED = datetime(2025, 3, 1, 12, 0, tzinfo=UTC)


def _row(**overrides) -> SimpleNamespace:
    fields = {
        "id": "task1",
        "project_id": "proj1",
        "client_id": None,
        "title": "Write release notes",
        "description": None,
        "status": "todo",
        "priority": "medium",
        "assignees": [],
        "tags": [],
        "due_at": None,
        "completed_at": None,
        "created_by": None,
        "created_at": CREATED,
        "updated_at": CREATED,
    }
    fields.update(overrides)
    return SimpleNamespace(**fields)


class FakeTaskRepository:
    """In-memory stand-in for TaskRepository (rows are SimpleNamespace objects)."""

    def __init__(self) -> None:
        self.rows: dict[str, SimpleNamespace] = {}
        self.db = SimpleNamespace(commit=AsyncMock())

    async def create_task(self, data) -> SimpleNamespace:
        row = _row(
            id=f"task{len(self.rows) + 1}",
            project_id=data.project_id,
            client_id=data.client_id,
            title=data.title,
            description=data.description,
            status=data.status,
            priority=data.priority,
            assignees=list(data.assignees),
            tags=list(data.tags),
            due_at=data.due_at,
            created_by=data.created_by,
        )
        self.rows[row.id] = row
        return row

    async def get_or_raise(self, task_id: str) -> SimpleNamespace:
        if task_id not in self.rows:
            raise ResourceNotFoundException("task", task_id)
        return self.rows[task_id]

    async def update_fields(self, row, changes) -> SimpleNamespace:
        updated = SimpleNamespace(**{**vars(row), **changes})
        self.rows[row.id] = updated
        return updated

    async def get_by_project(self, project_id, skip=0, limit=100, status=None):
        rows = [r for r in self.rows.values() if r.project_id == project_id]
        if status is not None:
            rows = [r for r in rows if r.status == status]
        return rows[skip : skip + limit]


@pytest.fixture
def task_repo() -> FakeTaskRepository:
    repo = FakeTaskRepository()
    app.dependency_overrides[get_task_repo] = lambda: repo
    return repo


@pytest.fixture
def runner() -> SimpleNamespace:
    fake = SimpleNamespace(run=AsyncMock())
    app.dependency_overrides[get_workflow_runner] = lambda: fake
    return fake


async def test_create_task_commits_and_schedules_created_event(
    client: AsyncClient, task_repo, runner
) -> None:
    response = await client.post(
        "/api/v1/tasks",
        json={"project_id": "proj1", "title": "Write release notes", "priority": "high"},
    )

    assert response.status_code == 201
    data = response.json()
    assert data["id"] == "task1"
    assert data["priority"] == "high"
    assert data["status"] == "todo"
    task_repo.db.commit.assert_awaited_once()
    runner.run.assert_awaited_once()
    project_id, task, event_type, old_task = runner.run.await_args.args
    assert (project_id, task.id, event_type, old_task) == ("proj1", "task1", "created", None)


async def test_create_task_validation_error(client: AsyncClient, task_repo, runner) -> None:
    response = await client.post(
        "/api/v1/tasks", json={"project_id": "proj1", "title": "", "status": "archived"}
    )

    assert response.status_code == 422
    body = response.json()
    assert body["error"] == "VALIDATION_ERROR"
    assert {tuple(d["loc"])[-1] for d in body["details"]} >= {"title", "status"}
    runner.run.assert_not_awaited()


async def test_update_task_passes_old_snapshot(client: AsyncClient, task_repo, runner) -> None:
    task_repo.rows["task1"] = _row(status="in_progress", priority="high")

    response = await client.patch("/api/v1/tasks/task1", json={"status": "review"})

    assert response.status_code == 200
    assert response.json()["status"] == "review"
    project_id, task, event_type, old_task = runner.run.await_args.args
    assert event_type == "updated"
    assert task.status == "review"
    assert old_task.status == "in_progress"


async def test_update_to_done_sets_completed_at(client: AsyncClient, task_repo, runner) -> None:
    task_repo.rows["task1"] = _row(status="review")

    response = await client.patch("/api/v1/tasks/task1", json={"status": "done"})

    assert response.status_code == 200
    assert response.json()["completed_at"] is not None


async def test_update_out_of_done_clears_completed_at(
    client: AsyncClient, task_repo, runner
) -> None:
    task_repo.rows["task1"] = _row(status="done", completed_at=CREATED)

    response = await client.patch("/api/v1/tasks/task1", json={"status": "todo"})

    assert response.json()["completed_at"] is None


async def test_update_ignores_null_for_required_fields(
    client: AsyncClient, task_repo, runner
) -> None:
    task_repo.rows["task1"] = _row(assignees=["a@x.io"])

    response = await client.patch(
        "/api/v1/tasks/task1", json={"title": None, "assignees": None, "description": None}
    )

    data = response.json()
    assert data["title"] == "Write release notes"
    assert data["assignees"] == ["a@x.io"]
    assert data["description"] is None


async def test_update_missing_task_returns_404(client: AsyncClient, task_repo, runner) -> None:
    response = await client.patch("/api/v1/tasks/missing", json={"status": "review"})

    assert response.status_code == 404
    assert response.json()["error"] == "RESOURCE_NOT_FOUND"
    runner.run.assert_not_awaited()


async def test_get_and_list_tasks(client: AsyncClient, task_repo) -> None:
    task_repo.rows["task1"] = _row()
    task_repo.rows["task2"] = _row(id="task2", status="done")
    task_repo.rows["task3"] = _row(id="task3", project_id="proj2")

    single = await client.get("/api/v1/tasks/task2")
    listed = await client.get("/api/v1/tasks", params={"project_id": "proj1"})
    filtered = await client.get(
        "/api/v1/tasks", params={"project_id": "proj1", "status": "done"}
    )

    assert single.json()["id"] == "task2"
    assert [t["id"] for t in listed.json()] == ["task1", "task2"]
    assert [t["id"] for t in filtered.json()] == ["task2"]


async def test_workflows_disabled_skips_runner(
    client: AsyncClient, task_repo, runner, monkeypatch
) -> None:
    monkeypatch.setattr(
        "app.api.v1.endpoints.tasks.get_settings",
        lambda: SimpleNamespace(workflows_enabled=False),
    )

    response = await client.post("/api/v1/tasks", json={"project_id": "proj1", "title": "x"})

    assert response.status_code == 201
    runner.run.assert_not_awaited()
