"""TimeoutMiddleware: 504 only when the response has not started."""

import asyncio

import httpx
from fastapi import BackgroundTasks, FastAPI

from app.middleware import TimeoutMiddleware


def _app(timeout: float) -> tuple[FastAPI, list[str]]:
    app = FastAPI()
    app.add_middleware(TimeoutMiddleware, timeout_seconds=timeout)
    finished: list[str] = []

    @app.get("/slow")
    async def slow():
        await asyncio.sleep(1)
        return {"ok": True}

    @app.get("/background")
    async def background(background_tasks: BackgroundTasks):
        async def work():
            await asyncio.sleep(0.2)
            finished.append("done")

        background_tasks.add_task(work)
        return {"ok": True}

    return app, finished


async def test_slow_request_gets_504() -> None:
    app, _ = _app(0.05)
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/slow")
    assert response.status_code == 504


async def test_background_task_outlives_timeout() -> None:
    app, finished = _app(0.05)
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/background")
    assert response.status_code == 200
    assert finished == ["done"]
