"""Request timeout middleware.

Answers 504 if the route has not started its response within the configured
timeout. Once the response has started the request runs to completion, so
background tasks queued by the route (workflow passes) are never cancelled.
Uses raw ASGI (no BaseHTTPMiddleware) for production-safe streaming and background tasks.
"""

import asyncio
import json
import logging
from contextlib import suppress
from typing import Callable

logger = logging.getLogger(__name__)


def TimeoutMiddleware(app: Callable, timeout_seconds: int) -> Callable:
    """Send 504 when no response starts within timeout_seconds. Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        response_started = asyncio.Event()

        async def send_wrapper(message: dict) -> None:
            if message["type"] == "http.response.start":
                response_started.set()
            await send(message)

        request_task = asyncio.create_task(app(scope, receive, send_wrapper))
        started_waiter = asyncio.create_task(response_started.wait())
        done, _ = await asyncio.wait(
            {request_task, started_waiter},
            timeout=float(timeout_seconds),
            return_when=asyncio.FIRST_COMPLETED,
        )
        started_waiter.cancel()
        if done:
            await request_task
            return

        request_task.cancel()
        with suppress(asyncio.CancelledError):
            await request_task
        logger.warning(
            "Request timed out after %s seconds: %s %s",
            timeout_seconds,
            scope.get("method", ""),
            scope.get("path", ""),
        )
        body = json.dumps(
            {
                "error": "GATEWAY_TIMEOUT",
                "message": f"Request timed out after {timeout_seconds} seconds",
                "details": {"timeout_seconds": timeout_seconds},
            }
        ).encode()
        await send({
            "type": "http.response.start",
            "status": 504,
            "headers": [
                (b"content-type", b"application/json"),
            ],
        })
        await send({
            "type": "http.response.body",
            "body": body,
            "more_body": False,
        })

    return asgi_app
