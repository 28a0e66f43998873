"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic (SRP). Used by main.py;
no business logic here, only wiring of infrastructure (logging, shared
HTTP client, DB engine dispose).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import FastAPI

from app.core.config import get_settings
from app.shared.telemetry.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup: logging, shared HTTP client (Slack and other outbound calls).
    Shutdown: HTTP client close, SQL engine dispose.
    """
    settings = get_settings()

    # ---- Startup ----
    setup_logging()
    app.state.http_client = httpx.AsyncClient(
        timeout=settings.slack_timeout_seconds
    )
    logger.info("%s %s started", settings.app_name, settings.app_version)

    yield

    # ---- Shutdown ----
    if getattr(app.state, "http_client", None) is not None:
        await app.state.http_client.aclose()
        app.state.http_client = None
        logger.info("Shared HTTP client closed")

    from app.infrastructure.persistence import database

    await database.dispose_engine()
