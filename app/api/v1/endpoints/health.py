"""Health check endpoints: liveness (no dependencies) and database readiness."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from app.domain.exceptions import SqlNotConfiguredException
from app.infrastructure.persistence.database import session_scope
from app.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)
from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse()


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"description": "Database not configured or unreachable", "model": ReadinessErrorResponse}},
)
async def readiness_check() -> ReadinessResponse | JSONResponse:
    """Return 200 when the database answers SELECT 1; 503 otherwise."""
    try:
        async with session_scope() as db:
            await db.execute(text("SELECT 1"))
    except SqlNotConfiguredException as e:
        return _not_ready(e.message)
    except (SQLAlchemyError, OSError) as e:
        logger.warning("Readiness check failed: %s", e)
        return _not_ready("database unreachable")
    return ReadinessResponse()


def _not_ready(message: str) -> JSONResponse:
    return JSONResponse(
        status_code=503,
        content=ReadinessErrorResponse(message=message).model_dump(),
    )
