"""Run the due-date scan: evaluate due_date_approaching / due_date_passed rules.

Usage:
    python -m scripts.run_due_date_scan [project_id]
If project_id is omitted, scans every project that has such rules.
Schedule it (cron, Kubernetes CronJob) more often than the 24-hour window.
Requires DATABASE_URL.
"""

import asyncio
import sys

import httpx

import app.infrastructure.persistence.database as database
from app.core.config import get_settings
from app.infrastructure.services import WorkflowRunner
from app.shared.telemetry.logging import setup_logging


async def main() -> None:
    """Scan open tasks near or past their due date and run matching rules."""
    settings = get_settings()
    setup_logging()
    database._ensure_engine()
    if database.AsyncSessionLocal is None:
        print("DATABASE_URL not configured", file=sys.stderr)
        sys.exit(1)

    project_filter = sys.argv[1] if len(sys.argv) > 1 else None
    async with httpx.AsyncClient(timeout=settings.slack_timeout_seconds) as client:
        result = await WorkflowRunner(client).scan_due_tasks(project_id=project_filter)
    await database.dispose_engine()

    print(
        f"Done. Projects scanned: {result.projects_scanned}, "
        f"tasks evaluated: {result.tasks_evaluated}"
    )


if __name__ == "__main__":
    asyncio.run(main())
