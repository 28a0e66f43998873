"""Due-date scan use case: feed open tasks near or past their due date to the engine.

Due-date triggers are not tied to task mutations, so a periodic job (see
scripts/run_due_date_scan.py) calls this with the "scheduled" event type.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

from app.application.interfaces.repositories import IDueTaskRepository
from app.application.interfaces.services import IWorkflowEngine
from app.core.constants import DUE_SCAN_BATCH_SIZE, DUE_SOON_WINDOW_HOURS
from app.shared.enums import TaskEventType, WorkflowTrigger
from app.shared.telemetry.logging import get_logger
from app.shared.utils.datetime import utc_now

logger = get_logger(__name__)

_DUE_DATE_TRIGGERS = [
    WorkflowTrigger.DUE_DATE_APPROACHING.value,
    WorkflowTrigger.DUE_DATE_PASSED.value,
]


@dataclass(frozen=True)
class DueScanResult:
    """Counts from one scan run."""

    projects_scanned: int
    tasks_evaluated: int


class ScanDueTasksUseCase:
    """Runs due-date rules for open tasks of every project that has them."""

    def __init__(
        self,
        due_task_repo: IDueTaskRepository,
        workflow_engine: IWorkflowEngine,
    ) -> None:
        self._due_task_repo = due_task_repo
        self._workflow_engine = workflow_engine

    async def execute(
        self,
        *,
        now: datetime | None = None,
        project_id: str | None = None,
    ) -> DueScanResult:
        """Evaluate due-date rules once.

        Args:
            now: Reference time (defaults to current UTC).
            project_id: Restrict the scan to one project.

        Returns:
            Number of projects scanned and tasks handed to the engine.
        """
        now = now or utc_now()
        cutoff = now + timedelta(hours=DUE_SOON_WINDOW_HOURS)
        project_ids = await self._due_task_repo.get_project_ids_with_triggers(
            _DUE_DATE_TRIGGERS
        )
        if project_id is not None:
            project_ids = [p for p in project_ids if p == project_id]

        tasks_evaluated = 0
        for pid in project_ids:
            tasks = await self._due_task_repo.get_open_tasks_due_before(
                pid, cutoff, limit=DUE_SCAN_BATCH_SIZE
            )
            for task in tasks:
                await self._workflow_engine.process_task_workflows(
                    pid, task, TaskEventType.SCHEDULED.value
                )
                tasks_evaluated += 1
            if tasks:
                logger.info(
                    "Due-date scan: evaluated %d task(s) in project %s", len(tasks), pid
                )
        return DueScanResult(
            projects_scanned=len(project_ids), tasks_evaluated=tasks_evaluated
        )
