"""Domain entities and aggregates.

Pure domain models; no ORM or persistence concerns.
"""

from app.domain.entities.task import TaskEntity
from app.domain.entities.workflow import WorkflowRuleEntity

__all__ = [
    "TaskEntity",
    "WorkflowRuleEntity",
]
