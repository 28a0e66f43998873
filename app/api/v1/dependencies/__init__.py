"""API v1 dependencies: repositories and services wired per request."""

from app.api.v1.dependencies.task import (
    get_http_client,
    get_task_repo,
    get_workflow_runner,
)
from app.api.v1.dependencies.workflow import (
    get_workflow_execution_repo,
    get_workflow_rule_repo,
    get_workflow_rule_repo_for_write,
)

__all__ = [
    "get_http_client",
    "get_task_repo",
    "get_workflow_execution_repo",
    "get_workflow_rule_repo",
    "get_workflow_rule_repo_for_write",
    "get_workflow_runner",
]
