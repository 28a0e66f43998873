"""Shared enumerations for the Taskboard application.

Cross-cutting enums used by application and infrastructure (task lifecycle,
workflow triggers, conditions and actions).
"""

from enum import Enum


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings."""
        return [member.value for member in cls]


class TaskStatus(_ValuesMixin, str, Enum):
    """Kanban stage of a task. DONE is the terminal stage."""

    TODO = "todo"
    IN_PROGRESS = "in_progress"
    REVIEW = "review"
    DONE = "done"


class TaskPriority(_ValuesMixin, str, Enum):
    """Task priority."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class TaskEventType(_ValuesMixin, str, Enum):
    """Lifecycle event handed to the workflow engine."""

    CREATED = "created"
    UPDATED = "updated"
    SCHEDULED = "scheduled"


class WorkflowTrigger(_ValuesMixin, str, Enum):
    """What a workflow rule reacts to."""

    TASK_CREATED = "task_created"
    TASK_UPDATED = "task_updated"
    STATUS_CHANGED = "status_changed"
    ASSIGNEE_ADDED = "assignee_added"
    ASSIGNEE_REMOVED = "assignee_removed"
    TASK_COMPLETED = "task_completed"
    DUE_DATE_APPROACHING = "due_date_approaching"
    DUE_DATE_PASSED = "due_date_passed"


class ConditionOperator(_ValuesMixin, str, Enum):
    """Comparison applied by a workflow condition."""

    EQUALS = "equals"
    NOT_EQUALS = "not_equals"
    CONTAINS = "contains"
    NOT_CONTAINS = "not_contains"
    GREATER_THAN = "greater_than"
    LESS_THAN = "less_than"
    IS_EMPTY = "is_empty"
    IS_NOT_EMPTY = "is_not_empty"


class ConditionField(_ValuesMixin, str, Enum):
    """Task attributes a workflow condition may inspect."""

    TITLE = "title"
    DESCRIPTION = "description"
    STATUS = "status"
    PRIORITY = "priority"
    ASSIGNEES = "assignees"
    TAGS = "tags"
    DUE_AT = "due_at"
    COMPLETED_AT = "completed_at"
    CLIENT_ID = "client_id"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"
    CREATED_BY = "created_by"


class WorkflowActionType(_ValuesMixin, str, Enum):
    """Side effect a workflow rule performs."""

    SEND_EMAIL = "send_email"
    SEND_SLACK = "send_slack"
    CREATE_TASK = "create_task"
    UPDATE_TASK = "update_task"
    ASSIGN_USER = "assign_user"
    SET_DUE_DATE = "set_due_date"
    CHANGE_STATUS = "change_status"
    ADD_COMMENT = "add_comment"
