"""WorkflowRule and WorkflowExecution ORM models. Task-event automation."""

from datetime import datetime
from typing import Any

import sqlalchemy as sa
from sqlalchemy import (
    JSON,
    Boolean,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import (
    CuidMixin,
    ProjectScopedModel,
)


class WorkflowRule(ProjectScopedModel, Base):
    """Workflow rule. Table: workflow_rule. Trigger + conditions/actions JSON."""

    __tablename__ = "workflow_rule"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    enabled: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, server_default=sa.text("true")
    )
    trigger: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    conditions: Mapped[list[dict[str, Any]]] = mapped_column(
        JSON, nullable=False, default=list
    )
    actions: Mapped[list[dict[str, Any]]] = mapped_column(
        JSON, nullable=False, default=list
    )
    created_by: Mapped[str | None] = mapped_column(String, nullable=True)

    __table_args__ = (
        Index("ix_workflow_rule_project_enabled", "project_id", "enabled"),
    )


class WorkflowExecution(CuidMixin, Base):
    """Workflow execution audit record (append-only). Table: workflow_execution."""

    __tablename__ = "workflow_execution"

    workflow_rule_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("workflow_rule.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    task_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("task.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    executed_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )
    success: Mapped[bool] = mapped_column(Boolean, nullable=False)
    actions_executed: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    error_message: Mapped[str | None] = mapped_column(Text, nullable=True)

    __table_args__ = (
        Index(
            "ix_workflow_execution_rule_executed",
            "workflow_rule_id",
            "executed_at",
        ),
    )
