"""Comment ORM model. Discussion entry on a task."""

from sqlalchemy import JSON, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import CuidMixin, TimestampMixin


class Comment(CuidMixin, TimestampMixin, Base):
    """Comment on a task. Table: comment."""

    __tablename__ = "comment"

    task_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("task.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    mentioned_users: Mapped[list[str]] = mapped_column(
        JSON, nullable=False, default=list
    )
    created_by: Mapped[str | None] = mapped_column(String, nullable=True)
