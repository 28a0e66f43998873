"""Project ORM model. Owner of tasks, workflow rules and Slack integrations."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import CuidMixin, TimestampMixin


class Project(CuidMixin, TimestampMixin, Base):
    """Project (board). Table: project."""

    __tablename__ = "project"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    organization_id: Mapped[str | None] = mapped_column(
        String, nullable=True, index=True
    )
