"""SlackIntegration ORM model. Bot token + channel for a project or organization."""

from sqlalchemy import CheckConstraint, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import CuidMixin, TimestampMixin


class SlackIntegration(CuidMixin, TimestampMixin, Base):
    """Slack integration. Table: slack_integration. Exactly one owner is set."""

    __tablename__ = "slack_integration"

    project_id: Mapped[str | None] = mapped_column(
        String,
        ForeignKey("project.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )
    organization_id: Mapped[str | None] = mapped_column(
        String, nullable=True, index=True
    )
    access_token: Mapped[str] = mapped_column(String, nullable=False)
    channel_id: Mapped[str] = mapped_column(String(64), nullable=False)
    channel_name: Mapped[str | None] = mapped_column(String(255), nullable=True)

    __table_args__ = (
        CheckConstraint(
            "(project_id IS NULL) <> (organization_id IS NULL)",
            name="slack_integration_single_owner_check",
        ),
    )
