"""Slack integration repository: resolves the channel a project notifies."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.notification import ChannelConfig
from app.infrastructure.persistence.models.project import Project
from app.infrastructure.persistence.models.slack_integration import SlackIntegration
from app.infrastructure.persistence.repositories.base import BaseRepository


def _to_config(i: SlackIntegration) -> ChannelConfig:
    return ChannelConfig(
        access_token=i.access_token,
        channel_id=i.channel_id,
        channel_name=i.channel_name,
    )


class SlackIntegrationRepository(BaseRepository[SlackIntegration]):
    """Slack integration repository."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, SlackIntegration)

    async def get_channel_config(self, project_id: str) -> ChannelConfig | None:
        """Return the project's own integration, else its organization's, else None.

        Called from the send_slack action, so the lookup runs in a SAVEPOINT
        like the other statements an action issues.
        """
        async with self.db.begin_nested():
            return await self._find_channel_config(project_id)

    async def _find_channel_config(self, project_id: str) -> ChannelConfig | None:
        result = await self.db.execute(
            select(SlackIntegration)
            .where(SlackIntegration.project_id == project_id)
            .order_by(SlackIntegration.created_at.desc())
            .limit(1)
        )
        integration = result.scalar_one_or_none()
        if integration is not None:
            return _to_config(integration)

        result = await self.db.execute(
            select(SlackIntegration)
            .join(
                Project,
                Project.organization_id == SlackIntegration.organization_id,
            )
            .where(Project.id == project_id)
            .order_by(SlackIntegration.created_at.desc())
            .limit(1)
        )
        integration = result.scalar_one_or_none()
        return _to_config(integration) if integration is not None else None
