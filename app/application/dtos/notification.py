"""DTOs for outbound notification channels."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ChannelConfig:
    """Where a project's notifications go (Slack bot token + channel)."""

    access_token: str
    channel_id: str
    channel_name: str | None = None
