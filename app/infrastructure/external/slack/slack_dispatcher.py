"""Slack notification dispatcher (implements INotificationDispatcher).

Posts workflow messages with the Web API chat.postMessage method using the
bot token stored on the project's (or its organization's) Slack integration.
Slack answers HTTP 200 with ``{"ok": false, "error": ...}`` for most
failures, so the body is checked as well as the status.
"""

from __future__ import annotations

from typing import Any, Protocol

import httpx

from app.application.dtos.notification import ChannelConfig
from app.core.constants import SLACK_POST_MESSAGE_URL
from app.domain.exceptions import NotificationDeliveryException
from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class _ChannelConfigSource(Protocol):
    async def get_channel_config(self, project_id: str) -> ChannelConfig | None: ...


def build_message_payload(channel_id: str, message: str) -> dict[str, Any]:
    """Return the chat.postMessage body: plain-text fallback plus one mrkdwn section."""
    return {
        "channel": channel_id,
        "text": message,
        "blocks": [
            {
                "type": "section",
                "text": {"type": "mrkdwn", "text": message},
            }
        ],
    }


class SlackNotificationDispatcher:
    """Resolves a project's Slack channel and posts messages to it."""

    def __init__(
        self,
        config_source: _ChannelConfigSource,
        http_client: httpx.AsyncClient,
        *,
        api_url: str = SLACK_POST_MESSAGE_URL,
        timeout_seconds: float = 10.0,
    ) -> None:
        self._config_source = config_source
        self._http_client = http_client
        self._api_url = api_url
        self._timeout_seconds = timeout_seconds

    async def get_channel_config(self, project_id: str) -> ChannelConfig | None:
        return await self._config_source.get_channel_config(project_id)

    async def send(self, config: ChannelConfig, message: str) -> None:
        """Post message to the configured channel.

        Raises:
            NotificationDeliveryException: On transport error, non-2xx status or ok=false.
        """
        try:
            response = await self._http_client.post(
                self._api_url,
                json=build_message_payload(config.channel_id, message),
                headers={"Authorization": f"Bearer {config.access_token}"},
                timeout=self._timeout_seconds,
            )
        except httpx.HTTPError as e:
            logger.warning(
                "Slack request failed for channel %s: %s", config.channel_id, e
            )
            raise NotificationDeliveryException("slack", str(e) or "request failed") from e

        if response.status_code >= 400:
            logger.warning(
                "Slack postMessage failed: status=%d channel=%s",
                response.status_code,
                config.channel_id,
            )
            raise NotificationDeliveryException(
                "slack", f"HTTP {response.status_code}"
            )

        try:
            data: dict[str, Any] = response.json()
        except ValueError as e:
            raise NotificationDeliveryException("slack", "invalid JSON response") from e
        if not data.get("ok"):
            error = str(data.get("error") or "unknown_error")
            logger.warning(
                "Slack postMessage rejected: error=%s channel=%s",
                error,
                config.channel_id,
            )
            raise NotificationDeliveryException("slack", error)
        logger.debug(
            "Slack message posted to %s (ts=%s)", config.channel_id, data.get("ts")
        )
