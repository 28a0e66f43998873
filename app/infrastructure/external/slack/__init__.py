"""Slack: chat.postMessage dispatcher for workflow notifications."""

from app.infrastructure.external.slack.slack_dispatcher import (
    SlackNotificationDispatcher,
    build_message_payload,
)

__all__ = [
    "SlackNotificationDispatcher",
    "build_message_payload",
]
