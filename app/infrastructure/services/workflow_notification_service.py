"""Workflow email: log-only sender used when no mail transport is configured."""

from __future__ import annotations

import logging

from app.shared.telemetry.logging import get_logger
from app.shared.utils.datetime import utc_now

logger = get_logger(__name__)


class LogOnlyEmailSender:
    """IEmailSender implementation that logs instead of sending email.

    Production can swap in an SMTP or queue-based implementation.
    """

    async def send(
        self,
        to_emails: list[str],
        subject: str,
        body: str,
    ) -> None:
        """Log the email; nothing is actually sent."""
        recipients = list(to_emails or [])
        subject_preview = (subject or "")[:80]
        if not recipients:
            logger.info(
                "Workflow email: no recipients, skipping send (subject=%r)",
                subject_preview,
            )
            return
        logger.info(
            "Workflow email: would send to %d recipients (subject=%r)",
            len(recipients),
            subject_preview,
        )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Workflow email recipients: %s (at %s)",
                recipients,
                utc_now().isoformat(),
            )
        logger.debug("Workflow email body (first 500 chars): %s", (body or "")[:500])
