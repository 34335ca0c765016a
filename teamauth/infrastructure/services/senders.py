"""Outbound senders: log-only email and SMS (implement IEmailSender / ISmsSender).

Use when no mail or SMS gateway is configured. Production can swap in a real
transport behind the same protocol.
"""

from __future__ import annotations

import logging

from teamauth.shared.telemetry.logging import get_logger
from teamauth.shared.utils.datetime import utc_now

logger = get_logger(__name__)


class LogOnlyEmailSender:
    """Logs emails instead of sending them."""

    async def send(self, to_email: str, subject: str, body: str) -> None:
        logger.info(
            "Email: would send to %s (subject=%r)", to_email, (subject or "")[:80]
        )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Email body (first 500 chars, at %s): %s",
                utc_now().isoformat(),
                (body or "")[:500],
            )


class LogOnlySmsSender:
    """Logs SMS messages instead of sending them."""

    async def send(self, phone: str, body: str) -> None:
        logger.info("SMS: would send to %s (%d chars)", phone, len(body or ""))
        logger.debug("SMS body: %s", (body or "")[:160])
