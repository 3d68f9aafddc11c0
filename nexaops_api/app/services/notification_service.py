"""
Service layer for demo notifications.

The application can "send" WhatsApp or SMS reminders, but no message
ever leaves the process: the notification is validated, written to the
log and a receipt is returned after a short simulated delivery delay.
The delay is an ``asyncio.sleep`` so other requests keep being served
while a notification is "in flight".
"""

import asyncio
import logging
import secrets
import string
import time
from datetime import datetime, timezone
from typing import Any

from nexaops_api.app.core.config import Settings
from nexaops_api.app.core.errors import ValidationError
from nexaops_api.app.schemas.notification import NotificationRead
from nexaops_api.app.services.validators import validate_notification

logger = logging.getLogger(__name__)

DEFAULT_PRIORITY = "medium"
_BASE36 = string.digits + string.ascii_lowercase


def _to_base36(number: int) -> str:
    digits = []
    while True:
        number, remainder = divmod(number, 36)
        digits.append(_BASE36[remainder])
        if not number:
            return "".join(reversed(digits))


def generate_notification_id() -> str:
    """Return an identifier such as ``notif_lx2k9q1c_a1b2c``.

    The middle part is the current time in milliseconds (base 36),
    the suffix five random base‑36 characters.
    """
    suffix = "".join(secrets.choice(_BASE36) for _ in range(5))
    return f"notif_{_to_base36(int(time.time() * 1000))}_{suffix}"


class NotificationService:
    """Validate and simulate delivery of notifications."""

    def __init__(self, settings: Settings) -> None:
        self.delays = {
            "whatsapp": settings.notification_delay_whatsapp,
            "sms": settings.notification_delay_sms,
        }

    async def send(self, payload: Any) -> NotificationRead:
        """Validate ``payload`` and pretend to deliver it.

        Raises ``ValidationError`` if the payload is rejected.  The
        returned receipt always has ``status="sent"`` and
        ``demo_mode=True``.
        """
        result = validate_notification(payload)
        if not result.valid:
            raise ValidationError(result.errors)

        kind = payload["type"].lower()
        priority = (payload.get("priority") or DEFAULT_PRIORITY).lower()
        notification = NotificationRead(
            id=generate_notification_id(),
            type=kind,
            recipient=payload["recipient"].strip(),
            message=payload["message"].strip(),
            priority=priority,
            timestamp=datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z"),
        )

        logger.info("=" * 60)
        logger.info("NOTIFICATION SENT (DEMO MODE) - ID: %s", notification.id)
        logger.info("Timestamp: %s", notification.timestamp)
        logger.info("Type: %s", kind.upper())
        logger.info("Recipient: %s", notification.recipient)
        logger.info("Message: %s", notification.message)
        logger.info("Priority: %s", priority)
        logger.info("=" * 60)

        await asyncio.sleep(self.delays[kind])
        return notification
