"""Warning and recap notifications."""

import logging
from dataclasses import dataclass
from typing import Protocol

from macro_tracker.domain.entries import RecapRecord
from macro_tracker.domain.macros import RANGES, classify

_logger = logging.getLogger(__name__)

WARNING_SUBJECT = "Keto Warning!"


class EmailClient(Protocol):
    """Interface for outbound email delivery."""

    async def send_email(self, to: str, subject: str, body: str) -> None:
        """Send a plain-text email."""


@dataclass
class NotificationService:
    """Sends notifications to the configured recipient, logging failures."""

    client: EmailClient
    recipient: str

    async def send_warning(self, subject: str, message: str) -> bool:
        """Send a warning email; return whether it was delivered."""
        return await self._send(subject, message)

    async def send_carb_warning(self, total_carbs: float) -> bool:
        """Send the daily carb allowance warning."""
        message = carb_warning_message(total_carbs)
        return await self.send_warning(WARNING_SUBJECT, message)

    async def send_recap(self, record: RecapRecord) -> bool:
        """Send the daily recap email."""
        return await self._send(recap_subject(record), recap_body(record))

    async def _send(self, subject: str, body: str) -> bool:
        try:
            await self.client.send_email(self.recipient, subject, body)
        except Exception:
            _logger.exception("Error sending email notification: %s", subject)
            return False
        return True


def carb_warning_message(total_carbs: float) -> str:
    """Return the carb warning body."""
    return (
        "Warning: You have exceeded the total recommended carb allowance for the "
        f"day. You have had {total_carbs:.2f} carbs today."
    )


def recap_subject(record: RecapRecord) -> str:
    """Return the recap email subject."""
    return f"Macros Summary for {record.recap_date}"


def recap_body(record: RecapRecord) -> str:
    """Return the recap email body with per-nutrient labels."""
    totals = record.totals
    lines = [f"Macros summary for {record.recap_date}:"]
    for title, key, value in (
        ("Carbs", "carbs", totals.carbs),
        ("Fats", "fats", totals.fats),
        ("Proteins", "proteins", totals.proteins),
        ("Calories", "calories", totals.calories),
    ):
        label = classify(value, RANGES[key])
        lines.append(f"  {title}: {value:.2f} ({label})")
    return "\n".join(lines)
