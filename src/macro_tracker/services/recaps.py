"""Daily recap production."""

import logging
from dataclasses import dataclass
from typing import Protocol
from zoneinfo import ZoneInfo

from macro_tracker.domain.entries import RecapRecord
from macro_tracker.domain.macros import MacroSet
from macro_tracker.services.notifications import NotificationService
from macro_tracker.services.totals import LogRepository

_logger = logging.getLogger(__name__)


class RecapRepository(Protocol):
    """Persistence interface for recap rows."""

    def append(self, record: RecapRecord) -> None:
        """Append a recap row."""


@dataclass
class RecapProducer:
    """Records the latest daily totals and emails a summary."""

    log_repository: LogRepository
    recap_repository: RecapRepository
    notifications: NotificationService
    timezone_name: str = "UTC"
    date_format: str = "%m/%d/%Y"

    async def produce_recap(self) -> RecapRecord | None:
        """Append a recap for the newest entry's day and send it."""
        latest = self.log_repository.get_latest_entry()
        if latest is None:
            _logger.warning("No log entries to recap")
            return None
        logged_at = latest.logged_at
        if logged_at.tzinfo is not None:
            logged_at = logged_at.astimezone(ZoneInfo(self.timezone_name))
        record = RecapRecord(
            recap_date=logged_at.strftime(self.date_format),
            totals=latest.totals_today or MacroSet.zero(),
        )
        self.recap_repository.append(record)
        await self.notifications.send_recap(record)
        return record
