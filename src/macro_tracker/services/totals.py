"""Daily running totals for the macro log."""

from collections.abc import Iterator
from dataclasses import dataclass
from datetime import date
from typing import Protocol
from zoneinfo import ZoneInfo

from macro_tracker.domain.entries import LogEntry
from macro_tracker.domain.macros import MacroSet


class LogRepository(Protocol):
    """Persistence interface for macro log rows."""

    def get_entry(self, entry_id: int) -> LogEntry | None:
        """Return a log entry by id."""

    def get_latest_entry(self) -> LogEntry | None:
        """Return the newest log entry."""

    def get_previous_entry(self, entry_id: int) -> LogEntry | None:
        """Return the entry immediately before the given one."""

    def entries_backward_from(self, entry_id: int) -> Iterator[LogEntry]:
        """Yield entries from the given id toward the oldest."""

    def update_macros(self, entry_id: int, macros: MacroSet) -> None:
        """Write resolved macros to an entry."""

    def update_totals(self, entry_id: int, totals: MacroSet) -> None:
        """Write today's running totals to an entry."""


@dataclass
class DailyAccumulator:
    """Sums same-day macros by scanning the log backward."""

    repository: LogRepository
    timezone_name: str = "UTC"

    def accumulate_today(self, entry: LogEntry) -> MacroSet:
        """Return totals for the entry's calendar day up to and including it."""
        target_day = self.local_date(entry)
        total = MacroSet.zero()
        for row in self.repository.entries_backward_from(entry.id):
            if self.local_date(row) != target_day:
                break
            total = total + (row.macros or MacroSet.zero())
        return total

    def local_date(self, entry: LogEntry) -> date:
        """Return the entry's calendar date in the configured timezone."""
        logged_at = entry.logged_at
        if logged_at.tzinfo is None:
            return logged_at.date()
        return logged_at.astimezone(ZoneInfo(self.timezone_name)).date()
