"""Supabase repository for the macro log."""

from collections.abc import Iterator
from dataclasses import dataclass
from datetime import datetime

from supabase import Client

from macro_tracker.domain.entries import LogEntry
from macro_tracker.domain.macros import MacroSet
from macro_tracker.services.totals import LogRepository

_TABLE = "macro_log"
_MACRO_COLUMNS = ("carbs", "fats", "proteins", "calories")
_MANUAL_COLUMNS = tuple(f"manual_{column}" for column in _MACRO_COLUMNS)
_TODAY_COLUMNS = tuple(f"{column}_today" for column in _MACRO_COLUMNS)


@dataclass
class SupabaseLogRepository(LogRepository):
    """Supabase implementation for log entries ordered by id."""

    client: Client
    page_size: int = 50

    def get_entry(self, entry_id: int) -> LogEntry | None:
        """Return a log entry by id."""
        response = (
            self.client.table(_TABLE).select("*").eq("id", entry_id).limit(1).execute()
        )
        if not response.data:
            return None
        return _parse_entry(response.data[0])

    def get_latest_entry(self) -> LogEntry | None:
        """Return the entry with the highest id."""
        response = (
            self.client.table(_TABLE)
            .select("*")
            .order("id", desc=True)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_entry(response.data[0])

    def get_previous_entry(self, entry_id: int) -> LogEntry | None:
        """Return the entry immediately preceding the given id."""
        response = (
            self.client.table(_TABLE)
            .select("*")
            .lt("id", entry_id)
            .order("id", desc=True)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_entry(response.data[0])

    def entries_backward_from(self, entry_id: int) -> Iterator[LogEntry]:
        """Yield entries newest to oldest, one page at a time."""
        upper = entry_id
        inclusive = True
        while True:
            query = self.client.table(_TABLE).select("*")
            query = query.lte("id", upper) if inclusive else query.lt("id", upper)
            response = query.order("id", desc=True).limit(self.page_size).execute()
            rows = response.data or []
            for row in rows:
                yield _parse_entry(row)
            if len(rows) < self.page_size:
                return
            upper = int(rows[-1]["id"])
            inclusive = False

    def update_macros(self, entry_id: int, macros: MacroSet) -> None:
        """Write resolved macros to an entry."""
        self.client.table(_TABLE).update(_macro_payload(_MACRO_COLUMNS, macros)).eq(
            "id", entry_id
        ).execute()

    def update_totals(self, entry_id: int, totals: MacroSet) -> None:
        """Write today's running totals to an entry."""
        self.client.table(_TABLE).update(_macro_payload(_TODAY_COLUMNS, totals)).eq(
            "id", entry_id
        ).execute()


def _macro_payload(columns: tuple[str, ...], macros: MacroSet) -> dict[str, float]:
    values = (macros.carbs, macros.fats, macros.proteins, macros.calories)
    return dict(zip(columns, values, strict=True))


def _parse_macros(
    row: dict[str, object], columns: tuple[str, ...], *, partial: bool
) -> MacroSet | None:
    """Parse four macro columns; partial rows count missing values as zero."""
    values = [row.get(column) for column in columns]
    if all(value is None for value in values):
        return None
    if not partial and any(value is None for value in values):
        return None
    carbs, fats, proteins, calories = (float(value or 0.0) for value in values)
    return MacroSet(carbs=carbs, fats=fats, proteins=proteins, calories=calories)


def _parse_optional_text(value: object) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _parse_entry(row: dict[str, object]) -> LogEntry:
    quantity = row.get("quantity")
    return LogEntry(
        id=int(row["id"]),
        logged_at=datetime.fromisoformat(str(row["logged_at"])),
        food_item=str(row.get("food_item") or "").strip(),
        quantity=float(quantity) if quantity is not None else None,
        units=_parse_optional_text(row.get("units")),
        brand_info=_parse_optional_text(row.get("brand_info")),
        manual_macros=_parse_macros(row, _MANUAL_COLUMNS, partial=False),
        macros=_parse_macros(row, _MACRO_COLUMNS, partial=True),
        totals_today=_parse_macros(row, _TODAY_COLUMNS, partial=True),
        save_item=bool(row.get("save_item")),
        saved_item_ref=_parse_optional_text(row.get("saved_item_ref")),
    )
