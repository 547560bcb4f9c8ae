"""Domain models for the macro log."""

from dataclasses import dataclass
from datetime import datetime

from macro_tracker.domain.macros import MacroSet

DEFAULT_UNITS = "unit(s)"


@dataclass(frozen=True)
class LogEntry:
    """One food logging row."""

    id: int
    logged_at: datetime
    food_item: str
    quantity: float | None = None
    units: str | None = None
    brand_info: str | None = None
    manual_macros: MacroSet | None = None
    macros: MacroSet | None = None
    totals_today: MacroSet | None = None
    save_item: bool = False
    saved_item_ref: str | None = None


@dataclass(frozen=True)
class SavedItem:
    """Reusable per-unit macro template keyed by name."""

    name: str
    per_unit: MacroSet


@dataclass(frozen=True)
class RecapRecord:
    """Daily recap row."""

    recap_date: str
    totals: MacroSet
