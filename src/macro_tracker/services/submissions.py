"""Form submission handling."""

import logging
from dataclasses import dataclass, field

from macro_tracker.domain.entries import DEFAULT_UNITS, LogEntry, SavedItem
from macro_tracker.domain.errors import (
    EntryNotFoundError,
    InsufficientDataError,
    InvalidQuantityError,
)
from macro_tracker.domain.macros import RANGES, MacroSet, RangeBand
from macro_tracker.services.estimator import MacroEstimator
from macro_tracker.services.forms import FormService
from macro_tracker.services.notifications import NotificationService
from macro_tracker.services.saved_items import SavedItemService
from macro_tracker.services.totals import DailyAccumulator, LogRepository

_logger = logging.getLogger(__name__)

DEFAULT_QUANTITY = 1.0


@dataclass(frozen=True)
class SubmissionResult:
    """Outcome of processing one log entry."""

    entry_id: int
    food_item: str
    macros: MacroSet
    totals_today: MacroSet
    saved_item: SavedItem | None = None
    warning_sent: bool = False


@dataclass
class SubmissionHandler:
    """Resolves macros for a new log entry and updates running totals."""

    repository: LogRepository
    saved_items: SavedItemService
    estimator: MacroEstimator
    accumulator: DailyAccumulator
    notifications: NotificationService
    forms: FormService
    carbs_band: RangeBand = field(default_factory=lambda: RANGES["carbs"])

    async def handle_submission(self, entry_id: int) -> SubmissionResult | None:
        """Process the stored entry with the given id."""
        entry = self.repository.get_entry(entry_id)
        if entry is None:
            raise EntryNotFoundError(entry_id)
        return await self.handle(entry)

    async def handle(self, entry: LogEntry) -> SubmissionResult | None:
        """Process one entry; returns None when there is no food item."""
        if not entry.food_item and not entry.saved_item_ref:
            _logger.info("Skipping entry %s without a food item", entry.id)
            return None
        quantity = DEFAULT_QUANTITY if entry.quantity is None else entry.quantity
        if quantity <= 0:
            raise InvalidQuantityError(f"Quantity must be positive, got {quantity}")
        units = entry.units or DEFAULT_UNITS

        food_item = entry.food_item
        manual_macros = entry.manual_macros
        if entry.saved_item_ref:
            manual_macros = self.saved_items.resolve(entry.saved_item_ref, quantity)
            food_item = entry.saved_item_ref

        macros = manual_macros
        if macros is None:
            macros = await self.estimator.estimate(
                food_item, quantity, units, entry.brand_info
            )
        if macros is None:
            raise InsufficientDataError("Insufficient data entry")
        self.repository.update_macros(entry.id, macros)

        saved_item = None
        if entry.save_item:
            saved_item = self.saved_items.save(
                food_item, entry.brand_info, macros, quantity
            )
            _logger.info("Saved item %s", saved_item.name)

        totals = self.accumulator.accumulate_today(entry)
        self.repository.update_totals(entry.id, totals)

        if saved_item is not None:
            await self.forms.refresh_food_items(self.saved_items.list_names())
        warning_sent = await self._warn_on_first_carb_crossing(entry.id, totals)

        return SubmissionResult(
            entry_id=entry.id,
            food_item=food_item,
            macros=macros,
            totals_today=totals,
            saved_item=saved_item,
            warning_sent=warning_sent,
        )

    async def _warn_on_first_carb_crossing(
        self, entry_id: int, totals: MacroSet
    ) -> bool:
        """Warn only when the previous row had not already crossed the ceiling.

        Totals are compared as floats, so 20.5 exceeds a ceiling of 20.
        """
        ceiling = self.carbs_band.green_ceil
        if totals.carbs <= ceiling:
            return False
        previous = self.repository.get_previous_entry(entry_id)
        if previous is None:
            return False
        if previous.totals_today is not None and previous.totals_today.carbs > ceiling:
            return False
        return await self.notifications.send_carb_warning(totals.carbs)
