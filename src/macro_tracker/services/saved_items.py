"""Saved food item lookup and persistence."""

from dataclasses import dataclass
from typing import Protocol

from macro_tracker.domain.entries import SavedItem
from macro_tracker.domain.errors import InvalidQuantityError, InvalidSavedItemError
from macro_tracker.domain.macros import MacroSet


class SavedItemRepository(Protocol):
    """Persistence interface for saved items."""

    def find_by_name(self, name: str) -> SavedItem | None:
        """Return the first saved item with an exact name match."""

    def create(self, item: SavedItem) -> SavedItem:
        """Store a saved item and return it."""

    def list_names(self) -> list[str]:
        """Return saved item names in table order."""


@dataclass
class SavedItemService:
    """Resolves saved items by name and records new ones."""

    repository: SavedItemRepository

    def resolve(self, name: str, quantity: float) -> MacroSet:
        """Return the saved item's macros scaled by quantity."""
        item = self.repository.find_by_name(name)
        if item is None:
            raise InvalidSavedItemError(name)
        return item.per_unit.scaled(quantity)

    def save(
        self,
        item_name: str,
        brand_info: str | None,
        macros: MacroSet,
        quantity: float,
    ) -> SavedItem:
        """Store per-unit macros under the item's display name."""
        if quantity <= 0:
            raise InvalidQuantityError("Quantity must be positive to save an item")
        saved = SavedItem(
            name=display_name(item_name, brand_info),
            per_unit=macros.scaled(1 / quantity),
        )
        return self.repository.create(saved)

    def list_names(self) -> list[str]:
        """Return the selectable saved item names."""
        return self.repository.list_names()


def display_name(item_name: str, brand_info: str | None) -> str:
    """Return the item name with brand info in parentheses, when present."""
    if brand_info:
        return f"{item_name} ({brand_info})"
    return item_name
