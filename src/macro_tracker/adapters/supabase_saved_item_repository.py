"""Supabase repository for saved food items."""

from dataclasses import dataclass

from supabase import Client

from macro_tracker.domain.entries import SavedItem
from macro_tracker.domain.macros import MacroSet
from macro_tracker.services.saved_items import SavedItemRepository

_TABLE = "saved_items"


@dataclass
class SupabaseSavedItemRepository(SavedItemRepository):
    """Supabase-backed saved item table."""

    client: Client

    def find_by_name(self, name: str) -> SavedItem | None:
        """Return the oldest saved item with this exact name."""
        response = (
            self.client.table(_TABLE)
            .select("*")
            .eq("name", name)
            .order("id", desc=False)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_item(response.data[0])

    def create(self, item: SavedItem) -> SavedItem:
        """Insert a saved item row."""
        response = (
            self.client.table(_TABLE)
            .insert(
                {
                    "name": item.name,
                    "carbs": item.per_unit.carbs,
                    "fats": item.per_unit.fats,
                    "proteins": item.per_unit.proteins,
                    "calories": item.per_unit.calories,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create saved item")
        return _parse_item(response.data[0])

    def list_names(self) -> list[str]:
        """Return saved item names in insertion order."""
        response = (
            self.client.table(_TABLE).select("name").order("id", desc=False).execute()
        )
        return [str(row["name"]) for row in response.data or [] if row.get("name")]


def _parse_item(row: dict[str, object]) -> SavedItem:
    return SavedItem(
        name=str(row.get("name", "")),
        per_unit=MacroSet(
            carbs=float(row.get("carbs") or 0.0),
            fats=float(row.get("fats") or 0.0),
            proteins=float(row.get("proteins") or 0.0),
            calories=float(row.get("calories") or 0.0),
        ),
    )
