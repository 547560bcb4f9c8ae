"""Supabase repository for daily recaps."""

from dataclasses import dataclass

from supabase import Client

from macro_tracker.domain.entries import RecapRecord
from macro_tracker.services.recaps import RecapRepository


@dataclass
class SupabaseRecapRepository(RecapRepository):
    """Append-only recap table."""

    client: Client

    def append(self, record: RecapRecord) -> None:
        """Insert a recap row."""
        response = (
            self.client.table("recaps")
            .insert(
                {
                    "recap_date": record.recap_date,
                    "carbs": record.totals.carbs,
                    "fats": record.totals.fats,
                    "proteins": record.totals.proteins,
                    "calories": record.totals.calories,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to append recap")
