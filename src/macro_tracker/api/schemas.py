"""Response models for the trigger API."""

from pydantic import BaseModel

from macro_tracker.domain.entries import RecapRecord
from macro_tracker.domain.macros import MacroSet
from macro_tracker.services.submissions import SubmissionResult


class MacrosModel(BaseModel):
    """Four macro values."""

    carbs: float
    fats: float
    proteins: float
    calories: float

    @classmethod
    def from_macros(cls, macros: MacroSet) -> "MacrosModel":
        return cls(
            carbs=macros.carbs,
            fats=macros.fats,
            proteins=macros.proteins,
            calories=macros.calories,
        )


class SubmissionResponse(BaseModel):
    """Result of processing a submitted log entry."""

    status: str
    entry_id: int
    food_item: str | None = None
    macros: MacrosModel | None = None
    totals_today: MacrosModel | None = None
    saved_item: str | None = None
    warning_sent: bool = False

    @classmethod
    def from_result(cls, result: SubmissionResult) -> "SubmissionResponse":
        return cls(
            status="ok",
            entry_id=result.entry_id,
            food_item=result.food_item,
            macros=MacrosModel.from_macros(result.macros),
            totals_today=MacrosModel.from_macros(result.totals_today),
            saved_item=result.saved_item.name if result.saved_item else None,
            warning_sent=result.warning_sent,
        )


class RecapResponse(BaseModel):
    """Recap row appended by the recap trigger."""

    status: str
    recap_date: str | None = None
    totals: MacrosModel | None = None

    @classmethod
    def from_record(cls, record: RecapRecord) -> "RecapResponse":
        return cls(
            status="ok",
            recap_date=record.recap_date,
            totals=MacrosModel.from_macros(record.totals),
        )
