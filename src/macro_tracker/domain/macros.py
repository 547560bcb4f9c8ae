"""Macro sets, range bands and classification."""

import math
from dataclasses import dataclass
from enum import StrEnum


@dataclass(frozen=True)
class MacroSet:
    """Carbs, fats and proteins in grams plus calories."""

    carbs: float
    fats: float
    proteins: float
    calories: float

    @classmethod
    def zero(cls) -> "MacroSet":
        """Return an all-zero macro set."""
        return cls(carbs=0.0, fats=0.0, proteins=0.0, calories=0.0)

    def __add__(self, other: "MacroSet") -> "MacroSet":
        return MacroSet(
            carbs=self.carbs + other.carbs,
            fats=self.fats + other.fats,
            proteins=self.proteins + other.proteins,
            calories=self.calories + other.calories,
        )

    def scaled(self, factor: float) -> "MacroSet":
        """Return the macro set multiplied by a factor."""
        return MacroSet(
            carbs=self.carbs * factor,
            fats=self.fats * factor,
            proteins=self.proteins * factor,
            calories=self.calories * factor,
        )


@dataclass(frozen=True)
class RangeBand:
    """Thresholds splitting a daily total into five zones.

    Requires yellow_base <= green_base <= green_ceil <= yellow_ceil.
    """

    yellow_base: float
    green_base: float
    green_ceil: float
    yellow_ceil: float

    def __post_init__(self) -> None:
        if not (
            self.yellow_base <= self.green_base <= self.green_ceil <= self.yellow_ceil
        ):
            raise ValueError("Range band thresholds must be non-decreasing")


class Label(StrEnum):
    """Qualitative label for a daily total."""

    MUCH_TOO_LOW = "Much too low"
    A_LITTLE_LOW = "A little low"
    PERFECT = "Perfect"
    A_LITTLE_HIGH = "A little high"
    MUCH_TOO_HIGH = "Much too high"


RANGES: dict[str, RangeBand] = {
    "carbs": RangeBand(yellow_base=0, green_base=10, green_ceil=20, yellow_ceil=50),
    "fats": RangeBand(yellow_base=100, green_base=130, green_ceil=170, yellow_ceil=200),
    "proteins": RangeBand(
        yellow_base=80, green_base=100, green_ceil=120, yellow_ceil=140
    ),
    "calories": RangeBand(
        yellow_base=1500, green_base=1800, green_ceil=2000, yellow_ceil=2500
    ),
}


def classify(total: float, band: RangeBand) -> Label:
    """Classify a total against a band; boundaries are order-sensitive."""
    if math.isnan(total):
        raise ValueError("Cannot classify NaN")
    if total < band.yellow_base:
        return Label.MUCH_TOO_LOW
    if total < band.green_base:
        return Label.A_LITTLE_LOW
    if total <= band.green_ceil:
        return Label.PERFECT
    if total <= band.yellow_ceil:
        return Label.A_LITTLE_HIGH
    return Label.MUCH_TOO_HIGH
