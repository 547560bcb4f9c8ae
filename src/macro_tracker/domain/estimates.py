"""Models for macro estimation results."""

from pydantic import BaseModel, ConfigDict


class MacroEstimate(BaseModel):
    """Structured output of the provide_macros function call."""

    model_config = ConfigDict(strict=True, allow_inf_nan=False)

    fats: float
    carbohydrates: float
    fiber: float
    proteins: float
    calories: float
