"""Macro estimation service backed by a language model."""

import logging
from dataclasses import dataclass
from typing import Protocol

from pydantic import ValidationError

from macro_tracker.domain.entries import DEFAULT_UNITS
from macro_tracker.domain.errors import EstimationError
from macro_tracker.domain.estimates import MacroEstimate
from macro_tracker.domain.macros import MacroSet

_logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a nutrition expert who provides food macro information in JSON format."
)

PROVIDE_MACROS_FUNCTION: dict[str, object] = {
    "name": "provide_macros",
    "description": "Provides the macronutrient breakdown for a given food item",
    "parameters": {
        "type": "object",
        "properties": {
            "fats": {"type": "number", "description": "The amount of fats in grams"},
            "carbohydrates": {
                "type": "number",
                "description": "The amount of carbohydrates in grams",
            },
            "fiber": {"type": "number", "description": "The amount of fiber in grams"},
            "proteins": {
                "type": "number",
                "description": "The amount of proteins in grams",
            },
            "calories": {"type": "number", "description": "The amount of calories"},
        },
        "required": ["fats", "carbohydrates", "fiber", "proteins", "calories"],
    },
}


class EstimationClient(Protocol):
    """Interface for forced function-call completions."""

    async def call_function(
        self,
        *,
        model: str,
        messages: list[dict[str, str]],
        function: dict[str, object],
    ) -> dict[str, object]:
        """Return the decoded arguments of the forced function call."""


@dataclass
class MacroEstimator:
    """Estimates macros for free-text food descriptions."""

    client: EstimationClient
    model: str

    async def estimate(
        self,
        item: str,
        quantity: float | None,
        units: str | None = None,
        brand_info: str | None = None,
    ) -> MacroSet | None:
        """Return estimated macros, zeros for incomplete input, or None on failure.

        Carbs are reported net of fiber.
        """
        if not item or quantity is None:
            return MacroSet.zero()
        messages = [
            {"role": "system", "content": SYSTEM_PROMPT},
            {
                "role": "user",
                "content": build_prompt(item, quantity, units, brand_info),
            },
        ]
        try:
            raw = await self.client.call_function(
                model=self.model,
                messages=messages,
                function=PROVIDE_MACROS_FUNCTION,
            )
            estimate = MacroEstimate.model_validate(raw)
        except (EstimationError, ValidationError):
            _logger.exception("Error fetching macro estimates for %s", item)
            return None
        return MacroSet(
            carbs=estimate.carbohydrates - estimate.fiber,
            fats=estimate.fats,
            proteins=estimate.proteins,
            calories=estimate.calories,
        )


def build_prompt(
    item: str, quantity: float, units: str | None, brand_info: str | None
) -> str:
    """Describe the portion for the estimation prompt."""
    prompt = (
        "Estimate the fat, carbohydrates, fiber, proteins, and calories for "
        f"{_format_quantity(quantity)} {units or DEFAULT_UNITS} of {item}"
    )
    if brand_info:
        prompt += f" (brand information: {brand_info})"
    return prompt + "."


def _format_quantity(quantity: float) -> str:
    if float(quantity).is_integer():
        return str(int(quantity))
    return str(quantity)
