"""Keeps the logging form's food item dropdown in sync."""

import logging
from dataclasses import dataclass
from typing import Protocol

_logger = logging.getLogger(__name__)


class FormClient(Protocol):
    """Interface for updating the form's selectable food items."""

    async def set_choices(self, choices: list[str]) -> None:
        """Replace the dropdown choices."""


@dataclass
class FormService:
    """Best-effort refresh of the saved item dropdown."""

    client: FormClient

    async def refresh_food_items(self, names: list[str]) -> bool:
        """Mirror saved item names into the form; return whether it succeeded."""
        choices = list(dict.fromkeys(name for name in names if name))
        try:
            await self.client.set_choices(choices)
        except Exception:
            _logger.exception("Failed to refresh form food items")
            return False
        return True
