"""
Player-owned ledger entries.

InventoryItem and PlayerQuest are the mutable rows of the Player's
inventory and quest ledgers. Uniqueness per catalog ID is enforced by
the Player, not here.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from superadventure.models.item import Item
from superadventure.models.quest import Quest


class InventoryItem(BaseModel):
    """A held item and how many of it."""

    item: Item
    quantity: int = Field(default=1, ge=0)

    @property
    def item_id(self) -> int:
        return self.item.id

    @property
    def description(self) -> str:
        """Plural name when more than one is held."""
        return self.item.name_plural if self.quantity > 1 else self.item.name

    @property
    def price(self) -> int:
        return self.item.price


class PlayerQuest(BaseModel):
    """A quest the player has accepted."""

    quest: Quest
    is_completed: bool = False

    @property
    def quest_id(self) -> int:
        return self.quest.id

    @property
    def name(self) -> str:
        return self.quest.name
