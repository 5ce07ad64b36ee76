"""
Item Models for SuperAdventure.

Items are immutable catalog entries. The three variants form a tagged
union on the `kind` field:

- GenericItem: loot and quest tokens (rat tails, adventurer pass)
- Weapon: usable in battle, equippable
- HealingPotion: usable in battle, consumed on use
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

UNSELLABLE_ITEM_PRICE = -1
"""Price marker for items a vendor will not buy."""


class ItemKind(str, Enum):
    """Discriminator values for the item variants."""

    ITEM = "item"
    WEAPON = "weapon"
    HEALING_POTION = "healing_potion"


class BaseItem(BaseModel):
    """Fields shared by every item variant."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(description="Stable catalog ID, written to save files")
    name: str = Field(min_length=1)
    name_plural: str = Field(min_length=1)
    price: int = Field(default=0, ge=UNSELLABLE_ITEM_PRICE)

    @property
    def is_sellable(self) -> bool:
        """Whether a vendor will buy this item."""
        return self.price != UNSELLABLE_ITEM_PRICE

    def display_name(self, quantity: int) -> str:
        """Singular name for exactly one, plural otherwise."""
        return self.name if quantity == 1 else self.name_plural


class GenericItem(BaseItem):
    """An item with no battle use."""

    kind: Literal[ItemKind.ITEM] = ItemKind.ITEM


class Weapon(BaseItem):
    """A weapon; damage is rolled uniformly in [minimum, maximum]."""

    kind: Literal[ItemKind.WEAPON] = ItemKind.WEAPON
    minimum_damage: int = Field(ge=0)
    maximum_damage: int = Field(ge=0)

    @model_validator(mode="after")
    def damage_range_is_ordered(self) -> Weapon:
        if self.minimum_damage > self.maximum_damage:
            raise ValueError(
                f"minimum_damage {self.minimum_damage} exceeds "
                f"maximum_damage {self.maximum_damage}"
            )
        return self


class HealingPotion(BaseItem):
    """A potion that restores hit points when drunk."""

    kind: Literal[ItemKind.HEALING_POTION] = ItemKind.HEALING_POTION
    amount_to_heal: int = Field(ge=0)


Item = Annotated[
    Union[GenericItem, Weapon, HealingPotion],
    Field(discriminator="kind"),
]
"""Any catalog item, discriminated on `kind`."""


def is_usable_in_battle(item: Item) -> bool:
    """Weapons and potions can be used during an encounter."""
    match item:
        case Weapon() | HealingPotion():
            return True
        case _:
            return False
