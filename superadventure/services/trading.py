"""
Trading Service for SuperAdventure.

Buying from and selling to the vendor working at the player's current
location. Vendors pay the full catalog price and never run out of stock.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pydantic import BaseModel

from superadventure.engine.events import Message
from superadventure.engine.player import Player
from superadventure.models import Item, Vendor

logger = logging.getLogger(__name__)


class TradeResult(BaseModel):
    """Outcome of a buy or sell attempt."""

    success: bool
    message: str
    gold_change: int = 0


@dataclass
class TradingService:
    """
    Buys and sells items for one player.

    Every outcome, success or refusal, is also narrated on the player's
    message channel.
    """

    player: Player

    @property
    def vendor(self) -> Vendor | None:
        """The vendor at the player's current location, if any."""
        return self.player.current_location.vendor_working_here

    def vendor_items(self) -> list[tuple[Item, int]]:
        """Catalog items the local vendor offers with their displayed quantity, in stock order."""
        if self.vendor is None:
            return []
        return [
            (self.player.world.item_by_id(entry.item_id), entry.quantity)
            for entry in self.vendor.stock
        ]

    def buy(self, item: Item) -> TradeResult:
        vendor = self.vendor
        if vendor is None:
            return self._refuse("There is no one here to trade with.")

        if not vendor.sells(item.id):
            return self._refuse(f"{vendor.name} does not sell {item.name_plural}.")

        if self.player.gold < item.price:
            return self._refuse(f"You do not have enough gold to buy the {item.name}.")

        self.player.gold -= item.price
        self.player.add_item_to_inventory(item)
        logger.debug("Bought %s for %d gold", item.name, item.price)

        return self._narrate(
            TradeResult(
                success=True,
                message=f"You bought the {item.name} for {item.price} gold.",
                gold_change=-item.price,
            )
        )

    def sell(self, item: Item) -> TradeResult:
        vendor = self.vendor
        if vendor is None:
            return self._refuse("There is no one here to trade with.")

        if self.player.item_quantity(item) == 0:
            return self._refuse(f"You do not have a {item.name}.")

        if not item.is_sellable:
            return self._refuse(f"{vendor.name} will not buy the {item.name}.")

        self.player.remove_item_from_inventory(item)
        self.player.gold += item.price
        logger.debug("Sold %s for %d gold", item.name, item.price)

        return self._narrate(
            TradeResult(
                success=True,
                message=f"You sold the {item.name} for {item.price} gold.",
                gold_change=item.price,
            )
        )

    def _refuse(self, message: str) -> TradeResult:
        return self._narrate(TradeResult(success=False, message=message))

    def _narrate(self, result: TradeResult) -> TradeResult:
        self.player.events.publish(Message(result.message))
        return result
