"""
Core Data Models for SuperAdventure.

These models define the game content (items, monsters, locations,
quests) and the rows of the player's ledgers. Catalog models are frozen;
ledger rows and active monsters are mutable.
"""

from superadventure.models.item import (
    UNSELLABLE_ITEM_PRICE,
    BaseItem,
    GenericItem,
    HealingPotion,
    Item,
    ItemKind,
    Weapon,
    is_usable_in_battle,
)
from superadventure.models.ledger import InventoryItem, PlayerQuest
from superadventure.models.location import Direction, Location, Vendor, VendorStock
from superadventure.models.monster import LootItem, Monster, MonsterTemplate
from superadventure.models.quest import Quest, QuestCompletionItem

__all__ = [
    # Items
    "BaseItem",
    "GenericItem",
    "HealingPotion",
    "Item",
    "ItemKind",
    "UNSELLABLE_ITEM_PRICE",
    "Weapon",
    "is_usable_in_battle",
    # Monsters
    "LootItem",
    "Monster",
    "MonsterTemplate",
    # Locations
    "Direction",
    "Location",
    "Vendor",
    "VendorStock",
    # Quests
    "Quest",
    "QuestCompletionItem",
    # Ledgers
    "InventoryItem",
    "PlayerQuest",
]
