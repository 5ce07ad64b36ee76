"""
Game content for SuperAdventure.

The World catalog type and the pre-built starter world.
"""

from superadventure.content.starter_world import (
    ITEM_ID_ADVENTURER_PASS,
    ITEM_ID_CLUB,
    ITEM_ID_HEALING_POTION,
    ITEM_ID_PIECE_OF_FUR,
    ITEM_ID_RAT_TAIL,
    ITEM_ID_RUSTY_SWORD,
    ITEM_ID_SNAKE_FANG,
    ITEM_ID_SNAKESKIN,
    ITEM_ID_SPIDER_FANG,
    ITEM_ID_SPIDER_SILK,
    LOCATION_ID_ALCHEMIST_HUT,
    LOCATION_ID_ALCHEMISTS_GARDEN,
    LOCATION_ID_BRIDGE,
    LOCATION_ID_FARM_FIELD,
    LOCATION_ID_FARMHOUSE,
    LOCATION_ID_GUARD_POST,
    LOCATION_ID_HOME,
    LOCATION_ID_SPIDER_FIELD,
    LOCATION_ID_TOWN_SQUARE,
    MONSTER_ID_GIANT_SPIDER,
    MONSTER_ID_RAT,
    MONSTER_ID_SNAKE,
    QUEST_ID_CLEAR_ALCHEMIST_GARDEN,
    QUEST_ID_CLEAR_FARMERS_FIELD,
    create_starter_world,
)
from superadventure.content.world import UnknownContentError, World

__all__ = [
    "UnknownContentError",
    "World",
    "create_starter_world",
    # Items
    "ITEM_ID_ADVENTURER_PASS",
    "ITEM_ID_CLUB",
    "ITEM_ID_HEALING_POTION",
    "ITEM_ID_PIECE_OF_FUR",
    "ITEM_ID_RAT_TAIL",
    "ITEM_ID_RUSTY_SWORD",
    "ITEM_ID_SNAKE_FANG",
    "ITEM_ID_SNAKESKIN",
    "ITEM_ID_SPIDER_FANG",
    "ITEM_ID_SPIDER_SILK",
    # Monsters
    "MONSTER_ID_GIANT_SPIDER",
    "MONSTER_ID_RAT",
    "MONSTER_ID_SNAKE",
    # Quests
    "QUEST_ID_CLEAR_ALCHEMIST_GARDEN",
    "QUEST_ID_CLEAR_FARMERS_FIELD",
    # Locations
    "LOCATION_ID_ALCHEMIST_HUT",
    "LOCATION_ID_ALCHEMISTS_GARDEN",
    "LOCATION_ID_BRIDGE",
    "LOCATION_ID_FARM_FIELD",
    "LOCATION_ID_FARMHOUSE",
    "LOCATION_ID_GUARD_POST",
    "LOCATION_ID_HOME",
    "LOCATION_ID_SPIDER_FIELD",
    "LOCATION_ID_TOWN_SQUARE",
]
