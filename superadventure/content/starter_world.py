"""
Starter World for SuperAdventure.

Provides the pre-built catalog: a small village with a home, a town
square with a trader, two quest givers, three monster lairs and a
guarded bridge out to the spider forest.

    Alchemist's garden
           |
    Alchemist's hut
           |
    Farmer's field - Farmhouse - Town square - Guard post - Bridge - Forest
                                     |
                                    Home
"""

from __future__ import annotations

from superadventure.content.world import World
from superadventure.models import (
    UNSELLABLE_ITEM_PRICE,
    GenericItem,
    HealingPotion,
    Location,
    LootItem,
    MonsterTemplate,
    Quest,
    QuestCompletionItem,
    Vendor,
    VendorStock,
    Weapon,
)

# =============================================================================
# Catalog IDs
# =============================================================================

# These IDs are written to save files; never renumber them.
ITEM_ID_RUSTY_SWORD = 1
ITEM_ID_RAT_TAIL = 2
ITEM_ID_PIECE_OF_FUR = 3
ITEM_ID_SNAKE_FANG = 4
ITEM_ID_SNAKESKIN = 5
ITEM_ID_CLUB = 6
ITEM_ID_HEALING_POTION = 7
ITEM_ID_SPIDER_FANG = 8
ITEM_ID_SPIDER_SILK = 9
ITEM_ID_ADVENTURER_PASS = 10

MONSTER_ID_RAT = 1
MONSTER_ID_SNAKE = 2
MONSTER_ID_GIANT_SPIDER = 3

QUEST_ID_CLEAR_ALCHEMIST_GARDEN = 1
QUEST_ID_CLEAR_FARMERS_FIELD = 2

LOCATION_ID_HOME = 1
LOCATION_ID_TOWN_SQUARE = 2
LOCATION_ID_GUARD_POST = 3
LOCATION_ID_ALCHEMIST_HUT = 4
LOCATION_ID_ALCHEMISTS_GARDEN = 5
LOCATION_ID_FARMHOUSE = 6
LOCATION_ID_FARM_FIELD = 7
LOCATION_ID_BRIDGE = 8
LOCATION_ID_SPIDER_FIELD = 9


def _create_items() -> list:
    return [
        Weapon(
            id=ITEM_ID_RUSTY_SWORD,
            name="Rusty sword",
            name_plural="Rusty swords",
            minimum_damage=0,
            maximum_damage=5,
            price=5,
        ),
        GenericItem(id=ITEM_ID_RAT_TAIL, name="Rat tail", name_plural="Rat tails", price=1),
        GenericItem(
            id=ITEM_ID_PIECE_OF_FUR, name="Piece of fur", name_plural="Pieces of fur", price=1
        ),
        GenericItem(
            id=ITEM_ID_SNAKE_FANG, name="Snake fang", name_plural="Snake fangs", price=1
        ),
        GenericItem(id=ITEM_ID_SNAKESKIN, name="Snakeskin", name_plural="Snakeskins", price=2),
        Weapon(
            id=ITEM_ID_CLUB,
            name="Club",
            name_plural="Clubs",
            minimum_damage=3,
            maximum_damage=10,
            price=8,
        ),
        HealingPotion(
            id=ITEM_ID_HEALING_POTION,
            name="Healing potion",
            name_plural="Healing potions",
            amount_to_heal=5,
            price=3,
        ),
        GenericItem(
            id=ITEM_ID_SPIDER_FANG, name="Spider fang", name_plural="Spider fangs", price=1
        ),
        GenericItem(
            id=ITEM_ID_SPIDER_SILK, name="Spider silk", name_plural="Spider silks", price=1
        ),
        GenericItem(
            id=ITEM_ID_ADVENTURER_PASS,
            name="Adventurer pass",
            name_plural="Adventurer passes",
            price=UNSELLABLE_ITEM_PRICE,
        ),
    ]


def _create_monsters() -> list[MonsterTemplate]:
    return [
        MonsterTemplate(
            id=MONSTER_ID_RAT,
            name="Rat",
            maximum_damage=5,
            reward_experience_points=3,
            reward_gold=10,
            maximum_hit_points=3,
            loot_table=(
                LootItem(item_id=ITEM_ID_RAT_TAIL, drop_percentage=75, is_default_item=False),
                LootItem(item_id=ITEM_ID_PIECE_OF_FUR, drop_percentage=75, is_default_item=True),
            ),
        ),
        MonsterTemplate(
            id=MONSTER_ID_SNAKE,
            name="Snake",
            maximum_damage=5,
            reward_experience_points=3,
            reward_gold=10,
            maximum_hit_points=3,
            loot_table=(
                LootItem(item_id=ITEM_ID_SNAKE_FANG, drop_percentage=75, is_default_item=False),
                LootItem(item_id=ITEM_ID_SNAKESKIN, drop_percentage=75, is_default_item=True),
            ),
        ),
        MonsterTemplate(
            id=MONSTER_ID_GIANT_SPIDER,
            name="Giant spider",
            maximum_damage=20,
            reward_experience_points=5,
            reward_gold=40,
            maximum_hit_points=10,
            loot_table=(
                LootItem(item_id=ITEM_ID_SPIDER_FANG, drop_percentage=75, is_default_item=True),
                LootItem(item_id=ITEM_ID_SPIDER_SILK, drop_percentage=25, is_default_item=False),
            ),
        ),
    ]


def _create_quests() -> list[Quest]:
    return [
        Quest(
            id=QUEST_ID_CLEAR_ALCHEMIST_GARDEN,
            name="Clear the alchemist's garden",
            description=(
                "Kill rats in the alchemist's garden and bring back 3 rat tails. "
                "You will receive a healing potion and 10 gold pieces."
            ),
            completion_items=(QuestCompletionItem(item_id=ITEM_ID_RAT_TAIL, quantity=3),),
            reward_experience_points=20,
            reward_gold=10,
            reward_item_id=ITEM_ID_HEALING_POTION,
        ),
        Quest(
            id=QUEST_ID_CLEAR_FARMERS_FIELD,
            name="Clear the farmer's field",
            description=(
                "Kill snakes in the farmer's field and bring back 3 snake fangs. "
                "You will receive an adventurer's pass and 20 gold pieces."
            ),
            completion_items=(QuestCompletionItem(item_id=ITEM_ID_SNAKE_FANG, quantity=3),),
            reward_experience_points=20,
            reward_gold=20,
            reward_item_id=ITEM_ID_ADVENTURER_PASS,
        ),
    ]


def _create_locations() -> list[Location]:
    bob_the_rat_catcher = Vendor(
        name="Bob the Rat-Catcher",
        stock=(
            VendorStock(item_id=ITEM_ID_PIECE_OF_FUR, quantity=5),
            VendorStock(item_id=ITEM_ID_RAT_TAIL, quantity=3),
            VendorStock(item_id=ITEM_ID_CLUB, quantity=1),
            VendorStock(item_id=ITEM_ID_HEALING_POTION, quantity=2),
        ),
    )

    return [
        Location(
            id=LOCATION_ID_HOME,
            name="Home",
            description="Your house. You really need to clean up the place.",
            location_to_north=LOCATION_ID_TOWN_SQUARE,
        ),
        Location(
            id=LOCATION_ID_TOWN_SQUARE,
            name="Town square",
            description="You see a fountain.",
            location_to_north=LOCATION_ID_ALCHEMIST_HUT,
            location_to_east=LOCATION_ID_GUARD_POST,
            location_to_south=LOCATION_ID_HOME,
            location_to_west=LOCATION_ID_FARMHOUSE,
            vendor_working_here=bob_the_rat_catcher,
        ),
        Location(
            id=LOCATION_ID_GUARD_POST,
            name="Guard post",
            description="There is a large, tough-looking guard here.",
            location_to_east=LOCATION_ID_BRIDGE,
            location_to_west=LOCATION_ID_TOWN_SQUARE,
            item_required_to_enter=ITEM_ID_ADVENTURER_PASS,
        ),
        Location(
            id=LOCATION_ID_ALCHEMIST_HUT,
            name="Alchemist's hut",
            description="There are many strange plants on the shelves.",
            location_to_north=LOCATION_ID_ALCHEMISTS_GARDEN,
            location_to_south=LOCATION_ID_TOWN_SQUARE,
            quest_available_here=QUEST_ID_CLEAR_ALCHEMIST_GARDEN,
        ),
        Location(
            id=LOCATION_ID_ALCHEMISTS_GARDEN,
            name="Alchemist's garden",
            description="Many plants are growing here.",
            location_to_south=LOCATION_ID_ALCHEMIST_HUT,
            monster_living_here=MONSTER_ID_RAT,
        ),
        Location(
            id=LOCATION_ID_FARMHOUSE,
            name="Farmhouse",
            description="There is a small farmhouse, with a farmer in front.",
            location_to_east=LOCATION_ID_TOWN_SQUARE,
            location_to_west=LOCATION_ID_FARM_FIELD,
            quest_available_here=QUEST_ID_CLEAR_FARMERS_FIELD,
        ),
        Location(
            id=LOCATION_ID_FARM_FIELD,
            name="Farmer's field",
            description="You see rows of vegetables growing here.",
            location_to_east=LOCATION_ID_FARMHOUSE,
            monster_living_here=MONSTER_ID_SNAKE,
        ),
        Location(
            id=LOCATION_ID_BRIDGE,
            name="Bridge",
            description="A stone bridge crosses a wide river.",
            location_to_east=LOCATION_ID_SPIDER_FIELD,
            location_to_west=LOCATION_ID_GUARD_POST,
        ),
        Location(
            id=LOCATION_ID_SPIDER_FIELD,
            name="Forest",
            description="You see spider webs covering the trees in this forest.",
            location_to_west=LOCATION_ID_BRIDGE,
            monster_living_here=MONSTER_ID_GIANT_SPIDER,
        ),
    ]


def create_starter_world() -> World:
    """
    Create the complete starter catalog.

    Returns a validated World whose home location is the player's house.
    Each call builds a new, independent catalog.
    """
    return World.build(
        items=_create_items(),
        monsters=_create_monsters(),
        locations=_create_locations(),
        quests=_create_quests(),
        home_location_id=LOCATION_ID_HOME,
        starting_weapon_id=ITEM_ID_RUSTY_SWORD,
    )
