"""
Tests for the world catalog and the starter world content.
"""

from __future__ import annotations

import pytest

from superadventure.content import (
    ITEM_ID_ADVENTURER_PASS,
    ITEM_ID_HEALING_POTION,
    ITEM_ID_RAT_TAIL,
    ITEM_ID_RUSTY_SWORD,
    LOCATION_ID_ALCHEMIST_HUT,
    LOCATION_ID_FARMHOUSE,
    LOCATION_ID_GUARD_POST,
    LOCATION_ID_HOME,
    LOCATION_ID_SPIDER_FIELD,
    LOCATION_ID_TOWN_SQUARE,
    MONSTER_ID_GIANT_SPIDER,
    QUEST_ID_CLEAR_ALCHEMIST_GARDEN,
    UnknownContentError,
    World,
    create_starter_world,
)
from superadventure.models import Direction, GenericItem, Location, Quest, QuestCompletionItem, Weapon


class TestStarterWorld:
    """Tests for starter world creation."""

    def test_create_starter_world_returns_world(self, world):
        assert isinstance(world, World)
        assert len(world.items) == 10
        assert len(world.monsters) == 3
        assert len(world.locations) == 9
        assert len(world.quests) == 2

    def test_each_call_is_independent(self):
        assert create_starter_world() is not create_starter_world()

    def test_home_location(self, world):
        assert world.home_location.id == LOCATION_ID_HOME
        assert world.home_location.name == "Home"

    def test_rusty_sword(self, world):
        sword = world.item_by_id(ITEM_ID_RUSTY_SWORD)
        assert isinstance(sword, Weapon)
        assert (sword.minimum_damage, sword.maximum_damage) == (0, 5)
        assert world.starting_weapon_id == ITEM_ID_RUSTY_SWORD

    def test_town_square_links(self, world):
        square = world.location_by_id(LOCATION_ID_TOWN_SQUARE)
        assert square.neighbour(Direction.NORTH) == LOCATION_ID_ALCHEMIST_HUT
        assert square.neighbour(Direction.EAST) == LOCATION_ID_GUARD_POST
        assert square.neighbour(Direction.SOUTH) == LOCATION_ID_HOME
        assert square.neighbour(Direction.WEST) == LOCATION_ID_FARMHOUSE
        assert square.vendor_working_here is not None

    def test_links_are_two_way(self, world):
        """Every exit has a matching exit back."""
        opposite = {
            Direction.NORTH: Direction.SOUTH,
            Direction.SOUTH: Direction.NORTH,
            Direction.EAST: Direction.WEST,
            Direction.WEST: Direction.EAST,
        }
        for location in world.locations.values():
            for direction, target in location.exits().items():
                back = world.location_by_id(target).neighbour(opposite[direction])
                assert back == location.id

    def test_guard_post_requires_pass(self, world):
        assert world.location_by_id(LOCATION_ID_GUARD_POST).item_required_to_enter == (
            ITEM_ID_ADVENTURER_PASS
        )

    def test_forest_has_giant_spider(self, world):
        forest = world.location_by_id(LOCATION_ID_SPIDER_FIELD)
        assert forest.monster_living_here == MONSTER_ID_GIANT_SPIDER

    def test_garden_quest(self, world):
        quest = world.quest_by_id(QUEST_ID_CLEAR_ALCHEMIST_GARDEN)
        assert quest.completion_items[0].item_id == ITEM_ID_RAT_TAIL
        assert quest.completion_items[0].quantity == 3
        assert quest.reward_item_id == ITEM_ID_HEALING_POTION


class TestWorldLookups:
    """Tests for catalog lookups."""

    def test_unknown_id_raises(self, world):
        with pytest.raises(UnknownContentError) as excinfo:
            world.item_by_id(999)
        assert excinfo.value.kind == "item"
        assert excinfo.value.content_id == 999

    def test_unknown_content_is_key_error(self, world):
        with pytest.raises(KeyError):
            world.location_by_id(999)

    def test_unknown_lookup_is_logged(self, world, caplog):
        with pytest.raises(UnknownContentError):
            world.quest_by_id(42)
        assert "quest 42" in caplog.text

    def test_item_by_name(self, world):
        assert world.item_by_name("rat tail").id == ITEM_ID_RAT_TAIL
        assert world.item_by_name("  Rat Tails ").id == ITEM_ID_RAT_TAIL
        assert world.item_by_name("dragon") is None

    def test_catalog_is_read_only(self, world):
        with pytest.raises(TypeError):
            world.items[99] = world.item_by_id(ITEM_ID_RAT_TAIL)


class TestWorldBuild:
    """Tests for catalog validation."""

    def test_minimal_world(self):
        world = World.build(
            items=[GenericItem(id=1, name="Pebble", name_plural="Pebbles")],
            locations=[Location(id=1, name="Room")],
            home_location_id=1,
        )
        assert world.home_location.name == "Room"

    def test_duplicate_ids_rejected(self):
        with pytest.raises(ValueError, match="Duplicate item ID 1"):
            World.build(
                items=[
                    GenericItem(id=1, name="Pebble", name_plural="Pebbles"),
                    GenericItem(id=1, name="Stone", name_plural="Stones"),
                ],
                locations=[Location(id=1, name="Room")],
                home_location_id=1,
            )

    def test_broken_exit_rejected(self):
        with pytest.raises(UnknownContentError):
            World.build(
                items=[],
                locations=[Location(id=1, name="Room", location_to_north=2)],
                home_location_id=1,
            )

    def test_broken_quest_item_rejected(self):
        with pytest.raises(UnknownContentError):
            World.build(
                items=[],
                locations=[Location(id=1, name="Room", quest_available_here=1)],
                quests=[
                    Quest(id=1, name="Fetch", completion_items=(QuestCompletionItem(item_id=5),))
                ],
                home_location_id=1,
            )

    def test_missing_home_rejected(self):
        with pytest.raises(UnknownContentError):
            World.build(items=[], locations=[Location(id=1, name="Room")], home_location_id=2)

    def test_starting_weapon_must_be_a_weapon(self):
        with pytest.raises(ValueError, match="not a weapon"):
            World.build(
                items=[GenericItem(id=1, name="Pebble", name_plural="Pebbles")],
                locations=[Location(id=1, name="Room")],
                home_location_id=1,
                starting_weapon_id=1,
            )

    def test_unknown_starting_weapon_rejected(self):
        with pytest.raises(UnknownContentError):
            World.build(
                items=[],
                locations=[Location(id=1, name="Room")],
                home_location_id=1,
                starting_weapon_id=9,
            )
