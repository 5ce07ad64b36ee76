"""
Tests for the Player aggregate: stats, inventory and quest ledgers, movement.
"""

from __future__ import annotations

import pytest

from superadventure.content import (
    ITEM_ID_ADVENTURER_PASS,
    ITEM_ID_CLUB,
    ITEM_ID_HEALING_POTION,
    ITEM_ID_PIECE_OF_FUR,
    ITEM_ID_RAT_TAIL,
    ITEM_ID_RUSTY_SWORD,
    LOCATION_ID_ALCHEMIST_HUT,
    LOCATION_ID_ALCHEMISTS_GARDEN,
    LOCATION_ID_BRIDGE,
    LOCATION_ID_GUARD_POST,
    LOCATION_ID_HOME,
    LOCATION_ID_TOWN_SQUARE,
    QUEST_ID_CLEAR_ALCHEMIST_GARDEN,
)
from superadventure.engine import EngineConfig, Player


# =============================================================================
# Creation and Stats
# =============================================================================


class TestDefaultPlayer:
    """Tests for a brand-new player."""

    def test_starting_stats(self, player):
        assert player.current_hit_points == 10
        assert player.maximum_hit_points == 10
        assert player.gold == 20
        assert player.experience_points == 0
        assert player.level == 1

    def test_starting_inventory(self, player):
        """Exactly one entry: the starting weapon, equipped."""
        assert len(player.inventory) == 1
        assert player.inventory[0].item_id == ITEM_ID_RUSTY_SWORD
        assert player.inventory[0].quantity == 1
        assert player.current_weapon.id == ITEM_ID_RUSTY_SWORD
        assert player.current_potion is None

    def test_starts_at_home(self, player):
        assert player.current_location.id == LOCATION_ID_HOME
        assert player.locations_visited == [LOCATION_ID_HOME]
        assert player.current_monster is None
        assert player.quests == []

    def test_config_overrides(self, world):
        config = EngineConfig(
            starting_gold=5, starting_hit_points=15, starting_weapon_id=ITEM_ID_CLUB
        )
        player = Player.create_default(world, config)
        assert player.gold == 5
        assert player.maximum_hit_points == 15
        assert [entry.item_id for entry in player.inventory] == [ITEM_ID_CLUB]
        assert player.current_weapon.id == ITEM_ID_CLUB

    def test_unset_weapon_uses_world_default(self, world):
        player = Player.create_default(world, EngineConfig(starting_weapon_id=None))
        assert player.current_weapon.id == world.starting_weapon_id == ITEM_ID_RUSTY_SWORD

    def test_negative_experience_rejected(self, world):
        with pytest.raises(ValueError):
            Player(
                world,
                current_hit_points=10,
                maximum_hit_points=10,
                gold=0,
                experience_points=-1,
                current_location=world.home_location,
            )

    def test_negative_gold_is_allowed(self, player, recorder):
        player.gold = -1
        assert player.gold == -1
        assert recorder.properties == ["Gold"]


class TestExperience:
    """Tests for experience, level and maximum hit points."""

    def test_level_up(self, player):
        player.add_experience_points(100)
        assert player.level == 2
        assert player.maximum_hit_points == 20

    def test_below_threshold_keeps_level(self, player):
        player.add_experience_points(99)
        assert player.level == 1
        assert player.maximum_hit_points == 10

    def test_does_not_heal(self, player):
        player.add_experience_points(100)
        assert player.current_hit_points == 10

    def test_notification_order(self, player, recorder):
        player.add_experience_points(5)
        assert recorder.properties == ["ExperiencePoints", "Level", "MaximumHitPoints"]

    def test_experience_cannot_decrease(self, player):
        with pytest.raises(ValueError):
            player.add_experience_points(-5)


# =============================================================================
# Inventory Ledger
# =============================================================================


class TestInventory:
    """Tests for adding and removing items."""

    def test_stacking(self, player, world):
        tail = world.item_by_id(ITEM_ID_RAT_TAIL)
        player.add_item_to_inventory(tail)
        player.add_item_to_inventory(tail, 2)

        entries = [entry for entry in player.inventory if entry.item_id == ITEM_ID_RAT_TAIL]
        assert len(entries) == 1
        assert entries[0].quantity == 3
        assert player.item_quantity(tail) == 3

    def test_remove_clamps_and_drops_entry(self, player, world):
        """Removing more than held empties the entry without error."""
        tail = world.item_by_id(ITEM_ID_RAT_TAIL)
        player.add_item_to_inventory(tail, 2)
        player.remove_item_from_inventory(tail, 5)

        assert player.item_quantity(tail) == 0
        assert all(entry.item_id != ITEM_ID_RAT_TAIL for entry in player.inventory)

    def test_partial_remove(self, player, world):
        tail = world.item_by_id(ITEM_ID_RAT_TAIL)
        player.add_item_to_inventory(tail, 3)
        player.remove_item_from_inventory(tail, 2)
        assert player.item_quantity(tail) == 1

    def test_remove_unheld_is_noop(self, player, world, recorder):
        player.remove_item_from_inventory(world.item_by_id(ITEM_ID_RAT_TAIL))
        assert len(player.inventory) == 1
        assert recorder.properties == []

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_bad_quantities_rejected(self, player, world, quantity):
        tail = world.item_by_id(ITEM_ID_RAT_TAIL)
        with pytest.raises(ValueError):
            player.add_item_to_inventory(tail, quantity)
        with pytest.raises(ValueError):
            player.remove_item_from_inventory(tail, quantity)

    def test_no_zero_quantity_entries(self, player, world):
        tail = world.item_by_id(ITEM_ID_RAT_TAIL)
        fur = world.item_by_id(ITEM_ID_PIECE_OF_FUR)
        for _ in range(3):
            player.add_item_to_inventory(tail)
            player.add_item_to_inventory(fur, 2)
            player.remove_item_from_inventory(tail, 2)
            player.remove_item_from_inventory(fur)

        assert all(entry.quantity > 0 for entry in player.inventory)
        ids = [entry.item_id for entry in player.inventory]
        assert len(ids) == len(set(ids))

    def test_inventory_notifications(self, player, world, recorder):
        player.add_item_to_inventory(world.item_by_id(ITEM_ID_CLUB))
        player.add_item_to_inventory(world.item_by_id(ITEM_ID_HEALING_POTION))
        player.add_item_to_inventory(world.item_by_id(ITEM_ID_RAT_TAIL))
        assert recorder.properties == ["Inventory", "Weapons", "Inventory", "Potions", "Inventory"]

    def test_required_item(self, player, world):
        guard_post = world.location_by_id(LOCATION_ID_GUARD_POST)
        assert player.has_required_item_to_enter_this_location(world.home_location)
        assert not player.has_required_item_to_enter_this_location(guard_post)

        player.add_item_to_inventory(world.item_by_id(ITEM_ID_ADVENTURER_PASS))
        assert player.has_required_item_to_enter_this_location(guard_post)


class TestWeaponAndPotionSelection:
    """Tests for the current weapon and potion."""

    def test_first_weapon_stays_equipped(self, player, world):
        """Picking up a second weapon does not change the selection."""
        player.add_item_to_inventory(world.item_by_id(ITEM_ID_CLUB))
        assert [weapon.id for weapon in player.weapons] == [ITEM_ID_RUSTY_SWORD, ITEM_ID_CLUB]
        assert player.current_weapon.id == ITEM_ID_RUSTY_SWORD

    def test_selection_moves_to_next_weapon(self, player, world):
        club = world.item_by_id(ITEM_ID_CLUB)
        player.add_item_to_inventory(club)
        player.remove_item_from_inventory(world.item_by_id(ITEM_ID_RUSTY_SWORD))
        assert player.current_weapon == club

    def test_selection_cleared_with_last_weapon(self, player, world):
        player.remove_item_from_inventory(world.item_by_id(ITEM_ID_RUSTY_SWORD))
        assert player.weapons == []
        assert player.current_weapon is None

    def test_first_potion_selected(self, player, world):
        potion = world.item_by_id(ITEM_ID_HEALING_POTION)
        player.add_item_to_inventory(potion, 2)
        assert player.potions == [potion]
        assert player.current_potion == potion

        player.remove_item_from_inventory(potion, 2)
        assert player.current_potion is None

    def test_equip_held_weapon(self, player, world):
        club = world.item_by_id(ITEM_ID_CLUB)
        player.add_item_to_inventory(club)
        player.current_weapon = club
        assert player.current_weapon == club

    def test_cannot_equip_unheld_weapon(self, player, world):
        with pytest.raises(ValueError):
            player.current_weapon = world.item_by_id(ITEM_ID_CLUB)


# =============================================================================
# Quest Ledger
# =============================================================================


class TestQuests:
    """Tests for accepting and completing quests."""

    @pytest.fixture
    def quest(self, world):
        return world.quest_by_id(QUEST_ID_CLEAR_ALCHEMIST_GARDEN)

    def test_quest_predicates(self, player, quest):
        assert player.player_does_not_have_this_quest(quest)
        assert player.player_has_not_completed(quest)

        player.add_quest_entry(quest)
        assert not player.player_does_not_have_this_quest(quest)
        assert player.player_has_not_completed(quest)

    def test_give_quest_narration(self, player, quest, recorder):
        player.give_quest_to_player(quest)

        assert recorder.lines == [
            "You receive the Clear the alchemist's garden quest.",
            quest.description,
            "To complete it, return with:",
            "3 Rat tails",
        ]
        assert not any(message.add_extra_new_line for message in recorder.messages)
        assert "Quests" in recorder.properties

    def test_has_all_completion_items(self, player, quest, world):
        tail = world.item_by_id(ITEM_ID_RAT_TAIL)
        player.add_item_to_inventory(tail, 2)
        assert not player.has_all_quest_completion_items(quest)
        player.add_item_to_inventory(tail)
        assert player.has_all_quest_completion_items(quest)

    def test_remove_completion_items(self, player, quest, world):
        tail = world.item_by_id(ITEM_ID_RAT_TAIL)
        player.add_item_to_inventory(tail, 4)
        player.remove_quest_completion_items(quest)
        assert player.item_quantity(tail) == 1

    def test_mark_completed_is_idempotent(self, player, quest):
        player.add_quest_entry(quest)
        player.mark_quest_completed(quest)
        player.mark_quest_completed(quest)

        assert len(player.quests) == 1
        assert player.quests[0].is_completed
        assert not player.player_has_not_completed(quest)

    def test_mark_unheld_quest_is_noop(self, player, quest):
        player.mark_quest_completed(quest)
        assert player.quests == []

    def test_complete_and_reward(self, player, quest, world, recorder):
        player.add_quest_entry(quest)
        player.add_item_to_inventory(world.item_by_id(ITEM_ID_RAT_TAIL), 3)
        recorder.clear()

        player.complete_quest_and_give_rewards(quest)

        assert recorder.lines == [
            "",
            "You complete the Clear the alchemist's garden quest.",
            "You receive: ",
            "20 experience points",
            "10 gold",
            "Healing potion",
        ]
        assert not any(message.add_extra_new_line for message in recorder.messages)
        assert player.experience_points == 20
        assert player.gold == 30
        assert player.item_quantity(world.item_by_id(ITEM_ID_RAT_TAIL)) == 0
        assert player.current_potion.id == ITEM_ID_HEALING_POTION
        assert player.quests[0].is_completed


# =============================================================================
# Movement
# =============================================================================


class TestMovement:
    """Tests for moving between locations."""

    def test_move_north(self, player, recorder):
        player.move_north()
        assert player.current_location.id == LOCATION_ID_TOWN_SQUARE
        assert recorder.properties[0] == "CurrentLocation"
        assert recorder.lines == []

    def test_no_exit_is_noop(self, player, recorder):
        player.move_south()
        assert player.current_location.id == LOCATION_ID_HOME
        assert recorder.properties == []
        assert recorder.lines == []

    def test_blocked_without_required_item(self, player, world, recorder):
        """Entry is refused with exactly one message and no state change."""
        player.move_north()
        recorder.clear()

        player.move_east()

        assert player.current_location.id == LOCATION_ID_TOWN_SQUARE
        assert recorder.lines == ["You must have a Adventurer pass to enter this location."]
        assert recorder.properties == []
        assert LOCATION_ID_GUARD_POST not in player.locations_visited

    def test_entry_with_required_item(self, player, world):
        player.add_item_to_inventory(world.item_by_id(ITEM_ID_ADVENTURER_PASS))
        player.move_north()
        player.move_east()
        player.move_east()
        assert player.current_location.id == LOCATION_ID_BRIDGE

    def test_moving_heals(self, player):
        player.current_hit_points = 2
        player.move_north()
        assert player.current_hit_points == player.maximum_hit_points

    def test_quest_offered_once(self, player, world, recorder):
        hut = world.location_by_id(LOCATION_ID_ALCHEMIST_HUT)
        player.move_to(hut)
        assert recorder.lines[0] == "You receive the Clear the alchemist's garden quest."

        recorder.clear()
        player.move_to(hut)
        assert recorder.lines == []
        assert len(player.quests) == 1

    def test_quest_completed_on_return(self, player, world, recorder):
        hut = world.location_by_id(LOCATION_ID_ALCHEMIST_HUT)
        player.move_to(hut)
        player.add_item_to_inventory(world.item_by_id(ITEM_ID_RAT_TAIL), 3)
        recorder.clear()

        player.move_to(hut)

        assert recorder.lines[:2] == ["", "You complete the Clear the alchemist's garden quest."]
        assert player.quests[0].is_completed

        recorder.clear()
        player.move_to(hut)
        assert recorder.lines == []

    def test_monster_spawns_on_entry(self, player, world, recorder):
        player.move_to(world.location_by_id(LOCATION_ID_ALCHEMISTS_GARDEN))
        assert player.current_monster is not None
        assert player.current_monster.name == "Rat"
        assert player.current_monster.current_hit_points == 3
        assert recorder.lines == ["You see a Rat"]

    def test_leaving_ends_encounter(self, player, world):
        player.move_to(world.location_by_id(LOCATION_ID_ALCHEMISTS_GARDEN))
        player.move_south()
        assert player.current_location.id == LOCATION_ID_ALCHEMIST_HUT
        assert player.current_monster is None

    def test_locations_visited(self, player):
        player.move_north()
        player.move_south()
        player.move_north()
        player.move_north()
        assert player.locations_visited == [
            LOCATION_ID_HOME,
            LOCATION_ID_TOWN_SQUARE,
            LOCATION_ID_ALCHEMIST_HUT,
        ]

    def test_move_home(self, player):
        player.move_north()
        player.move_home()
        assert player.current_location.id == LOCATION_ID_HOME
