"""
Player aggregate for SuperAdventure.

The Player is the root of all mutable game state: hit points, gold,
experience, the inventory and quest ledgers, the current location and
the active monster. Every game action is a method here; every change a
presentation layer must show is published on the Player's EventBus,
either as a PropertyChanged name or as a narration Message.
"""

from __future__ import annotations

import logging

from superadventure.content.world import World
from superadventure.engine.events import EventBus, Message, PropertyChanged
from superadventure.engine.models import EngineConfig
from superadventure.models import (
    Direction,
    HealingPotion,
    InventoryItem,
    Item,
    Location,
    Monster,
    PlayerQuest,
    Quest,
    Weapon,
    is_usable_in_battle,
)
from superadventure.skills.combat import roll_loot, roll_monster_damage, roll_weapon_damage
from superadventure.skills.dice import RandomSource, SecureRandomSource
from superadventure.skills.progression import level_for_experience, maximum_hit_points_for_level

logger = logging.getLogger(__name__)


class Player:
    """
    The single player of a session.

    Holds non-owning references into the World catalog and exclusively
    owns its ledgers and active monster. The current weapon and potion
    are stored as item IDs into the inventory, so removing an item can
    never leave a dangling selection.
    """

    def __init__(
        self,
        world: World,
        *,
        current_hit_points: int,
        maximum_hit_points: int,
        gold: int,
        experience_points: int,
        current_location: Location,
        rng: RandomSource | None = None,
        events: EventBus | None = None,
    ) -> None:
        if current_hit_points < 0 or maximum_hit_points < 0:
            raise ValueError("Hit points cannot be negative")
        if experience_points < 0:
            raise ValueError("Experience points cannot be negative")

        self.world = world
        self.rng: RandomSource = rng or SecureRandomSource()
        self.events = events or EventBus()

        self._current_hit_points = current_hit_points
        self._maximum_hit_points = maximum_hit_points
        # Negative gold is tolerated; nothing in the engine drives it below zero.
        self._gold = gold
        self._experience_points = experience_points
        self._current_location = current_location

        self.inventory: list[InventoryItem] = []
        self.quests: list[PlayerQuest] = []
        self.locations_visited: list[int] = []

        self._current_weapon_id: int | None = None
        self._current_potion_id: int | None = None
        self._current_monster: Monster | None = None

    @classmethod
    def create_default(
        cls,
        world: World,
        config: EngineConfig | None = None,
        *,
        rng: RandomSource | None = None,
        events: EventBus | None = None,
    ) -> Player:
        """
        Create a brand-new player at the world's home location.

        Starts with 10/10 hit points, 20 gold, no experience and the
        world's starting weapon. Stats and the weapon can be overridden
        through EngineConfig; a weapon ID missing from the catalog is
        skipped with a warning.
        """
        config = config or EngineConfig()
        home = world.home_location
        player = cls(
            world,
            current_hit_points=config.starting_hit_points,
            maximum_hit_points=config.starting_hit_points,
            gold=config.starting_gold,
            experience_points=config.starting_experience_points,
            current_location=home,
            rng=rng,
            events=events,
        )

        weapon_id = config.starting_weapon_id
        if weapon_id is None:
            weapon_id = world.starting_weapon_id
        if weapon_id is not None:
            if weapon_id in world.items:
                player.add_item_to_inventory(world.items[weapon_id])
            else:
                logger.warning("Starting weapon %s is not in the world catalog", weapon_id)

        player.record_visit(home.id)
        return player

    # =========================================================================
    # Notifications
    # =========================================================================

    def _notify(self, property_name: str) -> None:
        self.events.publish(PropertyChanged(property_name))

    def _raise_message(self, text: str, add_extra_new_line: bool = False) -> None:
        self.events.publish(Message(text, add_extra_new_line))

    def _raise_inventory_changed(self, item: Item) -> None:
        self._notify("Inventory")
        match item:
            case Weapon():
                self._notify("Weapons")
            case HealingPotion():
                self._notify("Potions")
            case _:
                pass

    # =========================================================================
    # Stats
    # =========================================================================

    @property
    def current_hit_points(self) -> int:
        return self._current_hit_points

    @current_hit_points.setter
    def current_hit_points(self, value: int) -> None:
        self._current_hit_points = value
        self._notify("CurrentHitPoints")

    @property
    def maximum_hit_points(self) -> int:
        return self._maximum_hit_points

    @maximum_hit_points.setter
    def maximum_hit_points(self, value: int) -> None:
        self._maximum_hit_points = value
        self._notify("MaximumHitPoints")

    @property
    def gold(self) -> int:
        return self._gold

    @gold.setter
    def gold(self, value: int) -> None:
        self._gold = value
        self._notify("Gold")

    @property
    def experience_points(self) -> int:
        return self._experience_points

    @property
    def level(self) -> int:
        """Derived from experience; never stored."""
        return level_for_experience(self._experience_points)

    def add_experience_points(self, experience_points_to_add: int) -> None:
        """Gain experience; maximum hit points are reset to level x 10."""
        if experience_points_to_add < 0:
            raise ValueError("Experience points can only increase")

        self._experience_points += experience_points_to_add
        self._notify("ExperiencePoints")
        self._notify("Level")
        self.maximum_hit_points = maximum_hit_points_for_level(self.level)

    def completely_heal(self) -> None:
        self.current_hit_points = self.maximum_hit_points

    @property
    def current_location(self) -> Location:
        return self._current_location

    @current_location.setter
    def current_location(self, location: Location) -> None:
        self._current_location = location
        self._notify("CurrentLocation")

    @property
    def current_monster(self) -> Monster | None:
        """The monster being fought, if any."""
        return self._current_monster

    def record_visit(self, location_id: int) -> None:
        """Remember a location for the map. Idempotent."""
        if location_id not in self.locations_visited:
            self.locations_visited.append(location_id)

    # =========================================================================
    # Inventory ledger
    # =========================================================================

    def _find_inventory_item(self, item_id: int) -> InventoryItem | None:
        for inventory_item in self.inventory:
            if inventory_item.item_id == item_id:
                return inventory_item
        return None

    @property
    def weapons(self) -> list[Weapon]:
        return [ii.item for ii in self.inventory if isinstance(ii.item, Weapon)]

    @property
    def potions(self) -> list[HealingPotion]:
        return [ii.item for ii in self.inventory if isinstance(ii.item, HealingPotion)]

    @property
    def current_weapon(self) -> Weapon | None:
        if self._current_weapon_id is None:
            return None
        entry = self._find_inventory_item(self._current_weapon_id)
        return entry.item if entry is not None else None

    @current_weapon.setter
    def current_weapon(self, weapon: Weapon | None) -> None:
        if weapon is not None and self._find_inventory_item(weapon.id) is None:
            raise ValueError(f"Cannot equip {weapon.name}: not in inventory")
        self._current_weapon_id = weapon.id if weapon is not None else None

    @property
    def current_potion(self) -> HealingPotion | None:
        if self._current_potion_id is None:
            return None
        entry = self._find_inventory_item(self._current_potion_id)
        return entry.item if entry is not None else None

    @current_potion.setter
    def current_potion(self, potion: HealingPotion | None) -> None:
        if potion is not None and self._find_inventory_item(potion.id) is None:
            raise ValueError(f"Cannot select {potion.name}: not in inventory")
        self._current_potion_id = potion.id if potion is not None else None

    def add_item_to_inventory(self, item: Item, quantity: int = 1) -> None:
        """
        Add items, stacking onto an existing entry for the same item ID.

        The first weapon picked up becomes the current weapon, and the
        first potion the current potion. Stacking never changes the
        selection.
        """
        if quantity < 1:
            raise ValueError(f"Quantity to add must be positive, got {quantity}")

        entry = self._find_inventory_item(item.id)
        if entry is None:
            match item:
                case Weapon() if not self.weapons:
                    self._current_weapon_id = item.id
                case HealingPotion() if not self.potions:
                    self._current_potion_id = item.id
                case _:
                    pass
            self.inventory.append(InventoryItem(item=item, quantity=quantity))
        else:
            entry.quantity += quantity

        self._raise_inventory_changed(item)

    def remove_item_from_inventory(self, item: Item, quantity: int = 1) -> None:
        """
        Remove items, flooring at zero and dropping empty entries.

        Removing an item that is not held does nothing. When the last unit
        of the selected weapon or potion goes, the selection moves to the
        next held item of the same kind, or is cleared.
        """
        if quantity < 1:
            raise ValueError(f"Quantity to remove must be positive, got {quantity}")

        entry = self._find_inventory_item(item.id)
        if entry is None:
            return

        entry.quantity = max(0, entry.quantity - quantity)
        if entry.quantity == 0:
            self.inventory.remove(entry)
            if self._current_weapon_id == item.id:
                remaining = self.weapons
                self._current_weapon_id = remaining[0].id if remaining else None
            if self._current_potion_id == item.id:
                remaining = self.potions
                self._current_potion_id = remaining[0].id if remaining else None

        self._raise_inventory_changed(item)

    def item_quantity(self, item: Item) -> int:
        entry = self._find_inventory_item(item.id)
        return entry.quantity if entry is not None else 0

    def has_required_item_to_enter_this_location(self, location: Location) -> bool:
        if location.item_required_to_enter is None:
            return True
        return self._find_inventory_item(location.item_required_to_enter) is not None

    def has_all_quest_completion_items(self, quest: Quest) -> bool:
        """Check that every required item is held in at least the required quantity."""
        for completion_item in quest.completion_items:
            entry = self._find_inventory_item(completion_item.item_id)
            if entry is None or entry.quantity < completion_item.quantity:
                return False
        return True

    def remove_quest_completion_items(self, quest: Quest) -> None:
        """Surrender a quest's completion items. Missing items are skipped."""
        for completion_item in quest.completion_items:
            entry = self._find_inventory_item(completion_item.item_id)
            if entry is not None:
                self.remove_item_from_inventory(entry.item, completion_item.quantity)

    # =========================================================================
    # Quest ledger
    # =========================================================================

    def _find_player_quest(self, quest_id: int) -> PlayerQuest | None:
        for player_quest in self.quests:
            if player_quest.quest_id == quest_id:
                return player_quest
        return None

    def player_does_not_have_this_quest(self, quest: Quest) -> bool:
        return self._find_player_quest(quest.id) is None

    def player_has_not_completed(self, quest: Quest) -> bool:
        player_quest = self._find_player_quest(quest.id)
        return not (player_quest is not None and player_quest.is_completed)

    def add_quest_entry(self, quest: Quest, is_completed: bool = False) -> PlayerQuest:
        """Add a quest to the ledger without narration (used when loading saves)."""
        player_quest = self._find_player_quest(quest.id)
        if player_quest is None:
            player_quest = PlayerQuest(quest=quest, is_completed=is_completed)
            self.quests.append(player_quest)
        else:
            player_quest.is_completed = player_quest.is_completed or is_completed
        self._notify("Quests")
        return player_quest

    def give_quest_to_player(self, quest: Quest) -> None:
        """Accept a quest and narrate what it asks for."""
        self._raise_message(f"You receive the {quest.name} quest.")
        self._raise_message(quest.description)
        self._raise_message("To complete it, return with:")

        for completion_item in quest.completion_items:
            item = self.world.item_by_id(completion_item.item_id)
            self._raise_message(
                f"{completion_item.quantity} {item.display_name(completion_item.quantity)}"
            )

        self.add_quest_entry(quest)

    def complete_quest_and_give_rewards(self, quest: Quest) -> None:
        """Hand in the completion items, then collect experience, gold and the reward item."""
        reward_item = (
            self.world.item_by_id(quest.reward_item_id)
            if quest.reward_item_id is not None
            else None
        )

        # Set apart from the quest offer or travel text that came before.
        self._raise_message("")
        self._raise_message(f"You complete the {quest.name} quest.")

        self.remove_quest_completion_items(quest)

        self._raise_message("You receive: ")
        self._raise_message(f"{quest.reward_experience_points} experience points")
        self._raise_message(f"{quest.reward_gold} gold")
        if reward_item is not None:
            self._raise_message(reward_item.name)

        self.add_experience_points(quest.reward_experience_points)
        self.gold += quest.reward_gold

        if reward_item is not None:
            self.add_item_to_inventory(reward_item)

        self.mark_quest_completed(quest)

    def mark_quest_completed(self, quest: Quest) -> None:
        """Flag a held quest as completed. Does nothing for quests not in the ledger."""
        player_quest = self._find_player_quest(quest.id)
        if player_quest is not None and not player_quest.is_completed:
            player_quest.is_completed = True
            self._notify("Quests")

    # =========================================================================
    # Movement
    # =========================================================================

    def move_north(self) -> None:
        self._move(Direction.NORTH)

    def move_east(self) -> None:
        self._move(Direction.EAST)

    def move_south(self) -> None:
        self._move(Direction.SOUTH)

    def move_west(self) -> None:
        self._move(Direction.WEST)

    def _move(self, direction: Direction) -> None:
        target = self.current_location.neighbour(direction)
        if target is not None:
            self.move_to(self.world.location_by_id(target))

    def move_home(self) -> None:
        self.move_to(self.world.home_location)

    def move_to(self, new_location: Location) -> None:
        """
        Enter a location.

        Entry is refused, with no state change, when a required item is
        missing. Otherwise the player is fully healed, the location's
        quest is offered or completed, and its monster (if any) spawns
        fresh. Entering a location without a monster ends any encounter.
        """
        if not self.has_required_item_to_enter_this_location(new_location):
            required = self.world.item_by_id(new_location.item_required_to_enter)
            self._raise_message(f"You must have a {required.name} to enter this location.")
            return

        self.current_location = new_location
        self.record_visit(new_location.id)

        self.completely_heal()

        if new_location.has_a_quest:
            quest = self.world.quest_by_id(new_location.quest_available_here)
            if self.player_does_not_have_this_quest(quest):
                self.give_quest_to_player(quest)
            elif self.player_has_not_completed(quest) and self.has_all_quest_completion_items(
                quest
            ):
                self.complete_quest_and_give_rewards(quest)

        if new_location.has_a_monster:
            template = self.world.monster_by_id(new_location.monster_living_here)
            self._current_monster = template.new_instance()
            self._raise_message(f"You see a {self._current_monster.name}")
        else:
            self._current_monster = None

    # =========================================================================
    # Combat
    # =========================================================================

    def _can_fight_with(self, item: Item) -> bool:
        if self._current_monster is None:
            self._raise_message("There is nothing here to fight.")
            return False
        if self._find_inventory_item(item.id) is None:
            self._raise_message(f"You do not have a {item.name}.")
            return False
        return True

    def use_item_in_battle(self, item: Item) -> None:
        """Use a weapon or potion; other items have no battle use and do nothing."""
        if not is_usable_in_battle(item):
            logger.debug("%s has no use in battle", item.name)
            return

        match item:
            case Weapon():
                self.use_weapon(item)
            case HealingPotion():
                self.use_potion(item)

    def use_weapon(self, weapon: Weapon) -> None:
        """
        Swing a weapon at the active monster; one round of combat.

        The player strikes first. A killed monster pays out experience,
        gold and loot, then the location is re-entered, which heals the
        player and spawns the next monster. A surviving monster strikes
        back.
        """
        if not self._can_fight_with(weapon):
            return
        monster = self._current_monster

        damage_to_monster = roll_weapon_damage(weapon, self.rng)
        monster.current_hit_points -= damage_to_monster

        if not monster.is_dead:
            self._raise_message(f"You hit the {monster.name} for {damage_to_monster} points.")
            self._monster_attacks(monster)
            return

        self._raise_message(
            f"You hit the {monster.name} for {damage_to_monster} points.",
            add_extra_new_line=True,
        )
        self._raise_message(f"You defeated the {monster.name}")

        dropped = roll_loot(monster.loot_table, self.rng)
        loot = [self.world.item_by_id(row.item_id) for row in dropped]

        self.add_experience_points(monster.reward_experience_points)
        self._raise_message(f"You receive {monster.reward_experience_points} experience points")

        self.gold += monster.reward_gold
        self._raise_message(f"You receive {monster.reward_gold} gold", add_extra_new_line=not loot)

        for index, item in enumerate(loot):
            self.add_item_to_inventory(item)
            self._raise_message(
                f"You loot 1 {item.display_name(1)}",
                add_extra_new_line=index == len(loot) - 1,
            )

        logger.debug("Player defeated %s and looted %d item(s)", monster.name, len(loot))

        self.move_to(self.current_location)

    def use_potion(self, potion: HealingPotion) -> None:
        """Drink a potion; costs the player's turn, so the monster strikes back."""
        if not self._can_fight_with(potion):
            return
        monster = self._current_monster

        self.current_hit_points = min(
            self.current_hit_points + potion.amount_to_heal, self.maximum_hit_points
        )

        self.remove_item_from_inventory(potion, 1)

        self._raise_message(f"You drink a {potion.name}")

        self._monster_attacks(monster)

    def _monster_attacks(self, monster: Monster) -> None:
        damage_to_player = roll_monster_damage(monster, self.rng)

        self._raise_message(f"The {monster.name} did {damage_to_player} points of damage.")

        self.current_hit_points -= damage_to_player

        if self.current_hit_points <= 0:
            self._raise_message(f"The {monster.name} killed you.")
            self.move_home()
