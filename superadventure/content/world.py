"""
World Catalog for SuperAdventure.

The World is the closed universe of game content: every item, monster
template, location and quest, keyed by integer ID. It is built once,
checked for broken references, and shared read-only by every Player.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TypeVar

from superadventure.models import Item, Location, MonsterTemplate, Quest, Weapon

logger = logging.getLogger(__name__)

T = TypeVar("T")


class UnknownContentError(KeyError):
    """A catalog ID that does not resolve. Always a content defect."""

    def __init__(self, kind: str, content_id: int) -> None:
        super().__init__(f"No {kind} with ID {content_id} in the world catalog")
        self.kind = kind
        self.content_id = content_id


def _index(kind: str, entries: Iterable[T]) -> Mapping[int, T]:
    """Key entries by ID, rejecting duplicates."""
    by_id: dict[int, T] = {}
    for entry in entries:
        if entry.id in by_id:
            raise ValueError(f"Duplicate {kind} ID {entry.id}")
        by_id[entry.id] = entry
    return MappingProxyType(by_id)


@dataclass(frozen=True)
class World:
    """
    Immutable registry of all game content.

    Construct with `World.build(...)`, which validates that every
    cross-reference (neighbours, required items, quests, monsters, loot,
    rewards, vendor stock) resolves.
    """

    items: Mapping[int, Item]
    monsters: Mapping[int, MonsterTemplate]
    locations: Mapping[int, Location]
    quests: Mapping[int, Quest]
    home_location_id: int
    starting_weapon_id: int | None = None

    @classmethod
    def build(
        cls,
        *,
        items: Iterable[Item],
        monsters: Iterable[MonsterTemplate] = (),
        locations: Iterable[Location],
        quests: Iterable[Quest] = (),
        home_location_id: int,
        starting_weapon_id: int | None = None,
    ) -> World:
        """
        Build and validate a catalog.

        Raises:
            ValueError: If two entries of one kind share an ID, or the
                starting weapon is not a Weapon
            UnknownContentError: If any reference does not resolve
        """
        world = cls(
            items=_index("item", items),
            monsters=_index("monster", monsters),
            locations=_index("location", locations),
            quests=_index("quest", quests),
            home_location_id=home_location_id,
            starting_weapon_id=starting_weapon_id,
        )
        world.validate()
        return world

    # Lookups
    def item_by_id(self, item_id: int) -> Item:
        return self._lookup(self.items, "item", item_id)

    def monster_by_id(self, monster_id: int) -> MonsterTemplate:
        return self._lookup(self.monsters, "monster", monster_id)

    def location_by_id(self, location_id: int) -> Location:
        return self._lookup(self.locations, "location", location_id)

    def quest_by_id(self, quest_id: int) -> Quest:
        return self._lookup(self.quests, "quest", quest_id)

    @property
    def home_location(self) -> Location:
        return self.location_by_id(self.home_location_id)

    def item_by_name(self, name: str) -> Item | None:
        """Find an item by singular or plural name, ignoring case."""
        wanted = name.strip().lower()
        for item in self.items.values():
            if wanted in (item.name.lower(), item.name_plural.lower()):
                return item
        return None

    @staticmethod
    def _lookup(table: Mapping[int, T], kind: str, content_id: int) -> T:
        try:
            return table[content_id]
        except KeyError:
            logger.error("World catalog lookup failed: %s %s", kind, content_id)
            raise UnknownContentError(kind, content_id) from None

    def validate(self) -> None:
        """Resolve every cross-reference once, failing on the first broken one."""
        self.location_by_id(self.home_location_id)
        if self.starting_weapon_id is not None and not isinstance(
            self.item_by_id(self.starting_weapon_id), Weapon
        ):
            raise ValueError(f"Starting item {self.starting_weapon_id} is not a weapon")

        for monster in self.monsters.values():
            for loot in monster.loot_table:
                self.item_by_id(loot.item_id)

        for quest in self.quests.values():
            for completion_item in quest.completion_items:
                self.item_by_id(completion_item.item_id)
            if quest.reward_item_id is not None:
                self.item_by_id(quest.reward_item_id)

        for location in self.locations.values():
            for target in location.exits().values():
                self.location_by_id(target)
            if location.item_required_to_enter is not None:
                self.item_by_id(location.item_required_to_enter)
            if location.quest_available_here is not None:
                self.quest_by_id(location.quest_available_here)
            if location.monster_living_here is not None:
                self.monster_by_id(location.monster_living_here)
            if location.vendor_working_here is not None:
                for stock in location.vendor_working_here.stock:
                    self.item_by_id(stock.item_id)
