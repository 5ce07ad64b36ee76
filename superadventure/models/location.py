"""
Location and Vendor models for SuperAdventure.

Locations form a directed graph. Neighbours, required items, quests and
monsters are referenced by catalog ID so the graph can contain cycles
while every node stays immutable.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Direction(str, Enum):
    """Compass directions a location can link to."""

    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"


class VendorStock(BaseModel):
    """An item a vendor offers, with the quantity on display."""

    model_config = ConfigDict(frozen=True)

    item_id: int
    quantity: int = Field(default=1, ge=1)


class Vendor(BaseModel):
    """A trader working at a location."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    stock: tuple[VendorStock, ...] = ()

    def sells(self, item_id: int) -> bool:
        """Check whether this vendor offers an item."""
        return any(entry.item_id == item_id for entry in self.stock)


class Location(BaseModel):
    """A place the player can stand."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str = Field(min_length=1)
    description: str = ""

    location_to_north: int | None = None
    location_to_east: int | None = None
    location_to_south: int | None = None
    location_to_west: int | None = None

    item_required_to_enter: int | None = None
    """Item ID the player must hold to enter."""

    quest_available_here: int | None = None
    monster_living_here: int | None = None
    """Monster template ID spawned on every entry."""

    vendor_working_here: Vendor | None = None

    @property
    def has_a_quest(self) -> bool:
        return self.quest_available_here is not None

    @property
    def has_a_monster(self) -> bool:
        return self.monster_living_here is not None

    def neighbour(self, direction: Direction) -> int | None:
        """Get the location ID linked in a direction, if any."""
        return {
            Direction.NORTH: self.location_to_north,
            Direction.EAST: self.location_to_east,
            Direction.SOUTH: self.location_to_south,
            Direction.WEST: self.location_to_west,
        }[direction]

    def exits(self) -> dict[Direction, int]:
        """All outgoing links, in compass order."""
        return {
            direction: target
            for direction in Direction
            if (target := self.neighbour(direction)) is not None
        }
