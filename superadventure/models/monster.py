"""
Monster models for SuperAdventure.

A MonsterTemplate is the catalog definition; a Monster is the mutable
per-encounter copy the player fights. Templates never change, so each
encounter starts from full hit points and a fresh loot table.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class LootItem(BaseModel):
    """One row of a monster's loot table."""

    model_config = ConfigDict(frozen=True)

    item_id: int
    drop_percentage: int = Field(ge=0, le=100)
    """Chance (percent) that this row drops on a kill."""

    is_default_item: bool = False
    """Dropped only when no row was selected by chance."""


class MonsterTemplate(BaseModel):
    """Catalog definition of a monster."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str = Field(min_length=1)
    maximum_damage: int = Field(ge=0)
    reward_experience_points: int = Field(ge=0)
    reward_gold: int = Field(ge=0)
    maximum_hit_points: int = Field(ge=1)
    loot_table: tuple[LootItem, ...] = ()

    def new_instance(self) -> Monster:
        """Create a fresh encounter copy at full hit points."""
        return Monster(
            template_id=self.id,
            name=self.name,
            maximum_damage=self.maximum_damage,
            reward_experience_points=self.reward_experience_points,
            reward_gold=self.reward_gold,
            maximum_hit_points=self.maximum_hit_points,
            current_hit_points=self.maximum_hit_points,
            loot_table=list(self.loot_table),
        )


class Monster(BaseModel):
    """
    An active monster.

    Owned by the Player for the duration of one encounter and never
    persisted.
    """

    template_id: int
    name: str
    maximum_damage: int
    reward_experience_points: int
    reward_gold: int
    maximum_hit_points: int
    current_hit_points: int
    loot_table: list[LootItem] = Field(default_factory=list)

    @property
    def is_dead(self) -> bool:
        return self.current_hit_points <= 0
