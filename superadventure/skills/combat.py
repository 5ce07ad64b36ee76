"""
Combat Skills.

Stateless rolls used by the combat resolver on the Player:
- Player weapon damage: uniform in [weapon minimum, weapon maximum]
- Monster retaliation: uniform in [0, monster maximum]
- Loot: one percentile roll per loot-table row, with default rows as a
  fallback when nothing drops by chance
"""

from __future__ import annotations

from collections.abc import Sequence

from superadventure.models.item import Weapon
from superadventure.models.monster import LootItem, Monster
from superadventure.skills.dice import RandomSource, roll_percentile


def roll_weapon_damage(weapon: Weapon, source: RandomSource) -> int:
    """Roll the damage a weapon swing does to a monster."""
    return source.number_between(weapon.minimum_damage, weapon.maximum_damage)


def roll_monster_damage(monster: Monster, source: RandomSource) -> int:
    """Roll a monster's counter-attack. A monster can always miss outright."""
    return source.number_between(0, monster.maximum_damage)


def roll_loot(loot_table: Sequence[LootItem], source: RandomSource) -> list[LootItem]:
    """
    Decide which loot-table rows drop from a defeated monster.

    Every row gets its own 1-100 roll and drops when the roll is at or
    below its drop percentage. Only when no row dropped by chance are the
    default rows used instead; defaults never stack on top of chance drops.

    Args:
        loot_table: The monster's loot rows, in table order
        source: Random source for the percentile rolls

    Returns:
        The dropped rows, in table order
    """
    dropped = [
        loot for loot in loot_table if roll_percentile(source) <= loot.drop_percentage
    ]

    if not dropped:
        dropped = [loot for loot in loot_table if loot.is_default_item]

    return dropped
