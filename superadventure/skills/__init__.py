"""
Stateless Skills for SuperAdventure.

Skills are pure functions that:
- Take catalog models and a RandomSource
- Execute game rules (dice, damage, loot, levelling)
- Return plain results
- NEVER mutate the Player or emit messages
"""

from superadventure.skills.combat import roll_loot, roll_monster_damage, roll_weapon_damage
from superadventure.skills.dice import (
    RandomSource,
    SecureRandomSource,
    number_between,
    roll_percentile,
)
from superadventure.skills.progression import (
    EXPERIENCE_PER_LEVEL,
    HIT_POINTS_PER_LEVEL,
    level_for_experience,
    maximum_hit_points_for_level,
)

__all__ = [
    # Dice
    "RandomSource",
    "SecureRandomSource",
    "number_between",
    "roll_percentile",
    # Combat
    "roll_loot",
    "roll_monster_damage",
    "roll_weapon_damage",
    # Progression
    "EXPERIENCE_PER_LEVEL",
    "HIT_POINTS_PER_LEVEL",
    "level_for_experience",
    "maximum_hit_points_for_level",
]
