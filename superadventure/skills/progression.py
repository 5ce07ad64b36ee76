"""
Progression Skills.

Level is derived from experience and never stored; maximum hit points
follow the level.
"""

from __future__ import annotations

EXPERIENCE_PER_LEVEL = 100
HIT_POINTS_PER_LEVEL = 10


def level_for_experience(experience_points: int) -> int:
    """Level 1 covers 0-99 XP, level 2 covers 100-199 XP, and so on."""
    return experience_points // EXPERIENCE_PER_LEVEL + 1


def maximum_hit_points_for_level(level: int) -> int:
    """Maximum hit points granted at a level."""
    return level * HIT_POINTS_PER_LEVEL
