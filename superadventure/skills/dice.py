"""
Random Number Skill.

Provides fair, cryptographically random integers for combat and loot
rolls. A plain linear generator is avoided so play-testing does not show
repeating patterns.
"""

from __future__ import annotations

import secrets
from typing import Protocol


class RandomSource(Protocol):
    """Interface for anything that can roll an inclusive integer range."""

    def number_between(self, minimum: int, maximum: int) -> int:
        """Return a uniformly distributed integer in [minimum, maximum]."""
        ...


def number_between(minimum: int, maximum: int) -> int:
    """
    Roll an integer between two bounds, inclusive on both ends.

    Args:
        minimum: Lowest possible result
        maximum: Highest possible result

    Returns:
        A uniformly distributed integer in [minimum, maximum]

    Examples:
        >>> number_between(1, 100)  # percentile roll
        >>> number_between(0, 5)    # a rat's bite
    """
    if minimum > maximum:
        raise ValueError(f"Invalid range: minimum {minimum} is greater than maximum {maximum}")

    # randbelow is unbiased, unlike scaling a single random byte
    return minimum + secrets.randbelow(maximum - minimum + 1)


class SecureRandomSource:
    """RandomSource backed by the operating system's secure generator."""

    def number_between(self, minimum: int, maximum: int) -> int:
        return number_between(minimum, maximum)


def roll_percentile(source: RandomSource) -> int:
    """Convenience function for 1-100 rolls."""
    return source.number_between(1, 100)
