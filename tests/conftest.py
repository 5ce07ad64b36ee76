"""
Shared fixtures for SuperAdventure tests.
"""

from __future__ import annotations

import pytest

from superadventure.content import World, create_starter_world
from superadventure.engine import EventBus, EventRecorder, Player


class FixedRandomSource:
    """
    RandomSource that replays scripted values.

    Each roll takes the next queued value, clamped into the requested
    range. Once the queue is empty every roll returns the range minimum.
    """

    def __init__(self, *values: int) -> None:
        self.values = list(values)
        self.calls: list[tuple[int, int]] = []

    def push(self, *values: int) -> None:
        self.values.extend(values)

    def number_between(self, minimum: int, maximum: int) -> int:
        self.calls.append((minimum, maximum))
        if not self.values:
            return minimum
        return max(minimum, min(maximum, self.values.pop(0)))


@pytest.fixture
def world() -> World:
    """A fresh starter world."""
    return create_starter_world()


@pytest.fixture
def rng() -> FixedRandomSource:
    """Scripted random source; queue rolls with rng.push(...)."""
    return FixedRandomSource()


@pytest.fixture
def events() -> EventBus:
    return EventBus()


@pytest.fixture
def player(world, rng, events) -> Player:
    """A default player standing at home."""
    return Player.create_default(world, rng=rng, events=events)


@pytest.fixture
def recorder(player) -> EventRecorder:
    """Records everything the player emits after creation."""
    return EventRecorder(player.events)
