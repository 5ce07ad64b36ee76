"""
Core Engine for SuperAdventure.

The engine owns the mutable game state:
- Player aggregate (stats, ledgers, location, active monster)
- Notification channels (property changes, narration)
- Session configuration
"""

from __future__ import annotations

from superadventure.engine.events import EventBus, EventRecorder, Message, PropertyChanged
from superadventure.engine.models import EngineConfig, LogLevel
from superadventure.engine.player import Player

__all__ = [
    # Player
    "Player",
    # Events
    "EventBus",
    "EventRecorder",
    "Message",
    "PropertyChanged",
    # Config
    "EngineConfig",
    "LogLevel",
]
