"""
Console interface for SuperAdventure.
"""

from __future__ import annotations

from superadventure.cli.repl import Command, GameREPL, GameState, main

__all__ = [
    "Command",
    "GameREPL",
    "GameState",
    "main",
]
