"""
Engine configuration for SuperAdventure.

Settings can be passed explicitly or read from the environment:
    SUPERADVENTURE_SAVE_PATH: Save file location (default: PlayerData.xml)
    SUPERADVENTURE_LOG_LEVEL: Logging level name (default: WARNING)
"""

from __future__ import annotations

import os
from typing import Literal

from pydantic import BaseModel, Field

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class EngineConfig(BaseModel):
    """Configuration for a game session."""

    save_path: str = Field(default="PlayerData.xml", description="Single save slot file")
    log_level: LogLevel = "WARNING"

    # New-game defaults. The home location always comes from the world.
    starting_hit_points: int = Field(default=10, ge=1)
    starting_gold: int = Field(default=20)
    starting_experience_points: int = Field(default=0, ge=0)
    starting_weapon_id: int | None = Field(
        default=None, description="Overrides the world's starting weapon when set"
    )

    @classmethod
    def from_env(cls, **overrides: object) -> EngineConfig:
        """Build a config from environment variables, then apply overrides."""
        values: dict[str, object] = {}

        if os.getenv("SUPERADVENTURE_SAVE_PATH"):
            values["save_path"] = os.getenv("SUPERADVENTURE_SAVE_PATH")

        if os.getenv("SUPERADVENTURE_LOG_LEVEL"):
            values["log_level"] = os.getenv("SUPERADVENTURE_LOG_LEVEL", "WARNING").upper()

        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)
