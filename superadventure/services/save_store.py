"""
Save slot for SuperAdventure.

One file holds the one saved game. Reads fall back to a new player;
writes replace the whole document in one step so a crash mid-save never
leaves a truncated file behind.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from superadventure.engine.events import EventBus
from superadventure.engine.player import Player
from superadventure.services.persistence import PlayerXmlCodec

logger = logging.getLogger(__name__)


@dataclass
class SaveGameStore:
    """File-backed single save slot."""

    path: Path
    codec: PlayerXmlCodec

    def __post_init__(self) -> None:
        self.path = Path(self.path)

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self, *, events: EventBus | None = None) -> Player:
        """
        Load the saved player.

        Returns a default player when there is no save yet, when the file
        cannot be read, or when its contents are corrupt.
        """
        if not self.exists():
            logger.info("No save file at %s, starting a new game", self.path)
            return self.codec.create_default_player(events=events)

        try:
            document = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            logger.warning("Could not read save file %s: %s", self.path, exc)
            return self.codec.create_default_player(events=events)

        return self.codec.deserialize(document, events=events)

    def save(self, player: Player) -> None:
        """Write the player, replacing any previous save."""
        document = self.codec.serialize(player)

        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp_path.write_text(document, encoding="utf-8")
        os.replace(tmp_path, self.path)

        logger.info("Saved game to %s", self.path)
