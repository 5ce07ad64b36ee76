"""
Service layer for SuperAdventure.

Services sit around the Player: saving and loading it, and trading
with vendors.
"""

from __future__ import annotations

from superadventure.services.persistence import PlayerXmlCodec
from superadventure.services.save_store import SaveGameStore
from superadventure.services.trading import TradeResult, TradingService

__all__ = [
    "PlayerXmlCodec",
    "SaveGameStore",
    "TradeResult",
    "TradingService",
]
