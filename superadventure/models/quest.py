"""
Quest models for SuperAdventure.

A Quest is offered at a location and completed by returning there with
its completion items. The player's progress is tracked by PlayerQuest
entries in the quest ledger.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class QuestCompletionItem(BaseModel):
    """An item and quantity surrendered to complete a quest."""

    model_config = ConfigDict(frozen=True)

    item_id: int
    quantity: int = Field(default=1, ge=1)


class Quest(BaseModel):
    """Catalog definition of a quest."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str = Field(min_length=1)
    description: str = ""

    completion_items: tuple[QuestCompletionItem, ...] = ()
    """Required items, in the order they are narrated."""

    reward_experience_points: int = Field(default=0, ge=0)
    reward_gold: int = Field(default=0, ge=0)
    reward_item_id: int | None = None
