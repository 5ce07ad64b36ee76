"""
SuperAdventure: a turn-based, single-player text adventure.

Explore a small world, fight monsters, collect loot, complete quests,
trade with vendors and save your progress between sessions.
"""
