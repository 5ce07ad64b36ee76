"""
Player persistence for SuperAdventure.

Saves are small XML documents:

    <Player>
      <Stats>
        <CurrentHitPoints>10</CurrentHitPoints>
        <MaximumHitPoints>10</MaximumHitPoints>
        <Gold>20</Gold>
        <ExperiencePoints>0</ExperiencePoints>
        <CurrentLocation>1</CurrentLocation>
        <CurrentWeapon>1</CurrentWeapon>        (only when equipped)
        <CurrentPotion>7</CurrentPotion>        (only when selected)
      </Stats>
      <LocationsVisited>
        <LocationVisited ID="1" />
      </LocationsVisited>
      <InventoryItems>
        <InventoryItem ID="1" Quantity="1" />
      </InventoryItems>
      <PlayerQuests>
        <PlayerQuest ID="1" IsCompleted="False" />
      </PlayerQuests>
    </Player>

A document that cannot be read back is never an error for the caller:
the codec logs a warning and hands out a brand-new default player.
"""

from __future__ import annotations

import logging
from xml.etree import ElementTree as ET

from superadventure.content.world import World
from superadventure.engine.events import EventBus
from superadventure.engine.models import EngineConfig
from superadventure.engine.player import Player
from superadventure.models import HealingPotion, Weapon
from superadventure.skills.dice import RandomSource

logger = logging.getLogger(__name__)

_TRUE = "True"
_FALSE = "False"


def _format_bool(value: bool) -> str:
    return _TRUE if value else _FALSE


def _parse_bool(text: str | None) -> bool:
    token = (text or "").strip().lower()
    if token == "true":
        return True
    if token == "false":
        return False
    raise ValueError(f"Not a boolean: {text!r}")


def _required_int(parent: ET.Element, tag: str) -> int:
    node = parent.find(tag)
    if node is None:
        raise KeyError(f"Missing <{tag}>")
    return int((node.text or "").strip())


def _optional_int(parent: ET.Element, tag: str) -> int | None:
    node = parent.find(tag)
    if node is None or not (node.text or "").strip():
        return None
    return int(node.text.strip())


class PlayerXmlCodec:
    """Converts a Player to and from its XML save document."""

    def __init__(
        self,
        world: World,
        config: EngineConfig | None = None,
        *,
        rng: RandomSource | None = None,
    ) -> None:
        self.world = world
        self.config = config or EngineConfig()
        self.rng = rng

    # =========================================================================
    # Serialize
    # =========================================================================

    def serialize(self, player: Player) -> str:
        """Render a player as an XML document string."""
        root = ET.Element("Player")

        stats = ET.SubElement(root, "Stats")
        ET.SubElement(stats, "CurrentHitPoints").text = str(player.current_hit_points)
        ET.SubElement(stats, "MaximumHitPoints").text = str(player.maximum_hit_points)
        ET.SubElement(stats, "Gold").text = str(player.gold)
        ET.SubElement(stats, "ExperiencePoints").text = str(player.experience_points)
        ET.SubElement(stats, "CurrentLocation").text = str(player.current_location.id)

        if player.current_weapon is not None:
            ET.SubElement(stats, "CurrentWeapon").text = str(player.current_weapon.id)
        if player.current_potion is not None:
            ET.SubElement(stats, "CurrentPotion").text = str(player.current_potion.id)

        visited = ET.SubElement(root, "LocationsVisited")
        for location_id in player.locations_visited:
            ET.SubElement(visited, "LocationVisited", ID=str(location_id))

        inventory = ET.SubElement(root, "InventoryItems")
        for entry in player.inventory:
            ET.SubElement(
                inventory,
                "InventoryItem",
                ID=str(entry.item_id),
                Quantity=str(entry.quantity),
            )

        quests = ET.SubElement(root, "PlayerQuests")
        for player_quest in player.quests:
            ET.SubElement(
                quests,
                "PlayerQuest",
                ID=str(player_quest.quest_id),
                IsCompleted=_format_bool(player_quest.is_completed),
            )

        ET.indent(root)
        return ET.tostring(root, encoding="unicode")

    # =========================================================================
    # Deserialize
    # =========================================================================

    def deserialize(self, document: str, *, events: EventBus | None = None) -> Player:
        """
        Rebuild a player from an XML document.

        Never raises for bad data: malformed XML, missing fields,
        non-numeric values and IDs unknown to the world all produce a
        default player instead.
        """
        try:
            return self._read_player(document, events)
        except (ET.ParseError, ValueError, KeyError, AttributeError, TypeError) as exc:
            logger.warning("Save data unreadable, starting a new game: %s", exc)
            return self.create_default_player(events=events)

    def create_default_player(self, *, events: EventBus | None = None) -> Player:
        return Player.create_default(self.world, self.config, rng=self.rng, events=events)

    def _read_player(self, document: str, events: EventBus | None) -> Player:
        root = ET.fromstring(document)
        if root.tag != "Player":
            raise ValueError(f"Unexpected root element <{root.tag}>")

        stats = root.find("Stats")
        if stats is None:
            raise KeyError("Missing <Stats>")

        # Built without an event bus so loading is silent; the caller's bus
        # is attached once the player is complete.
        player = Player(
            self.world,
            current_hit_points=_required_int(stats, "CurrentHitPoints"),
            maximum_hit_points=_required_int(stats, "MaximumHitPoints"),
            gold=_required_int(stats, "Gold"),
            experience_points=_required_int(stats, "ExperiencePoints"),
            current_location=self.world.location_by_id(_required_int(stats, "CurrentLocation")),
            rng=self.rng,
        )

        for node in root.iterfind("LocationsVisited/LocationVisited"):
            player.record_visit(self.world.location_by_id(int(node.attrib["ID"])).id)

        for node in root.iterfind("InventoryItems/InventoryItem"):
            item = self.world.item_by_id(int(node.attrib["ID"]))
            quantity = int(node.attrib["Quantity"])
            if quantity < 1:
                logger.warning(
                    "Skipping inventory row for item %s with quantity %s", item.id, quantity
                )
                continue
            player.add_item_to_inventory(item, quantity)

        for node in root.iterfind("PlayerQuests/PlayerQuest"):
            quest = self.world.quest_by_id(int(node.attrib["ID"]))
            player.add_quest_entry(quest, _parse_bool(node.attrib["IsCompleted"]))

        self._restore_selection(player, stats)

        if events is not None:
            player.events = events
        return player

    def _restore_selection(self, player: Player, stats: ET.Element) -> None:
        """Apply the saved weapon and potion; an absent field means nothing selected."""
        player.current_weapon = None
        player.current_potion = None

        weapon_id = _optional_int(stats, "CurrentWeapon")
        if weapon_id is not None:
            weapon = self.world.item_by_id(weapon_id)
            if not isinstance(weapon, Weapon):
                raise ValueError(f"Item {weapon_id} is not a weapon")
            if player.item_quantity(weapon) > 0:
                player.current_weapon = weapon
            else:
                logger.warning("Saved weapon %s is not in the inventory; ignoring", weapon_id)

        potion_id = _optional_int(stats, "CurrentPotion")
        if potion_id is not None:
            potion = self.world.item_by_id(potion_id)
            if not isinstance(potion, HealingPotion):
                raise ValueError(f"Item {potion_id} is not a healing potion")
            if player.item_quantity(potion) > 0:
                player.current_potion = potion
            else:
                logger.warning("Saved potion %s is not in the inventory; ignoring", potion_id)
