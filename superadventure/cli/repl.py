"""
Interactive REPL for SuperAdventure.

Provides a text-based interface for playing the game.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from superadventure.content import World, create_starter_world
from superadventure.engine import EngineConfig, EventBus, Message, Player, PropertyChanged
from superadventure.models import Direction, Item, Location
from superadventure.services import PlayerXmlCodec, SaveGameStore, TradingService
from superadventure.skills.dice import RandomSource

logger = logging.getLogger(__name__)


@dataclass
class GameState:
    """Current state of the game session."""

    player: Player
    store: SaveGameStore
    trading: TradingService
    running: bool = True
    output: list[str] = field(default_factory=list)
    """Lines produced while handling the current input."""


@dataclass
class Command:
    """A REPL command."""

    name: str
    aliases: list[str]
    description: str
    handler: Callable[[GameState, list[str]], str | None]


class GameREPL:
    """
    Interactive REPL for playing SuperAdventure.

    Handles user input, dispatches commands to the Player, and renders
    everything the Player narrates. `process` returns the text for one
    input line, so the shell can be driven without a terminal.
    """

    def __init__(
        self,
        *,
        config: EngineConfig | None = None,
        world: World | None = None,
        rng: RandomSource | None = None,
    ) -> None:
        self.config = config or EngineConfig()
        self.world = world or create_starter_world()
        self.rng = rng
        self.events = EventBus()
        self.commands: dict[str, Command] = {}
        self.state: GameState | None = None
        self._register_commands()

        self.events.subscribe(Message, self._on_message)
        self.events.subscribe(PropertyChanged, self._on_property_changed)

    def _register_commands(self) -> None:
        """Register all commands."""
        commands = [
            Command(
                name="help",
                aliases=["?", "h"],
                description="Show available commands",
                handler=self._cmd_help,
            ),
            Command(
                name="look",
                aliases=["l"],
                description="Look around the current location",
                handler=self._cmd_look,
            ),
            Command(
                name="stats",
                aliases=["status", "me"],
                description="Show hit points, gold, experience and level",
                handler=self._cmd_stats,
            ),
            Command(
                name="north",
                aliases=["n"],
                description="Move north",
                handler=self._mover(Direction.NORTH),
            ),
            Command(
                name="east",
                aliases=["e"],
                description="Move east",
                handler=self._mover(Direction.EAST),
            ),
            Command(
                name="south",
                aliases=["s"],
                description="Move south",
                handler=self._mover(Direction.SOUTH),
            ),
            Command(
                name="west",
                aliases=["w"],
                description="Move west",
                handler=self._mover(Direction.WEST),
            ),
            Command(
                name="inventory",
                aliases=["inv", "i"],
                description="Show your inventory",
                handler=self._cmd_inventory,
            ),
            Command(
                name="quests",
                aliases=["quest", "q"],
                description="Show your quests",
                handler=self._cmd_quests,
            ),
            Command(
                name="attack",
                aliases=["a", "fight"],
                description="Attack the monster here with your current weapon",
                handler=self._cmd_attack,
            ),
            Command(
                name="equip",
                aliases=["wield"],
                description="Equip a weapon from your inventory",
                handler=self._cmd_equip,
            ),
            Command(
                name="drink",
                aliases=["quaff"],
                description="Drink a potion during a fight",
                handler=self._cmd_drink,
            ),
            Command(
                name="trade",
                aliases=["shop"],
                description="See what the vendor here sells",
                handler=self._cmd_trade,
            ),
            Command(
                name="buy",
                aliases=[],
                description="Buy an item from the vendor here",
                handler=self._cmd_buy,
            ),
            Command(
                name="sell",
                aliases=[],
                description="Sell an item to the vendor here",
                handler=self._cmd_sell,
            ),
            Command(
                name="map",
                aliases=["m"],
                description="Show the places you have visited",
                handler=self._cmd_map,
            ),
            Command(
                name="save",
                aliases=[],
                description="Save the game",
                handler=self._cmd_save,
            ),
            Command(
                name="exit",
                aliases=["quit"],
                description="Save and exit the game",
                handler=self._cmd_exit,
            ),
        ]

        for cmd in commands:
            self.commands[cmd.name] = cmd
            for alias in cmd.aliases:
                self.commands[alias] = cmd

    # =========================================================================
    # Session
    # =========================================================================

    def start(self) -> str:
        """
        Load the saved game (or a new one) and enter its location.

        Entering the location heals the player and spawns its monster,
        exactly as walking in would.

        Returns:
            The opening text
        """
        codec = PlayerXmlCodec(self.world, self.config, rng=self.rng)
        store = SaveGameStore(Path(self.config.save_path), codec)

        player = store.load(events=self.events)
        self.state = GameState(player=player, store=store, trading=TradingService(player))

        self.state.output = []
        player.move_to(player.current_location)
        return self._flush()

    def process(self, line: str) -> str:
        """Handle one line of input and return everything to display."""
        if self.state is None:
            raise RuntimeError("Call start() before processing input")

        text = line.strip()
        if not text:
            return ""

        cmd_name, args = self._parse_command(text)
        self.state.output = []

        cmd = self.commands.get(cmd_name)
        if cmd is None:
            result = f"I do not understand '{cmd_name}'. Type 'help' for commands."
        else:
            result = cmd.handler(self.state, args)

        if result:
            self.state.output.append(result)
        return self._flush()

    def _parse_command(self, text: str) -> tuple[str, list[str]]:
        """Parse a command into name and arguments."""
        parts = text.lstrip("/").split()
        if not parts:
            return "", []
        return parts[0].lower(), parts[1:]

    def _flush(self) -> str:
        assert self.state is not None
        text = "\n".join(self.state.output).rstrip("\n")
        self.state.output = []
        return text

    # =========================================================================
    # Player event handlers
    # =========================================================================

    def _on_message(self, message: Message) -> None:
        if self.state is None:
            return
        self.state.output.append(message.text)
        if message.add_extra_new_line:
            self.state.output.append("")

    def _on_property_changed(self, event: PropertyChanged) -> None:
        if self.state is None:
            return
        if event.name == "CurrentLocation":
            self.state.output.append(self._describe_location(self.state.player.current_location))
            self.state.output.append("")

    # =========================================================================
    # Formatting
    # =========================================================================

    def _describe_location(self, location: Location) -> str:
        lines = [location.name, location.description]

        exits = location.exits()
        if exits:
            lines.append("Exits: " + ", ".join(direction.value for direction in exits))

        if location.vendor_working_here is not None:
            lines.append(f"{location.vendor_working_here.name} is here to trade.")

        return "\n".join(lines)

    def _find_item(self, name: str, items: list[Item]) -> Item | None:
        wanted = name.strip().lower()
        for item in items:
            if wanted in (item.name.lower(), item.name_plural.lower()):
                return item
        return None

    # =========================================================================
    # Commands
    # =========================================================================

    def _cmd_help(self, state: GameState, args: list[str]) -> str | None:
        """Handle help command."""
        lines = [
            "Available Commands:",
            "-" * 40,
        ]

        # Get unique commands (no aliases)
        seen = set()
        for cmd in self.commands.values():
            if cmd.name not in seen:
                aliases = f" ({', '.join(cmd.aliases)})" if cmd.aliases else ""
                lines.append(f"  {cmd.name}{aliases} - {cmd.description}")
                seen.add(cmd.name)

        return "\n".join(lines)

    def _cmd_look(self, state: GameState, args: list[str]) -> str | None:
        lines = [self._describe_location(state.player.current_location)]
        if state.player.current_monster is not None:
            monster = state.player.current_monster
            lines.append(
                f"A {monster.name} is here "
                f"({monster.current_hit_points}/{monster.maximum_hit_points} hit points)."
            )
        return "\n".join(lines)

    def _cmd_stats(self, state: GameState, args: list[str]) -> str | None:
        player = state.player
        weapon = player.current_weapon
        return "\n".join(
            [
                f"Current hit points: {player.current_hit_points}/{player.maximum_hit_points}",
                f"Gold: {player.gold}",
                f"Experience points: {player.experience_points}",
                f"Level: {player.level}",
                f"Current weapon: {weapon.name if weapon is not None else 'none'}",
            ]
        )

    def _mover(self, direction: Direction) -> Callable[[GameState, list[str]], str | None]:
        def handler(state: GameState, args: list[str]) -> str | None:
            if state.player.current_location.neighbour(direction) is None:
                return f"You cannot move {direction.value}."
            match direction:
                case Direction.NORTH:
                    state.player.move_north()
                case Direction.EAST:
                    state.player.move_east()
                case Direction.SOUTH:
                    state.player.move_south()
                case Direction.WEST:
                    state.player.move_west()
            return None

        return handler

    def _cmd_inventory(self, state: GameState, args: list[str]) -> str | None:
        """Handle inventory command."""
        if not state.player.inventory:
            return "You are not carrying anything."
        lines = ["Inventory:", "-" * 40]
        for entry in state.player.inventory:
            lines.append(f"  {entry.description}: {entry.quantity}")
        return "\n".join(lines)

    def _cmd_quests(self, state: GameState, args: list[str]) -> str | None:
        """Handle quests command."""
        if not state.player.quests:
            return "You do not have any quests."
        lines = ["Quests:", "-" * 40]
        for player_quest in state.player.quests:
            status = "Completed" if player_quest.is_completed else "Incomplete"
            lines.append(f"  {player_quest.name}: {status}")
        return "\n".join(lines)

    def _cmd_attack(self, state: GameState, args: list[str]) -> str | None:
        """Handle attack command."""
        if state.player.current_monster is None:
            return "There is nothing here to attack."
        weapon = state.player.current_weapon
        if weapon is None:
            return "You do not have any weapons."
        state.player.use_weapon(weapon)
        return None

    def _cmd_equip(self, state: GameState, args: list[str]) -> str | None:
        if not args:
            return "Usage: equip <weapon name>"
        name = " ".join(args)
        weapon = self._find_item(name, state.player.weapons)
        if weapon is None:
            return f"You do not have the weapon: {name}"
        state.player.current_weapon = weapon
        return f"You equip your {weapon.name}."

    def _cmd_drink(self, state: GameState, args: list[str]) -> str | None:
        potions = state.player.potions
        if not potions:
            return "You do not have any potions to drink."
        if state.player.current_monster is None:
            return "There is nothing here to fight. Save your potions for battle."

        if args:
            name = " ".join(args)
            potion = self._find_item(name, potions)
            if potion is None:
                return f"You do not have the potion: {name}"
        else:
            potion = state.player.current_potion or potions[0]

        state.player.use_potion(potion)
        return None

    def _cmd_trade(self, state: GameState, args: list[str]) -> str | None:
        """Handle trade command - list the vendor's wares and what you could sell."""
        vendor = state.trading.vendor
        if vendor is None:
            return "There is no one here to trade with."

        lines = [f"{vendor.name}'s wares:", "-" * 40]
        for item, quantity in state.trading.vendor_items():
            lines.append(f"  {item.name} ({quantity} in stock): {item.price} gold")

        lines.extend(["", "Your items:", "-" * 40])
        sellable = [entry for entry in state.player.inventory if entry.item.is_sellable]
        if sellable:
            for entry in sellable:
                lines.append(f"  {entry.description} x{entry.quantity}: {entry.price} gold each")
        else:
            lines.append("  (Nothing to sell)")

        lines.extend(["", f"You have {state.player.gold} gold."])
        return "\n".join(lines)

    def _cmd_buy(self, state: GameState, args: list[str]) -> str | None:
        if not args:
            return "Usage: buy <item name>"
        name = " ".join(args)
        item = self.world.item_by_name(name)
        if item is None:
            return f"There is no such item as '{name}'."
        state.trading.buy(item)
        return None

    def _cmd_sell(self, state: GameState, args: list[str]) -> str | None:
        if not args:
            return "Usage: sell <item name>"
        name = " ".join(args)
        item = self.world.item_by_name(name)
        if item is None:
            return f"There is no such item as '{name}'."
        state.trading.sell(item)
        return None

    def _cmd_map(self, state: GameState, args: list[str]) -> str | None:
        """Handle map command - only visited places are shown."""
        lines = ["Places you have been:", "-" * 40]
        visited = set(state.player.locations_visited)
        for location_id in state.player.locations_visited:
            location = self.world.location_by_id(location_id)
            marker = "*" if location.id == state.player.current_location.id else " "
            exits = []
            for direction, target in location.exits().items():
                target_name = self.world.location_by_id(target).name if target in visited else "?"
                exits.append(f"{direction.value}: {target_name}")
            suffix = f" ({', '.join(exits)})" if exits else ""
            lines.append(f" {marker}{location.name}{suffix}")
        return "\n".join(lines)

    def _cmd_save(self, state: GameState, args: list[str]) -> str | None:
        state.store.save(state.player)
        return "Game saved."

    def _cmd_exit(self, state: GameState, args: list[str]) -> str | None:
        """Handle exit command."""
        state.store.save(state.player)
        state.running = False
        return "Game saved. Farewell, adventurer!"

    # =========================================================================
    # Main loop
    # =========================================================================

    def _print_banner(self) -> None:
        """Print the game banner."""
        print("SuperAdventure")
        print("Type 'help' for commands.\n")

    def run(self) -> None:
        """Run the interactive REPL."""
        self._print_banner()
        print(self.start())
        print()

        assert self.state is not None
        while self.state.running:
            try:
                user_input = input("> ").strip()

                if not user_input:
                    continue

                response = self.process(user_input)

                if response:
                    print()
                    print(response)
                    print()

            except (KeyboardInterrupt, EOFError):
                print("\n")
                self.state.store.save(self.state.player)
                self.state.running = False

        print("Thanks for playing!")


def main(argv: list[str] | None = None) -> None:
    """Entry point for the `superadventure` command."""
    parser = argparse.ArgumentParser(description="SuperAdventure Text Adventure")
    parser.add_argument("--save", default=None, help="Save file path")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Logging level",
    )

    args = parser.parse_args(argv)
    config = EngineConfig.from_env(save_path=args.save, log_level=args.log_level)

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.debug("Starting with save file %s", config.save_path)

    GameREPL(config=config).run()


if __name__ == "__main__":
    main()
