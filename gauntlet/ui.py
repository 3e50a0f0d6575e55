"""
Console presentation.

All player-facing output goes through a rich Console. Game text is
printed as Text objects so names and item strings are never parsed
as markup.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Iterable, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from rpg_engine.core.events import AudioEvent, Event, EventBus
from gauntlet.battle.actions import special_move_for

if TYPE_CHECKING:
    from gauntlet.battle.actor import Combatant
    from gauntlet.components import Inventory
    from gauntlet.player import Player

HEALTH_BAR_CELLS = 20
MANA_BAR_CELLS = 10

COLORS = {
    "banner": "bold bright_blue",
    "error": "bright_red",
    "system": "bright_magenta",
    "hint": "dim",
    "status": "magenta",
    "ready": "green",
    "cooldown": "red",
    "mana": "bright_blue",
    "sound": "bright_yellow",
}

SOUND_TEXT = {
    "attack": "\U0001F5E1 Sword clashing sound effect",
    "heal": "\U0001F3BC Healing sound effect",
}

ACTION_MENU = (
    "Regular Attack",
    "Special Move",
    "Defend",
    "Use Item",
    "Pause Game",
)

INSTRUCTIONS = (
    "Use options in battles to attack, defend, or use items.",
    "Earn XP to level up and enhance your abilities.",
    "Save progress to continue your journey later.",
    "Survive and defeat all enemies to win the game!",
)


def health_style(percent: float) -> str:
    """Color for a health bar filled to ``percent`` (0.0 - 1.0)."""
    if percent > 0.6:
        return "green"
    if percent > 0.3:
        return "yellow"
    return "red"


def bar_text(current: int, maximum: int, cells: int, style: str) -> Text:
    """Render a ``[####    ] current/max`` bar."""
    filled = current * cells // maximum if maximum > 0 else 0
    filled = max(0, min(cells, filled))

    text = Text("[")
    text.append("#" * filled, style=style)
    text.append(" " * (cells - filled))
    text.append(f"] {current}/{maximum}")
    return text


class ConsoleUI:
    """
    Renders the game to the terminal.

    Usage:
        ui = ConsoleUI(event_bus=bus, delay=1.0)
        ui.banner("Battle Begins!")
        ui.show_battle_status(player, enemy)
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        event_bus: Optional[EventBus] = None,
        delay: float = 1.0,
    ):
        self.console = console or Console()
        self.delay = max(0.0, delay)
        self.event_bus = event_bus

        if event_bus:
            event_bus.subscribe(AudioEvent.SFX_PLAYED, self._on_sound_cue)

    def _on_sound_cue(self, event: Event) -> None:
        line = SOUND_TEXT.get(event.get("cue"))
        if line:
            self.console.print(Text(line, style=COLORS["sound"]))

    def read_line(self, prompt: str = "") -> str:
        """Reader for ConsoleInput."""
        return self.console.input(prompt)

    def wait(self, factor: float = 1.0) -> None:
        """Pause so the player can follow the action."""
        if self.delay > 0:
            time.sleep(self.delay * factor)

    # Plain output

    def banner(self, title: str = "") -> None:
        """Bordered title line."""
        self.console.print(
            Panel(Text(title, justify="center"), style=COLORS["banner"], expand=True)
        )

    def message(self, text: str, style: Optional[str] = None) -> None:
        self.console.print(Text(text, style=style or ""))

    def messages(self, lines: Iterable[str]) -> None:
        for line in lines:
            self.message(line)

    def system(self, text: str) -> None:
        self.message(text, COLORS["system"])

    def error(self, text: str) -> None:
        """Print a recoverable error."""
        self.console.print(Text(f"Error: {text}", style=COLORS["error"]))

    def warn(self, text: str) -> None:
        self.message(text, COLORS["error"])

    # Screens

    def show_main_menu(self) -> None:
        self.console.print()
        self.console.print(Text("Main Menu:", style="bold"))
        for number, label in enumerate(
            ("Start New Game", "Load Game", "Instructions", "Exit"), start=1
        ):
            self.console.print(f"{number}) {label}")

    def show_pause_menu(self) -> None:
        self.console.print()
        self.console.print(Text("--- Pause Menu ---", style="bold"))
        for number, label in enumerate(
            ("Save Progress", "Return to Main Menu", "Exit Game"), start=1
        ):
            self.console.print(f"{number}) {label}")

    def show_instructions(self) -> None:
        self.banner("Instructions")
        for number, line in enumerate(INSTRUCTIONS, start=1):
            self.console.print(f"{number}) {line}")

    def show_matchup(self, player: Player, enemy: Combatant) -> None:
        self.message(f"{player.name} (Level {player.level}) vs. {enemy.name}")

    def render_combatant(self, actor: Combatant, level: Optional[int] = None) -> Text:
        """Name, health bar and, for mana users, a mana bar."""
        title = actor.name if level is None else f"{actor.name} (Level {level})"
        text = Text(title, style="bold")
        text.append("\nHealth: ")
        text.append_text(
            bar_text(
                actor.current_hp,
                actor.max_hp,
                HEALTH_BAR_CELLS,
                health_style(actor.health.percent),
            )
        )
        if actor.mana is not None:
            text.append("\nMana:   ")
            text.append_text(
                bar_text(actor.mana.current, actor.mana.max_mp, MANA_BAR_CELLS, COLORS["mana"])
            )
        return text

    def show_battle_status(self, player: Player, enemy: Combatant) -> None:
        """Both combatants, their status effects and special readiness."""
        table = Table.grid(padding=(0, 4))
        table.add_row(
            self.render_combatant(player, player.level),
            self.render_combatant(enemy),
        )
        self.console.print(Panel(table, title="Battle", border_style="red"))

        if player.combat.status_effects or enemy.combat.status_effects:
            self.console.print(Text("Status Effects:", style="bold"))
            for actor in (player, enemy):
                line = Text(f"{actor.name}: ")
                statuses = actor.combat.describe_statuses()
                line.append(
                    statuses,
                    style=COLORS["status"] if actor.combat.status_effects else "",
                )
                self.console.print(line)

        readiness = Text("Special Move: ")
        if player.can_use_special:
            readiness.append("READY!", style=COLORS["ready"])
        else:
            readiness.append(
                f"{player.special_cooldown} turns remaining", style=COLORS["cooldown"]
            )
        self.console.print(readiness)

    def show_action_menu(self, player: Player) -> None:
        self.console.print()
        self.console.print(Text("Your turn! Choose an action:", style="bold"))
        move = special_move_for(player)
        for number, label in enumerate(ACTION_MENU, start=1):
            line = Text(f"{number}) {label}")
            if label == "Special Move":
                line.append(f" - {move.name} ", style=COLORS["hint"])
                if player.can_use_special:
                    line.append("(Ready!)", style=COLORS["ready"])
                else:
                    line.append(
                        f"(Cooldown: {player.special_cooldown})", style=COLORS["cooldown"]
                    )
            self.console.print(line)

    def show_inventory(self, inventory: Inventory) -> None:
        self.console.print()
        self.console.print(
            Text(f"Inventory ({len(inventory)}/{inventory.max_items} items):", style="bold")
        )
        if inventory.is_empty:
            self.console.print("  (Empty)")
            return
        for number, item in enumerate(inventory, start=1):
            self.console.print(Text(f"  {number}) {item}"))
