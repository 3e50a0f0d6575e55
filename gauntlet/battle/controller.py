"""
Battle console controller - connects BattleSystem to the console.

Manages the flow of one gauntlet run, handling:
- Status display and the action menu
- Item selection (0 cancels)
- Reprompting on rejected input or actions
- The pause menu hand-off
- Pacing between the player's and the enemy's actions
"""

from __future__ import annotations

import logging
from enum import Enum, auto
from typing import TYPE_CHECKING, Callable, Optional

from rpg_engine.errors import InvalidAction, InvalidInput
from rpg_engine.input import ConsoleInput
from gauntlet.battle.actor import Combatant
from gauntlet.battle.system import (
    BattleState,
    BattleSystem,
    CommandType,
    PlayerCommand,
    TurnReport,
)

if TYPE_CHECKING:
    from gauntlet.player import Player
    from gauntlet.ui import ConsoleUI

logger = logging.getLogger(__name__)


class GauntletOutcome(Enum):
    """How a gauntlet run ended."""
    VICTORY = auto()
    DEFEAT = auto()
    MAIN_MENU = auto()
    EXIT = auto()


# Called when the player pauses; None resumes the battle.
PauseHandler = Callable[[], Optional[GauntletOutcome]]

MENU_COMMANDS = {
    1: CommandType.ATTACK,
    2: CommandType.SPECIAL,
    3: CommandType.DEFEND,
    4: CommandType.ITEM,
    5: CommandType.PAUSE,
}


class BattleController:
    """
    Drives a BattleSystem from console input.

    Usage:
        controller = BattleController(battle, ui, console_input, on_pause=app.pause_menu)
        outcome = controller.run(player, create_enemy_roster())
    """

    def __init__(
        self,
        battle: BattleSystem,
        ui: ConsoleUI,
        console_input: ConsoleInput,
        on_pause: Optional[PauseHandler] = None,
    ):
        self.battle = battle
        self.ui = ui
        self.input = console_input
        self._on_pause = on_pause

    def run(self, player: Player, enemies: list[Combatant]) -> GauntletOutcome:
        """Fight every enemy in order until victory, defeat or a menu exit."""
        self.battle.start_gauntlet(player, enemies)
        self.ui.banner("Battle Begins!")
        self._announce_enemy()

        while True:
            state = self.battle.state

            if state == BattleState.PLAYER_TURN:
                outcome = self._player_turn()
                if outcome is not None:
                    return outcome

            elif state == BattleState.ENEMY_DEFEATED:
                self.battle.start_next_battle()
                self._announce_enemy()

            elif state == BattleState.VICTORY:
                self.ui.banner("Victory!")
                return GauntletOutcome.VICTORY

            elif state == BattleState.DEFEAT:
                self.ui.banner("Game Over")
                return GauntletOutcome.DEFEAT

            else:
                raise RuntimeError(f"Unexpected battle state: {state}")

    def _announce_enemy(self) -> None:
        self.ui.show_matchup(self.battle.player, self.battle.current_enemy)
        self.ui.wait()

    def _player_turn(self) -> Optional[GauntletOutcome]:
        """Prompt for and resolve one command."""
        player = self.battle.player
        self.ui.show_battle_status(player, self.battle.current_enemy)
        self.ui.show_action_menu(player)

        command = self._read_command(player)
        if command is None:
            return None

        try:
            report = self.battle.submit(command)
        except (InvalidInput, InvalidAction) as e:
            self.ui.error(str(e))
            return None

        if report.state == BattleState.PAUSED:
            return self._pause()

        self._show_report(report)
        return None

    def _read_command(self, player: Player) -> Optional[PlayerCommand]:
        choice = self.input.ask_choice(
            "Enter your choice (1-5): ", 1, len(MENU_COMMANDS), on_error=self._input_error
        )
        command_type = MENU_COMMANDS[choice]

        if command_type != CommandType.ITEM:
            return PlayerCommand(command_type)

        if player.inventory.is_empty:
            # Let the battle reject it with the usual message
            return PlayerCommand(CommandType.ITEM, item_index=0)

        self.ui.show_inventory(player.inventory)
        selection = self.input.ask_choice(
            "Select an item to use (0 to cancel): ",
            0,
            len(player.inventory),
            on_error=self._input_error,
        )
        if selection == 0:
            return None
        return PlayerCommand(CommandType.ITEM, item_index=selection - 1)

    def _input_error(self, error: InvalidInput) -> None:
        self.ui.error(str(error))

    def _pause(self) -> Optional[GauntletOutcome]:
        outcome = self._on_pause() if self._on_pause else None
        if outcome is not None:
            logger.info("Gauntlet left from pause menu: %s", outcome.name)
            return outcome
        self.battle.resume()
        return None

    def _show_report(self, report: TurnReport) -> None:
        """Player's action, then the enemy's, with pacing in between."""
        self.ui.messages(report.player_messages)
        self.ui.wait()

        if report.enemy_messages:
            self.ui.message("\nEnemy's turn...")
            self.ui.wait()
            self.ui.messages(report.enemy_messages)
            self.ui.wait(1.5)

        if report.outcome_messages:
            self.ui.messages(report.outcome_messages)
            self.ui.wait(2)
