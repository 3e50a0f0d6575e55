"""
Game application - menus around the battle gauntlet.

The GameApp wires the shared systems together and runs the main menu:
- Event bus, seeded random source and sound cues
- Console UI and input
- Save manager
- Battle system and its console controller
"""

from __future__ import annotations

import logging
import random
from typing import Callable, Optional

from rich.console import Console

from rpg_engine.audio import AudioManager
from rpg_engine.config import GameConfig
from rpg_engine.core.events import EventBus, GameEvent
from rpg_engine.errors import InvalidInput
from rpg_engine.input import ConsoleInput
from gauntlet.battle.actions import BattleActionExecutor
from gauntlet.battle.actor import create_enemy_roster
from gauntlet.battle.ai import EnemyPolicy
from gauntlet.battle.controller import BattleController, GauntletOutcome
from gauntlet.battle.system import BattleSystem
from gauntlet.player import Player
from gauntlet.save import SaveManager
from gauntlet.ui import ConsoleUI

logger = logging.getLogger(__name__)

MAIN_MENU_NEW_GAME = 1
MAIN_MENU_LOAD_GAME = 2
MAIN_MENU_INSTRUCTIONS = 3
MAIN_MENU_EXIT = 4

PAUSE_MENU_SAVE = 1
PAUSE_MENU_MAIN_MENU = 2
PAUSE_MENU_EXIT = 3


class GameApp:
    """
    Console game application.

    Usage:
        app = GameApp(GameConfig(seed=7, action_delay=0))
        app.run()
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        console: Optional[Console] = None,
        reader: Optional[Callable[[str], str]] = None,
    ):
        self.config = config or GameConfig()
        self._running = False

        # Core systems
        self.event_bus = EventBus()
        self.rng = random.Random(self.config.seed)

        self.audio = AudioManager(self.event_bus, enabled=self.config.sound_enabled)

        self.ui = ConsoleUI(console, event_bus=self.event_bus, delay=self.config.action_delay)
        self.input = ConsoleInput(reader or self.ui.read_line)

        self.save_manager = SaveManager(self.config.save_path, event_bus=self.event_bus)

        executor = BattleActionExecutor(audio=self.audio)
        self.battle = BattleSystem(
            self.event_bus,
            rng=self.rng,
            executor=executor,
            policy=EnemyPolicy(executor, self.rng),
        )
        self.controller = BattleController(
            self.battle, self.ui, self.input, on_pause=self.pause_menu
        )

        self.player: Optional[Player] = None

    def _init_audio(self) -> None:
        if not self.config.sound_enabled:
            return
        self.audio.init()
        if not self.audio.is_initialized:
            return
        found = self.audio.load_cues_from(self.config.sound_dir)
        logger.debug("Registered %d sound cues from %s", found, self.config.sound_dir)

    def run(self) -> None:
        """Name prompt, then the main menu until Exit."""
        self._running = True
        self._init_audio()
        logger.info("Starting %r", self.config)

        try:
            self.ui.banner(f"Welcome to {self.config.title}")
            name = self.input.read_line("Enter your desired name: ")
            self.player = Player.create(name)
            self.event_bus.publish(GameEvent.GAME_START, player=self.player.name)

            while self._running:
                self._main_menu()
        except (EOFError, KeyboardInterrupt):
            self.ui.message("")
            self.ui.system("Exiting the game. Goodbye!")
            self._running = False
        finally:
            self.event_bus.publish(GameEvent.GAME_QUIT)
            self.audio.quit()

    def quit(self) -> None:
        """Request shutdown after the current menu."""
        self._running = False

    def _ask(self, prompt: str, minimum: int, maximum: int) -> int:
        return self.input.ask_choice(prompt, minimum, maximum, on_error=self._input_error)

    def _input_error(self, error: InvalidInput) -> None:
        self.ui.error(str(error))

    # Menus

    def _main_menu(self) -> None:
        self.ui.show_main_menu()
        choice = self._ask("Enter your choice: ", MAIN_MENU_NEW_GAME, MAIN_MENU_EXIT)

        if choice == MAIN_MENU_NEW_GAME:
            self.new_game()
        elif choice == MAIN_MENU_LOAD_GAME:
            self.load_game()
        elif choice == MAIN_MENU_INSTRUCTIONS:
            self.ui.show_instructions()
        else:
            self.ui.system("Exiting the game. Goodbye!")
            self.quit()

    def new_game(self) -> GauntletOutcome:
        """Reset the player and run a fresh gauntlet."""
        self.player.reset()
        return self.play_gauntlet()

    def load_game(self) -> GauntletOutcome:
        """Load saved progress (or fall back to a new player) and run a gauntlet."""
        if self.save_manager.load(self.player):
            self.ui.system("Progress loaded successfully!")
        else:
            self.ui.warn(f"Error loading progress: {self.save_manager.last_error}")
            self.ui.system("Starting a new game...")
        return self.play_gauntlet()

    def play_gauntlet(self) -> GauntletOutcome:
        """Fight a fresh roster and report how it ended."""
        outcome = self.controller.run(self.player, create_enemy_roster())

        if outcome == GauntletOutcome.VICTORY:
            self.ui.system("Congratulations! You have defeated all enemies!")
            self.ui.wait(2)
        elif outcome == GauntletOutcome.MAIN_MENU:
            self.ui.system("Returning to the Main Menu...")
        elif outcome == GauntletOutcome.EXIT:
            self.ui.system("Exiting the game. Goodbye!")
            self.quit()

        return outcome

    def pause_menu(self) -> Optional[GauntletOutcome]:
        """
        Pause menu shown from battle.

        Returns:
            None to resume the battle, otherwise how to leave it
        """
        self.event_bus.publish(GameEvent.GAME_PAUSE)
        self.ui.show_pause_menu()
        choice = self._ask("Enter your choice: ", PAUSE_MENU_SAVE, PAUSE_MENU_EXIT)

        if choice == PAUSE_MENU_MAIN_MENU:
            return GauntletOutcome.MAIN_MENU
        if choice == PAUSE_MENU_EXIT:
            return GauntletOutcome.EXIT

        if self.save_manager.save(self.player):
            self.ui.system("Progress saved!")
        else:
            self.ui.warn(f"Error saving progress: {self.save_manager.last_error}")
        self.event_bus.publish(GameEvent.GAME_RESUME)
        return None
