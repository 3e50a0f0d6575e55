"""
Battle system - turn-based combat controller for a gauntlet of enemies.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, Optional

from rpg_engine.core.events import EventBus
from rpg_engine.errors import InvalidAction
from gauntlet.battle.actions import ActionResult, BattleActionExecutor
from gauntlet.battle.actor import Combatant
from gauntlet.battle.ai import EnemyPolicy, RandomSource
from gauntlet.rules import BONUS_ITEM, BONUS_ITEM_CHANCE, XP_GAIN_PER_ENEMY

if TYPE_CHECKING:
    from gauntlet.player import Player

logger = logging.getLogger(__name__)


class BattleState(Enum):
    """State of the battle."""
    NONE = auto()
    PLAYER_TURN = auto()
    ENEMY_TURN = auto()
    CHECK_TERMINATION = auto()
    PAUSED = auto()
    ENEMY_DEFEATED = auto()
    VICTORY = auto()
    DEFEAT = auto()


class BattleEvent(Enum):
    """Battle-specific events."""
    BATTLE_STARTED = auto()
    ACTION_COMPLETED = auto()
    TURN_ENDED = auto()
    ACTOR_DEFEATED = auto()
    LEVEL_UP = auto()
    ITEM_FOUND = auto()
    PAUSED = auto()
    RESUMED = auto()
    VICTORY = auto()
    DEFEAT = auto()


class CommandType(Enum):
    """Player command menu."""
    ATTACK = auto()
    SPECIAL = auto()
    DEFEND = auto()
    ITEM = auto()
    PAUSE = auto()


@dataclass
class PlayerCommand:
    """A command chosen by the player."""
    command: CommandType
    item_index: Optional[int] = None  # 0-based, for ITEM


@dataclass
class BattleRewards:
    """Rewards from defeating one enemy."""
    exp: int = 0
    items: list[str] = field(default_factory=list)
    levels_gained: int = 0


@dataclass
class TurnReport:
    """What happened during one submitted command, phase by phase."""
    state: BattleState
    player_messages: list[str] = field(default_factory=list)
    enemy_messages: list[str] = field(default_factory=list)
    outcome_messages: list[str] = field(default_factory=list)
    player_result: Optional[ActionResult] = None
    enemy_result: Optional[ActionResult] = None
    rewards: Optional[BattleRewards] = None

    @property
    def messages(self) -> list[str]:
        return [*self.player_messages, *self.enemy_messages, *self.outcome_messages]


class BattleSystem:
    """
    Turn-based battle controller.

    Manages:
    - Gauntlet progression (one enemy at a time, in order)
    - Player commands and rejection of invalid ones
    - Enemy turns through the enemy policy
    - End-of-turn cooldown and status updates
    - Win/lose conditions and rewards

    Usage:
        battle = BattleSystem(event_bus, rng=random.Random(7))
        battle.start_gauntlet(player, create_enemy_roster())
        report = battle.submit(PlayerCommand(CommandType.ATTACK))
    """

    def __init__(
        self,
        events: Optional[EventBus] = None,
        rng: Optional[RandomSource] = None,
        executor: Optional[BattleActionExecutor] = None,
        policy: Optional[EnemyPolicy] = None,
    ):
        self.events = events
        self.rng = rng or random.Random()
        self._executor = executor or BattleActionExecutor()
        self._policy = policy or EnemyPolicy(self._executor, self.rng)

        self.state = BattleState.NONE
        self._player: Optional[Player] = None
        self._enemies: list[Combatant] = []
        self._enemy_index: int = 0
        self._turn_count: int = 0

    def _publish(self, event_type: BattleEvent, **data) -> None:
        if self.events:
            self.events.publish(event_type, **data)

    # Lifecycle

    def start_gauntlet(self, player: Player, enemies: list[Combatant]) -> None:
        """
        Start a gauntlet.

        Args:
            player: The player character
            enemies: Enemies in fighting order
        """
        if not enemies:
            raise ValueError("A gauntlet needs at least one enemy.")

        self._player = player
        self._enemies = list(enemies)
        self._enemy_index = 0
        self._begin_battle()

    def _begin_battle(self) -> None:
        """Start the fight against the current enemy."""
        self._player.combat.special_cooldown = 0
        self._turn_count = 0
        self.state = BattleState.PLAYER_TURN

        enemy = self.current_enemy
        logger.info("Battle started: %s vs %s", self._player.name, enemy.name)
        self._publish(
            BattleEvent.BATTLE_STARTED,
            player=self._player.name,
            enemy=enemy.name,
            index=self._enemy_index,
        )

    def start_next_battle(self) -> Combatant:
        """Advance to the next enemy after ENEMY_DEFEATED."""
        if self.state != BattleState.ENEMY_DEFEATED:
            raise InvalidAction("The current enemy is still standing.")

        self._enemy_index += 1
        self._begin_battle()
        return self.current_enemy

    def pause(self) -> None:
        """Suspend the battle without resolving a turn."""
        if self.state != BattleState.PLAYER_TURN:
            raise InvalidAction("The battle can only be paused on your turn.")
        self.state = BattleState.PAUSED
        self._publish(BattleEvent.PAUSED, enemy=self.current_enemy.name)

    def resume(self) -> None:
        """Return from PAUSED to the player's turn."""
        if self.state != BattleState.PAUSED:
            raise InvalidAction("The battle is not paused.")
        self.state = BattleState.PLAYER_TURN
        self._publish(BattleEvent.RESUMED, enemy=self.current_enemy.name)

    # Turn resolution

    def submit(self, command: PlayerCommand) -> TurnReport:
        """
        Resolve one player command and, if accepted, the enemy's reply.

        Raises:
            InvalidAction: Not the player's turn, special on cooldown,
                empty inventory
            InvalidInput: Item index out of range

        A rejected command leaves the battle untouched.
        """
        if self.state != BattleState.PLAYER_TURN:
            raise InvalidAction("It is not your turn.")

        if command.command == CommandType.PAUSE:
            self.pause()
            return TurnReport(state=self.state, player_messages=["Game paused."])

        player = self._player
        enemy = self.current_enemy
        report = TurnReport(state=self.state)

        result = self._execute_player_command(command, player, enemy)
        report.player_result = result
        report.player_messages.extend(result.messages)
        self._publish(BattleEvent.ACTION_COMPLETED, actor=player.name, result=result)

        self._turn_count += 1
        report.player_messages.extend(player.end_turn())
        self._publish(BattleEvent.TURN_ENDED, actor=player.name)

        if enemy.is_alive and player.is_alive:
            self.state = BattleState.ENEMY_TURN
            enemy_result = self._policy.take_turn(enemy, player)
            report.enemy_result = enemy_result
            report.enemy_messages.extend(enemy_result.messages)
            self._publish(BattleEvent.ACTION_COMPLETED, actor=enemy.name, result=enemy_result)

            report.enemy_messages.extend(enemy.end_turn())
            self._publish(BattleEvent.TURN_ENDED, actor=enemy.name)

        self.state = BattleState.CHECK_TERMINATION
        self._check_battle_end(report)
        report.state = self.state
        return report

    def _execute_player_command(
        self,
        command: PlayerCommand,
        player: Player,
        enemy: Combatant,
    ) -> ActionResult:
        if command.command == CommandType.ATTACK:
            return self._executor.execute_attack(player, enemy)
        if command.command == CommandType.SPECIAL:
            return self._executor.execute_special(player, enemy)
        if command.command == CommandType.DEFEND:
            return self._executor.execute_defend(player)
        if command.command == CommandType.ITEM:
            index = command.item_index if command.item_index is not None else -1
            return self._executor.execute_item(player, player.inventory, index, enemy)
        raise InvalidAction(f"Unknown command: {command.command}")

    def _check_battle_end(self, report: TurnReport) -> None:
        """Decide what follows the turn."""
        player = self._player
        enemy = self.current_enemy

        if not player.is_alive:
            self.state = BattleState.DEFEAT
            report.outcome_messages.append(f"{enemy.name} has defeated you...")
            logger.info("Defeat against %s", enemy.name)
            self._publish(BattleEvent.DEFEAT, enemy=enemy.name)
            return

        if not enemy.is_alive:
            report.outcome_messages.append(f"You defeated {enemy.name}!")
            logger.info("%s defeated in %d turns", enemy.name, self.turn_count)
            self._publish(BattleEvent.ACTOR_DEFEATED, name=enemy.name, turns=self.turn_count)
            report.rewards = self._award_victory(report)

            if self.remaining_enemies == 0:
                self.state = BattleState.VICTORY
                logger.info("Gauntlet cleared by %s", player.name)
                self._publish(BattleEvent.VICTORY, player=player.name)
            else:
                self.state = BattleState.ENEMY_DEFEATED
                report.outcome_messages.append(
                    f"Next enemy approaches: {self._enemies[self._enemy_index + 1].name}"
                )
            return

        self.state = BattleState.PLAYER_TURN

    def _award_victory(self, report: TurnReport) -> BattleRewards:
        """Grant XP and roll for a bonus item."""
        player = self._player
        rewards = BattleRewards(exp=XP_GAIN_PER_ENEMY)

        level_result = player.gain_experience(XP_GAIN_PER_ENEMY)
        report.outcome_messages.extend(level_result.messages)
        rewards.levels_gained = level_result.levels_gained
        if level_result.leveled_up:
            self._publish(BattleEvent.LEVEL_UP, name=player.name, level=player.level)

        if self.rng.random() < BONUS_ITEM_CHANCE:
            if player.inventory.add_item(BONUS_ITEM):
                rewards.items.append(BONUS_ITEM)
                report.outcome_messages.append(
                    f"You found a {BONUS_ITEM} on the defeated enemy!"
                )
                self._publish(BattleEvent.ITEM_FOUND, item=BONUS_ITEM)
            else:
                report.outcome_messages.append(f"Inventory is full! Cannot add {BONUS_ITEM}.")

        return rewards

    # Properties

    @property
    def player(self) -> Optional[Player]:
        return self._player

    @property
    def current_enemy(self) -> Optional[Combatant]:
        """Get the enemy currently being fought."""
        if 0 <= self._enemy_index < len(self._enemies):
            return self._enemies[self._enemy_index]
        return None

    @property
    def remaining_enemies(self) -> int:
        """Enemies still waiting after the current one."""
        return len(self._enemies) - self._enemy_index - 1

    @property
    def turn_count(self) -> int:
        """Turns resolved against the current enemy."""
        return self._turn_count
