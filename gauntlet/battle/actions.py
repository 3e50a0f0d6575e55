"""
Battle actions - attack, special move, item, defend.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, Optional

from rpg_engine.errors import InvalidAction
from gauntlet.battle.actor import Combatant, CombatantKind
from gauntlet.components import BuffType, StatusType
from gauntlet.rules import (
    ATTACK_BOOST,
    ATTACK_BOOST_VALUE,
    FIREBALL_BONUS_DAMAGE,
    FIREBALL_BURN_DURATION,
    HEALTH_POTION,
    HEALTH_POTION_HEAL_AMOUNT,
    MAGE_MANA_COST_FIREBALL,
    MAGE_SPECIAL_COOLDOWN,
    POISON_DART,
    POISON_DART_DURATION,
    WARRIOR_SPECIAL_COOLDOWN,
)

if TYPE_CHECKING:
    from rpg_engine.audio import AudioManager
    from gauntlet.components import Inventory


class ActionType(Enum):
    """Types of battle actions."""
    ATTACK = auto()
    SPECIAL = auto()
    DEFEND = auto()
    ITEM = auto()


@dataclass
class ActionResult:
    """Result of executing a battle action."""
    action_type: ActionType
    success: bool = True
    damage_dealt: int = 0
    healing_done: int = 0
    mana_cost: int = 0
    statuses_applied: list[StatusType] = field(default_factory=list)
    item_used: Optional[str] = None
    message: str = ""
    extra_messages: list[str] = field(default_factory=list)

    @property
    def messages(self) -> list[str]:
        """Main message followed by secondary effect messages."""
        return [self.message, *self.extra_messages] if self.message else list(self.extra_messages)


@dataclass(frozen=True)
class SpecialMoveData:
    """Static data for a variant's special move."""
    name: str
    cooldown: int
    damage_multiplier: int = 1
    bonus_damage: int = 0
    mana_cost: int = 0
    status_effect: Optional[StatusType] = None
    status_duration: int = 0
    verb: str = "uses"

    def damage_for(self, attack_power: int) -> int:
        """Raw damage before the target's defense."""
        return attack_power * self.damage_multiplier + self.bonus_damage


SPECIAL_MOVES: dict[CombatantKind, SpecialMoveData] = {
    CombatantKind.WARRIOR: SpecialMoveData(
        name="Heavy Strike",
        cooldown=WARRIOR_SPECIAL_COOLDOWN,
        damage_multiplier=2,
        verb="performs a",
    ),
    CombatantKind.MAGE: SpecialMoveData(
        name="Fireball",
        cooldown=MAGE_SPECIAL_COOLDOWN,
        bonus_damage=FIREBALL_BONUS_DAMAGE,
        mana_cost=MAGE_MANA_COST_FIREBALL,
        status_effect=StatusType.BURN,
        status_duration=FIREBALL_BURN_DURATION,
        verb="casts",
    ),
}


def special_move_for(actor: Combatant) -> SpecialMoveData:
    """Get the special move of an actor's variant."""
    return SPECIAL_MOVES[actor.kind]


@dataclass(frozen=True)
class ItemData:
    """Static data for a usable item."""
    id: str
    name: str
    description: str = ""
    hp_restore: int = 0
    attack_buff: int = 0
    applies_status: Optional[StatusType] = None
    status_duration: int = 0
    targets_enemy: bool = False
    sound_cue: Optional[str] = None


ITEMS: dict[str, ItemData] = {
    HEALTH_POTION: ItemData(
        id="health_potion",
        name=HEALTH_POTION,
        description=f"Restores {HEALTH_POTION_HEAL_AMOUNT} HP.",
        hp_restore=HEALTH_POTION_HEAL_AMOUNT,
        sound_cue="heal",
    ),
    ATTACK_BOOST: ItemData(
        id="attack_boost",
        name=ATTACK_BOOST,
        description=f"+{ATTACK_BOOST_VALUE} attack for this turn.",
        attack_buff=ATTACK_BOOST_VALUE,
    ),
    POISON_DART: ItemData(
        id="poison_dart",
        name=POISON_DART,
        description=f"Poisons the enemy for {POISON_DART_DURATION} turns.",
        applies_status=StatusType.POISON,
        status_duration=POISON_DART_DURATION,
        targets_enemy=True,
    ),
}


class BattleActionExecutor:
    """
    Executes battle actions and calculates results.

    Every rejected action raises before any state is changed.
    """

    def __init__(self, audio: Optional[AudioManager] = None):
        self._audio = audio

    def _cue(self, cue: str) -> None:
        if self._audio:
            self._audio.play_cue(cue)

    def _require_alive(self, actor: Combatant) -> None:
        if not actor.is_alive:
            raise InvalidAction(f"{actor.name} has been defeated and cannot act.")

    def execute_attack(self, attacker: Combatant, target: Combatant) -> ActionResult:
        """Execute a regular attack."""
        self._require_alive(attacker)

        damage = target.take_damage(attacker.get_attack())
        self._cue("attack")

        return ActionResult(
            action_type=ActionType.ATTACK,
            damage_dealt=damage,
            message=f"{attacker.name} attacks {target.name} for {damage} damage!",
        )

    def execute_special(self, user: Combatant, target: Combatant) -> ActionResult:
        """Execute the user's variant special move."""
        self._require_alive(user)
        move = special_move_for(user)

        if not user.can_use_special:
            raise InvalidAction(
                f"Special move is on cooldown for {user.special_cooldown} more turns!"
            )
        if move.mana_cost > 0 and (user.mana is None or user.mana.current < move.mana_cost):
            raise InvalidAction(f"Not enough mana to cast {move.name}!")

        if move.mana_cost > 0:
            user.mana.spend(move.mana_cost)

        damage = target.take_damage(move.damage_for(user.attack_power))
        result = ActionResult(
            action_type=ActionType.SPECIAL,
            damage_dealt=damage,
            mana_cost=move.mana_cost,
            message=f"{user.name} {move.verb} {move.name} on {target.name} for {damage} damage!",
        )

        if move.status_effect is not None:
            result.extra_messages.append(
                target.apply_status(move.status_effect, move.status_duration)
            )
            result.statuses_applied.append(move.status_effect)

        user.combat.special_cooldown = move.cooldown
        self._cue("attack")
        return result

    def execute_defend(self, actor: Combatant) -> ActionResult:
        """Execute defend action."""
        self._require_alive(actor)
        return ActionResult(action_type=ActionType.DEFEND, message=actor.defend())

    def execute_item(
        self,
        user: Combatant,
        inventory: Inventory,
        index: int,
        target: Combatant,
    ) -> ActionResult:
        """
        Use the inventory item at a 0-based index.

        Raises:
            InvalidAction: Empty inventory or an item with no battle effect
            InvalidInput: Index outside the inventory
        """
        self._require_alive(user)
        name = inventory.get_item(index)
        item = ITEMS.get(name)
        if item is None:
            raise InvalidAction(f"{name} has no effect in battle!")

        result = ActionResult(action_type=ActionType.ITEM, item_used=name)

        if item.hp_restore > 0:
            result.healing_done = user.heal(item.hp_restore)
            result.message = f"Used {name}. Health increased by {result.healing_done}!"

        if item.attack_buff > 0:
            user.add_buff(BuffType.ATTACK_BOOST, item.attack_buff)
            result.message = (
                f"Used {name}. Attack power increased by {item.attack_buff} for this turn!"
            )

        if item.applies_status is not None:
            status_target = target if item.targets_enemy else user
            result.message = f"Used {name}. " + status_target.apply_status(
                item.applies_status, item.status_duration
            )
            result.statuses_applied.append(item.applies_status)

        inventory.remove_at(index)

        if item.sound_cue:
            self._cue(item.sound_cue)

        return result
