"""
Enemy decision policy.

The decision itself is a pure function of a PolicyView and a random
source; executing it and regenerating mana is done by EnemyPolicy.
Pass a seeded ``random.Random`` (or any object with ``random()``)
for reproducible battles.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Protocol

from gauntlet.battle.actions import ActionResult, BattleActionExecutor, special_move_for
from gauntlet.battle.actor import Combatant, CombatantKind
from gauntlet.rules import MAGE_MANA_REGEN_PER_TURN


class RandomSource(Protocol):
    def random(self) -> float: ...


class EnemyAction(Enum):
    """Actions an enemy can choose."""
    ATTACK = auto()
    SPECIAL = auto()
    DEFEND = auto()


@dataclass(frozen=True)
class PolicyProfile:
    """Probabilities driving one variant's behaviour."""
    low_health_defend_chance: float
    special_chance: float
    idle_defend_chance: float
    mana_regen: int = 0


POLICY_PROFILES: dict[CombatantKind, PolicyProfile] = {
    CombatantKind.MAGE: PolicyProfile(
        low_health_defend_chance=0.7,
        special_chance=0.4,
        idle_defend_chance=0.2,
        mana_regen=MAGE_MANA_REGEN_PER_TURN,
    ),
    CombatantKind.WARRIOR: PolicyProfile(
        low_health_defend_chance=0.6,
        special_chance=0.3,
        idle_defend_chance=0.2,
    ),
}


@dataclass(frozen=True)
class PolicyView:
    """Everything the policy may look at."""
    health: int
    max_health: int
    mana: int
    cooldown: int
    special_cost: int
    special_damage: int
    target_health: int
    target_attack: int

    @classmethod
    def from_actors(cls, enemy: Combatant, target: Combatant) -> PolicyView:
        move = special_move_for(enemy)
        return cls(
            health=enemy.current_hp,
            max_health=enemy.max_hp,
            mana=enemy.current_mp,
            cooldown=enemy.special_cooldown,
            special_cost=move.mana_cost,
            special_damage=move.damage_for(enemy.attack_power),
            target_health=target.current_hp,
            target_attack=target.get_attack(),
        )

    @property
    def special_ready(self) -> bool:
        return self.cooldown == 0 and self.mana >= self.special_cost


def choose_action(
    view: PolicyView,
    rng: RandomSource,
    profile: PolicyProfile = POLICY_PROFILES[CombatantKind.MAGE],
) -> EnemyAction:
    """
    Pick an enemy action.

    Priority:
    1. Below a third of max health: defend with ``low_health_defend_chance``,
       otherwise fall through.
    2. Special ready: use it if lethal or with ``special_chance``, else attack.
    3. Otherwise defend with ``idle_defend_chance``, else attack.
    """
    # Exact third; 16 of 50 counts as low
    if view.health < view.max_health / 3:
        if rng.random() < profile.low_health_defend_chance:
            return EnemyAction.DEFEND

    if view.special_ready:
        if view.target_health <= view.special_damage or rng.random() < profile.special_chance:
            return EnemyAction.SPECIAL
        return EnemyAction.ATTACK

    if rng.random() < profile.idle_defend_chance:
        return EnemyAction.DEFEND
    return EnemyAction.ATTACK


class EnemyPolicy:
    """Executes one enemy turn against a target."""

    def __init__(self, executor: BattleActionExecutor, rng: Optional[RandomSource] = None):
        self.executor = executor
        self.rng = rng or random.Random()

    def decide(self, enemy: Combatant, target: Combatant) -> EnemyAction:
        return choose_action(
            PolicyView.from_actors(enemy, target),
            self.rng,
            POLICY_PROFILES[enemy.kind],
        )

    def take_turn(self, enemy: Combatant, target: Combatant) -> ActionResult:
        """Choose and execute an action, then regenerate mana."""
        action = self.decide(enemy, target)

        if action == EnemyAction.DEFEND:
            result = self.executor.execute_defend(enemy)
        elif action == EnemyAction.SPECIAL:
            result = self.executor.execute_special(enemy, target)
        else:
            result = self.executor.execute_attack(enemy, target)

        profile = POLICY_PROFILES[enemy.kind]
        if enemy.mana is not None and profile.mana_regen > 0:
            enemy.mana.restore(profile.mana_regen)

        return result
