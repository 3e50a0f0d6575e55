"""
Battle actors - participants in combat.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional

from gauntlet.components import (
    BuffType,
    CombatStats,
    Health,
    Mana,
    StatusType,
)
from gauntlet.rules import (
    DEFENSE_BONUS_FROM_DEFEND,
    DEFENSIVE_STANCE_BUFF_VALUE,
    MAX_MANA,
)


class CombatantKind(Enum):
    """Combatant variant; selects the special move and AI profile."""
    WARRIOR = auto()
    MAGE = auto()


@dataclass
class Combatant:
    """
    A participant in battle.

    One class for every variant: ``kind`` selects abilities instead
    of subclassing. Mages carry a Mana component, Warriors do not.
    """
    name: str
    kind: CombatantKind
    health: Health
    attack_power: int
    combat: CombatStats = field(default_factory=CombatStats)
    mana: Optional[Mana] = None

    @property
    def is_alive(self) -> bool:
        """Check if actor is alive."""
        return not self.health.is_dead

    @property
    def current_hp(self) -> int:
        """Get current HP."""
        return self.health.current

    @property
    def max_hp(self) -> int:
        """Get max HP."""
        return self.health.max_hp

    @property
    def current_mp(self) -> int:
        """Get current MP."""
        return self.mana.current if self.mana else 0

    @property
    def special_cooldown(self) -> int:
        return self.combat.special_cooldown

    @property
    def can_use_special(self) -> bool:
        """Check if the special move is off cooldown."""
        return self.combat.special_cooldown == 0

    def get_attack(self) -> int:
        """Get total attack power including buffs."""
        return self.attack_power + self.combat.get_buff(BuffType.ATTACK_BOOST)

    def get_defense(self) -> int:
        """Get total defense including buffs."""
        return self.combat.defense + self.combat.get_buff(BuffType.DEFENSIVE_STANCE)

    def take_damage(self, amount: int) -> int:
        """
        Take damage reduced by total defense.

        Args:
            amount: Incoming damage (non-negative)

        Returns:
            Actual damage dealt
        """
        effective = max(0, amount - self.get_defense())
        return self.health.take_damage(effective)

    def heal(self, amount: int) -> int:
        """Heal HP."""
        return self.health.heal(amount)

    def apply_status(self, status_type: StatusType, duration: int) -> str:
        """Apply a status effect."""
        self.combat.add_status(status_type, duration)
        return f"{self.name} is affected by {status_type.label} for {duration} turns!"

    def has_status(self, status_type: StatusType) -> bool:
        """Check if has a status."""
        return self.combat.has_status(status_type)

    def add_buff(self, buff_type: BuffType, value: int) -> None:
        """Add a one-turn buff."""
        self.combat.add_buff(buff_type, value)

    def defend(self) -> str:
        """Raise defense until the end of this turn."""
        self.combat.defense = DEFENSE_BONUS_FROM_DEFEND
        self.add_buff(BuffType.DEFENSIVE_STANCE, DEFENSIVE_STANCE_BUFF_VALUE)
        return f"{self.name} assumes a defensive stance, reducing incoming damage!"

    def reduce_cooldown(self) -> None:
        """Count the special move cooldown down by one turn."""
        if self.combat.special_cooldown > 0:
            self.combat.special_cooldown -= 1

    def update_effects(self) -> list[str]:
        """
        End-of-turn hook.

        Ticks every status effect (damage, then countdown), then clears
        buffs and base defense.

        Returns:
            Messages describing ticks and expiries
        """
        messages = []
        for status_type in list(self.combat.status_effects):
            damage = self.take_damage(status_type.damage_per_turn)
            messages.append(f"{self.name} takes {damage} {status_type.label.lower()} damage!")
            if self.combat.tick_status(status_type):
                messages.append(f"{self.name} is no longer affected by {status_type.label}!")

        self.combat.clear_turn_modifiers()
        return messages

    def end_turn(self) -> list[str]:
        """Cooldown countdown plus effect update, once per turn."""
        self.reduce_cooldown()
        return self.update_effects()


@dataclass
class EnemyData:
    """Static data for enemy types."""
    id: str
    name: str
    hp: int = 50
    attack: int = 10
    kind: CombatantKind = CombatantKind.MAGE
    mp: int = MAX_MANA


ENEMY_ROSTER: tuple[EnemyData, ...] = (
    EnemyData(id="dark_mage", name="Dark Mage", hp=50, attack=10),
    EnemyData(id="shadow_wizard", name="Shadow Wizard", hp=70, attack=12),
)


def create_combatant_from_enemy(enemy_data: EnemyData) -> Combatant:
    """Create a Combatant from enemy data."""
    mana = None
    if enemy_data.kind == CombatantKind.MAGE:
        mana = Mana(current=enemy_data.mp, max_mp=MAX_MANA)

    return Combatant(
        name=enemy_data.name,
        kind=enemy_data.kind,
        health=Health(current=enemy_data.hp, max_hp=enemy_data.hp),
        attack_power=enemy_data.attack,
        mana=mana,
    )


def create_enemy_roster(
    roster: tuple[EnemyData, ...] = ENEMY_ROSTER,
) -> list[Combatant]:
    """Build a fresh gauntlet of enemies, in fighting order."""
    return [create_combatant_from_enemy(enemy) for enemy in roster]
