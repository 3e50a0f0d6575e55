"""
Combat components - defense, cooldown, status effects, temporary buffs.
"""

from __future__ import annotations

from enum import Enum

from pydantic import Field

from rpg_engine.core.component import Component
from gauntlet.rules import BURN_DAMAGE_PER_TURN, POISON_DAMAGE_PER_TURN


class StatusType(Enum):
    """Timed damage-over-time effects."""
    POISON = "Poison"
    BURN = "Burn"

    @property
    def label(self) -> str:
        return self.value

    @property
    def damage_per_turn(self) -> int:
        """Fixed damage dealt on each end-of-turn tick."""
        return STATUS_DAMAGE[self]


STATUS_DAMAGE: dict[StatusType, int] = {
    StatusType.POISON: POISON_DAMAGE_PER_TURN,
    StatusType.BURN: BURN_DAMAGE_PER_TURN,
}


class BuffType(Enum):
    """One-turn modifiers."""
    ATTACK_BOOST = "Attack Boost"
    DEFENSIVE_STANCE = "Defensive Stance"

    @property
    def label(self) -> str:
        return self.value


class CombatStats(Component):
    """
    Combat-specific state for one combatant.

    Attributes:
        defense: Base defense from the Defend action, reset every turn end
        special_cooldown: Turns until the special move is ready
        status_effects: Active status -> remaining turns
        buffs: Active buff -> magnitude, cleared every turn end
    """
    defense: int = Field(default=0, ge=0)
    special_cooldown: int = Field(default=0, ge=0)
    status_effects: dict[StatusType, int] = Field(default_factory=dict)
    buffs: dict[BuffType, int] = Field(default_factory=dict)

    def add_status(self, status_type: StatusType, duration: int) -> None:
        """Apply a status effect, refreshing the duration if already active."""
        if duration <= 0:
            return
        self.status_effects[status_type] = duration

    def has_status(self, status_type: StatusType) -> bool:
        """Check if has a status effect."""
        return status_type in self.status_effects

    def tick_status(self, status_type: StatusType) -> bool:
        """
        Count down one turn of a status effect.

        Returns:
            True if the effect expired and was removed
        """
        remaining = self.status_effects.get(status_type, 0) - 1
        if remaining <= 0:
            self.status_effects.pop(status_type, None)
            return True
        self.status_effects[status_type] = remaining
        return False

    def add_buff(self, buff_type: BuffType, value: int) -> None:
        """Add a buff; an existing buff of the same type is overwritten."""
        self.buffs[buff_type] = value

    def get_buff(self, buff_type: BuffType) -> int:
        """Get buff magnitude (0 if inactive)."""
        return self.buffs.get(buff_type, 0)

    def clear_turn_modifiers(self) -> None:
        """Clear all buffs and base defense."""
        self.buffs.clear()
        self.defense = 0

    def clear_all(self) -> None:
        """Reset to a clean combat state."""
        self.status_effects.clear()
        self.clear_turn_modifiers()
        self.special_cooldown = 0

    def describe_statuses(self) -> str:
        """Human-readable status list, e.g. ``Poison(3), Burn(1)``."""
        if not self.status_effects:
            return "None"
        return ", ".join(
            f"{status.label}({turns})" for status, turns in self.status_effects.items()
        )
