"""
Character components - health, mana, experience.
"""

from __future__ import annotations

from pydantic import Field

from rpg_engine.core.component import Component
from gauntlet.rules import (
    MAX_MANA,
    PLAYER_INITIAL_HEALTH,
    PLAYER_INITIAL_XP_TO_LEVEL,
    XP_INCREASE_PER_LEVEL,
)


class Health(Component):
    """
    Health points tracking.

    Attributes:
        current: Current HP, never negative
        max_hp: Maximum HP
    """
    current: int = Field(default=PLAYER_INITIAL_HEALTH, ge=0)
    max_hp: int = Field(default=PLAYER_INITIAL_HEALTH, gt=0)

    def model_post_init(self, __context):
        """Ensure current doesn't exceed max."""
        if self.current > self.max_hp:
            self.current = self.max_hp

    @property
    def is_dead(self) -> bool:
        """Check if HP has reached zero."""
        return self.current <= 0

    @property
    def percent(self) -> float:
        """Get health as percentage (0-1)."""
        return self.current / self.max_hp

    @property
    def is_full(self) -> bool:
        """Check if at full health."""
        return self.current >= self.max_hp

    def take_damage(self, amount: int) -> int:
        """
        Take damage.

        Args:
            amount: Damage to take

        Returns:
            Actual damage dealt
        """
        actual = max(0, min(amount, self.current))
        self.current -= actual
        return actual

    def heal(self, amount: int) -> int:
        """
        Heal health, capped at max HP.

        Args:
            amount: Amount to heal

        Returns:
            Actual amount healed
        """
        old = self.current
        self.current = min(self.current + max(0, amount), self.max_hp)
        return self.current - old

    def restore_full(self) -> None:
        """Heal to max HP."""
        self.current = self.max_hp


class Mana(Component):
    """
    Mana points tracking.

    Attributes:
        current: Current MP
        max_mp: Maximum MP
    """
    current: int = Field(default=MAX_MANA, ge=0)
    max_mp: int = Field(default=MAX_MANA, gt=0)

    def model_post_init(self, __context):
        """Ensure current doesn't exceed max."""
        if self.current > self.max_mp:
            self.current = self.max_mp

    @property
    def percent(self) -> float:
        """Get mana as percentage (0-1)."""
        return self.current / self.max_mp

    def spend(self, amount: int) -> bool:
        """
        Spend mana.

        Args:
            amount: Amount to spend

        Returns:
            True if successful, False if insufficient mana
        """
        if self.current >= amount:
            self.current -= amount
            return True
        return False

    def restore(self, amount: int) -> int:
        """
        Restore mana.

        Args:
            amount: Amount to restore

        Returns:
            Actual amount restored
        """
        old = self.current
        self.current = min(self.current + amount, self.max_mp)
        return self.current - old


class Experience(Component):
    """
    Experience and leveling tracking.

    Attributes:
        current: XP banked toward the next level
        level: Current level
        to_next_level: XP needed for next level
    """
    current: int = Field(default=0, ge=0)
    level: int = Field(default=1, ge=1)
    to_next_level: int = Field(default=PLAYER_INITIAL_XP_TO_LEVEL, gt=0)

    def add_exp(self, amount: int) -> int:
        """
        Add experience points.

        A large gain can cross several thresholds at once.

        Args:
            amount: XP to add

        Returns:
            Number of levels gained
        """
        self.current += amount

        levels_gained = 0
        while self.current >= self.to_next_level:
            self.current -= self.to_next_level
            self.level += 1
            levels_gained += 1
            self.to_next_level = self._calc_next_level_xp()

        return levels_gained

    def _calc_next_level_xp(self) -> int:
        """Calculate XP needed for next level."""
        # Linear curve
        return self.to_next_level + XP_INCREASE_PER_LEVEL
