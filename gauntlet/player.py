"""
Player character - a Warrior with experience and an inventory.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from gauntlet.battle.actor import Combatant, CombatantKind
from gauntlet.components import Experience, Health, Inventory
from gauntlet.rules import (
    ATTACK_INCREASE_PER_LEVEL,
    DEFAULT_PLAYER_NAME,
    HEALTH_INCREASE_PER_LEVEL,
    PLAYER_INITIAL_ATTACK_POWER,
    PLAYER_INITIAL_HEALTH,
)

logger = logging.getLogger(__name__)


@dataclass
class LevelUpResult:
    """Outcome of an experience gain."""
    xp_gained: int
    levels_gained: int = 0
    new_level: int = 1
    messages: list[str] = field(default_factory=list)

    @property
    def leveled_up(self) -> bool:
        return self.levels_gained > 0


@dataclass
class Player(Combatant):
    """The player's combatant."""
    experience: Experience = field(default_factory=Experience)
    inventory: Inventory = field(default_factory=Inventory)

    @classmethod
    def create(cls, name: str = DEFAULT_PLAYER_NAME) -> Player:
        """Create a player with starting stats and kit."""
        player = cls(
            name=name.strip() or DEFAULT_PLAYER_NAME,
            kind=CombatantKind.WARRIOR,
            health=Health(current=PLAYER_INITIAL_HEALTH, max_hp=PLAYER_INITIAL_HEALTH),
            attack_power=PLAYER_INITIAL_ATTACK_POWER,
        )
        player.inventory.reset()
        return player

    @property
    def level(self) -> int:
        return self.experience.level

    def gain_experience(self, xp: int) -> LevelUpResult:
        """
        Add XP and apply every level-up it triggers.

        Each level adds max HP and attack; any level-up heals to full.
        """
        result = LevelUpResult(xp_gained=xp, messages=[f"{self.name} gains {xp} XP!"])
        levels = self.experience.add_exp(xp)
        result.levels_gained = levels
        result.new_level = self.experience.level

        if levels:
            self.health.max_hp += HEALTH_INCREASE_PER_LEVEL * levels
            self.attack_power += ATTACK_INCREASE_PER_LEVEL * levels
            self.health.restore_full()
            result.messages.append(
                f"Congratulations! {self.name} has leveled up to Level {self.level}!"
            )
            logger.info("%s reached level %d", self.name, self.level)

        return result

    def reset(self) -> None:
        """Restore starting stats, keeping the name."""
        self.health = Health(current=PLAYER_INITIAL_HEALTH, max_hp=PLAYER_INITIAL_HEALTH)
        self.attack_power = PLAYER_INITIAL_ATTACK_POWER
        self.combat.clear_all()
        self.experience = Experience()
        self.inventory.reset()
