"""
Gauntlet components - data models for combatants.

All components are Pydantic models (see rpg_engine.core.Component).
"""

from gauntlet.components.character import Health, Mana, Experience
from gauntlet.components.combat import (
    CombatStats,
    StatusType,
    BuffType,
    STATUS_DAMAGE,
)
from gauntlet.components.inventory import Inventory

__all__ = [
    # Character
    "Health",
    "Mana",
    "Experience",
    # Combat
    "CombatStats",
    "StatusType",
    "BuffType",
    "STATUS_DAMAGE",
    # Inventory
    "Inventory",
]
