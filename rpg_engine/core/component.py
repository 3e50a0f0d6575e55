"""
Component base class for data components.

Components are small pydantic models holding the state of one
concern (health, mana, combat modifiers, inventory). Helpers that
only touch their own fields live on the component; rules that span
several components live in the battle layer.

Usage:
    class Health(Component):
        current: int = 100
        max_hp: int = 100
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Component(BaseModel):
    """
    Base class for all components.

    Components use Pydantic for:
    - Automatic validation
    - Serialization
    - Type hints
    - Default values
    """

    model_config = ConfigDict(
        # Validate on assignment
        validate_assignment=True,
        # Catch typos in field names early
        extra='forbid',
    )
