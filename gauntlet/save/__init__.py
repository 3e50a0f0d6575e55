"""
Save module - player progress persistence.

Provides:
- Plain text save file, one field per line
- Validation with fallback to a fresh player
- Save/load events
"""

from gauntlet.save.manager import (
    SaveManager,
    PlayerSaveData,
    SaveEvent,
)

__all__ = [
    "SaveManager",
    "PlayerSaveData",
    "SaveEvent",
]
