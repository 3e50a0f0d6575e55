"""
Audio module - sound cues.
"""

from rpg_engine.audio.manager import AudioManager, DEFAULT_CUES

__all__ = [
    "AudioManager",
    "DEFAULT_CUES",
]
