"""
Game configuration.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class GameConfig:
    """Configuration for a game session."""

    def __init__(
        self,
        title: str = "Gauntlet RPG",
        save_path: str | Path = "savegame.txt",
        seed: Optional[int] = None,
        action_delay: float = 1.0,
        sound_enabled: bool = True,
        sound_dir: str | Path = "assets/sounds",
        log_level: str = "WARNING",
        log_file: Optional[str | Path] = None,
    ):
        self.title = title
        self.save_path = Path(save_path)
        self.seed = seed
        self.action_delay = max(0.0, action_delay)
        self.sound_enabled = sound_enabled
        self.sound_dir = Path(sound_dir)
        self.log_level = log_level.upper()
        self.log_file = Path(log_file) if log_file else None

    def __repr__(self) -> str:
        return (
            f"GameConfig(title={self.title!r}, save_path={str(self.save_path)!r}, "
            f"seed={self.seed!r}, action_delay={self.action_delay!r}, "
            f"sound_enabled={self.sound_enabled!r})"
        )
