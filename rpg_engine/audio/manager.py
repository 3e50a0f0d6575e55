"""
Sound cue manager.

Cues are short named sounds ("attack", "heal"). When the pygame
mixer is available and a file is registered for a cue, the file is
played. Every cue is also published as AudioEvent.SFX_PLAYED so the
console can print a text placeholder when no audio device exists.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pygame

from rpg_engine.core.events import EventBus, AudioEvent

logger = logging.getLogger(__name__)

DEFAULT_CUES = ("attack", "heal")
SOUND_EXTENSIONS = (".wav", ".ogg")


class AudioManager:
    """
    Central sound cue player.

    Handles:
    - Mixer initialization (optional)
    - Cue name -> file registration
    - SFX caching and playback
    """

    def __init__(self, event_bus: EventBus | None = None, enabled: bool = True):
        self.event_bus = event_bus
        self.enabled = enabled

        self._cue_files: dict[str, Path] = {}
        self._sound_cache: dict[str, pygame.mixer.Sound] = {}
        self._initialized: bool = False

    def init(self, frequency: int = 44100, size: int = -16, channels: int = 2, buffer: int = 512) -> None:
        """Initialize the mixer. Failure leaves cues as text-only."""
        if not self.enabled or self._initialized:
            return

        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=frequency, size=size, channels=channels, buffer=buffer)
            self._initialized = True
            logger.info("Audio system initialized.")
        except pygame.error as e:
            logger.warning("Failed to initialize audio system: %s", e)

    def quit(self) -> None:
        """Shutdown audio system."""
        if self._initialized:
            pygame.mixer.quit()
        self._initialized = False
        self._sound_cache.clear()

    @property
    def is_initialized(self) -> bool:
        """Check if the mixer is ready for playback."""
        return self._initialized

    def register_cue(self, cue: str, file_path: str | Path) -> None:
        """Associate a cue name with a sound file."""
        self._cue_files[cue] = Path(file_path)

    def load_cues_from(self, sound_dir: str | Path, cues: tuple[str, ...] = DEFAULT_CUES) -> int:
        """
        Register cue files found in a directory (``<dir>/<cue>.wav`` or ``.ogg``).

        Returns:
            Number of cues registered
        """
        directory = Path(sound_dir)
        found = 0
        for cue in cues:
            for ext in SOUND_EXTENSIONS:
                candidate = directory / f"{cue}{ext}"
                if candidate.exists():
                    self.register_cue(cue, candidate)
                    found += 1
                    break
        return found

    def _get_sound(self, cue: str) -> pygame.mixer.Sound | None:
        """Load or retrieve the sound for a cue."""
        if not self._initialized or cue not in self._cue_files:
            return None

        if cue not in self._sound_cache:
            file_path = self._cue_files[cue]
            if not file_path.exists():
                logger.warning("Audio file not found: %s", file_path)
                return None
            try:
                self._sound_cache[cue] = pygame.mixer.Sound(str(file_path))
            except pygame.error as e:
                logger.warning("Failed to load sound %s: %s", file_path, e)
                return None

        return self._sound_cache[cue]

    def play_cue(self, cue: str) -> bool:
        """
        Play a sound cue.

        Args:
            cue: Cue name, e.g. "attack" or "heal"

        Returns:
            True if a sound file was actually played
        """
        played = False
        if self.enabled:
            sound = self._get_sound(cue)
            if sound is not None:
                sound.play()
                played = True

        if self.event_bus:
            self.event_bus.publish(AudioEvent.SFX_PLAYED, cue=cue, played=played)

        return played
