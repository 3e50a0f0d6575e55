"""
RPG Engine

Small runtime for console role-playing games: data components,
a typed event bus, configuration, console input parsing and
sound cues.

Quick Start:
    from rpg_engine import EventBus, GameConfig
    from rpg_engine.input import parse_menu_choice

    choice = parse_menu_choice("2", 1, 4)
    if choice.ok:
        ...
"""

__version__ = "0.1.0"

from rpg_engine.core import Component, EventBus, Event, GameEvent, AudioEvent
from rpg_engine.config import GameConfig
from rpg_engine.errors import GameError, InvalidInput, InvalidAction, SaveFileError

__all__ = [
    # Core
    "Component",
    "EventBus",
    "Event",
    "GameEvent",
    "AudioEvent",
    # Config
    "GameConfig",
    # Errors
    "GameError",
    "InvalidInput",
    "InvalidAction",
    "SaveFileError",
]
