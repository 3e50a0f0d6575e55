"""
Core engine module.

Exports:
- Component: pydantic base for data components
- EventBus, Event, GameEvent, AudioEvent: Event system
"""

from rpg_engine.core.component import Component
from rpg_engine.core.events import EventBus, Event, GameEvent, AudioEvent

__all__ = [
    # Components
    "Component",
    # Events
    "EventBus",
    "Event",
    "GameEvent",
    "AudioEvent",
]
