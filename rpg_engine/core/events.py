"""
Typed event bus for decoupled communication.

Uses Enums for event types to prevent magic strings. The battle
layer publishes what happened; the console and audio layers listen.

Usage:
    # Define events
    class BattleEvent(Enum):
        ACTOR_DEFEATED = auto()

    # Subscribe
    event_bus.subscribe(BattleEvent.ACTOR_DEFEATED, on_defeated)

    # Publish
    event_bus.publish(BattleEvent.ACTOR_DEFEATED, name="Dark Mage")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable
from weakref import WeakMethod, ref

logger = logging.getLogger(__name__)


class GameEvent(Enum):
    """Game lifecycle events."""
    GAME_START = auto()
    GAME_PAUSE = auto()
    GAME_RESUME = auto()
    GAME_QUIT = auto()


class AudioEvent(Enum):
    """Audio events."""
    SFX_PLAYED = auto()


@dataclass
class Event:
    """
    Event data container.

    Attributes:
        type: The event type (Enum member)
        data: Dictionary of event-specific data
    """
    type: Enum
    data: dict[str, Any] = field(default_factory=dict)

    def get(self, key: str, default: Any = None) -> Any:
        """Get event data by key."""
        return self.data.get(key, default)

    def __getitem__(self, key: str) -> Any:
        """Get event data by key (dict-style)."""
        return self.data[key]


# Type alias for event handlers
EventHandler = Callable[[Event], None]


class EventBus:
    """
    Central event bus for publish/subscribe messaging.

    Features:
    - Typed events (Enum-based)
    - Weak references (auto-cleanup when handlers are deleted)
    - Events published from a handler are queued until dispatch ends
    """

    def __init__(self):
        # Map of event type -> handler references in subscription order
        self._handlers: dict[Enum, list[Any]] = {}
        # Queue for events published during handling
        self._event_queue: list[Event] = []
        self._is_publishing = False

    def subscribe(self, event_type: Enum, handler: EventHandler, weak: bool = True) -> None:
        """
        Subscribe to an event type.

        Args:
            event_type: The event type to listen for
            handler: Callback function(event: Event)
            weak: If True, use weak reference (handler auto-removed if deleted)
        """
        if weak:
            if hasattr(handler, '__self__'):
                handler_ref = WeakMethod(handler)
            else:
                handler_ref = ref(handler)
        else:
            handler_ref = handler

        self._handlers.setdefault(event_type, []).append(handler_ref)

    def publish(self, event_type: Enum, **data: Any) -> Event:
        """
        Publish an event.

        Args:
            event_type: The event type
            **data: Event data as keyword arguments

        Returns:
            The Event object
        """
        event = Event(type=event_type, data=data)

        if self._is_publishing:
            # Queue event if we're already publishing
            self._event_queue.append(event)
        else:
            self._dispatch(event)

        return event

    def _dispatch(self, event: Event) -> None:
        """Dispatch event to handlers."""
        if event.type not in self._handlers:
            return

        self._is_publishing = True
        handlers = self._handlers[event.type]
        to_remove = []

        try:
            for i, handler_ref in enumerate(handlers):
                handler = self._get_handler(handler_ref)

                if handler is None:
                    # Weak reference was garbage collected
                    to_remove.append(i)
                    continue

                try:
                    handler(event)
                except Exception:
                    # Log but don't crash
                    logger.exception("Error in event handler for %s", event.type)

            for i in reversed(to_remove):
                handlers.pop(i)
        finally:
            self._is_publishing = False

        # Process queued events
        while self._event_queue:
            self._dispatch(self._event_queue.pop(0))

    def _get_handler(self, handler_ref: Any) -> EventHandler | None:
        """Resolve handler from reference."""
        if callable(handler_ref) and not isinstance(handler_ref, (ref, WeakMethod)):
            # Strong reference
            return handler_ref

        return handler_ref()
