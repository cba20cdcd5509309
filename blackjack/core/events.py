"""
Event system for the blackjack engine.

Every mutable game object (card, hand, player, deck, engine) owns its own
EventEmitter. Observers such as a presentation layer subscribe directly on
the object they care about; there is no process-wide bus.
"""

from typing import Any, Callable, Dict, List, Optional
from dataclasses import dataclass
from enum import Enum
import logging
import time


class EventType(Enum):
    """Types of events that can be emitted by game objects."""

    # Card / hand / player events
    CARD_VISIBILITY_CHANGED = "card_visibility_changed"
    HAND_CHANGED = "hand_changed"
    STANDING_CHANGED = "standing_changed"

    # Deck events
    DECK_SHUFFLED = "deck_shuffled"

    # Game lifecycle events
    GAME_STARTED = "game_started"
    GAME_ENDED = "game_ended"


@dataclass
class GameEvent:
    """Represents a game event with associated data.

    Attributes:
        event_type: The type of event
        data: Event-specific data
        timestamp: When the event occurred (optional)
        source: The object that emitted the event (optional)
    """

    event_type: EventType
    data: Dict[str, Any]
    timestamp: Optional[float] = None
    source: Optional[Any] = None

    def __post_init__(self):
        """Set timestamp if not provided."""
        if self.timestamp is None:
            self.timestamp = time.time()


# Type alias for event listeners
EventListener = Callable[[GameEvent], None]


class EventEmitter:
    """Synchronous publish/subscribe channel owned by a single game object.

    Listeners are called in subscription order at the point of emission.
    A listener that raises is logged and the exception propagates to the
    code that triggered the event.
    """

    def __init__(self, source: Optional[Any] = None,
                 logger: Optional[logging.Logger] = None,
                 max_history: int = 0):
        """Initialize the emitter.

        Args:
            source: Object reported as the source of emitted events
            logger: Optional logger for debugging events
            max_history: Number of past events to keep, 0 keeps none
        """
        self._source = source
        self._listeners: Dict[EventType, List[EventListener]] = {}
        self._logger = logger or logging.getLogger(__name__)
        self._event_history: List[GameEvent] = []
        self._max_history = max_history

    def subscribe(self, event_type: EventType, listener: EventListener) -> None:
        """Subscribe a listener to an event type.

        Args:
            event_type: The type of event to listen for
            listener: The callback function to call when the event occurs
        """
        self._listeners.setdefault(event_type, []).append(listener)
        self._logger.debug(f"Subscribed listener to {event_type.value}")

    def unsubscribe(self, event_type: EventType, listener: EventListener) -> bool:
        """Unsubscribe a listener from an event type.

        Args:
            event_type: The type of event to stop listening for
            listener: The callback function to remove

        Returns:
            True if the listener was found and removed, False otherwise
        """
        listeners = self._listeners.get(event_type)
        if not listeners or listener not in listeners:
            return False

        listeners.remove(listener)
        self._logger.debug(f"Unsubscribed listener from {event_type.value}")
        return True

    def emit(self, event: GameEvent) -> None:
        """Emit an event to all subscribed listeners.

        A listener that raises is logged and skipped; the remaining listeners
        are still notified and the emitting object's state change stands.

        Args:
            event: The event to emit
        """
        if self._max_history:
            self._event_history.append(event)
            if len(self._event_history) > self._max_history:
                self._event_history.pop(0)

        # Copy so listeners may unsubscribe while being notified
        listeners = list(self._listeners.get(event.event_type, []))
        self._logger.debug(f"Emitting {event.event_type.value} to {len(listeners)} listeners")

        for listener in listeners:
            try:
                listener(event)
            except Exception as e:
                self._logger.error(f"Error in {event.event_type.value} listener: {e}")

    def emit_simple(self, event_type: EventType, **data) -> None:
        """Emit an event built from keyword arguments.

        Args:
            event_type: The type of event to emit
            **data: Event data as keyword arguments
        """
        self.emit(GameEvent(event_type=event_type, data=data, source=self._source))

    def get_listeners_count(self, event_type: EventType) -> int:
        """Get the number of listeners for an event type."""
        return len(self._listeners.get(event_type, []))

    def clear_listeners(self, event_type: Optional[EventType] = None) -> None:
        """Clear listeners for a specific event type or all event types.

        Args:
            event_type: The event type to clear, or None to clear all
        """
        if event_type is None:
            self._listeners.clear()
            self._logger.debug("Cleared all event listeners")
        else:
            self._listeners.pop(event_type, None)
            self._logger.debug(f"Cleared listeners for {event_type.value}")

    def get_event_history(self, event_type: Optional[EventType] = None,
                          limit: Optional[int] = None) -> List[GameEvent]:
        """Get event history, optionally filtered by type and limited.

        Args:
            event_type: Optional event type to filter by
            limit: Optional limit on number of events to return

        Returns:
            List of events from history, oldest first
        """
        events = self._event_history

        if event_type is not None:
            events = [e for e in events if e.event_type == event_type]

        if limit is not None:
            events = events[-limit:]

        return list(events)

    def clear_history(self) -> None:
        """Clear the event history."""
        self._event_history.clear()
