"""
Event system for the twentyone engine.

This module provides a small synchronous publish/subscribe channel. The game
computes an outcome first and then emits it; subscribers (printing, logging,
statistics) run immediately on the same thread, in priority order.
"""

from collections import defaultdict
from typing import Any, Callable, Dict, Union
import logging
from enum import Enum

# Create a logger for the event system
logger = logging.getLogger("twentyone.events")


class EventPriority(Enum):
    """Priority levels for event handlers."""

    LOW = 0
    NORMAL = 1
    HIGH = 2
    CRITICAL = 3


class EngineEventType(Enum):
    """
    Event types emitted by a game.

    Payloads:
    - DECK_SHUFFLED: {"cards": int}
    - HAND_DEALT: {"hand": BlackjackHand, "points": int}
    - HAND_BUSTED: {"hand": BlackjackHand, "points": int, "error": BustedError}
    - ROUND_STARTED: {"round": int}
    - ROUND_ENDED: {"round": int, "result": RoundResult}
    - SIMULATION_RESULT: {"stats": SimulationStats, "summary": str}
    """

    DECK_SHUFFLED = "deck_shuffled"
    HAND_DEALT = "hand_dealt"
    HAND_BUSTED = "hand_busted"
    ROUND_STARTED = "round_started"
    ROUND_ENDED = "round_ended"
    SIMULATION_RESULT = "simulation_result"


class EventEmitter:
    """
    Event emitter owned by a single game.

    Features:
    - Supports event subscription with priorities
    - Allows once-only subscriptions
    - Supports subscribing to all events with event type filtering in handler
    - A failing handler is logged and does not stop the others
    """

    def __init__(self):
        """Initialize the event emitter."""
        self._listeners = defaultdict(list)
        self._global_listeners = []

    @staticmethod
    def _insert(handlers: list, callback: Callable, priority: EventPriority) -> None:
        handler = {"callback": callback, "priority": priority.value}
        # Insert handler in order of priority (higher numbers first)
        for i, existing in enumerate(handlers):
            if existing["priority"] < priority.value:
                handlers.insert(i, handler)
                break
        else:
            handlers.append(handler)

    @staticmethod
    def _remove(handlers: list, callback: Callable) -> None:
        for i, existing in enumerate(handlers):
            if existing["callback"] == callback:
                handlers.pop(i)
                break

    def on(
        self,
        event_type: Union[str, Enum],
        callback: Callable,
        priority: EventPriority = EventPriority.NORMAL,
    ) -> Callable:
        """
        Subscribe to an event type.

        Args:
            event_type: The event type to subscribe to (string or enum)
            callback: Function to call when event occurs, signature: fn(event_data)
            priority: Priority level for this handler

        Returns:
            Unsubscribe function that can be called to remove this subscription
        """
        if isinstance(event_type, Enum):
            event_type = event_type.name

        handlers = self._listeners[event_type]
        self._insert(handlers, callback, priority)

        def unsubscribe():
            self._remove(self._listeners[event_type], callback)

        return unsubscribe

    def once(
        self,
        event_type: Union[str, Enum],
        callback: Callable,
        priority: EventPriority = EventPriority.NORMAL,
    ) -> Callable:
        """
        Subscribe to an event type for a single occurrence.

        Returns:
            Unsubscribe function that can be called to remove this subscription
        """
        unsubscribe_ref = []

        def one_time_handler(event_data):
            try:
                callback(event_data)
            finally:
                # Unsubscribe even if callback raises
                if unsubscribe_ref:
                    unsubscribe_ref[0]()

        unsubscribe_ref.append(self.on(event_type, one_time_handler, priority))
        return unsubscribe_ref[0]

    def on_any(
        self, callback: Callable, priority: EventPriority = EventPriority.NORMAL
    ) -> Callable:
        """
        Subscribe to all events.

        Args:
            callback: Function to call for any event, signature: fn((event_type, event_data))
            priority: Priority level for this handler

        Returns:
            Unsubscribe function that can be called to remove this subscription
        """
        self._insert(self._global_listeners, callback, priority)

        def unsubscribe():
            self._remove(self._global_listeners, callback)

        return unsubscribe

    def emit(self, event_type: Union[str, Enum], data: Dict[str, Any]) -> None:
        """
        Emit an event to all registered listeners.

        Args:
            event_type: The type of event to emit
            data: The data to include with the event
        """
        if isinstance(event_type, Enum):
            event_type = event_type.name

        # Snapshot so handlers may unsubscribe while being called
        handlers_to_call = [
            (handler["callback"], data) for handler in self._listeners.get(event_type, [])
        ]
        handlers_to_call.extend(
            (handler["callback"], (event_type, data))
            for handler in self._global_listeners
        )

        for callback, args in handlers_to_call:
            try:
                callback(args)
            except Exception as e:
                logger.error(
                    f"Error in event handler for {event_type}: {e}", exc_info=True
                )

    def listener_count(self, event_type: Union[str, Enum]) -> int:
        """Number of handlers subscribed to a specific event type."""
        if isinstance(event_type, Enum):
            event_type = event_type.name
        return len(self._listeners.get(event_type, []))

    def remove_all_listeners(self, event_type: Union[str, Enum, None] = None) -> None:
        """
        Remove all listeners for a specific event type or all events.

        Args:
            event_type: Optional event type. If None, removes all listeners for all events.
        """
        if event_type is None:
            self._listeners.clear()
            self._global_listeners.clear()
        else:
            if isinstance(event_type, Enum):
                event_type = event_type.name
            self._listeners[event_type].clear()
