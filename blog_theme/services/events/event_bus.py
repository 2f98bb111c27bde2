"""Synchronous event bus using the Observer pattern."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Dict, Generic, List, Type, TypeVar

from blog_theme.utils.logger import get_logger

logger = get_logger(__name__)

E = TypeVar("E", bound=Enum)


class EventBus(Generic[E]):
    """Dispatches events to subscribers on the caller's thread.

    A failing subscriber is logged and skipped so the remaining subscribers
    still run.
    """

    def __init__(self, event_type: Type[E]):
        self._event_type = event_type
        self._listeners: Dict[E, List[Callable[..., Any]]] = {
            event: [] for event in event_type
        }

    def subscribe(self, event: E, callback: Callable[..., Any]) -> None:
        """Subscribe to an event."""
        self._listeners.setdefault(event, []).append(callback)
        logger.debug(
            f"[EVENT_BUS] Subscribed to {event.name}, total listeners: {len(self._listeners[event])}"
        )

    def unsubscribe(self, event: E, callback: Callable[..., Any]) -> None:
        """Unsubscribe from an event."""
        if callback in self._listeners.get(event, []):
            self._listeners[event].remove(callback)
            logger.debug(f"[EVENT_BUS] Unsubscribed from {event.name}")

    def publish(self, event: E, **kwargs: Any) -> None:
        """Publish an event to all current subscribers."""
        listeners = list(self._listeners.get(event, []))
        if not listeners:
            logger.debug(f"[EVENT_BUS] No listeners registered for {event.name}")
            return

        for i, callback in enumerate(listeners):
            try:
                callback(**kwargs)
            except Exception as e:
                logger.error(
                    f"[EVENT_BUS] Error in {event.name} callback {i + 1}: {e}",
                    exc_info=True,
                )

    def clear(self) -> None:
        """Clear all subscriptions."""
        for listeners in self._listeners.values():
            listeners.clear()
        logger.info("[EVENT_BUS] Cleared all listeners")
