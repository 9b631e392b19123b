"""
Change notifications: lets the presentation layer redraw after a list changes.

Models emit only when something actually changed; no-op calls stay silent.
"""
import logging
from typing import Callable, Dict, List

from .schema import ListEvent

logger = logging.getLogger(__name__)


class ListEventBus:
    """Routes list change events to subscribed callbacks."""

    def __init__(self):
        self.subscribers: Dict[ListEvent, List[Callable]] = {}

    def subscribe(self, event: ListEvent, callback: Callable) -> None:
        """Register a callback for an event type."""
        if event not in self.subscribers:
            self.subscribers[event] = []
        self.subscribers[event].append(callback)

    def unsubscribe(self, event: ListEvent, callback: Callable) -> bool:
        """Remove a callback. Returns False if it was not registered."""
        callbacks = self.subscribers.get(event, [])
        if callback not in callbacks:
            return False
        callbacks.remove(callback)
        return True

    def emit(self, event: ListEvent, **kwargs) -> None:
        """Emit an event to all subscribers."""
        for callback in list(self.subscribers.get(event, [])):
            try:
                callback(**kwargs)
            except Exception as e:
                logger.error(f"Error in {event.value} callback: {e}")
