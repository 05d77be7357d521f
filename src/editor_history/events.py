"""Synchronous event bus used to notify the editor UI after history changes."""

import contextlib
import logging
from collections import defaultdict
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)

EventHandler = Callable[..., None]

# Standard history event names
CHECKPOINT_CREATED = "history:checkpoint_created"
HISTORY_RESTORE = "history:restore"
HISTORY_RESET = "history:reset"


class EventBus:
    """A simple event bus.

    Handlers are called in registration order when an event is emitted.
    A handler that raises is logged and skipped; the remaining handlers
    still run. Handlers run on the emitting thread; the bus does not order
    emits from different threads, the history tools do.
    """

    def __init__(self) -> None:
        self._handlers: defaultdict[str, list[EventHandler]] = defaultdict(list)

    def on(self, event: str, handler: EventHandler) -> Callable[[], None]:
        """Subscribe a handler to an event.

        Args:
            event: The event name to listen for.
            handler: Callable invoked with the event's keyword data.

        Returns:
            A callable that unsubscribes the handler.
        """
        self._handlers[event].append(handler)
        return lambda: self.off(event, handler)

    def off(self, event: str, handler: EventHandler) -> None:
        """Unsubscribe a handler (first occurrence only); unknown handlers are ignored."""
        with contextlib.suppress(ValueError):
            self._handlers[event].remove(handler)

    def emit(self, event: str, **data: Any) -> None:
        """Emit an event to every registered handler."""
        for handler in list(self._handlers[event]):
            try:
                handler(**data)
            except Exception:
                logger.exception("Handler for %s failed", event)

    def has_handlers(self, event: str) -> bool:
        return len(self._handlers[event]) > 0

    def clear(self) -> None:
        """Remove all handlers for all events."""
        self._handlers.clear()
