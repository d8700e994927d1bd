"""Event dispatch from the session service to component handlers.

Handlers run synchronously, one at a time, in subscription order. A handler that
raises is logged and skipped; the dispatch loop itself never fails.

Usage:
    dispatcher = EventDispatcher()
    resolver.attach(dispatcher)
    coordinator.attach(dispatcher)

    # Called by the host's session integration
    dispatcher.dispatch(SessionEvent.JOINED_SESSION)
    dispatcher.dispatch(SessionEvent.LEADER_CHANGED, new_leader)
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable
from typing import Any

import structlog

from sessionspawn.session.models import SessionEvent

logger = structlog.get_logger(__name__)

EventHandler = Callable[..., Any]


class EventDispatcher:
    """Routes SessionEvents to subscribed handlers."""

    def __init__(self) -> None:
        self._handlers: dict[SessionEvent, list[EventHandler]] = defaultdict(list)

    def subscribe(self, event: SessionEvent, handler: EventHandler) -> None:
        """Register handler for event. Subscribing twice is a no-op."""
        handlers = self._handlers[event]
        if handler not in handlers:
            handlers.append(handler)

    def unsubscribe(self, event: SessionEvent, handler: EventHandler) -> bool:
        """Remove handler from event. Returns True if it was subscribed."""
        handlers = self._handlers.get(event)
        if not handlers or handler not in handlers:
            return False
        handlers.remove(handler)
        return True

    def handlers(self, event: SessionEvent) -> tuple[EventHandler, ...]:
        return tuple(self._handlers.get(event, ()))

    def dispatch(self, event: SessionEvent, *args: Any) -> int:
        """Deliver event to every handler subscribed at dispatch time.

        Args:
            event: The lifecycle event.
            *args: Event arguments (e.g. the new leader for LEADER_CHANGED).

        Returns:
            Number of handlers that completed without raising.
        """
        completed = 0
        # Snapshot: handlers may (un)subscribe while running
        for handler in tuple(self._handlers.get(event, ())):
            try:
                handler(*args)
            except Exception:
                logger.exception(
                    "event handler failed",
                    session_event=event.value,
                    handler=getattr(handler, "__qualname__", repr(handler)),
                )
                continue
            completed += 1
        return completed
