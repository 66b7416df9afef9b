"""Synchronous event bus carrying tweak notifications to the UI."""

from __future__ import annotations

import logging
from typing import Any, Callable

log = logging.getLogger("csstweaks.events")

Listener = Callable[[Any], None]


class EventBus:
    """Publish-subscribe bus for session events.

    Listeners run synchronously in registration order, type-specific ones
    after the catch-all ones. A listener that raises is logged and does not
    stop delivery to the rest, so a broken notifier cannot abort a tweak that
    has already been persisted.
    """

    def __init__(self) -> None:
        self._listeners: dict[type, list[Listener]] = {}
        self._global_listeners: list[Listener] = []

    def subscribe(self, event_type: type, callback: Listener) -> None:
        """Register a callback for one event type."""
        self._listeners.setdefault(event_type, []).append(callback)

    def unsubscribe(self, event_type: type, callback: Listener) -> None:
        listeners = self._listeners.get(event_type, [])
        if callback in listeners:
            listeners.remove(callback)

    def on_all(self, callback: Listener) -> None:
        """Register a callback that receives every event."""
        self._global_listeners.append(callback)

    def emit(self, event: Any) -> None:
        """Dispatch *event* to all matching listeners."""
        for cb in [*self._global_listeners, *self._listeners.get(type(event), [])]:
            try:
                cb(event)
            except Exception:
                log.exception("Listener %r failed on %s", cb, type(event).__name__)
