"""Event bus for Humanizer.

The orchestrator publishes run lifecycle events here; the TUI event panel
and the event logger listen. Handlers are plain callables invoked inline,
in subscription order, on the emitting coroutine's loop.
"""

from __future__ import annotations

import logging
from collections import defaultdict, deque
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime

logger = logging.getLogger(__name__)


@dataclass
class Event:
    """One run lifecycle event."""

    event_type: str
    run_id: str
    data: dict = field(default_factory=dict)
    timestamp: str = ""

    def __post_init__(self):
        if not self.timestamp:
            self.timestamp = datetime.now().isoformat()


EventHandler = Callable[[Event], None]


class EventBus:
    """Synchronous fan-out of run events with a bounded replay buffer.

    A handler that raises is logged and skipped; the emitter and the
    remaining handlers are unaffected.
    """

    def __init__(self, max_history: int = 500) -> None:
        self._by_type: dict[str, list[EventHandler]] = defaultdict(list)
        self._catch_all: list[EventHandler] = []
        self._history: deque[Event] = deque(maxlen=max_history)

    def subscribe(self, event_type: str, handler: EventHandler) -> None:
        self._by_type[event_type].append(handler)

    def subscribe_all(self, handler: EventHandler) -> None:
        self._catch_all.append(handler)

    def unsubscribe_all(self, handler: EventHandler) -> None:
        if handler in self._catch_all:
            self._catch_all.remove(handler)

    def emit(self, event: Event) -> None:
        self._history.append(event)
        for handler in [*self._catch_all, *self._by_type.get(event.event_type, ())]:
            try:
                handler(event)
            except Exception:
                logger.warning(
                    "Handler %s failed on %s for run %s",
                    getattr(handler, "__qualname__", handler),
                    event.event_type,
                    event.run_id,
                    exc_info=True,
                )

    def recent_events(self, limit: int = 50) -> list[Event]:
        """Newest ``limit`` events, oldest first."""
        return list(self._history)[-limit:]


class EventLogger:
    """Writes every event to the standard logger."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._log = log or logging.getLogger("humanizer.events")

    def handle(self, event: Event) -> None:
        self._log.info(
            "event=%s run=%s data=%s", event.event_type, event.run_id, event.data,
        )

    def attach(self, event_bus: EventBus) -> None:
        event_bus.subscribe_all(self.handle)
