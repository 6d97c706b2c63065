"""Event log — what the stages of one pipeline did, in order.

A bounded ring buffer of ``NavRecord`` objects.  Records are kept in
arrival order and every query returns them oldest first, so a stage's
history reads the way it happened: ``highlight_path("nav.highlighter")``
is the sequence of highlighted indices, ``selections()`` the sequence of
selections.

Thread Safety:
    All methods are protected by a ``threading.Lock``.

"""

import threading
from collections import Counter, deque
from typing import Any

from menuflow.observability.events import HighlightChanged, NavRecord, SelectionMade


class EventLog:
    """Bounded record store.

    When the buffer is full, the oldest records are discarded.

    Args:
        max_events: Maximum number of records to retain.

    """

    __slots__ = ("_events", "_lock", "_max_events")

    def __init__(self, max_events: int = 10_000) -> None:
        self._max_events = max_events
        self._events: deque[NavRecord] = deque(maxlen=max_events)
        self._lock = threading.Lock()

    def append(self, event: NavRecord) -> None:
        with self._lock:
            self._events.append(event)

    def query(
        self,
        *,
        event_type: type | None = None,
        stage: str | None = None,
    ) -> list[NavRecord]:
        """Records matching ``event_type`` and/or ``stage``, oldest first."""
        with self._lock:
            return [
                event
                for event in self._events
                if (event_type is None or isinstance(event, event_type))
                and (stage is None or event.stage == stage)
            ]

    def highlight_path(self, stage: str | None = None) -> list[int | None]:
        """Highlighted index after each transition, starting from nothing.

        With several highlighters in one log, pass ``stage`` to follow one.
        """
        path: list[int | None] = [None]
        for record in self.query(event_type=HighlightChanged, stage=stage):
            path.append(record.current)  # type: ignore[union-attr]
        return path

    def selections(self, stage: str | None = None) -> list[SelectionMade]:
        """Every selection made, oldest first."""
        return self.query(event_type=SelectionMade, stage=stage)  # type: ignore[return-value]

    def recent(self, n: int = 20) -> list[NavRecord]:
        """The N most recent records, oldest first."""
        with self._lock:
            items = list(self._events)
        return items[-n:] if n > 0 else []

    def clear(self) -> int:
        """Clear all records and return the count that was cleared."""
        with self._lock:
            count = len(self._events)
            self._events.clear()
            return count

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)

    def stats(self) -> dict[str, Any]:
        """Record counts, overall and per type and stage."""
        with self._lock:
            events = list(self._events)

        return {
            "total": len(events),
            "max_events": self._max_events,
            "by_type": dict(Counter(type(event).__name__ for event in events)),
            "by_stage": dict(Counter(event.stage for event in events)),
        }
