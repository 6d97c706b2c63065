"""Event model for pipeline observability.

Defines the records stages emit while they run: highlight transitions,
selections, gate toggles, dropped events and stage shutdown.

All events are frozen dataclasses with:
- ``stage``: Name of the stage that produced the record
- ``timestamp_ns``: Monotonic nanosecond timestamp
- Descriptive fields for the specific event type

Navigation events themselves are arbitrary objects, so records keep their
``repr`` rather than the object.

Thread Safety:
    All events are frozen (immutable) and safe to share across threads.

"""

import time
from dataclasses import dataclass
from typing import Literal


# ---------------------------------------------------------------------------
# Coordinator events
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class HighlightChanged:
    """A highlighter processed an index-changing event.

    Attributes:
        stage: Highlighter name.
        event: repr of the navigation event that caused the transition.
        prior: Highlighted index before the event (None for nothing).
        current: Highlighted index after the event (None for nothing).
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    stage: str
    event: str
    prior: int | None
    current: int | None
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class SelectionMade:
    """A selector selected the highlighted item.

    Attributes:
        stage: Selector name.
        index: Newly selected index.
        previous: Previously selected index (None for nothing).
        item: repr of the data item emitted downstream.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    stage: str
    index: int
    previous: int | None
    item: str
    timestamp_ns: int


# ---------------------------------------------------------------------------
# Stream events
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class GateToggled:
    """A toggle gate picked up a new control value.

    Attributes:
        stage: Gate name.
        open: The control value now in force.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    stage: str
    open: bool
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class EventDropped:
    """A stage consumed an event without forwarding it.

    Attributes:
        stage: Stage name.
        event: repr of the dropped event.
        reason: Why the event was dropped.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    stage: str
    event: str
    reason: Literal["gate_closed", "nothing_highlighted"]
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class StageClosed:
    """A stage's input closed and its loop ended.

    Attributes:
        stage: Stage name.
        processed: Number of input events the stage consumed.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    stage: str
    processed: int
    timestamp_ns: int


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

type NavRecord = (
    HighlightChanged
    | SelectionMade
    | GateToggled
    | EventDropped
    | StageClosed
)


def now_ns() -> int:
    """Return the current monotonic clock value in nanoseconds."""
    return time.monotonic_ns()
