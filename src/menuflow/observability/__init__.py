"""Pipeline observability — what the stages did, and when.

Every stage accepts an optional ``NavCollector``.  Records are frozen
dataclasses with nanosecond timestamps, kept in a bounded ``EventLog``.

Quick Start:
    >>> from menuflow.observability import EventLog, NavCollector
    >>> log = EventLog()
    >>> collector = NavCollector(log)
    >>> # Pass collector to Highlighter, Selector, ToggleGate, ...
    >>> log.stats()["total"]
    0

"""

from menuflow.observability.collector import NavCollector
from menuflow.observability.events import (
    EventDropped,
    GateToggled,
    HighlightChanged,
    NavRecord,
    SelectionMade,
    StageClosed,
    now_ns,
)
from menuflow.observability.log import EventLog

__all__ = [
    "EventDropped",
    "EventLog",
    "GateToggled",
    "HighlightChanged",
    "NavCollector",
    "NavRecord",
    "SelectionMade",
    "StageClosed",
    "now_ns",
]
