"""Highlighter coordinator — tracks the currently highlighted index.

Consumes navigation events and moves a single highlight over a list view:

    ========  ==========  ===================
    state     event       next state
    ========  ==========  ===================
    None      next        0
    None      previous    count - 1
    i         next        (i + 1) mod count
    i         previous    (i - 1) mod count
    any       clear       None
    any       int n       n
    any       other       unchanged
    ========  ==========  ===================

For every recognised event the previous highlight is removed first (only
if there was one), then the new one applied (only if there is one).  The
resulting state is emitted downstream; unrecognised events are emitted
verbatim.  ``count()`` is read from the view on every transition, so the
list may change size between events.

``next``/``previous`` against an empty list is a caller error and raises
``ZeroDivisionError``.  Disable input while the list is empty.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from menuflow.navigation.events import Nav, classify, is_index
from menuflow.streams.channel import Channel

if TYPE_CHECKING:
    from collections.abc import AsyncIterable

    from menuflow._types import Index, NavEvent
    from menuflow.navigation.view import Highlightable
    from menuflow.observability.collector import NavCollector


def next_index(state: Index, tag: Nav, count: int) -> int:
    """Apply a ``next``/``previous`` step to ``state`` in a list of ``count`` items."""
    match state, tag:
        case None, Nav.NEXT:
            return 0 % count
        case None, Nav.PREVIOUS:
            return (count - 1) % count
        case int(), Nav.NEXT:
            return (state + 1) % count
        case int(), Nav.PREVIOUS:
            return (state - 1) % count
    msg = f"not a step: {tag!r}"
    raise ValueError(msg)


class Highlighter:
    """Finite-state coordinator for the highlighted index.

    State is created with the coordinator, mutated only by ``run()``, and
    readable through ``highlighted``.

    Shutdown: when ``source`` is exhausted the loop ends and ``output`` is
    closed.

    Args:
        source: Navigation events.
        view: List to drive.
        name: Stage name used in event-log records.
        collector: Optional collector for transition records.

    """

    def __init__(
        self,
        source: AsyncIterable[NavEvent],
        view: Highlightable,
        *,
        name: str = "highlighter",
        collector: NavCollector | None = None,
    ) -> None:
        self._source = source
        self._view = view
        self.name = name
        self._collector = collector
        self._highlighted: Index = None
        self.output: Channel[NavEvent] = Channel(name=f"{name}.output")

    @property
    def highlighted(self) -> Index:
        return self._highlighted

    async def run(self) -> None:
        """Process events until the source is exhausted."""
        processed = 0
        try:
            async for event in self._source:
                processed += 1
                match classify(event):
                    case "next" | "previous" | "clear" | "index":
                        await self.output.put(self._transition(event))
                    case _:
                        await self.output.put(event)
        finally:
            self.output.close()
            if self._collector is not None:
                self._collector.record_closed(self.name, processed=processed)

    def _transition(self, event: NavEvent) -> Index:
        prior = self._highlighted
        if prior is not None:
            self._view.unhighlight(prior)

        current: Index
        if event is Nav.CLEAR:
            current = None
        elif is_index(event):
            current = event
        else:
            current = next_index(prior, event, self._view.count())

        if current is not None:
            self._view.highlight(current)
        self._highlighted = current

        if self._collector is not None:
            self._collector.record_highlight(self.name, event, prior=prior, current=current)
        return current
