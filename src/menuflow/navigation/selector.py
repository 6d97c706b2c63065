"""Selector coordinator — tracks the selected index.

Sits downstream of a highlighter.  Every index-bearing value flowing
through (an ``int`` or ``None``) updates the selector's view of what is
highlighted and is passed on unchanged.  A ``select`` tag moves the
selection to the highlighted index and emits a ``Selection`` carrying the
data item at that position.  Anything else passes through.

Re-selecting the same index still calls ``unselect`` then ``select``.
A ``select`` while nothing is highlighted does nothing and emits nothing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from menuflow.navigation.events import Selection, classify
from menuflow.streams.channel import Channel

if TYPE_CHECKING:
    from collections.abc import AsyncIterable, Sequence

    from menuflow._types import Index, NavEvent
    from menuflow.navigation.view import Selectable
    from menuflow.observability.collector import NavCollector


class Selector:
    """Finite-state coordinator for the selected index.

    Shutdown: when ``source`` is exhausted the loop ends and ``output`` is
    closed.

    Args:
        source: Highlighter output (indices, None, tags, passthrough).
        view: List to drive.
        data: Items indexed positionally by the highlighted index.  Read at
            selection time, so later changes to the sequence are seen.
        name: Stage name used in event-log records.
        collector: Optional collector for selection/drop records.

    """

    def __init__(
        self,
        source: AsyncIterable[NavEvent],
        view: Selectable,
        data: Sequence[Any],
        *,
        name: str = "selector",
        collector: NavCollector | None = None,
    ) -> None:
        self._source = source
        self._view = view
        self._data = data
        self.name = name
        self._collector = collector
        self._highlighted: Index = None
        self._selected: Index = None
        self.output: Channel[NavEvent | Selection] = Channel(name=f"{name}.output")

    @property
    def highlighted(self) -> Index:
        return self._highlighted

    @property
    def selected(self) -> Index:
        return self._selected

    async def run(self) -> None:
        """Process events until the source is exhausted."""
        processed = 0
        try:
            async for event in self._source:
                processed += 1
                match classify(event):
                    case "select":
                        selection = self._select(event)
                        if selection is not None:
                            await self.output.put(selection)
                    case "index" | "none":
                        self._highlighted = event
                        await self.output.put(event)
                    case _:
                        await self.output.put(event)
        finally:
            self.output.close()
            if self._collector is not None:
                self._collector.record_closed(self.name, processed=processed)

    def _select(self, event: NavEvent) -> Selection | None:
        target = self._highlighted
        if target is None:
            if self._collector is not None:
                self._collector.record_drop(self.name, event, reason="nothing_highlighted")
            return None

        previous = self._selected
        if previous is not None:
            self._view.unselect(previous)
        self._view.select(target)
        selection = Selection(index=target, item=self._data[target])
        self._selected = target

        if self._collector is not None:
            self._collector.record_selection(
                self.name, target, previous=previous, item=selection.item
            )
        return selection
