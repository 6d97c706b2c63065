"""Widget — drives one navigable list from hover and input events.

A widget is only active while the pointer is over it:

- On ``"enter"`` the gate opens and the prevent-default flag is set, so
  navigation keys drive this list instead of the host.
- On ``"leave"`` both are switched off again.

Every value reaching the end of the chain triggers ``render``; selection
results are additionally handed to ``on_select``.  The widget renders once
at start, before any event arrives.
"""

from __future__ import annotations

import inspect
from typing import TYPE_CHECKING, Any

from menuflow.adapters.keys import PreventDefault
from menuflow.navigation.events import Selection
from menuflow.pipeline import Sink, build_chain

if TYPE_CHECKING:
    from collections.abc import AsyncIterable, Callable, Sequence

    from menuflow._types import RenderFunc
    from menuflow.navigation.view import Highlightable, ListView
    from menuflow.observability.collector import NavCollector
    from menuflow.pipeline import NavChain


class Widget:
    """Example orchestrator wiring hover, gate, coordinators and rendering.

    Args:
        hover_events: ``"enter"``/``"leave"`` stream for the widget container
            (see ``menuflow.adapters.hover``).
        sources: Decoded navigation event streams (keyboard tags, hovered
            child indices, ...).
        view: List to drive.
        render: Called after every change.
        data: Items for selection results; omit for highlight-only widgets.
        on_select: Called with every ``Selection``.
        prevent: Prevent-default flag shared with the key listener.
        name: Prefix for stage names.
        collector: Optional collector shared by every stage.

    """

    def __init__(
        self,
        hover_events: AsyncIterable[str],
        sources: Sequence[AsyncIterable[Any]],
        view: Highlightable | ListView,
        render: RenderFunc,
        *,
        data: Sequence[Any] | None = None,
        on_select: Callable[[Selection], Any] | None = None,
        prevent: PreventDefault | None = None,
        name: str = "widget",
        collector: NavCollector | None = None,
    ) -> None:
        self._render = render
        self._on_select = on_select
        self.prevent = prevent if prevent is not None else PreventDefault()
        self.name = name
        self.chain: NavChain = build_chain(
            sources, view, data=data, gate_open=False, name=name, collector=collector
        )
        self.chain.pipeline.add(_HoverWatcher(hover_events, self, name=f"{name}.hover"))
        self.chain.pipeline.add(
            Sink(self.chain.output, self._changed, name=f"{name}.render", collector=collector)
        )

    @property
    def active(self) -> bool:
        """Whether the prevent-default flag is currently set (pointer inside)."""
        return self.prevent.enabled

    def activate(self) -> None:
        self.chain.gate.set_open(True)
        self.prevent.set(True)

    def deactivate(self) -> None:
        self.chain.gate.set_open(False)
        self.prevent.set(False)

    async def run(self) -> None:
        """Render once, then run until every source is exhausted."""
        self._render()
        await self.chain.run()

    async def _changed(self, value: Any) -> None:
        self._render()
        if isinstance(value, Selection) and self._on_select is not None:
            result = self._on_select(value)
            if inspect.isawaitable(result):
                await result


class _HoverWatcher:
    """Stage toggling a widget from its container's enter/leave stream."""

    def __init__(self, hover_events: AsyncIterable[str], widget: Widget, *, name: str) -> None:
        self._hover_events = hover_events
        self._widget = widget
        self.name = name

    async def run(self) -> None:
        async for kind in self._hover_events:
            if kind == "enter":
                self._widget.activate()
            elif kind == "leave":
                self._widget.deactivate()
