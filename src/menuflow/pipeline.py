"""Pipeline wiring — runs a chain of stages as one unit.

Orchestrates the standard navigation chain:
    1. FanIn merges keyboard, pointer and any other event sources
    2. ToggleGate forwards events only while the widget is active
    3. Highlighter moves the highlight over the list view
    4. Selector (optional) turns ``select`` into a Selection result
    5. Sink hands each result to a callback (render, selection handler)

Every stage runs as its own task inside one ``asyncio.TaskGroup``.  Stages
share no state; channels are the only handoff.  When the sources are
exhausted, closure cascades stage by stage and ``run()`` returns.  When any
stage fails, the task group cancels the others and the failure propagates
out of ``run()`` as an ``ExceptionGroup``.
"""

from __future__ import annotations

import asyncio
import inspect
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

from menuflow.navigation.highlighter import Highlighter
from menuflow.navigation.selector import Selector
from menuflow.streams.fan_in import FanIn
from menuflow.streams.gate import ToggleGate

if TYPE_CHECKING:
    from collections.abc import AsyncIterable, Callable, Sequence

    from menuflow.navigation.view import Highlightable, ListView
    from menuflow.observability.collector import NavCollector
    from menuflow.streams.channel import Channel


class Stage(Protocol):
    """Anything with a name and a run loop."""

    name: str

    async def run(self) -> None: ...


class Sink:
    """Terminal stage: calls ``callback`` with every value of ``source``.

    The callback may be a plain function or a coroutine function.

    """

    def __init__(
        self,
        source: AsyncIterable[Any],
        callback: Callable[[Any], Any],
        *,
        name: str = "sink",
        collector: NavCollector | None = None,
    ) -> None:
        self._source = source
        self._callback = callback
        self.name = name
        self._collector = collector

    async def run(self) -> None:
        processed = 0
        try:
            async for value in self._source:
                processed += 1
                result = self._callback(value)
                if inspect.isawaitable(result):
                    await result
        finally:
            if self._collector is not None:
                self._collector.record_closed(self.name, processed=processed)


class NavPipeline:
    """A set of stages run together in one task group."""

    def __init__(self) -> None:
        self._stages: list[Stage] = []

    @property
    def stages(self) -> tuple[Stage, ...]:
        return tuple(self._stages)

    def add[S: Stage](self, stage: S) -> S:
        """Register a stage and return it, for chaining off its output."""
        self._stages.append(stage)
        return stage

    async def run(self) -> None:
        """Run every stage until all have finished."""
        async with asyncio.TaskGroup() as tg:
            for stage in self._stages:
                tg.create_task(stage.run(), name=stage.name)


@dataclass(slots=True)
class NavChain:
    """The stages of a standard navigation chain.

    Attributes:
        pipeline: Pipeline holding every stage below.
        fan_in: Merger over the event sources.
        gate: Toggle gate in front of the highlighter.
        highlighter: Highlight coordinator.
        selector: Selection coordinator, or None for highlight-only chains.

    """

    pipeline: NavPipeline
    fan_in: FanIn[Any]
    gate: ToggleGate[Any]
    highlighter: Highlighter
    selector: Selector | None = None

    @property
    def output(self) -> Channel[Any]:
        """Output of the last coordinator in the chain."""
        if self.selector is not None:
            return self.selector.output
        return self.highlighter.output

    async def run(self) -> None:
        await self.pipeline.run()


def build_chain(
    sources: Sequence[AsyncIterable[Any]],
    view: Highlightable | ListView,
    *,
    data: Sequence[Any] | None = None,
    gate_open: bool = False,
    name: str = "nav",
    collector: NavCollector | None = None,
) -> NavChain:
    """Wire sources -> fan-in -> gate -> highlighter (-> selector).

    Args:
        sources: Decoded navigation event streams to merge.
        view: List to drive.  Must also be ``Selectable`` when ``data`` is given.
        data: Items for selection results.  Omit for a highlight-only chain.
        gate_open: Initial gate state.
        name: Prefix for stage names.
        collector: Optional collector shared by every stage.

    """
    pipeline = NavPipeline()
    fan_in = pipeline.add(FanIn(*sources, name=f"{name}.fan_in", collector=collector))
    gate = pipeline.add(
        ToggleGate(fan_in.output, open=gate_open, name=f"{name}.gate", collector=collector)
    )
    highlighter = pipeline.add(
        Highlighter(gate.output, view, name=f"{name}.highlighter", collector=collector)
    )
    selector = None
    if data is not None:
        selector = pipeline.add(
            Selector(
                highlighter.output,
                view,  # type: ignore[arg-type]
                data,
                name=f"{name}.selector",
                collector=collector,
            )
        )
    return NavChain(
        pipeline=pipeline,
        fan_in=fan_in,
        gate=gate,
        highlighter=highlighter,
        selector=selector,
    )
