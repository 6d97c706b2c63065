"""Fan-in merger — combines several event streams into one.

Each source gets its own forwarding task; all of them write to the same
unbuffered output channel.  Whichever source has a value ready is
forwarded first.  When several are ready at once the order between them is
left to the scheduler: no priority is imposed.

Every value from every source appears exactly once, and values from the
same source keep their relative order.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from menuflow.streams.channel import Channel

if TYPE_CHECKING:
    from collections.abc import AsyncIterable

    from menuflow.observability.collector import NavCollector


class FanIn[T]:
    """Merges N independent sources into one arrival-ordered stream.

    Shutdown: ``output`` closes once every source is exhausted.  An error
    raised by any source cancels the other forwarders and propagates out
    of ``run()``.

    Args:
        *sources: Streams to merge.
        name: Stage name used in event-log records.
        collector: Optional collector for the shutdown record.

    """

    def __init__(
        self,
        *sources: AsyncIterable[T],
        name: str = "fan_in",
        collector: NavCollector | None = None,
    ) -> None:
        self._sources = sources
        self.name = name
        self._collector = collector
        self._processed = 0
        self.output: Channel[T] = Channel(name=f"{name}.output")

    async def run(self) -> None:
        """Forward every source into ``output`` until all are exhausted."""
        try:
            async with asyncio.TaskGroup() as tg:
                for i, source in enumerate(self._sources):
                    tg.create_task(self._forward(source), name=f"{self.name}[{i}]")
        finally:
            self.output.close()
            if self._collector is not None:
                self._collector.record_closed(self.name, processed=self._processed)

    async def _forward(self, source: AsyncIterable[T]) -> None:
        async for value in source:
            self._processed += 1
            await self.output.put(value)
