"""Toggle gate — forwards events only while a live control value is true.

The gate reads raw events from its source and writes the ones it lets
through to ``output``.  Whether an event passes is decided by the most
recent control value at the moment that event is processed.

Control values arrive on a sliding channel of capacity one, so a new value
replaces any unread one and ``set_open()`` never blocks the sender.  The
gate drains that channel before judging each event.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from menuflow.streams.channel import Channel

if TYPE_CHECKING:
    from collections.abc import AsyncIterable

    from menuflow.observability.collector import NavCollector


class ToggleGate[T]:
    """Conditionally forwards events based on a boolean control signal.

    Shutdown: when ``source`` is exhausted the loop ends and ``output`` is
    closed.  Closing ``control`` leaves the last value in force.

    Args:
        source: Raw events to gate.
        open: Initial control value.  Gates start closed by default.
        name: Stage name used in event-log records.
        collector: Optional collector for toggle/drop records.

    """

    def __init__(
        self,
        source: AsyncIterable[T],
        *,
        open: bool = False,  # noqa: A002
        name: str = "gate",
        collector: NavCollector | None = None,
    ) -> None:
        self._source = source
        self._open = open
        self.name = name
        self._collector = collector
        self.control: Channel[bool] = Channel(1, sliding=True, name=f"{name}.control")
        self.output: Channel[T] = Channel(name=f"{name}.output")

    @property
    def is_open(self) -> bool:
        """The control value the gate last acted on."""
        return self._open

    def set_open(self, flag: bool) -> None:
        """Request a new mode.  Never blocks; replaces any unread request."""
        self.control.offer(bool(flag))

    async def run(self) -> None:
        """Gate events until the source is exhausted."""
        processed = 0
        try:
            async for event in self._source:
                processed += 1
                self._drain_control()
                if self._open:
                    await self.output.put(event)
                elif self._collector is not None:
                    self._collector.record_drop(self.name, event, reason="gate_closed")
        finally:
            self.output.close()
            if self._collector is not None:
                self._collector.record_closed(self.name, processed=processed)

    def _drain_control(self) -> None:
        while True:
            ready, value = self.control.poll()
            if not ready:
                return
            if value != self._open and self._collector is not None:
                self._collector.record_toggle(self.name, open=bool(value))
            self._open = bool(value)
