"""Shared test fixtures for menuflow."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any

import pytest

from menuflow.observability import EventLog, NavCollector

if TYPE_CHECKING:
    from collections.abc import AsyncIterable, AsyncIterator


class RecordingView:
    """List view that records every capability call.

    Fails loudly if the core ever presents an out-of-range index or
    removes a mark that was never applied.
    """

    def __init__(self, count: int = 3) -> None:
        self.size = count
        self.calls: list[tuple[str, int]] = []
        self.highlighted: set[int] = set()
        self.selected: set[int] = set()

    def _check(self, index: object) -> None:
        assert isinstance(index, int), f"non-numeric index {index!r}"
        assert 0 <= index < self.size, f"index {index} out of range"

    def highlight(self, index: int) -> None:
        self._check(index)
        self.calls.append(("highlight", index))
        self.highlighted.add(index)

    def unhighlight(self, index: int) -> None:
        self._check(index)
        assert index in self.highlighted, f"unhighlight({index}) never highlighted"
        self.calls.append(("unhighlight", index))
        self.highlighted.discard(index)

    def select(self, index: int) -> None:
        self._check(index)
        self.calls.append(("select", index))
        self.selected.add(index)

    def unselect(self, index: int) -> None:
        self._check(index)
        assert index in self.selected, f"unselect({index}) never selected"
        self.calls.append(("unselect", index))
        self.selected.discard(index)

    def count(self) -> int:
        return self.size


async def aiter_of(*values: Any) -> AsyncIterator[Any]:
    """Async iterable over fixed values."""
    for value in values:
        yield value


async def drain(source: AsyncIterable[Any]) -> list[Any]:
    """Collect every value of an async iterable."""
    return [value async for value in source]


async def run_stage(stage: Any) -> list[Any]:
    """Run a stage to completion while collecting its output."""
    async with asyncio.TaskGroup() as tg:
        tg.create_task(stage.run())
        results = await drain(stage.output)
    return results


@pytest.fixture
def view() -> RecordingView:
    return RecordingView(3)


@pytest.fixture
def collector() -> NavCollector:
    return NavCollector(EventLog())


async def settle(rounds: int = 10) -> None:
    """Yield to the event loop until in-flight handoffs have been processed."""
    for _ in range(rounds):
        await asyncio.sleep(0)
