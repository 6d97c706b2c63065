"""Tests for menuflow.pipeline — wiring stages into a navigation chain."""

from __future__ import annotations

import asyncio

import pytest

from menuflow._errors import TransformError
from menuflow.navigation.events import Nav, Selection
from menuflow.observability import NavCollector, StageClosed
from menuflow.pipeline import NavPipeline, Sink, build_chain
from menuflow.streams import transforms
from tests.conftest import RecordingView, aiter_of, drain

DATA = ["Alan Kay", "J.C.R. Licklider", "John McCarthy"]


async def run_chain(chain) -> list:
    async with asyncio.TaskGroup() as tg:
        tg.create_task(chain.run())
        results = await drain(chain.output)
    return results


class TestBuildChain:
    @pytest.mark.asyncio
    async def test_end_to_end_selection(self, view: RecordingView) -> None:
        events = aiter_of(Nav.NEXT, Nav.NEXT, Nav.PREVIOUS, Nav.SELECT)
        chain = build_chain([events], view, data=DATA, gate_open=True)

        out = await run_chain(chain)

        assert out == [0, 1, 0, Selection(index=0, item="Alan Kay")]
        assert tuple(out[-1]) == (Nav.SELECT, DATA[0])
        assert chain.highlighter.highlighted == 0
        assert chain.selector is not None
        assert chain.selector.selected == 0

    @pytest.mark.asyncio
    async def test_highlight_only_chain(self, view: RecordingView) -> None:
        chain = build_chain([aiter_of(Nav.NEXT, Nav.SELECT)], view, gate_open=True)
        assert chain.selector is None
        assert chain.output is chain.highlighter.output

        assert await run_chain(chain) == [0, Nav.SELECT]
        assert view.selected == set()

    @pytest.mark.asyncio
    async def test_closed_gate_blocks_everything(self, view: RecordingView) -> None:
        chain = build_chain([aiter_of(Nav.NEXT, Nav.SELECT)], view, data=DATA)
        assert await run_chain(chain) == []
        assert view.calls == []

    @pytest.mark.asyncio
    async def test_merges_keyboard_and_pointer(self, view: RecordingView) -> None:
        keys = aiter_of(Nav.NEXT)
        pointer = aiter_of(2)
        chain = build_chain([keys, pointer], view, gate_open=True)

        out = await run_chain(chain)

        assert len(out) == 2
        assert view.highlighted == {out[-1]}

    @pytest.mark.asyncio
    async def test_shutdown_cascades(self, view: RecordingView, collector: NavCollector) -> None:
        chain = build_chain([aiter_of(Nav.NEXT)], view, data=DATA, gate_open=True,
                            name="w", collector=collector)
        await run_chain(chain)

        for stage in (chain.fan_in, chain.gate, chain.highlighter, chain.selector):
            assert stage.output.closed
        closed = {r.stage for r in collector.log.query(event_type=StageClosed)}
        assert closed == {"w.fan_in", "w.gate", "w.highlighter", "w.selector"}

    @pytest.mark.asyncio
    async def test_transform_error_fails_whole_pipeline(self, view: RecordingView) -> None:
        def decode(raw: str) -> Nav:
            return {"j": Nav.NEXT}[raw]

        events = transforms.map(decode, aiter_of("j", "q", "j"))
        chain = build_chain([events], view, data=DATA, gate_open=True)

        with pytest.raises(ExceptionGroup) as excinfo:
            await run_chain(chain)
        assert excinfo.group_contains(TransformError)
        assert chain.output.closed


class TestNavPipeline:
    @pytest.mark.asyncio
    async def test_sink_receives_every_value(self, view: RecordingView) -> None:
        chain = build_chain([aiter_of(Nav.NEXT, Nav.NEXT)], view, gate_open=True)
        seen: list[object] = []
        chain.pipeline.add(Sink(chain.output, seen.append))

        await chain.run()
        assert seen == [0, 1]

    @pytest.mark.asyncio
    async def test_async_sink_callback(self) -> None:
        seen: list[int] = []

        async def record(value: int) -> None:
            await asyncio.sleep(0)
            seen.append(value)

        pipeline = NavPipeline()
        pipeline.add(Sink(aiter_of(1, 2), record))
        await pipeline.run()
        assert seen == [1, 2]

    def test_add_returns_stage(self) -> None:
        pipeline = NavPipeline()
        sink = Sink(aiter_of(), print)
        assert pipeline.add(sink) is sink
        assert pipeline.stages == (sink,)
