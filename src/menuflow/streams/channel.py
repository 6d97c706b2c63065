"""Channels — the handoff between pipeline stages.

A Channel is a FIFO that asyncio tasks put values onto and take values
from.  The default capacity of zero makes it a rendezvous channel: a
producer stays suspended until a consumer has taken its value, which
gives every stage natural backpressure.

Buffered channels (``capacity > 0``) suspend producers only when full.
Sliding channels never suspend producers: when full, the oldest unread
value is discarded to make room for the new one.  The toggle gate's
control channel is a sliding channel of capacity one, so the gate only
ever acts on the latest desired mode.

Shutdown:
    ``close()`` marks the channel closed.  Values already buffered, or
    held by producers suspended before the close, are still delivered.
    Once drained, ``get()`` raises ``ChannelClosedError`` and ``async for``
    ends.  Putting onto a closed channel raises ``ChannelClosedError``.

Thread Safety:
    Not thread-safe.  A channel belongs to one event loop.

"""

from __future__ import annotations

import asyncio
from collections import deque
from typing import Any

from menuflow._errors import ChannelClosedError

# Marker returned by _take() when nothing is ready
_EMPTY: Any = object()

# Result handed to suspended getters when the channel closes
_CLOSED: Any = object()


class Channel[T]:
    """Async FIFO channel with rendezvous, buffered and sliding modes.

    Args:
        capacity: Buffer size.  0 means unbuffered (rendezvous).
        sliding: Drop the oldest buffered value instead of suspending the
            producer when full.  Requires ``capacity >= 1``.
        name: Label used in reprs and event-log records.

    """

    __slots__ = ("_buffer", "_capacity", "_closed", "_getters", "_name", "_putters", "_sliding")

    def __init__(self, capacity: int = 0, *, sliding: bool = False, name: str = "") -> None:
        if capacity < 0:
            msg = f"channel capacity must be >= 0, got {capacity}"
            raise ValueError(msg)
        if sliding and capacity < 1:
            msg = "sliding channels need capacity >= 1"
            raise ValueError(msg)
        self._capacity = capacity
        self._sliding = sliding
        self._name = name
        self._buffer: deque[T] = deque()
        self._getters: deque[asyncio.Future[Any]] = deque()
        self._putters: deque[tuple[T, asyncio.Future[None]]] = deque()
        self._closed = False

    def __repr__(self) -> str:
        mode = "sliding" if self._sliding else "fixed"
        state = "closed" if self._closed else "open"
        return (
            f"Channel(name={self._name!r}, capacity={self._capacity}, "
            f"{mode}, {state}, buffered={len(self._buffer)})"
        )

    def __len__(self) -> int:
        return len(self._buffer)

    @property
    def name(self) -> str:
        return self._name

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def sliding(self) -> bool:
        return self._sliding

    @property
    def closed(self) -> bool:
        """True once ``close()`` has been called (values may remain buffered)."""
        return self._closed

    # ----- Producer side -----

    def offer(self, value: T) -> bool:
        """Deliver ``value`` without suspending, if possible.

        Returns:
            True if the value was handed to a waiting consumer or buffered,
            False if delivering it would require suspending.  Always True
            on a sliding channel.

        Raises:
            ChannelClosedError: The channel is closed.

        """
        if self._closed:
            msg = f"put on closed channel {self._name or '<anonymous>'}"
            raise ChannelClosedError(msg)

        while self._getters:
            getter = self._getters.popleft()
            if not getter.done():
                getter.set_result(value)
                return True

        if len(self._buffer) < self._capacity:
            self._buffer.append(value)
            return True

        if self._sliding:
            self._buffer.popleft()
            self._buffer.append(value)
            return True

        return False

    async def put(self, value: T) -> None:
        """Deliver ``value``, suspending until there is room for it.

        On a rendezvous channel this returns once a consumer has taken the
        value.  If the calling task is cancelled before that, the value is
        withdrawn.

        Raises:
            ChannelClosedError: The channel is closed.

        """
        if self.offer(value):
            return

        waiter: asyncio.Future[None] = asyncio.get_running_loop().create_future()
        self._putters.append((value, waiter))
        try:
            await waiter
        except asyncio.CancelledError:
            if waiter.cancelled():
                self._discard_putter(waiter)
            raise

    # ----- Consumer side -----

    def poll(self) -> tuple[bool, T | None]:
        """Take the next value without suspending.

        Returns:
            ``(True, value)`` if a value was ready, ``(False, None)``
            otherwise (including when closed and drained).

        """
        value = self._take()
        if value is _EMPTY:
            return False, None
        return True, value

    async def get(self) -> T:
        """Take the next value, suspending until one is ready.

        Raises:
            ChannelClosedError: The channel is closed and drained.

        """
        value = self._take()
        if value is not _EMPTY:
            return value
        if self._closed:
            msg = f"get on closed channel {self._name or '<anonymous>'}"
            raise ChannelClosedError(msg)

        waiter: asyncio.Future[Any] = asyncio.get_running_loop().create_future()
        self._getters.append(waiter)
        try:
            value = await waiter
        except asyncio.CancelledError:
            if waiter.cancelled():
                self._discard_getter(waiter)
            else:
                # Handed a value in the same tick we were cancelled: keep it
                result = waiter.result()
                if result is not _CLOSED:
                    self._buffer.appendleft(result)
            raise

        if value is _CLOSED:
            msg = f"get on closed channel {self._name or '<anonymous>'}"
            raise ChannelClosedError(msg)
        return value

    def close(self) -> None:
        """Close the channel.  Idempotent."""
        if self._closed:
            return
        self._closed = True
        # Suspended getters imply an empty buffer and no suspended putters
        while self._getters:
            getter = self._getters.popleft()
            if not getter.done():
                getter.set_result(_CLOSED)

    def __aiter__(self) -> Channel[T]:
        return self

    async def __anext__(self) -> T:
        try:
            return await self.get()
        except ChannelClosedError:
            raise StopAsyncIteration from None

    # ----- Internals -----

    def _take(self) -> Any:
        if self._buffer:
            value = self._buffer.popleft()
            # Refill from suspended producers, oldest first
            while self._putters and len(self._buffer) < self._capacity:
                pending, waiter = self._putters.popleft()
                if waiter.done():
                    continue
                self._buffer.append(pending)
                waiter.set_result(None)
            return value

        while self._putters:
            pending, waiter = self._putters.popleft()
            if waiter.done():
                continue
            waiter.set_result(None)
            return pending

        return _EMPTY

    def _discard_putter(self, waiter: asyncio.Future[None]) -> None:
        for entry in self._putters:
            if entry[1] is waiter:
                self._putters.remove(entry)
                return

    def _discard_getter(self, waiter: asyncio.Future[Any]) -> None:
        try:
            self._getters.remove(waiter)
        except ValueError:
            pass
