"""Transform combinators — map, filter, remove and distinct over async streams.

Each combinator is an async generator over any ``AsyncIterable`` (a
``Channel``, another combinator, or a plain async generator).  They are
order-preserving and never buffer: every input value yields zero or one
output value before the next input is pulled.

The names deliberately mirror the builtins, so import the module rather
than its members::

    from menuflow.streams import transforms

    tags = transforms.map(to_tag, transforms.filter(is_known, keycodes))

A function that raises while processing a value fails the stream with a
``TransformError`` chained to the original exception.  Nothing is
swallowed: the consuming stage fails, and through its task group so does
the whole pipeline.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from menuflow._errors import TransformError

if TYPE_CHECKING:
    from collections.abc import AsyncIterable, AsyncIterator, Callable

__all__ = ["distinct", "filter", "map", "remove"]

# No value seen yet (distinct)
_UNSET: Any = object()


def _failure(kind: str, fn: Callable[..., Any], value: object, exc: Exception) -> TransformError:
    name = getattr(fn, "__qualname__", repr(fn))
    return TransformError(f"{kind} function {name} failed on {value!r}: {exc}")


async def map[T, U](fn: Callable[[T], U], source: AsyncIterable[T]) -> AsyncIterator[U]:  # noqa: A001
    """Yield ``fn(value)`` for every value of ``source``."""
    async for value in source:
        try:
            result = fn(value)
        except Exception as exc:
            raise _failure("map", fn, value, exc) from exc
        yield result


async def filter[T](pred: Callable[[T], object], source: AsyncIterable[T]) -> AsyncIterator[T]:  # noqa: A001
    """Yield the values of ``source`` for which ``pred`` is truthy."""
    async for value in source:
        try:
            keep = pred(value)
        except Exception as exc:
            raise _failure("filter", pred, value, exc) from exc
        if keep:
            yield value


async def remove[T](pred: Callable[[T], object], source: AsyncIterable[T]) -> AsyncIterator[T]:
    """Yield the values of ``source`` for which ``pred`` is falsy."""
    async for value in source:
        try:
            drop = pred(value)
        except Exception as exc:
            raise _failure("remove", pred, value, exc) from exc
        if not drop:
            yield value


async def distinct[T](source: AsyncIterable[T]) -> AsyncIterator[T]:
    """Yield values that differ from the immediately preceding input.

    Only consecutive repeats are dropped: ``a a b a`` yields ``a b a``.
    """
    last: Any = _UNSET
    async for value in source:
        if last is _UNSET or value != last:
            yield value
        last = value
