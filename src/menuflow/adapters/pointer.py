"""Pointer decoding — hover events to gate toggles and direct indices.

Two decoders over already captured ``HoverEvent`` objects:

- ``hover()`` reduces container enter/leave to ``"enter"``/``"leave"``,
  which a widget uses to open and close its gate.
- ``hover_child()`` turns "pointer over element X" into the position of X
  among the list's children, a direct index for the highlighter.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from menuflow.streams import transforms

if TYPE_CHECKING:
    from collections.abc import AsyncIterable, AsyncIterator, Callable, Sequence

    from menuflow._types import HoverKind


@dataclass(frozen=True, slots=True)
class HoverEvent:
    """A captured pointer event.

    Attributes:
        kind: ``enter``/``leave`` for the container, ``over`` for a child.
        target: The host element the pointer is over (``over`` only).

    """

    kind: HoverKind
    target: Any = None


def _is_boundary(event: HoverEvent) -> bool:
    return event.kind in ("enter", "leave")


def _kind(event: HoverEvent) -> str:
    return event.kind


def hover(source: AsyncIterable[HoverEvent]) -> AsyncIterator[str]:
    """Yield ``"enter"``/``"leave"`` as the pointer crosses the container."""
    boundaries = transforms.map(_kind, transforms.filter(_is_boundary, source))
    return transforms.distinct(boundaries)


def index_of(children: Sequence[Any], target: object) -> int:
    """Position of ``target`` in ``children`` by identity, or -1."""
    for i, child in enumerate(children):
        if child is target:
            return i
    return -1


def hover_child(
    source: AsyncIterable[HoverEvent],
    children: Callable[[], Sequence[Any]],
) -> AsyncIterator[int]:
    """Yield the index of each hovered child.

    ``children`` is called for every event, so the list may change between
    events.  Targets that are not current children are dropped.
    """

    def position(event: HoverEvent) -> int:
        return index_of(children(), event.target)

    overs = transforms.filter(lambda e: e.kind == "over", source)
    return transforms.remove(lambda i: i < 0, transforms.map(position, overs))
