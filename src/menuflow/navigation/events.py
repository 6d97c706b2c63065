"""Navigation event vocabulary.

Coordinator input channels carry one of:

- a ``Nav`` tag (``next``, ``previous``, ``clear``, ``select``),
- an ``int`` index (direct set, e.g. from pointer hover),
- ``None``, the "nothing highlighted" sentinel,
- any other value, passed through untouched.

``classify()`` maps an event onto that closed set of kinds so that
coordinators can dispatch on it with a single ``match``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterator

    from menuflow._types import EventKind


class Nav(StrEnum):
    """Navigation tags understood by the coordinators."""

    NEXT = "next"
    PREVIOUS = "previous"
    CLEAR = "clear"
    SELECT = "select"


def is_index(event: object) -> bool:
    """True for integer indices.  ``bool`` is not an index."""
    return isinstance(event, int) and not isinstance(event, bool)


def classify(event: object) -> EventKind:
    """Return the kind of a navigation event."""
    if event is None:
        return "none"
    if isinstance(event, Nav):
        return event.value  # type: ignore[return-value]
    if is_index(event):
        return "index"
    return "passthrough"


@dataclass(frozen=True, slots=True)
class Selection:
    """A selection result emitted by the selector.

    Unpacks as the ``(tag, item)`` pair::

        tag, item = selection

    Attributes:
        index: Position that was selected.
        item: Data item at that position.

    """

    index: int
    item: Any

    @property
    def tag(self) -> Nav:
        return Nav.SELECT

    def __iter__(self) -> Iterator[Any]:
        yield self.tag
        yield self.item
