"""List view capability.

The coordinators drive a list through these protocols and nothing else.
Any renderer (text menu, class-list elements, a GUI widget) becomes
drivable by implementing them; see ``menuflow.views`` for adapters.

Callers only ever receive indices in ``[0, count())``; ``unhighlight`` and
``unselect`` are only called for an index previously passed to
``highlight`` / ``select``.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Highlightable(Protocol):
    """A list that can mark one position as highlighted."""

    def highlight(self, index: int) -> None: ...

    def unhighlight(self, index: int) -> None: ...

    def count(self) -> int: ...


@runtime_checkable
class Selectable(Protocol):
    """A list that can mark one position as selected."""

    def select(self, index: int) -> None: ...

    def unselect(self, index: int) -> None: ...


@runtime_checkable
class ListView(Highlightable, Selectable, Protocol):
    """A list that supports both highlighting and selection."""
