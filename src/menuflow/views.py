"""List view adapters — concrete renderers behind the capability protocols.

``TextListView`` is a plain text menu: each line carries two marker
columns in front of its label, one for the highlight and one for the
selection::

    >  Alan Kay
     * J.C.R. Licklider
       John McCarthy

``ClassListView`` wraps a host container whose children expose
``add_class``/``remove_class`` (a DOM-like element list, a widget tree).
The children are looked up on every call, so the container may grow or
shrink between events.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sequence


def set_char(s: str, i: int, c: str) -> str:
    """Return ``s`` with the character at ``i`` replaced by ``c``."""
    return s[:i] + c + s[i + 1:]


class TextListView:
    """Text menu with highlight and selection marker columns.

    Args:
        labels: Item labels, one per line.
        highlight_marker: Character shown in column 0 of the highlighted line.
        select_marker: Character shown in column 1 of the selected line.

    """

    __slots__ = ("_highlight_marker", "_lines", "_select_marker")

    def __init__(
        self,
        labels: Iterable[str],
        *,
        highlight_marker: str = ">",
        select_marker: str = "*",
    ) -> None:
        if len(highlight_marker) != 1 or len(select_marker) != 1:
            msg = "markers must be single characters"
            raise ValueError(msg)
        self._highlight_marker = highlight_marker
        self._select_marker = select_marker
        self._lines = [f"   {label}" for label in labels]

    def highlight(self, index: int) -> None:
        self._lines[index] = set_char(self._lines[index], 0, self._highlight_marker)

    def unhighlight(self, index: int) -> None:
        self._lines[index] = set_char(self._lines[index], 0, " ")

    def select(self, index: int) -> None:
        self._lines[index] = set_char(self._lines[index], 1, self._select_marker)

    def unselect(self, index: int) -> None:
        self._lines[index] = set_char(self._lines[index], 1, " ")

    def count(self) -> int:
        return len(self._lines)

    def append(self, label: str) -> None:
        """Add an item at the end of the menu."""
        self._lines.append(f"   {label}")

    def lines(self) -> list[str]:
        """Snapshot of the rendered lines."""
        return list(self._lines)

    def render(self) -> str:
        return "\n".join(self._lines)


class SupportsClassList(Protocol):
    """A host element with a mutable set of class names."""

    def add_class(self, name: str) -> None: ...

    def remove_class(self, name: str) -> None: ...


@dataclass(slots=True)
class Element:
    """Minimal host element: a label plus a set of class names."""

    text: str
    classes: set[str] = field(default_factory=set)

    def add_class(self, name: str) -> None:
        self.classes.add(name)

    def remove_class(self, name: str) -> None:
        self.classes.discard(name)

    def has_class(self, name: str) -> bool:
        return name in self.classes


class ClassListView:
    """Drives a host container by toggling classes on its children.

    Args:
        children: Returns the container's current children, in order.
        highlighted_class: Class name marking the highlighted child.
        selected_class: Class name marking the selected child.

    """

    __slots__ = ("_children", "_highlighted_class", "_selected_class")

    def __init__(
        self,
        children: Callable[[], Sequence[SupportsClassList]],
        *,
        highlighted_class: str = "highlighted",
        selected_class: str = "selected",
    ) -> None:
        self._children = children
        self._highlighted_class = highlighted_class
        self._selected_class = selected_class

    def highlight(self, index: int) -> None:
        self._children()[index].add_class(self._highlighted_class)

    def unhighlight(self, index: int) -> None:
        self._children()[index].remove_class(self._highlighted_class)

    def select(self, index: int) -> None:
        self._children()[index].add_class(self._selected_class)

    def unselect(self, index: int) -> None:
        self._children()[index].remove_class(self._selected_class)

    def count(self) -> int:
        return len(self._children())
