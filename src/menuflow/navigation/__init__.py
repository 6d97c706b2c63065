"""Navigation layer — the highlighter and selector coordinators.

Both are single-task finite-state machines that read navigation events,
drive a list view through its capability protocols, and emit their state
downstream.
"""

from menuflow.navigation.events import Nav, Selection, classify, is_index
from menuflow.navigation.highlighter import Highlighter, next_index
from menuflow.navigation.selector import Selector
from menuflow.navigation.view import Highlightable, ListView, Selectable

__all__ = [
    "Highlightable",
    "Highlighter",
    "ListView",
    "Nav",
    "Selectable",
    "Selection",
    "Selector",
    "classify",
    "is_index",
    "next_index",
]
