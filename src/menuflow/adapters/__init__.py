"""Input adapters — decode captured raw events into navigation events."""

from menuflow.adapters.keys import (
    DEFAULT_KEYMAP,
    DOWN_ARROW,
    ENTER,
    ESCAPE,
    UP_ARROW,
    KeyEvent,
    KeyMap,
    PreventDefault,
    key_tags,
    listen,
)
from menuflow.adapters.pointer import HoverEvent, hover, hover_child, index_of

__all__ = [
    "DEFAULT_KEYMAP",
    "DOWN_ARROW",
    "ENTER",
    "ESCAPE",
    "UP_ARROW",
    "HoverEvent",
    "KeyEvent",
    "KeyMap",
    "PreventDefault",
    "hover",
    "hover_child",
    "index_of",
    "key_tags",
    "listen",
]
