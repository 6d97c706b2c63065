"""Shared type definitions for menuflow."""

from collections.abc import Callable
from typing import Any, Literal

# Highlighted/selected position; None is the "nothing" sentinel
type Index = int | None

# Anything that can flow through a coordinator input channel
type NavEvent = Any

# Closed set of event kinds coordinators dispatch on
type EventKind = Literal[
    "next", "previous", "clear", "select", "index", "none", "passthrough"
]

# Container hover transitions
type HoverKind = Literal["enter", "leave", "over"]

# Render callback invoked after every change reaching the end of a chain
type RenderFunc = Callable[[], Any]
