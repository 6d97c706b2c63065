"""Keyboard decoding — raw key events to navigation tags.

Raw key capture belongs to the host (terminal, browser bridge, GUI
toolkit).  This module starts from already captured ``KeyEvent`` objects
and turns them into ``Nav`` tags with the transform combinators::

    listen -> key code -> known codes only -> tag

While a widget is active the host usually wants its own default handling
of these keys suppressed (arrow keys scrolling the page, for instance).
That is controlled by a ``PreventDefault`` flag that the caller owns and
passes in explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from menuflow.navigation.events import Nav
from menuflow.streams import transforms

if TYPE_CHECKING:
    from collections.abc import AsyncIterable, AsyncIterator, Mapping

ENTER = 13
ESCAPE = 27
UP_ARROW = 38
DOWN_ARROW = 40

DEFAULT_KEYMAP: Mapping[int, Nav] = MappingProxyType({
    UP_ARROW: Nav.PREVIOUS,
    DOWN_ARROW: Nav.NEXT,
    ENTER: Nav.SELECT,
    ESCAPE: Nav.CLEAR,
})


@dataclass(slots=True)
class KeyEvent:
    """A captured key press.

    Attributes:
        keycode: Numeric key code (DOM ``keyCode`` numbering).
        key: Optional key name as reported by the host.
        default_prevented: Set once ``prevent_default()`` has been called.

    """

    keycode: int
    key: str = ""
    default_prevented: bool = field(default=False, compare=False)

    def prevent_default(self) -> None:
        self.default_prevented = True


@dataclass(slots=True)
class PreventDefault:
    """Caller-owned switch: while set, listened key events are default-prevented."""

    enabled: bool = False

    def set(self, enabled: bool) -> None:
        self.enabled = enabled

    def __bool__(self) -> bool:
        return self.enabled


@dataclass(frozen=True, slots=True)
class KeyMap:
    """Mapping from key codes to navigation tags."""

    bindings: Mapping[int, Nav] = field(default_factory=lambda: DEFAULT_KEYMAP)

    @classmethod
    def from_codes(
        cls,
        *,
        next: int = DOWN_ARROW,  # noqa: A002
        previous: int = UP_ARROW,
        select: int = ENTER,
        clear: int | None = ESCAPE,
    ) -> KeyMap:
        """Build a keymap from one key code per tag.  ``clear=None`` unbinds it."""
        bindings = {previous: Nav.PREVIOUS, next: Nav.NEXT, select: Nav.SELECT}
        if clear is not None:
            bindings[clear] = Nav.CLEAR
        if len(bindings) != (4 if clear is not None else 3):
            msg = f"key codes must be distinct: {sorted(bindings)}"
            raise ValueError(msg)
        return cls(MappingProxyType(bindings))

    def __contains__(self, keycode: object) -> bool:
        return keycode in self.bindings

    def tag(self, keycode: int) -> Nav:
        return self.bindings[keycode]


def keycode_of(event: KeyEvent) -> int:
    return event.keycode


async def listen(
    source: AsyncIterable[KeyEvent],
    prevent: PreventDefault | None = None,
) -> AsyncIterator[KeyEvent]:
    """Pass key events through, default-preventing them while ``prevent`` is set."""
    async for event in source:
        if prevent is not None and prevent.enabled:
            event.prevent_default()
        yield event


def key_tags(
    source: AsyncIterable[KeyEvent],
    keymap: KeyMap | None = None,
    prevent: PreventDefault | None = None,
) -> AsyncIterator[Nav]:
    """Decode raw key events into navigation tags, dropping unbound keys."""
    keymap = keymap if keymap is not None else KeyMap()
    codes = transforms.map(keycode_of, listen(source, prevent))
    known = transforms.filter(keymap.__contains__, codes)
    return transforms.map(keymap.tag, known)
