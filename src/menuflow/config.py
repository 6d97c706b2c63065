"""Menuflow configuration.

MenuflowConfig is the central configuration object, frozen after creation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from menuflow._errors import ConfigError
from menuflow.adapters.keys import DOWN_ARROW, ENTER, ESCAPE, UP_ARROW, KeyMap


@dataclass(frozen=True, slots=True)
class MenuflowConfig:
    """Configuration for menuflow widgets.

    Attributes:
        root: Directory the configuration was loaded from.
              Always resolved to an absolute path on construction.
        next_key: Key code bound to ``next``.
        previous_key: Key code bound to ``previous``.
        select_key: Key code bound to ``select``.
        clear_key: Key code bound to ``clear`` (None leaves it unbound).
        highlight_marker: Highlight column character for text menus.
        select_marker: Selection column character for text menus.
        highlighted_class: Class name for highlighted elements (``--style classes``).
        selected_class: Class name for selected elements.
        max_events: Event-log capacity.

    """

    root: Path = field(default_factory=Path.cwd)
    next_key: int = DOWN_ARROW
    previous_key: int = UP_ARROW
    select_key: int = ENTER
    clear_key: int | None = ESCAPE
    highlight_marker: str = ">"
    select_marker: str = "*"
    highlighted_class: str = "highlighted"
    selected_class: str = "selected"
    max_events: int = 10_000

    def __post_init__(self) -> None:
        if not self.root.is_absolute():
            object.__setattr__(self, "root", self.root.resolve())

        for name in ("next_key", "previous_key", "select_key", "max_events"):
            _require_int(name, getattr(self, name))
        if self.clear_key is not None:
            _require_int("clear_key", self.clear_key)
        for name in ("highlight_marker", "select_marker", "highlighted_class", "selected_class"):
            value = getattr(self, name)
            if not isinstance(value, str):
                msg = f"{name} must be a string, got {type(value).__name__} {value!r}"
                raise ConfigError(msg)

        if len(self.highlight_marker) != 1 or len(self.select_marker) != 1:
            msg = "highlight_marker and select_marker must be single characters"
            raise ConfigError(msg)
        if not self.highlighted_class or not self.selected_class:
            msg = "highlighted_class and selected_class must not be empty"
            raise ConfigError(msg)
        if self.max_events < 1:
            msg = f"max_events must be positive, got {self.max_events}"
            raise ConfigError(msg)

        # Clashing key bindings fail here, not on first use
        self.keymap()

    def keymap(self) -> KeyMap:
        """Key bindings described by this configuration."""
        try:
            return KeyMap.from_codes(
                next=self.next_key,
                previous=self.previous_key,
                select=self.select_key,
                clear=self.clear_key,
            )
        except ValueError as exc:
            raise ConfigError(str(exc)) from exc


def _require_int(name: str, value: object) -> None:
    # bool is an int subclass but never a key code or a count
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{name} must be an integer, got {type(value).__name__} {value!r}"
        raise ConfigError(msg)
