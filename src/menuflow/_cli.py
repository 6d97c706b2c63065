"""Menuflow CLI — menuflow demo.

Entry point for the ``menuflow`` command-line interface.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Callable

    from menuflow.config import MenuflowConfig

KEY_NAMES = ("up", "down", "enter", "esc")
STYLES = ("text", "classes")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the menuflow CLI."""
    parser = argparse.ArgumentParser(
        prog="menuflow",
        description="Reactive list navigation: highlight and select over event streams.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_get_version()}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # menuflow demo
    demo_parser = subparsers.add_parser(
        "demo",
        help="Drive a text menu with a scripted sequence of key presses",
    )
    demo_parser.add_argument("items", nargs="+", help="Menu item labels")
    demo_parser.add_argument(
        "--press",
        default="",
        help="Comma-separated presses: up, down, enter, esc, or an item number to hover",
    )
    demo_parser.add_argument(
        "--root", default=".", help="Directory holding menuflow.yaml / menuflow.toml",
    )
    demo_parser.add_argument(
        "--stats", action="store_true", help="Print event-log statistics at the end",
    )
    demo_parser.add_argument(
        "--style",
        choices=STYLES,
        default="text",
        help="text: marker columns; classes: element class lists",
    )

    return parser


def _get_version() -> str:
    """Get the package version."""
    from menuflow import __version__

    return __version__


def _token_decoder(config: MenuflowConfig) -> Callable[[str], Any]:
    """Decode a ``--press`` token into a navigation event."""
    codes = {
        "up": config.previous_key,
        "down": config.next_key,
        "enter": config.select_key,
        "esc": config.clear_key,
    }
    keymap = config.keymap()

    def decode(token: str) -> Any:
        if token.isdigit():
            return int(token)
        return keymap.tag(codes[token])

    return decode


def parse_presses(raw: str, item_count: int) -> list[str]:
    """Split and validate a ``--press`` value.

    Raises:
        ValueError: A token is neither a key name nor an in-range item number.

    """
    tokens = [t.strip().lower() for t in raw.split(",") if t.strip()]
    for token in tokens:
        if token.isdigit():
            if int(token) >= item_count:
                msg = f"item number {token} out of range (0-{item_count - 1})"
                raise ValueError(msg)
        elif token not in KEY_NAMES:
            msg = f"unknown key {token!r} (expected one of {', '.join(KEY_NAMES)})"
            raise ValueError(msg)
    return tokens


async def _tokens(tokens: list[str]) -> AsyncIterator[str]:
    for token in tokens:
        yield token


async def run_demo(
    items: list[str],
    tokens: list[str],
    config: MenuflowConfig,
    *,
    out: Any = None,
    stats: bool = False,
    style: str = "text",
) -> None:
    """Feed ``tokens`` through a selector chain over a menu, printing each render."""
    from menuflow.navigation.events import Selection
    from menuflow.observability import EventLog, NavCollector
    from menuflow.pipeline import Sink, build_chain
    from menuflow.streams import transforms

    out = out if out is not None else sys.stdout
    if config.clear_key is None and "esc" in tokens:
        msg = "'esc' pressed but clear_key is unbound in the configuration"
        raise ValueError(msg)

    view, render = _menu(items, config, style)
    collector = NavCollector(EventLog(max_events=config.max_events))
    events = transforms.map(_token_decoder(config), _tokens(tokens))
    chain = build_chain([events], view, data=items, gate_open=True, name="demo", collector=collector)

    def show(value: Any) -> None:
        print(render(), file=out)
        if isinstance(value, Selection):
            print(f"selected: {value.item}", file=out)
        print(file=out)

    chain.pipeline.add(Sink(chain.output, show, name="demo.print", collector=collector))

    print(render(), file=out)
    print(file=out)
    await chain.run()

    if stats:
        log = collector.log
        path = log.highlight_path("demo.highlighter")
        print("path: " + " -> ".join("none" if i is None else str(i) for i in path), file=out)
        print(f"selections: {len(log.selections())}", file=out)
        summary = log.stats()
        print(f"events: {summary['total']}", file=out)
        for kind, count in sorted(summary["by_type"].items()):
            print(f"  {kind}: {count}", file=out)


def _menu(items: list[str], config: MenuflowConfig, style: str) -> tuple[Any, Callable[[], str]]:
    """Build the list view for ``style`` and a function rendering it to text."""
    from menuflow.views import ClassListView, Element, TextListView

    if style == "classes":
        elements = [Element(item) for item in items]

        def render_elements() -> str:
            return "\n".join(
                f"{el.text} [{' '.join(sorted(el.classes))}]" if el.classes else el.text
                for el in elements
            )

        view = ClassListView(
            lambda: elements,
            highlighted_class=config.highlighted_class,
            selected_class=config.selected_class,
        )
        return view, render_elements

    text = TextListView(
        items,
        highlight_marker=config.highlight_marker,
        select_marker=config.select_marker,
    )
    return text, text.render


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    from menuflow._errors import ConfigError
    from menuflow.config_loader import load_config

    if args.command == "demo":
        try:
            tokens = parse_presses(args.press, len(args.items))
        except ValueError as exc:
            parser.error(str(exc))
        try:
            config = load_config(Path(args.root))
        except ConfigError as exc:
            print(f"  Config error: {exc}", file=sys.stderr)
            sys.exit(1)
        try:
            asyncio.run(
                run_demo(args.items, tokens, config, stats=args.stats, style=args.style)
            )
        except (ConfigError, ValueError) as exc:
            print(f"  {exc}", file=sys.stderr)
            sys.exit(1)


if __name__ == "__main__":
    main()
