"""Menuflow — reactive list navigation over async event streams.

Drives small "highlight one item, optionally select it" menus.  Raw key and
pointer events are decoded by stream combinators, merged, gated while the
widget is inactive, and fed to a highlighter and a selector that drive a
pluggable list view.

Quick start::

    import asyncio
    from menuflow import Nav, TextListView, build_chain

    async def events():
        for e in (Nav.NEXT, Nav.NEXT, Nav.PREVIOUS, Nav.SELECT):
            yield e

    data = ["Smalltalk", "Lisp", "Prolog"]
    view = TextListView(data)
    chain = build_chain([events()], view, data=data, gate_open=True)

    async def main():
        async with asyncio.TaskGroup() as tg:
            tg.create_task(chain.run())
            async for value in chain.output:
                print(value)

    asyncio.run(main())

Layers:

    streams         Channel, transforms, ToggleGate, FanIn
    navigation      Nav events, Highlighter, Selector, view protocols
    adapters        key and pointer decoding
    views           TextListView, ClassListView
    pipeline        NavPipeline, build_chain
    widget          hover-activated example orchestrator

"""

# PEP 703: Declare this module as free-threading safe
_Py_mod_gil = 0

__version__ = "0.1.0-dev"
__all__ = [
    "Channel",
    "ClassListView",
    "FanIn",
    "Highlighter",
    "MenuflowConfig",
    "Nav",
    "Selection",
    "Selector",
    "TextListView",
    "ToggleGate",
    "Widget",
    "__version__",
    "build_chain",
    "load_config",
]

_LAZY = {
    "Channel": "menuflow.streams.channel",
    "FanIn": "menuflow.streams.fan_in",
    "ToggleGate": "menuflow.streams.gate",
    "Nav": "menuflow.navigation.events",
    "Selection": "menuflow.navigation.events",
    "Highlighter": "menuflow.navigation.highlighter",
    "Selector": "menuflow.navigation.selector",
    "TextListView": "menuflow.views",
    "ClassListView": "menuflow.views",
    "build_chain": "menuflow.pipeline",
    "Widget": "menuflow.widget",
    "MenuflowConfig": "menuflow.config",
    "load_config": "menuflow.config_loader",
}


def __getattr__(name: str) -> object:
    """Lazy imports for the public API.

    Keeps ``import menuflow`` fast while providing a flat top-level API.
    """
    module_name = _LAZY.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
