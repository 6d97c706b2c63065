"""Stream layer — channels and the generic stages built on them.

Transform combinators live in ``menuflow.streams.transforms`` and are
imported as a module because their names mirror builtins.
"""

from menuflow.streams.channel import Channel
from menuflow.streams.fan_in import FanIn
from menuflow.streams.gate import ToggleGate

__all__ = [
    "Channel",
    "FanIn",
    "ToggleGate",
]
