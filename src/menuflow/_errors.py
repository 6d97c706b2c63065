"""Menuflow error hierarchy.

All menuflow-specific errors inherit from MenuflowError for easy catching.
"""


class MenuflowError(Exception):
    """Base error for all menuflow operations."""


class ConfigError(MenuflowError):
    """Invalid or missing configuration."""


class StreamError(MenuflowError):
    """Error in the stream layer (channels, combinators, stages)."""


class ChannelClosedError(StreamError):
    """A value was put on, or taken from, a closed and drained channel."""


class TransformError(StreamError):
    """A transform function raised while processing a stream value."""
