"""
Exception types raised by framelog.

Only configuration mistakes surface as exceptions. Everything that happens
while a record is being logged (formatting, buffering, mirroring) is
handled inside the sink so that logging never takes down the host.
"""


class FramelogError(Exception):
    """Base class for all framelog errors."""


class ConfigurationError(FramelogError):
    """
    Raised when a configuration value is invalid.

    Examples: a buffer capacity below 1, a color with the wrong number of
    channels, or an environment variable that cannot be parsed.
    """


class SinkAlreadyInstalledError(ConfigurationError):
    """Raised when init() is called after a sink has already been installed."""
