"""
Logger configuration.

A LoggerConfig is built once, handed to init_with_config(), and never
changed afterwards. The handler, formatter and color policy all read the
same instance.

Usage:
    Start from the defaults and chain setters; each setter returns a new
    config and leaves the original untouched:

        config = (
            LoggerConfig.default()
            .stdout(False)
            .capacity(500)
            .template("{timestamp} [{level}] {message}")
        )

Environment Variables:
    LoggerConfig.from_env() overlays these on the defaults:

    - FRAMELOG_STDOUT           mirror to stdout (1/0, true/false, on/off)
    - FRAMELOG_BUFFER_CAPACITY  number of lines kept in the window
    - FRAMELOG_FORMAT           line template (see sink.formatter)
    - FRAMELOG_LEVEL            root logger threshold (TRACE..ERROR)
"""

from __future__ import annotations

import dataclasses
import os
from dataclasses import dataclass, field
from typing import Mapping, Optional, TextIO

from .errors import ConfigurationError
from .sink.buffer import DEFAULT_BUFFER_CAPACITY
from .sink.colors import LogColors
from .sink.formatter import DEFAULT_TEMPLATE
from .sink.model import Level
from .utils.env import parse_bool, parse_int


@dataclass(frozen=True)
class LoggerConfig:
    """
    Immutable settings for the log sink.

    Attributes:
        format_template: Line template, see ``framelog.sink.formatter``.
        log_colors: One color per level.
        mirror_to_secondary_output: Also write each line to stdout.
        buffer_capacity: Number of lines the window keeps.
        max_level: Threshold set on the root logger at install time.
        secondary_output: Stream to mirror to; None means the current
            ``sys.stdout`` at the moment of writing.
    """

    format_template: str = DEFAULT_TEMPLATE
    log_colors: LogColors = field(default_factory=LogColors.default)
    mirror_to_secondary_output: bool = True
    buffer_capacity: int = DEFAULT_BUFFER_CAPACITY
    max_level: Level = Level.DEBUG
    secondary_output: Optional[TextIO] = None

    def __post_init__(self) -> None:
        if not isinstance(self.format_template, str):
            raise ConfigurationError("format_template must be a string")
        if not isinstance(self.log_colors, LogColors):
            raise ConfigurationError("log_colors must be a LogColors instance")
        capacity = self.buffer_capacity
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
            raise ConfigurationError(f"buffer_capacity must be a positive integer, got {capacity!r}")
        try:
            object.__setattr__(self, "max_level", Level(self.max_level))
        except ValueError as exc:
            raise ConfigurationError(f"max_level: unknown level {self.max_level!r}") from exc

    @classmethod
    def default(cls) -> "LoggerConfig":
        return cls()

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "LoggerConfig":
        """
        Build a config from FRAMELOG_* variables, falling back to defaults.

        Args:
            environ: Mapping to read; defaults to ``os.environ``.

        Raises:
            ConfigurationError: If a variable is set but cannot be parsed.
        """
        env = os.environ if environ is None else environ
        config = cls()

        if "FRAMELOG_STDOUT" in env:
            config = config.stdout(parse_bool(env["FRAMELOG_STDOUT"], "FRAMELOG_STDOUT"))
        if "FRAMELOG_BUFFER_CAPACITY" in env:
            config = config.capacity(
                parse_int(env["FRAMELOG_BUFFER_CAPACITY"], "FRAMELOG_BUFFER_CAPACITY")
            )
        if "FRAMELOG_FORMAT" in env:
            config = config.template(env["FRAMELOG_FORMAT"])
        if "FRAMELOG_LEVEL" in env:
            try:
                level = Level.parse(env["FRAMELOG_LEVEL"])
            except KeyError as exc:
                raise ConfigurationError(
                    f"FRAMELOG_LEVEL: unknown level {env['FRAMELOG_LEVEL']!r}"
                ) from exc
            config = config.level(level)

        return config

    # --- Chained setters ---

    def stdout(self, enabled: bool) -> "LoggerConfig":
        """Toggle mirroring of every line to the secondary output."""
        return dataclasses.replace(self, mirror_to_secondary_output=bool(enabled))

    def colors(self, colors: LogColors) -> "LoggerConfig":
        return dataclasses.replace(self, log_colors=colors)

    def template(self, template: str) -> "LoggerConfig":
        return dataclasses.replace(self, format_template=template)

    def capacity(self, capacity: int) -> "LoggerConfig":
        return dataclasses.replace(self, buffer_capacity=capacity)

    def level(self, level: Level) -> "LoggerConfig":
        return dataclasses.replace(self, max_level=level)

    def output(self, stream: Optional[TextIO]) -> "LoggerConfig":
        """Mirror to ``stream`` instead of stdout."""
        return dataclasses.replace(self, secondary_output=stream)
