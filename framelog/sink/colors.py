"""
Per-level display colors.

Every level must have a color. ``LogColors`` takes all five as required
fields, so a lookup can never come up empty at render time; bad values
are rejected when the palette is built.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union

from ..errors import ConfigurationError
from .model import Color, Level

ColorLike = Union[Color, Iterable[float]]


def to_color(value: ColorLike, name: str = "color") -> Color:
    """
    Coerce a 4-sequence of floats into a ``Color``.

    Raises:
        ConfigurationError: If the value does not have exactly four
            numeric channels in the range 0.0-1.0.
    """
    try:
        channels = tuple(float(c) for c in value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"{name}: expected 4 numeric channels, got {value!r}") from exc

    if len(channels) != 4:
        raise ConfigurationError(f"{name}: expected 4 channels, got {len(channels)}")
    for channel in channels:
        if not 0.0 <= channel <= 1.0:
            raise ConfigurationError(f"{name}: channel {channel} outside 0.0-1.0")

    return Color(*channels)


@dataclass(frozen=True)
class LogColors:
    """
    Colors used by the log window, one per level.

    Example:
        >>> LogColors(
        ...     trace=(1, 1, 1, 1),
        ...     debug=(1, 1, 1, 1),
        ...     info=(1, 1, 1, 1),
        ...     warn=(1, 1, 1, 1),
        ...     error=(1, 1, 1, 1),
        ... )
    """

    trace: Color
    debug: Color
    info: Color
    warn: Color
    error: Color

    def __post_init__(self) -> None:
        # Frozen dataclass: normalise through object.__setattr__
        for level in Level:
            field_name = level.name.lower()
            object.__setattr__(self, field_name, to_color(getattr(self, field_name), field_name))

    @classmethod
    def default(cls) -> "LogColors":
        """The built-in palette: green, blue, white, yellow, red."""
        return cls(
            trace=Color(0.0, 1.0, 0.0, 1.0),
            debug=Color(0.0, 0.0, 1.0, 1.0),
            info=Color(1.0, 1.0, 1.0, 1.0),
            warn=Color(1.0, 1.0, 0.0, 1.0),
            error=Color(1.0, 0.0, 0.0, 1.0),
        )

    def level(self, level: Level) -> Color:
        return color_for(level, self)


def color_for(level: Level, colors: LogColors) -> Color:
    """Return the display color for ``level``."""
    return getattr(colors, Level(level).name.lower())
