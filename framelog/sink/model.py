"""
Data models shared by the sink and the renderer.

Purpose:
    A record passes through three shapes on its way to the screen:
    the stdlib ``logging.LogRecord`` handed to the handler, a small
    ``Record`` that the formatter works on, and the ``Entry`` that the
    buffer keeps. This module defines the last two plus the level and
    color value types they carry.

Note:
    ``Record`` is never stored. Once formatted it is dropped and only the
    resulting ``Entry`` (text + color) is retained.
"""

from __future__ import annotations

import datetime
import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import NamedTuple, Optional


class Level(IntEnum):
    """
    Severity levels understood by the sink, lowest first.

    Values line up with the stdlib ``logging`` numbers so that a level can
    be passed straight to ``Logger.setLevel``. TRACE has no stdlib
    counterpart and is registered under its own name at install time.
    """

    TRACE = 5
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARN = logging.WARNING
    ERROR = logging.ERROR

    @classmethod
    def from_levelno(cls, levelno: int) -> "Level":
        """
        Map a stdlib level number onto the five sink levels.

        Picks the highest level whose value is not above ``levelno``.
        Anything below TRACE counts as TRACE and CRITICAL counts as ERROR.

        Example:
            >>> Level.from_levelno(logging.CRITICAL)
            <Level.ERROR: 40>
            >>> Level.from_levelno(15)
            <Level.DEBUG: 10>
        """
        found = cls.TRACE
        for level in cls:
            if level <= levelno:
                found = level
        return found

    @classmethod
    def parse(cls, name: str) -> "Level":
        """Look up a level by name, accepting WARNING/CRITICAL aliases."""
        key = name.strip().upper()
        aliases = {"WARNING": "WARN", "CRITICAL": "ERROR", "FATAL": "ERROR"}
        return cls[aliases.get(key, key)]


class Color(NamedTuple):
    """RGBA color with float channels in the range 0.0-1.0."""

    r: float
    g: float
    b: float
    a: float = 1.0


_traceback_formatter = logging.Formatter()


def full_message(record: logging.LogRecord) -> str:
    """Return the interpolated message plus any exception or stack text."""
    message = record.getMessage()
    if record.exc_info and not record.exc_text:
        # Cached on the record like the stdlib Formatter does
        record.exc_text = _traceback_formatter.formatException(record.exc_info)
    if record.exc_text:
        message = message.rstrip("\n") + "\n" + record.exc_text
    if record.stack_info:
        message = message.rstrip("\n") + "\n" + _traceback_formatter.formatStack(record.stack_info)
    return message


@dataclass(frozen=True)
class Record:
    """
    The fields of one log record that the formatter can substitute.

    Attributes:
        level: Severity, already mapped onto ``Level``.
        target: Logger name the record was emitted on.
        message: Fully interpolated message text.
        timestamp: Creation time (UTC) if known.
        filename: Source file base name if known.
        lineno: Source line number if known.
        elapsed: Seconds since the logging module was loaded, if known.
    """

    level: Level
    target: str
    message: str
    timestamp: Optional[datetime.datetime] = None
    filename: Optional[str] = None
    lineno: Optional[int] = None
    elapsed: Optional[float] = None

    @classmethod
    def from_logging(cls, record: logging.LogRecord) -> "Record":
        """
        Build a Record from a stdlib LogRecord.

        ``getMessage()`` performs the ``%`` interpolation, so a record with
        mismatched arguments raises here; the handler deals with that.
        An attached traceback or stack is appended on the following lines,
        laid out the same way ``logging.Formatter`` does it.
        """
        return cls(
            level=Level.from_levelno(record.levelno),
            target=record.name,
            message=full_message(record),
            timestamp=datetime.datetime.fromtimestamp(record.created, datetime.UTC),
            # LogRecord uses "(unknown file)" / 0 when the caller can't be found
            filename=record.filename if record.lineno else None,
            lineno=record.lineno or None,
            elapsed=record.relativeCreated / 1000.0,
        )


@dataclass(frozen=True)
class Entry:
    """One formatted line held by the buffer."""

    text: str
    color: Color
