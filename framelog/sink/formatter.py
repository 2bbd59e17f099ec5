"""
Template formatting for log records.

This module turns a ``Record`` into the single line of text shown in the
log window (and mirrored to stdout).

Template Syntax:
    Placeholders are names in braces. Recognized names:

    - {level}     TRACE / DEBUG / INFO / WARN / ERROR
    - {target}    logger name
    - {message}   message text
    - {timestamp} ISO 8601 UTC time, e.g. 2024-01-15T12:00:00Z
    - {location}  file:line when known, otherwise the target
    - {file}      source file name
    - {line}      source line number
    - {elapsed}   seconds since logging started, e.g. 12.3s

    Anything else in braces, including stray braces, is copied through as
    written. A typo in a template shows up on screen instead of breaking
    every record.

Design Decisions:
    - Regex substitution rather than str.format, which would raise on
      unknown names and choke on literal braces
    - No state; safe to call from any number of threads
"""

import re

from .model import Record

DEFAULT_TEMPLATE = "{location} --- {level}: {message}"

# Matches {name}; the name is looked up in the record's field table
PLACEHOLDER_PATTERN = re.compile(r"\{(\w+)\}")


def format_timestamp(record: Record) -> str:
    """
    Render the record's timestamp as compact ISO 8601 UTC.

    Returns an empty string when the record carries no timestamp.
    """
    if record.timestamp is None:
        return ""
    return (
        record.timestamp.isoformat(timespec="seconds")
        # Replace the verbose +00:00 suffix with the more compact Z
        .replace("+00:00", "Z")
    )


def format_elapsed(record: Record) -> str:
    """Render elapsed seconds with one decimal, or "" when unknown."""
    if record.elapsed is None:
        return ""
    return f"{record.elapsed:.1f}s"


def format_location(record: Record) -> str:
    """Return ``file:line`` if both are known, else the record's target."""
    if record.filename and record.lineno:
        return f"{record.filename}:{record.lineno}"
    return record.target


def record_fields(record: Record) -> dict:
    """Build the placeholder table for one record."""
    return {
        "level": record.level.name,
        "target": record.target,
        "message": record.message,
        "timestamp": format_timestamp(record),
        "location": format_location(record),
        "file": record.filename or "",
        "line": str(record.lineno) if record.lineno else "",
        "elapsed": format_elapsed(record),
    }


def format_record(record: Record, template: str = DEFAULT_TEMPLATE) -> str:
    """
    Substitute the record's fields into ``template``.

    Args:
        record: The record to render.
        template: Template string using the placeholders listed above.

    Returns:
        str: The formatted line, without a trailing newline.

    Example:
        >>> rec = Record(Level.WARN, "physics", "step took 40ms")
        >>> format_record(rec, "[{level}] {target}: {message} {nope}")
        '[WARN] physics: step took 40ms {nope}'
    """
    fields = record_fields(record)

    def substitute(match: re.Match) -> str:
        # Unknown names fall back to the original "{name}" text
        return fields.get(match.group(1), match.group(0))

    return PLACEHOLDER_PATTERN.sub(substitute, template)
