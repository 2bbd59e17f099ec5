"""
logging.Handler that feeds the log window.

Every record that reaches the root logger is formatted, colored and
appended to the LogBuffer. When mirroring is enabled the same line is
also written to stdout (or the configured stream).

Design Decisions:
    - No level filtering here; the root logger's level decides what arrives
    - handle() is overridden so records are not serialized by the handler
      lock; the buffer's own lock is the only exclusion
    - The mirror write happens after the buffer append, outside its lock,
      so a slow terminal never holds up other logging threads
    - Mirror failures of any kind are dropped; logging must never crash the host
"""

import logging
import sys
from typing import Optional, TextIO

from ..config import LoggerConfig
from .buffer import LogBuffer
from .colors import color_for
from .formatter import format_record
from .model import Entry, Record


class BufferHandler(logging.Handler):
    """
    Handler that formats records into a LogBuffer.

    Attributes:
        config: The immutable configuration this handler was built with.
        buffer: Destination buffer for formatted entries.
    """

    def __init__(self, config: LoggerConfig, buffer: Optional[LogBuffer] = None) -> None:
        super().__init__(level=logging.NOTSET)
        self.config = config
        self.buffer = buffer if buffer is not None else LogBuffer(config.buffer_capacity)

    def handle(self, record: logging.LogRecord):
        rv = self.filter(record)
        # Python 3.12+ filters may hand back a replacement record
        if isinstance(rv, logging.LogRecord):
            record = rv
        if rv:
            self.emit(record)
        return rv

    def format_entry(self, record: logging.LogRecord) -> Entry:
        """Turn a stdlib record into the entry the buffer stores."""
        rec = Record.from_logging(record)
        text = format_record(rec, self.config.format_template)
        return Entry(text=text, color=color_for(rec.level, self.config.log_colors))

    def emit(self, record: logging.LogRecord) -> None:
        try:
            entry = self.format_entry(record)
        except Exception:
            # Bad %-arguments and the like; report the stdlib way
            self.handleError(record)
            return

        self.buffer.append(entry)

        if self.config.mirror_to_secondary_output:
            self._mirror(entry.text)

    def _mirror(self, text: str) -> None:
        """Best-effort write of one line to the secondary output."""
        stream: Optional[TextIO] = self.config.secondary_output
        if stream is None:
            stream = sys.stdout
        if stream is None:
            # sys.stdout is None under pythonw and some embedded hosts
            return
        try:
            # Single write per record so lines from different threads stay whole
            stream.write(text + "\n")
            stream.flush()
        except Exception:
            # Closed, broken or binary stream; the line is still in the buffer
            pass
