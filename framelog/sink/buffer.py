"""
Bounded, thread-safe history of formatted log lines.

Purpose:
    Any thread may log at any time, while exactly one thread (the render
    thread) reads the history once per frame. The LogBuffer is the only
    shared mutable state between them.

Design Decisions:
    - deque(maxlen=capacity) gives O(1) append with automatic FIFO eviction,
      so the history is always the newest ``capacity`` entries
    - One lock guards every mutation and every read
    - snapshot() copies under the lock and returns an immutable tuple; the
      renderer iterates the copy without holding anything
    - ``appended`` counts every entry ever added, which lets a view hide
      older lines without touching the buffer itself
"""

import threading
from collections import deque
from typing import Deque, Tuple

from ..errors import ConfigurationError
from .model import Entry

# Default history length when the config doesn't override it
DEFAULT_BUFFER_CAPACITY = 1000


class LogBuffer:
    """
    Fixed-size FIFO of ``Entry`` values with thread-safe access.

    Attributes:
        capacity: Maximum number of entries retained.

    Example:
        >>> buf = LogBuffer(capacity=2)
        >>> for text in ("a", "b", "c"):
        ...     buf.append(Entry(text, Color(1, 1, 1, 1)))
        >>> [e.text for e in buf.snapshot()]
        ['b', 'c']
    """

    def __init__(self, capacity: int = DEFAULT_BUFFER_CAPACITY) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
            raise ConfigurationError(f"buffer capacity must be a positive integer, got {capacity!r}")
        self.capacity = capacity
        self._lock = threading.Lock()
        self._entries: Deque[Entry] = deque(maxlen=capacity)
        self._appended = 0

    def append(self, entry: Entry) -> None:
        """Add ``entry`` at the end, evicting the oldest entry when full."""
        with self._lock:
            self._entries.append(entry)
            self._appended += 1

    def snapshot(self) -> Tuple[Entry, ...]:
        """Return the current contents, oldest first, as of one instant."""
        with self._lock:
            return tuple(self._entries)

    def snapshot_with_count(self) -> Tuple[Tuple[Entry, ...], int]:
        """
        Return the contents together with the running append count.

        Both values are read under a single lock acquisition so they
        always describe the same instant.
        """
        with self._lock:
            return tuple(self._entries), self._appended

    def clear(self) -> None:
        """Drop every retained entry. The append count is kept."""
        with self._lock:
            self._entries.clear()

    @property
    def appended(self) -> int:
        """Total number of entries appended since creation."""
        with self._lock:
            return self._appended

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
