"""
Curses frame loop hosting scheduled systems.

This module provides a minimal host for the LogSystem: a loop that reads
input, clears the screen, runs every registered system against the
frame's CursesUi and pushes the frame to the terminal.

Architecture:
    - Producer threads: whatever the application runs, logging as usual
    - Main thread: this loop, the only reader of the log buffer
    - Communication: the LogBuffer (see sink/buffer.py)
"""

import curses
import time
from typing import Callable, Dict, List, Optional, Protocol

from .curses_ui import CursesUi

# Keys that end the loop: q, Q, Ctrl+C
QUIT_KEYS = (ord("q"), ord("Q"), 3)


class Schedulable(Protocol):
    """Anything with a run(ui) method the loop can call each frame."""

    def run(self, ui: Optional[CursesUi] = None) -> None: ...


class FrameLoop:
    """
    Runs systems once per frame until the user quits.

    Attributes:
        stdscr: The curses standard screen (from curses.wrapper).
        ui: The CursesUi shared by all systems.
        systems: Systems run each frame, in registration order.
        fps: Target frames per second.
        footer: Text drawn on the last screen row, if any.

    Example:
        >>> def main(stdscr):
        ...     loop = FrameLoop(stdscr)
        ...     loop.add(framelog.create_system())
        ...     loop.run()
        >>> curses.wrapper(main)
    """

    def __init__(self, stdscr, fps: float = 20.0, footer: Optional[str] = None) -> None:
        self.stdscr = stdscr
        self.ui = CursesUi(stdscr, use_color=False)
        self.systems: List[Schedulable] = []
        self.fps = fps
        self.footer = footer
        self.running = False
        self._in_frame = False
        self._bindings: Dict[int, Callable[[], None]] = {}

    def add(self, system: Schedulable) -> "FrameLoop":
        self.systems.append(system)
        return self

    def bind(self, key: str, callback: Callable[[], None]) -> None:
        """Call ``callback`` whenever ``key`` is pressed."""
        self._bindings[ord(key)] = callback

    def current_ui(self) -> Optional[CursesUi]:
        """The UI while a frame is being built, otherwise None."""
        return self.ui if self._in_frame else None

    def setup(self) -> None:
        """Prepare the terminal: hidden cursor, non-blocking input, colors."""
        try:
            # Hide the cursor for a cleaner UI
            curses.curs_set(0)
        except curses.error:
            # Some terminals can't hide the cursor
            pass
        # Non-blocking getch() so input never stalls the frame
        self.stdscr.nodelay(True)
        self.stdscr.keypad(True)
        if curses.has_colors():
            curses.start_color()
            curses.use_default_colors()
            self.ui.use_color = True

    def tick(self) -> None:
        """Build and display one frame."""
        key = self.stdscr.getch()
        if key in QUIT_KEYS:
            self.running = False
            return
        if key in self._bindings:
            self._bindings[key]()

        self.ui.new_frame(key)
        # Clear previous frame
        self.stdscr.erase()
        h, w = self.stdscr.getmaxyx()
        footer_rows = 1 if self.footer else 0

        self._in_frame = True
        try:
            for system in self.systems:
                system.run(self.ui)
        finally:
            self._in_frame = False

        if footer_rows and h > 0:
            try:
                self.stdscr.addstr(h - 1, 0, self.footer[: max(0, w - 1)])
            except curses.error:
                pass
        # Push frame to terminal
        self.stdscr.refresh()

    def run(self) -> None:
        """Run frames until a quit key is pressed."""
        self.setup()
        self.running = True
        delay = 1.0 / self.fps if self.fps > 0 else 0.0
        while self.running:
            self.tick()
            # Cap frame rate to reduce CPU usage
            time.sleep(delay)
