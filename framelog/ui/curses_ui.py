"""
Curses implementation of the immediate-mode UiContext.

This module lets the log window run in a terminal. The screen is erased
and rebuilt every frame by the frame loop; this class turns the view's
begin_window / text_colored / button calls into curses drawing.

Purpose:
    LogView only knows the UiContext protocol. A terminal is the simplest
    immediate-mode surface available everywhere Python runs, so it is the
    toolkit framelog ships with.

Design Decisions:
    - Window state (scroll position) is kept per title across frames,
      like an immediate-mode toolkit keeps it per window id
    - Text lines are collected during the frame and drawn in end_window(),
      once the content height and scroll offset are known
    - Buttons and checkboxes get a single-key hotkey; pressing it during
      a frame "clicks" the widget
    - RGBA colors are mapped onto the 8 basic curses colors
    - curses.error from writing past the screen edge is ignored; the
      terminal may be resized at any time
"""

from __future__ import annotations

import curses
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Tuple

from ..sink.model import Color
from .views import WindowSpec


def basic_color_index(color: Color) -> int:
    """
    Return the nearest of the 8 basic curses colors.

    Each RGB channel is thresholded at 0.5. The curses numbering puts red
    in bit 0, green in bit 1 and blue in bit 2, so the index falls out
    directly.

    Example:
        >>> basic_color_index(Color(1.0, 1.0, 0.0, 1.0)) == curses.COLOR_YELLOW
        True
    """
    index = 0
    if color.r >= 0.5:
        index |= 1
    if color.g >= 0.5:
        index |= 2
    if color.b >= 0.5:
        index |= 4
    return index


@dataclass
class WindowState:
    """Per-window state that survives between frames."""

    scroll: int = 0
    max_scroll: int = 0


@dataclass
class _WindowBuild:
    """Layout cursor for the window currently being built."""

    spec: WindowSpec
    state: WindowState
    visible: bool
    top: int = 0
    left: int = 0
    bottom: int = 0
    right: int = 0
    row: int = 0
    col: int = 0
    row_used: bool = False
    same_line: bool = False
    scroll_request: Optional[float] = None
    lines: List[Tuple[Color, str]] = field(default_factory=list)


class CursesUi:
    """
    UiContext drawing onto a curses screen.

    Attributes:
        stdscr: The curses window to draw on.
        use_color: Map entry colors onto color pairs. Off for monochrome
            terminals (alpha below 0.5 still dims the line).
        clipboard: Last text passed to set_clipboard_text(). Terminals
            have no portable clipboard, so the host decides what to do
            with it.
        frame_count: Number of frames started with new_frame().
    """

    # Scroll keys and the number of lines they move (None = page)
    SCROLL_KEYS = {
        curses.KEY_UP: -1,
        curses.KEY_DOWN: 1,
        curses.KEY_PPAGE: None,
        curses.KEY_NPAGE: None,
    }

    def __init__(self, stdscr, use_color: bool = True) -> None:
        self.stdscr = stdscr
        self.use_color = use_color
        self.clipboard = ""
        self.frame_count = 0
        self._key = -1
        self._windows: Dict[str, WindowState] = {}
        self._pairs: Dict[int, int] = {}
        self._open_popups: Set[str] = set()
        self._hotkeys: Set[str] = set()
        self._current: Optional[_WindowBuild] = None

    def new_frame(self, key: int = -1) -> None:
        """Start a frame; ``key`` is the key pressed since the last one."""
        self.frame_count += 1
        self._key = key
        self._hotkeys = set()

    def window_state(self, title: str) -> WindowState:
        return self._windows.setdefault(title, WindowState())

    # --- Windows ---

    def begin_window(self, spec: WindowSpec) -> bool:
        screen_h, screen_w = self.stdscr.getmaxyx()
        width = spec.width if spec.width is not None else screen_w - spec.x
        height = spec.height if spec.height is not None else screen_h - spec.y
        # Clip to the screen
        width = min(width, screen_w - spec.x)
        height = min(height, screen_h - spec.y)

        build = _WindowBuild(spec=spec, state=self.window_state(spec.title), visible=False)
        self._current = build

        inset = 1 if spec.border else 0
        # Need at least one content row and a few columns
        if width < 4 + 2 * inset or height < 2 + 2 * inset:
            return False

        build.visible = True
        build.top = spec.y + inset
        build.left = spec.x + inset
        build.bottom = spec.y + height - 1 - inset
        build.right = spec.x + width - 1 - inset
        build.row = build.top
        build.col = build.left

        if spec.border:
            self._draw_border(spec, width, height)
        return True

    def end_window(self) -> None:
        build = self._current
        self._current = None
        if build is None or not build.visible:
            return

        content_top = build.row + 1 if build.row_used else build.row
        content_h = max(0, build.bottom - content_top + 1)
        state = build.state
        state.max_scroll = max(0, len(build.lines) - content_h)

        if build.scroll_request is not None:
            # Put the end of the content at ``ratio`` of the visible height
            state.scroll = len(build.lines) - round(content_h * build.scroll_request)
        self._apply_scroll_key(state, content_h)
        state.scroll = max(0, min(state.scroll, state.max_scroll))

        visible = build.lines[state.scroll:state.scroll + content_h]
        for offset, (color, text) in enumerate(visible):
            self._put(content_top + offset, build.left, text, build.right, self._attr(color))

    def _apply_scroll_key(self, state: WindowState, page: int) -> None:
        key = self._key
        if key == curses.KEY_HOME:
            state.scroll = 0
        elif key == curses.KEY_END:
            state.scroll = state.max_scroll
        elif key in self.SCROLL_KEYS:
            step = self.SCROLL_KEYS[key]
            if step is None:
                step = page if key == curses.KEY_NPAGE else -page
            state.scroll += step

    def _draw_border(self, spec: WindowSpec, width: int, height: int) -> None:
        right = spec.x + width - 1
        bottom = spec.y + height - 1
        title = f" {spec.title} "[: max(0, width - 4)]
        self._put(spec.y, spec.x, "+" + title + "-" * (width - 2 - len(title)) + "+", right)
        for y in range(spec.y + 1, bottom):
            self._put(y, spec.x, "|", right)
            self._put(y, right, "|", right)
        self._put(bottom, spec.x, "+" + "-" * (width - 2) + "+", right)

    # --- Widgets ---

    def text_colored(self, color: Color, text: str) -> None:
        if self._current is not None and self._current.visible:
            # One screen row per line; embedded newlines would break the layout
            for line in str(text).splitlines() or [""]:
                self._current.lines.append((color, line))

    def button(self, label: str) -> bool:
        hotkey = self._claim_hotkey(label)
        self._place_widget(f"[{hotkey}] {label}")
        return self._pressed(hotkey)

    def checkbox(self, label: str, value: bool) -> bool:
        hotkey = self._claim_hotkey(label)
        if self._pressed(hotkey):
            value = not value
        mark = "x" if value else " "
        self._place_widget(f"[{mark}] {label} ({hotkey})")
        return value

    def same_line(self) -> None:
        if self._current is not None:
            self._current.same_line = True

    def separator(self) -> None:
        build = self._current
        if build is None or not build.visible:
            return
        if build.row_used:
            build.row += 1
        self._put(build.row, build.left, "-" * (build.right - build.left + 1), build.right)
        build.row += 1
        build.row_used = False
        build.same_line = False

    def open_popup(self, name: str) -> None:
        # Popups render inline; opening an open one closes it again
        if name in self._open_popups:
            self._open_popups.discard(name)
        else:
            self._open_popups.add(name)

    def begin_popup(self, name: str) -> bool:
        return name in self._open_popups

    def end_popup(self) -> None:
        if self._current is not None:
            self._current.same_line = False

    # --- Scrolling & clipboard ---

    def scroll_y(self) -> float:
        return self._active_state().scroll

    def scroll_max_y(self) -> float:
        return self._active_state().max_scroll

    def set_scroll_here_y(self, ratio: float) -> None:
        if self._current is not None:
            self._current.scroll_request = ratio

    def set_clipboard_text(self, text: str) -> None:
        self.clipboard = text

    # --- Helpers ---

    def _active_state(self) -> WindowState:
        if self._current is None:
            return WindowState()
        return self._current.state

    def _claim_hotkey(self, label: str) -> str:
        """Pick the first letter of ``label`` not yet used this frame."""
        for ch in label.lower():
            if ch.isalnum() and ch not in self._hotkeys:
                self._hotkeys.add(ch)
                return ch
        return "?"

    def _pressed(self, hotkey: str) -> bool:
        return hotkey != "?" and self._key == ord(hotkey)

    def _place_widget(self, text: str) -> None:
        build = self._current
        if build is None or not build.visible:
            return
        if build.same_line and build.row_used:
            x = build.col + 1
        else:
            if build.row_used:
                build.row += 1
            x = build.left
        build.same_line = False
        build.row_used = True
        build.col = x + len(text)
        if build.row <= build.bottom:
            self._put(build.row, x, text, build.right)

    def _attr(self, color: Color) -> int:
        attr = curses.A_DIM if color.a < 0.5 else curses.A_NORMAL
        if not self.use_color:
            return attr
        index = basic_color_index(color)
        pair = self._pairs.get(index)
        if pair is None:
            pair = len(self._pairs) + 1
            # -1 keeps the terminal's default background
            curses.init_pair(pair, index, -1)
            self._pairs[index] = pair
        return curses.color_pair(pair) | attr

    def _put(self, y: int, x: int, text: str, right: int, attr: int = 0) -> None:
        """Write ``text`` at (y, x), clipped so it ends at column ``right``."""
        clipped = text[: max(0, right - x + 1)]
        if not clipped:
            return
        try:
            self.stdscr.addstr(y, x, clipped, attr)
        except curses.error:
            # Writing the bottom-right cell or off-screen after a resize
            pass
