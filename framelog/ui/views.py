"""
Immediate-mode rendering of the log buffer.

This module contains the drawing routine shared by both integration
styles: an application calling ``handle.draw(ui, window)`` from its own
frame loop, and the LogSystem that a frame loop runs on every tick.

Purpose:
    Each frame the view takes one snapshot of the LogBuffer and emits one
    colored text line per entry into the window. Nothing is cached between
    frames apart from a little view state (auto-scroll flag, clear marker).

Architecture:
    - UiContext: the narrow set of immediate-mode calls the view needs
    - WindowSpec: title and placement of the target window
    - LogView: the drawing routine, one per installed sink
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, Tuple

from ..sink.buffer import LogBuffer
from ..sink.model import Color, Entry

OPTIONS_POPUP = "Options"


class UiContext(Protocol):
    """
    Immediate-mode calls used by LogView.

    Any toolkit adapter providing these methods can host the log window.
    Scroll values are in the toolkit's own units; scroll_y() and
    scroll_max_y() report the window's position as of the previous frame.
    """

    def begin_window(self, spec: "WindowSpec") -> bool: ...

    def end_window(self) -> None: ...

    def text_colored(self, color: Color, text: str) -> None: ...

    def button(self, label: str) -> bool: ...

    def checkbox(self, label: str, value: bool) -> bool: ...

    def same_line(self) -> None: ...

    def separator(self) -> None: ...

    def open_popup(self, name: str) -> None: ...

    def begin_popup(self, name: str) -> bool: ...

    def end_popup(self) -> None: ...

    def scroll_y(self) -> float: ...

    def scroll_max_y(self) -> float: ...

    def set_scroll_here_y(self, ratio: float) -> None: ...

    def set_clipboard_text(self, text: str) -> None: ...


@dataclass(frozen=True)
class WindowSpec:
    """
    Describes the window the log is drawn into.

    Attributes:
        title: Window title, also its identity across frames.
        width: Width in toolkit units; None stretches to the screen edge.
        height: Height in toolkit units; None stretches to the screen edge.
        x: Left edge.
        y: Top edge.
        border: Draw a frame around the window.
    """

    title: str = "Log"
    width: Optional[int] = None
    height: Optional[int] = None
    x: int = 0
    y: int = 0
    border: bool = True


class LogView:
    """
    Draws a LogBuffer into a window every frame.

    The view never modifies the buffer. "Clear" only moves a marker so
    that entries appended before it are hidden from this view.

    Attributes:
        buffer: The buffer being displayed.
        autoscroll: Always follow the newest line, even after the user
            scrolled up.
    """

    def __init__(self, buffer: LogBuffer) -> None:
        self.buffer = buffer
        self.autoscroll = False
        # Entries appended up to this count are hidden by "Clear"
        self._hidden_through = 0

    def clear(self) -> None:
        """Hide everything currently in the buffer from this view."""
        self._hidden_through = self.buffer.appended

    def visible_entries(self) -> Tuple[Entry, ...]:
        """Snapshot the buffer and drop entries hidden by clear()."""
        entries, appended = self.buffer.snapshot_with_count()
        fresh = appended - self._hidden_through
        if fresh <= 0:
            return ()
        if fresh >= len(entries):
            return entries
        return entries[len(entries) - fresh:]

    def build(self, ui: UiContext, window: WindowSpec) -> None:
        """
        Draw one frame of the log window.

        Args:
            ui: The toolkit context for the current frame.
            window: Which window to draw into.

        Note:
            end_window() is called even when begin_window() reports the
            window as hidden, matching immediate-mode Begin/End pairing.
        """
        try:
            if ui.begin_window(window):
                self._build_contents(ui)
        finally:
            ui.end_window()

    def _build_contents(self, ui: UiContext) -> None:
        if ui.begin_popup(OPTIONS_POPUP):
            self.autoscroll = ui.checkbox("Auto-scroll", self.autoscroll)
            ui.end_popup()

        if ui.button("Options"):
            ui.open_popup(OPTIONS_POPUP)
        ui.same_line()
        clear = ui.button("Clear")
        ui.same_line()
        copy = ui.button("Copy")
        ui.separator()

        if clear:
            self.clear()

        entries = self.visible_entries()
        if copy:
            ui.set_clipboard_text("\n".join(entry.text for entry in entries))

        for entry in entries:
            ui.text_colored(entry.color, entry.text)

        # Follow new lines only if the user was already at the bottom
        if self.autoscroll or ui.scroll_y() >= ui.scroll_max_y():
            ui.set_scroll_here_y(1.0)
