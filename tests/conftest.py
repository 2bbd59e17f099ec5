"""Pytest configuration and shared fakes for framelog tests."""

import curses
import logging
from typing import Dict, List, Optional, Set

import pytest

from framelog import logger as sink_logger
from framelog.sink.model import Color


@pytest.fixture(autouse=True)
def reset_sink():
    """Detach any sink installed by a test so the next one can install again."""
    root = logging.getLogger()
    level = root.level
    yield
    handler = sink_logger.installed_handler()
    if handler is not None:
        root.removeHandler(handler)
    sink_logger._installed = None
    root.setLevel(level)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep FRAMELOG_* variables from the developer's shell out of tests."""
    for name in ("FRAMELOG_STDOUT", "FRAMELOG_BUFFER_CAPACITY", "FRAMELOG_FORMAT", "FRAMELOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


class CountingStream:
    """Text stream that records every write call."""

    def __init__(self) -> None:
        self.writes: List[str] = []
        self.flushes = 0

    def write(self, text: str) -> int:
        self.writes.append(text)
        return len(text)

    def flush(self) -> None:
        self.flushes += 1


class FakeUi:
    """
    UiContext that records what the view asks it to do.

    Attributes:
        pressed: Labels of buttons that report a click this frame.
        popups: Names of popups that are open.
        scroll: Value returned by scroll_y().
        max_scroll: Value returned by scroll_max_y().
        visible: Value returned by begin_window().
    """

    def __init__(self, scroll: float = 0.0, max_scroll: float = 0.0, visible: bool = True) -> None:
        self.calls: List[tuple] = []
        self.lines: List[tuple] = []
        self.pressed: Set[str] = set()
        self.popups: Set[str] = set()
        self.scroll = scroll
        self.max_scroll = max_scroll
        self.visible = visible
        self.clipboard: Optional[str] = None
        self.scroll_requests: List[float] = []

    def begin_window(self, spec) -> bool:
        self.calls.append(("begin_window", spec.title))
        return self.visible

    def end_window(self) -> None:
        self.calls.append(("end_window",))

    def text_colored(self, color: Color, text: str) -> None:
        self.lines.append((color, text))

    def button(self, label: str) -> bool:
        self.calls.append(("button", label))
        return label in self.pressed

    def checkbox(self, label: str, value: bool) -> bool:
        self.calls.append(("checkbox", label))
        if label in self.pressed:
            return not value
        return value

    def same_line(self) -> None:
        pass

    def separator(self) -> None:
        self.calls.append(("separator",))

    def open_popup(self, name: str) -> None:
        self.calls.append(("open_popup", name))

    def begin_popup(self, name: str) -> bool:
        return name in self.popups

    def end_popup(self) -> None:
        pass

    def scroll_y(self) -> float:
        return self.scroll

    def scroll_max_y(self) -> float:
        return self.max_scroll

    def set_scroll_here_y(self, ratio: float) -> None:
        self.scroll_requests.append(ratio)

    def set_clipboard_text(self, text: str) -> None:
        self.clipboard = text


class FakeScreen:
    """Just enough of a curses window for CursesUi and FrameLoop."""

    def __init__(self, height: int = 10, width: int = 40, keys: Optional[List[int]] = None) -> None:
        self.height = height
        self.width = width
        self.keys = list(keys or [])
        self.rows: Dict[int, str] = {}
        self.attrs: Dict[int, int] = {}
        self.refreshes = 0

    def getmaxyx(self):
        return self.height, self.width

    def addstr(self, y: int, x: int, text: str, attr: int = 0) -> None:
        if not (0 <= y < self.height) or not (0 <= x < self.width):
            raise curses.error("addwstr() returned ERR")
        row = self.rows.get(y, " " * self.width)
        text = text[: self.width - x]
        self.rows[y] = row[:x] + text + row[x + len(text):]
        self.attrs[y] = attr

    def row(self, y: int) -> str:
        return self.rows.get(y, "").rstrip()

    def getch(self) -> int:
        return self.keys.pop(0) if self.keys else -1

    def erase(self) -> None:
        self.rows = {}
        self.attrs = {}

    def refresh(self) -> None:
        self.refreshes += 1

    def nodelay(self, flag: bool) -> None:
        pass

    def keypad(self, flag: bool) -> None:
        pass


@pytest.fixture
def fake_ui() -> FakeUi:
    return FakeUi()


@pytest.fixture
def counting_stream() -> CountingStream:
    return CountingStream()
