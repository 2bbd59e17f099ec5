"""Tests for the LogView drawing routine."""

from conftest import FakeUi

from framelog.sink.buffer import LogBuffer
from framelog.sink.model import Color, Entry
from framelog.ui.views import LogView, WindowSpec

RED = Color(1.0, 0.0, 0.0, 1.0)
WHITE = Color(1.0, 1.0, 1.0, 1.0)
WINDOW = WindowSpec(title="My Log")


def filled_buffer(*texts: str) -> LogBuffer:
    buf = LogBuffer(capacity=10)
    for i, text in enumerate(texts):
        buf.append(Entry(text, RED if i % 2 else WHITE))
    return buf


def test_draws_one_colored_line_per_entry_in_order(fake_ui):
    view = LogView(filled_buffer("a", "b", "c"))
    view.build(fake_ui, WINDOW)
    assert fake_ui.lines == [(WHITE, "a"), (RED, "b"), (WHITE, "c")]
    assert fake_ui.calls[0] == ("begin_window", "My Log")
    assert fake_ui.calls[-1] == ("end_window",)


def test_follows_newest_line_when_at_bottom():
    ui = FakeUi(scroll=120.0, max_scroll=120.0)
    LogView(filled_buffer("a")).build(ui, WINDOW)
    assert ui.scroll_requests == [1.0]


def test_keeps_position_when_user_scrolled_up():
    ui = FakeUi(scroll=40.0, max_scroll=120.0)
    LogView(filled_buffer("a")).build(ui, WINDOW)
    assert ui.scroll_requests == []


def test_autoscroll_overrides_user_position():
    ui = FakeUi(scroll=40.0, max_scroll=120.0)
    view = LogView(filled_buffer("a"))
    view.autoscroll = True
    view.build(ui, WINDOW)
    assert ui.scroll_requests == [1.0]


def test_hidden_window_draws_nothing_but_is_closed():
    ui = FakeUi(visible=False)
    LogView(filled_buffer("a", "b")).build(ui, WINDOW)
    assert ui.lines == []
    assert ui.calls == [("begin_window", "My Log"), ("end_window",)]


def test_drawing_does_not_touch_the_buffer(fake_ui):
    buf = filled_buffer("a", "b")
    before = buf.snapshot_with_count()
    LogView(buf).build(fake_ui, WINDOW)
    assert buf.snapshot_with_count() == before


def test_clear_button_hides_existing_lines_only():
    buf = filled_buffer("a", "b")
    view = LogView(buf)

    ui = FakeUi()
    ui.pressed.add("Clear")
    view.build(ui, WINDOW)
    assert ui.lines == []
    assert len(buf) == 2

    buf.append(Entry("c", WHITE))
    ui = FakeUi()
    view.build(ui, WINDOW)
    assert [text for _, text in ui.lines] == ["c"]


def test_clear_after_eviction():
    buf = LogBuffer(capacity=2)
    view = LogView(buf)
    buf.append(Entry("a", WHITE))
    view.clear()
    for text in "bcd":
        buf.append(Entry(text, WHITE))
    # Three appended since the clear, but only two retained
    assert [e.text for e in view.visible_entries()] == ["c", "d"]


def test_copy_button_puts_visible_lines_on_clipboard():
    ui = FakeUi()
    ui.pressed.add("Copy")
    LogView(filled_buffer("first", "second")).build(ui, WINDOW)
    assert ui.clipboard == "first\nsecond"


def test_options_popup_toggles_autoscroll():
    view = LogView(filled_buffer())

    ui = FakeUi()
    ui.pressed.add("Options")
    view.build(ui, WINDOW)
    assert ("open_popup", "Options") in ui.calls

    ui = FakeUi()
    ui.popups.add("Options")
    ui.pressed.add("Auto-scroll")
    view.build(ui, WINDOW)
    assert view.autoscroll is True
