"""
Scheduler-driven log window.

Instead of calling ``handle.draw(...)`` from its own render code, an
application can register a LogSystem with its frame loop (see loop.py).
The system owns its window and draws it each time it is run.
"""

from __future__ import annotations

from typing import Callable, Optional

from ..config import LoggerConfig
from ..logger import LogHandle, init_with_config
from .views import UiContext, WindowSpec

UiSource = Callable[[], Optional[UiContext]]


class LogSystem:
    """
    Draws a LogHandle's window once per scheduler tick.

    Attributes:
        handle: The installed sink to display.
        window: The window this system owns.
        ui_source: Fallback provider of the current frame's UI, for
            schedulers that call run() without arguments.
        open: When False, run() draws nothing.
    """

    def __init__(
        self,
        handle: LogHandle,
        window: Optional[WindowSpec] = None,
        ui_source: Optional[UiSource] = None,
    ) -> None:
        self.handle = handle
        self.window = window or WindowSpec(title="Console Log")
        self.ui_source = ui_source
        self.open = True

    def run(self, ui: Optional[UiContext] = None) -> None:
        """Draw the window with ``ui``, or with the ui_source's current UI."""
        if not self.open:
            return
        if ui is None and self.ui_source is not None:
            ui = self.ui_source()
        # Outside a frame there is nothing to draw into
        if ui is None:
            return
        self.handle.draw(ui, self.window)

    def toggle(self) -> None:
        self.open = not self.open


def create_system_with_config(
    config: LoggerConfig,
    window: Optional[WindowSpec] = None,
    ui_source: Optional[UiSource] = None,
) -> LogSystem:
    """Install the sink with ``config`` and wrap it in a LogSystem."""
    return LogSystem(init_with_config(config), window=window, ui_source=ui_source)


def create_system(
    window: Optional[WindowSpec] = None,
    ui_source: Optional[UiSource] = None,
) -> LogSystem:
    """Install the sink with the default config and wrap it in a LogSystem."""
    return create_system_with_config(LoggerConfig.default(), window=window, ui_source=ui_source)
