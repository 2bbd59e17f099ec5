"""
Installing the sink and the handle returned to the application.

The stdlib logging module dispatches to handlers on the root logger, so
the sink is process-wide: it is installed once and stays until exit.
The LogHandle returned by init() is how the application reaches the
buffer and draws it; nothing needs to look the handler up globally.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional, Tuple

from .config import LoggerConfig
from .errors import SinkAlreadyInstalledError
from .sink.handler import BufferHandler
from .sink.model import Entry, Level
from .ui.views import LogView, UiContext, WindowSpec

log = logging.getLogger(__name__)

_install_lock = threading.Lock()
# The handler attached to the root logger, once init has run
_installed: Optional[BufferHandler] = None


class LogHandle:
    """
    Application-side access to an installed sink.

    Attributes:
        handler: The BufferHandler attached to the root logger.
        config: Configuration the sink was installed with.
        buffer: The shared LogBuffer.
        view: Drawing state for this sink's window.
    """

    def __init__(self, handler: BufferHandler) -> None:
        self.handler = handler
        self.config = handler.config
        self.buffer = handler.buffer
        self.view = LogView(self.buffer)

    def draw(self, ui: UiContext, window: WindowSpec) -> None:
        """Draw the log into ``window``. Call once per rendered frame."""
        self.view.build(ui, window)

    def snapshot(self) -> Tuple[Entry, ...]:
        return self.buffer.snapshot()

    def clear(self) -> None:
        """Empty the buffer."""
        self.buffer.clear()


def set_logger(handler: BufferHandler) -> None:
    """Attach ``handler`` to the root logger and apply its level threshold."""
    logging.addLevelName(Level.TRACE, "TRACE")
    root = logging.getLogger()
    root.addHandler(handler)
    root.setLevel(handler.config.max_level)


def installed_handler() -> Optional[BufferHandler]:
    return _installed


def init_with_config(config: LoggerConfig) -> LogHandle:
    """
    Install the log window sink with ``config``.

    Returns:
        LogHandle: Handle used to draw the log each frame.

    Raises:
        SinkAlreadyInstalledError: If a sink is already installed. The
            existing sink stays active and keeps its history.
    """
    global _installed

    with _install_lock:
        if _installed is not None:
            raise SinkAlreadyInstalledError("framelog sink is already installed")

        log.debug(
            "installing framelog sink (capacity=%d, stdout=%s, level=%s)",
            config.buffer_capacity,
            config.mirror_to_secondary_output,
            config.max_level.name,
        )
        handler = BufferHandler(config)
        set_logger(handler)
        _installed = handler

    return LogHandle(handler)


def init() -> LogHandle:
    """Install the sink with the default config plus any FRAMELOG_* overrides."""
    return init_with_config(LoggerConfig.from_env())
