"""
framelog - an in-process log window for frame-rendered applications.

This package installs a logging.Handler that keeps a bounded, color-coded
history of log lines and draws it into an immediate-mode window once per
frame. Games, simulations and terminal dashboards get a live log view
without leaving the application.

Package Structure:
    - sink/: record formatting, colors, the bounded buffer and the handler
    - ui/: the drawing routine, the scheduled system and a curses backend
    - config.py: LoggerConfig, the immutable sink configuration
    - logger.py: init() / init_with_config() and the LogHandle
    - cli.py: ``python -m framelog demo``

Usage:
    handle = framelog.init()

    # render loop
    while running:
        logging.info("Hello World")
        handle.draw(ui, framelog.WindowSpec(title="My Log"))

Configuring:
    framelog.init_with_config(
        framelog.LoggerConfig.default()
        .stdout(False)
        .colors(framelog.LogColors(
            trace=(1, 1, 1, 1),
            debug=(1, 1, 1, 1),
            info=(1, 1, 1, 1),
            warn=(1, 1, 1, 1),
            error=(1, 1, 1, 1),
        ))
    )
"""

from .config import LoggerConfig
from .errors import ConfigurationError, FramelogError, SinkAlreadyInstalledError
from .logger import LogHandle, init, init_with_config
from .sink.buffer import DEFAULT_BUFFER_CAPACITY, LogBuffer
from .sink.colors import LogColors, color_for
from .sink.formatter import DEFAULT_TEMPLATE, format_record
from .sink.handler import BufferHandler
from .sink.model import Color, Entry, Level, Record
from .ui.system import LogSystem, create_system, create_system_with_config
from .ui.views import LogView, UiContext, WindowSpec

__all__ = [
    "BufferHandler",
    "Color",
    "ConfigurationError",
    "DEFAULT_BUFFER_CAPACITY",
    "DEFAULT_TEMPLATE",
    "Entry",
    "FramelogError",
    "Level",
    "LogBuffer",
    "LogColors",
    "LogHandle",
    "LogSystem",
    "LogView",
    "LoggerConfig",
    "Record",
    "SinkAlreadyInstalledError",
    "UiContext",
    "WindowSpec",
    "color_for",
    "create_system",
    "create_system_with_config",
    "format_record",
    "init",
    "init_with_config",
]
