"""
framelog command-line interface.

The only command is a demo: a terminal log window fed by a background
thread that logs a steady stream of nonsense at every level. It shows the
sink, the buffer and the curses renderer working together, and doubles as
a template for wiring framelog into a real frame loop.

Usage:
    python -m framelog demo [--stdout] [--capacity N] [--fps N] [--rate N]

Keys:
    q          quit
    l          show/hide the log window
    o / c / p  Options (auto-scroll), Clear, Copy
    arrows, PgUp/PgDn, Home/End   scroll
"""

import argparse
import curses
import logging
import threading
import time
from typing import Optional, Sequence

from .config import LoggerConfig
from .errors import ConfigurationError
from .sink.model import Level
from .ui.loop import FrameLoop
from .ui.system import create_system_with_config
from .ui.views import WindowSpec
from .utils.env import load_dotenv

DEMO_LEVELS = [Level.TRACE, Level.DEBUG, Level.INFO, Level.WARN, Level.ERROR]

DEMO_WORDS = [
    "Bumfuzzled",
    "Cattywampus",
    "Snickersnee",
    "Abibliophobia",
    "Absquatulate",
    "Nincompoop",
    "Pauciloquent",
]


def log_junk(logger: logging.Logger, i: int) -> None:
    """Log the i-th demo message; the level changes every 10 messages."""
    level = DEMO_LEVELS[(i // 10) % len(DEMO_LEVELS)]
    logger.log(level, "Hello, here's a word: '%s'", DEMO_WORDS[i % len(DEMO_WORDS)])


def spam_loop(stop: threading.Event, rate: float) -> None:
    """Background thread: log ``rate`` demo messages per second until stopped."""
    logger = logging.getLogger("framelog.demo")
    delay = 1.0 / rate if rate > 0 else 0.0
    i = 0
    while not stop.is_set():
        log_junk(logger, i)
        i += 1
        time.sleep(delay)


def demo_config(args: argparse.Namespace) -> LoggerConfig:
    """Apply command-line overrides on top of the environment config."""
    config = LoggerConfig.from_env().stdout(args.stdout).level(Level.TRACE)
    if args.capacity is not None:
        config = config.capacity(args.capacity)
    return config


def run_demo(args: argparse.Namespace) -> None:
    config = demo_config(args)
    system = create_system_with_config(
        config,
        window=WindowSpec(title="Console Log - q quit, l hide"),
    )

    stop = threading.Event()
    # Daemon so a crash in the UI never leaves the process hanging
    thread = threading.Thread(target=spam_loop, args=(stop, args.rate), daemon=True)

    def _ui(stdscr) -> None:
        loop = FrameLoop(stdscr, fps=args.fps)
        loop.add(system)
        loop.bind("l", system.toggle)
        thread.start()
        loop.run()

    try:
        curses.wrapper(_ui)
    except KeyboardInterrupt:
        pass
    finally:
        stop.set()

    print("[framelog] Demo stopped")
    print(f"  lines logged:   {system.handle.buffer.appended}")
    print(f"  lines retained: {len(system.handle.buffer)}")


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argument parser.

    Returns:
        argparse.ArgumentParser: Configured parser ready to parse sys.argv.
    """
    parser = argparse.ArgumentParser(
        prog="framelog",
        description="In-process, frame-rendered log window.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    demo_parser = subparsers.add_parser("demo", help="Run the terminal log window demo")
    demo_parser.add_argument(
        "--stdout",
        action="store_true",
        help="Also mirror log lines to stdout (garbles the curses screen)",
    )
    demo_parser.add_argument("--capacity", type=int, default=None, help="Lines kept in the window")
    demo_parser.add_argument("--fps", type=float, default=20.0, help="Frames per second")
    demo_parser.add_argument("--rate", type=float, default=50.0, help="Demo messages per second")
    demo_parser.set_defaults(func=run_demo)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for ``python -m framelog``."""
    load_dotenv(".env")
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        args.func(args)
    except ConfigurationError as exc:
        print(f"[framelog] Configuration error: {exc}")
        return 2
    return 0
