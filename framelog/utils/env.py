"""
Environment helpers for configuration.

framelog reads a handful of FRAMELOG_* variables (see config.py). This
module holds the small amount of plumbing around that: loading a .env
file into os.environ and turning variable text into typed values.

Note:
    .env loading is implemented here rather than through python-dotenv to
    avoid an external dependency for a simple feature.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import MutableMapping, Optional, Union

from ..errors import ConfigurationError

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off"}


def load_dotenv(
    path: Union[str, Path] = ".env",
    environ: Optional[MutableMapping[str, str]] = None,
) -> int:
    """
    Load KEY=VALUE lines from ``path`` into the environment.

    Existing variables win (setdefault), blank lines and ``#`` comments are
    skipped, and lines without ``=`` are ignored. A missing file is not an
    error since the file is optional.

    Args:
        path: Location of the .env file.
        environ: Mapping to update; defaults to ``os.environ``.

    Returns:
        int: Number of lines that were parsed as assignments.
    """
    target = os.environ if environ is None else environ
    env_path = Path(path)

    if not env_path.exists():
        return 0

    count = 0
    with env_path.open("r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            # Skip empty lines and comments
            if not line or line.startswith("#"):
                continue
            # Skip malformed lines (no = sign)
            if "=" not in line:
                continue
            # Split on first = only (value might contain =)
            key, value = line.split("=", 1)
            target.setdefault(key.strip(), value.strip())
            count += 1

    return count


def parse_bool(value: str, name: str) -> bool:
    """Parse an on/off style variable, raising ConfigurationError otherwise."""
    text = value.strip().lower()
    if text in TRUE_VALUES:
        return True
    if text in FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name}: expected a boolean, got {value!r}")


def parse_int(value: str, name: str) -> int:
    try:
        return int(value.strip())
    except ValueError as exc:
        raise ConfigurationError(f"{name}: expected an integer, got {value!r}") from exc
