# src/app/logging_config.py
"""
Stdout logging for the pathfinding CLI and benchmark runs.

    from app.logging_config import configure_logging
    configure_logging("DEBUG")

Levels come from profiles and the command line as names ("info", "DEBUG");
ints are accepted too. The handler this module installs is tagged with
HANDLER_NAME, so a second call only adjusts the level. A root logger that
already carries someone else's handlers (pytest, a host application) is
left alone.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Optional, Union

HANDLER_NAME = "pathfinding.stdout"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def resolve_level(level: Union[int, str]) -> int:
    """Turn a level name or number into a logging level int."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return value


def _own_handler(root: logging.Logger) -> Optional[logging.Handler]:
    for handler in root.handlers:
        if handler.get_name() == HANDLER_NAME:
            return handler
    return None


def configure_logging(
    level: Union[int, str] = logging.INFO,
    stream: Optional[IO[str]] = None,
) -> bool:
    """
    Attach a stdout handler to the root logger and set its level.

    Returns True if a handler was installed by this call.
    Raises ValueError for an unknown level name.
    """
    resolved = resolve_level(level)
    root = logging.getLogger()

    if _own_handler(root) is not None:
        root.setLevel(resolved)
        return False
    if root.handlers:
        return False

    handler = logging.StreamHandler(stream=stream or sys.stdout)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(resolved)
    return True
