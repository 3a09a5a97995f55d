# src/sc2pathlib/logging_config.py
"""
Logging setup for scripts that drive sc2pathlib.

The library only creates module loggers (sc2pathlib.search,
sc2pathlib.pathfinder, ...). Entry scripts opt in to output once:

    from sc2pathlib.logging_config import configure_logging
    configure_logging("DEBUG")

DEBUG shows per-search expansion counts; INFO shows unreachable goals.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Optional, Union


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def resolve_level(level: Union[int, str]) -> int:
    """Accept a logging level as int or name ("debug", "INFO"); unknown names map to INFO."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(
    level: Union[int, str] = logging.INFO,
    stream: Optional[IO[str]] = None,
) -> logging.Handler | None:
    """
    Attach one stream handler to the root logger unless it already has one.

    Returns the new handler, or None when logging was configured elsewhere.
    """
    root = logging.getLogger()
    if root.handlers:
        return None

    handler = logging.StreamHandler(stream=stream or sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(resolve_level(level))
    return handler
