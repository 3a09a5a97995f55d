# src/sc2pathlib/errors.py
"""
Domain errors for sc2pathlib.

- PathfindingError: base type, carries a stable `code` plus `details`.
- GridError: caller broke a precondition (empty/ragged grid, bad weight,
  start/goal outside the grid). Raised before any search work happens.
- NoPathError: goal unreachable. Only debug_path raises this; find_path
  reports an empty path instead.
- SearchInvariantError: the engine detected corrupt internal state.
- ConfigError: malformed pathing configuration.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class PathfindingError(RuntimeError):
    """Base error for everything raised by sc2pathlib."""

    code: str
    details: Dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, details={self.details!r})"


class GridError(PathfindingError):
    """Precondition violation on the grid or on the start/goal positions."""


class NoPathError(PathfindingError):
    """No path exists between start and goal."""


class SearchInvariantError(PathfindingError):
    """Internal search state is inconsistent (negative cost, broken chain)."""


class ConfigError(PathfindingError):
    """Pathing configuration could not be parsed or validated."""
