# src/sc2pathlib/heuristics.py
"""
Distance estimates used to order the A* frontier.

Two named modes are kept apart on purpose:

- TIGHT: raw Manhattan distance. Used by find_path.
- LOOSE: Manhattan distance floor-divided by a divisor (3 by default).
  Used by debug_path.

Both are in raw grid units while edge costs are scaled by at least
ORTHOGONAL_SCALE per step, so with the default scales neither overestimates.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Tuple

from .errors import ConfigError


Coord = Tuple[int, int]
HeuristicFn = Callable[[Coord], int]

DEFAULT_LOOSE_DIVISOR = 3


class HeuristicMode(str, Enum):
    TIGHT = "tight"
    LOOSE = "loose"


def manhattan(a: Coord, b: Coord) -> int:
    """|dx| + |dy| between two cells."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def make_heuristic(
    goal: Coord,
    mode: HeuristicMode = HeuristicMode.TIGHT,
    loose_divisor: int = DEFAULT_LOOSE_DIVISOR,
) -> HeuristicFn:
    """Return h(node) estimating the remaining cost from node to goal."""
    try:
        mode = HeuristicMode(mode)
    except ValueError:
        raise ConfigError(code="unknown_heuristic_mode", details={"mode": mode}) from None

    if mode is HeuristicMode.TIGHT:
        return lambda node: manhattan(node, goal)

    if loose_divisor < 1:
        raise ConfigError(
            code="invalid_loose_divisor",
            details={"loose_divisor": loose_divisor},
        )
    return lambda node: manhattan(node, goal) // loose_divisor
