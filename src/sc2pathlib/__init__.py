# sc2pathlib package
# src/sc2pathlib/__init__.py
"""
sc2pathlib: A* pathfinding over weighted 2D grids.

Exports:
    - find_path: cheapest path and cost, ([], 0) when unreachable
    - debug_path: one-line timing/path description, raises when unreachable
    - search_grid / PathfindingResult: structured variant used by both
    - WeightedGrid / Position / CostScales: the grid cost model
    - HeuristicMode: TIGHT (find_path) and LOOSE (debug_path) estimates
    - Error types rooted at PathfindingError
"""

from __future__ import annotations

from .config import PathingConfig, get_pathing_config, load_pathing_config
from .errors import (
    ConfigError,
    GridError,
    NoPathError,
    PathfindingError,
    SearchInvariantError,
)
from .grid import DIAGONAL_SCALE, ORTHOGONAL_SCALE, CostScales, Position, WeightedGrid
from .heuristics import HeuristicMode, manhattan
from .pathfinder import PathfindingResult, debug_path, find_path, search_grid

__all__ = [
    "find_path",
    "debug_path",
    "search_grid",
    "PathfindingResult",
    "WeightedGrid",
    "Position",
    "CostScales",
    "ORTHOGONAL_SCALE",
    "DIAGONAL_SCALE",
    "HeuristicMode",
    "manhattan",
    "PathingConfig",
    "get_pathing_config",
    "load_pathing_config",
    "PathfindingError",
    "GridError",
    "NoPathError",
    "SearchInvariantError",
    "ConfigError",
]
