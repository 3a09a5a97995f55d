# public pathfinding entry points
# src/sc2pathlib/pathfinder.py
"""
Pathfinding over a weighted grid.

Public surface:
    find_path(grid, start, goal) -> (path, cost)
    debug_path(grid, start_x, start_y, x, y) -> str
    search_grid(grid, start, goal, mode=...) -> PathfindingResult

find_path uses the TIGHT heuristic and reports an unreachable goal as an
empty path with cost 0. debug_path uses the LOOSE heuristic, times the
search and raises NoPathError when the goal is unreachable.

These functions never mutate the grid and keep no state between calls.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from time import perf_counter
from typing import List, Optional, Sequence, Tuple

from .config import PathingConfig, get_pathing_config
from .errors import NoPathError
from .grid import WeightedGrid
from .heuristics import HeuristicMode, make_heuristic
from .search import astar


log = logging.getLogger(__name__)

Coord = Tuple[int, int]
GridCells = Sequence[Sequence[int]]


@dataclass
class PathfindingResult:
    """Structured result for a pathfinding attempt."""

    path: List[Coord]
    cost: int
    success: bool
    reason: Optional[str] = None
    expanded: Optional[int] = None
    elapsed_us: int = 0


def search_grid(
    grid: GridCells,
    start: Coord,
    goal: Coord,
    mode: HeuristicMode = HeuristicMode.TIGHT,
    config: Optional[PathingConfig] = None,
) -> PathfindingResult:
    """
    A* search for a path from start to goal on grid.

    Returns a PathfindingResult with:
      - path: start..goal inclusive, or [] when unreachable
      - cost: total integer cost (0 when unreachable)
      - success / reason
      - expanded: settled node count (successful searches only)
      - elapsed_us: wall-clock time spent searching, in microseconds

    Raises GridError if the grid is malformed or start/goal are off-grid.
    """
    config = config or get_pathing_config()
    weighted = WeightedGrid(grid, scales=config.scales)
    start_pos = weighted.require_position(start, "start")
    goal_pos = weighted.require_position(goal, "goal")
    heuristic = make_heuristic(goal_pos, mode, config.loose_divisor)

    log.debug(
        "search %r -> %r on %dx%d grid (heuristic=%s)",
        start_pos, goal_pos, weighted.width, weighted.height, mode,
    )

    began = perf_counter()
    outcome = astar(
        start_pos,
        weighted.successors,
        heuristic,
        lambda node: node == goal_pos,
    )
    elapsed_us = int((perf_counter() - began) * 1_000_000)

    if outcome is None:
        return PathfindingResult(
            path=[],
            cost=0,
            success=False,
            reason="no_path_found",
            elapsed_us=elapsed_us,
        )

    return PathfindingResult(
        path=[(p.x, p.y) for p in outcome.path],
        cost=outcome.cost,
        success=True,
        expanded=outcome.expanded,
        elapsed_us=elapsed_us,
    )


def find_path(
    grid: GridCells,
    start: Coord,
    goal: Coord,
    *,
    config: Optional[PathingConfig] = None,
) -> Tuple[List[Coord], int]:
    """
    Find the cheapest path and return (path, total_cost).

    An unreachable goal gives ([], 0). start == goal gives ([start], 0),
    so an empty path always means failure.
    """
    result = search_grid(grid, start, goal, HeuristicMode.TIGHT, config)
    if not result.success:
        log.info("No path from %r to %r", tuple(start), tuple(goal))
    return result.path, result.cost


def debug_path(
    grid: GridCells,
    start_x: int,
    start_y: int,
    x: int,
    y: int,
    *,
    config: Optional[PathingConfig] = None,
) -> str:
    """
    Search with the LOOSE heuristic and describe the outcome as one line.

    Raises NoPathError when the goal cannot be reached.
    """
    start = (start_x, start_y)
    goal = (x, y)
    result = search_grid(grid, start, goal, HeuristicMode.LOOSE, config)
    if not result.success:
        log.warning("debug_path: no path from %r to %r", start, goal)
        raise NoPathError(
            code="no_path_found",
            details={"start": start, "goal": goal, "elapsed_us": result.elapsed_us},
        )
    return format_debug_line(result, start, goal)


def format_debug_line(result: PathfindingResult, start: Coord, goal: Coord) -> str:
    """
    Render a result as:

        time taken: {us}µs len: {N} distance: {D} start: {sx},{sy} goal: {gx},{gy} Path: {x,y x,y ... }

    Every coordinate pair in the path is followed by a single space.
    """
    path_text = "".join(f"{px},{py} " for px, py in result.path)
    return (
        f"time taken: {result.elapsed_us}µs len: {len(result.path)} "
        f"distance: {result.cost} start: {start[0]},{start[1]} "
        f"goal: {goal[0]},{goal[1]} Path: {path_text}"
    )
