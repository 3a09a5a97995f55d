#!/usr/bin/env python3
"""
tools/smoke_pathfinding.py

Minimal harness to sanity-check sc2pathlib on synthetic grids.

Builds an in-memory grid, then calls:
    - find_path()   (tight heuristic, empty path on failure)
    - debug_path()  (loose heuristic, raises on failure)
and draws the resulting path with rich.

Example:
    python tools/smoke_pathfinding.py --layout wall --size 12 --log-level DEBUG
"""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path
from typing import List

# ---------------------------------------------------------------------------
# Ensure src/ is on sys.path when running as a script
# ---------------------------------------------------------------------------

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from rich.console import Console  # noqa: E402

from sc2pathlib import NoPathError, debug_path, find_path  # type: ignore[import]  # noqa: E402
from sc2pathlib.logging_config import configure_logging  # type: ignore[import]  # noqa: E402
from sc2pathlib.pathfinder import search_grid  # type: ignore[import]  # noqa: E402
from sc2pathlib.render import render_result_panel  # type: ignore[import]  # noqa: E402


LAYOUTS = ("open", "wall", "ring", "center", "weighted")


# ---------------------------------------------------------------------------
# Synthetic grids, indexed grid[x][y]
# ---------------------------------------------------------------------------


def build_grid(layout: str, size: int, seed: int) -> List[List[int]]:
    grid = [[1] * size for _ in range(size)]
    mid = size // 2

    if layout == "wall":
        # Vertical wall at x = mid with a single gap at the top row.
        for y in range(size - 1):
            grid[mid][y] = 0
    elif layout == "ring":
        # Goal corner sealed off by a ring of blocked cells.
        for i in range(size - 3, size):
            grid[size - 3][i] = 0
            grid[i][size - 3] = 0
    elif layout == "center":
        grid[mid][mid] = 0
    elif layout == "weighted":
        rng = random.Random(seed)
        for x in range(size):
            for y in range(size):
                grid[x][y] = rng.choice((0, 1, 1, 1, 2, 3, 5))
        grid[0][0] = 1
        grid[size - 1][size - 1] = 1

    return grid


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Smoke test harness for sc2pathlib find_path/debug_path",
    )
    parser.add_argument("--layout", choices=LAYOUTS, default="open")
    parser.add_argument("--size", type=int, default=10, help="Grid edge length (>= 4)")
    parser.add_argument("--seed", type=int, default=0, help="Seed for the weighted layout")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    args = parser.parse_args(argv)

    if args.size < 4:
        parser.error("--size must be at least 4")

    configure_logging(args.log_level)
    console = Console()

    grid = build_grid(args.layout, args.size, args.seed)
    start = (0, 0)
    goal = (args.size - 1, args.size - 1)

    path, cost = find_path(grid, start, goal)
    console.print(f"find_path: len={len(path)} cost={cost}")

    result = search_grid(grid, start, goal)
    console.print(render_result_panel(grid, result, start, goal, title=f"{args.layout} {args.size}x{args.size}"))

    try:
        console.print(debug_path(grid, start[0], start[1], goal[0], goal[1]))
    except NoPathError as exc:
        console.print(f"[red]debug_path failed:[/red] {exc}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
