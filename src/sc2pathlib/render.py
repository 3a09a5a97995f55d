# rich-based grid rendering
# src/sc2pathlib/render.py
"""
Terminal rendering of a weighted grid and a path over it, using `rich`.

One character per cell. Rows are drawn from the highest y at the top down to
y = 0, columns from x = 0 on the left:

    #   blocked (weight 0)
    .   weight 1
    2-9 that weight
    +   weight above 9
    *   cell on the path
    S/G start / goal
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence, Tuple

from rich.panel import Panel
from rich.text import Text

from .grid import WeightedGrid
from .pathfinder import PathfindingResult


Coord = Tuple[int, int]

_STYLES = {
    "#": "bold red",
    "*": "bold cyan",
    "S": "bold green",
    "G": "bold magenta",
}


def _cell_char(weight: int) -> str:
    if weight == 0:
        return "#"
    if weight == 1:
        return "."
    if weight <= 9:
        return str(weight)
    return "+"


def render_grid(
    grid: Sequence[Sequence[int]],
    path: Optional[Iterable[Coord]] = None,
    start: Optional[Coord] = None,
    goal: Optional[Coord] = None,
) -> Text:
    """Return a rich Text block drawing grid with an optional path overlay."""
    weighted = WeightedGrid(grid)
    on_path = {tuple(p) for p in path or ()}

    text = Text()
    for y in range(weighted.height - 1, -1, -1):
        for x in range(weighted.width):
            if start is not None and (x, y) == tuple(start):
                ch = "S"
            elif goal is not None and (x, y) == tuple(goal):
                ch = "G"
            elif (x, y) in on_path:
                ch = "*"
            else:
                ch = _cell_char(weighted.weight(x, y))
            text.append(ch, style=_STYLES.get(ch))
        if y > 0:
            text.append("\n")
    return text


def render_result_panel(
    grid: Sequence[Sequence[int]],
    result: PathfindingResult,
    start: Coord,
    goal: Coord,
    title: str = "path",
) -> Panel:
    """Wrap render_grid in a Panel whose subtitle summarizes the result."""
    body = render_grid(grid, result.path, start=start, goal=goal)
    if result.success:
        subtitle = (
            f"cost={result.cost} len={len(result.path)} "
            f"expanded={result.expanded} {result.elapsed_us}µs"
        )
    else:
        subtitle = f"{result.reason} {result.elapsed_us}µs"
    return Panel(body, title=title, subtitle=subtitle, expand=False)
