# weighted grid cost model
# src/sc2pathlib/grid.py
"""
WeightedGrid: cost model over a caller-owned 2D weight array.

The grid is indexed grid[x][y]. A weight of 0 blocks the cell; any other
weight multiplies the move cost into that cell.

This module only answers "what can I reach from here, and at what cost".
It does not search. See sc2pathlib.search for the engine.
"""

from __future__ import annotations

import logging
import operator
from dataclasses import dataclass, field
from typing import Iterable, List, NamedTuple, Optional, Sequence, Tuple

from .errors import GridError


log = logging.getLogger(__name__)

# Unit distance 1.0 and sqrt(2) scaled into the integer cost domain.
ORTHOGONAL_SCALE = 10000
DIAGONAL_SCALE = 14142


class Position(NamedTuple):
    """Grid cell identity. Hashable and ordered, usable as a dict key."""

    x: int
    y: int


Successor = Tuple[Position, int]


@dataclass(frozen=True)
class CostScales:
    """Integer multipliers turning a cell weight into a move cost."""

    orthogonal: int = ORTHOGONAL_SCALE
    diagonal: int = DIAGONAL_SCALE


@dataclass
class WeightedGrid:
    """
    Read-only view over a rectangular grid of non-negative integer weights.

    Responsibilities:
    - Validate the grid shape and weights once, up front.
    - Enumerate traversable neighbors of a cell with their move costs.
    - Recompute the cost of a given path independently of any search.

    It does NOT:
    - Mutate the caller's grid. Weights are read once into plain ints,
      so numpy arrays and nested lists behave the same.
    - Remember anything between calls.
    """

    cells: Sequence[Sequence[int]]
    scales: CostScales = field(default_factory=CostScales)

    width: int = field(init=False)
    height: int = field(init=False)
    _weights: Tuple[Tuple[int, ...], ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._weights = _read_weights(self.cells)
        self.width = len(self._weights)
        self.height = len(self._weights[0])

    # ------------------------------------------------------------------
    # Core queries
    # ------------------------------------------------------------------

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def weight(self, x: int, y: int) -> int:
        """Cell weight, or 0 for anything outside the grid."""
        if not self.in_bounds(x, y):
            return 0
        return self._weights[x][y]

    def is_traversable(self, x: int, y: int) -> bool:
        return self.weight(x, y) > 0

    def require_position(self, pos: Iterable[int], role: str) -> Position:
        """
        Coerce pos into a Position and check it lies on the grid.

        Raises GridError(code="invalid_position") for anything that is not a
        pair of integers, GridError(code="out_of_bounds") for an off-grid pair.
        """
        try:
            x, y = pos
            x, y = _as_int(x), _as_int(y)
        except (TypeError, ValueError):
            raise GridError(code="invalid_position", details={"role": role, "position": pos}) from None
        if not self.in_bounds(x, y):
            log.warning("%s %r outside %dx%d grid", role, (x, y), self.width, self.height)
            raise GridError(
                code="out_of_bounds",
                details={
                    "role": role,
                    "position": (x, y),
                    "width": self.width,
                    "height": self.height,
                },
            )
        return Position(x, y)

    def successors(self, pos: Position) -> List[Successor]:
        """
        Return reachable neighbors of pos with their integer move costs.

        Order is fixed: left, left-down, left-up, right, right-down,
        right-up, up, down. A diagonal is only offered when both orthogonal
        cells it passes between are traversable (no corner cutting).
        """
        x, y = pos
        ortho = self.scales.orthogonal
        diag = self.scales.diagonal

        left = self.weight(x - 1, y)
        right = self.weight(x + 1, y)
        up = self.weight(x, y + 1)
        down = self.weight(x, y - 1)

        out: List[Successor] = []

        if left > 0:
            out.append((Position(x - 1, y), left * ortho))
            if down > 0:
                w = self._weights[x - 1][y - 1]
                if w > 0:
                    out.append((Position(x - 1, y - 1), w * diag))
            if up > 0:
                w = self._weights[x - 1][y + 1]
                if w > 0:
                    out.append((Position(x - 1, y + 1), w * diag))

        if right > 0:
            out.append((Position(x + 1, y), right * ortho))
            if down > 0:
                w = self._weights[x + 1][y - 1]
                if w > 0:
                    out.append((Position(x + 1, y - 1), w * diag))
            if up > 0:
                w = self._weights[x + 1][y + 1]
                if w > 0:
                    out.append((Position(x + 1, y + 1), w * diag))

        if up > 0:
            out.append((Position(x, y + 1), up * ortho))

        if down > 0:
            out.append((Position(x, y - 1), down * ortho))

        return out

    # ------------------------------------------------------------------
    # Verification helpers
    # ------------------------------------------------------------------

    def step_cost(self, a: Tuple[int, int], b: Tuple[int, int]) -> Optional[int]:
        """Cost of a single legal move a -> b, or None if the move is illegal."""
        for nxt, cost in self.successors(Position(*a)):
            if nxt == tuple(b):
                return cost
        return None

    def path_cost(self, path: Sequence[Tuple[int, int]]) -> int:
        """
        Sum of move costs along path.

        Raises GridError(code="illegal_step") if two consecutive positions
        are not connected under this cost model.
        """
        total = 0
        for a, b in zip(path, path[1:]):
            cost = self.step_cost(a, b)
            if cost is None:
                raise GridError(
                    code="illegal_step",
                    details={"from": tuple(a), "to": tuple(b)},
                )
            total += cost
        return total


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _as_int(value) -> int:
    """Plain int from any integer-like value (int, numpy integer). Rejects bool."""
    if isinstance(value, bool):
        raise TypeError("bool is not a grid integer")
    return operator.index(value)


def _read_weights(cells: Sequence[Sequence[int]]) -> Tuple[Tuple[int, ...], ...]:
    """Check shape and weights, return them as nested tuples of plain ints."""
    width = len(cells)
    if width == 0 or len(cells[0]) == 0:
        raise GridError(code="empty_grid", details={"width": width})

    height = len(cells[0])
    columns = []
    for x, column in enumerate(cells):
        if len(column) != height:
            raise GridError(
                code="ragged_grid",
                details={"x": x, "expected_height": height, "actual_height": len(column)},
            )
        weights = []
        for y, w in enumerate(column):
            try:
                value = _as_int(w)
            except TypeError:
                value = None
            if value is None or value < 0:
                raise GridError(
                    code="invalid_weight",
                    details={"position": (x, y), "weight": w},
                )
            weights.append(value)
        columns.append(tuple(weights))

    return tuple(columns)
