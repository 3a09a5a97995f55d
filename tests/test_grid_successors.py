# tests/test_grid_successors.py
"""
Unit tests for WeightedGrid neighbor generation.

Covers:
- Enumeration order and orthogonal/diagonal costs
- Bounds handling at edges and corners
- No corner cutting past blocked orthogonal cells
- Grid validation and position checks
- Independent path cost recomputation
"""

from __future__ import annotations

import pytest

from sc2pathlib.errors import GridError
from sc2pathlib.grid import CostScales, Position, WeightedGrid


OPEN_3X3 = [[1, 1, 1], [1, 1, 1], [1, 1, 1]]


def test_center_of_open_grid_has_eight_neighbors_in_fixed_order() -> None:
    grid = WeightedGrid(OPEN_3X3)

    assert grid.successors(Position(1, 1)) == [
        (Position(0, 1), 10000),  # left
        (Position(0, 0), 14142),  # left-down
        (Position(0, 2), 14142),  # left-up
        (Position(2, 1), 10000),  # right
        (Position(2, 0), 14142),  # right-down
        (Position(2, 2), 14142),  # right-up
        (Position(1, 2), 10000),  # up
        (Position(1, 0), 10000),  # down
    ]


def test_corner_only_offers_in_bounds_neighbors() -> None:
    grid = WeightedGrid(OPEN_3X3)

    assert grid.successors(Position(0, 0)) == [
        (Position(1, 0), 10000),
        (Position(1, 1), 14142),
        (Position(0, 1), 10000),
    ]
    assert grid.successors(Position(2, 2)) == [
        (Position(1, 2), 10000),
        (Position(1, 1), 14142),
        (Position(2, 1), 10000),
    ]


def test_cost_uses_destination_weight() -> None:
    # grid[x][y]: (0,0)=1 (0,1)=3 (1,0)=2 (1,1)=5
    grid = WeightedGrid([[1, 3], [2, 5]])

    assert grid.successors(Position(0, 0)) == [
        (Position(1, 0), 2 * 10000),
        (Position(1, 1), 5 * 14142),
        (Position(0, 1), 3 * 10000),
    ]


def test_blocked_cells_are_never_offered() -> None:
    grid = WeightedGrid([[1, 1, 1], [1, 0, 1], [1, 1, 1]])

    neighbors = [pos for pos, _ in grid.successors(Position(0, 0))]

    assert Position(1, 1) not in neighbors
    assert neighbors == [Position(1, 0), Position(0, 1)]


def test_diagonal_requires_both_flanking_cells() -> None:
    # Right neighbor (1,0) blocked: no right move and no right-up diagonal.
    right_blocked = WeightedGrid([[1, 1], [0, 1]])
    assert right_blocked.successors(Position(0, 0)) == [(Position(0, 1), 10000)]

    # Up neighbor (0,1) blocked: no up move and no right-up diagonal.
    up_blocked = WeightedGrid([[1, 0], [1, 1]])
    assert up_blocked.successors(Position(0, 0)) == [(Position(1, 0), 10000)]

    # Both flanks blocked: the diagonal cell is unreachable in one step.
    both_blocked = WeightedGrid([[1, 0], [0, 1]])
    assert both_blocked.successors(Position(0, 0)) == []


def test_blocked_origin_still_enumerates_neighbors() -> None:
    grid = WeightedGrid([[0, 1], [1, 1]])

    assert [pos for pos, _ in grid.successors(Position(0, 0))] == [
        Position(1, 0),
        Position(1, 1),
        Position(0, 1),
    ]


def test_custom_scales_are_applied() -> None:
    grid = WeightedGrid(OPEN_3X3, scales=CostScales(orthogonal=2, diagonal=3))

    costs = dict(grid.successors(Position(1, 1)))

    assert costs[Position(0, 1)] == 2
    assert costs[Position(0, 0)] == 3


def test_non_square_grid_dimensions() -> None:
    grid = WeightedGrid([[1, 1, 1], [1, 1, 1]])

    assert (grid.width, grid.height) == (2, 3)
    assert grid.in_bounds(1, 2)
    assert not grid.in_bounds(2, 0)
    assert not grid.in_bounds(0, 3)


@pytest.mark.parametrize(
    "cells, code",
    [
        ([], "empty_grid"),
        ([[]], "empty_grid"),
        ([[1, 1], [1]], "ragged_grid"),
        ([[1, -1]], "invalid_weight"),
        ([[1, 1.5]], "invalid_weight"),
        ([[1, True]], "invalid_weight"),
    ],
)
def test_invalid_grids_raise_grid_error(cells, code) -> None:
    with pytest.raises(GridError) as excinfo:
        WeightedGrid(cells)
    assert excinfo.value.code == code


def test_require_position_checks_bounds() -> None:
    grid = WeightedGrid(OPEN_3X3)

    assert grid.require_position((2, 0), "start") == Position(2, 0)

    for bad in [(3, 0), (0, 3), (-1, 0)]:
        with pytest.raises(GridError) as excinfo:
            grid.require_position(bad, "goal")
        assert excinfo.value.code == "out_of_bounds"
        assert excinfo.value.details["role"] == "goal"

    with pytest.raises(GridError) as excinfo:
        grid.require_position((0.5, 1), "start")
    assert excinfo.value.code == "invalid_position"

    for bad in [(1,), (1, 2, 3), 7, None, (True, 0)]:
        with pytest.raises(GridError) as excinfo:
            grid.require_position(bad, "start")
        assert excinfo.value.code == "invalid_position"
        assert excinfo.value.details["role"] == "start"


def test_path_cost_sums_steps_and_rejects_illegal_moves() -> None:
    grid = WeightedGrid([[1, 2, 1], [1, 1, 3], [1, 1, 1]])

    assert grid.step_cost((0, 0), (1, 1)) == 14142
    assert grid.step_cost((0, 0), (0, 1)) == 20000
    assert grid.step_cost((0, 0), (2, 2)) is None

    assert grid.path_cost([(0, 0), (1, 1), (1, 2)]) == 14142 + 30000
    assert grid.path_cost([(1, 1)]) == 0

    with pytest.raises(GridError) as excinfo:
        grid.path_cost([(0, 0), (2, 0)])
    assert excinfo.value.code == "illegal_step"


def test_position_is_a_hashable_ordered_value() -> None:
    assert Position(1, 2) == (1, 2)
    assert Position(0, 5) < Position(1, 0)
    assert {Position(1, 1): "a"}[(1, 1)] == "a"
