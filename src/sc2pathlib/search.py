# generic A* search engine
# src/sc2pathlib/search.py
"""
Generic A* over any hashable, orderable node type.

The engine knows nothing about grids. Callers plug in:
- successors(node) -> iterable of (neighbor, edge_cost)
- heuristic(node)  -> integer estimate of remaining cost
- is_goal(node)    -> bool

Frontier ordering is (g + h, -g, node): lowest estimate first, deeper nodes
first on ties, then node ordering. Results are reproducible run to run.
"""

from __future__ import annotations

import heapq
import logging
from dataclasses import dataclass
from typing import Callable, Dict, Generic, Hashable, Iterable, List, Optional, Tuple, TypeVar

from .errors import SearchInvariantError


log = logging.getLogger(__name__)

N = TypeVar("N", bound=Hashable)


@dataclass
class SearchOutcome(Generic[N]):
    """Successful search: path start->goal inclusive and its total cost."""

    path: List[N]
    cost: int
    expanded: int


def astar(
    start: N,
    successors: Callable[[N], Iterable[Tuple[N, int]]],
    heuristic: Callable[[N], int],
    is_goal: Callable[[N], bool],
) -> Optional[SearchOutcome[N]]:
    """
    Best-first search for a minimum-cost path from start to a goal node.

    Returns None when the frontier empties without settling a goal.
    Optimal whenever heuristic never overestimates.
    """
    open_heap: List[Tuple[int, int, N]] = []
    heapq.heappush(open_heap, (heuristic(start), 0, start))

    came_from: Dict[N, N] = {}
    g_score: Dict[N, int] = {start: 0}
    expanded = 0

    while open_heap:
        _, neg_g, current = heapq.heappop(open_heap)
        g_current = -neg_g

        # Skip stale entries superseded by a cheaper push.
        if g_current > g_score[current]:
            continue

        expanded += 1

        if is_goal(current):
            path = _reconstruct_path(came_from, current, start)
            log.debug("astar settled goal %r cost=%d expanded=%d", current, g_current, expanded)
            return SearchOutcome(path=path, cost=g_current, expanded=expanded)

        for nxt, edge_cost in successors(current):
            if edge_cost < 0:
                raise SearchInvariantError(
                    code="negative_edge_cost",
                    details={"from": current, "to": nxt, "cost": edge_cost},
                )

            tentative_g = g_current + edge_cost
            if tentative_g < g_score.get(nxt, tentative_g + 1):
                came_from[nxt] = current
                g_score[nxt] = tentative_g
                f_score = tentative_g + heuristic(nxt)
                heapq.heappush(open_heap, (f_score, -tentative_g, nxt))

    log.debug("astar exhausted frontier from %r after %d expansions", start, expanded)
    return None


def _reconstruct_path(came_from: Dict[N, N], current: N, start: N) -> List[N]:
    """Walk predecessor links back to start, then reverse."""
    path: List[N] = [current]
    # Every node appears at most once on a valid chain.
    limit = len(came_from) + 1
    while current != start:
        if current not in came_from or len(path) > limit:
            raise SearchInvariantError(
                code="broken_predecessor_chain",
                details={"at": current, "start": start, "length": len(path)},
            )
        current = came_from[current]
        path.append(current)
    path.reverse()
    return path
