# A* search over any Graph implementation
# src/pathfinding/astar.py
"""
A* search over the Graph capability protocol.

- Frontier ordered by f = g + h, earliest insertion wins ties.
- Cheaper rediscoveries push a fresh entry; stale entries are skipped
  when popped instead of being removed from the heap.
- Goal test happens on extraction, so the returned path is optimal
  whenever costs are non-negative and the heuristic is admissible.

This function does not mutate the graph and keeps no state across calls.
"""

from __future__ import annotations

import logging

from spec.graph import Graph, Number, P
from spec.search import SearchResult

from .errors import GraphContractError
from .frontier import PriorityFrontier
from .ledger import SearchLedger
from .reconstruct import reconstruct_path

logger = logging.getLogger(__name__)

ALGORITHM_NAME = "astar"


def a_star(graph: Graph[P]) -> SearchResult[P]:
    """
    Find a cheapest path from graph.get_start() to a position satisfying
    graph.is_end().

    Returns a SearchResult with:
      - path: start..goal inclusive, or [] when the goal is unreachable
      - found: bool
      - cost: total g of the goal, or None
      - nodes_expanded: number of positions whose neighbors were generated
    """
    start = graph.get_start()

    ledger: SearchLedger[P] = SearchLedger(start=start)
    frontier: PriorityFrontier[P] = PriorityFrontier()
    frontier.push(start, 0, _checked_heuristic(graph, start))

    expanded = 0

    while frontier:
        entry = frontier.pop()
        current, g = entry.position, entry.g

        if ledger.is_stale(current, g):
            continue

        if graph.is_end(current):
            path = reconstruct_path(ledger.predecessors, start, current)
            logger.debug(
                "astar found path positions=%d cost=%s expanded=%d",
                len(path), g, expanded,
            )
            return SearchResult(
                path=path,
                found=True,
                cost=g,
                nodes_expanded=expanded,
                algorithm=ALGORITHM_NAME,
            )

        expanded += 1
        for nxt in graph.neighbors(current):
            candidate = g + _checked_cost(graph, current, nxt)
            if ledger.relax(nxt, candidate, current):
                priority = candidate + _checked_heuristic(graph, nxt)
                frontier.push(nxt, candidate, priority)

    logger.debug("astar exhausted frontier: expanded=%d", expanded)
    return SearchResult(
        path=[],
        found=False,
        nodes_expanded=expanded,
        algorithm=ALGORITHM_NAME,
        reason="no_path_found",
    )


def _checked_cost(graph: Graph[P], a: P, b: P) -> Number:
    cost = graph.cost(a, b)
    if cost < 0:
        raise GraphContractError(
            f"Negative edge cost {cost!r} between {a!r} and {b!r}."
        )
    return cost


def _checked_heuristic(graph: Graph[P], position: P) -> Number:
    h = graph.heuristic(position)
    if h < 0:
        raise GraphContractError(
            f"Negative heuristic {h!r} at {position!r}."
        )
    return h
