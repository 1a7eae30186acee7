# src/pathfinding/bfs.py
"""
Breadth-first search over the Graph capability protocol.

Same loop shape as A*, but with a FIFO frontier, no heuristic and no
re-relaxation: a position keeps the route it was first discovered by.
The result is a fewest-edges path; its cost is only minimal when every
edge costs the same.
"""

from __future__ import annotations

import logging

from spec.graph import Graph, P
from spec.search import SearchResult

from .frontier import FifoFrontier
from .ledger import SearchLedger
from .reconstruct import reconstruct_path

logger = logging.getLogger(__name__)

ALGORITHM_NAME = "bfs"


def bfs(graph: Graph[P]) -> SearchResult[P]:
    """Find a minimum-edge-count path from start to a goal position."""
    start = graph.get_start()

    ledger: SearchLedger[P] = SearchLedger(start=start)
    frontier: FifoFrontier[P] = FifoFrontier()
    frontier.push(start, 0)

    expanded = 0

    while frontier:
        entry = frontier.pop()
        current, g = entry.position, entry.g

        if graph.is_end(current):
            path = reconstruct_path(ledger.predecessors, start, current)
            logger.debug(
                "bfs found path positions=%d cost=%s expanded=%d",
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
            if nxt in frontier:
                continue
            g_next = g + graph.cost(current, nxt)
            ledger.discover(nxt, g_next, current)
            frontier.push(nxt, g_next)

    logger.debug("bfs exhausted frontier: expanded=%d", expanded)
    return SearchResult(
        path=[],
        found=False,
        nodes_expanded=expanded,
        algorithm=ALGORITHM_NAME,
        reason="no_path_found",
    )
