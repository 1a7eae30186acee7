# src/pathfinding/__init__.py
"""
Generic shortest-path search engines.

Provides:
- a_star: heuristic-guided best-first search (cheapest path)
- bfs: breadth-first search (fewest edges)
- reconstruct_path: predecessor-map walk shared by both engines
- SearchTracer: timing + structured logging around search calls

Both engines accept any object satisfying spec.graph.Graph.
"""

from __future__ import annotations

from .astar import a_star
from .bfs import bfs
from .errors import GraphContractError, PathfindingError, PathReconstructionError
from .reconstruct import reconstruct_path
from .tracing import SearchTraceRecord, SearchTracer

ALGORITHMS = {
    "astar": a_star,
    "bfs": bfs,
}

__all__ = [
    "a_star",
    "bfs",
    "reconstruct_path",
    "ALGORITHMS",
    "PathfindingError",
    "GraphContractError",
    "PathReconstructionError",
    "SearchTracer",
    "SearchTraceRecord",
]
