# src/pathfinding/tracing.py
"""
Tracing for search runs.

A thin, structured logging layer around individual a_star / bfs calls so
that harnesses (benchmarks, the CLI) get consistent per-run records.

It does NOT:
- Change search behaviour
- Keep any state inside the engines themselves
"""

from __future__ import annotations

import logging
import time
from collections import deque
from dataclasses import dataclass
from typing import Any, Callable, Deque, List, Optional

from spec.graph import Graph, Number
from spec.search import SearchResult

SearchFn = Callable[[Graph[Any]], SearchResult[Any]]


@dataclass
class SearchTraceRecord:
    """Structured record of a single search call."""

    timestamp: float           # wall-clock time (time.time())
    duration_s: float          # search duration in seconds

    algorithm: str
    found: bool
    path_positions: int        # positions in the path, 0 when not found
    cost: Optional[Number]
    nodes_expanded: int

    start: Any
    end: Any


class SearchTracer:
    """
    In-memory search tracer with optional logging.

    Responsibilities:
    - Time a search call and keep a rolling buffer of SearchTraceRecord.
    - Emit a single structured log line per run (info level).
    """

    def __init__(
        self,
        *,
        logger: Optional[logging.Logger] = None,
        max_records: int = 1_000,
    ) -> None:
        self._logger = logger or logging.getLogger("pathfinding.search")
        self._records: Deque[SearchTraceRecord] = deque(maxlen=max_records)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(self, search: SearchFn, graph: Graph[Any]) -> SearchResult[Any]:
        """
        Call `search(graph)`, record the outcome and return the result.

        Exceptions from the search propagate untouched; nothing is recorded
        for a run that raised.
        """
        t0 = time.perf_counter()
        result = search(graph)
        duration_s = time.perf_counter() - t0
        self.record(graph=graph, result=result, duration_s=duration_s)
        return result

    def record(
        self,
        *,
        graph: Graph[Any],
        result: SearchResult[Any],
        duration_s: float,
    ) -> None:
        """Record a trace for a completed search, found or not."""
        try:
            record = self._build_record(graph, result, duration_s)
        except Exception:
            # Tracing must never crash the caller.
            self._logger.exception("Failed to build SearchTraceRecord")
            return

        self._records.append(record)

        self._logger.info(
            "search algo=%s found=%s positions=%d cost=%s expanded=%d "
            "duration=%.4fs start=%r end=%r",
            record.algorithm,
            record.found,
            record.path_positions,
            record.cost,
            record.nodes_expanded,
            record.duration_s,
            record.start,
            record.end,
        )

    def get_records(self) -> List[SearchTraceRecord]:
        """Return a snapshot of all currently buffered records."""
        return list(self._records)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _build_record(
        self,
        graph: Graph[Any],
        result: SearchResult[Any],
        duration_s: float,
    ) -> SearchTraceRecord:
        return SearchTraceRecord(
            timestamp=time.time(),
            duration_s=duration_s,
            algorithm=result.algorithm,
            found=bool(result.found),
            path_positions=len(result.path),
            cost=result.cost,
            nodes_expanded=result.nodes_expanded,
            start=graph.get_start(),
            end=graph.get_end(),
        )
