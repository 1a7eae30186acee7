# src/pathfinding/ledger.py
"""
Per-search bookkeeping: cost ledger + predecessor map.

A SearchLedger lives for exactly one search call. Invariants:
- g_scores never get worse for a position once recorded
- predecessors[p] is the position whose expansion produced g_scores[p]
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Generic

from spec.graph import Number, P


@dataclass
class SearchLedger(Generic[P]):
    start: P
    g_scores: Dict[P, Number] = field(default_factory=dict)
    predecessors: Dict[P, P] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.g_scores[self.start] = 0

    def is_stale(self, position: P, g: Number) -> bool:
        """True if a strictly cheaper route to `position` was recorded after this entry."""
        best = self.g_scores.get(position)
        return best is not None and best < g

    def relax(self, position: P, candidate: Number, parent: P) -> bool:
        """
        Record `candidate` as the cost of `position` if it is an improvement.

        Returns True when the ledger changed (unseen position or strictly
        cheaper route), False otherwise.
        """
        best = self.g_scores.get(position)
        if best is not None and candidate >= best:
            return False
        self.g_scores[position] = candidate
        self.predecessors[position] = parent
        return True

    def discover(self, position: P, g: Number, parent: P) -> None:
        """Record a first discovery unconditionally (BFS)."""
        self.g_scores[position] = g
        self.predecessors[position] = parent
