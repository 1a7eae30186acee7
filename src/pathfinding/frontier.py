# frontier disciplines for the search engines
# src/pathfinding/frontier.py
"""
Frontier containers.

- PriorityFrontier: min-heap keyed by priority, FIFO among equal priorities.
- FifoFrontier: plain insertion-ordered queue for BFS.

Positions are never compared with each other: every heap entry carries a
monotonically increasing sequence number right after the priority, so ties
resolve to the earliest pushed entry and arbitrary hashable positions work.
"""

from __future__ import annotations

import heapq
from collections import deque
from dataclasses import dataclass
from itertools import count
from typing import Deque, Generic, Iterator, List, Set, Tuple

from spec.graph import Number, P


@dataclass(frozen=True)
class FrontierEntry(Generic[P]):
    """A popped frontier item: the position and the g-score it was pushed with."""

    position: P
    g: Number


class PriorityFrontier(Generic[P]):
    """
    Min-priority frontier for A*.

    Superseded entries are not removed when a cheaper route is found; the
    engine filters them on extraction against the cost ledger.
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[Number, int, Number, P]] = []
        self._counter: Iterator[int] = count()

    def push(self, position: P, g: Number, priority: Number) -> None:
        heapq.heappush(self._heap, (priority, next(self._counter), g, position))

    def pop(self) -> FrontierEntry[P]:
        """Remove and return the lowest-priority entry (earliest on ties)."""
        _, _, g, position = heapq.heappop(self._heap)
        return FrontierEntry(position=position, g=g)

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)


class FifoFrontier(Generic[P]):
    """
    First-in-first-out frontier for BFS.

    Tracks every position ever enqueued so the engine can keep first
    discovery only.
    """

    def __init__(self) -> None:
        self._queue: Deque[Tuple[P, Number]] = deque()
        self._seen: Set[P] = set()

    def push(self, position: P, g: Number) -> None:
        self._queue.append((position, g))
        self._seen.add(position)

    def pop(self) -> FrontierEntry[P]:
        position, g = self._queue.popleft()
        return FrontierEntry(position=position, g=g)

    def __contains__(self, position: object) -> bool:
        """True if `position` was ever enqueued (even if already popped)."""
        return position in self._seen

    def __len__(self) -> int:
        return len(self._queue)

    def __bool__(self) -> bool:
        return bool(self._queue)
