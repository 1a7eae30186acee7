# src/pathfinding/reconstruct.py
"""Rebuild a start-to-goal path from a predecessor map."""

from __future__ import annotations

from typing import List, Mapping

from spec.graph import P

from .errors import PathReconstructionError


def reconstruct_path(
    predecessors: Mapping[P, P],
    start: P,
    goal: P,
) -> List[P]:
    """
    Walk predecessors back from `goal` until `start`, then reverse.

    The walk can visit at most len(predecessors) + 1 positions; anything
    longer means the map contains a cycle. A position with no predecessor
    before reaching `start` means the map does not describe a path at all.
    Both cases raise PathReconstructionError.
    """
    path: List[P] = [goal]
    current = goal
    limit = len(predecessors) + 1

    while current != start:
        if current not in predecessors:
            raise PathReconstructionError(
                f"No predecessor recorded for {current!r}; "
                f"cannot reach start {start!r}."
            )
        current = predecessors[current]
        path.append(current)
        if len(path) > limit:
            raise PathReconstructionError(
                f"Predecessor chain from {goal!r} does not terminate at "
                f"{start!r} (cycle suspected after {limit} steps)."
            )

    path.reverse()
    return path
