# src/pathfinding/errors.py
"""
Error types for the path search engines.

"No path" is never an exception; it is reported through SearchResult.
These errors mark programming errors: an inconsistent Graph implementation
or a broken internal invariant. Callers are not expected to recover.
"""

from __future__ import annotations


class PathfindingError(RuntimeError):
    """Base class for fatal search errors."""


class GraphContractError(PathfindingError):
    """The Graph returned a value outside its contract (e.g. negative cost)."""


class PathReconstructionError(PathfindingError):
    """The predecessor map does not lead back to the start position."""
