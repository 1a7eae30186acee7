# src/spec/__init__.py

from __future__ import annotations

"""
Public spec surface for the path search engines.

This module re-exports *interfaces and data types* only:
  - Graph capability protocol and the Position type variable
  - SearchResult returned by every engine

Concrete engines live in src/pathfinding/, concrete graphs in src/grid/.
"""

from .graph import Graph, Number, P
from .search import SearchResult

__all__ = [
    "Graph",
    "Number",
    "P",
    "SearchResult",
]
