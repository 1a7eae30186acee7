# src/pathfinding/testing/__init__.py
"""In-memory Graph fakes for unit tests."""

from __future__ import annotations

from .fakes import CountingGraph, DictGraph

__all__ = [
    "CountingGraph",
    "DictGraph",
]
