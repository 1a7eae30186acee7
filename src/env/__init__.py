# src/env/__init__.py
"""
Profile configuration for the pathfinding tools.

Exposes:
- load_profile / list_profiles: resolve config/pathfinding.yaml
- SearchProfile, GridSpec, BenchmarkSpec: resolved dataclasses
"""

from __future__ import annotations

from .loader import list_profiles, load_profile
from .schema import BenchmarkSpec, GridSpec, SearchProfile

__all__ = [
    "BenchmarkSpec",
    "GridSpec",
    "SearchProfile",
    "list_profiles",
    "load_profile",
]
