# src/grid/__init__.py
"""
Grid state space for the search engines.

Provides:
- GridGraph: obstacle grid implementing spec.graph.Graph
- random_obstacles / l_wall_obstacles / preset_obstacles: obstacle layouts
- render_grid: text view of a grid and a path
"""

from __future__ import annotations

from .grid import Coord, GridGraph, manhattan
from .obstacles import PRESETS, l_wall_obstacles, preset_obstacles, random_obstacles
from .render import render_grid

__all__ = [
    "Coord",
    "GridGraph",
    "manhattan",
    "PRESETS",
    "l_wall_obstacles",
    "preset_obstacles",
    "random_obstacles",
    "render_grid",
]
