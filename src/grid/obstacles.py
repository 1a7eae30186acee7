# src/grid/obstacles.py
"""
Obstacle layouts for GridGraph.

- random_obstacles: scatter blocked cells by proportion (duplicates allowed,
  so the real density is slightly below the requested one)
- l_wall_obstacles: fixed wall layout used by the 20x20 corridor scenario
"""

from __future__ import annotations

import random
from typing import List, Optional

from .grid import Coord, GridGraph

# Named layouts usable from config files.
PRESETS = ("l_wall",)


def random_obstacles(
    grid: GridGraph,
    proportion: float,
    rng: Optional[random.Random] = None,
) -> int:
    """
    Mark int(width * height * proportion) random cells as obstacles.

    Start and end may be hit too; callers that need a solvable layout
    should retry. Returns the number of draws made.
    """
    if not 0.0 <= proportion < 1.0:
        raise ValueError(f"obstacle proportion must be in [0, 1), got {proportion}")

    rng = rng or random.Random()
    draws = int(grid.width * grid.height * proportion)
    for _ in range(draws):
        x = rng.randrange(grid.width)
        y = rng.randrange(grid.height)
        grid.obstacles.add((x, y))
    return draws


def l_wall_obstacles() -> List[Coord]:
    """
    Two walls forming an L around (16, 16) plus a bar along y=8 at the
    high-x edge. Meant for a 20x20 grid.
    """
    cells: List[Coord] = []
    cells += [(16, y) for y in range(16, 10, -1)]
    cells += [(x, 16) for x in range(15, 9, -1)]
    cells += [(x, 8) for x in range(14, 20)]
    return cells


def preset_obstacles(name: str) -> List[Coord]:
    """Resolve a named layout (see PRESETS)."""
    if name == "l_wall":
        return l_wall_obstacles()
    raise KeyError(f"Unknown obstacle preset '{name}'. Known: {', '.join(PRESETS)}")
