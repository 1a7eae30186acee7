# src/grid/render.py
"""
Plain-text rendering of a GridGraph and an optional path.

Rows follow the x coordinate, columns the y coordinate. Path cells show
their index along the path, obstacles show '*', and the whole view is
framed by a '*' border.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from .grid import Coord, GridGraph

BORDER = " * "
EMPTY = "   "


def render_grid(grid: GridGraph, path: Optional[Sequence[Coord]] = None) -> str:
    step_of: Dict[Coord, int] = {}
    for i, p in enumerate(path or ()):
        step_of.setdefault(p, i)

    edge = BORDER * (grid.height + 2)
    lines: List[str] = [edge]
    for x in range(grid.width):
        row = [BORDER]
        for y in range(grid.height):
            cell = (x, y)
            if cell in step_of:
                row.append(f"{step_of[cell]:3d}")
            elif grid.is_obstacle(cell):
                row.append(BORDER)
            else:
                row.append(EMPTY)
        row.append(BORDER)
        lines.append("".join(row))
    lines.append(edge)
    return "\n".join(lines) + "\n"
