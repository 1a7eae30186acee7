# obstacle grid implementing the Graph protocol
# src/grid/grid.py
"""
GridGraph: 4-connected obstacle grid over integer (x, y) coordinates.

This module is a Graph *implementation*; the search engines only see it
through spec.graph.Graph. It owns:
- bounds checks (strict on both axes)
- obstacle membership
- Manhattan cost / heuristic

It does NOT:
- Search for paths
- Render itself (see grid.render)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Set, Tuple

# (x, y) integer coordinates
Coord = Tuple[int, int]

# neighbor order is part of the observable behaviour (tie-breaking)
DIRECTIONS: Tuple[Coord, ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))


def manhattan(a: Coord, b: Coord) -> int:
    """Manhattan distance between two grid coordinates."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


@dataclass
class GridGraph:
    """
    Rectangular grid with blocked cells.

    Defaults follow the usual corner-to-corner setup: start (0, 0) and end
    (width - 1, height - 1). A 0x0 grid is valid and has no traversable
    cells at all.
    """

    width: int = 0
    height: int = 0
    obstacles: Set[Coord] = field(default_factory=set)
    start: Optional[Coord] = None     # None -> (0, 0) in __post_init__
    end: Optional[Coord] = None       # None -> (width - 1, height - 1)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"Grid dimensions must be >= 0, got {self.width}x{self.height}"
            )
        if self.start is None:
            self.start = (0, 0)
        if self.end is None:
            self.end = (self.width - 1, self.height - 1)

    def reset(self, width: int, height: int) -> None:
        """Resize the grid, clear obstacles and restore default start/end."""
        self.width, self.height = width, height
        self.obstacles = set()
        self.start = None
        self.end = None
        self.__post_init__()

    # ------------------------------------------------------------------
    # Obstacles / bounds
    # ------------------------------------------------------------------

    def set_obstacles(self, cells: Iterable[Coord]) -> None:
        for cell in cells:
            self.obstacles.add((int(cell[0]), int(cell[1])))

    def is_obstacle(self, position: Coord) -> bool:
        return position in self.obstacles

    def in_bounds(self, position: Coord) -> bool:
        x, y = position
        return 0 <= x < self.width and 0 <= y < self.height

    def is_free(self, position: Coord) -> bool:
        return self.in_bounds(position) and not self.is_obstacle(position)

    @property
    def size(self) -> int:
        return self.width * self.height

    # ------------------------------------------------------------------
    # Graph protocol
    # ------------------------------------------------------------------

    def get_start(self) -> Coord:
        return self.start  # type: ignore[return-value]

    def set_start(self, position: Coord) -> None:
        self.start = position

    def get_end(self) -> Coord:
        return self.end  # type: ignore[return-value]

    def set_end(self, position: Coord) -> None:
        self.end = position

    def is_end(self, position: Coord) -> bool:
        return position == self.end

    def neighbors(self, position: Coord) -> List[Coord]:
        """In-bounds, non-obstacle 4-neighbors of `position`."""
        x, y = position
        out: List[Coord] = []
        for dx, dy in DIRECTIONS:
            nxt = (x + dx, y + dy)
            if self.is_free(nxt):
                out.append(nxt)
        return out

    def cost(self, a: Coord, b: Coord) -> int:
        return manhattan(a, b)

    def heuristic(self, position: Coord) -> int:
        return manhattan(position, self.get_end())
