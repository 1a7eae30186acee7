# tests/test_search_perf.py
"""
Performance / scale sanity tests for the search engines.

Goal is not microbenchmarking, but:
  - ensure both engines finish on a 10^6-cell grid with 40% obstacles
  - confirm they still agree on path length there
"""

from __future__ import annotations

import random

import pytest

from grid import GridGraph, random_obstacles
from pathfinding import a_star, bfs


@pytest.mark.slow
def test_million_cell_grid_completes() -> None:
    rng = random.Random(2024)
    grid = GridGraph(width=1000, height=1000)

    # redraw until a path exists
    for _ in range(20):
        grid.reset(1000, 1000)
        random_obstacles(grid, 0.4, rng)
        grid.obstacles.discard(grid.get_start())
        grid.obstacles.discard(grid.get_end())
        a = a_star(grid)
        if a.found:
            break
    else:
        pytest.fail("no solvable 1000x1000 layout in 20 draws")

    b = bfs(grid)

    assert b.found
    assert len(a.path) == len(b.path)
    assert a.cost == len(a.path) - 1
