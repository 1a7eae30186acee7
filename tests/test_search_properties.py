# tests/test_search_properties.py
"""
Property-style checks over many small random graphs and grids.

Covers:
- A* cost equals the brute-force cheapest simple path
- A* and BFS agree on path existence
- under unit costs, BFS and A* paths have the same edge count
- returned paths are contiguous
- concurrent searches on one graph return the sequential answers
"""

from __future__ import annotations

import random
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List, Optional

from grid import GridGraph, random_obstacles
from pathfinding import a_star, bfs
from pathfinding.testing import DictGraph


def brute_force_cheapest(graph: DictGraph) -> Optional[float]:
    """Enumerate every simple path start -> end and return the minimum cost."""
    best: Optional[float] = None
    start, end = graph.get_start(), graph.get_end()

    def walk(node, visited: List, cost: float) -> None:
        nonlocal best
        if node == end:
            if best is None or cost < best:
                best = cost
            return
        for nxt in set(graph.neighbors(node)):
            if nxt not in visited:
                visited.append(nxt)
                walk(nxt, visited, cost + graph.cost(node, nxt))
                visited.pop()

    walk(start, [start], 0)
    return best


def random_graph(rng: random.Random, n: int = 6, p: float = 0.35) -> DictGraph:
    edges = []
    for u in range(n):
        for v in range(n):
            if u != v and rng.random() < p:
                edges.append((u, v, rng.randint(0, 9)))
    graph = DictGraph.from_edges(edges, start=0, end=n - 1)
    graph.adjacency.setdefault(0, [])
    return graph


def exact_remaining(graph: DictGraph) -> Dict[int, float]:
    """True remaining cost to the end for every node that can reach it."""
    out: Dict[int, float] = {}
    original_start = graph.get_start()
    for node in graph.nodes():
        graph.set_start(node)
        cost = brute_force_cheapest(graph)
        if cost is not None:
            out[node] = cost
    graph.set_start(original_start)
    return out


def test_astar_matches_brute_force_with_zero_heuristic() -> None:
    rng = random.Random(11)
    for _ in range(150):
        graph = random_graph(rng)
        expected = brute_force_cheapest(graph)
        result = a_star(graph)

        if expected is None:
            assert not result.found
        else:
            assert result.found
            assert result.cost == expected
            assert graph.path_cost(result.path) == expected


def test_astar_matches_brute_force_with_admissible_heuristic() -> None:
    rng = random.Random(23)
    for _ in range(100):
        graph = random_graph(rng)
        remaining = exact_remaining(graph)
        # scaled-down true distance: admissible but not exact
        graph.h = {node: cost * rng.choice((0.5, 1.0)) for node, cost in remaining.items()}

        expected = brute_force_cheapest(graph)
        result = a_star(graph)

        assert result.found == (expected is not None)
        if expected is not None:
            assert result.cost == expected


def test_astar_and_bfs_agree_on_existence() -> None:
    rng = random.Random(5)
    for _ in range(200):
        graph = random_graph(rng, n=7, p=0.25)
        assert a_star(graph).found == bfs(graph).found


def test_unit_cost_grids_bfs_and_astar_lengths_match() -> None:
    for seed in range(25):
        grid = GridGraph(width=15, height=15)
        random_obstacles(grid, 0.3, random.Random(seed))

        a = a_star(grid)
        b = bfs(grid)

        assert a.found == b.found
        if a.found:
            assert len(a.path) == len(b.path)
            assert a.cost == a.length
            for path in (a.path, b.path):
                assert path[0] == grid.get_start()
                assert grid.is_end(path[-1])
                for p, q in zip(path, path[1:]):
                    assert q in grid.neighbors(p)
                assert not any(grid.is_obstacle(p) for p in path[1:])


def test_concurrent_searches_match_sequential_results() -> None:
    grid = GridGraph(width=40, height=40)
    random_obstacles(grid, 0.25, random.Random(3))
    grid.obstacles.discard(grid.get_start())
    grid.obstacles.discard(grid.get_end())

    expected_a = a_star(grid)
    expected_b = bfs(grid)

    with ThreadPoolExecutor(max_workers=4) as pool:
        futures = [pool.submit(fn, grid) for fn in (a_star, bfs) * 4]
        results = [f.result() for f in futures]

    for r in results:
        expected = expected_a if r.algorithm == "astar" else expected_b
        assert r.path == expected.path
        assert r.found == expected.found
