# src/app/benchmark.py
"""
Benchmark harness: time the search engines on a profile's grid.

Flow:
  1. Build a GridGraph from the profile (fixed walls + random obstacles).
  2. With random obstacles, redraw the layout until A* finds a path,
     up to benchmark.max_attempts.
  3. Run every configured engine once through a SearchTracer.

Fixed layouts (no random obstacles) are used as-is, solvable or not.
"""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from env.schema import GridSpec, SearchProfile
from grid import Coord, GridGraph, random_obstacles
from pathfinding import ALGORITHMS, SearchTracer, a_star
from spec.graph import Number

logger = logging.getLogger(__name__)


@dataclass
class AlgorithmTiming:
    """Outcome of one engine on the benchmark grid."""
    algorithm: str
    found: bool
    path_positions: int
    cost: Optional[Number]
    nodes_expanded: int
    duration_s: float


@dataclass
class BenchmarkReport:
    profile: str
    width: int
    height: int
    attempts: int
    obstacle_count: int
    timings: List[AlgorithmTiming] = field(default_factory=list)
    paths: Dict[str, List[Coord]] = field(default_factory=dict)
    grid: Optional[GridGraph] = field(default=None, repr=False)

    def timing(self, algorithm: str) -> AlgorithmTiming:
        for t in self.timings:
            if t.algorithm == algorithm:
                return t
        raise KeyError(f"No timing recorded for '{algorithm}'")


def build_grid(spec: GridSpec, rng: Optional[random.Random] = None) -> GridGraph:
    """Create a GridGraph with the GridSpec start/end, walls and random obstacles."""
    grid = GridGraph(width=spec.width, height=spec.height, start=spec.start, end=spec.end)
    grid.set_obstacles(spec.walls)
    if spec.obstacle_proportion > 0:
        random_obstacles(grid, spec.obstacle_proportion, rng)
    return grid


def run_benchmark(
    profile: SearchProfile,
    rng: Optional[random.Random] = None,
    tracer: Optional[SearchTracer] = None,
) -> BenchmarkReport:
    """
    Build a (solvable, when random) grid and time each configured engine.

    Raises RuntimeError if no random layout with a path turns up within
    benchmark.max_attempts.
    """
    spec = profile.grid
    rng = rng or random.Random(spec.seed)
    tracer = tracer or SearchTracer()

    randomized = spec.obstacle_proportion > 0
    max_attempts = profile.benchmark.max_attempts if randomized else 1

    grid: Optional[GridGraph] = None
    attempts = 0
    while attempts < max_attempts:
        attempts += 1
        grid = build_grid(spec, rng)
        if not randomized or a_star(grid).found:
            break
        logger.debug("layout attempt %d has no path, redrawing", attempts)
    else:
        raise RuntimeError(
            f"No solvable layout for profile '{profile.name}' "
            f"after {max_attempts} attempts"
        )

    assert grid is not None
    report = BenchmarkReport(
        profile=profile.name,
        width=grid.width,
        height=grid.height,
        attempts=attempts,
        obstacle_count=len(grid.obstacles),
        grid=grid,
    )

    for name in profile.benchmark.algorithms:
        t0 = time.perf_counter()
        result = ALGORITHMS[name](grid)
        duration_s = time.perf_counter() - t0
        tracer.record(graph=grid, result=result, duration_s=duration_s)
        report.timings.append(
            AlgorithmTiming(
                algorithm=name,
                found=result.found,
                path_positions=len(result.path),
                cost=result.cost,
                nodes_expanded=result.nodes_expanded,
                duration_s=duration_s,
            )
        )
        report.paths[name] = list(result.path)

    logger.info(
        "benchmark %s: %dx%d grid, %d obstacles, %d attempt(s)",
        profile.name, report.width, report.height, report.obstacle_count, attempts,
    )
    return report
