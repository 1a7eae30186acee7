# SearchProfile, GridSpec, BenchmarkSpec dataclasses
# src/env/schema.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

Coord = Tuple[int, int]

KNOWN_ALGORITHMS = ("astar", "bfs")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class GridSpec:
    """Describes the grid a profile runs on."""
    width: int
    height: int
    start: Optional[Coord] = None       # None -> (0, 0)
    end: Optional[Coord] = None         # None -> (width - 1, height - 1)
    obstacle_proportion: float = 0.0    # random obstacles, 0 disables
    walls: List[Coord] = field(default_factory=list)  # fixed obstacles
    seed: Optional[int] = None          # RNG seed for random obstacles


@dataclass
class BenchmarkSpec:
    """Which engines to run and how hard to look for a solvable layout."""
    algorithms: List[str] = field(default_factory=lambda: list(KNOWN_ALGORITHMS))
    max_attempts: int = 20


@dataclass
class SearchProfile:
    """Resolved settings for one named profile."""
    name: str
    log_level: str
    grid: GridSpec
    benchmark: BenchmarkSpec
