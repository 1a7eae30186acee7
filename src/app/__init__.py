# src/app/__init__.py
"""
Application-level helpers around the search engines.

Exposes:
- configure_logging: one-time stdout logging setup
- run_benchmark / build_grid: timed engine runs on a profile's grid
"""

from __future__ import annotations

from .benchmark import AlgorithmTiming, BenchmarkReport, build_grid, run_benchmark
from .logging_config import configure_logging

__all__ = [
    "AlgorithmTiming",
    "BenchmarkReport",
    "build_grid",
    "configure_logging",
    "run_benchmark",
]
