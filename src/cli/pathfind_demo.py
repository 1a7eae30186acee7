# src/cli/pathfind_demo.py

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from app.benchmark import BenchmarkReport, run_benchmark
from app.logging_config import configure_logging
from env.loader import load_profile
from env.schema import LOG_LEVELS
from grid.render import render_grid


def build_table(report: BenchmarkReport) -> Table:
    table = Table(
        title=(
            f"{report.profile}: {report.width}x{report.height}, "
            f"{report.obstacle_count} obstacles, {report.attempts} attempt(s)"
        )
    )
    table.add_column("Algorithm", style="bold")
    table.add_column("Found")
    table.add_column("Positions", justify="right")
    table.add_column("Cost", justify="right")
    table.add_column("Expanded", justify="right")
    table.add_column("Time", justify="right")

    for t in report.timings:
        table.add_row(
            t.algorithm,
            "yes" if t.found else "[red]no[/red]",
            str(t.path_positions),
            "-" if t.cost is None else str(t.cost),
            str(t.nodes_expanded),
            f"{t.duration_s * 1000:.2f} ms",
        )
    return table


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Run A* and BFS on a configured grid profile."
    )
    parser.add_argument("--profile", default=None, help="Profile name (from pathfinding.yaml)")
    parser.add_argument("--config", type=Path, default=None, help="Path to a profiles YAML file")
    parser.add_argument("--render", action="store_true", help="Print the grid with each path")
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Override the profile's log level",
    )
    args = parser.parse_args(argv)

    console = Console()
    err = Console(stderr=True)

    try:
        profile = load_profile(args.profile, path=args.config)
    except (FileNotFoundError, KeyError, ValueError) as e:
        err.print(f"[red]Profile load FAILED:[/red] {e!r}")
        return 1

    configure_logging(args.log_level or profile.log_level)

    try:
        report = run_benchmark(profile)
    except RuntimeError as e:
        err.print(f"[red]Benchmark FAILED:[/red] {e}")
        return 1

    console.print(build_table(report))

    if args.render and report.grid is not None:
        for name, path in report.paths.items():
            console.rule(name)
            # markup off: path numbers and '*' cells are plain text
            console.print(render_grid(report.grid, path or None), markup=False, highlight=False)

    return 0


if __name__ == "__main__":
    sys.exit(main())
