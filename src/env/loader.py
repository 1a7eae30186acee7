from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from grid.obstacles import preset_obstacles

from .schema import (
    KNOWN_ALGORITHMS,
    LOG_LEVELS,
    BenchmarkSpec,
    Coord,
    GridSpec,
    SearchProfile,
)

# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

PROJECT_ROOT = Path(__file__).resolve().parents[2]
CONFIG_ROOT = PROJECT_ROOT / "config"
CONFIG_NAME = "pathfinding.yaml"


def _load_yaml(path: Path) -> Dict[str, Any]:
    """Load a YAML config file and require a mapping at the top."""
    if not path.exists():
        raise FileNotFoundError(f"Missing config file: {path}")
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected mapping at top of {path}, got {type(data)}")
    return data


def _config_path(path: Optional[Path]) -> Path:
    return Path(path) if path is not None else CONFIG_ROOT / CONFIG_NAME


def _select_profile(cfg: Dict[str, Any], name: Optional[str]) -> Tuple[str, Dict[str, Any]]:
    """Return (profile_name, profile_mapping); `name` overrides the file default."""
    profile_name = name or cfg.get("profile")
    if not profile_name:
        raise ValueError(f"{CONFIG_NAME} must define a 'profile' key.")
    profiles = cfg.get("profiles")
    if not isinstance(profiles, dict):
        raise ValueError(f"{CONFIG_NAME} must define a 'profiles' mapping.")
    if profile_name not in profiles:
        raise KeyError(f"Profile '{profile_name}' not found in {CONFIG_NAME} profiles.")
    return profile_name, profiles[profile_name] or {}


def _mapping(raw: Any, what: str, profile_name: str) -> Dict[str, Any]:
    """Treat a missing section as empty; anything but a mapping is malformed."""
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ValueError(
            f"Profile '{profile_name}' {what} must be a mapping, got {type(raw).__name__}"
        )
    return raw


def _int(raw: Any, what: str) -> int:
    try:
        return int(raw)
    except (TypeError, ValueError) as e:
        raise ValueError(f"{what} must be an integer, got {raw!r}") from e


def _float(raw: Any, what: str) -> float:
    try:
        return float(raw)
    except (TypeError, ValueError) as e:
        raise ValueError(f"{what} must be a number, got {raw!r}") from e


def _coord(raw: Any, what: str) -> Optional[Coord]:
    if raw is None:
        return None
    if not isinstance(raw, (list, tuple)) or len(raw) != 2:
        raise ValueError(f"{what} must be a [x, y] pair, got {raw!r}")
    return _int(raw[0], what), _int(raw[1], what)


def _walls(raw: Any) -> List[Coord]:
    """Walls are either a preset name or a list of [x, y] pairs."""
    if raw is None:
        return []
    if isinstance(raw, str):
        return preset_obstacles(raw)
    if not isinstance(raw, list):
        raise ValueError(f"walls must be a preset name or a list, got {type(raw)}")
    return [c for c in (_coord(item, "wall cell") for item in raw) if c is not None]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def list_profiles(path: Optional[Path] = None) -> List[str]:
    cfg = _load_yaml(_config_path(path))
    profiles = cfg.get("profiles") or {}
    return sorted(profiles)


def load_profile(name: Optional[str] = None, path: Optional[Path] = None) -> SearchProfile:
    """Main entry point: returns a fully resolved SearchProfile."""
    cfg = _load_yaml(_config_path(path))
    profile_name, raw = _select_profile(cfg, name)
    raw = _mapping(raw, "body", profile_name)

    grid_raw = _mapping(raw.get("grid"), "grid", profile_name)
    if "width" not in grid_raw or "height" not in grid_raw:
        raise ValueError(f"Profile '{profile_name}' grid needs 'width' and 'height'.")

    grid = GridSpec(
        width=_int(grid_raw["width"], "grid.width"),
        height=_int(grid_raw["height"], "grid.height"),
        start=_coord(grid_raw.get("start"), "start"),
        end=_coord(grid_raw.get("end"), "end"),
        obstacle_proportion=_float(
            grid_raw.get("obstacle_proportion", 0.0), "grid.obstacle_proportion"
        ),
        walls=_walls(grid_raw.get("walls")),
        seed=grid_raw.get("seed"),
    )

    bench_raw = _mapping(raw.get("benchmark"), "benchmark", profile_name)
    algorithms = bench_raw.get("algorithms") or KNOWN_ALGORITHMS
    if isinstance(algorithms, str):
        algorithms = [algorithms]
    if not isinstance(algorithms, (list, tuple)):
        raise ValueError(
            f"Profile '{profile_name}' benchmark.algorithms must be a list, got {algorithms!r}"
        )
    benchmark = BenchmarkSpec(
        algorithms=list(algorithms),
        max_attempts=_int(bench_raw.get("max_attempts", 20), "benchmark.max_attempts"),
    )

    log_level = str(raw.get("log_level", cfg.get("log_level", "INFO"))).upper()

    profile = SearchProfile(
        name=profile_name,
        log_level=log_level,
        grid=grid,
        benchmark=benchmark,
    )

    # perform basic validation before returning
    _validate_profile(profile)
    return profile


def _validate_profile(profile: SearchProfile) -> None:
    """Minimal sanity checks for a profile."""
    g = profile.grid
    if g.width < 0 or g.height < 0:
        raise ValueError(f"Grid dimensions must be >= 0, got {g.width}x{g.height}")

    if not 0.0 <= g.obstacle_proportion < 1.0:
        raise ValueError(
            f"obstacle_proportion must be in [0, 1), got {g.obstacle_proportion}"
        )

    # start/end only have to lie inside a non-empty grid
    if g.width > 0 and g.height > 0:
        for label, c in (("start", g.start), ("end", g.end)):
            if c is not None and not (0 <= c[0] < g.width and 0 <= c[1] < g.height):
                raise ValueError(f"{label} {c} lies outside a {g.width}x{g.height} grid")

    unknown = [a for a in profile.benchmark.algorithms if a not in KNOWN_ALGORITHMS]
    if unknown:
        raise ValueError(f"Unknown algorithms: {unknown}. Known: {list(KNOWN_ALGORITHMS)}")

    if profile.benchmark.max_attempts < 1:
        raise ValueError("benchmark.max_attempts must be >= 1")

    if profile.log_level not in LOG_LEVELS:
        raise ValueError(f"Invalid log_level: {profile.log_level}")

    logging.getLogger(__name__).debug("profile %s validated", profile.name)
