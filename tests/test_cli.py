# tests/test_cli.py
"""
Smoke tests for cli.pathfind_demo.main.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from cli.pathfind_demo import main


def test_corridor_profile_prints_table_and_grid(capsys: Any) -> None:
    rc = main(["--profile", "corridor", "--render", "--log-level", "WARNING"])

    out = capsys.readouterr().out
    assert rc == 0
    assert "astar" in out
    assert "bfs" in out
    assert " 38" in out  # last path index on the rendered grid


def test_enclosed_profile_succeeds_with_no_path(capsys: Any) -> None:
    rc = main(["--profile", "enclosed"])

    out = capsys.readouterr().out
    assert rc == 0
    assert "no" in out


def test_unknown_profile_exits_non_zero(capsys: Any) -> None:
    rc = main(["--profile", "does-not-exist"])

    err = capsys.readouterr().err
    assert rc == 1
    assert "Profile load FAILED" in err


def test_custom_config_path(tmp_path: Path, capsys: Any) -> None:
    cfg = tmp_path / "profiles.yaml"
    cfg.write_text(
        "profile: line\nprofiles:\n  line:\n    grid: {width: 1, height: 4}\n",
        encoding="utf-8",
    )

    rc = main(["--config", str(cfg)])

    out = capsys.readouterr().out
    assert rc == 0
    assert "line" in out


def test_unknown_log_level_is_a_usage_error(capsys: Any) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["--profile", "corridor", "--log-level", "LOUD"])

    assert exc.value.code == 2
    assert "--log-level" in capsys.readouterr().err


def test_log_level_is_case_insensitive(capsys: Any) -> None:
    rc = main(["--profile", "corridor", "--log-level", "warning"])

    assert rc == 0
    assert "astar" in capsys.readouterr().out
