"""Tests for configuration path resolution."""

from __future__ import annotations

from pathlib import Path

import pytest

import vitetags.config.paths as paths


def test_explicit_path_wins(tmp_path: Path) -> None:
    resolved = paths.resolve_overridable_path(
        explicit_path=tmp_path / "a.toml",
        env={"X": str(tmp_path / "b.toml")},
        env_var="X",
        default_factory=lambda: tmp_path / "c.toml",
    )

    assert resolved == (tmp_path / "a.toml").resolve()


def test_env_var_beats_default(tmp_path: Path) -> None:
    resolved = paths.resolve_overridable_path(
        explicit_path=None,
        env={"X": f"  {tmp_path / 'b.toml'}  "},
        env_var="X",
        default_factory=lambda: tmp_path / "c.toml",
    )

    assert resolved == (tmp_path / "b.toml").resolve()


def test_blank_env_var_falls_back_to_default(tmp_path: Path) -> None:
    resolved = paths.resolve_overridable_path(
        explicit_path=None,
        env={"X": "  "},
        env_var="X",
        default_factory=lambda: tmp_path / "c.toml",
    )

    assert resolved == (tmp_path / "c.toml").resolve()


def test_default_config_path_uses_project_root(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    _ = (tmp_path / "pyproject.toml").write_text("[project]\nname='tmp'\n")
    nested = tmp_path / "app" / "views"
    nested.mkdir(parents=True)
    monkeypatch.chdir(nested)

    assert paths.default_config_path() == (tmp_path / "config" / "vite.toml").resolve()
    assert paths.default_log_file() == (tmp_path / "logs" / "vitetags.log").resolve()
