"""Shared pytest fixtures for resolution tests."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from vitetags import Vite, ViteOptions, define_config


@pytest.fixture
def write_manifest(tmp_path: Path) -> Callable[[dict[str, object]], Path]:
    """Return a helper writing ``public/assets/manifest.json`` under ``tmp_path``."""

    def _write(document: dict[str, object]) -> Path:
        path = tmp_path / "public" / "assets" / "manifest.json"
        path.parent.mkdir(parents=True, exist_ok=True)
        _ = path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_hot_file(tmp_path: Path) -> Callable[[str], Path]:
    """Return a helper writing ``public/hot.json`` pointing at ``url``."""

    def _write(url: str = "http://localhost:5173") -> Path:
        path = tmp_path / "public" / "hot.json"
        path.parent.mkdir(parents=True, exist_ok=True)
        _ = path.write_text(json.dumps({"url": url}), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def options(tmp_path: Path) -> ViteOptions:
    """Options rooted at ``tmp_path`` with the default relative layout."""

    return define_config(
        entrypoints=["resources/js/app.js"],
        hot_file=tmp_path / "public" / "hot.json",
        build_directory=tmp_path / "public" / "assets",
    )


@pytest.fixture
def vite(options: ViteOptions) -> Vite:
    return Vite(options)
