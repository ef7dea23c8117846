"""
Summary: Local filesystem adapter for the asset resolver.
Why: Keep pathlib calls out of the resolution use case.
"""

from __future__ import annotations

from pathlib import Path

from ..usecases.ports import AssetFileSystem


class LocalAssetFileSystem(AssetFileSystem):
    """Thin wrapper around the local filesystem."""

    def exists(self, path: Path) -> bool:
        return path.exists()

    def read_text(self, path: Path) -> str:
        return path.read_text(encoding="utf-8")


__all__ = ["LocalAssetFileSystem"]
