"""
Summary: Filesystem port consumed by the asset resolver.
Why: Allow tests and hosts to supply hot file and manifest reads without touching disk.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class AssetFileSystem(Protocol):
    """Read-only filesystem operations needed to resolve assets."""

    def exists(self, path: Path) -> bool:
        """Return True if the path exists; must not read the file."""
        ...

    def read_text(self, path: Path) -> str:
        """Return the UTF-8 contents of ``path``; raises ``OSError`` on failure."""
        ...


__all__ = ["AssetFileSystem"]
