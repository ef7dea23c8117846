"""Utility helpers for configuration file persistence."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path


def ensure_file_with_template(path: Path, *, template_provider: Callable[[], str]) -> bool:
    """Create ``path`` using the supplied template when it does not exist.

    Args:
        path: Target file to create.
        template_provider: Callable returning the file contents to write.

    Returns:
        bool: ``True`` when the file was created, ``False`` if it already existed.
    """

    if path.exists():
        return False

    path.parent.mkdir(parents=True, exist_ok=True)
    _ = path.write_text(template_provider(), encoding="utf-8")
    return True


__all__ = ["ensure_file_with_template"]
