"""Adapters for the resolution feature."""

from .filesystem import LocalAssetFileSystem

__all__ = ["LocalAssetFileSystem"]
