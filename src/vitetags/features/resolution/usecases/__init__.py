"""Use cases for the resolution feature.

The resolver itself is imported from ``usecases.resolver`` to keep adapter
imports acyclic.
"""

from .ports import AssetFileSystem

__all__ = ["AssetFileSystem"]
