"""
Summary: Error hierarchy raised while resolving Vite assets.
Why: Let callers tell configuration mistakes apart from missing build output.
"""

from __future__ import annotations


class ViteError(Exception):
    """Base exception for asset resolution failures."""


class ParseError(ViteError):
    """Raised when the hot file or manifest cannot be read or decoded."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f'Unable to parse "{path}": {reason}')
        self.path: str = path
        self.reason: str = reason


class NotFoundError(ViteError):
    """Raised when an entrypoint or output file is absent from the manifest."""

    def __init__(self, identifier: str) -> None:
        super().__init__(f'Cannot find "{identifier}" chunk in the manifest file')
        self.identifier: str = identifier


class InvalidStateError(ViteError):
    """Raised when an operation is not available in the current mode."""


__all__ = ["InvalidStateError", "NotFoundError", "ParseError", "ViteError"]
