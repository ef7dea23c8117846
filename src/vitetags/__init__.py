"""Resolve Vite entrypoints into HTML tags and asset URLs."""

from vitetags.features.resolution import (
    AttributeHook,
    InvalidStateError,
    Manifest,
    ManifestChunk,
    NotFoundError,
    ParseError,
    StaticAttributes,
    Vite,
    ViteElement,
    ViteError,
    ViteOptions,
    define_config,
)

__version__ = "0.1.0"

__all__ = [
    "AttributeHook",
    "InvalidStateError",
    "Manifest",
    "ManifestChunk",
    "NotFoundError",
    "ParseError",
    "StaticAttributes",
    "Vite",
    "ViteElement",
    "ViteError",
    "ViteOptions",
    "__version__",
    "define_config",
]
