# Path: `src/vitetags/features/resolution/__init__.py`
# Summary: Export resolution domain, use case, and adapter symbols.
# Why: Provide a stable import surface for hosts and tests.

from .adapters import LocalAssetFileSystem
from .domain import (
    AttributeHook,
    AttributeProvider,
    Attributes,
    AttributeValue,
    HotFile,
    InvalidStateError,
    Manifest,
    ManifestChunk,
    NotFoundError,
    ParseError,
    StaticAttributes,
    ViteElement,
    ViteError,
    ViteOptions,
    define_config,
    make_attributes,
)
from .usecases.ports import AssetFileSystem
from .usecases.resolver import Vite, is_css_path

__all__ = [
    "AssetFileSystem",
    "AttributeHook",
    "AttributeProvider",
    "AttributeValue",
    "Attributes",
    "HotFile",
    "InvalidStateError",
    "LocalAssetFileSystem",
    "Manifest",
    "ManifestChunk",
    "NotFoundError",
    "ParseError",
    "StaticAttributes",
    "Vite",
    "ViteElement",
    "ViteError",
    "ViteOptions",
    "define_config",
    "is_css_path",
    "make_attributes",
]
