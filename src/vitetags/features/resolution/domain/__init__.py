"""
Summary: Domain objects for Vite asset resolution.
Why: Give the resolver and adapters one import path for shared value objects.
"""

from .attributes import (
    AttributeHook,
    AttributeProvider,
    Attributes,
    AttributeValue,
    StaticAttributes,
    as_attribute_provider,
    make_attributes,
)
from .element import ViteElement
from .errors import InvalidStateError, NotFoundError, ParseError, ViteError
from .hot_file import HotFile
from .manifest import Manifest, ManifestChunk
from .options import ViteOptions, define_config

__all__ = [
    "AttributeHook",
    "AttributeProvider",
    "AttributeValue",
    "Attributes",
    "HotFile",
    "InvalidStateError",
    "Manifest",
    "ManifestChunk",
    "NotFoundError",
    "ParseError",
    "StaticAttributes",
    "ViteElement",
    "ViteError",
    "ViteOptions",
    "as_attribute_provider",
    "define_config",
    "make_attributes",
]
