"""
Summary: Immutable resolver options and the defaults applied by define_config.
Why: Normalize URLs and attribute hooks once so tag building stays branch-free.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .attributes import (
    AttributeCallback,
    AttributeProvider,
    Attributes,
    as_attribute_provider,
)

DEFAULT_HOT_FILE: Final[str] = "public/hot.json"
DEFAULT_BUILD_DIRECTORY: Final[str] = "public/assets"
DEFAULT_ASSETS_URL: Final[str] = ""
DEFAULT_RELOAD: Final[tuple[str, ...]] = ("./resources/views/**/*.edge",)
MANIFEST_FILENAME: Final[str] = "manifest.json"


@dataclass(frozen=True, slots=True)
class ViteOptions:
    """Configuration shared by every resolution call."""

    hot_file: Path
    entrypoints: tuple[str, ...]
    assets_url: str
    build_directory: Path
    reload: tuple[str, ...] = ()
    script_attributes: AttributeProvider | None = None
    style_attributes: AttributeProvider | None = None

    def __post_init__(self) -> None:
        # Frozen dataclass: normalize through object.__setattr__.
        object.__setattr__(self, "hot_file", Path(self.hot_file))
        object.__setattr__(self, "build_directory", Path(self.build_directory))
        object.__setattr__(self, "entrypoints", tuple(self.entrypoints))
        object.__setattr__(self, "reload", tuple(self.reload))
        object.__setattr__(self, "assets_url", (self.assets_url or "/").rstrip("/"))
        object.__setattr__(
            self, "script_attributes", as_attribute_provider(self.script_attributes)
        )
        object.__setattr__(
            self, "style_attributes", as_attribute_provider(self.style_attributes)
        )

    @property
    def manifest_path(self) -> Path:
        """Location of ``manifest.json`` inside the build directory."""

        return self.build_directory / MANIFEST_FILENAME


def define_config(
    *,
    entrypoints: Iterable[str],
    hot_file: str | Path = DEFAULT_HOT_FILE,
    assets_url: str = DEFAULT_ASSETS_URL,
    build_directory: str | Path = DEFAULT_BUILD_DIRECTORY,
    reload: Iterable[str] = DEFAULT_RELOAD,
    script_attributes: AttributeProvider | Attributes | AttributeCallback | None = None,
    style_attributes: AttributeProvider | Attributes | AttributeCallback | None = None,
) -> ViteOptions:
    """Build ``ViteOptions`` with the plugin defaults filled in.

    Args:
        entrypoints: Source entrypoints the application renders.
        hot_file: Path of the dev server hot file.
        assets_url: Base URL for built assets, e.g. a CDN origin.
        build_directory: Directory containing ``manifest.json``.
        reload: Globs that trigger a full page reload in the dev server.
        script_attributes: Extra attributes for script tags (mapping or ``(src, url)`` callable).
        style_attributes: Extra attributes for stylesheet tags (mapping or ``(src, url)`` callable).

    Returns:
        ViteOptions: Normalized options.
    """

    return ViteOptions(
        hot_file=Path(hot_file),
        entrypoints=tuple(entrypoints),
        assets_url=assets_url,
        build_directory=Path(build_directory),
        reload=tuple(reload),
        script_attributes=as_attribute_provider(script_attributes),
        style_attributes=as_attribute_provider(style_attributes),
    )


__all__ = [
    "DEFAULT_ASSETS_URL",
    "DEFAULT_BUILD_DIRECTORY",
    "DEFAULT_HOT_FILE",
    "DEFAULT_RELOAD",
    "MANIFEST_FILENAME",
    "ViteOptions",
    "define_config",
]
