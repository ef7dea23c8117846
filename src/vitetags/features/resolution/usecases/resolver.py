"""
Summary: Resolve Vite entrypoints into script and stylesheet tags or URLs.
Why: Switch between dev server and manifest output without leaking mode checks to templates.
"""

from __future__ import annotations

import json
import re
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Final, final

from vitetags.platform.logging import logger

from ..adapters.filesystem import LocalAssetFileSystem
from ..domain.attributes import AttributeProvider, AttributeValue
from ..domain.element import ViteElement
from ..domain.errors import InvalidStateError, NotFoundError, ParseError
from ..domain.hot_file import HotFile
from ..domain.manifest import Manifest, ManifestChunk
from ..domain.options import ViteOptions
from .ports import AssetFileSystem

CSS_PATH_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"\.(css|less|sass|scss|styl|stylus|pcss|postcss)$"
)
VITE_CLIENT_PATH: Final[str] = "@vite/client"
REACT_REFRESH_PATH: Final[str] = "@react-refresh"


def is_css_path(path: str) -> bool:
    """Return whether ``path`` points to a stylesheet."""

    return CSS_PATH_PATTERN.search(path) is not None


@dataclass(frozen=True, slots=True)
class _PendingTag:
    """Tag paired with the output file used for de-duplication and ordering."""

    path: str
    element: ViteElement


@final
class Vite:
    """Generate tags and URLs for assets processed by Vite.

    The hot file is checked on every public call, so switching between the
    dev server and a production build does not require a new instance. The
    manifest is read at most once and cached for the lifetime of the instance.
    """

    def __init__(
        self,
        options: ViteOptions,
        *,
        file_system: AssetFileSystem | None = None,
    ) -> None:
        self._options: ViteOptions = options
        self._file_system: AssetFileSystem = file_system or LocalAssetFileSystem()
        self._manifest_cache: Manifest | None = None
        logger.debug(
            "Vite config %s",
            options,
            extra={
                "vite_event": "vite.config",
                "hot_file": str(options.hot_file),
                "build_directory": str(options.build_directory),
            },
        )

    @property
    def options(self) -> ViteOptions:
        return self._options

    # Mode detection ---------------------------------------------------------

    def is_hot(self) -> bool:
        """Return whether the dev server hot file currently exists."""

        return self._file_system.exists(self._options.hot_file)

    def _read_json(self, path: Path) -> object:
        try:
            content = self._file_system.read_text(path)
        except OSError as exc:
            raise ParseError(str(path), exc.strerror or str(exc)) from exc
        except UnicodeDecodeError as exc:
            raise ParseError(str(path), str(exc)) from exc

        try:
            return json.loads(content)
        except json.JSONDecodeError as exc:
            raise ParseError(str(path), exc.msg) from exc

    def read_hot_file(self) -> HotFile:
        """Read and parse the hot file.

        Raises:
            ParseError: If the file vanished or does not hold a valid descriptor.
        """

        hot_file = self._options.hot_file
        return HotFile.from_json(self._read_json(hot_file), source=str(hot_file))

    # Manifest ---------------------------------------------------------------

    def manifest(self) -> Manifest:
        """Return the manifest contents.

        Raises:
            InvalidStateError: When running in hot mode.
            ParseError: If the manifest file is missing or malformed.
        """

        if self.is_hot():
            raise InvalidStateError("Cannot read the manifest file when running in hot mode")
        return self._load_manifest()

    def _load_manifest(self) -> Manifest:
        if self._manifest_cache is None:
            manifest_path = self._options.manifest_path
            manifest = Manifest.from_json(
                self._read_json(manifest_path), source=str(manifest_path)
            )
            self._manifest_cache = manifest
            logger.debug(
                "Loaded manifest %s",
                manifest_path,
                extra={
                    "vite_event": "vite.manifest.loaded",
                    "manifest_path": str(manifest_path),
                    "entries": len(manifest),
                },
            )
        return self._manifest_cache

    # URLs -------------------------------------------------------------------

    def dev_url(self) -> str:
        """Return the dev server URL in hot mode, otherwise an empty string."""

        if self.is_hot():
            return self.read_hot_file().url
        return ""

    def assets_url(self) -> str:
        """Return the dev server URL in hot mode, otherwise the configured assets URL."""

        if self.is_hot():
            return self.read_hot_file().url
        return self._options.assets_url

    def asset_path(self, asset: str) -> str:
        """Return the public URL for ``asset``.

        In hot mode the asset is served by the dev server as-is. Otherwise the
        asset must be a manifest entry and its emitted file is returned.
        """

        if self.is_hot():
            return self._hot_asset(self.read_hot_file().url, asset)

        chunk = self._load_manifest().chunk_by_entry(asset)
        return self._built_asset(chunk.file)

    @staticmethod
    def _hot_asset(dev_url: str, asset: str) -> str:
        return f"{dev_url}/{asset}"

    def _built_asset(self, file: str) -> str:
        return f"{self._options.assets_url}/{file}"

    # Tags -------------------------------------------------------------------

    def build_tag(
        self,
        asset: str,
        attributes: Mapping[str, AttributeValue] | None = None,
    ) -> ViteElement:
        """Build a single script or stylesheet tag for ``asset``."""

        return self._generate_tag(asset, self.asset_path(asset), attributes)

    def _generate_tag(
        self,
        asset: str,
        url: str,
        attributes: Mapping[str, AttributeValue] | None = None,
    ) -> ViteElement:
        if is_css_path(asset):
            return self._make_style_tag(asset, url, attributes)
        return self._make_script_tag(asset, url, attributes)

    @staticmethod
    def _unwrap_attributes(
        src: str, url: str, provider: AttributeProvider | None
    ) -> dict[str, AttributeValue]:
        if provider is None:
            return {}
        return provider.resolve(src, url)

    def _make_script_tag(
        self,
        src: str,
        url: str,
        attributes: Mapping[str, AttributeValue] | None,
    ) -> ViteElement:
        custom = self._unwrap_attributes(src, url, self._options.script_attributes)
        return ViteElement(
            tag="script",
            attributes={"type": "module", **custom, **(attributes or {}), "src": url},
        )

    def _make_style_tag(
        self,
        src: str,
        url: str,
        attributes: Mapping[str, AttributeValue] | None,
    ) -> ViteElement:
        custom = self._unwrap_attributes(src, url, self._options.style_attributes)
        return ViteElement(
            tag="link",
            attributes={"rel": "stylesheet", **custom, **(attributes or {}), "href": url},
        )

    def _get_vite_hmr_script(
        self,
        dev_url: str,
        attributes: Mapping[str, AttributeValue] | None,
    ) -> ViteElement:
        return ViteElement(
            tag="script",
            attributes={
                "type": "module",
                **(attributes or {}),
                "src": self._hot_asset(dev_url, VITE_CLIENT_PATH),
            },
        )

    def generate_entry_points_tags(
        self,
        entry_points: str | Sequence[str],
        attributes: Mapping[str, AttributeValue] | None = None,
    ) -> list[ViteElement]:
        """Generate tags for one or more entrypoints.

        In hot mode the ``@vite/client`` script is prepended and every
        entrypoint is served by the dev server. Otherwise tags come from the
        manifest, including associated CSS, de-duplicated by output file with
        stylesheets first.

        Args:
            entry_points: Entrypoint or entrypoints as listed in the manifest.
            attributes: Extra attributes applied to every generated tag.

        Returns:
            list[ViteElement]: Tags in render order.

        Raises:
            NotFoundError: If an entrypoint is absent from the manifest.
            ParseError: If the hot file or manifest cannot be read.
        """

        entries = [entry_points] if isinstance(entry_points, str) else list(entry_points)

        hot = self.is_hot()
        if hot:
            tags = self._generate_entry_points_tags_for_hot_mode(entries, attributes)
        else:
            tags = self._generate_entry_points_tags_with_manifest(entries, attributes)

        logger.debug(
            "Generated %d tags for %s",
            len(tags),
            ", ".join(entries),
            extra={
                "vite_event": "vite.tags.generated",
                "mode": "hot" if hot else "manifest",
                "tag_count": len(tags),
            },
        )
        return tags

    def _generate_entry_points_tags_for_hot_mode(
        self,
        entry_points: Iterable[str],
        attributes: Mapping[str, AttributeValue] | None,
    ) -> list[ViteElement]:
        dev_url = self.read_hot_file().url
        vite_hmr = self._get_vite_hmr_script(dev_url, attributes)
        tags = [
            self._generate_tag(entry_point, self._hot_asset(dev_url, entry_point), attributes)
            for entry_point in entry_points
        ]
        return [vite_hmr, *tags]

    def _generate_entry_points_tags_with_manifest(
        self,
        entry_points: Iterable[str],
        attributes: Mapping[str, AttributeValue] | None,
    ) -> list[ViteElement]:
        manifest = self._load_manifest()
        pending: list[_PendingTag] = []

        for entry_point in entry_points:
            chunk = manifest.chunk_by_entry(entry_point)
            pending.append(self._pending_tag(chunk, attributes))

            for css in chunk.css:
                pending.append(self._pending_tag(self._css_chunk(manifest, css), attributes))

        unique: dict[str, _PendingTag] = {}
        for tag in pending:
            _ = unique.setdefault(tag.path, tag)

        # Stable partition: stylesheets first, relative order kept in each group.
        ordered = sorted(unique.values(), key=lambda tag: not is_css_path(tag.path))
        return [tag.element for tag in ordered]

    @staticmethod
    def _css_chunk(manifest: Manifest, css: str) -> ManifestChunk:
        try:
            return manifest.chunk_by_output_file(css)
        except NotFoundError:
            # CSS extracted from a JS chunk has no manifest key of its own.
            return ManifestChunk(file=css)

    def _pending_tag(
        self,
        chunk: ManifestChunk,
        attributes: Mapping[str, AttributeValue] | None,
    ) -> _PendingTag:
        merged: dict[str, AttributeValue] = dict(attributes or {})
        if chunk.integrity:
            merged["integrity"] = chunk.integrity
        element = self._generate_tag(chunk.file, self._built_asset(chunk.file), merged)
        return _PendingTag(path=chunk.file, element=element)

    def get_react_hmr_script(
        self,
        attributes: Mapping[str, AttributeValue] | None = None,
    ) -> ViteElement | None:
        """Return the React fast-refresh preamble in hot mode, otherwise ``None``."""

        if not self.is_hot():
            return None

        refresh_runtime = self._hot_asset(self.read_hot_file().url, REACT_REFRESH_PATH)
        return ViteElement(
            tag="script",
            attributes={"type": "module", **(attributes or {})},
            children=(
                "",
                f"import RefreshRuntime from '{refresh_runtime}'",
                "RefreshRuntime.injectIntoGlobalHook(window)",
                "window.$RefreshReg$ = () => {}",
                "window.$RefreshSig$ = () => (type) => type",
                "window.__vite_plugin_react_preamble_installed__ = true",
                "",
            ),
        )


__all__ = ["CSS_PATH_PATTERN", "REACT_REFRESH_PATH", "VITE_CLIENT_PATH", "Vite", "is_css_path"]
