"""
Summary: Parsed Vite manifest with entrypoint and output-file lookups.
Why: Validate the build output once and expose typed chunks to the resolver.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import final

from typing_extensions import override

from .errors import NotFoundError, ParseError


@final
@dataclass(frozen=True, slots=True)
class ManifestChunk:
    """Build output recorded for one manifest key."""

    file: str
    css: tuple[str, ...] = ()
    integrity: str | None = None


def _parse_chunk(source: str, key: str, raw: object) -> ManifestChunk:
    if not isinstance(raw, Mapping):
        raise ParseError(source, f'chunk "{key}" must be an object')

    file = raw.get("file")
    if not isinstance(file, str) or not file:
        raise ParseError(source, f'chunk "{key}" is missing the "file" field')

    css = raw.get("css") or []
    if not isinstance(css, list) or not all(isinstance(item, str) for item in css):
        raise ParseError(source, f'chunk "{key}" has an invalid "css" list')

    integrity = raw.get("integrity")
    if integrity is not None and not isinstance(integrity, str):
        raise ParseError(source, f'chunk "{key}" has a non-string "integrity"')

    return ManifestChunk(file=file, css=tuple(css), integrity=integrity or None)


@final
class Manifest(Mapping[str, ManifestChunk]):
    """Read-only mapping of source entrypoints to their build chunks."""

    def __init__(self, chunks: Mapping[str, ManifestChunk]) -> None:
        self._chunks: dict[str, ManifestChunk] = dict(chunks)

    @classmethod
    def from_json(cls, payload: object, *, source: str = "manifest.json") -> Manifest:
        """Build a manifest from decoded JSON.

        Args:
            payload: Decoded JSON document.
            source: Path used in error messages.

        Returns:
            Manifest: Parsed manifest preserving the document's key order.

        Raises:
            ParseError: If the document or one of its chunks is malformed.
        """

        if not isinstance(payload, Mapping):
            raise ParseError(source, "manifest must be a JSON object")
        return cls({key: _parse_chunk(source, key, raw) for key, raw in payload.items()})

    def chunk_by_entry(self, name: str) -> ManifestChunk:
        """Return the chunk keyed by ``name``."""

        chunk = self._chunks.get(name)
        if chunk is None:
            raise NotFoundError(name)
        return chunk

    def chunk_by_output_file(self, file_name: str) -> ManifestChunk:
        """Return the first chunk whose emitted file equals ``file_name``."""

        for chunk in self._chunks.values():
            if chunk.file == file_name:
                return chunk
        raise NotFoundError(file_name)

    @override
    def __getitem__(self, key: str) -> ManifestChunk:
        return self._chunks[key]

    @override
    def __iter__(self) -> Iterator[str]:
        return iter(self._chunks)

    @override
    def __len__(self) -> int:
        return len(self._chunks)

    @override
    def __repr__(self) -> str:
        return f"Manifest({len(self._chunks)} chunks)"


__all__ = ["Manifest", "ManifestChunk"]
