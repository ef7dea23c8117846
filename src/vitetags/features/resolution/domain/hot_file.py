"""
Summary: Descriptor parsed from the dev server hot file.
Why: Validate the dev server URL before it is concatenated into tags.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from .errors import ParseError


@dataclass(frozen=True, slots=True)
class HotFile:
    """Contents of ``hot.json`` written by the dev server."""

    url: str

    @classmethod
    def from_json(cls, payload: object, *, source: str = "hot.json") -> HotFile:
        if not isinstance(payload, Mapping):
            raise ParseError(source, "hot file must be a JSON object")
        url = payload.get("url")
        if not isinstance(url, str) or not url:
            raise ParseError(source, 'hot file is missing the "url" field')
        return cls(url=url)


__all__ = ["HotFile"]
