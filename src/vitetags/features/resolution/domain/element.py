"""
Summary: Tag value object handed to template renderers.
Why: Keep the canonical tag shape separate from its HTML serialization.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Literal, TypeAlias

from .attributes import AttributeValue, make_attributes

TagName: TypeAlias = Literal["script", "link"]


@dataclass(slots=True)
class ViteElement:
    """HTML element describing a script or stylesheet tag.

    Renderers may adjust ``attributes`` before serializing.
    """

    SELF_CLOSING: ClassVar[frozenset[str]] = frozenset({"link"})

    tag: TagName
    attributes: dict[str, AttributeValue] = field(default_factory=dict)
    children: tuple[str, ...] = ()

    @property
    def kind(self) -> Literal["script", "style"]:
        """Return ``style`` for stylesheet links and ``script`` otherwise."""

        return "style" if self.tag == "link" else "script"

    def to_dict(self) -> dict[str, object]:
        """Return the canonical ``{tag, attributes, children}`` shape."""

        return {
            "tag": self.tag,
            "attributes": dict(self.attributes),
            "children": list(self.children),
        }

    def __str__(self) -> str:
        attributes = make_attributes(self.attributes)
        if self.tag in self.SELF_CLOSING:
            return f"<{self.tag} {attributes}/>"
        body = "\n".join(self.children)
        return f"<{self.tag} {attributes}>{body}</{self.tag}>"


__all__ = ["TagName", "ViteElement"]
