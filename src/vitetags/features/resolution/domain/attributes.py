"""
Summary: Attribute providers and HTML attribute serialization.
Why: Keep per-tag attribute hooks typed instead of branching on runtime values.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import TypeAlias, final

AttributeValue: TypeAlias = str | int | float | bool | None
Attributes: TypeAlias = Mapping[str, AttributeValue]
AttributeCallback: TypeAlias = Callable[[str, str], Attributes]


@final
@dataclass(frozen=True, slots=True)
class StaticAttributes:
    """Attributes applied unchanged to every tag of one kind."""

    values: Mapping[str, AttributeValue] = field(default_factory=dict)

    def resolve(self, _src: str, _url: str) -> dict[str, AttributeValue]:
        return dict(self.values)


@final
@dataclass(frozen=True, slots=True)
class AttributeHook:
    """Attributes computed from the asset source path and its resolved URL."""

    func: AttributeCallback

    def resolve(self, src: str, url: str) -> dict[str, AttributeValue]:
        return dict(self.func(src, url))


AttributeProvider: TypeAlias = StaticAttributes | AttributeHook


def as_attribute_provider(
    value: AttributeProvider | Attributes | AttributeCallback | None,
) -> AttributeProvider | None:
    """Wrap a plain mapping or callable into an attribute provider.

    Args:
        value: Provider, mapping, callable or ``None``.

    Returns:
        AttributeProvider | None: Tagged provider, or ``None`` when nothing is configured.

    Raises:
        TypeError: If ``value`` is neither a mapping nor a callable.
    """

    if value is None or isinstance(value, (StaticAttributes, AttributeHook)):
        return value
    if isinstance(value, Mapping):
        return StaticAttributes(dict(value))
    if callable(value):
        return AttributeHook(value)
    raise TypeError(
        f"Attribute provider must be a mapping or a callable, got {type(value).__name__}"
    )


def make_attributes(attributes: Attributes) -> str:
    """Serialize attributes in insertion order.

    ``True`` renders a bare attribute name, ``False`` and ``None`` drop the
    attribute. Values are not escaped.
    """

    parts: list[str] = []
    for name, value in attributes.items():
        if value is None or value is False:
            continue
        if value is True:
            parts.append(name)
            continue
        parts.append(f'{name}="{value}"')
    return " ".join(parts)


__all__ = [
    "AttributeCallback",
    "AttributeHook",
    "AttributeProvider",
    "AttributeValue",
    "Attributes",
    "StaticAttributes",
    "as_attribute_provider",
    "make_attributes",
]
