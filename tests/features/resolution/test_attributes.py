"""Tests for attribute providers and serialization."""

from __future__ import annotations

import pytest

from vitetags.features.resolution.domain.attributes import (
    AttributeHook,
    StaticAttributes,
    as_attribute_provider,
    make_attributes,
)


class TestMakeAttributes:
    def test_renders_in_insertion_order(self) -> None:
        assert make_attributes({"type": "module", "src": "/app.js"}) == 'type="module" src="/app.js"'

    def test_true_renders_bare_name(self) -> None:
        assert make_attributes({"defer": True, "src": "/a.js"}) == 'defer src="/a.js"'

    def test_false_and_none_are_omitted(self) -> None:
        assert make_attributes({"async": False, "nonce": None, "src": "/a.js"}) == 'src="/a.js"'

    def test_values_are_not_escaped(self) -> None:
        assert make_attributes({"data-x": 'a"b'}) == 'data-x="a"b"'

    def test_numbers_are_stringified(self) -> None:
        assert make_attributes({"tabindex": 0}) == 'tabindex="0"'


class TestProviders:
    def test_static_attributes_ignore_source(self) -> None:
        provider = StaticAttributes({"defer": True})

        assert provider.resolve("app.js", "/app.js") == {"defer": True}
        assert provider.resolve(_src="other.js", _url="/other.js") == {"defer": True}

    def test_hook_receives_source_and_url(self) -> None:
        calls: list[tuple[str, str]] = []

        def hook(src: str, url: str) -> dict[str, str]:
            calls.append((src, url))
            return {"data-src": src}

        provider = AttributeHook(hook)

        assert provider.resolve("app.js", "/assets/app.js") == {"data-src": "app.js"}
        assert calls == [("app.js", "/assets/app.js")]

    def test_as_attribute_provider_wraps_mapping_and_callable(self) -> None:
        assert as_attribute_provider(None) is None
        assert isinstance(as_attribute_provider({"defer": True}), StaticAttributes)
        assert isinstance(as_attribute_provider(lambda src, url: {}), AttributeHook)

        existing = StaticAttributes({})
        assert as_attribute_provider(existing) is existing

    def test_as_attribute_provider_rejects_other_types(self) -> None:
        with pytest.raises(TypeError, match="mapping or a callable"):
            _ = as_attribute_provider(42)  # pyright: ignore[reportArgumentType]
