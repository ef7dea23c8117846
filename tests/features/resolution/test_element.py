"""Tests for ``ViteElement`` serialization."""

from __future__ import annotations

from vitetags import ViteElement


def test_link_is_self_closing() -> None:
    element = ViteElement(tag="link", attributes={"rel": "stylesheet", "href": "/app.css"})

    assert str(element) == '<link rel="stylesheet" href="/app.css"/>'
    assert element.kind == "style"


def test_script_joins_children_with_newlines() -> None:
    element = ViteElement(
        tag="script",
        attributes={"type": "module"},
        children=("", "console.log(1)", ""),
    )

    assert str(element) == '<script type="module">\nconsole.log(1)\n</script>'
    assert element.kind == "script"


def test_empty_script() -> None:
    element = ViteElement(tag="script", attributes={"type": "module", "src": "/app.js"})

    assert str(element) == '<script type="module" src="/app.js"></script>'


def test_to_dict_exposes_canonical_shape() -> None:
    element = ViteElement(tag="script", attributes={"src": "/a.js"}, children=("x",))

    assert element.to_dict() == {
        "tag": "script",
        "attributes": {"src": "/a.js"},
        "children": ["x"],
    }


def test_attributes_can_be_adjusted_before_rendering() -> None:
    element = ViteElement(tag="script", attributes={"type": "module", "src": "/a.js"})

    element.attributes["nonce"] = "abc"

    assert str(element) == '<script type="module" src="/a.js" nonce="abc"></script>'
