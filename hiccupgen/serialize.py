"""Markup serialization of normalized trees."""

from __future__ import annotations

from typing import Any, Mapping

from .entities import escape as escape_entities
from .normalize import normalize_tree
from .shapes import NodeShape, classify, is_mapping
from .tags import is_void


def serialize_tree(tree: Any, escape: bool = False) -> str:
    """Normalize ``tree`` and serialize it as an HTML/SVG/XML fragment."""

    return serialize(normalize_tree(tree), escape)


def serialize(tree: Any, escape: bool = False) -> str:
    """Recursively serialize a tree that is assumed to be normalized already.

    Raw input is rendered on a best-effort basis: a non-mapping slot 1 is
    ignored, components are called with their sibling slots and any value
    without a node shape is string-converted.
    """

    shape = classify(tree)
    if shape is NodeShape.NULLISH:
        return ""
    if shape is NodeShape.ELEMENT:
        return _serialize_element(tree, escape)
    if shape is NodeShape.ITERABLE:
        return "".join(serialize(item, escape) for item in tree)
    if shape is NodeShape.CALLABLE:
        return serialize(tree(), escape)
    if shape is NodeShape.COMPONENT:
        return serialize(tree[0](*tree[1:]), escape)
    text = str(tree)
    return escape_entities(text) if escape else text


def _serialize_element(node: Any, escape: bool) -> str:
    tag = node[0]
    attrs = node[1] if len(node) > 1 and is_mapping(node[1]) else {}
    head = f"<{tag}{_render_attrs(attrs, escape)}"
    if len(node) > 2:
        body = "".join(serialize(child, escape) for child in node[2:])
        return f"{head}>{body}</{tag}>"
    if is_void(tag):
        return f"{head}/>"
    return f"{head}></{tag}>"


def _render_attrs(attrs: Mapping[str, Any], escape: bool) -> str:
    parts = []
    for name, value in attrs.items():
        if value is None or value is False:
            continue
        if value is True:
            parts.append(f" {name}")
            continue
        text = str(value)
        parts.append(f' {name}="{escape_entities(text) if escape else text}"')
    return "".join(parts)


__all__ = ["serialize", "serialize_tree"]
