"""Tree normalization: shorthand tags, components and iterable flattening."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Dict, List, Sequence

from .css import format_css
from .shapes import NodeShape, classify, is_mapping
from .tags import parse_tag


def normalize_tree(tree: Any) -> Any:
    """Recursively normalize a raw tree and expand embedded components.

    Accepted node forms::

        ["tag", ...]
        ["tag#id.class1.class2", ...]
        ["tag", {"other": "attrib"}, ...]
        ["tag", {...}, "body", function, ...]
        [function, arg1, arg2, ...]
        [node, node, ...]

    Elements come back as ``[tag, attrs, *children]`` with a fresh attrs dict
    and no ``None`` children. A function in head position is called with the
    remaining slots and must return a new tree (or ``None``). Functions in any
    other position are called without arguments. Plain iterables of nodes
    come back as a one-shot iterator over their normalized members, which
    element bodies splice in as siblings.

    Raises InvalidTag for malformed shorthand tags. Cyclic trees are not
    detected.
    """

    shape = classify(tree)
    if shape is NodeShape.NULLISH:
        return None
    if shape is NodeShape.CALLABLE:
        return normalize_tree(tree())
    if shape is NodeShape.COMPONENT:
        return normalize_tree(tree[0](*tree[1:]))
    if shape is NodeShape.ELEMENT:
        return _normalize_element(tree)
    if shape is NodeShape.ITERABLE:
        children: List[Any] = []
        for item in tree:
            _append_normalized(children, item)
        return iter(children)
    return str(tree)


def _normalize_element(node: Sequence[Any]) -> List[Any]:
    parts = parse_tag(node[0])
    body_start = 1
    explicit: Dict[str, Any] = {}
    if len(node) > 1 and is_mapping(node[1]):
        explicit = dict(node[1])
        body_start = 2

    attrs = {**parts.attrs(), **explicit}
    if is_mapping(attrs.get("style")):
        attrs = {**attrs, "style": format_css(attrs["style"])}

    norm: List[Any] = [parts.name, attrs]
    for child in node[body_start:]:
        _append_normalized(norm, child)
    return norm


def _append_normalized(out: List[Any], node: Any) -> None:
    """Normalize ``node`` into ``out``, dropping None and splicing iterators."""

    if node is None:
        return
    norm = normalize_tree(node)
    if norm is None:
        return
    if isinstance(norm, Iterator):
        out.extend(norm)
    else:
        out.append(norm)


__all__ = ["normalize_tree"]
