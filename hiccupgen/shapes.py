"""Node shape classification shared by the normalizer and serializer."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any


class NodeShape(Enum):
    NULLISH = "nullish"
    ELEMENT = "element"
    COMPONENT = "component"
    CALLABLE = "callable"
    ITERABLE = "iterable"
    SCALAR = "scalar"


def is_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_sequence(value: Any) -> bool:
    """Lists and tuples are the only node-shaped sequences."""

    return isinstance(value, (list, tuple))


def classify(node: Any) -> NodeShape:
    """Decide the shape of a raw or canonical node.

    Sequences are classified by their head slot: a string makes an element,
    a callable makes a component and anything else (including an empty
    sequence) makes a plain iterable of nodes. Strings, bytes and mappings are
    scalars even though they are iterable.
    """

    if node is None:
        return NodeShape.NULLISH
    if is_sequence(node):
        head = node[0] if node else None
        if isinstance(head, str):
            return NodeShape.ELEMENT
        if callable(head):
            return NodeShape.COMPONENT
        return NodeShape.ITERABLE
    if callable(node):
        return NodeShape.CALLABLE
    if isinstance(node, (str, bytes)) or is_mapping(node):
        return NodeShape.SCALAR
    if isinstance(node, Iterable):
        return NodeShape.ITERABLE
    return NodeShape.SCALAR


__all__ = ["NodeShape", "classify", "is_mapping", "is_sequence"]
