"""Declarative markup generation from nested data trees."""

from .entities import escape
from .errors import InvalidTag
from .normalize import normalize_tree
from .serialize import serialize, serialize_tree
from .tags import SVG_NS

__all__ = [
    "InvalidTag",
    "SVG_NS",
    "escape",
    "normalize_tree",
    "serialize",
    "serialize_tree",
]
