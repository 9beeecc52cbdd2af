"""Tag shorthand parsing and element name constants."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .errors import InvalidTag

SVG_NS = "http://www.w3.org/2000/svg"

TAG_RE = re.compile(r"^([^\s.#]+)(?:#([^\s.#]+))?(?:\.([^\s#]+))?$")

VOID_TAGS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "command",
        "embed",
        "hr",
        "img",
        "input",
        "keygen",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
        # svg shape primitives
        "circle",
        "ellipse",
        "line",
        "path",
        "polygon",
        "polyline",
        "rect",
        "stop",
    }
)


@dataclass(frozen=True)
class TagParts:
    """Result of splitting a ``tag#id.class1.class2`` shorthand."""

    name: str
    id: Optional[str] = None
    classes: Optional[str] = None

    def attrs(self) -> Dict[str, Any]:
        attrs: Dict[str, Any] = {}
        if self.id:
            attrs["id"] = self.id
        if self.classes:
            attrs["class"] = self.classes.replace(".", " ")
        return attrs


def parse_tag(tag: Any) -> TagParts:
    """Split a shorthand tag string, raising InvalidTag when it does not parse."""

    match = TAG_RE.fullmatch(tag) if isinstance(tag, str) else None
    if match is None:
        raise InvalidTag(tag)
    name, tag_id, classes = match.groups()
    return TagParts(name=name, id=tag_id, classes=classes)


def is_void(tag: str) -> bool:
    return tag in VOID_TAGS


__all__ = ["SVG_NS", "TAG_RE", "TagParts", "VOID_TAGS", "is_void", "parse_tag"]
