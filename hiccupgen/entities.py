"""Entity escaping for text content and attribute values."""

from __future__ import annotations

import re
from types import MappingProxyType

ENTITIES = MappingProxyType(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&apos;",
    }
)

ENTITY_RE = re.compile("[" + re.escape("".join(ENTITIES)) + "]")


def escape(text: str) -> str:
    return ENTITY_RE.sub(lambda match: ENTITIES[match.group(0)], text)


__all__ = ["ENTITIES", "escape"]
