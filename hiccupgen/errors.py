"""Errors raised while normalizing trees."""

from __future__ import annotations

from typing import Any


class InvalidTag(ValueError):
    """Head position of a node is not a usable tag."""

    def __init__(self, tag: Any) -> None:
        super().__init__(f"{tag!r} is not a valid tag name")
        self.tag = tag


__all__ = ["InvalidTag"]
