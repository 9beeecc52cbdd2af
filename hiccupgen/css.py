"""Inline style flattening."""

from __future__ import annotations

from typing import Any, Mapping


def format_css(rules: Mapping[str, Any]) -> str:
    """Flatten ``{"color": "red"}`` into ``"color:red;"`` keeping mapping order."""

    css = [f"{prop}:{value}" for prop, value in rules.items()]
    return ";".join(css) + (";" if css else "")


__all__ = ["format_css"]
