"""Utility helpers for tree file IO and logging."""

from __future__ import annotations

import json
import sys
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import yaml


def read_tree(path: Path) -> Any:
    """Load a raw tree from a JSON or YAML file."""

    text = path.read_text(encoding="utf-8")
    suffix = path.suffix.lower()
    if suffix == ".json":
        return json.loads(text)
    if suffix in (".yaml", ".yml"):
        return yaml.safe_load(text)
    raise ValueError(f"Unsupported tree file type: {path}")


def _materialize(tree: Any) -> Any:
    if isinstance(tree, Iterator):
        return [_materialize(item) for item in tree]
    if isinstance(tree, list):
        return [_materialize(item) for item in tree]
    return tree


def tree_json_dumps(tree: Any) -> str:
    """Serialize a normalized tree as JSON, keeping attribute order, with a trailing newline."""
    return json.dumps(_materialize(tree), ensure_ascii=False, indent=2, default=str) + "\n"


def write_text(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def warn(msg: str) -> None:
    print(msg, file=sys.stderr)
