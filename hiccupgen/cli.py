"""Command-line interface for hiccupgen."""

import argparse
import sys
from pathlib import Path
from typing import Any, Iterable, Optional

import yaml

from .build import build_manifest
from .io_utils import read_tree, tree_json_dumps, write_text
from .normalize import normalize_tree
from .serialize import serialize


def _load_tree(path: Path) -> Any:
    try:
        return read_tree(path)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        raise SystemExit(f"Invalid tree file {path}: {exc}") from exc


def _normalize(path: Path) -> Any:
    tree = _load_tree(path)
    try:
        return normalize_tree(tree)
    except ValueError as exc:
        raise SystemExit(f"Invalid tree in {path}: {exc}") from exc


def _emit(output: str, out: Optional[str]) -> None:
    if out:
        write_text(Path(out), output)
    else:
        sys.stdout.write(output)


def _handle_normalize(args: argparse.Namespace) -> None:
    norm = _normalize(Path(args.tree))
    _emit(tree_json_dumps(norm), args.out)


def _handle_render(args: argparse.Namespace) -> None:
    norm = _normalize(Path(args.tree))
    _emit(serialize(norm, args.escape) + "\n", args.out)


def _handle_build(args: argparse.Namespace) -> None:
    out_root = Path(args.out) if args.out else None
    for path in build_manifest(Path(args.manifest), out_root):
        print(path)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render data-only markup trees.")
    subparsers = parser.add_subparsers(dest="command")

    normalize_parser = subparsers.add_parser(
        "normalize",
        help="Print the canonical form of a tree.",
        description="Resolve shorthand tags and write the canonical tree as JSON.",
    )
    normalize_parser.add_argument("tree", help="Path to a .json/.yaml tree file.")
    normalize_parser.add_argument("--out", help="Write to this file instead of stdout.")
    normalize_parser.set_defaults(func=_handle_normalize)

    render_parser = subparsers.add_parser(
        "render",
        help="Render a tree to markup.",
        description="Normalize a tree and serialize it as an HTML/SVG/XML fragment.",
    )
    render_parser.add_argument("tree", help="Path to a .json/.yaml tree file.")
    render_parser.add_argument(
        "--escape",
        action="store_true",
        help="Escape reserved markup characters in text and attribute values.",
    )
    render_parser.add_argument("--out", help="Write to this file instead of stdout.")
    render_parser.set_defaults(func=_handle_render)

    manifest_parser = subparsers.add_parser(
        "build",
        help="Render every fragment listed in a manifest.",
        description="Render manifest fragments, optionally wrapped in Jinja layouts.",
    )
    manifest_parser.add_argument("manifest", help="Path to the render manifest YAML.")
    manifest_parser.add_argument(
        "--out",
        help="Directory to write rendered output (default: dist/ next to the manifest).",
    )
    manifest_parser.set_defaults(func=_handle_build)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


__all__ = ["build_parser", "main"]


if __name__ == "__main__":
    main()
