"""Build utilities for rendering manifest fragments to files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List

import yaml
from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape
from markupsafe import Markup
from pydantic import ValidationError

from .io_utils import read_tree, warn, write_text
from .models import FragmentSpec, RenderManifest
from .serialize import serialize_tree


@dataclass
class BuildContext:
    """Configuration for building the fragments of one manifest."""

    manifest_root: Path
    out_root: Path
    templates_dir: Path | None = None

    @property
    def shared_templates_dir(self) -> Path:
        """Directory containing layouts shipped with the package."""

        return Path(__file__).parent / "templates"

    def source_path(self, fragment: FragmentSpec) -> Path:
        return self.manifest_root / fragment.source

    def output_path(self, fragment: FragmentSpec) -> Path:
        return self.out_root / fragment.output_path

    def jinja_env(self) -> Environment:
        """Create a Jinja environment over the manifest and shared layouts."""

        template_dirs = [self.shared_templates_dir]
        if self.templates_dir is not None:
            template_dirs.insert(0, self.templates_dir)
        return Environment(
            loader=FileSystemLoader(template_dirs),
            autoescape=select_autoescape(["html", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )


def load_manifest(path: Path) -> RenderManifest:
    """Load and validate a render manifest."""

    if not path.exists():
        raise FileNotFoundError(f"Manifest not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        return RenderManifest.model_validate(data)
    except (yaml.YAMLError, ValidationError) as exc:
        raise SystemExit(f"Invalid manifest {path}: {exc}") from exc


def context_for_manifest(
    manifest_path: Path, manifest: RenderManifest, out_root: Path | None = None
) -> BuildContext:
    manifest_root = manifest_path.parent
    templates_dir = None
    if manifest.templates_dir:
        templates_dir = manifest_root / manifest.templates_dir
    return BuildContext(
        manifest_root=manifest_root,
        out_root=out_root or manifest_root / "dist",
        templates_dir=templates_dir,
    )


def render_fragment(fragment: FragmentSpec, ctx: BuildContext) -> str:
    """Render one fragment, wrapping it in its layout when one is configured."""

    source = ctx.source_path(fragment)
    try:
        tree = read_tree(source)
        html = serialize_tree(tree, fragment.escape)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        # InvalidTag and JSONDecodeError are ValueErrors too
        raise SystemExit(f"Invalid tree file {source}: {exc}") from exc

    if not html:
        warn(f"[build] fragment '{fragment.name}' rendered empty")

    if fragment.template is None:
        return html
    template = ctx.jinja_env().get_template(fragment.template)
    return template.render(
        **fragment.context,
        content=Markup(html),
        name=fragment.name,
        title=fragment.title or fragment.name,
    )


def build_fragment(fragment: FragmentSpec, ctx: BuildContext) -> Path:
    return write_text(ctx.output_path(fragment), render_fragment(fragment, ctx))


def build_manifest(manifest_path: Path, out_root: Path | None = None) -> List[Path]:
    """Render every fragment of a manifest and return the written paths."""

    manifest = load_manifest(manifest_path)
    ctx = context_for_manifest(manifest_path, manifest, out_root)
    return [build_fragment(fragment, ctx) for fragment in manifest.fragments]


__all__ = [
    "BuildContext",
    "build_fragment",
    "build_manifest",
    "context_for_manifest",
    "load_manifest",
    "render_fragment",
]
