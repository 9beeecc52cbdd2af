"""Pydantic models for render manifests."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class FragmentSpec(BaseModel):
    """Entry in the ``fragments`` list of a render manifest."""

    name: str = Field(..., description="Unique identifier for the fragment.")
    source: str = Field(
        ..., description="Tree file (.json, .yaml or .yml) relative to the manifest."
    )
    output: Optional[str] = Field(
        None,
        description="Output path relative to the build directory; defaults to <name>.html.",
    )
    escape: bool = Field(
        False, description="Escape reserved markup characters in text and attributes."
    )
    template: Optional[str] = Field(
        None, description="Optional Jinja layout that receives the fragment as `content`."
    )
    title: Optional[str] = Field(None, description="Title exposed to the layout.")
    context: Dict[str, Any] = Field(
        default_factory=dict,
        description="Extra variables passed to the layout template.",
    )

    model_config = ConfigDict(populate_by_name=True)

    @property
    def output_path(self) -> str:
        return self.output or f"{self.name}.html"


class RenderManifest(BaseModel):
    """Schema for a render manifest YAML file."""

    templates_dir: Optional[str] = Field(
        None,
        alias="templates",
        description="Directory with layout templates, relative to the manifest.",
    )
    fragments: List[FragmentSpec] = Field(
        default_factory=list, description="Fragments rendered by the build."
    )

    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode="after")
    def _unique_names(self) -> "RenderManifest":
        seen: set[str] = set()
        for fragment in self.fragments:
            if fragment.name in seen:
                raise ValueError(f"duplicate fragment name: {fragment.name}")
            seen.add(fragment.name)
        return self


__all__ = ["FragmentSpec", "RenderManifest"]
