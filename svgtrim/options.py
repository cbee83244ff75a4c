"""Minification options and their loaders."""

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field

PASS_TOGGLES = (
    "remove_comments",
    "remove_metadata",
    "remove_editor_namespaces",
    "collapse_groups",
    "remove_hidden_empty",
    "minify_paths",
    "minify_numbers",
    "minify_colors",
    "minify_styles",
    "remove_default_attrs",
    "collapse_whitespace",
    "sort_attrs",
)


class Options(BaseModel):
    """Which passes run and how numbers and colors are re-encoded."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    precision: int = Field(2, ge=0, le=10, description="Decimal places kept for coordinates")
    remove_comments: bool = Field(True, description="Delete comment nodes")
    remove_metadata: bool = Field(True, description="Delete <metadata>, <title> and <desc>")
    remove_editor_namespaces: bool = Field(True, description="Delete editor-specific markup")
    collapse_groups: bool = Field(True, description="Replace single-child groups by their child")
    remove_hidden_empty: bool = Field(True, description="Delete invisible and empty elements")
    minify_paths: bool = Field(True, description="Re-encode path data and point lists")
    minify_numbers: bool = Field(True, description="Round numeric geometry attributes")
    minify_colors: bool = Field(True, description="Shorten color values")
    minify_styles: bool = Field(True, description="Shorten style attributes")
    remove_default_attrs: bool = Field(True, description="Drop attributes equal to their default")
    collapse_whitespace: bool = Field(True, description="Drop insignificant whitespace text")
    sort_attrs: bool = Field(True, description="Sort attributes by name")
    rounding: Literal["half-even", "half-up"] = Field(
        "half-even", description="Rounding rule applied when reducing precision"
    )
    color_tie_break: Literal["hex", "name"] = Field(
        "hex", description="Form kept when a color name and hex code are equally long"
    )

    @classmethod
    def passthrough(cls, **overrides: Any) -> "Options":
        """Options with every pass disabled: parse and re-serialize only."""
        values: dict[str, Any] = {name: False for name in PASS_TOGGLES}
        values.update(overrides)
        return cls(**values)


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML file and return its contents."""
    with open(path) as f:
        return yaml.safe_load(f) or {}


def load_options(path: Path, **overrides: Any) -> Options:
    """Load options from a YAML mapping, with keyword overrides on top.

    A missing file yields the defaults (plus overrides).
    """
    data = load_yaml(path) if path.exists() else {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping of option names to values")
    data.update(overrides)
    return Options(**data)
