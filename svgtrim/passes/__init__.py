"""Tree transformations run by the pipeline."""

from .attributes import DefaultChecker, RemoveDefaultAttrs, SortAttributes
from .base import Pass
from .structural import (
    CollapseGroups,
    DropPrologDeclarations,
    RemoveComments,
    RemoveEditorNamespaces,
    RemoveHiddenEmpty,
    RemoveMetadata,
)
from .text import CollapseWhitespace
from .values import MinifyColors, MinifyNumbers, MinifyPaths, MinifyStyles, minify_property

__all__ = [
    "CollapseGroups",
    "CollapseWhitespace",
    "DefaultChecker",
    "DropPrologDeclarations",
    "MinifyColors",
    "MinifyNumbers",
    "MinifyPaths",
    "MinifyStyles",
    "Pass",
    "RemoveComments",
    "RemoveDefaultAttrs",
    "RemoveEditorNamespaces",
    "RemoveHiddenEmpty",
    "RemoveMetadata",
    "SortAttributes",
    "minify_property",
]
