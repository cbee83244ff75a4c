"""Passes that re-encode attribute values in place."""

import logging

from ..colors import minify_color
from ..document import is_svg, localname
from ..errors import InvalidPathData, InvalidStyleValue
from ..numbers import minify_length, minify_length_list, minify_transform
from ..pathdata import minify_path, minify_points
from ..styles import minify_style
from ..tables import (
    COLOR_PROPERTIES,
    NUMBER_LIST_ATTRIBUTES,
    NUMERIC_ATTRIBUTES,
    PATH_DATA_ATTRIBUTES,
    POINTS_ELEMENTS,
    TRANSFORM_ATTRIBUTES,
)
from .attributes import DefaultChecker
from .base import Pass

logger = logging.getLogger(__name__)

_NUMBER_KEYS = NUMERIC_ATTRIBUTES | NUMBER_LIST_ATTRIBUTES | TRANSFORM_ATTRIBUTES


def minify_number_value(name: str, value: str, options) -> str:
    if name in NUMERIC_ATTRIBUTES:
        minified = minify_length(value, options.precision, options.rounding)
    elif name in NUMBER_LIST_ATTRIBUTES:
        minified = minify_length_list(value, options.precision, options.rounding)
    elif name in TRANSFORM_ATTRIBUTES:
        minified = minify_transform(value, options.precision, options.rounding)
    else:
        return value
    if minified is None:
        logger.debug("keeping %s=%r: not a number", name, value)
        return value
    return minified


def minify_property(name: str, value: str, options) -> str:
    """Shorten one property value by the attribute rules the options enable."""
    if name in COLOR_PROPERTIES:
        return minify_color(value, options.color_tie_break) if options.minify_colors else value
    if options.minify_numbers:
        return minify_number_value(name, value, options)
    return value


def _rewrite(elem, key: str, new: str) -> int:
    if new == elem.get(key):
        return 0
    elem.set(key, new)
    return 1


class MinifyPaths(Pass):
    name = "minify-paths"
    option = "minify_paths"

    def apply(self, document, options):
        changes = 0
        for elem in document.iter_elements():
            if not is_svg(elem):
                continue
            local = localname(elem.tag)
            if local in PATH_DATA_ATTRIBUTES:
                key, encode = PATH_DATA_ATTRIBUTES[local], minify_path
            elif local in POINTS_ELEMENTS:
                key, encode = "points", minify_points
            else:
                continue
            value = elem.get(key)
            if value is None:
                continue
            try:
                changes += _rewrite(elem, key, encode(value, options.precision, options.rounding))
            except InvalidPathData as exc:
                logger.debug("keeping %s on <%s>: %s", key, local, exc)
        return changes


class MinifyNumbers(Pass):
    name = "minify-numbers"
    option = "minify_numbers"

    def apply(self, document, options):
        changes = 0
        for elem in document.iter_elements():
            if not is_svg(elem):
                continue
            for key, value in elem.items():
                if key in _NUMBER_KEYS:
                    changes += _rewrite(elem, key, minify_number_value(key, value, options))
        return changes


class MinifyColors(Pass):
    name = "minify-colors"
    option = "minify_colors"

    def apply(self, document, options):
        changes = 0
        for elem in document.iter_elements():
            if not is_svg(elem):
                continue
            for key, value in elem.items():
                if key in COLOR_PROPERTIES:
                    changes += _rewrite(elem, key, minify_color(value, options.color_tie_break))
        return changes


class MinifyStyles(Pass):
    name = "minify-styles"
    option = "minify_styles"

    def apply(self, document, options):
        checker = DefaultChecker(document) if options.remove_default_attrs else None
        changes = 0
        for elem in document.iter_elements():
            style = elem.get("style")
            if style is None or not is_svg(elem):
                continue
            removable = None
            if checker is not None:
                removable = lambda decl, elem=elem: checker.declaration_removable(elem, decl)
            try:
                minified = minify_style(style, lambda name, value: minify_property(name, value, options),
                                        removable)
            except InvalidStyleValue as exc:
                logger.debug("keeping style %r: %s", style, exc)
                continue
            if minified:
                changes += _rewrite(elem, "style", minified)
            else:
                del elem.attrib["style"]
                changes += 1
        return changes
