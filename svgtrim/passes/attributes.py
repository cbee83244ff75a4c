"""Default elision and attribute ordering."""

from ..colors import colors_equal
from ..document import (
    attribute_qname,
    collect_referenced_ids,
    get_href,
    has_stylesheet,
    is_svg,
    localname,
    namespace_of,
    specified_value,
)
from ..numbers import lengths_equal, parse_length
from ..tables import (
    ANIMATION_ELEMENTS,
    COLOR_PROPERTIES,
    DEFAULT_ALIASES,
    ELEMENT_DEFAULTS,
    INHERITED_PROPERTIES,
    PROPERTY_DEFAULTS,
    TEMPLATED_ELEMENTS,
)
from .base import Pass


def values_equal(name: str, a: str, b: str) -> bool:
    """Semantic equality: colors decoded, lengths by value, keywords case-insensitively."""
    if name in COLOR_PROPERTIES:
        return colors_equal(a, b)
    if parse_length(a) is not None and parse_length(b) is not None:
        return lengths_equal(a, b)
    return " ".join(a.split()).lower() == " ".join(b.split()).lower()


def is_default(name: str, value: str, default: str) -> bool:
    spellings = {default} | DEFAULT_ALIASES.get(name, frozenset())
    return any(values_equal(name, value, spelling) for spelling in spellings)


class DefaultChecker:
    """Decides whether restating a default can be dropped without visible change.

    Inherited properties are the delicate case: dropping one lets the
    element inherit from its parent, so it is only safe when what it would
    inherit is the default itself. Subtrees that can be instantiated
    elsewhere (anything holding a referenced id) and documents with a style
    sheet keep their inherited properties.
    """

    def __init__(self, document):
        self.styled = has_stylesheet(document)
        self.referenced = collect_referenced_ids(document.root)

    def _reused(self, elem) -> bool:
        if elem.get("id") in self.referenced:
            return True
        return any(ancestor.get("id") in self.referenced for ancestor in elem.iterancestors())

    def inherits_default(self, elem, name: str, default: str) -> bool:
        if self.styled or self._reused(elem):
            return False
        for ancestor in elem.iterancestors():
            value = specified_value(ancestor, name)
            if value is not None:
                return is_default(name, value, default)
        return True

    def attribute_removable(self, elem, key: str) -> bool:
        if namespace_of(key) is not None or not is_svg(elem) or is_svg(elem, *ANIMATION_ELEMENTS):
            return False
        local = localname(elem.tag)
        value = elem.get(key)
        element_defaults = ELEMENT_DEFAULTS.get(local, {})
        if key in element_defaults:
            if local in TEMPLATED_ELEMENTS and get_href(elem) is not None:
                return False
            return is_default(key, value, element_defaults[key])
        default = PROPERTY_DEFAULTS.get(key)
        if default is None or not is_default(key, value, default):
            return False
        if key in INHERITED_PROPERTIES:
            return self.inherits_default(elem, key, default)
        return True

    def declaration_removable(self, elem, decl) -> bool:
        if self.styled or not is_svg(elem):
            return False
        default = PROPERTY_DEFAULTS.get(decl.name)
        if default is None or not is_default(decl.name, decl.value, default):
            return False
        attribute = elem.get(decl.name)
        if attribute is not None and not is_default(decl.name, attribute, default):
            return False
        if decl.name in INHERITED_PROPERTIES:
            return self.inherits_default(elem, decl.name, default)
        return True


def _zero_or_absent(value: str | None) -> bool:
    if value is None:
        return True
    parsed = parse_length(value)
    return parsed is not None and parsed[0] == 0


class RemoveDefaultAttrs(Pass):
    name = "remove-default-attrs"
    option = "remove_default_attrs"

    def apply(self, document, options):
        checker = DefaultChecker(document)
        changes = 0
        for elem in document.iter_elements():
            for key in list(elem.attrib):
                if checker.attribute_removable(elem, key):
                    del elem.attrib[key]
                    changes += 1
            if is_svg(elem, "rect"):
                changes += self._drop_zero_corners(elem)
        return changes

    @staticmethod
    def _drop_zero_corners(elem) -> int:
        # rx and ry stand in for each other, so only a zero pair can go
        rx, ry = elem.get("rx"), elem.get("ry")
        if (rx is None and ry is None) or not (_zero_or_absent(rx) and _zero_or_absent(ry)):
            return 0
        for key in ("rx", "ry"):
            elem.attrib.pop(key, None)
        return (rx is not None) + (ry is not None)


class SortAttributes(Pass):
    name = "sort-attrs"
    option = "sort_attrs"

    def apply(self, document, options):
        changes = 0
        for elem in document.iter_elements():
            items = elem.items()
            ordered = sorted(items, key=lambda item: attribute_qname(elem, item[0]))
            if ordered != items:
                elem.attrib.clear()
                for key, value in ordered:
                    elem.set(key, value)
                changes += 1
        return changes
