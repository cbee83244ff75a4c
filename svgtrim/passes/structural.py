"""Passes that delete or restructure nodes."""

import logging

from lxml import etree as ET

from ..document import (
    collect_referenced_ids,
    declared_namespaces,
    element_children,
    has_stylesheet,
    has_text,
    is_element,
    is_svg,
    localname,
    mentioned_prefixes,
    namespace_of,
    remove_node,
    replace_with_child,
    specified_value,
)
from ..errors import InvalidStyleValue
from ..numbers import parse_length
from ..styles import parse_style, serialize_style
from ..tables import (
    ANIMATION_ELEMENTS,
    EDITOR_NAMESPACES,
    EDITOR_STYLE_PREFIXES,
    METADATA_ELEMENTS,
    REMOVABLE_EMPTY_CONTAINERS,
    RENDERABLE_ELEMENTS,
)
from .base import Pass

logger = logging.getLogger(__name__)


class DropPrologDeclarations(Pass):
    name = "drop-prolog"

    def apply(self, document, options):
        changes = (document.xml_declaration is not None) + (document.doctype is not None)
        document.xml_declaration = None
        document.doctype = None
        return changes


class RemoveComments(Pass):
    name = "remove-comments"
    option = "remove_comments"

    def apply(self, document, options):
        comments = list(document.root.iter(ET.Comment))
        for comment in comments:
            remove_node(comment)
        changes = len(comments)
        for nodes in (document.prolog, document.epilog):
            kept = [node for node in nodes if not isinstance(node, ET._Comment)]
            changes += len(nodes) - len(kept)
            nodes[:] = kept
        return changes


class RemoveMetadata(Pass):
    name = "remove-metadata"
    option = "remove_metadata"

    def apply(self, document, options):
        found = [elem for elem in document.iter_elements()
                 if elem is not document.root and is_svg(elem, *METADATA_ELEMENTS)]
        for elem in found:
            remove_node(elem)
        return len(found)


class RemoveEditorNamespaces(Pass):
    """Drop markup only editors read, then namespace declarations left unused."""

    name = "remove-editor-namespaces"
    option = "remove_editor_namespaces"

    def apply(self, document, options):
        root = document.root
        changes = 0
        for elem in list(root.iter(ET.Element)):
            if namespace_of(elem.tag) in EDITOR_NAMESPACES:
                if elem is not root:
                    remove_node(elem)
                    changes += 1
                continue
            for key in list(elem.attrib):
                if namespace_of(key) in EDITOR_NAMESPACES:
                    del elem.attrib[key]
                    changes += 1
            style = elem.get("style")
            if style and any(prefix in style for prefix in EDITOR_STYLE_PREFIXES):
                changes += self._strip_editor_declarations(elem, style)

        before = _count_declarations(root)
        ET.cleanup_namespaces(root, keep_ns_prefixes=sorted(mentioned_prefixes(root)))
        return changes + before - _count_declarations(root)

    @staticmethod
    def _strip_editor_declarations(elem, style: str) -> int:
        try:
            declarations = parse_style(style)
        except InvalidStyleValue as exc:
            logger.debug("leaving style %r alone: %s", style, exc)
            return 0
        kept = [decl for decl in declarations
                if decl.raw is not None or not decl.name.startswith(EDITOR_STYLE_PREFIXES)]
        if len(kept) == len(declarations):
            return 0
        if kept:
            elem.set("style", serialize_style(kept))
        else:
            del elem.attrib["style"]
        return len(declarations) - len(kept)


def _count_declarations(root) -> int:
    return sum(len(declared_namespaces(elem)) for elem in root.iter(ET.Element))


class CollapseGroups(Pass):
    """Replace a bare group holding a single element by that element."""

    name = "collapse-groups"
    option = "collapse_groups"

    def apply(self, document, options):
        # selectors in a style sheet can depend on the group structure
        if has_stylesheet(document):
            return 0
        referenced = collect_referenced_ids(document.root)
        changes = 0
        for elem in reversed(list(document.iter_elements())):
            if not self._collapsible(elem, referenced):
                continue
            child = elem[0]
            if elem.getparent() is None:
                elem.remove(child)
                child.tail = None
                document.root = child
            else:
                replace_with_child(elem, child)
            changes += 1
        return changes

    @staticmethod
    def _collapsible(elem, referenced: set) -> bool:
        if not is_svg(elem, "g"):
            return False
        parent = elem.getparent()
        if parent is not None and is_svg(parent, "switch"):
            return False
        if len(elem) != 1 or not is_element(elem[0]) or has_text(elem):
            return False
        for key in elem.attrib:
            if key != "id" or elem.get("id") in referenced:
                return False
        return True


def _is_zero(value: str | None) -> bool:
    if value is None:
        return False
    parsed = parse_length(value)
    return parsed is not None and parsed[0] == 0


class RemoveHiddenEmpty(Pass):
    """Delete what never renders: hidden elements, zero-area shapes and empty containers."""

    name = "remove-hidden-empty"
    option = "remove_hidden_empty"

    def apply(self, document, options):
        root = document.root
        styled = has_stylesheet(document)
        referenced = collect_referenced_ids(root)
        elements = list(root.iter(ET.Element))
        protected = set()
        for elem in elements:
            if elem.get("id") in referenced:
                protected.add(elem)
                protected.update(elem.iterancestors())

        changes = 0
        for elem in reversed(elements):
            if elem is root or elem in protected:
                continue
            invisible = not styled and (self._is_hidden(elem) or self._is_zero_area(elem))
            if invisible or self._is_empty_container(elem):
                remove_node(elem)
                changes += 1
        return changes

    @staticmethod
    def _is_animated(elem) -> bool:
        return any(is_svg(node, *ANIMATION_ELEMENTS) for node in elem.iter(ET.Element))

    def _is_hidden(self, elem) -> bool:
        if not is_svg(elem, *RENDERABLE_ELEMENTS) or self._is_animated(elem):
            return False
        display = specified_value(elem, "display")
        if display is not None and display.strip().lower() == "none":
            return True
        opacity = specified_value(elem, "opacity")
        if opacity is not None and parse_length(opacity) == (0, ""):
            return True
        visibility = specified_value(elem, "visibility")
        if visibility is not None and visibility.strip().lower() in ("hidden", "collapse"):
            # a descendant may turn itself visible again
            return not any(specified_value(node, "visibility") is not None
                           for node in elem.iterdescendants(ET.Element))
        return False

    def _is_zero_area(self, elem) -> bool:
        if not is_svg(elem) or self._is_animated(elem):
            return False
        local = localname(elem.tag)
        if local == "rect":
            return _is_zero(specified_value(elem, "width")) or _is_zero(specified_value(elem, "height"))
        if local == "circle":
            return _is_zero(specified_value(elem, "r"))
        if local == "ellipse":
            return _is_zero(specified_value(elem, "rx")) or _is_zero(specified_value(elem, "ry"))
        if local == "path":
            return not (specified_value(elem, "d") or "").strip()
        if local in ("polyline", "polygon"):
            return not (elem.get("points") or "").strip()
        return False

    @staticmethod
    def _is_empty_container(elem) -> bool:
        if not is_svg(elem, *REMOVABLE_EMPTY_CONTAINERS) or len(elem) or has_text(elem):
            return False
        if localname(elem.tag) == "g":
            filter_value = specified_value(elem, "filter")
            if filter_value is not None and filter_value.strip() != "none":
                return False
        return True
