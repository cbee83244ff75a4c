"""The parsed document and the tree helpers every pass leans on."""

import re
from dataclasses import dataclass, field

from lxml import etree as ET

from .errors import InvalidStyleValue
from .styles import dedupe, parse_style
from .tables import RAW_TEXT_ELEMENTS, SVG_NS, XLINK_NS, XML_NS

URL_REF_RE = re.compile(r"url\(\s*['\"]?#([^)'\"\s]+)['\"]?\s*\)")
HASH_REF_RE = re.compile(r"^#([A-Za-z_][\w.:-]*)$")
HASH_MENTION_RE = re.compile(r"#([A-Za-z_][\w-]*)")
TIMING_REF_RE = re.compile(r"^\s*([A-Za-z_][\w:-]*)\.[A-Za-z]")
PREFIX_MENTION_RE = re.compile(r"([A-Za-z_][\w.-]*)(?:\\?:|\|)(?=[A-Za-z_*])")


@dataclass
class Document:
    """An SVG document: the lxml root plus what sits around it."""

    root: ET._Element
    xml_declaration: str | None = None
    doctype: str | None = None
    prolog: list = field(default_factory=list)
    epilog: list = field(default_factory=list)

    def iter_elements(self):
        """Elements of the tree in document order, root first."""
        return self.root.iter(ET.Element)


# --- names -------------------------------------------------------------------

def localname(tag: str) -> str:
    if "}" in tag:
        return tag.split("}", 1)[1]
    return tag


def namespace_of(tag: str) -> str | None:
    if tag.startswith("{"):
        return tag[1:].split("}", 1)[0]
    return None


def is_element(node) -> bool:
    return isinstance(node.tag, str)


def is_svg(elem, *names: str) -> bool:
    """True for an element in the SVG namespace (or none) with one of ``names``."""
    if not is_element(elem) or namespace_of(elem.tag) not in (None, SVG_NS):
        return False
    return not names or localname(elem.tag) in names


def attribute_qname(elem, key: str) -> str:
    """The attribute name as it is written out, e.g. ``xlink:href``."""
    uri = namespace_of(key)
    if uri is None:
        return key
    if uri == XML_NS:
        return "xml:" + localname(key)
    for prefix, value in elem.nsmap.items():
        if prefix is not None and value == uri:
            return f"{prefix}:{localname(key)}"
    raise AssertionError(f"no prefix in scope for attribute namespace {uri}")


def get_href(elem) -> str | None:
    """``href`` or the legacy ``xlink:href``."""
    value = elem.get("href")
    if value is None:
        value = elem.get(f"{{{XLINK_NS}}}href")
    return value


# --- mutation ------------------------------------------------------------------

def remove_node(node) -> None:
    """Detach ``node`` keeping the text that followed it in place."""
    parent = node.getparent()
    if parent is None:
        return
    tail = node.tail
    if tail:
        previous = node.getprevious()
        if previous is not None:
            previous.tail = (previous.tail or "") + tail
        else:
            parent.text = (parent.text or "") + tail
    parent.remove(node)


def replace_with_child(elem, child) -> None:
    """Put ``child`` where ``elem`` is; ``elem`` and its other content go away."""
    parent = elem.getparent()
    tail = elem.tail
    parent.insert(parent.index(elem), child)
    child.tail = tail
    parent.remove(elem)


def has_text(elem) -> bool:
    """Non-whitespace character data directly inside ``elem``."""
    if elem.text and elem.text.strip():
        return True
    return any(child.tail and child.tail.strip() for child in elem)


def element_children(elem) -> list:
    return [child for child in elem if is_element(child)]


# --- references ----------------------------------------------------------------

def collect_refs_from_value(value: str, out: set) -> None:
    for match in URL_REF_RE.finditer(value):
        out.add(match.group(1))
    match = HASH_REF_RE.match(value.strip())
    if match:
        out.add(match.group(1))


def collect_referenced_ids(root) -> set:
    """Ids referenced via url(#id), #id links, animation timing or style/script text.

    A script or an ``on*`` event handler can reach any id, so then every id
    counts as referenced.
    """
    used = set()
    scripted = False
    for elem in root.iter(ET.Element):
        for key, value in elem.attrib.items():
            name = localname(key)
            collect_refs_from_value(value, used)
            if name in ("begin", "end"):
                for part in value.split(";"):
                    match = TIMING_REF_RE.match(part)
                    if match:
                        used.add(match.group(1))
            elif name.startswith("on"):
                scripted = True
        if is_svg(elem, *RAW_TEXT_ELEMENTS):
            if localname(elem.tag) == "script":
                scripted = True
            used.update(HASH_MENTION_RE.findall(elem.text or ""))
    if scripted:
        used.update(elem.get("id") for elem in root.iter(ET.Element) if elem.get("id"))
    return used


def has_stylesheet(document: Document) -> bool:
    """A ``<style>`` sheet or an xml-stylesheet instruction can restyle any element."""
    for node in document.prolog:
        if isinstance(node, ET._ProcessingInstruction) and node.target == "xml-stylesheet":
            return True
    for elem in document.root.iter(ET.Element):
        if is_svg(elem, "style") and (elem.text or "").strip():
            return True
    return False


def mentioned_prefixes(root) -> set:
    """Namespace prefixes spelled out in style strings and style/script text."""
    found = set()
    for elem in root.iter(ET.Element):
        style = elem.get("style")
        if style:
            found.update(PREFIX_MENTION_RE.findall(style))
        if is_svg(elem, *RAW_TEXT_ELEMENTS) and elem.text:
            found.update(PREFIX_MENTION_RE.findall(elem.text))
    return found


def declared_namespaces(elem) -> list:
    """``(prefix, uri)`` pairs ``elem`` must declare itself, default namespace first."""
    parent = elem.getparent()
    inherited = parent.nsmap if parent is not None else {}
    own = {prefix: uri for prefix, uri in elem.nsmap.items() if inherited.get(prefix) != uri}
    if namespace_of(elem.tag) is None and {**inherited, **own}.get(None):
        own[None] = ""
    return sorted(own.items(), key=lambda item: (item[0] is not None, item[0] or ""))


# --- properties ------------------------------------------------------------------

def specified_value(elem, name: str) -> str | None:
    """The value ``elem`` itself gives property ``name``: style first, then attribute.

    An inline style that cannot be split stands in, as a whole, for any
    property it mentions.
    """
    style = elem.get("style")
    if style and name in style:
        try:
            declarations = dedupe(parse_style(style))
        except InvalidStyleValue:
            return style
        for decl in declarations:
            if decl.name == name:
                return decl.value
    return elem.get(name)
