"""Whitespace in character data."""

import re

from ..document import is_element, is_svg, localname
from ..tables import RAW_TEXT_ELEMENTS, TEXT_CONTENT_ELEMENTS, XML_NS
from .base import Pass

XML_SPACE = f"{{{XML_NS}}}space"
WHITESPACE_RUN_RE = re.compile(r"[ \t\r\n]+")


def _collapse_run(match) -> str:
    # A run of bare line breaks renders as nothing under SVG 1.1 rules and
    # as one space under CSS rules; keeping one newline satisfies both.
    run = match.group(0)
    return " " if (" " in run or "\t" in run) else "\n"


def _mode(elem, inherited: str) -> str:
    space = elem.get(XML_SPACE)
    if space == "preserve" or (inherited == "keep" and space != "default"):
        return "keep"
    if not is_svg(elem):
        return "keep"
    local = localname(elem.tag)
    if local in RAW_TEXT_ELEMENTS:
        return "strip"
    if local == "foreignObject":
        return "keep"
    if local in TEXT_CONTENT_ELEMENTS or inherited == "text":
        return "text"
    return "drop"


def _fix(text: str | None, mode: str) -> str | None:
    if text is None or mode == "keep":
        return text
    if mode == "strip":
        return text.strip() or None
    if mode == "drop":
        return text if text.strip() else None
    return WHITESPACE_RUN_RE.sub(_collapse_run, text)


class CollapseWhitespace(Pass):
    """Drop whitespace that does not render; squeeze it where it does."""

    name = "collapse-whitespace"
    option = "collapse_whitespace"

    def apply(self, document, options):
        return self._walk(document.root, "drop")

    def _walk(self, elem, inherited: str) -> int:
        mode = _mode(elem, inherited)
        changes = 0
        fixed = _fix(elem.text, mode)
        if fixed != elem.text:
            elem.text = fixed
            changes += 1
        for child in elem:
            fixed = _fix(child.tail, mode)
            if fixed != child.tail:
                child.tail = fixed
                changes += 1
            if is_element(child):
                changes += self._walk(child, mode)
        return changes
