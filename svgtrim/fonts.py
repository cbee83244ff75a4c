"""Helpers for font subsetting workflows: which glyphs are used, which faces are loaded."""

import re
from dataclasses import dataclass

from .document import Document, is_svg

FONT_FACE_RE = re.compile(r"@font-face\s*\{([^{}]*)\}", re.IGNORECASE)
URL_RE = re.compile(r"url\(\s*(['\"]?)(.*?)\1\s*\)")


@dataclass(frozen=True)
class FontFaceRef:
    family: str
    url: str
    weight: str | None = None
    style: str | None = None


def extract_text_chars(document: Document) -> set[str]:
    """Characters written directly inside text, tspan and textPath elements."""
    chars: set[str] = set()
    for elem in document.iter_elements():
        if not is_svg(elem, "text", "tspan", "textPath"):
            continue
        chars.update(elem.text or "")
        for child in elem:
            chars.update(child.tail or "")
    return chars


def _first_family(value: str) -> str:
    return value.split(",", 1)[0].strip().strip("\"'")


def _parse_face(block: str) -> FontFaceRef | None:
    fields = {}
    for declaration in block.split(";"):
        name, colon, value = declaration.partition(":")
        if colon:
            fields[name.strip().lower()] = value.strip()
    match = URL_RE.search(fields.get("src", ""))
    if "font-family" not in fields or not match:
        return None
    return FontFaceRef(
        family=_first_family(fields["font-family"]),
        url=match.group(2).strip(),
        weight=fields.get("font-weight"),
        style=fields.get("font-style"),
    )


def extract_font_faces(document: Document) -> list[FontFaceRef]:
    """``@font-face`` rules with a family and a ``src`` url, in document order."""
    faces = []
    for elem in document.iter_elements():
        if is_svg(elem, "style") and elem.text:
            for match in FONT_FACE_RE.finditer(elem.text):
                face = _parse_face(match.group(1))
                if face is not None:
                    faces.append(face)
    return faces


def replace_font_url(document: Document, old_url: str, new_url: str) -> int:
    """Point every ``url(old_url)`` in style sheets at ``new_url``; returns the count."""
    pattern = re.compile(r"url\(\s*(['\"]?)" + re.escape(old_url) + r"\1\s*\)")
    replaced = 0
    for elem in document.iter_elements():
        if is_svg(elem, "style") and elem.text:
            text, count = pattern.subn(lambda _: f"url('{new_url}')", elem.text)
            if count:
                elem.text = text
                replaced += count
    return replaced
