"""Inline ``style`` declaration blocks."""

import re
from dataclasses import dataclass
from typing import Callable

from .errors import InvalidStyleValue

IMPORTANT_RE = re.compile(r"\s*!\s*important\s*$", re.IGNORECASE)


@dataclass
class Declaration:
    name: str
    value: str
    important: bool = False
    raw: str | None = None      # chunk without a colon, kept verbatim

    def __str__(self) -> str:
        if self.raw is not None:
            return self.raw
        return f"{self.name}:{self.value}{'!important' if self.important else ''}"


def split_declarations(text: str) -> list[str]:
    """Split on ``;`` outside quotes and parentheses."""
    if "/*" in text:
        raise InvalidStyleValue("comments in style attribute")
    chunks, current = [], []
    quote = None
    depth = 0
    for char in text:
        if quote:
            if char == quote:
                quote = None
        elif char in "\"'":
            quote = char
        elif char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth < 0:
                raise InvalidStyleValue("unbalanced parenthesis")
        elif char == ";" and depth == 0:
            chunks.append("".join(current))
            current = []
            continue
        current.append(char)
    if quote or depth:
        raise InvalidStyleValue("unterminated string or parenthesis")
    chunks.append("".join(current))
    return [chunk.strip() for chunk in chunks if chunk.strip()]


def parse_style(text: str) -> list[Declaration]:
    out = []
    for chunk in split_declarations(text):
        name, colon, value = chunk.partition(":")
        if not colon or not name.strip():
            out.append(Declaration("", "", raw=chunk))
            continue
        name = name.strip()
        if not name.startswith("--"):
            name = name.lower()
        value, count = IMPORTANT_RE.subn("", value)
        out.append(Declaration(name, value.strip(), important=bool(count)))
    return out


def serialize_style(declarations: list[Declaration]) -> str:
    return ";".join(str(decl) for decl in declarations)


def dedupe(declarations: list[Declaration]) -> list[Declaration]:
    """Keep the declaration that wins for each property, in its own position.

    Later declarations win, except that ``!important`` beats a normal one.
    """
    winners: dict[str, int] = {}
    for index, decl in enumerate(declarations):
        if decl.raw is not None:
            continue
        current = winners.get(decl.name)
        if current is None or decl.important or not declarations[current].important:
            winners[decl.name] = index
    keep = set(winners.values())
    return [decl for index, decl in enumerate(declarations)
            if decl.raw is not None or index in keep]


def minify_style(text: str,
                 minify_value: Callable[[str, str], str] | None = None,
                 removable: Callable[[Declaration], bool] | None = None) -> str:
    """Shorten a declaration block.

    ``minify_value(name, value)`` rewrites single values; ``removable(decl)``
    says whether a declaration can go (e.g. it restates a default). Raises
    InvalidStyleValue when the block cannot be split safely.
    """
    declarations = dedupe(parse_style(text))
    out = []
    for decl in declarations:
        if decl.raw is None:
            if minify_value is not None:
                decl.value = minify_value(decl.name, decl.value)
            if removable is not None and removable(decl):
                continue
        out.append(decl)
    return serialize_style(out)
