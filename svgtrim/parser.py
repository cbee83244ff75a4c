"""Text to Document, via lxml."""

import logging
import re

from lxml import etree as ET

from .document import Document
from .errors import MalformedMarkup

logger = logging.getLogger(__name__)

XML_DECLARATION_RE = re.compile(r"^\ufeff?(<\?xml\s.*?\?>)", re.DOTALL)
# lxml appends the location to its messages; MalformedMarkup adds its own.
LXML_POSITION_RE = re.compile(r",\s*line \d+, column \d+\s*$")


def _make_parser(encoding: str | None) -> ET.XMLParser:
    return ET.XMLParser(
        encoding=encoding,
        remove_blank_text=False,
        remove_comments=False,
        remove_pis=False,
        strip_cdata=True,
        load_dtd=False,
        no_network=True,
        huge_tree=False,
    )


def _offset_of(text: str, line: int | None, column: int | None) -> int | None:
    if text is None or not line:
        return None
    lines = text.split("\n")
    if line > len(lines):
        return len(text)
    offset = sum(len(part) + 1 for part in lines[:line - 1])
    return min(offset + max((column or 1) - 1, 0), len(text))


def parse_svg(source: str | bytes) -> Document:
    """Parse SVG markup into a Document.

    ``str`` input is taken as already decoded, whatever its declaration says;
    ``bytes`` are decoded by lxml from the BOM or declaration.
    """
    if isinstance(source, str):
        text = source
        data = source.encode("utf-8")
        parser = _make_parser("utf-8")
    else:
        text = None
        data = bytes(source)
        parser = _make_parser(None)

    if not data.strip():
        raise MalformedMarkup("document is empty", 1, 1, 0)

    try:
        root = ET.fromstring(data, parser)
    except ET.XMLSyntaxError as exc:
        line, column = exc.position if exc.position else (None, None)
        message = LXML_POSITION_RE.sub("", exc.msg or str(exc))
        raise MalformedMarkup(message, line, column, _offset_of(text, line, column)) from exc

    for entity in root.iter(ET.Entity):
        raise MalformedMarkup(f"undefined entity {entity.text}", entity.sourceline, None,
                              _offset_of(text, entity.sourceline, None))

    head = text if text is not None else data[:256].decode("utf-8", "replace")
    match = XML_DECLARATION_RE.match(head)
    docinfo = root.getroottree().docinfo
    document = Document(
        root=root,
        xml_declaration=match.group(1) if match else None,
        doctype=docinfo.doctype or None,
        prolog=list(reversed(list(root.itersiblings(preceding=True)))),
        epilog=list(root.itersiblings()),
    )
    logger.debug("parsed <%s> with %d prolog and %d epilog nodes",
                 root.tag, len(document.prolog), len(document.epilog))
    return document
