"""Document to compact markup.

lxml's own writer keeps whatever quoting and namespace layout it was
given; here every byte is chosen: double quotes, self-closing empty
elements, minimal escaping and CDATA only where it is shorter.
"""

from lxml import etree as ET

from .document import Document, attribute_qname, declared_namespaces, is_element, is_svg, localname
from .tables import RAW_TEXT_ELEMENTS


def escape_attribute(value: str) -> str:
    return (value.replace("&", "&amp;").replace("<", "&lt;").replace('"', "&quot;")
            .replace("\t", "&#9;").replace("\n", "&#10;").replace("\r", "&#13;"))


def escape_text(text: str) -> str:
    return (text.replace("&", "&amp;").replace("<", "&lt;").replace("]]>", "]]&gt;")
            .replace("\r", "&#13;"))


def _raw_text(text: str) -> str:
    escaped = escape_text(text)
    if "]]>" not in text and "\r" not in text:
        cdata = f"<![CDATA[{text}]]>"
        if len(cdata) < len(escaped):
            return cdata
    return escaped


def _qname(elem) -> str:
    prefix = elem.prefix
    return f"{prefix}:{localname(elem.tag)}" if prefix else localname(elem.tag)


def _write_misc(node, out: list) -> None:
    if isinstance(node, ET._Comment):
        out.append(f"<!--{node.text or ''}-->")
    elif isinstance(node, ET._ProcessingInstruction):
        out.append(f"<?{node.target} {node.text}?>" if node.text else f"<?{node.target}?>")
    else:
        raise AssertionError(f"cannot serialize node {node!r}")


def _write_element(elem, out: list) -> None:
    name = _qname(elem)
    out.append("<" + name)
    for prefix, uri in declared_namespaces(elem):
        out.append(f' xmlns="{escape_attribute(uri)}"' if prefix is None
                   else f' xmlns:{prefix}="{escape_attribute(uri)}"')
    for key, value in elem.items():
        out.append(f' {attribute_qname(elem, key)}="{escape_attribute(value)}"')
    if not len(elem) and not elem.text:
        out.append("/>")
        return
    out.append(">")
    if elem.text:
        out.append(_raw_text(elem.text) if is_svg(elem, *RAW_TEXT_ELEMENTS) else escape_text(elem.text))
    for child in elem:
        if is_element(child):
            _write_element(child, out)
        else:
            _write_misc(child, out)
        if child.tail:
            out.append(escape_text(child.tail))
    out.append(f"</{name}>")


def serialize(document: Document) -> str:
    """Write ``document`` back out as a string."""
    out: list[str] = []
    if document.xml_declaration:
        out.append(document.xml_declaration)
    if document.doctype:
        out.append(document.doctype)
    for node in document.prolog:
        _write_misc(node, out)
    _write_element(document.root, out)
    for node in document.epilog:
        _write_misc(node, out)
    return "".join(out)
