"""Helpers for tokenizing fragments and writing XML text."""

from __future__ import annotations

import logging
from xml.sax.saxutils import escape

from bs4 import BeautifulSoup, Tag
from lxml import etree  # type: ignore[import-untyped]

from .errors import MalformedXmlError

logger = logging.getLogger(__name__)

# Characters that attribute-value normalization would otherwise collapse
# into plain spaces.
_ATTR_ENTITIES = {
    '"': "&quot;",
    "\t": "&#9;",
    "\n": "&#10;",
    "\r": "&#13;",
}


def _strict_parser(encoding: str | None) -> etree.XMLParser:
    """Return a non-recovering parser that never touches the network.

    Internal DTD entities are expanded so the re-serialized tree carries
    plain text; external entities are never loaded.
    """

    return etree.XMLParser(
        encoding=encoding,
        recover=False,
        resolve_entities="internal",
        no_network=True,
    )


def parse_fragment(xml: str | bytes) -> Tag:
    """Tokenize an XML fragment and return its root element.

    The fragment is parsed once by a strict ``lxml`` parser since the
    BeautifulSoup XML builder silently repairs broken markup. The validated
    root is written back out as UTF-8, without declaration or DOCTYPE, and
    loaded into BeautifulSoup, which provides the generic node interface the
    decoders walk.

    Args:
        xml: Fragment text, or raw bytes honouring any XML declaration. The
            encoding named in the declaration of ``str`` input is ignored.

    Returns:
        The root element of the fragment.

    Throws:
        MalformedXmlError: If the fragment is not well-formed XML.
    """

    if isinstance(xml, str):
        data, encoding = xml.encode("utf-8"), "utf-8"
    else:
        data, encoding = xml, None

    if not data.strip():
        raise MalformedXmlError("Malformed XML: document is empty")

    try:
        checked = etree.fromstring(data, parser=_strict_parser(encoding))
    except etree.XMLSyntaxError as exc:
        raise MalformedXmlError(f"Malformed XML: {exc}") from exc

    soup = BeautifulSoup(
        etree.tostring(checked, encoding="utf-8"),
        "xml",
        from_encoding="utf-8",
    )
    root = soup.find(True, recursive=False)

    # A well-formed document always has a root element, but guard against
    # builders that drop it.
    if not isinstance(root, Tag):
        raise MalformedXmlError("Malformed XML: no root element")

    logger.debug("Parsed fragment with root <%s>", root.name)
    return root


def child_elements(tag: Tag) -> list[Tag]:
    """Return the immediate child elements of ``tag`` in document order.

    Text, comments and processing instructions are left out.
    """

    return [child for child in tag.children if isinstance(child, Tag)]


def escape_attribute(value: str) -> str:
    """Escape ``value`` for use inside a double-quoted XML attribute."""

    return escape(value, _ATTR_ENTITIES)
