"""Markup parsing helpers built on BeautifulSoup.

The helpers wrap BeautifulSoup's CSS selector support behind a small set of
functions that always return explicit optional values, so extraction code has
to state its fallback at every call site instead of chaining attribute access
on possibly missing tags.
"""

from typing import Dict, List, Optional, Union

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PageElement, PreformattedString, Tag

from pepperdeals.core.exceptions import InvalidDocumentError


# A parsed page; BeautifulSoup is itself the root Tag of the tree
Document = BeautifulSoup
Node = Tag

PARSER = "html.parser"


def parse(html: Union[str, bytes]) -> Document:
    """Parse an HTML document into a navigable tree.

    The stdlib tree builder is lenient: unbalanced tags, stray closing tags
    and missing attributes all produce a best-effort tree instead of an error.

    Args:
        html: Raw HTML document (text or UTF-8 bytes)

    Returns:
        Parsed document

    Raises:
        InvalidDocumentError: If html is not a string or bytes
    """
    if not isinstance(html, (str, bytes)):
        raise InvalidDocumentError(html)
    return BeautifulSoup(html, PARSER)


def query_all(node: Optional[Tag], selector: str) -> List[Node]:
    """Return every element under node matching selector, in document order."""
    if node is None:
        return []
    return list(node.select(selector))


def query_first(node: Optional[Tag], selector: str) -> Optional[Node]:
    """Return the first element under node matching selector, or None."""
    if node is None:
        return None
    return node.select_one(selector)


def attributes(node: Optional[Tag]) -> Dict[str, str]:
    """Return the node's attributes as plain strings.

    Multi-valued attributes such as ``class`` are joined with spaces.
    """
    if node is None or not isinstance(node, Tag):
        return {}
    attrs = {}
    for name, value in node.attrs.items():
        if isinstance(value, (list, tuple)):
            value = " ".join(value)
        attrs[name] = value
    return attrs


def text(node: Optional[PageElement]) -> str:
    """Return the text content of a node ("" when absent)."""
    if node is None:
        return ""
    if isinstance(node, NavigableString):
        return str(node)
    return node.get_text()


def children(node: Optional[Tag]) -> List[PageElement]:
    """Return the direct child nodes (elements and text) of a node.

    Comments, doctypes, CDATA and processing instructions are skipped.
    """
    if node is None or not isinstance(node, Tag):
        return []
    return [child for child in node.children if not isinstance(child, PreformattedString)]


def first_child_text(node: Optional[Tag]) -> Optional[str]:
    """Return the text of the node's first child node, or None without children."""
    kids = children(node)
    if not kids:
        return None
    return text(kids[0])
