#!/usr/bin/env python3
"""
Thin query layer over BeautifulSoup used by the document model and the
search result parser.
"""

from typing import List, Optional, Union

from bs4 import BeautifulSoup, Tag
from soupsieve import SoupSieve


Query = Union[str, SoupSieve]


def parse_html(html: str) -> BeautifulSoup:
    """Parse a full HTML page with the stdlib-backed parser."""
    return BeautifulSoup(html, "html.parser")


def select(node: Tag, query: Query) -> List[Tag]:
    """Return every descendant of ``node`` matching ``query`` in document order."""
    if isinstance(query, SoupSieve):
        return query.select(node)
    return node.select(query)


def select_one(node: Tag, query: Query) -> Optional[Tag]:
    if isinstance(query, SoupSieve):
        return query.select_one(node)
    return node.select_one(query)


def attr(node: Tag, name: str) -> Optional[str]:
    """Return a single attribute value; multi-valued attributes are space-joined."""
    value = node.get(name)
    if isinstance(value, list):
        return " ".join(value)
    return value


def text_fragments(node: Tag) -> List[str]:
    """Raw text nodes of a subtree in document order, whitespace untouched."""
    return [str(fragment) for fragment in node.strings]
