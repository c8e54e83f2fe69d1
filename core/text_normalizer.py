#!/usr/bin/env python3
"""
Text normalization for fragments collected from the markup tree.

A sense text is usually split over several text nodes (links, emphasis,
line breaks inside a sentence). The fragments are joined as one logical
string: only the outer boundaries are trimmed, everything between the
fragments is kept exactly as found.
"""

from typing import Iterable

SOFT_HYPHEN = "\u00ad"


def strip_soft_hyphens(text: str) -> str:
    """Remove optional hyphenation points from a single string."""
    return text.replace(SOFT_HYPHEN, "")


def normalize(fragments: Iterable[str], strip_soft_hyphens: bool = False) -> str:
    """Join raw text fragments into one display string.

    Leading whitespace of the whole sequence and trailing whitespace of the
    whole sequence are removed. Interior whitespace is never collapsed.
    """
    if strip_soft_hyphens:
        joined = "".join(fragment.replace(SOFT_HYPHEN, "") for fragment in fragments)
    else:
        joined = "".join(fragments)
    return joined.strip()
