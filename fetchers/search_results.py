#!/usr/bin/env python3
"""
Candidate discovery on the Duden search results page
"""

import logging
from typing import List

from bs4 import Tag

from core import selectors
from core.markup import attr, select, select_one, text_fragments
from core.search_models import Candidate
from core.text_normalizer import normalize

logger = logging.getLogger(__name__)


def parse_search_results(document: Tag) -> List[Candidate]:
    """Build the candidate list from every result vignette, in page order.

    Vignettes without a headword or without a link are skipped; indices stay
    contiguous over the candidates that are kept.
    """
    candidates: List[Candidate] = []

    for position, vignette in enumerate(select(document, selectors.VIGNETTE)):
        word = select_one(vignette, selectors.VIGNETTE_WORD)
        link = select_one(vignette, selectors.VIGNETTE_LINK)
        locator = attr(link, "href") if link is not None else None

        label = normalize(text_fragments(word), strip_soft_hyphens=True) if word is not None else ""
        if not label or not locator:
            logger.warning(f"Skipping search result #{position + 1}: missing headword or link")
            continue

        snippet_node = select_one(vignette, selectors.VIGNETTE_SNIPPET)
        snippet = None
        if snippet_node is not None:
            snippet = normalize(text_fragments(snippet_node), strip_soft_hyphens=True) or None

        candidates.append(Candidate(
            index=len(candidates),
            label=label,
            locator=locator,
            snippet=snippet,
        ))

    logger.info(f"Found {len(candidates)} search results")
    return candidates
