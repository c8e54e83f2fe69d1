"""
Dictionary page retrieval.

This package contains the network-facing side of the lookup tool:
- HTTP client for search and entry pages
- Candidate discovery on the search results page
"""

from .duden_client import DudenClient
from .search_results import parse_search_results

__all__ = [
    'DudenClient',
    'parse_search_results'
]
