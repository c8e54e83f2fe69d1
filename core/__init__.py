"""
Core lookup components.

This package contains the building blocks of the Duden lookup tool:
- Configuration and the exception hierarchy
- Text normalization and the typed definition model
- Speculative prefetching of search results
- The interactive search session
"""

from .config import LookupConfig, get_config
from .definition import AttributeTuple, Definition, Meaning, MeaningKind, SimpleMeaning
from .errors import (
    DudenError,
    EmptySense,
    FetchError,
    MissingResult,
    MissingTitle,
    NoMeanings,
    ParseError,
    SelectionAborted,
)
from .prefetch_scheduler import PendingFetch, PrefetchScheduler, Rendezvous
from .search_models import Candidate
from .search_session import SearchSession
from .text_normalizer import normalize

__all__ = [
    'LookupConfig',
    'get_config',
    'AttributeTuple',
    'Definition',
    'Meaning',
    'MeaningKind',
    'SimpleMeaning',
    'DudenError',
    'EmptySense',
    'FetchError',
    'MissingResult',
    'MissingTitle',
    'NoMeanings',
    'ParseError',
    'SelectionAborted',
    'PendingFetch',
    'PrefetchScheduler',
    'Rendezvous',
    'Candidate',
    'SearchSession',
    'normalize'
]
