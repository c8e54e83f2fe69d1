#!/usr/bin/env python3
"""
HTTP client for duden.de
Fetches the search page and entry pages and hands back parsed documents
"""

import logging
import threading
from typing import List, Optional
from urllib.parse import quote, urljoin

import requests
from bs4 import BeautifulSoup

from core.config import LookupConfig, get_config
from core.errors import FetchError
from core.markup import parse_html
from core.search_models import Candidate

from .search_results import parse_search_results

logger = logging.getLogger(__name__)


class DudenClient:
    """Client for the Duden online dictionary.

    ``fetch`` is called concurrently from the prefetch workers, so every
    thread gets its own ``requests.Session``.
    """

    def __init__(self, config: Optional[LookupConfig] = None):
        self.config = config or get_config()
        self._local = threading.local()

    @property
    def session(self) -> requests.Session:
        session = getattr(self._local, 'session', None)
        if session is None:
            session = requests.Session()
            session.headers.update({
                'User-Agent': self.config.user_agent,
                'Accept': 'text/html,application/xhtml+xml;q=0.9,*/*;q=0.8',
                'Accept-Language': 'de-DE,de;q=0.9',
            })
            self._local.session = session
        return session

    def resolve_url(self, locator: str) -> str:
        """Absolute URL for a locator relative to the dictionary root"""
        return urljoin(self.config.base_url + '/', locator)

    def search_url(self, term: str) -> str:
        return f"{self.config.base_url}{self.config.search_path}{quote(term.strip(), safe='')}"

    def _get_html(self, url: str) -> str:
        try:
            response = self.session.get(url, timeout=self.config.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise FetchError(f"Request to {url} failed: {e}", url) from e
        return response.text

    def fetch(self, locator: str) -> BeautifulSoup:
        """Fetch and parse one entry page"""
        url = self.resolve_url(locator)
        logger.debug(f"Fetching {url}")
        return parse_html(self._get_html(url))

    def search(self, term: str) -> List[Candidate]:
        """Run a dictionary search and return the result candidates"""
        url = self.search_url(term)
        logger.info(f"Searching '{term}' at {url}")
        return parse_search_results(parse_html(self._get_html(url)))
