"""Shared HTML fixtures modelled on duden.de pages."""

import pytest

from core.markup import parse_html

from html_pages import ENTRY_PAGE, SEARCH_PAGE, SINGLE_MEANING_PAGE


@pytest.fixture
def entry_page():
    return parse_html(ENTRY_PAGE)


@pytest.fixture
def single_meaning_page():
    return parse_html(SINGLE_MEANING_PAGE)


@pytest.fixture
def search_page():
    return parse_html(SEARCH_PAGE)
