"""Tests for the HTTP client, with requests stubbed out."""

import threading

import pytest
import requests

from core.config import LookupConfig
from core.errors import FetchError
from fetchers import duden_client
from fetchers.duden_client import DudenClient

from html_pages import ENTRY_PAGE, SEARCH_PAGE


class FakeResponse:
    def __init__(self, text, status_code=200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error")


@pytest.fixture
def stub_session(monkeypatch):
    calls = []
    pages = {}

    class StubSession:
        def __init__(self):
            self.headers = {}

        def get(self, url, timeout=None):
            calls.append({"url": url, "timeout": timeout, "headers": dict(self.headers)})
            if url not in pages:
                return FakeResponse("", status_code=404)
            page = pages[url]
            if isinstance(page, Exception):
                raise page
            return FakeResponse(page)

    monkeypatch.setattr(duden_client.requests, "Session", StubSession)
    return calls, pages


@pytest.fixture
def client():
    return DudenClient(LookupConfig(timeout=3, user_agent="duden-tests"))


def test_resolve_url(client):
    assert client.resolve_url("/rechtschreibung/Beispiel") == "https://www.duden.de/rechtschreibung/Beispiel"
    assert client.resolve_url("rechtschreibung/Haus") == "https://www.duden.de/rechtschreibung/Haus"


def test_search_url_quotes_term(client):
    assert client.search_url(" Straße ") == "https://www.duden.de/suchen/dudenonline/Stra%C3%9Fe"
    assert client.search_url("a/b") == "https://www.duden.de/suchen/dudenonline/a%2Fb"


def test_fetch_parses_entry_page(client, stub_session):
    calls, pages = stub_session
    pages["https://www.duden.de/rechtschreibung/Beispiel"] = ENTRY_PAGE

    document = client.fetch("/rechtschreibung/Beispiel")

    assert document.select_one("h1 > span") is not None
    assert calls[0]["timeout"] == 3.0
    assert calls[0]["headers"]["User-Agent"] == "duden-tests"


def test_http_error_becomes_fetch_error(client, stub_session):
    with pytest.raises(FetchError) as excinfo:
        client.fetch("/rechtschreibung/Unbekannt")

    assert isinstance(excinfo.value.__cause__, requests.HTTPError)
    assert excinfo.value.locator == "https://www.duden.de/rechtschreibung/Unbekannt"


def test_connection_error_becomes_fetch_error(client, stub_session):
    _, pages = stub_session
    pages["https://www.duden.de/rechtschreibung/Haus"] = requests.ConnectionError("refused")

    with pytest.raises(FetchError, match="refused"):
        client.fetch("/rechtschreibung/Haus")


def test_search_returns_candidates(client, stub_session):
    calls, pages = stub_session
    pages["https://www.duden.de/suchen/dudenonline/Beispiel"] = SEARCH_PAGE

    candidates = client.search("Beispiel")

    assert [c.label for c in candidates] == ["Beispiel", "beispielhaft", "beispielsweise"]
    assert calls[0]["url"] == "https://www.duden.de/suchen/dudenonline/Beispiel"


def test_each_thread_gets_its_own_session(client, stub_session):
    sessions = []

    def grab():
        sessions.append(client.session)

    worker = threading.Thread(target=grab)
    worker.start()
    worker.join()
    grab()
    grab()

    assert sessions[0] is not sessions[1]
    assert sessions[1] is sessions[2]
