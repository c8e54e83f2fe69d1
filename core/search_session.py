#!/usr/bin/env python3
"""Interactive lookup session.

Runs the search, starts prefetching every result, asks the user which entry
to open and renders the chosen definition. Fetching starts before the menu
is printed so network time overlaps with the user's decision.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, TextIO

from .definition import Definition
from .errors import FetchError, ParseError, SelectionAborted
from .prefetch_scheduler import PrefetchScheduler
from .search_models import Candidate

logger = logging.getLogger(__name__)


def print_candidates(candidates: Sequence[Candidate], stream: TextIO):
    for candidate in candidates:
        stream.write(f"{candidate.index + 1}) {candidate.describe()}\n")
    stream.flush()


def read_selection(
    candidates: Sequence[Candidate],
    input_stream: TextIO,
    output_stream: TextIO,
) -> Candidate:
    """Prompt until the user enters a valid 1-based result number.

    Invalid lines re-prompt; a closed input stream raises
    :class:`SelectionAborted`.
    """
    count = len(candidates)
    while True:
        output_stream.write(f"Select [1-{count}]: ")
        output_stream.flush()

        line = input_stream.readline()
        if not line:
            raise SelectionAborted("Input closed before a result was selected")

        answer = line.strip()
        try:
            number = int(answer)
        except ValueError:
            output_stream.write(f"'{answer}' is not a number.\n")
            continue

        if not 1 <= number <= count:
            output_stream.write(f"Please enter a number between 1 and {count}.\n")
            continue

        return candidates[number - 1]


@dataclass
class SessionResult:
    """What a finished session produced; ``definition`` is None on failure"""
    term: str
    exit_code: int
    selected: Optional[Candidate] = None
    definition: Optional[Definition] = None


class SearchSession:
    """Composes search, prefetch, selection, parsing and display."""

    def __init__(
        self,
        client,
        display: Callable[[str, str], None],
        input_stream: Optional[TextIO] = None,
        output_stream: Optional[TextIO] = None,
        error_stream: Optional[TextIO] = None,
    ):
        self.client = client
        self.display = display
        self.input_stream = input_stream or sys.stdin
        self.output_stream = output_stream or sys.stdout
        self.error_stream = error_stream or sys.stderr

    def _error(self, message: str):
        self.error_stream.write(f"[ERROR] {message}\n")
        self.error_stream.flush()

    def run(self, term: str) -> SessionResult:
        self.output_stream.write(f'Searching "{term}"...\n')
        self.output_stream.flush()

        try:
            candidates = self.client.search(term)
        except FetchError as e:
            self._error(f"Search for '{term}' failed: {e}")
            return SessionResult(term, exit_code=1)

        if not candidates:
            self.output_stream.write(f'No results for "{term}".\n')
            return SessionResult(term, exit_code=1)

        rendezvous = PrefetchScheduler(self.client.fetch).schedule(candidates)
        try:
            print_candidates(candidates, self.output_stream)
            selected = read_selection(candidates, self.input_stream, self.output_stream)
            logger.info(f"Selected '{selected.label}' ({selected.locator})")

            try:
                document = rendezvous.resolve(selected.index)
            except FetchError as e:
                self._error(f"Could not load definition for '{selected.label}': {e}")
                return SessionResult(term, exit_code=1, selected=selected)

            try:
                definition = Definition.parse(document)
            except ParseError as e:
                self._error(f"Could not read definition for '{selected.label}': {e}")
                return SessionResult(term, exit_code=1, selected=selected)

            self.display(definition.render(), definition.title)
            return SessionResult(term, exit_code=0, selected=selected, definition=definition)
        finally:
            rendezvous.discard()
