#!/usr/bin/env python3
"""
Exception hierarchy for the Duden lookup tool
"""


class DudenError(Exception):
    """Base class for every error raised by the lookup pipeline."""


class FetchError(DudenError):
    """Raised when a page cannot be retrieved from the dictionary."""

    def __init__(self, message: str, locator: str = None):
        super().__init__(message)
        self.locator = locator


class ParseError(DudenError):
    """Raised when a page does not have the structure of a definition."""


class MissingTitle(ParseError):
    """The page has no headword title."""


class EmptySense(ParseError):
    """A sense container has no sense text."""


class NoMeanings(ParseError):
    """The page has neither an enumerated sense list nor a single sense paragraph."""


class MissingResult(DudenError):
    """Every prefetch worker reported but none for the requested index."""

    def __init__(self, index: int):
        super().__init__(f"No prefetch result was produced for candidate {index}")
        self.index = index


class SelectionAborted(DudenError):
    """The input stream closed before a valid selection was read."""
