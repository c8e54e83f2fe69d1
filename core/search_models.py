#!/usr/bin/env python3
"""
Search result data shared between the fetchers and the session
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Candidate:
    """One entry of the search result list"""
    index: int  # 0-based position in the result list
    label: str
    locator: str  # relative path of the entry page
    snippet: Optional[str] = None

    def describe(self) -> str:
        """One-line summary for the selection menu"""
        if self.snippet:
            return f"{self.label} - {self.snippet}"
        return self.label
