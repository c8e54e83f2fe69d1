"""
Utility functions and helper tools.

This package contains console helpers:
- UTF-8 console setup
- Pager based display of rendered definitions
"""

from .display import setup_console, show

__all__ = [
    'setup_console',
    'show'
]
