"""Utility helpers for explorer_library."""

from .html import escape_html
from .identifiers import random_numeric_string
from .identifiers import random_string

__all__ = [
    "escape_html",
    "random_numeric_string",
    "random_string",
]
