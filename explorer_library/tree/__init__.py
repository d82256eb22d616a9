"""Recursive directory traversal.

Public Interface:
    - TreeBuilder: Build ordered entry trees for one or more roots
"""

from .builder import TreeBuilder
from .builder import entry_sort_key

__all__ = [
    "TreeBuilder",
    "entry_sort_key",
]
