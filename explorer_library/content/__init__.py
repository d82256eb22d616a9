"""File content resolution.

Public Interface:
    - ContentResolver: Read and decode a single file
    - decode_text: BOM-aware byte decoding
"""

from .resolver import ContentResolver
from .resolver import decode_text

__all__ = [
    "ContentResolver",
    "decode_text",
]
