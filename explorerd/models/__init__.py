"""API models for explorerd."""

from .files import EntryResponse
from .files import ErrorResponse
from .files import FileContentResponse

__all__ = [
    "EntryResponse",
    "ErrorResponse",
    "FileContentResponse",
]
