"""Content resolver for single files.

Reads a file, decodes it to text and optionally escapes it for HTML.

Contract:
- Inputs: File path, escape flag
- Outputs: FileContent, or None when the file cannot be read (NotFound)
- Side Effects: Reads the filesystem; reports failures to the EventReporter

Encoding detection only looks for the UTF-16 little-endian byte-order mark.
UTF-16 big-endian and the UTF-8 BOM are not recognised; such files are
decoded as UTF-8.
"""

import asyncio
import errno
import logging
import os
import stat
from pathlib import Path

from ..events import EventReporter
from ..events import ExplorerEvent
from ..events import LoggingEventReporter
from ..models import FileContent
from ..utils.html import escape_html

logger = logging.getLogger(__name__)

UTF16_LE_BOM = b"\xff\xfe"


def decode_text(data: bytes) -> str:
    """Decode file bytes to text.

    A leading FF FE selects UTF-16LE for the whole buffer (the mark itself
    decodes to U+FEFF and is kept); anything else is read as UTF-8.
    Undecodable sequences become U+FFFD instead of failing.

    Args:
        data: Raw file contents

    Returns:
        Decoded text
    """
    if data[:2] == UTF16_LE_BOM:
        return data.decode("utf-16-le", errors="replace")
    return data.decode("utf-8", errors="replace")


def _read_bytes(file_path: str) -> bytes:
    """Read a regular file (blocking).

    FIFOs, devices and sockets are refused before opening: reading them
    can block forever or never reach end of file.

    Raises:
        OSError: If the path is missing, unreadable or not a regular file
    """
    path = Path(file_path)
    if not stat.S_ISREG(path.stat().st_mode):
        raise OSError(errno.EINVAL, "Not a regular file", file_path)
    return path.read_bytes()


class ContentResolver:
    """Resolves file paths to decoded text content."""

    def __init__(self: "ContentResolver", reporter: EventReporter | None = None) -> None:
        """Initialize resolver.

        Args:
            reporter: Receives read failures (default: logs them)
        """
        self.reporter = reporter or LoggingEventReporter()

    async def read_text(self: "ContentResolver", file_path: str) -> str | None:
        """Read and decode a file.

        Missing files, permission errors and directories all yield None;
        the distinction is only visible in the reported event.

        Args:
            file_path: Path to the file

        Returns:
            Decoded text, or None if the file cannot be read
        """
        try:
            data = await asyncio.to_thread(_read_bytes, file_path)
        except (OSError, ValueError) as e:
            self.reporter.report(ExplorerEvent.from_exception("read_failed", file_path, e))
            return None

        return decode_text(data)

    async def read_file_content(
        self: "ContentResolver",
        file_path: str,
        escape: bool = False,
    ) -> FileContent | None:
        """Resolve a file into a FileContent.

        Args:
            file_path: Path to the file, mirrored into the result unchanged
            escape: HTML-escape the content (metadata is never escaped)

        Returns:
            FileContent with size set to the decoded character count, or
            None if the file cannot be read
        """
        text = await self.read_text(file_path)
        if text is None:
            return None

        name = os.path.basename(file_path)
        logger.debug(f"Resolved {file_path} ({len(text)} characters)")

        return FileContent(
            name=name,
            extension=os.path.splitext(name)[1],
            path=file_path,
            size=len(text),
            content=escape_html(text) if escape else text,
        )
