"""Tree builder for directory listings.

Walks a root directory and produces an ordered tree of Entry objects.

Contract:
- Inputs: RootSpec (path, label, ignore set), TraversalOptions
- Outputs: list of Entry, or root wrapper entries for a batch of roots
- Side Effects: Reads the filesystem; reports failures to the EventReporter

Failures never propagate: a directory that cannot be listed contributes an
empty children list and a "traversal_failed" event, and a file that cannot
be stat'ed gets size 0 and a "stat_failed" event. One unreadable subtree
therefore never aborts the rest of the listing.
"""

import asyncio
import logging
import os
from dataclasses import dataclass

from ..events import EventReporter
from ..events import ExplorerEvent
from ..events import LoggingEventReporter
from ..models import Entry
from ..models import RootSpec
from ..models import TraversalOptions
from ..utils.identifiers import random_string

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _ScannedItem:
    """One directory child as seen by a single scandir pass."""

    name: str
    path: str
    is_dir: bool
    size: int | None = None


def entry_sort_key(entry: Entry) -> tuple[bool, str]:
    """Folders before files, then by name in code-point order."""
    return (not entry.is_folder, entry.name)


def _is_dir(dirent: os.DirEntry) -> bool:
    try:
        return dirent.is_dir()
    except OSError:
        return False


def _scan_directory(
    dir_path: str,
    ignore_names: frozenset[str],
) -> tuple[list[_ScannedItem], list[tuple[str, Exception]]]:
    """List one directory level (blocking).

    Anything that is not a directory (sockets, devices, broken symlinks)
    is treated as a file with best-effort size.

    Returns:
        Tuple of (scanned items, stat failures as (path, error))

    Raises:
        OSError: If the directory itself cannot be listed
    """
    items: list[_ScannedItem] = []
    failures: list[tuple[str, Exception]] = []

    with os.scandir(dir_path) as entries:
        for dirent in entries:
            if dirent.name in ignore_names:
                continue

            entry_path = os.path.normpath(os.path.join(dir_path, dirent.name))

            if _is_dir(dirent):
                items.append(_ScannedItem(name=dirent.name, path=entry_path, is_dir=True))
                continue

            try:
                size = dirent.stat().st_size
            except OSError as e:
                failures.append((entry_path, e))
                size = 0
            items.append(_ScannedItem(name=dirent.name, path=entry_path, is_dir=False, size=size))

    return items, failures


class TreeBuilder:
    """Builds ordered entry trees from the live filesystem."""

    def __init__(
        self: "TreeBuilder",
        options: TraversalOptions | None = None,
        reporter: EventReporter | None = None,
    ) -> None:
        """Initialize builder.

        Args:
            options: Listing variant switches (default: ids on, sorted)
            reporter: Receives traversal failures (default: logs them)
        """
        self.options = options or TraversalOptions()
        self.reporter = reporter or LoggingEventReporter()

    async def build_listing(self: "TreeBuilder", specs: list[RootSpec]) -> list[Entry] | dict[str, Entry]:
        """Build one wrapper entry per root, all roots concurrently.

        Args:
            specs: Roots to traverse, in display order

        Returns:
            Wrapper entries in the order given, or a mapping keyed by wrapper
            name when group_by_label is set
        """
        semaphore = asyncio.Semaphore(self.options.max_concurrency)
        roots = await asyncio.gather(
            *(self._build_root(spec, index, semaphore) for index, spec in enumerate(specs))
        )

        if not self.options.group_by_label:
            return list(roots)

        grouped: dict[str, Entry] = {}
        for index, root in enumerate(roots):
            key = root.name
            suffix = index
            while key in grouped:
                key = f"{root.name}#{suffix}"
                suffix += 1
            if key != root.name:
                logger.warning(f"Duplicate root label {root.name!r}, keying root {index} as {key!r}")
            grouped[key] = root
        return grouped

    async def build_root(self: "TreeBuilder", spec: RootSpec, index: int = 0) -> Entry:
        """Build the synthetic folder entry wrapping one root.

        Args:
            spec: Root to traverse
            index: Position in the batch, used as the name when there is no label

        Returns:
            Folder entry whose children are the traversal result
        """
        semaphore = asyncio.Semaphore(self.options.max_concurrency)
        return await self._build_root(spec, index, semaphore)

    async def build_tree(self: "TreeBuilder", spec: RootSpec) -> list[Entry]:
        """Build the entries below spec.path.

        Args:
            spec: Root to traverse

        Returns:
            Ordered child entries; empty if the root cannot be listed
        """
        semaphore = asyncio.Semaphore(self.options.max_concurrency)
        return await self._read_directory(spec.path, spec.ignore_names, semaphore)

    async def _build_root(
        self: "TreeBuilder",
        spec: RootSpec,
        index: int,
        semaphore: asyncio.Semaphore,
    ) -> Entry:
        children = await self._read_directory(spec.path, spec.ignore_names, semaphore)
        name = spec.label if spec.label is not None else str(index)
        logger.debug(f"Built root {name!r} from {spec.path} with {len(children)} top-level entries")
        return Entry.folder(name=name, path=spec.path, children=children, id=self._new_id())

    async def _read_directory(
        self: "TreeBuilder",
        dir_path: str,
        ignore_names: frozenset[str],
        semaphore: asyncio.Semaphore,
    ) -> list[Entry]:
        # Only the scan holds the semaphore; recursing while holding it could starve.
        try:
            async with semaphore:
                items, failures = await asyncio.to_thread(_scan_directory, dir_path, ignore_names)
        except (OSError, ValueError) as e:
            self.reporter.report(ExplorerEvent.from_exception("traversal_failed", dir_path, e))
            return []

        for failed_path, error in failures:
            self.reporter.report(ExplorerEvent.from_exception("stat_failed", failed_path, error))

        subtrees = iter(
            await asyncio.gather(
                *(self._read_directory(item.path, ignore_names, semaphore) for item in items if item.is_dir)
            )
        )

        entries: list[Entry] = []
        for item in items:
            if item.is_dir:
                entries.append(
                    Entry.folder(name=item.name, path=item.path, children=next(subtrees), id=self._new_id())
                )
            else:
                entries.append(
                    Entry.file(
                        name=item.name,
                        path=item.path,
                        size=item.size or 0,
                        extension=os.path.splitext(item.name)[1],
                        id=self._new_id(),
                    )
                )

        if self.options.sort_entries:
            entries.sort(key=entry_sort_key)

        return entries

    def _new_id(self: "TreeBuilder") -> str | None:
        return random_string(32) if self.options.include_ids else None
