"""Shared data models for explorer_library.

This module defines data structures used across the library layer.

Contract:
- Inputs: Raw data for model construction
- Outputs: Model instances
- Side Effects: None (pure data structures)
"""

from dataclasses import dataclass
from dataclasses import field
from typing import Any
from typing import Literal

EntryType = Literal["file", "folder"]


@dataclass
class Entry:
    """One node (file or folder) in a traversal result tree.

    Attributes:
        name: Base name of the file or folder
        type: "file" or "folder"
        path: Filesystem path, relative or absolute as the root was given
        id: Random identifier, None when ids are disabled
        size: Byte length (files only)
        extension: Extension including the leading dot, "" if none (files only)
        children: Child entries (folders only)

    Example:
        >>> entry = Entry.folder(name="src", path="src")
        >>> assert entry.children == []
        >>> assert entry.size is None
    """

    name: str
    type: EntryType
    path: str
    id: str | None = None
    size: int | None = None
    extension: str | None = None
    children: list["Entry"] | None = None

    @classmethod
    def file(cls, name: str, path: str, size: int, extension: str, id: str | None = None) -> "Entry":
        return cls(name=name, type="file", path=path, id=id, size=size, extension=extension)

    @classmethod
    def folder(
        cls,
        name: str,
        path: str,
        children: list["Entry"] | None = None,
        id: str | None = None,
    ) -> "Entry":
        return cls(name=name, type="folder", path=path, id=id, children=children if children is not None else [])

    @property
    def is_folder(self) -> bool:
        return self.type == "folder"

    def to_dict(self) -> dict[str, Any]:
        """Convert to the wire dict: files carry size and ext, folders carry children.

        The id key is omitted when ids are disabled.
        """
        data: dict[str, Any] = {}
        if self.id is not None:
            data["id"] = self.id
        data["name"] = self.name
        data["type"] = self.type
        data["path"] = self.path
        if self.is_folder:
            data["children"] = [child.to_dict() for child in self.children or []]
        else:
            data["size"] = self.size
            data["ext"] = self.extension
        return data


@dataclass(frozen=True)
class RootSpec:
    """Configuration for one traversal invocation.

    Attributes:
        path: Directory to start traversal from
        label: Display name for the root wrapper entry
        ignore_names: Bare names excluded at every depth

    Example:
        >>> spec = RootSpec(path=".", label="@root", ignore_names=frozenset({"node_modules"}))
        >>> assert "node_modules" in spec.ignore_names
    """

    path: str
    label: str | None = None
    ignore_names: frozenset[str] = field(default_factory=frozenset)


@dataclass
class FileContent:
    """Result of resolving a single file.

    Attributes:
        name: Base name of the file
        extension: Extension including the leading dot
        path: Path as requested
        size: Length of the decoded text in characters
        content: Decoded text, HTML-escaped when requested
    """

    name: str
    extension: str
    path: str
    size: int
    content: str


@dataclass(frozen=True)
class TraversalOptions:
    """Switches between the listing variants.

    Attributes:
        include_ids: Assign a random id to every entry
        group_by_label: Return root wrappers keyed by name instead of a list
        sort_entries: Folders first, then files, each group by name
        max_concurrency: Maximum directory scans in flight at once
    """

    include_ids: bool = True
    group_by_label: bool = False
    sort_entries: bool = True
    max_concurrency: int = 16

    def __post_init__(self) -> None:
        if self.max_concurrency < 1:
            raise ValueError(f"max_concurrency must be at least 1, got {self.max_concurrency}")
