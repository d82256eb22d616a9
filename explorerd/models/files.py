"""Models for the file listing and content endpoints."""

from typing import Any
from typing import Literal

from pydantic import BaseModel
from pydantic import Field

from explorer_library.models import Entry
from explorer_library.models import FileContent


class EntryResponse(BaseModel):
    """A file or folder in a listing.

    Contract:
    - Files carry size and ext, folders carry children
    - id is omitted when ids are disabled
    - Serialize with exclude_none so fields that do not apply are left out
    """

    id: str | None = Field(None, description="Random entry identifier")
    name: str = Field(..., description="Base name of the file or folder")
    type: Literal["file", "folder"] = Field(..., description="Entry kind")
    path: str = Field(..., description="Filesystem path of the entry")
    size: int | None = Field(None, description="Size in bytes (files only)")
    ext: str | None = Field(None, description="Extension with leading dot, empty if none (files only)")
    children: list["EntryResponse"] | None = Field(None, description="Child entries (folders only)")

    @classmethod
    def from_entry(cls, entry: Entry) -> "EntryResponse":
        return cls(
            id=entry.id,
            name=entry.name,
            type=entry.type,
            path=entry.path,
            size=entry.size,
            ext=entry.extension,
            children=[cls.from_entry(child) for child in entry.children] if entry.children is not None else None,
        )

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


EntryResponse.model_rebuild()


class FileContentResponse(BaseModel):
    """Response containing file content for viewing."""

    name: str = Field(..., description="File name")
    size: int = Field(..., description="Length of the decoded content in characters")
    ext: str = Field(..., description="Extension with leading dot, empty if none")
    content: str = Field(..., description="Decoded text, HTML-escaped when content_type=html")
    path: str = Field(..., description="Path as requested")

    @classmethod
    def from_content(cls, content: FileContent) -> "FileContentResponse":
        return cls(
            name=content.name,
            size=content.size,
            ext=content.extension,
            content=content.content,
            path=content.path,
        )


class ErrorResponse(BaseModel):
    """Error body returned by the file endpoints."""

    error: str

