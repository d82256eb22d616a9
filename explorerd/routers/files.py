"""File listing and content API endpoint."""

import logging

from fastapi import APIRouter
from fastapi import Depends
from fastapi import Query
from fastapi.responses import JSONResponse

from explorer_library.content import ContentResolver
from explorer_library.models import RootSpec
from explorer_library.tree import TreeBuilder

from ..dependencies import get_content_resolver
from ..dependencies import get_root_specs
from ..dependencies import get_tree_builder
from ..models.files import EntryResponse
from ..models.files import ErrorResponse
from ..models.files import FileContentResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["files"])


@router.get(
    "/files",
    responses={
        200: {"description": "Root listing, or file content when file_path is given"},
        404: {"model": ErrorResponse, "description": "File not found"},
    },
)
async def get_files(
    file_path: str | None = Query(default=None, description="Path of a file to read; omit to list all roots"),
    content_type: str | None = Query(default=None, description="'html' escapes the content, anything else returns it raw"),
    roots: list[RootSpec] = Depends(get_root_specs),
    builder: TreeBuilder = Depends(get_tree_builder),
    resolver: ContentResolver = Depends(get_content_resolver),
) -> JSONResponse:
    """List the configured roots, or read one file.

    Without file_path, returns one folder entry per configured root with its
    full tree as children (a list, or an object keyed by label when
    group_by_label is enabled). Unreadable directories show up as empty
    folders.

    With file_path, returns the decoded file content.

    Returns:
        JSONResponse with the listing or FileContentResponse

    Raises:
        404: file_path cannot be read
    """
    if file_path:
        return await _read_file(file_path, content_type, resolver)

    return await _list_roots(roots, builder)


async def _read_file(file_path: str, content_type: str | None, resolver: ContentResolver) -> JSONResponse:
    content = await resolver.read_file_content(file_path, escape=content_type == "html")

    if content is None:
        return JSONResponse(status_code=404, content=ErrorResponse(error="File not found").model_dump())

    return JSONResponse(content=FileContentResponse.from_content(content).model_dump(mode="json"))


async def _list_roots(roots: list[RootSpec], builder: TreeBuilder) -> JSONResponse:
    listing = await builder.build_listing(roots)
    logger.debug(f"Listed {len(roots)} roots")

    if isinstance(listing, dict):
        return JSONResponse(
            content={label: EntryResponse.from_entry(entry).to_json() for label, entry in listing.items()}
        )

    return JSONResponse(content=[EntryResponse.from_entry(entry).to_json() for entry in listing])
