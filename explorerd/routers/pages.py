"""Static page endpoints."""

import logging

from fastapi import APIRouter
from fastapi import Depends
from fastapi import HTTPException
from fastapi.responses import FileResponse

from ..config import ExplorerSettings
from ..dependencies import get_settings

logger = logging.getLogger(__name__)

router = APIRouter(tags=["pages"])

EXPLORER_PAGE = "file-explorer.html"


@router.get("/explorer", response_class=FileResponse)
async def explorer_page(settings: ExplorerSettings = Depends(get_settings)) -> FileResponse:
    """Serve the file explorer page.

    Raises:
        404: The static directory has no explorer page
    """
    page = settings.get_static_dir() / EXPLORER_PAGE

    if not page.is_file():
        logger.warning(f"Explorer page missing: {page}")
        raise HTTPException(status_code=404, detail="Explorer page not found")

    return FileResponse(page, media_type="text/html")
