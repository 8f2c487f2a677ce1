"""
Root route serving the single-page frontend.

Every other file of the static directory is served by the
``StaticFiles`` mount installed in ``main.create_app``.
"""

from pathlib import Path

from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import FileResponse

router = APIRouter()


@router.get("/", include_in_schema=False)
def home(request: Request) -> FileResponse:
    """Return the entry page of the frontend."""
    settings = request.app.state.settings
    index_path = Path(settings.static_dir) / settings.index_file
    if not index_path.is_file():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
    return FileResponse(index_path, media_type="text/html")
