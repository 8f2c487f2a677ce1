"""
Crop listing endpoint.

Returns the distinct product names found in the listings so that the
frontend can build its crop selector.
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from crop_dashboard_api.app.core.db import ListingStore, StoreError, get_store
from crop_dashboard_api.app.schemas.crop import CropList, ErrorResponse
from crop_dashboard_api.app.services.crop_service import CropService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/crops",
    response_model=CropList,
    responses={500: {"model": ErrorResponse}},
)
def list_crops(store: ListingStore = Depends(get_store)):
    """Return every distinct crop name.

    No ordering is guaranteed.  Storage failures are logged and answered
    with a generic HTTP 500 body.
    """
    try:
        crops = CropService.list_crops(store)
    except StoreError as e:
        logger.error("Error fetching crops: %s", e)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Error fetching crops"},
        )
    return CropList(crops=crops)
