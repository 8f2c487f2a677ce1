"""
Regional price dashboard endpoint.

``GET /dashboard?crop=<name>`` answers with the minimum price, maximum
price and listing count of the crop for every seller region, ordered
by region name.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from crop_dashboard_api.app.core.db import ListingStore, StoreError, get_store
from crop_dashboard_api.app.schemas.crop import ErrorResponse, RegionalPrice
from crop_dashboard_api.app.services.crop_service import CropService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/dashboard",
    response_model=List[RegionalPrice],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def get_dashboard(
    crop: Optional[str] = Query(None, description="Exact product name to aggregate"),
    store: ListingStore = Depends(get_store),
):
    """Return per-region price aggregates for ``crop``.

    A missing or empty ``crop`` is rejected with HTTP 400 before the
    store is consulted.  A crop without listings yields an empty list.
    """
    if not crop:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Crop name is required"},
        )
    try:
        return CropService.regional_prices(store, crop)
    except StoreError as e:
        logger.error("Error fetching dashboard data for %s: %s", crop, e)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Error fetching dashboard data"},
        )
