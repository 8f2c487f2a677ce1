"""
Pydantic schemas for the crop endpoints.

``CropList`` is the body of ``GET /crops``; ``RegionalPrice`` is one
entry of the ``GET /dashboard`` list.  Failed requests answer with an
``ErrorResponse`` envelope instead of FastAPI's default ``detail``.

The listings tables are written by another application and may hold
NULL names or states; those pass through as ``null``.  Prices keep the
type they are stored with (integer or real).
"""

from typing import List, Optional, Union

from pydantic import BaseModel, Field


class CropList(BaseModel):
    """Distinct product names available in the listings."""

    crops: List[Optional[str]] = Field(default_factory=list)


class RegionalPrice(BaseModel):
    """Price aggregates of one crop within one region (seller state)."""

    state: Optional[str] = Field(..., description="Region of the sellers")
    min_price: Union[int, float] = Field(..., description="Lowest listed price in the region")
    max_price: Union[int, float] = Field(..., description="Highest listed price in the region")
    price_count: int = Field(..., ge=1, description="Number of matching listings")


class ErrorResponse(BaseModel):
    """Error envelope returned with 4xx/5xx statuses."""

    error: str
