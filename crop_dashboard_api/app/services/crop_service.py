"""
Service layer for crop listings and regional price statistics.

Both queries are read-only and use parameterised statements.  The
dashboard aggregation runs as a single query; the diagnostic output
(raw prices per region, uniform-pricing warnings) is derived from the
same result set through ``GROUP_CONCAT`` rather than a second read.
"""

from __future__ import annotations

import logging
from typing import List

from crop_dashboard_api.app.core.db import ListingStore
from crop_dashboard_api.app.schemas.crop import RegionalPrice


logger = logging.getLogger(__name__)

CROPS_QUERY = "SELECT DISTINCT product_name FROM store_product"

REGIONAL_PRICES_QUERY = """
    SELECT
        up.state AS state,
        MIN(sp.price) AS min_price,
        MAX(sp.price) AS max_price,
        COUNT(*) AS price_count,
        GROUP_CONCAT(sp.price) AS all_prices
    FROM store_product sp
    JOIN app_userprofile up ON sp.farmerID = up.id
    WHERE sp.product_name = ?
    GROUP BY up.state
    ORDER BY up.state
"""


class CropService:
    """Read operations over the listings store."""

    @classmethod
    def list_crops(cls, store: ListingStore) -> List[str]:
        """Return every distinct product name, in store order."""
        rows = store.fetch_all(CROPS_QUERY)
        return [row["product_name"] for row in rows]

    @classmethod
    def regional_prices(cls, store: ListingStore, crop: str) -> List[RegionalPrice]:
        """Return min/max/count of ``crop`` prices per seller region.

        Regions come back ordered by name ascending, one entry per region
        with at least one matching listing.  Listings whose seller has no
        profile are left out by the inner join.  An unknown crop yields an
        empty list.

        Raises
        ------
        ValueError
            If ``crop`` is empty; the store is not queried.
        StoreQueryError
            If the store is closed or the query fails.
        """
        if not crop:
            raise ValueError("crop name is required")

        rows = store.fetch_all(REGIONAL_PRICES_QUERY, (crop,))
        logger.debug(
            "Raw prices for %s: %s",
            crop,
            {row["state"]: row["all_prices"] for row in rows},
        )

        results: List[RegionalPrice] = []
        for row in rows:
            if row["min_price"] == row["max_price"]:
                logger.warning(
                    "Min and max prices are equal for %s in %s: %s",
                    crop,
                    row["state"],
                    row["all_prices"],
                )
            results.append(
                RegionalPrice(
                    state=row["state"],
                    min_price=row["min_price"],
                    max_price=row["max_price"],
                    price_count=row["price_count"],
                )
            )
        logger.debug("Aggregated results for %s: %s", crop, results)
        return results
