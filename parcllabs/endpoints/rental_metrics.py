"""Rental market metrics."""

from __future__ import annotations

from ..models import (
    BatchMetricsResponse,
    GrossYield,
    MetricsResponse,
    RentalNewListingsRollingCounts,
    RentalUnitsConcentration,
)
from .common import EndpointClient
from .params import MetricsParams


class RentalMetricsClient(EndpointClient):
    group = "rental_market_metrics"

    async def gross_yield(
        self, parcl_id: int, params: MetricsParams | None = None
    ) -> MetricsResponse[GrossYield]:
        """Annual rent over purchase price for homes listed for rent."""
        return await self._series("gross_yield", parcl_id, GrossYield, params)

    async def rental_units_concentration(
        self, parcl_id: int, params: MetricsParams | None = None
    ) -> MetricsResponse[RentalUnitsConcentration]:
        return await self._series(
            "rental_units_concentration", parcl_id, RentalUnitsConcentration, params
        )

    async def new_listings_for_rent_rolling_counts(
        self, parcl_id: int, params: MetricsParams | None = None
    ) -> MetricsResponse[RentalNewListingsRollingCounts]:
        return await self._series(
            "new_listings_for_rent_rolling_counts",
            parcl_id,
            RentalNewListingsRollingCounts,
            params,
        )

    async def batch_gross_yield(
        self, parcl_ids: list[int], params: MetricsParams | None = None
    ) -> BatchMetricsResponse[GrossYield]:
        return await self._batch("gross_yield", parcl_ids, GrossYield, params)

    async def batch_rental_units_concentration(
        self, parcl_ids: list[int], params: MetricsParams | None = None
    ) -> BatchMetricsResponse[RentalUnitsConcentration]:
        return await self._batch(
            "rental_units_concentration", parcl_ids, RentalUnitsConcentration, params
        )

    async def batch_new_listings_for_rent_rolling_counts(
        self, parcl_ids: list[int], params: MetricsParams | None = None
    ) -> BatchMetricsResponse[RentalNewListingsRollingCounts]:
        return await self._batch(
            "new_listings_for_rent_rolling_counts",
            parcl_ids,
            RentalNewListingsRollingCounts,
            params,
        )
