"""Single-family portfolio metrics, segmented by owner portfolio size."""

from __future__ import annotations

from ..models import (
    BatchMetricsResponse,
    MetricsResponse,
    PortfolioHousingEventCounts,
    PortfolioNewListingsRollingCounts,
    PortfolioRentalListingsRollingCounts,
    PortfolioStockOwnership,
)
from .common import EndpointClient
from .params import PortfolioMetricsParams


class PortfolioMetricsClient(EndpointClient):
    group = "portfolio_metrics"
    params_type = PortfolioMetricsParams

    async def sf_housing_stock_ownership(
        self, parcl_id: int, params: PortfolioMetricsParams | None = None
    ) -> MetricsResponse[PortfolioStockOwnership]:
        return await self._series(
            "sf_housing_stock_ownership", parcl_id, PortfolioStockOwnership, params
        )

    async def sf_housing_event_counts(
        self, parcl_id: int, params: PortfolioMetricsParams | None = None
    ) -> MetricsResponse[PortfolioHousingEventCounts]:
        return await self._series(
            "sf_housing_event_counts", parcl_id, PortfolioHousingEventCounts, params
        )

    async def sf_new_listings_for_sale_rolling_counts(
        self, parcl_id: int, params: PortfolioMetricsParams | None = None
    ) -> MetricsResponse[PortfolioNewListingsRollingCounts]:
        return await self._series(
            "sf_new_listings_for_sale_rolling_counts",
            parcl_id,
            PortfolioNewListingsRollingCounts,
            params,
        )

    async def sf_new_listings_for_rent_rolling_counts(
        self, parcl_id: int, params: PortfolioMetricsParams | None = None
    ) -> MetricsResponse[PortfolioRentalListingsRollingCounts]:
        return await self._series(
            "sf_new_listings_for_rent_rolling_counts",
            parcl_id,
            PortfolioRentalListingsRollingCounts,
            params,
        )

    async def batch_sf_housing_stock_ownership(
        self, parcl_ids: list[int], params: PortfolioMetricsParams | None = None
    ) -> BatchMetricsResponse[PortfolioStockOwnership]:
        return await self._batch(
            "sf_housing_stock_ownership", parcl_ids, PortfolioStockOwnership, params
        )

    async def batch_sf_housing_event_counts(
        self, parcl_ids: list[int], params: PortfolioMetricsParams | None = None
    ) -> BatchMetricsResponse[PortfolioHousingEventCounts]:
        return await self._batch(
            "sf_housing_event_counts", parcl_ids, PortfolioHousingEventCounts, params
        )

    async def batch_sf_new_listings_for_sale_rolling_counts(
        self, parcl_ids: list[int], params: PortfolioMetricsParams | None = None
    ) -> BatchMetricsResponse[PortfolioNewListingsRollingCounts]:
        return await self._batch(
            "sf_new_listings_for_sale_rolling_counts",
            parcl_ids,
            PortfolioNewListingsRollingCounts,
            params,
        )

    async def batch_sf_new_listings_for_rent_rolling_counts(
        self, parcl_ids: list[int], params: PortfolioMetricsParams | None = None
    ) -> BatchMetricsResponse[PortfolioRentalListingsRollingCounts]:
        return await self._batch(
            "sf_new_listings_for_rent_rolling_counts",
            parcl_ids,
            PortfolioRentalListingsRollingCounts,
            params,
        )
