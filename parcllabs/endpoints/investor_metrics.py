"""Investor activity metrics."""

from __future__ import annotations

from ..models import (
    BatchMetricsResponse,
    HousingEventPrices,
    InvestorHousingEventCounts,
    InvestorHousingStockOwnership,
    InvestorNewListingsRollingCounts,
    InvestorPurchaseToSaleRatio,
    MetricsResponse,
)
from .common import EndpointClient
from .params import MetricsParams


class InvestorMetricsClient(EndpointClient):
    group = "investor_metrics"

    async def housing_stock_ownership(
        self, parcl_id: int, params: MetricsParams | None = None
    ) -> MetricsResponse[InvestorHousingStockOwnership]:
        """Count and share of the housing stock held by investors."""
        return await self._series(
            "housing_stock_ownership", parcl_id, InvestorHousingStockOwnership, params
        )

    async def purchase_to_sale_ratio(
        self, parcl_id: int, params: MetricsParams | None = None
    ) -> MetricsResponse[InvestorPurchaseToSaleRatio]:
        return await self._series(
            "purchase_to_sale_ratio", parcl_id, InvestorPurchaseToSaleRatio, params
        )

    async def housing_event_counts(
        self, parcl_id: int, params: MetricsParams | None = None
    ) -> MetricsResponse[InvestorHousingEventCounts]:
        return await self._series(
            "housing_event_counts", parcl_id, InvestorHousingEventCounts, params
        )

    async def housing_event_prices(
        self, parcl_id: int, params: MetricsParams | None = None
    ) -> MetricsResponse[HousingEventPrices]:
        return await self._series("housing_event_prices", parcl_id, HousingEventPrices, params)

    async def new_listings_for_sale_rolling_counts(
        self, parcl_id: int, params: MetricsParams | None = None
    ) -> MetricsResponse[InvestorNewListingsRollingCounts]:
        return await self._series(
            "new_listings_for_sale_rolling_counts",
            parcl_id,
            InvestorNewListingsRollingCounts,
            params,
        )

    async def batch_housing_stock_ownership(
        self, parcl_ids: list[int], params: MetricsParams | None = None
    ) -> BatchMetricsResponse[InvestorHousingStockOwnership]:
        return await self._batch(
            "housing_stock_ownership", parcl_ids, InvestorHousingStockOwnership, params
        )

    async def batch_purchase_to_sale_ratio(
        self, parcl_ids: list[int], params: MetricsParams | None = None
    ) -> BatchMetricsResponse[InvestorPurchaseToSaleRatio]:
        return await self._batch(
            "purchase_to_sale_ratio", parcl_ids, InvestorPurchaseToSaleRatio, params
        )

    async def batch_housing_event_counts(
        self, parcl_ids: list[int], params: MetricsParams | None = None
    ) -> BatchMetricsResponse[InvestorHousingEventCounts]:
        return await self._batch(
            "housing_event_counts", parcl_ids, InvestorHousingEventCounts, params
        )

    async def batch_housing_event_prices(
        self, parcl_ids: list[int], params: MetricsParams | None = None
    ) -> BatchMetricsResponse[HousingEventPrices]:
        return await self._batch("housing_event_prices", parcl_ids, HousingEventPrices, params)

    async def batch_new_listings_for_sale_rolling_counts(
        self, parcl_ids: list[int], params: MetricsParams | None = None
    ) -> BatchMetricsResponse[InvestorNewListingsRollingCounts]:
        return await self._batch(
            "new_listings_for_sale_rolling_counts",
            parcl_ids,
            InvestorNewListingsRollingCounts,
            params,
        )
