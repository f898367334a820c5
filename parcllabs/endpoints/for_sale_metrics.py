"""For-sale inventory metrics."""

from __future__ import annotations

from ..models import (
    BatchMetricsResponse,
    ForSaleInventory,
    ForSaleInventoryPriceChanges,
    MetricsResponse,
    NewListingsRollingCounts,
)
from .common import EndpointClient
from .params import MetricsParams


class ForSaleMetricsClient(EndpointClient):
    """Homes currently listed for sale, with price cuts and new listing flow."""

    group = "for_sale_market_metrics"

    async def for_sale_inventory(
        self, parcl_id: int, params: MetricsParams | None = None
    ) -> MetricsResponse[ForSaleInventory]:
        return await self._series("for_sale_inventory", parcl_id, ForSaleInventory, params)

    async def for_sale_inventory_price_changes(
        self, parcl_id: int, params: MetricsParams | None = None
    ) -> MetricsResponse[ForSaleInventoryPriceChanges]:
        return await self._series(
            "for_sale_inventory_price_changes", parcl_id, ForSaleInventoryPriceChanges, params
        )

    async def new_listings_rolling_counts(
        self, parcl_id: int, params: MetricsParams | None = None
    ) -> MetricsResponse[NewListingsRollingCounts]:
        return await self._series(
            "new_listings_rolling_counts", parcl_id, NewListingsRollingCounts, params
        )

    async def batch_for_sale_inventory(
        self, parcl_ids: list[int], params: MetricsParams | None = None
    ) -> BatchMetricsResponse[ForSaleInventory]:
        return await self._batch("for_sale_inventory", parcl_ids, ForSaleInventory, params)

    async def batch_for_sale_inventory_price_changes(
        self, parcl_ids: list[int], params: MetricsParams | None = None
    ) -> BatchMetricsResponse[ForSaleInventoryPriceChanges]:
        return await self._batch(
            "for_sale_inventory_price_changes", parcl_ids, ForSaleInventoryPriceChanges, params
        )

    async def batch_new_listings_rolling_counts(
        self, parcl_ids: list[int], params: MetricsParams | None = None
    ) -> BatchMetricsResponse[NewListingsRollingCounts]:
        return await self._batch(
            "new_listings_rolling_counts", parcl_ids, NewListingsRollingCounts, params
        )
