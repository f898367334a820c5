"""Market-level housing metrics for a single market."""

from __future__ import annotations

from ..models import (
    AllCash,
    HousingEventCounts,
    HousingEventPrices,
    HousingEventPropertyAttributes,
    HousingStock,
    MetricsResponse,
)
from .common import EndpointClient
from .params import MetricsParams


class MarketMetricsClient(EndpointClient):
    """Sales, listings and rental activity for one ``parcl_id``.

    The API offers no multi-market variant for this group.
    """

    group = "market_metrics"

    async def housing_event_counts(
        self, parcl_id: int, params: MetricsParams | None = None
    ) -> MetricsResponse[HousingEventCounts]:
        """Monthly counts of sales, new listings and new rental listings."""
        return await self._series("housing_event_counts", parcl_id, HousingEventCounts, params)

    async def housing_stock(
        self, parcl_id: int, params: MetricsParams | None = None
    ) -> MetricsResponse[HousingStock]:
        return await self._series("housing_stock", parcl_id, HousingStock, params)

    async def housing_event_prices(
        self, parcl_id: int, params: MetricsParams | None = None
    ) -> MetricsResponse[HousingEventPrices]:
        return await self._series("housing_event_prices", parcl_id, HousingEventPrices, params)

    async def all_cash(
        self, parcl_id: int, params: MetricsParams | None = None
    ) -> MetricsResponse[AllCash]:
        return await self._series("all_cash", parcl_id, AllCash, params)

    async def housing_event_property_attributes(
        self, parcl_id: int, params: MetricsParams | None = None
    ) -> MetricsResponse[HousingEventPropertyAttributes]:
        """Median size, age and room counts of the homes behind each event."""
        return await self._series(
            "housing_event_property_attributes",
            parcl_id,
            HousingEventPropertyAttributes,
            params,
        )
