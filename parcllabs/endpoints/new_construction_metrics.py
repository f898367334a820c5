"""New construction metrics."""

from __future__ import annotations

from ..models import BatchMetricsResponse, HousingEventCounts, HousingEventPrices, MetricsResponse
from .common import EndpointClient
from .params import MetricsParams


class NewConstructionMetricsClient(EndpointClient):
    group = "new_construction_metrics"

    async def housing_event_counts(
        self, parcl_id: int, params: MetricsParams | None = None
    ) -> MetricsResponse[HousingEventCounts]:
        return await self._series("housing_event_counts", parcl_id, HousingEventCounts, params)

    async def housing_event_prices(
        self, parcl_id: int, params: MetricsParams | None = None
    ) -> MetricsResponse[HousingEventPrices]:
        return await self._series("housing_event_prices", parcl_id, HousingEventPrices, params)

    async def batch_housing_event_counts(
        self, parcl_ids: list[int], params: MetricsParams | None = None
    ) -> BatchMetricsResponse[HousingEventCounts]:
        return await self._batch("housing_event_counts", parcl_ids, HousingEventCounts, params)

    async def batch_housing_event_prices(
        self, parcl_ids: list[int], params: MetricsParams | None = None
    ) -> BatchMetricsResponse[HousingEventPrices]:
        return await self._batch("housing_event_prices", parcl_ids, HousingEventPrices, params)
