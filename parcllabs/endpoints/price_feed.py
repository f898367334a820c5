"""Daily Parcl price feed series."""

from __future__ import annotations

from ..models import BatchMetricsResponse, MetricsResponse, PriceFeedEntry
from .common import EndpointClient
from .params import MetricsParams

RENTAL_PATH = "rental_price_feed"


class PriceFeedClient(EndpointClient):
    """Daily price per square foot, for sales and for rentals.

    ``rental_history`` is served under ``/rental_price_feed`` on the wire.
    """

    group = "price_feed"

    async def history(
        self, parcl_id: int, params: MetricsParams | None = None
    ) -> MetricsResponse[PriceFeedEntry]:
        return await self._series("history", parcl_id, PriceFeedEntry, params)

    async def rental_history(
        self, parcl_id: int, params: MetricsParams | None = None
    ) -> MetricsResponse[PriceFeedEntry]:
        return await self._series(
            "rental_history", parcl_id, PriceFeedEntry, params, path_name=RENTAL_PATH
        )

    async def batch_history(
        self, parcl_ids: list[int], params: MetricsParams | None = None
    ) -> BatchMetricsResponse[PriceFeedEntry]:
        return await self._batch("history", parcl_ids, PriceFeedEntry, params)

    async def batch_rental_history(
        self, parcl_ids: list[int], params: MetricsParams | None = None
    ) -> BatchMetricsResponse[PriceFeedEntry]:
        return await self._batch(
            "rental_history", parcl_ids, PriceFeedEntry, params, path_name=RENTAL_PATH
        )
