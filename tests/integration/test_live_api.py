"""Integration tests against the live Parcl Labs API.

Each call spends real credits; keep page sizes small.
"""

import os

import pytest

from parcllabs import MetricsParams, ParclClient, SearchParams

pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_PARCL_NETWORK_TESTS") != "1" or not os.environ.get("PARCL_LABS_API_KEY"),
    reason="Requires network access and PARCL_LABS_API_KEY",
)

LOS_ANGELES = 2900187


class TestLiveAPI:
    @pytest.mark.asyncio
    async def test_search_markets(self):
        async with ParclClient() as client:
            result = await client.search.markets(SearchParams(query="Los Angeles", limit=5))

        assert result.items
        assert all(market.parcl_id > 0 for market in result.items)

    @pytest.mark.asyncio
    async def test_auto_pagination_accumulates_pages(self):
        async with ParclClient() as client:
            result = await client.market_metrics.housing_event_counts(
                LOS_ANGELES,
                MetricsParams(limit=2, start_date="2024-01-01", end_date="2024-06-30",
                              auto_paginate=True),
            )

        assert result.parcl_id == LOS_ANGELES
        assert len(result.items) > 2
        assert result.links.next is None

    @pytest.mark.asyncio
    async def test_credits_are_tracked(self):
        async with ParclClient() as client:
            await client.market_metrics.housing_stock(LOS_ANGELES, MetricsParams(limit=1))
            usage = client.account_info()

        assert usage.est_session_credits_used >= 0
        assert usage.est_remaining_credits >= 0
