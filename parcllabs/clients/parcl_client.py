"""ParclClient facade over the Parcl Labs API.

Architecture:
    One client owns one HTTP session, one retry policy and one credit
    tracker. Every endpoint group is a thin sub-client that builds an
    endpoint spec and hands it to the shared runner, so retry, pagination
    and credit accounting behave the same on every endpoint.

Design Decisions:
    - Sub-clients are created once and exposed as properties
    - Credit counters live for the lifetime of the client; a client built
      with ``with_retry_policy`` starts from zero
    - The API key never appears in ``repr`` or log records
"""

from __future__ import annotations

import logging
from typing import Any

from ..core.config import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    RetryPolicy,
    normalize_base_url,
    resolve_api_key,
)
from ..endpoints import (
    ForSaleMetricsClient,
    InvestorMetricsClient,
    MarketMetricsClient,
    NewConstructionMetricsClient,
    PortfolioMetricsClient,
    PriceFeedClient,
    PropertyClient,
    RentalMetricsClient,
    SearchClient,
)
from ..models import AccountUsage
from ..runtime.rest import CreditTracker, HTTPClient, Paginator, RestRunner

logger = logging.getLogger(__name__)


class ParclClient:
    """Entry point for every Parcl Labs endpoint.

    Example:
        >>> async with ParclClient() as client:
        ...     markets = await client.search.markets(SearchParams(query="Los Angeles"))
        ...     series = await client.market_metrics.housing_event_counts(
        ...         markets.items[0].parcl_id, MetricsParams(auto_paginate=True)
        ...     )
        ...     print(client.session_credits_used)
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        retry_policy: RetryPolicy | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: Parcl Labs API key; read from ``PARCL_LABS_API_KEY`` if omitted
            base_url: API root, without trailing slash
            retry_policy: Rate-limit retry settings (default: 3 retries from 1s)
            timeout: Total per-request timeout in seconds

        Raises:
            ConfigurationError: If no API key is available
        """
        self._api_key = resolve_api_key(api_key)
        self.base_url = normalize_base_url(base_url)
        self.retry_policy = retry_policy or RetryPolicy()
        self._timeout = timeout

        self._http = HTTPClient(self._api_key, retry_policy=self.retry_policy, timeout=timeout)
        self._credits = CreditTracker()
        self._runner = RestRunner(Paginator(self._http, self._credits), self.base_url)
        self._closed = False

        self._search = SearchClient(self._runner)
        self._market_metrics = MarketMetricsClient(self._runner)
        self._investor_metrics = InvestorMetricsClient(self._runner)
        self._for_sale_metrics = ForSaleMetricsClient(self._runner)
        self._rental_metrics = RentalMetricsClient(self._runner)
        self._new_construction_metrics = NewConstructionMetricsClient(self._runner)
        self._portfolio_metrics = PortfolioMetricsClient(self._runner)
        self._price_feed = PriceFeedClient(self._runner)
        self._property = PropertyClient(self._runner)

    def __repr__(self) -> str:
        return (
            f"ParclClient(api_key='***', base_url={self.base_url!r}, "
            f"retry_policy={self.retry_policy!r})"
        )

    def with_retry_policy(self, retry_policy: RetryPolicy) -> ParclClient:
        """Return a new client with ``retry_policy`` and fresh credit counters."""
        return ParclClient(
            self._api_key,
            base_url=self.base_url,
            retry_policy=retry_policy,
            timeout=self._timeout,
        )

    # --- Usage ---------------------------------------------------------------

    def account_info(self) -> AccountUsage:
        """Credits used by this client so far and the last reported balance."""
        return self._credits.snapshot()

    @property
    def session_credits_used(self) -> int:
        return self._credits.session_credits_used

    @property
    def remaining_credits(self) -> int:
        return self._credits.remaining_credits

    # --- Endpoint groups -----------------------------------------------------

    @property
    def search(self) -> SearchClient:
        return self._search

    @property
    def market_metrics(self) -> MarketMetricsClient:
        return self._market_metrics

    @property
    def investor_metrics(self) -> InvestorMetricsClient:
        return self._investor_metrics

    @property
    def for_sale_metrics(self) -> ForSaleMetricsClient:
        return self._for_sale_metrics

    @property
    def rental_metrics(self) -> RentalMetricsClient:
        return self._rental_metrics

    @property
    def new_construction_metrics(self) -> NewConstructionMetricsClient:
        return self._new_construction_metrics

    @property
    def portfolio_metrics(self) -> PortfolioMetricsClient:
        return self._portfolio_metrics

    @property
    def price_feed(self) -> PriceFeedClient:
        return self._price_feed

    # Keep last among properties: this name shadows the builtin in the class body.
    @property
    def property(self) -> PropertyClient:
        return self._property

    # --- Lifecycle -----------------------------------------------------------

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        if self._closed:
            return
        self._closed = True
        logger.debug("Closing ParclClient", extra={"base_url": self.base_url})
        await self._http.close()

    async def __aenter__(self) -> ParclClient:
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()
