"""Endpoint groups and their request parameter models."""

from .common import EndpointClient, batch_spec, series_spec
from .for_sale_metrics import ForSaleMetricsClient
from .investor_metrics import InvestorMetricsClient
from .market_metrics import MarketMetricsClient
from .new_construction_metrics import NewConstructionMetricsClient
from .params import (
    EventHistoryParams,
    MetricsParams,
    PortfolioMetricsParams,
    PropertySearchParams,
    SearchParams,
)
from .portfolio_metrics import PortfolioMetricsClient
from .price_feed import PriceFeedClient
from .property import PropertyClient
from .rental_metrics import RentalMetricsClient
from .search import SearchClient

__all__ = [
    # Clients
    "EndpointClient",
    "ForSaleMetricsClient",
    "InvestorMetricsClient",
    "MarketMetricsClient",
    "NewConstructionMetricsClient",
    "PortfolioMetricsClient",
    "PriceFeedClient",
    "PropertyClient",
    "RentalMetricsClient",
    "SearchClient",
    # Params
    "EventHistoryParams",
    "MetricsParams",
    "PortfolioMetricsParams",
    "PropertySearchParams",
    "SearchParams",
    # Specs
    "batch_spec",
    "series_spec",
]
