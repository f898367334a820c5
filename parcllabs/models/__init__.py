"""Data models for API responses and request bodies.

Architecture:
    This module exports all Pydantic v2 data models used throughout the library.
    Response models are immutable (frozen=True); the paginator builds the
    aggregated result of a multi-page fetch with ``model_copy`` rather than
    mutating the first page.

Model Categories:
    - Envelopes: PaginatedResponse, MetricsResponse, BatchMetricsResponse,
      PaginationLinks
    - Usage: AccountInfo (per call), AccountUsage (per client session)
    - Search: Market
    - Metrics: market, investor, for-sale, rental, portfolio, price feed rows
    - Property: v1/v2 search results, event history, request bodies
"""

from .envelope import (
    AccountInfo,
    AccountUsage,
    BatchMetricsResponse,
    MetricsResponse,
    PaginatedResponse,
    PaginationLinks,
)
from .market import Market
from .metrics import (
    AllCash,
    EventPrices,
    ForSaleInventory,
    ForSaleInventoryPriceChanges,
    GrossYield,
    HousingEventCounts,
    HousingEventPrices,
    HousingEventPropertyAttributes,
    HousingStock,
    InvestorHousingEventCounts,
    InvestorHousingStockOwnership,
    InvestorNewListingsRollingCounts,
    InvestorPurchaseToSaleRatio,
    MetricRecord,
    NewListingsRollingCounts,
    PortfolioHousingEventCounts,
    PortfolioNewListingsRollingCounts,
    PortfolioRentalListingsRollingCounts,
    PortfolioSizeBreakdown,
    PortfolioSizePctBreakdown,
    PortfolioStockOwnership,
    PriceFeedEntry,
    PriceStats,
    RentalNewListingsRollingCounts,
    RentalUnitsConcentration,
    RollingCounts,
    RollingPercentages,
)
from .property import (
    AddressSearchRequest,
    GeoCoordinates,
    OwnerFilters,
    Property,
    PropertyEvent,
    PropertyEventHistoryResponse,
    PropertyFilters,
    PropertyMetadata,
    PropertySearchResponse,
    PropertyV2,
    PropertyV2Event,
    PropertyV2Metadata,
    PropertyV2SearchRequest,
    PropertyV2SearchResponse,
    PropertyWithEvents,
    V2EventFilters,
)

__all__ = [
    # Envelopes
    "AccountInfo",
    "AccountUsage",
    "BatchMetricsResponse",
    "MetricsResponse",
    "PaginatedResponse",
    "PaginationLinks",
    # Search
    "Market",
    # Metrics
    "AllCash",
    "EventPrices",
    "ForSaleInventory",
    "ForSaleInventoryPriceChanges",
    "GrossYield",
    "HousingEventCounts",
    "HousingEventPrices",
    "HousingEventPropertyAttributes",
    "HousingStock",
    "InvestorHousingEventCounts",
    "InvestorHousingStockOwnership",
    "InvestorNewListingsRollingCounts",
    "InvestorPurchaseToSaleRatio",
    "MetricRecord",
    "NewListingsRollingCounts",
    "PortfolioHousingEventCounts",
    "PortfolioNewListingsRollingCounts",
    "PortfolioRentalListingsRollingCounts",
    "PortfolioSizeBreakdown",
    "PortfolioSizePctBreakdown",
    "PortfolioStockOwnership",
    "PriceFeedEntry",
    "PriceStats",
    "RentalNewListingsRollingCounts",
    "RentalUnitsConcentration",
    "RollingCounts",
    "RollingPercentages",
    # Property
    "AddressSearchRequest",
    "GeoCoordinates",
    "OwnerFilters",
    "Property",
    "PropertyEvent",
    "PropertyEventHistoryResponse",
    "PropertyFilters",
    "PropertyMetadata",
    "PropertySearchResponse",
    "PropertyV2",
    "PropertyV2Event",
    "PropertyV2Metadata",
    "PropertyV2SearchRequest",
    "PropertyV2SearchResponse",
    "PropertyWithEvents",
    "V2EventFilters",
]
