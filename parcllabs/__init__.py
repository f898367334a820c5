"""Parcl Labs - Async client for the Parcl Labs housing market API."""

from .clients import ParclClient
from .core import (
    DEFAULT_BASE_URL,
    ENV_API_KEY,
    APIError,
    ConfigurationError,
    EntityOwnerName,
    EventType,
    InvalidParameterError,
    LocationType,
    ParclError,
    ParseError,
    PortfolioSize,
    PropertyType,
    RateLimitError,
    RetryPolicy,
    SortBy,
    SortOrder,
    TransportError,
    USRegion,
)
from .endpoints import (
    EventHistoryParams,
    MetricsParams,
    PortfolioMetricsParams,
    PropertySearchParams,
    SearchParams,
)
from .models import (
    AccountInfo,
    AccountUsage,
    AddressSearchRequest,
    BatchMetricsResponse,
    GeoCoordinates,
    Market,
    MetricsResponse,
    OwnerFilters,
    PaginatedResponse,
    PaginationLinks,
    PropertyFilters,
    PropertyV2SearchRequest,
    V2EventFilters,
)

__version__ = "0.1.0"

__all__ = [
    # Client
    "ParclClient",
    "RetryPolicy",
    "DEFAULT_BASE_URL",
    "ENV_API_KEY",
    # Params
    "EventHistoryParams",
    "MetricsParams",
    "PortfolioMetricsParams",
    "PropertySearchParams",
    "SearchParams",
    # Request bodies
    "AddressSearchRequest",
    "GeoCoordinates",
    "OwnerFilters",
    "PropertyFilters",
    "PropertyV2SearchRequest",
    "V2EventFilters",
    # Responses
    "AccountInfo",
    "AccountUsage",
    "BatchMetricsResponse",
    "Market",
    "MetricsResponse",
    "PaginatedResponse",
    "PaginationLinks",
    # Enums
    "EntityOwnerName",
    "EventType",
    "LocationType",
    "PortfolioSize",
    "PropertyType",
    "SortBy",
    "SortOrder",
    "USRegion",
    # Exceptions
    "ParclError",
    "ConfigurationError",
    "InvalidParameterError",
    "TransportError",
    "APIError",
    "RateLimitError",
    "ParseError",
]
