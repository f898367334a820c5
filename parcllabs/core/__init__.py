"""Core configuration, enums and exceptions."""

from .config import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    ENV_API_KEY,
    RetryPolicy,
    normalize_base_url,
    resolve_api_key,
)
from .enums import (
    EntityOwnerName,
    EventType,
    LocationType,
    PortfolioSize,
    PropertyType,
    SortBy,
    SortOrder,
    USRegion,
)
from .exceptions import (
    APIError,
    ConfigurationError,
    InvalidParameterError,
    ParclError,
    ParseError,
    RateLimitError,
    TransportError,
)

__all__ = [
    # Config
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT",
    "ENV_API_KEY",
    "RetryPolicy",
    "normalize_base_url",
    "resolve_api_key",
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
    "APIError",
    "ConfigurationError",
    "InvalidParameterError",
    "ParclError",
    "ParseError",
    "RateLimitError",
    "TransportError",
]
