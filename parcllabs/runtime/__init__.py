"""Runtime layer: HTTP transport, pagination and usage tracking."""

from .rest import CreditTracker, HTTPClient, Paginator, RestEndpointSpec, RestRunner

__all__ = [
    "CreditTracker",
    "HTTPClient",
    "Paginator",
    "RestEndpointSpec",
    "RestRunner",
]
