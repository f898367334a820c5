"""REST runtime abstractions."""

from .credits import CreditTracker
from .http_client import HTTPClient
from .paginator import Paginator
from .runner import RestEndpointSpec, RestRunner

__all__ = [
    "CreditTracker",
    "HTTPClient",
    "Paginator",
    "RestEndpointSpec",
    "RestRunner",
]
