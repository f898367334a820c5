"""Client configuration defaults and retry policy.

This module centralizes the API base URL, the credential lookup and the
rate-limit retry policy so the client facade can stay small and focused.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from .exceptions import ConfigurationError

DEFAULT_BASE_URL = "https://api.parcllabs.com"
ENV_API_KEY = "PARCL_LABS_API_KEY"

# Total request timeout in seconds, applied per HTTP call
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class RetryPolicy:
    """Retry configuration for rate-limited (HTTP 429) responses.

    Attributes:
        max_retries: Retries allowed after the first attempt
        initial_backoff: Delay in seconds before the first retry; doubles on
            each further retry
    """

    max_retries: int = 3
    initial_backoff: float = 1.0

    def __post_init__(self) -> None:
        if self.max_retries < 0:
            raise ConfigurationError("max_retries must be >= 0")
        if self.initial_backoff < 0:
            raise ConfigurationError("initial_backoff must be >= 0")

    def backoff_for(self, attempt: int) -> float:
        """Return the delay before retrying after zero-based ``attempt``.

        Examples:
            >>> RetryPolicy().backoff_for(0)
            1.0
            >>> RetryPolicy(initial_backoff=0.5).backoff_for(3)
            4.0
        """
        return self.initial_backoff * (2**attempt)


def resolve_api_key(api_key: str | None = None) -> str:
    """Return the explicit key, falling back to ``PARCL_LABS_API_KEY``.

    Raises:
        ConfigurationError: If neither source provides a non-empty key
    """
    key = api_key if api_key is not None else os.environ.get(ENV_API_KEY)
    if not key:
        raise ConfigurationError(
            f"API key not provided. Set {ENV_API_KEY} environment variable "
            "or pass it to the client"
        )
    return key


def normalize_base_url(base_url: str) -> str:
    """Strip trailing slashes so paths can be appended verbatim."""
    return base_url.rstrip("/")
