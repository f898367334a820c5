"""Custom exception hierarchy."""

from __future__ import annotations


class ParclError(Exception):
    """Base exception for all library errors."""

    pass


class ConfigurationError(ParclError):
    """Client cannot be constructed with the given settings.

    Raised before any network activity, e.g. when no API key is passed and
    the ``PARCL_LABS_API_KEY`` environment variable is unset.
    """

    pass


class InvalidParameterError(ParclError, ValueError):
    """Request arguments that can never produce a valid request."""

    pass


class TransportError(ParclError):
    """Connection, TLS or timeout failure. Never retried by the client."""

    pass


class APIError(ParclError):
    """Non-success HTTP status returned by the API."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(f"API error ({status_code}): {message}")
        self.status_code = status_code
        self.message = message


class RateLimitError(APIError):
    """Rate limit still in force after every retry was spent."""

    def __init__(self, message: str, attempts: int) -> None:
        super().__init__(message, status_code=429)
        self.attempts = attempts

    def __str__(self) -> str:
        return f"Rate limited after {self.attempts} attempts: {self.message}"


class ParseError(ParclError):
    """Response body did not match the expected schema."""

    pass
