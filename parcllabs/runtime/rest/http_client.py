"""HTTP client performing single-page requests with rate-limit retry.

The client sends one request, retries it while the server answers 429 and
retries remain, and validates the body into a caller-supplied Pydantic
model. It never touches credit counters; that is the paginator's job.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, TypeVar

import aiohttp
from pydantic import BaseModel, ValidationError

from ...core.config import DEFAULT_TIMEOUT, RetryPolicy
from ...core.exceptions import APIError, ParseError, RateLimitError, TransportError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

HTTP_TOO_MANY_REQUESTS = 429


def _decode(raw: bytes) -> str:
    # Error bodies are not guaranteed to be valid UTF-8.
    return raw.decode("utf-8", errors="replace")


class HTTPClient:
    """Async HTTP client wrapper bound to one API key."""

    def __init__(
        self,
        api_key: str,
        *,
        retry_policy: RetryPolicy | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.retry_policy = retry_policy or RetryPolicy()
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._api_key = api_key
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    @property
    def headers(self) -> dict[str, str]:
        # The raw key is the header value; the API does not use a Bearer scheme.
        return {"Authorization": self._api_key}

    async def fetch_page(
        self,
        method: str,
        url: str,
        response_model: type[ModelT],
        *,
        body: Any = None,
    ) -> ModelT:
        """Fetch one page and validate it into ``response_model``.

        Args:
            method: "GET" or "POST"
            url: Absolute URL with the query string already encoded
            response_model: Pydantic model the JSON body must match
            body: JSON-serializable request body (POST only)

        Raises:
            RateLimitError: 429 persisted through every retry
            APIError: Any other non-2xx status (never retried)
            TransportError: Connection, TLS or timeout failure (never retried)
            ParseError: Body did not match ``response_model`` (never retried)
        """
        method = method.upper()
        policy = self.retry_policy
        attempt = 0

        while True:
            status, raw = await self._send(method, url, body)
            logger.debug(
                "request_completed",
                extra={"method": method, "url": url, "status": status, "attempt": attempt},
            )

            if status == HTTP_TOO_MANY_REQUESTS and attempt < policy.max_retries:
                delay = policy.backoff_for(attempt)
                logger.warning(
                    "rate_limited_retrying",
                    extra={"url": url, "attempt": attempt, "backoff_seconds": delay},
                )
                await asyncio.sleep(delay)
                attempt += 1
                continue

            if status == HTTP_TOO_MANY_REQUESTS:
                logger.error("rate_limit_exhausted", extra={"url": url, "attempts": attempt + 1})
                raise RateLimitError(_decode(raw), attempts=attempt + 1)

            if not 200 <= status < 300:
                raise APIError(_decode(raw), status_code=status)

            return self._parse(raw, response_model)

    async def _send(self, method: str, url: str, body: Any) -> tuple[int, bytes]:
        """Issue one request and return its status and raw body."""
        try:
            async with self.session.request(
                method, url, json=body, headers=self.headers
            ) as response:
                return response.status, await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(f"{method} {url} failed: {e}") from e

    @staticmethod
    def _parse(raw: bytes, response_model: type[ModelT]) -> ModelT:
        try:
            return response_model.model_validate_json(raw)
        except (ValidationError, UnicodeDecodeError) as e:
            raise ParseError(
                f"Failed to parse response as {response_model.__name__}: {e}"
            ) from e

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
