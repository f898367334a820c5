"""Unit tests for HTTPClient.

Tests focus on the 429 retry loop, the backoff schedule, the errors raised
for other failures, and session management.
"""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, patch

import aiohttp
import pytest

from parcllabs.core import APIError, ParseError, RateLimitError, RetryPolicy, TransportError
from parcllabs.models import PaginatedResponse
from parcllabs.runtime.rest import HTTPClient

URL = "https://api.example.com/v1/search/markets"
Page = PaginatedResponse[str]


@pytest.fixture
def no_sleep():
    with patch("parcllabs.runtime.rest.http_client.asyncio.sleep", new_callable=AsyncMock) as sleep:
        yield sleep


class TestHTTPClientSessionManagement:
    def test_init(self):
        client = HTTPClient("key", timeout=10.0)
        assert client.timeout.total == 10.0
        assert client.retry_policy == RetryPolicy()
        assert client._session is None

    def test_authorization_header_is_raw_key(self):
        client = HTTPClient("secret-key")
        assert client.headers == {"Authorization": "secret-key"}

    @pytest.mark.asyncio
    async def test_session_property_creates_session(self):
        client = HTTPClient("key")
        session = client.session
        assert isinstance(session, aiohttp.ClientSession)
        assert client._session is session
        await client.close()

    @pytest.mark.asyncio
    async def test_close_idempotent(self):
        client = HTTPClient("key")
        _ = client.session
        await client.close()
        await client.close()
        assert client._session.closed

    @pytest.mark.asyncio
    async def test_context_manager(self):
        async with HTTPClient("key") as client:
            session = client.session
        assert session.closed


class TestHTTPClientFetchPage:
    @pytest.mark.asyncio
    async def test_success_parses_into_model(self, make_session, make_response, make_page):
        client = HTTPClient("key")
        client._session = make_session(make_response(200, make_page(["a", "b"])))

        page = await client.fetch_page("GET", URL, Page)

        assert page.items == ["a", "b"]
        assert page.total == 2
        client._session.request.assert_called_once_with(
            "GET", URL, json=None, headers={"Authorization": "key"}
        )

    @pytest.mark.asyncio
    async def test_post_sends_json_body(self, make_session, make_response, make_page):
        client = HTTPClient("key")
        client._session = make_session(make_response(200, make_page([])))
        body = {"parcl_id": [1, 2], "limit": 10}

        await client.fetch_page("post", URL, Page, body=body)

        client._session.request.assert_called_once_with(
            "POST", URL, json=body, headers={"Authorization": "key"}
        )

    @pytest.mark.asyncio
    async def test_parse_error_on_schema_mismatch(self, make_session, make_response):
        client = HTTPClient("key")
        client._session = make_session(make_response(200, {"items": "not-a-list"}))

        with pytest.raises(ParseError, match="PaginatedResponse"):
            await client.fetch_page("GET", URL, Page)

    @pytest.mark.asyncio
    async def test_parse_error_on_invalid_json(self, make_session, make_response):
        client = HTTPClient("key")
        client._session = make_session(make_response(200, text="<html>oops</html>"))

        with pytest.raises(ParseError):
            await client.fetch_page("GET", URL, Page)

    @pytest.mark.asyncio
    async def test_parse_error_on_invalid_utf8(self, make_session, make_response):
        client = HTTPClient("key")
        client._session = make_session(make_response(200, raw=b"\xff\xfe"))

        with pytest.raises(ParseError):
            await client.fetch_page("GET", URL, Page)


class TestHTTPClientRateLimiting:
    @pytest.mark.asyncio
    async def test_retries_429_then_succeeds(
        self, no_sleep, make_session, make_response, make_page
    ):
        client = HTTPClient("key")
        client._session = make_session(
            make_response(429, text="Too Many Requests"),
            make_response(200, make_page(["a"])),
        )

        page = await client.fetch_page("GET", URL, Page)

        assert page.items == ["a"]
        assert client._session.request.call_count == 2
        no_sleep.assert_awaited_once_with(1.0)

    @pytest.mark.asyncio
    async def test_exhausted_retries_raise_with_attempt_count(
        self, no_sleep, make_session, make_response
    ):
        client = HTTPClient("key", retry_policy=RetryPolicy(max_retries=3, initial_backoff=1.0))
        client._session = make_session(
            *[make_response(429, text=f"limited {i}") for i in range(4)]
        )

        with pytest.raises(RateLimitError) as exc_info:
            await client.fetch_page("GET", URL, Page)

        assert exc_info.value.attempts == 4
        assert exc_info.value.message == "limited 3"
        assert client._session.request.call_count == 4
        assert [c.args[0] for c in no_sleep.await_args_list] == [1.0, 2.0, 4.0]

    @pytest.mark.asyncio
    async def test_zero_retries_fails_on_first_429(self, no_sleep, make_session, make_response):
        client = HTTPClient("key", retry_policy=RetryPolicy(max_retries=0))
        client._session = make_session(make_response(429, text="limited"))

        with pytest.raises(RateLimitError) as exc_info:
            await client.fetch_page("GET", URL, Page)

        assert exc_info.value.attempts == 1
        no_sleep.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_backoff_scales_with_initial_delay(
        self, no_sleep, make_session, make_response, make_page
    ):
        client = HTTPClient("key", retry_policy=RetryPolicy(max_retries=5, initial_backoff=0.25))
        client._session = make_session(
            make_response(429),
            make_response(429),
            make_response(200, make_page([])),
        )

        await client.fetch_page("GET", URL, Page)

        assert [c.args[0] for c in no_sleep.await_args_list] == [0.25, 0.5]


class TestHTTPClientErrors:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [400, 401, 404, 500, 503])
    async def test_non_429_status_fails_without_retry(
        self, no_sleep, make_session, make_response, status
    ):
        client = HTTPClient("key")
        client._session = make_session(make_response(status, text="boom"))

        with pytest.raises(APIError) as exc_info:
            await client.fetch_page("GET", URL, Page)

        assert not isinstance(exc_info.value, RateLimitError)
        assert exc_info.value.status_code == status
        assert exc_info.value.message == "boom"
        assert client._session.request.call_count == 1
        no_sleep.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_undecodable_error_body_keeps_status(self, no_sleep, make_session, make_response):
        client = HTTPClient("key")
        client._session = make_session(make_response(500, raw=b"\xff\xfe"))

        with pytest.raises(APIError) as exc_info:
            await client.fetch_page("GET", URL, Page)

        assert exc_info.value.status_code == 500
        assert "�" in exc_info.value.message
        assert client._session.request.call_count == 1
        no_sleep.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_undecodable_429_body_still_raises_rate_limit(
        self, no_sleep, make_session, make_response
    ):
        client = HTTPClient("key", retry_policy=RetryPolicy(max_retries=0))
        client._session = make_session(make_response(429, raw=b"\xff\xfe"))

        with pytest.raises(RateLimitError) as exc_info:
            await client.fetch_page("GET", URL, Page)

        assert exc_info.value.attempts == 1
        assert "�" in exc_info.value.message

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error", [aiohttp.ClientConnectionError("refused"), asyncio.TimeoutError()]
    )
    async def test_transport_failure_is_not_retried(self, no_sleep, make_session, error):
        client = HTTPClient("key")
        client._session = make_session(error)

        with pytest.raises(TransportError):
            await client.fetch_page("GET", URL, Page)

        assert client._session.request.call_count == 1
        no_sleep.assert_not_awaited()
