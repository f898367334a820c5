"""Shared fixtures for offline unit tests.

Responses are mocked at the aiohttp session boundary: ``session.request``
returns objects usable as ``async with`` targets, one per call.
"""

from __future__ import annotations

import json
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

API_KEY = "test-key"
BASE_URL = "https://api.example.com"


def _response(
    status: int = 200,
    payload: Any = None,
    *,
    text: str | None = None,
    raw: bytes | None = None,
) -> AsyncMock:
    response = AsyncMock()
    response.status = status
    if raw is None:
        body = text if text is not None else json.dumps(payload if payload is not None else {})
        raw = body.encode()
    response.read = AsyncMock(return_value=raw)
    response.__aenter__ = AsyncMock(return_value=response)
    response.__aexit__ = AsyncMock(return_value=None)
    return response


def _session(*responses: Any) -> MagicMock:
    session = MagicMock()
    session.closed = False  # session property checks this
    session.request = MagicMock(side_effect=list(responses))
    return session


def _page(
    items: list[Any],
    *,
    next_url: str | None = None,
    total: int | None = None,
    limit: int = 2,
    offset: int = 0,
    account: dict[str, int] | None = None,
    **extra: Any,
) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "items": items,
        "total": total if total is not None else len(items),
        "limit": limit,
        "offset": offset,
        "links": {"first": None, "next": next_url, "prev": None, "last": None},
        **extra,
    }
    if account is not None:
        payload["account"] = account
    return payload


@pytest.fixture
def make_response():
    """Factory for a mocked aiohttp response."""
    return _response


@pytest.fixture
def make_session():
    """Factory for a mocked aiohttp session answering with the given responses in order."""
    return _session


@pytest.fixture
def make_page():
    """Factory for a paginated envelope payload."""
    return _page


@pytest.fixture
def api_key(monkeypatch) -> str:
    monkeypatch.setenv("PARCL_LABS_API_KEY", API_KEY)
    return API_KEY
