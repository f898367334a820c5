"""Cursor-following pagination over the single-page HTTP client.

Pages of one logical fetch are requested strictly in sequence: the URL of
page N+1 is only known once page N has been parsed. The loop ends when the
server stops emitting ``links.next``; there is no client-side page cap.

A failure on any page propagates and discards the pages already
accumulated. Callers who want partial data fetch pages one at a time with
``auto_paginate=False``.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from pydantic import BaseModel

from ...models import PaginatedResponse
from .credits import CreditTracker
from .http_client import HTTPClient

logger = logging.getLogger(__name__)

PageT = TypeVar("PageT", bound=PaginatedResponse)
ModelT = TypeVar("ModelT", bound=BaseModel)


class Paginator:
    """Drives the HTTP client across ``next`` links and records credit usage."""

    def __init__(self, http: HTTPClient, credits: CreditTracker) -> None:
        self._http = http
        self._credits = credits

    async def fetch_all(
        self,
        method: str,
        url: str,
        response_model: type[PageT],
        *,
        body: Any = None,
        auto_paginate: bool = False,
    ) -> PageT:
        """Fetch the first page and, if asked, every following page.

        Continuation pages are always requested with GET: the server hands
        back an absolute URL that no longer needs the original POST body.

        Returns:
            The first page verbatim when ``auto_paginate`` is false or no
            ``next`` link exists. Otherwise a copy of the first page whose
            ``items`` are all pages' items in fetch order and whose ``links``
            are the final page's links.
        """
        first = await self._http.fetch_page(method, url, response_model, body=body)
        self._credits.record(first.account)
        logger.debug(
            "page_fetched", extra={"url": url, "page_index": 0, "items": len(first.items)}
        )

        if not auto_paginate or first.links.next is None:
            return first

        items = list(first.items)
        links = first.links
        pages = 1

        while links.next is not None:
            next_url = links.next
            page = await self._http.fetch_page("GET", next_url, response_model)
            self._credits.record(page.account)
            logger.debug(
                "page_fetched",
                extra={"url": next_url, "page_index": pages, "items": len(page.items)},
            )
            items.extend(page.items)
            links = page.links
            pages += 1

        logger.info(
            "pagination_complete",
            extra={"pages": pages, "items": len(items), "total": first.total},
        )
        return first.model_copy(update={"items": items, "links": links})

    async def fetch_one(
        self,
        method: str,
        url: str,
        response_model: type[ModelT],
        *,
        body: Any = None,
    ) -> ModelT:
        """Fetch a non-paginated response and record its usage, if any."""
        result = await self._http.fetch_page(method, url, response_model, body=body)
        self._credits.record(getattr(result, "account", None))
        return result
