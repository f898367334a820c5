"""Paginated response envelopes and account usage models.

Every collection endpoint answers with the same JSON envelope::

    {"items": [...], "total": n, "limit": n, "offset": n,
     "links": {"first": ..., "next": ..., "prev": ..., "last": ...},
     "account": {"est_credits_used": n, "est_remaining_credits": n}}

Single-market endpoints add a top-level ``parcl_id``; ``account`` is only
present on some endpoints. ``links.next`` being ``None`` marks the last page.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class PaginationLinks(BaseModel):
    """Navigation links for paginated responses."""

    first: str | None = None
    next: str | None = None
    prev: str | None = None
    last: str | None = None

    model_config = ConfigDict(frozen=True)


class AccountInfo(BaseModel):
    """Usage metadata reported by the API for a single call."""

    est_credits_used: int | None = None
    est_remaining_credits: int | None = None

    model_config = ConfigDict(frozen=True)


class AccountUsage(BaseModel):
    """Point-in-time view of a client's credit counters."""

    est_session_credits_used: int = 0
    est_remaining_credits: int = 0

    model_config = ConfigDict(frozen=True)


class PaginatedResponse(BaseModel, Generic[T]):
    """One page, or the accumulation of all pages, of a collection.

    ``total``, ``limit`` and ``offset`` are what the server actually served
    and may differ from what was requested.
    """

    items: list[T]
    total: int
    limit: int
    offset: int
    links: PaginationLinks = Field(default_factory=PaginationLinks)
    account: AccountInfo | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def has_next(self) -> bool:
        """Whether the server advertised a further page."""
        return self.links.next is not None


class MetricsResponse(PaginatedResponse[T], Generic[T]):
    """Paginated time series for a single market."""

    parcl_id: int


class BatchMetricsResponse(PaginatedResponse[T], Generic[T]):
    """Paginated results of a multi-market query.

    No top-level ``parcl_id``: every item carries its own market identifier.
    """

    pass
