"""Property-level search and event history.

These calls are single-shot: the 429 retry applies, pagination does not.
Credit usage is recorded whenever the response carries ``account``.
"""

from __future__ import annotations

from typing import Any

from ..core.exceptions import InvalidParameterError
from ..models import (
    AddressSearchRequest,
    PropertyEventHistoryResponse,
    PropertySearchResponse,
    PropertyV2SearchRequest,
    PropertyV2SearchResponse,
)
from ..runtime.rest.runner import RestEndpointSpec, RestRunner
from .params import EventHistoryParams, PropertySearchParams, compact

SEARCH_SPEC = RestEndpointSpec(
    id="property.search",
    method="GET",
    build_path=lambda _: "/v1/property/search",
    build_query=lambda p: p["params"].to_query(),
    paginated=False,
)

SEARCH_ADDRESS_SPEC = RestEndpointSpec(
    id="property.search_address",
    method="POST",
    build_path=lambda _: "/v1/property/search_address",
    build_body=lambda p: [address.to_body() for address in p["addresses"]],
    paginated=False,
)

EVENT_HISTORY_SPEC = RestEndpointSpec(
    id="property.event_history",
    method="POST",
    build_path=lambda _: "/v1/property/event_history",
    build_body=lambda p: p["params"].to_body(),
    paginated=False,
)

SEARCH_V2_SPEC = RestEndpointSpec(
    id="property.search_v2",
    method="POST",
    build_path=lambda _: "/v2/property_search",
    build_query=lambda p: compact({"limit": p["limit"], "offset": p["offset"]}),
    build_body=lambda p: p["request"].to_body(),
    paginated=False,
)


class PropertyClient:
    def __init__(self, runner: RestRunner) -> None:
        self._runner = runner

    async def _run(self, spec: RestEndpointSpec, response_model: type, **params: Any) -> Any:
        return await self._runner.run(spec=spec, response_model=response_model, params=params)

    async def search(self, params: PropertySearchParams) -> PropertySearchResponse:
        """Search properties in one market by attributes and ownership flags."""
        return await self._run(SEARCH_SPEC, PropertySearchResponse, params=params)

    async def search_by_address(
        self, addresses: list[AddressSearchRequest]
    ) -> PropertySearchResponse:
        """Resolve street addresses to ``parcl_property_id`` values."""
        if not addresses:
            raise InvalidParameterError("addresses must not be empty")
        return await self._run(SEARCH_ADDRESS_SPEC, PropertySearchResponse, addresses=addresses)

    async def event_history(self, params: EventHistoryParams) -> PropertyEventHistoryResponse:
        if not params.parcl_property_ids:
            raise InvalidParameterError("parcl_property_ids must not be empty")
        return await self._run(EVENT_HISTORY_SPEC, PropertyEventHistoryResponse, params=params)

    async def search_v2(
        self,
        request: PropertyV2SearchRequest,
        limit: int | None = None,
        offset: int | None = None,
    ) -> PropertyV2SearchResponse:
        """Search with nested property, event and owner filters.

        Args:
            request: Must name markets, property ids or a geographic radius
            limit: Page size passed as a query parameter
            offset: Zero-based start passed as a query parameter
        """
        return await self._run(
            SEARCH_V2_SPEC, PropertyV2SearchResponse, request=request, limit=limit, offset=offset
        )
