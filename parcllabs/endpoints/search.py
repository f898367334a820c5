"""Market search."""

from __future__ import annotations

from ..models import Market, PaginatedResponse
from ..runtime.rest.runner import RestEndpointSpec, RestRunner
from .params import SearchParams

MARKETS_SPEC = RestEndpointSpec(
    id="search.markets",
    method="GET",
    build_path=lambda _: "/v1/search/markets",
    build_query=lambda p: p["params"].to_query(),
)


class SearchClient:
    def __init__(self, runner: RestRunner) -> None:
        self._runner = runner

    async def markets(self, params: SearchParams | None = None) -> PaginatedResponse[Market]:
        """Find markets by name, geography or identifier.

        With no filters the API returns its default ordering of all markets,
        one page at a time unless ``params.auto_paginate`` is set.
        """
        params = params or SearchParams()
        return await self._runner.run(
            spec=MARKETS_SPEC,
            response_model=PaginatedResponse[Market],
            params={"params": params},
            auto_paginate=params.auto_paginate,
        )
