"""REST request runner using endpoint specs."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote, urlencode

from pydantic import BaseModel

from .paginator import Paginator


@dataclass(frozen=True)
class RestEndpointSpec:
    id: str
    method: str  # "GET" | "POST"
    build_path: Callable[[dict[str, Any]], str]
    build_query: Callable[[dict[str, Any]], dict[str, Any]] | None = None
    build_body: Callable[[dict[str, Any]], Any] | None = None
    # Non-paginated endpoints answer without the items/links envelope
    paginated: bool = True


class RestRunner:
    def __init__(self, paginator: Paginator, base_url: str) -> None:
        self._paginator = paginator
        self._base_url = base_url

    def build_url(self, spec: RestEndpointSpec, params: dict[str, Any]) -> str:
        url = f"{self._base_url}{spec.build_path(params)}"
        query = spec.build_query(params) if spec.build_query else None
        if query:
            url = f"{url}?{urlencode(query, quote_via=quote)}"
        return url

    async def run(
        self,
        *,
        spec: RestEndpointSpec,
        response_model: type[BaseModel],
        params: dict[str, Any],
        auto_paginate: bool = False,
    ) -> Any:
        url = self.build_url(spec, params)
        body = spec.build_body(params) if spec.build_body else None

        if not spec.paginated:
            return await self._paginator.fetch_one(spec.method, url, response_model, body=body)
        return await self._paginator.fetch_all(
            spec.method, url, response_model, body=body, auto_paginate=auto_paginate
        )
