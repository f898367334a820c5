"""Shared building blocks for metrics endpoint groups.

Every metrics group exposes the same two shapes of call:

- a single-market series, ``GET /v1/<group>/{parcl_id}/<name>?<filters>``
- a multi-market batch, ``POST /v1/<group>/<name>`` with the filters and
  ``parcl_id: [...]`` in the JSON body

Both are paginated and honour ``auto_paginate`` on the params object.
"""

from __future__ import annotations

from typing import Any, ClassVar

from ..core.exceptions import InvalidParameterError
from ..models import BatchMetricsResponse, MetricsResponse
from ..runtime.rest.runner import RestEndpointSpec, RestRunner
from .params import MetricsParams, PortfolioMetricsParams

SeriesParams = MetricsParams | PortfolioMetricsParams


def series_spec(group: str, name: str, path_name: str | None = None) -> RestEndpointSpec:
    """Spec for ``GET /v1/<group>/{parcl_id}/<path_name or name>``."""
    segment = path_name or name

    def build_path(params: dict[str, Any]) -> str:
        return f"/v1/{group}/{params['parcl_id']}/{segment}"

    def build_query(params: dict[str, Any]) -> dict[str, Any]:
        return params["params"].to_query()

    return RestEndpointSpec(
        id=f"{group}.{name}",
        method="GET",
        build_path=build_path,
        build_query=build_query,
    )


def batch_spec(group: str, name: str, path_name: str | None = None) -> RestEndpointSpec:
    """Spec for ``POST /v1/<group>/<path_name or name>`` over several markets."""
    segment = path_name or name

    def build_body(params: dict[str, Any]) -> dict[str, Any]:
        return params["params"].to_batch_body(params["parcl_ids"])

    return RestEndpointSpec(
        id=f"{group}.batch_{name}",
        method="POST",
        build_path=lambda _: f"/v1/{group}/{segment}",
        build_body=build_body,
    )


class EndpointClient:
    """Base for an endpoint group bound to a shared runner."""

    group: ClassVar[str] = ""
    params_type: ClassVar[type[SeriesParams]] = MetricsParams

    def __init__(self, runner: RestRunner) -> None:
        self._runner = runner

    def _params(self, params: SeriesParams | None) -> SeriesParams:
        return params if params is not None else self.params_type()

    async def _series(
        self,
        name: str,
        parcl_id: int,
        item_model: type,
        params: SeriesParams | None = None,
        *,
        path_name: str | None = None,
    ) -> MetricsResponse[Any]:
        params = self._params(params)
        return await self._runner.run(
            spec=series_spec(self.group, name, path_name),
            response_model=MetricsResponse[item_model],
            params={"parcl_id": parcl_id, "params": params},
            auto_paginate=params.auto_paginate,
        )

    async def _batch(
        self,
        name: str,
        parcl_ids: list[int],
        item_model: type,
        params: SeriesParams | None = None,
        *,
        path_name: str | None = None,
    ) -> BatchMetricsResponse[Any]:
        if not parcl_ids:
            raise InvalidParameterError("parcl_ids must not be empty")
        params = self._params(params)
        return await self._runner.run(
            spec=batch_spec(self.group, name, path_name),
            response_model=BatchMetricsResponse[item_model],
            params={"parcl_ids": parcl_ids, "params": params},
            auto_paginate=params.auto_paginate,
        )
