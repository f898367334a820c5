"""Request parameter models for query strings and batch bodies.

Each model validates its fields once at construction and renders them in
the API's wire form: enum members become their string values, booleans
become ``1``/``0`` in query strings, and unset fields are omitted.
``auto_paginate`` steers the client only and is never sent.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..core.enums import (
    EntityOwnerName,
    EventType,
    LocationType,
    PortfolioSize,
    PropertyType,
    SortBy,
    SortOrder,
    USRegion,
)

CLIENT_ONLY_FIELDS = frozenset({"auto_paginate"})


def _wire(value: Any, *, flags_as_int: bool) -> Any:
    if isinstance(value, Enum):
        return value.value
    if flags_as_int and isinstance(value, bool):
        return int(value)
    return value


def compact(values: dict[str, Any], *, flags_as_int: bool = True) -> dict[str, Any]:
    """Drop unset entries and convert the rest to wire values.

    Examples:
        >>> compact({"limit": 10, "offset": None, "flag": True})
        {'limit': 10, 'flag': 1}
    """
    return {
        key: _wire(value, flags_as_int=flags_as_int)
        for key, value in values.items()
        if value is not None and key not in CLIENT_ONLY_FIELDS
    }


class _Params(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    def to_query(self) -> dict[str, Any]:
        return compact(dict(self))


class _SeriesParams(_Params):
    limit: int | None = Field(default=None, ge=1)
    offset: int | None = Field(default=None, ge=0)
    start_date: str | None = None
    end_date: str | None = None
    auto_paginate: bool = False

    def to_batch_body(self, parcl_ids: list[int]) -> dict[str, Any]:
        """Body for the multi-market POST variant of a series."""
        return {"parcl_id": list(parcl_ids), **compact(dict(self), flags_as_int=False)}


class MetricsParams(_SeriesParams):
    """Filters shared by every series except the portfolio metrics."""

    property_type: PropertyType | None = None


class PortfolioMetricsParams(_SeriesParams):
    """Portfolio series filter by owner portfolio size instead of property type."""

    portfolio_size: PortfolioSize | None = None


class SearchParams(_Params):
    """Market search filters."""

    query: str | None = None
    location_type: LocationType | None = None
    region: USRegion | None = None
    state_abbreviation: str | None = None
    state_fips_code: str | None = None
    parcl_id: int | None = None
    geoid: str | None = None
    sort_by: SortBy | None = None
    sort_order: SortOrder | None = None
    limit: int | None = Field(default=None, ge=1)
    auto_paginate: bool = False

    @field_validator("state_abbreviation")
    @classmethod
    def _upper_state(cls, v: str | None) -> str | None:
        return v.upper() if v is not None else v


class PropertySearchParams(_Params):
    """Filters for ``GET /v1/property/search``; market and type are required."""

    parcl_id: int
    property_type: PropertyType
    limit: int | None = Field(default=None, ge=1)
    offset: int | None = Field(default=None, ge=0)
    square_footage_min: int | None = None
    square_footage_max: int | None = None
    bedrooms_min: int | None = None
    bedrooms_max: int | None = None
    bathrooms_min: int | None = None
    bathrooms_max: int | None = None
    year_built_min: int | None = None
    year_built_max: int | None = None
    current_entity_owner_name: EntityOwnerName | None = None
    event_history_sale_flag: bool | None = None
    event_history_rental_flag: bool | None = None
    event_history_listing_flag: bool | None = None
    current_new_construction_flag: bool | None = None
    current_owner_occupied_flag: bool | None = None
    current_investor_owned_flag: bool | None = None
    current_on_market_flag: bool | None = None
    current_on_market_rental_flag: bool | None = None
    record_added_date_start: str | None = None
    record_added_date_end: str | None = None


class EventHistoryParams(_Params):
    """Body for ``POST /v1/property/event_history``."""

    parcl_property_ids: list[int]
    event_type: EventType | None = None
    start_date: str | None = None
    end_date: str | None = None
    entity_owner_name: EntityOwnerName | None = None
    record_updated_date_start: str | None = None
    record_updated_date_end: str | None = None

    def to_body(self) -> dict[str, Any]:
        values = dict(self)
        values["parcl_property_id"] = list(values.pop("parcl_property_ids"))
        return compact(values, flags_as_int=False)
