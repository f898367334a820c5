"""Property API response and request models.

Unlike the metrics endpoints, property responses are not wrapped in the
paginated envelope: v1 search answers ``{"items": [...], "account": {...}}``
and event history / v2 search answer ``{"properties": [...]}``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

from .envelope import AccountInfo

# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------


class Property(BaseModel):
    """Property record returned by v1 search."""

    parcl_property_id: int
    address: str | None = None
    unit: str | None = None
    city: str | None = None
    zip_code: str | None = None
    state_abbreviation: str | None = None
    county: str | None = None
    cbsa: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    property_type: str | None = None
    bedrooms: int | None = None
    bathrooms: float | None = None
    square_footage: int | None = None
    year_built: int | None = None
    cbsa_parcl_id: int | None = None
    county_parcl_id: int | None = None
    city_parcl_id: int | None = None
    zip_parcl_id: int | None = None
    event_count: int | None = None
    event_history_sale_flag: int | None = None
    event_history_rental_flag: int | None = None
    event_history_listing_flag: int | None = None
    current_new_construction_flag: int | None = None
    current_owner_occupied_flag: int | None = None
    current_investor_owned_flag: int | None = None
    current_entity_owner_name: str | None = None
    current_on_market_flag: int | None = None
    current_on_market_rental_flag: int | None = None
    record_added_date: str | None = None

    model_config = ConfigDict(frozen=True)


class PropertySearchResponse(BaseModel):
    items: list[Property]
    account: AccountInfo | None = None

    model_config = ConfigDict(frozen=True)


class PropertyMetadata(BaseModel):
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None
    bedrooms: int | None = None
    bathrooms: float | None = None
    square_footage: int | None = None
    year_built: int | None = None
    property_type: str | None = None

    model_config = ConfigDict(frozen=True)


class PropertyEvent(BaseModel):
    event_type: str | None = None
    event_name: str | None = None
    event_date: str | None = None
    price: int | None = None
    entity_owner_name: str | None = None
    investor_flag: int | None = None
    owner_occupied_flag: int | None = None
    new_construction_flag: int | None = None
    record_updated_date: str | None = None

    model_config = ConfigDict(frozen=True)


class PropertyWithEvents(BaseModel):
    parcl_property_id: int
    property_metadata: PropertyMetadata | None = None
    events: list[PropertyEvent] | None = None

    model_config = ConfigDict(frozen=True)


class PropertyEventHistoryResponse(BaseModel):
    properties: list[PropertyWithEvents]
    account: AccountInfo | None = None

    model_config = ConfigDict(frozen=True)


class PropertyV2Metadata(BaseModel):
    bathrooms: float | None = None
    bedrooms: int | None = None
    sq_ft: int | None = None
    year_built: int | None = None
    property_type: str | None = None
    address1: str | None = None
    address2: str | None = None
    city: str | None = None
    state: str | None = None
    zip5: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    city_name: str | None = None
    county_name: str | None = None
    metro_name: str | None = None
    record_added_date: str | None = None
    current_on_market_flag: int | None = None
    current_on_market_rental_flag: int | None = None
    current_new_construction_flag: int | None = None
    current_owner_occupied_flag: int | None = None
    current_investor_owned_flag: int | None = None
    current_entity_owner_name: str | None = None

    model_config = ConfigDict(frozen=True)


class PropertyV2Event(BaseModel):
    event_type: str | None = None
    event_name: str | None = None
    event_date: str | None = None
    entity_owner_name: str | None = None
    true_sale_index: int | None = None
    price: int | None = None
    transfer_index: int | None = None
    investor_flag: int | None = None
    owner_occupied_flag: int | None = None
    new_construction_flag: int | None = None
    current_owner_flag: int | None = None
    record_updated_date: str | None = None

    model_config = ConfigDict(frozen=True)


class PropertyV2(BaseModel):
    parcl_property_id: int
    property_metadata: PropertyV2Metadata | None = None
    events: list[PropertyV2Event] | None = None

    model_config = ConfigDict(frozen=True)


class PropertyV2SearchResponse(BaseModel):
    properties: list[PropertyV2]
    account: AccountInfo | None = None

    model_config = ConfigDict(frozen=True)


# ---------------------------------------------------------------------------
# Request bodies
# ---------------------------------------------------------------------------


class RequestBody(BaseModel):
    """Base for JSON request bodies; unset fields are left out of the body."""

    def to_body(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class AddressSearchRequest(RequestBody):
    address: str
    city: str
    state_abbreviation: str
    zip_code: str


class GeoCoordinates(RequestBody):
    latitude: float
    longitude: float
    radius_miles: float


class PropertyFilters(RequestBody):
    include_property_details: bool | None = None
    property_types: list[str] | None = None
    min_beds: int | None = None
    max_beds: int | None = None
    min_baths: float | None = None
    max_baths: float | None = None
    min_sqft: int | None = None
    max_sqft: int | None = None
    min_year_built: int | None = None
    max_year_built: int | None = None
    current_entity_owner_name: str | None = None
    current_owner_occupied_flag: bool | None = None
    current_investor_owned_flag: bool | None = None
    current_on_market_flag: bool | None = None
    current_on_market_rental_flag: bool | None = None
    current_new_construction_flag: bool | None = None
    min_record_added_date: str | None = None
    max_record_added_date: str | None = None


class V2EventFilters(RequestBody):
    event_names: list[str] | None = None
    min_event_date: str | None = None
    max_event_date: str | None = None
    min_event_price: int | None = None
    max_event_price: int | None = None
    include_events: bool | None = None
    include_full_event_history: bool | None = None
    is_new_construction: bool | None = None
    min_record_updated_date: str | None = None
    max_record_updated_date: str | None = None


class OwnerFilters(RequestBody):
    owner_name: list[str] | None = None
    entity_seller_name: list[str] | None = None
    is_current_owner: bool | None = None
    is_investor_owned: bool | None = None
    is_owner_occupied: bool | None = None


class PropertyV2SearchRequest(RequestBody):
    """Body of the v2 property search.

    At least one of ``parcl_ids``, ``parcl_property_ids`` or
    ``geo_coordinates`` is expected by the API.
    """

    parcl_ids: list[int] | None = None
    parcl_property_ids: list[int] | None = None
    geo_coordinates: GeoCoordinates | None = None
    property_filters: PropertyFilters | None = None
    event_filters: V2EventFilters | None = None
    owner_filters: OwnerFilters | None = None
