"""Tests for response envelopes and domain records."""

import pytest
from pydantic import ValidationError

from parcllabs.models import (
    AddressSearchRequest,
    BatchMetricsResponse,
    ForSaleInventoryPriceChanges,
    GeoCoordinates,
    HousingEventPrices,
    InvestorHousingStockOwnership,
    Market,
    MetricsResponse,
    PaginatedResponse,
    PropertyFilters,
    PropertySearchResponse,
    PropertyV2SearchRequest,
)


def test_metrics_envelope_parses_json():
    payload = """
    {
      "parcl_id": 2900187,
      "items": [
        {"date": "2024-04-01",
         "price": {"median": {"sales": 412000.0, "new_listings_for_sale": 429900.0}},
         "unknown_field": 1}
      ],
      "total": 87, "limit": 1, "offset": 0,
      "links": {"first": "f", "next": "n", "prev": null, "last": "l"},
      "account": {"est_credits_used": 1, "est_remaining_credits": 9999}
    }
    """

    response = MetricsResponse[HousingEventPrices].model_validate_json(payload)

    assert response.parcl_id == 2900187
    assert response.items[0].price.median.sales == 412000.0
    assert response.items[0].price_per_square_foot is None
    assert response.has_next
    assert response.account.est_remaining_credits == 9999


def test_envelope_without_links_or_account():
    response = PaginatedResponse[int].model_validate(
        {"items": [1], "total": 1, "limit": 10, "offset": 0}
    )

    assert response.links.next is None
    assert not response.has_next
    assert response.account is None


def test_metrics_envelope_requires_parcl_id():
    with pytest.raises(ValidationError):
        MetricsResponse[int].model_validate({"items": [], "total": 0, "limit": 1, "offset": 0})


def test_batch_envelope_items_carry_market_id():
    response = BatchMetricsResponse[InvestorHousingStockOwnership].model_validate(
        {
            "items": [{"parcl_id": 5, "date": "2024-01-01", "count": 10, "pct_ownership": 0.1}],
            "total": 1,
            "limit": 1,
            "offset": 0,
        }
    )

    row = response.items[0]
    assert row.parcl_id == 5
    assert row.investor_owned_count == 10
    assert row.investor_owned_pct == 0.1


def test_aliases_accept_python_names_too():
    row = ForSaleInventoryPriceChanges(date="2024-01-01", pct_price_drop=0.3)
    wire = ForSaleInventoryPriceChanges.model_validate(
        {"date": "2024-01-01", "pct_inventory_price_drop": 0.3}
    )

    assert row.pct_price_drop == wire.pct_price_drop == 0.3


def test_models_are_frozen():
    market = Market(parcl_id=1, name="Austin", location_type="CITY")
    with pytest.raises(ValidationError):
        market.name = "Dallas"


def test_market_flags():
    market = Market(
        parcl_id=2900187,
        name="Los Angeles",
        location_type="CITY",
        parcl_exchange_market=1,
        pricefeed_market=0,
    )

    assert market.is_exchange_market
    assert not market.has_price_feed


def test_property_search_response_without_envelope_counts():
    response = PropertySearchResponse.model_validate(
        {"items": [{"parcl_property_id": 63325076, "bedrooms": 3}]}
    )

    assert response.items[0].bedrooms == 3
    assert response.account is None


def test_request_bodies_drop_unset_fields():
    address = AddressSearchRequest(
        address="123 Main St", city="Austin", state_abbreviation="TX", zip_code="78701"
    )
    request = PropertyV2SearchRequest(
        geo_coordinates=GeoCoordinates(latitude=30.27, longitude=-97.74, radius_miles=1.5),
        property_filters=PropertyFilters(min_beds=2, current_on_market_flag=True),
    )

    assert address.to_body() == {
        "address": "123 Main St",
        "city": "Austin",
        "state_abbreviation": "TX",
        "zip_code": "78701",
    }
    assert request.to_body() == {
        "geo_coordinates": {"latitude": 30.27, "longitude": -97.74, "radius_miles": 1.5},
        "property_filters": {"min_beds": 2, "current_on_market_flag": True},
    }
