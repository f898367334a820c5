"""Tests for metrics endpoint spec factories."""

from parcllabs.endpoints import MetricsParams, batch_spec, series_spec


def test_series_spec_builds_get_path_and_query():
    spec = series_spec("market_metrics", "housing_stock")
    params = {"parcl_id": 2900187, "params": MetricsParams(limit=3)}

    assert spec.method == "GET"
    assert spec.id == "market_metrics.housing_stock"
    assert spec.build_path(params) == "/v1/market_metrics/2900187/housing_stock"
    assert spec.build_query(params) == {"limit": 3}
    assert spec.build_body is None
    assert spec.paginated


def test_series_spec_path_override():
    spec = series_spec("price_feed", "rental_history", "rental_price_feed")

    assert spec.build_path({"parcl_id": 1}) == "/v1/price_feed/1/rental_price_feed"


def test_batch_spec_builds_post_body():
    spec = batch_spec("investor_metrics", "housing_stock_ownership")
    params = {"parcl_ids": [1, 2], "params": MetricsParams(offset=10)}

    assert spec.method == "POST"
    assert spec.build_path(params) == "/v1/investor_metrics/housing_stock_ownership"
    assert spec.build_body(params) == {"parcl_id": [1, 2], "offset": 10}
    assert spec.build_query is None
