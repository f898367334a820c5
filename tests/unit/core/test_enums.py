"""Tests for filter enums."""

from parcllabs.core import LocationType, PortfolioSize, PropertyType, SortOrder


def test_values_are_wire_strings():
    assert PropertyType.SINGLE_FAMILY.value == "SINGLE_FAMILY"
    assert PortfolioSize.PORTFOLIO_1000_PLUS.value == "PORTFOLIO_1000_PLUS"
    assert LocationType.ZIP5.value == "ZIP5"


def test_str_enum_compares_to_string():
    assert SortOrder.DESC == "DESC"
    assert PropertyType("CONDO") is PropertyType.CONDO
