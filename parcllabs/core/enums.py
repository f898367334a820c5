"""Core enumerations for API filter values.

Architecture:
    Every filter the API accepts as a fixed vocabulary is modelled as a
    string enum whose value is the exact wire string. Query and body
    builders serialize members with ``.value``, so no mapping tables are
    needed between Python names and API strings.

Key Types:
    - PropertyType: Housing stock segment filter for metrics endpoints
    - PortfolioSize: Investor portfolio size bucket for portfolio metrics
    - LocationType, USRegion, SortBy, SortOrder: Market search filters
    - EventType, EntityOwnerName: Property API filters
"""

from enum import Enum


class PropertyType(str, Enum):
    """Property type filter for metrics and property search."""

    SINGLE_FAMILY = "SINGLE_FAMILY"
    CONDO = "CONDO"
    TOWNHOUSE = "TOWNHOUSE"
    OTHER = "OTHER"
    ALL_PROPERTIES = "ALL_PROPERTIES"


class PortfolioSize(str, Enum):
    """Portfolio size bucket for single-family portfolio metrics."""

    PORTFOLIO_2_TO_9 = "PORTFOLIO_2_TO_9"
    PORTFOLIO_10_TO_99 = "PORTFOLIO_10_TO_99"
    PORTFOLIO_100_TO_999 = "PORTFOLIO_100_TO_999"
    PORTFOLIO_1000_PLUS = "PORTFOLIO_1000_PLUS"
    ALL_PORTFOLIOS = "ALL_PORTFOLIOS"


class LocationType(str, Enum):
    """Geographic granularity of a market."""

    COUNTY = "COUNTY"
    CITY = "CITY"
    ZIP5 = "ZIP5"
    CDP = "CDP"
    VILLAGE = "VILLAGE"
    TOWN = "TOWN"
    CBSA = "CBSA"
    ALL = "ALL"


class USRegion(str, Enum):
    """US Census division."""

    EAST_NORTH_CENTRAL = "EAST_NORTH_CENTRAL"
    EAST_SOUTH_CENTRAL = "EAST_SOUTH_CENTRAL"
    MIDDLE_ATLANTIC = "MIDDLE_ATLANTIC"
    MOUNTAIN = "MOUNTAIN"
    NEW_ENGLAND = "NEW_ENGLAND"
    PACIFIC = "PACIFIC"
    SOUTH_ATLANTIC = "SOUTH_ATLANTIC"
    WEST_NORTH_CENTRAL = "WEST_NORTH_CENTRAL"
    WEST_SOUTH_CENTRAL = "WEST_SOUTH_CENTRAL"
    ALL = "ALL"


class SortBy(str, Enum):
    """Sort field for market search."""

    TOTAL_POPULATION = "TOTAL_POPULATION"
    MEDIAN_INCOME = "MEDIAN_INCOME"
    CASE_SHILLER_20_MARKET = "CASE_SHILLER_20_MARKET"
    CASE_SHILLER_10_MARKET = "CASE_SHILLER_10_MARKET"
    PRICEFEED_MARKET = "PRICEFEED_MARKET"
    PARCL_EXCHANGE_MARKET = "PARCL_EXCHANGE_MARKET"


class SortOrder(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


class EventType(str, Enum):
    """Property event category."""

    SALE = "SALE"
    LISTING = "LISTING"
    RENTAL = "RENTAL"
    ALL = "ALL"


class EntityOwnerName(str, Enum):
    """Large institutional owners tracked by the property API."""

    AMH = "AMH"
    TRICON = "TRICON"
    INVITATION_HOMES = "INVITATION_HOMES"
    HOME_PARTNERS_OF_AMERICA = "HOME_PARTNERS_OF_AMERICA"
    PROGRESS_RESIDENTIAL = "PROGRESS_RESIDENTIAL"
    FIRSTKEY_HOMES = "FIRSTKEY_HOMES"
    AMHERST = "AMHERST"
    MAYMONT_HOMES = "MAYMONT_HOMES"
    VINEBROOK_HOMES = "VINEBROOK_HOMES"
    SFR3 = "SFR3"
    MY_COMMUNITY_HOMES = "MY_COMMUNITY_HOMES"
    BLACKSTONE = "BLACKSTONE"
    BX = "BX"
    OPENDOOR = "OPENDOOR"
    OFFERPAD = "OFFERPAD"
