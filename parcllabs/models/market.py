"""Market (search result) data model."""

from pydantic import BaseModel, ConfigDict


class Market(BaseModel):
    """A geographic market known to the API."""

    parcl_id: int
    name: str
    state_abbreviation: str | None = None
    state_fips_code: str | None = None
    location_type: str
    total_population: int | None = None
    median_income: int | None = None
    parcl_exchange_market: int | None = None
    pricefeed_market: int | None = None
    country: str | None = None
    geoid: str | None = None
    region: str | None = None
    case_shiller_10_market: int | None = None
    case_shiller_20_market: int | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def is_exchange_market(self) -> bool:
        """True when the market trades on the Parcl exchange."""
        return self.parcl_exchange_market == 1

    @property
    def has_price_feed(self) -> bool:
        """True when a daily price feed is published for the market."""
        return self.pricefeed_market == 1
