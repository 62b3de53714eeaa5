from pulsesignal.data.base import MarketDataProvider, PriceSource
from pulsesignal.data.markets import DEFAULT_MARKETS, select_markets
from pulsesignal.data.synthetic import SyntheticPriceSource

__all__ = [
    "DEFAULT_MARKETS",
    "MarketDataProvider",
    "PriceSource",
    "SyntheticPriceSource",
    "select_markets",
]
