from pulsesignal.domain.models import (
    Direction,
    IndicatorSet,
    MarketSymbol,
    PriceHistory,
    PriceQuote,
    Signal,
    Strength,
)

__all__ = [
    "Direction",
    "IndicatorSet",
    "MarketSymbol",
    "PriceHistory",
    "PriceQuote",
    "Signal",
    "Strength",
]
