from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime

import numpy as np

from pulsesignal.data.base import PriceSource
from pulsesignal.domain.models import PriceHistory, PriceQuote


@dataclass(slots=True, frozen=True)
class BaseQuote:
    price: float
    volatility: float


BASE_QUOTES: dict[str, BaseQuote] = {
    "EUR/USD": BaseQuote(1.0850, 0.002),
    "GBP/USD": BaseQuote(1.2650, 0.003),
    "USD/JPY": BaseQuote(147.50, 0.015),
    "USD/CHF": BaseQuote(0.8800, 0.002),
    "AUD/USD": BaseQuote(0.6520, 0.004),
    "USD/CAD": BaseQuote(1.3500, 0.003),
    "BTC/USD": BaseQuote(42500.0, 0.02),
    "ETH/USD": BaseQuote(2550.0, 0.025),
    "AAPL": BaseQuote(185.50, 0.01),
    "TSLA": BaseQuote(245.75, 0.02),
    "GOOGL": BaseQuote(138.20, 0.012),
    "MSFT": BaseQuote(375.80, 0.011),
}
DEFAULT_QUOTE = BaseQuote(100.0, 0.01)


class SyntheticPriceSource(PriceSource):
    """Random-walk prices around a per-symbol base quote."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = np.random.default_rng(seed)

    def _current_price(self, symbol: str) -> float:
        base = BASE_QUOTES.get(symbol.upper(), DEFAULT_QUOTE)
        trend = (self._rng.random() - 0.5) * base.volatility * 0.5
        noise = (self._rng.random() - 0.5) * 2 * base.volatility
        price = base.price * (1 + trend + noise)
        return round(max(price, base.price * 0.1), 5)

    def quote(self, symbol: str) -> PriceQuote:
        return PriceQuote(
            symbol=symbol,
            price=self._current_price(symbol),
            timestamp=datetime.now(UTC),
        )

    def walk_back(self, current_price: float, count: int = 50) -> list[float]:
        """Generate ``count`` prices ending at ``current_price``."""
        if count <= 0:
            raise ValueError("count must be greater than zero")
        prices = [current_price]
        for _ in range(count - 1):
            later = prices[0]
            volatility = 0.002 + self._rng.random() * 0.01
            change = (self._rng.random() - 0.5) * 2 * volatility
            prices.insert(0, max(later * (1 + change), later * 0.8))
        return prices

    def history(self, symbol: str, count: int = 50) -> PriceHistory:
        price = self._current_price(symbol)
        return PriceHistory(symbol=symbol, price=price, closes=tuple(self.walk_back(price, count)))
