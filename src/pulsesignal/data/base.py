from __future__ import annotations

from abc import ABC, abstractmethod

import pandas as pd

from pulsesignal.domain.models import PriceHistory, PriceQuote


class MarketDataProvider(ABC):
    @abstractmethod
    def fetch_ohlcv(self, symbol: str, period: str = "1y", interval: str = "1d") -> pd.DataFrame:
        """Return OHLCV data indexed by timestamp."""


class PriceSource(ABC):
    @abstractmethod
    def quote(self, symbol: str) -> PriceQuote:
        """Return the current price for symbol."""

    @abstractmethod
    def history(self, symbol: str, count: int = 50) -> PriceHistory:
        """Return a chronological series whose last close is the current price."""
