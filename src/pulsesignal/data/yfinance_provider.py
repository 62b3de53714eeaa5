from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Any, cast

import pandas as pd
import yfinance as yf  # type: ignore[import-untyped]

from pulsesignal.data.base import MarketDataProvider, PriceSource
from pulsesignal.data.synthetic import SyntheticPriceSource
from pulsesignal.domain.models import PriceHistory, PriceQuote

logger = logging.getLogger(__name__)

CRYPTO_BASES = frozenset({"BTC", "ETH"})


def to_yahoo_symbol(symbol: str) -> str:
    """Map ``EUR/USD`` style pairs onto Yahoo tickers."""
    normalized = symbol.strip().upper()
    if "/" not in normalized:
        return normalized
    base, quote = normalized.split("/", 1)
    if base in CRYPTO_BASES:
        return f"{base}-{quote}"
    return f"{base}{quote}=X"


class YFinanceProvider(MarketDataProvider):
    def _download(self, symbol: str, period: str, interval: str) -> pd.DataFrame:
        frame = cast(
            pd.DataFrame,
            yf.download(
                symbol,
                period=period,
                interval=interval,
                progress=False,
                auto_adjust=True,
                threads=False,
            ),
        )
        if not frame.empty:
            return frame

        ticker = yf.Ticker(symbol)
        return cast(
            pd.DataFrame,
            ticker.history(
                period=period,
                interval=interval,
                auto_adjust=True,
            ),
        )

    def fetch_ohlcv(
        self,
        symbol: str,
        period: str = "1y",
        interval: str = "1d",
    ) -> pd.DataFrame:
        normalized_symbol = to_yahoo_symbol(symbol)
        frame = self._download(normalized_symbol, period=period, interval=interval)
        if frame.empty:
            raise ValueError(
                "No data returned for "
                f"symbol={normalized_symbol} period={period} interval={interval}"
            )

        if isinstance(frame.columns, pd.MultiIndex):
            frame.columns = frame.columns.get_level_values(0)

        normalized = frame.rename(columns=str.lower)
        ordered_columns = ["open", "high", "low", "close", "volume"]
        missing = set(ordered_columns).difference(normalized.columns)
        if missing:
            raise ValueError(f"Missing expected columns: {sorted(missing)}")

        # bars missing any price leg cannot feed the range-based indicators
        result: Any = (
            normalized[ordered_columns].sort_index().dropna(subset=["high", "low", "close"])
        )
        if result.empty:
            raise ValueError(f"No complete bars for symbol={normalized_symbol}")
        return cast(pd.DataFrame, result)


class YFinancePriceSource(PriceSource):
    """Live Yahoo prices; failed fetches fall back to a synthetic series."""

    def __init__(
        self,
        provider: MarketDataProvider | None = None,
        fallback: PriceSource | None = None,
        period: str = "5d",
        interval: str = "5m",
    ) -> None:
        self.provider = provider or YFinanceProvider()
        self.fallback = fallback or SyntheticPriceSource()
        self.period = period
        self.interval = interval

    def history(self, symbol: str, count: int = 50) -> PriceHistory:
        try:
            frame = self.provider.fetch_ohlcv(symbol, period=self.period, interval=self.interval)
        except Exception as exc:
            logger.warning("Live fetch failed for %s (%s); using synthetic prices", symbol, exc)
            return self.fallback.history(symbol, count)

        tail = frame.iloc[-count:]
        closes = tuple(float(v) for v in tail["close"])
        return PriceHistory(
            symbol=symbol,
            price=closes[-1],
            closes=closes,
            highs=tuple(float(v) for v in tail["high"]),
            lows=tuple(float(v) for v in tail["low"]),
        )

    def quote(self, symbol: str) -> PriceQuote:
        series = self.history(symbol, count=1)
        return PriceQuote(symbol=symbol, price=series.price, timestamp=datetime.now(UTC))
