"""Technical indicators over chronological price sequences.

Every function is pure and tolerates short or flat input: instead of raising
it returns the documented fallback so scoring stays defined during warm-up.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

import pandas as pd

PriceInput = Sequence[float] | pd.Series

NEUTRAL_RSI = 50.0
FLAT_RANGE_STOCHASTIC = 50.0


@dataclass(slots=True, frozen=True)
class MACDResult:
    macd: float = 0.0
    signal: float = 0.0
    histogram: float = 0.0

    def to_dict(self) -> dict[str, float]:
        return {"macd": self.macd, "signal": self.signal, "histogram": self.histogram}


@dataclass(slots=True, frozen=True)
class BollingerBands:
    upper: float = 0.0
    middle: float = 0.0
    lower: float = 0.0

    def to_dict(self) -> dict[str, float]:
        return {"upper": self.upper, "middle": self.middle, "lower": self.lower}


@dataclass(slots=True, frozen=True)
class StochasticResult:
    k: float = 0.0
    d: float = 0.0

    def to_dict(self) -> dict[str, float]:
        return {"k": self.k, "d": self.d}


def _as_series(prices: PriceInput) -> pd.Series:
    if isinstance(prices, pd.Series):
        return prices.astype(float).reset_index(drop=True)
    return pd.Series(list(prices), dtype=float)


def _window_mean(window: pd.Series) -> float:
    # A flat window must come back as its own value, not a summation artefact.
    if window.min() == window.max():
        return float(window.iloc[-1])
    return float(window.mean())


def _ema_series(values: list[float], period: int) -> list[float]:
    multiplier = 2 / (period + 1)
    current = values[0]
    out = [current]
    for value in values[1:]:
        current = (value - current) * multiplier + current
        out.append(current)
    return out


def rsi(prices: PriceInput, period: int = 14) -> float:
    """Relative Strength Index over the first ``period`` transitions.

    The window is anchored at the start of ``prices``, not the end; callers
    position the window before passing it in.
    """
    series = _as_series(prices)
    if len(series) < period + 1:
        return NEUTRAL_RSI

    deltas = series.iloc[: period + 1].diff().iloc[1:]
    gains = float(deltas[deltas >= 0].sum())
    losses = float(-deltas[deltas < 0].sum())

    avg_gain = gains / period
    avg_loss = losses / period
    if avg_loss == 0:
        return 100.0

    rs = avg_gain / avg_loss
    return 100 - (100 / (1 + rs))


def sma(prices: PriceInput, period: int) -> float:
    series = _as_series(prices)
    if len(series) < period:
        return float(series.iloc[-1])
    return _window_mean(series.iloc[-period:])


def ema(prices: PriceInput, period: int) -> float:
    """Exponential moving average seeded at the first price.

    ``period`` sets the smoothing factor and the minimum length; the fold
    always runs over the whole series.
    """
    series = _as_series(prices)
    if len(series) < period:
        return float(series.iloc[-1])
    return _ema_series(series.tolist(), period)[-1]


def macd(
    prices: PriceInput,
    fast_period: int = 12,
    slow_period: int = 26,
    signal_period: int = 9,
) -> MACDResult:
    series = _as_series(prices)
    if len(series) < slow_period:
        return MACDResult()

    values = series.tolist()
    fast = _ema_series(values, fast_period)
    slow = _ema_series(values, slow_period)
    macd_line = [f - s for f, s in zip(fast, slow, strict=True)]
    signal_line = _ema_series(macd_line, signal_period)

    latest_macd = macd_line[-1]
    latest_signal = signal_line[-1]
    return MACDResult(
        macd=latest_macd,
        signal=latest_signal,
        histogram=latest_macd - latest_signal,
    )


def bollinger_bands(
    prices: PriceInput,
    period: int = 20,
    num_std: float = 2.0,
) -> BollingerBands:
    series = _as_series(prices)
    if len(series) < period:
        return BollingerBands()

    window = series.iloc[-period:]
    middle = _window_mean(window)
    # population deviation measured from the exact middle band
    variance = float(((window - middle) ** 2).mean())
    band = num_std * variance**0.5
    return BollingerBands(upper=middle + band, middle=middle, lower=middle - band)


def stochastic(
    highs: PriceInput | None,
    lows: PriceInput | None,
    closes: PriceInput,
    period: int = 14,
    smooth_k: int = 3,
    smooth_d: int = 3,
) -> StochasticResult:
    """Slow stochastic oscillator: smoothed %K and its %D signal line.

    Missing highs or lows fall back to the closes.
    """
    close = _as_series(closes)
    high = close if highs is None else _as_series(highs)
    low = close if lows is None else _as_series(lows)
    if not len(high) == len(low) == len(close):
        raise ValueError("highs, lows and closes must have the same length")

    if len(close) < period + smooth_k + smooth_d - 2:
        return StochasticResult()

    highest = high.rolling(period, min_periods=period).max()
    lowest = low.rolling(period, min_periods=period).min()
    span = highest - lowest

    raw_k = (100 * (close - lowest) / span).where(span != 0, FLAT_RANGE_STOCHASTIC)
    raw_k = raw_k.iloc[period - 1 :]

    k_line = raw_k.rolling(smooth_k, min_periods=smooth_k).mean()
    d_line = k_line.rolling(smooth_d, min_periods=smooth_d).mean()
    latest_k = float(k_line.iloc[-1])
    latest_d = float(d_line.iloc[-1])
    # a gap in the latest bars must not surface an older reading
    if math.isnan(latest_k) or math.isnan(latest_d):
        return StochasticResult()
    return StochasticResult(k=latest_k, d=latest_d)
