from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Any

from pulsesignal.indicators import BollingerBands, MACDResult, StochasticResult


class Direction(StrEnum):
    BUY = "BUY"
    SELL = "SELL"
    NEUTRAL = "NEUTRAL"


class Strength(StrEnum):
    STRONG_BUY = "STRONG BUY"
    BUY = "BUY"
    WEAK_BUY = "WEAK BUY"
    HOLD = "HOLD"
    WEAK_SELL = "WEAK SELL"
    SELL = "SELL"
    STRONG_SELL = "STRONG SELL"


@dataclass(slots=True, frozen=True)
class MarketSymbol:
    symbol: str
    name: str
    asset_type: str


@dataclass(slots=True, frozen=True)
class PriceQuote:
    symbol: str
    price: float
    timestamp: datetime


@dataclass(slots=True, frozen=True)
class PriceHistory:
    """Closes (oldest first) plus optional aligned highs and lows."""

    symbol: str
    price: float
    closes: tuple[float, ...]
    highs: tuple[float, ...] | None = None
    lows: tuple[float, ...] | None = None

    def __post_init__(self) -> None:
        if not self.closes:
            raise ValueError("closes must be non-empty")
        for name, values in (("highs", self.highs), ("lows", self.lows)):
            if values is not None and len(values) != len(self.closes):
                raise ValueError(f"{name} must align with closes")


@dataclass(slots=True, frozen=True)
class IndicatorSet:
    rsi: float
    sma: tuple[tuple[int, float], ...] = ()
    ema: tuple[tuple[int, float], ...] = ()
    macd: MACDResult | None = None
    bollinger: BollingerBands | None = None
    stochastic: StochasticResult | None = None

    def __post_init__(self) -> None:
        # (period, value) pairs sorted by period; mappings are accepted on input
        for name in ("sma", "ema"):
            values = getattr(self, name)
            pairs = values.items() if isinstance(values, Mapping) else values
            object.__setattr__(self, name, tuple(sorted((int(p), float(v)) for p, v in pairs)))

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"rsi": self.rsi}
        for period, value in self.sma:
            payload[f"sma_{period}"] = value
        for period, value in self.ema:
            payload[f"ema_{period}"] = value
        if self.macd is not None:
            payload["macd"] = self.macd.to_dict()
        if self.bollinger is not None:
            payload["bollinger"] = self.bollinger.to_dict()
        if self.stochastic is not None:
            payload["stochastic"] = self.stochastic.to_dict()
        return payload


@dataclass(slots=True, frozen=True)
class Signal:
    direction: Direction
    strength: Strength
    confidence: int
    price: float
    strategy: str
    indicators: IndicatorSet | None = None
    points: int | None = None

    @classmethod
    def neutral(cls, price: float, strategy: str, confidence: int = 50) -> Signal:
        return cls(
            direction=Direction.NEUTRAL,
            strength=Strength.HOLD,
            confidence=confidence,
            price=price,
            strategy=strategy,
        )

    def to_record(self) -> dict[str, Any]:
        """Flatten into scalar columns plus one nested indicator payload."""
        return {
            "signal": self.direction.value,
            "strength": self.strength.value,
            "confidence": self.confidence,
            "price": self.price,
            "strategy": self.strategy,
            "rsi": None if self.indicators is None else self.indicators.rsi,
            "points": self.points,
            "indicators": None if self.indicators is None else self.indicators.to_dict(),
        }
