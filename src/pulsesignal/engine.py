from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from pulsesignal.data.base import PriceSource
from pulsesignal.domain.models import MarketSymbol, Signal
from pulsesignal.strategies.base import SignalStrategy

logger = logging.getLogger(__name__)

SignalSink = Callable[[dict[str, Any]], None]


@dataclass(slots=True, frozen=True)
class MarketSignal:
    market: MarketSymbol
    signal: Signal
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def to_record(self) -> dict[str, Any]:
        return {
            "symbol": self.market.symbol,
            "name": self.market.name,
            "type": self.market.asset_type,
            "created_at": self.created_at.isoformat(),
            **self.signal.to_record(),
        }


class SignalEngine:
    """Pull prices for each market and score them with one strategy."""

    def __init__(
        self,
        source: PriceSource,
        strategy: SignalStrategy,
        markets: Sequence[MarketSymbol],
        history_length: int = 50,
        sink: SignalSink | None = None,
    ) -> None:
        if history_length <= 0:
            raise ValueError("history_length must be greater than zero")
        self.source = source
        self.strategy = strategy
        self.markets = tuple(markets)
        self.history_length = history_length
        self.sink = sink

    def evaluate(self, market: MarketSymbol) -> MarketSignal:
        series = self.source.history(market.symbol, self.history_length)
        signal = self.strategy.evaluate(
            series.price,
            series.closes,
            highs=series.highs,
            lows=series.lows,
        )
        result = MarketSignal(market=market, signal=signal)
        if self.sink is not None:
            self.sink(result.to_record())
        return result

    def evaluate_all(self) -> list[MarketSignal]:
        results: list[MarketSignal] = []
        for market in self.markets:
            try:
                result = self.evaluate(market)
            except Exception:
                logger.exception("Error generating signal for %s", market.symbol)
                continue
            logger.info(
                "%s signal for %s: %s (%s%% confidence)",
                result.signal.direction.value,
                market.symbol,
                result.signal.strength.value,
                result.signal.confidence,
            )
            results.append(result)
        return results
