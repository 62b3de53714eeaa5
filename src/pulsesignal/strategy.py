from __future__ import annotations

from pulsesignal.strategies.base import SignalStrategy
from pulsesignal.strategies.point_scoring import PointScoringStrategy
from pulsesignal.strategies.rsi_ma import RsiMovingAverageStrategy
from pulsesignal.strategies.thresholds import SignalThresholds

STRATEGIES: dict[str, type[SignalStrategy]] = {
    PointScoringStrategy.name: PointScoringStrategy,
    RsiMovingAverageStrategy.name: RsiMovingAverageStrategy,
}


def build_strategy(name: str, thresholds: SignalThresholds | None = None) -> SignalStrategy:
    key = name.strip().lower()
    if key not in STRATEGIES:
        raise ValueError(f"Unknown strategy {name!r}; expected one of {sorted(STRATEGIES)}")
    return STRATEGIES[key](thresholds)


def default_strategy() -> SignalStrategy:
    return PointScoringStrategy()
