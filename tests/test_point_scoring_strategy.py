from __future__ import annotations

import numpy as np
import pytest

from pulsesignal.domain.models import Direction, Strength
from pulsesignal.strategies.point_scoring import PointScoringStrategy, classify_points
from pulsesignal.strategies.rsi_ma import RsiMovingAverageStrategy


@pytest.mark.parametrize(
    ("points", "direction", "strength"),
    [
        (10, Direction.BUY, Strength.STRONG_BUY),
        (8, Direction.BUY, Strength.STRONG_BUY),
        (7, Direction.BUY, Strength.BUY),
        (6, Direction.BUY, Strength.BUY),
        (5, Direction.NEUTRAL, Strength.HOLD),
        (0, Direction.NEUTRAL, Strength.HOLD),
        (-5, Direction.NEUTRAL, Strength.HOLD),
        (-6, Direction.SELL, Strength.SELL),
        (-8, Direction.SELL, Strength.STRONG_SELL),
    ],
)
def test_classify_points_boundaries(
    points: int,
    direction: Direction,
    strength: Strength,
) -> None:
    assert classify_points(points) == (direction, strength)


def test_overbought_agreement_is_strong_sell() -> None:
    # RSI window rises, the tail falls (bearish MACD), highs hug the closes.
    closes = [100.0 + i for i in range(15)] + [113.0 - i for i in range(35)]
    lows = [c - 1000.0 for c in closes]

    signal = PointScoringStrategy().evaluate(200.0, closes, highs=closes, lows=lows)

    assert signal.indicators is not None
    assert signal.indicators.rsi == 100.0
    assert signal.indicators.macd is not None
    assert signal.indicators.macd.histogram < 0
    assert signal.indicators.stochastic is not None
    assert signal.indicators.stochastic.k > 80
    assert signal.points == -10
    assert signal.direction is Direction.SELL
    assert signal.strength is Strength.STRONG_SELL
    assert signal.confidence == min(95, 50 + 20 + 15 + 10 + 10 + 10 * 3)


def test_oversold_agreement_is_strong_buy() -> None:
    closes = [200.0 - i for i in range(15)] + [187.0 + i for i in range(35)]
    highs = [c + 1000.0 for c in closes]

    signal = PointScoringStrategy().evaluate(10.0, closes, highs=highs, lows=closes)

    assert signal.indicators is not None
    assert signal.indicators.rsi == 0.0
    assert signal.points == 10
    assert signal.direction is Direction.BUY
    assert signal.strength is Strength.STRONG_BUY
    assert signal.confidence == 95


def test_steady_decline_splits_votes() -> None:
    # Oversold RSI, band and stochastic vote buy while MACD votes sell.
    history = [150.0 - i for i in range(50)]

    signal = PointScoringStrategy().evaluate(90.0, history)

    assert signal.indicators is not None
    assert signal.indicators.rsi == 0.0
    assert signal.indicators.bollinger is not None
    assert 90.0 < signal.indicators.bollinger.lower
    assert signal.points == 3 - 3 + 2 + 2
    assert signal.direction is Direction.NEUTRAL
    assert signal.strength is Strength.HOLD
    assert signal.confidence == 95


def test_balanced_market_is_neutral() -> None:
    history = [100.0, 101.0] * 25

    signal = PointScoringStrategy().evaluate(100.5, history)

    assert signal.indicators is not None
    assert signal.indicators.rsi == 50.0
    assert signal.direction is Direction.NEUTRAL


def test_failed_evaluation_degrades_to_neutral() -> None:
    history = [100.0 + i for i in range(50)]

    signal = PointScoringStrategy().evaluate(120.0, history, highs=[1.0, 2.0], lows=None)

    assert signal.direction is Direction.NEUTRAL
    assert signal.strength is Strength.HOLD
    assert signal.confidence == 50
    assert signal.indicators is None


@pytest.mark.parametrize("history", [None, 42, (float(i) for i in range(50))])
def test_non_sequence_history_degrades_to_neutral(history: object) -> None:
    for strategy in (PointScoringStrategy(), RsiMovingAverageStrategy()):
        signal = strategy.evaluate(1.0, history)  # type: ignore[arg-type]

        assert signal.direction is Direction.NEUTRAL
        assert signal.strength is Strength.HOLD
        assert signal.confidence == 50
        assert signal.indicators is None


def test_record_carries_points_and_indicator_payload() -> None:
    history = [150.0 - i for i in range(50)]

    record = PointScoringStrategy().evaluate(90.0, history).to_record()

    assert record["signal"] == "NEUTRAL"
    assert record["strength"] == "HOLD"
    assert record["strategy"] == "points"
    assert record["points"] == 4
    assert set(record["indicators"]) == {"rsi", "macd", "bollinger", "stochastic"}
    assert set(record["indicators"]["macd"]) == {"macd", "signal", "histogram"}


def test_confidence_stays_in_range_for_random_walks() -> None:
    rng = np.random.default_rng(5)
    strategy = PointScoringStrategy()
    for size in (5, 20, 50, 80):
        history = (100 + np.cumsum(rng.normal(0, 2.0, size=size))).tolist()
        signal = strategy.evaluate(history[-1], history)
        assert isinstance(signal.confidence, int)
        assert 30 <= signal.confidence <= 95


def test_evaluation_is_deterministic() -> None:
    history = [100.0 + ((i * 5) % 13) for i in range(60)]
    strategy = PointScoringStrategy()

    assert strategy.evaluate(99.0, history) == strategy.evaluate(99.0, history)
