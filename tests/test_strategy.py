import pytest

from pulsesignal.strategies import PointScoringStrategy, RsiMovingAverageStrategy
from pulsesignal.strategies.thresholds import SignalThresholds
from pulsesignal.strategy import build_strategy, default_strategy


def test_build_strategy_resolves_names() -> None:
    assert isinstance(build_strategy("points"), PointScoringStrategy)
    assert isinstance(build_strategy(" RSI-MA "), RsiMovingAverageStrategy)


def test_build_strategy_rejects_unknown_name() -> None:
    with pytest.raises(ValueError, match="Unknown strategy"):
        build_strategy("macd-only")


def test_presets_use_their_own_clamp_ranges() -> None:
    assert build_strategy("rsi-ma").thresholds.min_confidence == 20
    assert build_strategy("points").thresholds.min_confidence == 30
    assert default_strategy().thresholds.max_confidence == 95


def test_explicit_thresholds_are_kept() -> None:
    cfg = SignalThresholds(min_history=30)
    assert build_strategy("points", cfg).thresholds is cfg


def test_thresholds_reject_inverted_clamp() -> None:
    with pytest.raises(ValueError, match="min_confidence"):
        SignalThresholds(min_confidence=96)


def test_point_gate_can_be_enabled() -> None:
    strategy = PointScoringStrategy(SignalThresholds(min_history=30, min_confidence=30))
    signal = strategy.evaluate(1.0, [1.0] * 10)
    assert signal.confidence == 50
    assert signal.points is None
