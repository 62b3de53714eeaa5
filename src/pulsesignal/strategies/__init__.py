from pulsesignal.strategies.base import SignalStrategy
from pulsesignal.strategies.point_scoring import PointScoringStrategy, classify_points
from pulsesignal.strategies.rsi_ma import RsiMovingAverageStrategy
from pulsesignal.strategies.thresholds import SignalThresholds

__all__ = [
    "SignalStrategy",
    "SignalThresholds",
    "PointScoringStrategy",
    "RsiMovingAverageStrategy",
    "classify_points",
]
