from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(slots=True, frozen=True)
class SignalThresholds:
    """Tunable constants shared by both signal strategies."""

    rsi_period: int = 14
    rsi_strong_oversold: float = 25.0
    rsi_oversold: float = 35.0
    rsi_overbought: float = 65.0
    rsi_strong_overbought: float = 75.0

    min_history: int = 20
    base_confidence: float = 50.0
    min_confidence: int = 20
    max_confidence: int = 95

    # RSI + moving average scoring
    sma_fast_period: int = 20
    sma_slow_period: int = 50
    ema_fast_period: int = 12
    ema_slow_period: int = 26
    strong_band_ceiling: float = 85.0
    strong_band_span: float = 35.0
    band_ceiling: float = 75.0
    band_span: float = 25.0
    ma_trend_bonus: float = 10.0
    ema_trend_bonus: float = 5.0
    ma_confidence_floor: float = 60.0

    # point scoring
    macd_fast_period: int = 12
    macd_slow_period: int = 26
    macd_signal_period: int = 9
    bollinger_period: int = 20
    bollinger_std: float = 2.0
    stochastic_period: int = 14
    stochastic_smooth_k: int = 3
    stochastic_smooth_d: int = 3
    stochastic_oversold: float = 20.0
    stochastic_overbought: float = 80.0

    rsi_strong_points: int = 3
    rsi_strong_confidence: float = 20.0
    rsi_points: int = 2
    rsi_confidence: float = 10.0
    macd_points: int = 3
    macd_confidence: float = 15.0
    bollinger_points: int = 2
    bollinger_confidence: float = 10.0
    stochastic_points: int = 2
    stochastic_confidence: float = 10.0

    signal_points: int = 6
    strong_signal_points: int = 8
    confidence_per_point: float = 3.0

    def __post_init__(self) -> None:
        if self.min_confidence > self.max_confidence:
            raise ValueError("min_confidence must be <= max_confidence")
        if not 0 < self.signal_points <= self.strong_signal_points:
            raise ValueError("signal_points must be positive and <= strong_signal_points")
        if self.min_history < 0:
            raise ValueError("min_history must be non-negative")

    @classmethod
    def rsi_ma(cls) -> SignalThresholds:
        return cls()

    @classmethod
    def point_scoring(cls) -> SignalThresholds:
        return replace(cls(), min_history=0, min_confidence=30)
