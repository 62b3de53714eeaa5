from __future__ import annotations

from collections.abc import Sequence

from pulsesignal import indicators
from pulsesignal.domain.models import Direction, IndicatorSet, Signal, Strength
from pulsesignal.strategies.base import SignalStrategy, clamp_confidence
from pulsesignal.strategies.thresholds import SignalThresholds


class RsiMovingAverageStrategy(SignalStrategy):
    """RSI bands refined by SMA and EMA trend overlays."""

    name = "rsi-ma"

    @classmethod
    def default_thresholds(cls) -> SignalThresholds:
        return SignalThresholds.rsi_ma()

    def _rsi_band(self, rsi: float) -> tuple[Direction, Strength, float]:
        cfg = self.thresholds
        if rsi < cfg.rsi_strong_oversold:
            confidence = cfg.strong_band_ceiling - (rsi / cfg.rsi_strong_oversold) * (
                cfg.strong_band_span
            )
            return Direction.BUY, Strength.STRONG_BUY, confidence
        if rsi < cfg.rsi_oversold:
            width = cfg.rsi_oversold - cfg.rsi_strong_oversold
            confidence = cfg.band_ceiling - ((rsi - cfg.rsi_strong_oversold) / width) * (
                cfg.band_span
            )
            return Direction.BUY, Strength.BUY, confidence
        if rsi > cfg.rsi_strong_overbought:
            width = 100 - cfg.rsi_strong_overbought
            confidence = cfg.strong_band_ceiling - ((100 - rsi) / width) * cfg.strong_band_span
            return Direction.SELL, Strength.STRONG_SELL, confidence
        if rsi > cfg.rsi_overbought:
            width = cfg.rsi_strong_overbought - cfg.rsi_overbought
            confidence = cfg.band_ceiling - ((cfg.rsi_strong_overbought - rsi) / width) * (
                cfg.band_span
            )
            return Direction.SELL, Strength.SELL, confidence
        return Direction.NEUTRAL, Strength.HOLD, cfg.base_confidence

    def _evaluate(
        self,
        price: float,
        history: Sequence[float],
        highs: Sequence[float] | None,
        lows: Sequence[float] | None,
    ) -> Signal:
        cfg = self.thresholds
        rsi = indicators.rsi(history, cfg.rsi_period)
        sma_fast = indicators.sma(history, cfg.sma_fast_period)
        sma_slow = indicators.sma(history, cfg.sma_slow_period)
        ema_fast = indicators.ema(history, cfg.ema_fast_period)
        ema_slow = indicators.ema(history, cfg.ema_slow_period)

        direction, strength, confidence = self._rsi_band(rsi)

        if sma_fast > sma_slow and price > sma_fast:
            if direction is Direction.BUY:
                confidence += cfg.ma_trend_bonus
            else:
                direction = Direction.BUY
                strength = (
                    Strength.BUY
                    if confidence > cfg.ma_confidence_floor
                    else Strength.WEAK_BUY
                )
        elif sma_fast < sma_slow and price < sma_fast:
            if direction is Direction.SELL:
                confidence += cfg.ma_trend_bonus
            else:
                direction = Direction.SELL
                strength = (
                    Strength.SELL
                    if confidence > cfg.ma_confidence_floor
                    else Strength.WEAK_SELL
                )

        if ema_fast > ema_slow and direction is Direction.BUY:
            confidence += cfg.ema_trend_bonus
        elif ema_fast < ema_slow and direction is Direction.SELL:
            confidence += cfg.ema_trend_bonus

        return Signal(
            direction=direction,
            strength=strength,
            confidence=clamp_confidence(confidence, cfg),
            price=price,
            strategy=self.name,
            indicators=IndicatorSet(
                rsi=rsi,
                sma=((cfg.sma_fast_period, sma_fast), (cfg.sma_slow_period, sma_slow)),
                ema=((cfg.ema_fast_period, ema_fast), (cfg.ema_slow_period, ema_slow)),
            ),
        )
