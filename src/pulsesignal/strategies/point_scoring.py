from __future__ import annotations

from collections.abc import Sequence

from pulsesignal import indicators
from pulsesignal.domain.models import Direction, IndicatorSet, Signal, Strength
from pulsesignal.strategies.base import SignalStrategy, clamp_confidence
from pulsesignal.strategies.thresholds import SignalThresholds


def classify_points(
    points: int,
    thresholds: SignalThresholds | None = None,
) -> tuple[Direction, Strength]:
    cfg = thresholds or SignalThresholds.point_scoring()
    if points >= cfg.strong_signal_points:
        return Direction.BUY, Strength.STRONG_BUY
    if points >= cfg.signal_points:
        return Direction.BUY, Strength.BUY
    if points <= -cfg.strong_signal_points:
        return Direction.SELL, Strength.STRONG_SELL
    if points <= -cfg.signal_points:
        return Direction.SELL, Strength.SELL
    return Direction.NEUTRAL, Strength.HOLD


class PointScoringStrategy(SignalStrategy):
    """Sum signed votes from RSI, MACD, Bollinger Bands and Stochastic.

    Votes are applied in that fixed order so the confidence total is
    reproducible.
    """

    name = "points"

    @classmethod
    def default_thresholds(cls) -> SignalThresholds:
        return SignalThresholds.point_scoring()

    def _evaluate(
        self,
        price: float,
        history: Sequence[float],
        highs: Sequence[float] | None,
        lows: Sequence[float] | None,
    ) -> Signal:
        cfg = self.thresholds
        rsi = indicators.rsi(history, cfg.rsi_period)
        macd = indicators.macd(
            history,
            fast_period=cfg.macd_fast_period,
            slow_period=cfg.macd_slow_period,
            signal_period=cfg.macd_signal_period,
        )
        bands = indicators.bollinger_bands(
            history,
            period=cfg.bollinger_period,
            num_std=cfg.bollinger_std,
        )
        stoch = indicators.stochastic(
            highs,
            lows,
            history,
            period=cfg.stochastic_period,
            smooth_k=cfg.stochastic_smooth_k,
            smooth_d=cfg.stochastic_smooth_d,
        )

        points = 0
        confidence = cfg.base_confidence

        if rsi < cfg.rsi_strong_oversold:
            points += cfg.rsi_strong_points
            confidence += cfg.rsi_strong_confidence
        elif rsi < cfg.rsi_oversold:
            points += cfg.rsi_points
            confidence += cfg.rsi_confidence
        elif rsi > cfg.rsi_strong_overbought:
            points -= cfg.rsi_strong_points
            confidence += cfg.rsi_strong_confidence
        elif rsi > cfg.rsi_overbought:
            points -= cfg.rsi_points
            confidence += cfg.rsi_confidence

        if macd.macd > macd.signal and macd.histogram > 0:
            points += cfg.macd_points
            confidence += cfg.macd_confidence
        elif macd.macd < macd.signal and macd.histogram < 0:
            points -= cfg.macd_points
            confidence += cfg.macd_confidence

        if price < bands.lower:
            points += cfg.bollinger_points
            confidence += cfg.bollinger_confidence
        elif price > bands.upper:
            points -= cfg.bollinger_points
            confidence += cfg.bollinger_confidence

        if stoch.k < cfg.stochastic_oversold and stoch.d < cfg.stochastic_oversold:
            points += cfg.stochastic_points
            confidence += cfg.stochastic_confidence
        elif stoch.k > cfg.stochastic_overbought and stoch.d > cfg.stochastic_overbought:
            points -= cfg.stochastic_points
            confidence += cfg.stochastic_confidence

        direction, strength = classify_points(points, cfg)
        return Signal(
            direction=direction,
            strength=strength,
            confidence=clamp_confidence(confidence + abs(points) * cfg.confidence_per_point, cfg),
            price=price,
            strategy=self.name,
            indicators=IndicatorSet(rsi=rsi, macd=macd, bollinger=bands, stochastic=stoch),
            points=points,
        )
