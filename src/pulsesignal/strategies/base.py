from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from collections.abc import Sequence

from pulsesignal.domain.models import Signal
from pulsesignal.strategies.thresholds import SignalThresholds

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def clamp_confidence(value: float, thresholds: SignalThresholds) -> int:
    rounded = round_half_up(value)
    return max(thresholds.min_confidence, min(thresholds.max_confidence, rounded))


class SignalStrategy(ABC):
    name: str = "base"

    def __init__(self, thresholds: SignalThresholds | None = None) -> None:
        self.thresholds = thresholds or self.default_thresholds()

    @classmethod
    def default_thresholds(cls) -> SignalThresholds:
        return SignalThresholds()

    def evaluate(
        self,
        price: float,
        history: Sequence[float],
        highs: Sequence[float] | None = None,
        lows: Sequence[float] | None = None,
    ) -> Signal:
        """Score ``history`` at ``price``; degrade to a neutral signal on failure."""
        try:
            if len(history) < self.thresholds.min_history:
                return Signal.neutral(price, self.name)
            return self._evaluate(price, history, highs, lows)
        except Exception:
            logger.exception("Signal evaluation failed for strategy=%s", self.name)
            return Signal.neutral(price, self.name)

    @abstractmethod
    def _evaluate(
        self,
        price: float,
        history: Sequence[float],
        highs: Sequence[float] | None,
        lows: Sequence[float] | None,
    ) -> Signal:
        """Return a signal for a history that passed the length gate."""
