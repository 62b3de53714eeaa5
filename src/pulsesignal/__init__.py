from pulsesignal.config import Settings
from pulsesignal.domain.models import Direction, IndicatorSet, Signal, Strength
from pulsesignal.engine import MarketSignal, SignalEngine
from pulsesignal.strategy import build_strategy

__version__ = "0.1.0"

__all__ = [
    "Direction",
    "IndicatorSet",
    "MarketSignal",
    "Settings",
    "Signal",
    "SignalEngine",
    "Strength",
    "build_strategy",
    "__version__",
]
