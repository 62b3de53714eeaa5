from __future__ import annotations

import pytest

from pulsesignal.data.markets import DEFAULT_MARKETS, select_markets
from pulsesignal.data.synthetic import BASE_QUOTES, SyntheticPriceSource


def test_seeded_sources_are_reproducible() -> None:
    first = SyntheticPriceSource(seed=42).history("BTC/USD", 50)
    second = SyntheticPriceSource(seed=42).history("BTC/USD", 50)
    assert first == second


def test_history_ends_at_current_price() -> None:
    history = SyntheticPriceSource(seed=1).history("EUR/USD", 50)
    assert len(history.closes) == 50
    assert history.closes[-1] == history.price
    assert all(p > 0 for p in history.closes)


def test_quote_stays_near_base_price() -> None:
    source = SyntheticPriceSource(seed=9)
    base = BASE_QUOTES["USD/JPY"]
    for _ in range(20):
        price = source.quote("USD/JPY").price
        assert abs(price / base.price - 1) <= base.volatility * 1.25 + 1e-6


def test_unknown_symbol_uses_default_quote() -> None:
    price = SyntheticPriceSource(seed=2).quote("XYZ").price
    assert 95.0 < price < 105.0


def test_walk_back_rejects_empty_request() -> None:
    with pytest.raises(ValueError, match="count"):
        SyntheticPriceSource().walk_back(1.0, 0)


def test_select_markets_defaults_and_filters() -> None:
    assert select_markets(None) == DEFAULT_MARKETS
    assert len(DEFAULT_MARKETS) == 12
    selected = select_markets(["eur/usd", "AAPL", "EUR/USD"])
    assert [m.symbol for m in selected] == ["EUR/USD", "AAPL"]


def test_select_markets_rejects_unknown_symbols() -> None:
    with pytest.raises(ValueError, match="Unknown symbols"):
        select_markets(["DOGE/USD"])


def test_walk_back_steps_from_each_newer_sample() -> None:
    prices = SyntheticPriceSource(seed=5).walk_back(100.0, 200)

    assert prices[-1] == 100.0
    for earlier, later in zip(prices, prices[1:]):
        assert abs(earlier / later - 1) <= 0.012 + 1e-12
    # a walk drifts away from its anchor; samples drawn around it would not
    assert max(abs(p / 100.0 - 1) for p in prices) > 0.012
