from __future__ import annotations

from collections.abc import Iterable

from pulsesignal.domain.models import MarketSymbol

DEFAULT_MARKETS: tuple[MarketSymbol, ...] = (
    MarketSymbol("EUR/USD", "Euro/US Dollar", "forex"),
    MarketSymbol("GBP/USD", "British Pound/US Dollar", "forex"),
    MarketSymbol("USD/JPY", "US Dollar/Japanese Yen", "forex"),
    MarketSymbol("USD/CHF", "US Dollar/Swiss Franc", "forex"),
    MarketSymbol("AUD/USD", "Australian Dollar/US Dollar", "forex"),
    MarketSymbol("USD/CAD", "US Dollar/Canadian Dollar", "forex"),
    MarketSymbol("BTC/USD", "Bitcoin/US Dollar", "crypto"),
    MarketSymbol("ETH/USD", "Ethereum/US Dollar", "crypto"),
    MarketSymbol("AAPL", "Apple Inc", "stock"),
    MarketSymbol("TSLA", "Tesla Inc", "stock"),
    MarketSymbol("GOOGL", "Alphabet Inc", "stock"),
    MarketSymbol("MSFT", "Microsoft Corporation", "stock"),
)


def select_markets(symbols: Iterable[str] | None = None) -> tuple[MarketSymbol, ...]:
    if symbols is None:
        return DEFAULT_MARKETS
    wanted = [s.strip().upper() for s in symbols if s.strip()]
    if not wanted:
        return DEFAULT_MARKETS

    by_symbol = {market.symbol: market for market in DEFAULT_MARKETS}
    unknown = [s for s in wanted if s not in by_symbol]
    if unknown:
        raise ValueError(f"Unknown symbols: {unknown}")
    return tuple(by_symbol[s] for s in dict.fromkeys(wanted))
