from __future__ import annotations

import argparse
import json
import logging

from pulsesignal.config import Settings
from pulsesignal.data.base import PriceSource
from pulsesignal.data.markets import select_markets
from pulsesignal.data.synthetic import SyntheticPriceSource
from pulsesignal.data.yfinance_provider import YFinancePriceSource
from pulsesignal.engine import SignalEngine
from pulsesignal.logging_config import configure_logging
from pulsesignal.scheduler import SignalScheduler
from pulsesignal.strategy import STRATEGIES, build_strategy

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="PulseSignal CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    def _market_options(cmd: argparse.ArgumentParser) -> None:
        cmd.add_argument("--symbols", default=None, help="Comma-separated, e.g. EUR/USD,AAPL")
        cmd.add_argument("--source", choices=["synthetic", "yfinance"], default=None)
        cmd.add_argument("--seed", type=int, default=None)

    evaluate = subparsers.add_parser("evaluate", help="Generate one round of signals")
    _market_options(evaluate)
    evaluate.add_argument("--strategy", choices=sorted(STRATEGIES), default=None)
    evaluate.add_argument("--history-length", type=int, default=None)

    prices = subparsers.add_parser("prices", help="Show current market prices")
    _market_options(prices)

    signal_cmd = subparsers.add_parser("signal", help="Score an explicit price series")
    signal_cmd.add_argument("--price", type=float, required=True)
    signal_cmd.add_argument(
        "--history",
        required=True,
        help="Comma-separated prices, oldest first",
    )
    signal_cmd.add_argument("--strategy", choices=sorted(STRATEGIES), default=None)

    run = subparsers.add_parser("run", help="Generate signals on a fixed schedule")
    _market_options(run)
    run.add_argument("--strategy", choices=sorted(STRATEGIES), default=None)
    run.add_argument("--history-length", type=int, default=None)
    run.add_argument("--interval-minutes", type=int, default=None)

    return parser


def _symbols(args: argparse.Namespace, settings: Settings) -> list[str] | None:
    if args.symbols:
        return [s for s in args.symbols.split(",") if s.strip()]
    return settings.symbol_list()


def _build_source(args: argparse.Namespace, settings: Settings) -> PriceSource:
    seed = args.seed if args.seed is not None else settings.random_seed
    synthetic = SyntheticPriceSource(seed=seed)
    if (args.source or settings.price_source) == "yfinance":
        return YFinancePriceSource(fallback=synthetic)
    return synthetic


def _build_engine(args: argparse.Namespace, settings: Settings) -> SignalEngine:
    history_length = args.history_length or settings.history_length
    return SignalEngine(
        source=_build_source(args, settings),
        strategy=build_strategy(args.strategy or settings.strategy),
        markets=select_markets(_symbols(args, settings)),
        history_length=history_length,
    )


def _handle_evaluate(args: argparse.Namespace, settings: Settings) -> int:
    engine = _build_engine(args, settings)
    results = engine.evaluate_all()
    print(json.dumps({"signals": [r.to_record() for r in results]}))
    return 0


def _handle_prices(args: argparse.Namespace, settings: Settings) -> int:
    source = _build_source(args, settings)
    payload = []
    for market in select_markets(_symbols(args, settings)):
        quote = source.quote(market.symbol)
        payload.append(
            {
                "symbol": market.symbol,
                "name": market.name,
                "type": market.asset_type,
                "price": quote.price,
                "timestamp": quote.timestamp.isoformat(),
            }
        )
    print(json.dumps({"prices": payload}))
    return 0


def _handle_signal(args: argparse.Namespace, settings: Settings) -> int:
    try:
        history = [float(v) for v in args.history.split(",") if v.strip()]
    except ValueError as exc:
        raise SystemExit(f"history must be comma-separated numbers: {exc}") from exc
    if not history:
        raise SystemExit("history must contain at least one price")

    strategy = build_strategy(args.strategy or settings.strategy)
    result = strategy.evaluate(args.price, history)
    print(json.dumps(result.to_record()))
    return 0


def _handle_run(args: argparse.Namespace, settings: Settings) -> int:
    interval = args.interval_minutes or settings.schedule_minutes
    engine = _build_engine(args, settings)
    engine.sink = lambda record: print(json.dumps(record), flush=True)
    SignalScheduler(engine, interval_minutes=interval).start()
    return 0


def main() -> None:
    settings = Settings()
    configure_logging(settings.log_level)

    parser = _build_parser()
    args = parser.parse_args()

    try:
        if args.command == "evaluate":
            raise SystemExit(_handle_evaluate(args, settings))
        if args.command == "prices":
            raise SystemExit(_handle_prices(args, settings))
        if args.command == "signal":
            raise SystemExit(_handle_signal(args, settings))
        if args.command == "run":
            raise SystemExit(_handle_run(args, settings))
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc

    raise SystemExit("Unknown command")


if __name__ == "__main__":
    main()
