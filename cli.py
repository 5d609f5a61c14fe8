"""
Financial indicators CLI.

Usage:
    python cli.py kdj --highs H1,H2,... --lows L1,L2,... --closes C1,C2,... [--period N]
    python cli.py macd --closes C1,C2,... [--short N] [--long N] [--signal N]
    python cli.py demo
"""

import argparse
import json
import logging
import sys

from dotenv import load_dotenv

from config import ConfigError, IndicatorsConfig, load_config
from domain import InvalidInputError, WindowConvention, kdj, macd
from domain.indicators.examples import example_kdj, example_macd
from presentation.json_api import kdj_to_response, macd_to_response, to_json
from presentation.report import format_kdj, format_macd, write_lines

logger = logging.getLogger(__name__)


def parse_numbers(text: str) -> list[float]:
    """Parse a comma-separated list of numbers."""
    try:
        return [float(part) for part in text.split(",") if part.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected comma-separated numbers, got {text!r}")


def setup_logging(config: IndicatorsConfig, level: str | None = None) -> None:
    """Configure root logging from config, with an optional level override."""
    logging.basicConfig(
        level=(level or config.logging.level).upper(),
        format=config.logging.format,
        stream=sys.stderr,
    )


def _emit(args: argparse.Namespace, config: IndicatorsConfig, title: str, lines: list[str], response) -> None:
    output_format = args.format or config.output.format
    if output_format == "json":
        print(json.dumps(to_json(response), indent=2))
    else:
        write_lines(title, lines)


def cmd_kdj(args: argparse.Namespace, config: IndicatorsConfig) -> int:
    """Compute KDJ for the given bars."""
    period = args.period if args.period is not None else config.kdj.period
    convention = args.convention or config.kdj.convention

    values = kdj(args.highs, args.lows, args.closes, period=period, convention=convention)

    precision = config.output.precision
    _emit(
        args,
        config,
        f"KDJ({period}, {WindowConvention(convention).value})",
        format_kdj(values, precision),
        kdj_to_response(values, period, convention),
    )
    return 0


def cmd_macd(args: argparse.Namespace, config: IndicatorsConfig) -> int:
    """Compute MACD for the given closes."""
    short_period = args.short if args.short is not None else config.macd.short_period
    long_period = args.long if args.long is not None else config.macd.long_period
    signal_period = args.signal if args.signal is not None else config.macd.signal_period

    values = macd(args.closes, short_period, long_period, signal_period)

    precision = config.output.precision
    _emit(
        args,
        config,
        f"MACD({short_period}, {long_period}, {signal_period})",
        format_macd(values, precision),
        macd_to_response(values, short_period, long_period, signal_period),
    )
    return 0


def cmd_demo(args: argparse.Namespace, config: IndicatorsConfig) -> int:
    """Run the bundled examples."""
    example_kdj()
    example_macd()
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="financial-indicators",
        description="KDJ and MACD technical indicators",
    )
    parser.add_argument("--config", help="Path to TOML config file")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override configured log level",
    )
    parser.add_argument(
        "-f", "--format",
        choices=["text", "json"],
        help="Output format (default from config)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # KDJ command
    kdj_parser = subparsers.add_parser("kdj", help="Compute KDJ")
    kdj_parser.add_argument("--highs", type=parse_numbers, required=True, help="Comma-separated highs")
    kdj_parser.add_argument("--lows", type=parse_numbers, required=True, help="Comma-separated lows")
    kdj_parser.add_argument("--closes", type=parse_numbers, required=True, help="Comma-separated closes")
    kdj_parser.add_argument("-p", "--period", type=int, help="Lookback window size")
    kdj_parser.add_argument(
        "--convention",
        choices=[c.value for c in WindowConvention],
        help="Window convention",
    )
    kdj_parser.set_defaults(func=cmd_kdj)

    # MACD command
    macd_parser = subparsers.add_parser("macd", help="Compute MACD")
    macd_parser.add_argument("--closes", type=parse_numbers, required=True, help="Comma-separated closes")
    macd_parser.add_argument("--short", type=int, help="Short EMA period")
    macd_parser.add_argument("--long", type=int, help="Long EMA period")
    macd_parser.add_argument("--signal", type=int, help="Signal EMA period")
    macd_parser.set_defaults(func=cmd_macd)

    # Demo command
    demo_parser = subparsers.add_parser("demo", help="Run bundled examples")
    demo_parser.set_defaults(func=cmd_demo)

    args = parser.parse_args(argv)

    load_dotenv()
    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    setup_logging(config, args.log_level)

    try:
        return args.func(args, config)
    except InvalidInputError as e:
        logger.error(f"Invalid input: {e.to_dict()}")
        print(f"Error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
