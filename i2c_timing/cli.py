"""Command line entry point for the TIMINGR calculator."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from i2c_timing import __version__
from i2c_timing.core.calculator import TimingResult, compute_timing
from i2c_timing.core.exceptions import InvalidArgumentError, TimingError
from i2c_timing.utils.config_loader import load_speed_table

logger = logging.getLogger(__name__)

DEFAULT_BUS_CLOCK = 8_000_000
DEFAULT_SPEED = 100_000
SEPARATOR = "-" * 36


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting on bad arguments."""

    def error(self, message: str):  # type: ignore[override]
        raise InvalidArgumentError(message)


def _build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="i2c-timing",
        description="Compute the I2C TIMINGR register value for a source clock and bus speed.",
        add_help=False,
    )
    parser.add_argument("-h", "--help", action="store_true", help="show this help")
    parser.add_argument(
        "-b",
        "--bus-clock",
        type=int,
        default=DEFAULT_BUS_CLOCK,
        metavar="HZ",
        help=f"I2C bus clock [{DEFAULT_BUS_CLOCK}]",
    )
    parser.add_argument(
        "-s",
        "--speed",
        type=int,
        default=DEFAULT_SPEED,
        metavar="HZ",
        help=f"I2C speed [{DEFAULT_SPEED}]",
    )
    parser.add_argument(
        "-a",
        "--use-analog-filter",
        action="store_true",
        help="use analog filter [false]",
    )
    parser.add_argument(
        "-c",
        "--config",
        default=None,
        metavar="PATH",
        help="speed characteristics YAML [bundled table]",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="log search details to stderr"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _print_usage(parser: argparse.ArgumentParser) -> None:
    print(parser.format_help(), file=sys.stderr)


def format_report(result: TimingResult) -> list[str]:
    """Lines describing the register value and its fields."""
    timing = result.timing
    return [
        f"I2C_TIMINGR: {result.hex}",
        f"Prescaler: {timing.prescaler}",
        f"SCL low period: {timing.scl_low}",
        f"SCL high period: {timing.scl_high}",
        f"SDA delay (data hold time): {timing.hold_delay}",
        f"SCL delay (data setup time): {timing.setup_delay}",
    ]


def main(argv: Optional[list[str]] = None) -> int:
    parser = _build_parser()
    try:
        args = parser.parse_args(argv if argv is not None else sys.argv[1:])
    except InvalidArgumentError as exc:
        print(f"ERROR: {exc}\n", file=sys.stderr)
        _print_usage(parser)
        return 1

    if args.help:
        _print_usage(parser)
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    print(f"Use analog filter: {str(args.use_analog_filter).lower()}")
    print(f"I2C bus clock: {args.bus_clock} Hz")
    print(f"I2C speed: {args.speed} Hz")
    print(SEPARATOR)

    try:
        table = load_speed_table(args.config) if args.config else None
        result = compute_timing(
            args.bus_clock,
            args.speed,
            use_analog_filter=args.use_analog_filter,
            table=table,
        )
    except TimingError as exc:
        logger.debug(f"{type(exc).__name__} details: {exc.details}")
        print(f"ERROR: {exc}", file=sys.stderr)
        if isinstance(exc, InvalidArgumentError):
            print(file=sys.stderr)
            _print_usage(parser)
        return 1

    for line in format_report(result):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
