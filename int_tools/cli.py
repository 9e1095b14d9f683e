#!/usr/bin/env python3
"""Command line front-end for the integer helpers."""
import argparse
import logging
import random
import sys
from typing import List, Optional

from .arithmetic import clamp
from .codec import SignMarkers
from .constants import DEFAULT_NEGATIVE_SIGN, DEFAULT_POSITIVE_SIGN
from .random_ints import random_int
from .ranges import int_range


logger = logging.getLogger(__name__)


def _run_parse(args: argparse.Namespace) -> int:
    text = args.text_option if args.text_option is not None else args.text
    if text is None:
        raise ValueError("A numeral is required, either as TEXT or through --text.")
    markers = SignMarkers(negative=args.negative_sign, positive=args.positive_sign)
    value = markers.parse(text, args.radix)
    if value is None:
        logger.warning("Could not parse %r (radix %s)", text, args.radix)
        print(f"Not a valid integer: {text!r}")
        return 1
    print(value)
    return 0


def _run_format(args: argparse.Namespace) -> int:
    markers = SignMarkers(negative=args.negative_sign)
    print(markers.format(args.value, args.radix))
    return 0


def _run_range(args: argparse.Namespace) -> int:
    values = int_range(args.start, args.stop, args.step)
    print(" ".join(str(value) for value in values))
    return 0


def _run_clamp(args: argparse.Namespace) -> int:
    print(clamp(args.value, args.min, args.max))
    return 0


def _run_random(args: argparse.Namespace) -> int:
    rng = random.Random(args.seed) if args.seed is not None else None
    if args.high is None:
        print(random_int(args.low, rng=rng))
    else:
        print(random_int(args.low, args.high, rng=rng))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="int-tools",
        description="Parse, format, clamp, range and draw integers.",
    )
    parser.add_argument('--verbose', action='store_true', help='Enable debug logging.')
    commands = parser.add_subparsers(dest='command', required=True)

    parse_cmd = commands.add_parser('parse', help='Parse a numeral into an integer.')
    parse_cmd.add_argument('text', nargs='?', help='The numeral, e.g. 42, ff or 0x1A. Put negative numerals after --, as in: parse --radix 16 -- -ff.')
    parse_cmd.add_argument('--text', dest='text_option', metavar='TEXT', help='The numeral, for values starting with a sign, e.g. --text=-ff.')
    parse_cmd.add_argument('--radix', type=int, help='Base between 2 and 36 (default: 10, or 16 for 0x).')
    parse_cmd.add_argument('--negative-sign', default=DEFAULT_NEGATIVE_SIGN, help='Prefix marking a negative value.')
    parse_cmd.add_argument('--positive-sign', default=DEFAULT_POSITIVE_SIGN, help='Prefix marking a positive value.')
    parse_cmd.set_defaults(handler=_run_parse)

    format_cmd = commands.add_parser('format', help='Render an integer in another base.')
    format_cmd.add_argument('value', type=int)
    format_cmd.add_argument('--radix', type=int, required=True, help='Base between 2 and 36.')
    format_cmd.add_argument('--negative-sign', default=DEFAULT_NEGATIVE_SIGN, help='Prefix for negative values.')
    format_cmd.set_defaults(handler=_run_format)

    range_cmd = commands.add_parser('range', help='List the integers from START up to STOP (exclusive).')
    range_cmd.add_argument('start', type=int)
    range_cmd.add_argument('stop', type=int, nargs='?')
    range_cmd.add_argument('--step', type=int, default=1)
    range_cmd.set_defaults(handler=_run_range)

    clamp_cmd = commands.add_parser('clamp', help='Bound VALUE to [MIN, MAX].')
    clamp_cmd.add_argument('value', type=int)
    clamp_cmd.add_argument('min', type=int)
    clamp_cmd.add_argument('max', type=int)
    clamp_cmd.set_defaults(handler=_run_clamp)

    random_cmd = commands.add_parser('random', help='Draw an integer from [LOW, HIGH], or [0, LOW] with one bound.')
    random_cmd.add_argument('low', type=int)
    random_cmd.add_argument('high', type=int, nargs='?')
    random_cmd.add_argument('--seed', type=int, help='Seed for a reproducible draw.')
    random_cmd.set_defaults(handler=_run_random)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(),
        ]
    )
    options = {key: value for key, value in vars(args).items() if key != "handler"}
    logger.debug("Running %s with %s", args.command, options)

    try:
        return args.handler(args)
    except ValueError as e:
        print(f"Error: {e}")
        return 2


if __name__ == "__main__":
    sys.exit(main())
