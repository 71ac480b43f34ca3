"""
Command-line interface for natprint.

Usage:
    natprint encode <values...>   Print values in a given base
    natprint check                Run smoke checks on every strategy
    natprint bench                Time every strategy over a range of values
"""
from __future__ import annotations

import argparse
import json
import logging
import sys

from .bench.harness import check_printer, compare_printers
from .config import load_settings
from .core.alphabet import MAX_BASE
from .core.errors import NatPrintError
from .core.number_types import NUMBER_TYPES, lookup_number_type
from .printers.registry import Strategy, make_printer

STRATEGY_CHOICES = [s.value for s in Strategy]


def _int(text: str) -> int:
    """Parse an integer argument; allows 0x/0o/0b prefixes and underscores."""
    return int(text, 0)


def cmd_encode(args: argparse.Namespace) -> int:
    """Encode values and print them space-separated."""
    printer = make_printer(
        args.strategy, args.base, args.alphabet,
        number_type=args.type, max_base=args.max_base,
    )
    # Encode everything first so a bad value leaves stdout empty
    texts = [printer.encode(value) for value in args.values]
    print(" ".join(texts))
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    """Run smoke checks for each strategy and number type."""
    failed = 0
    for number_type in args.types:
        for strategy in Strategy:
            printer = make_printer(strategy, number_type=number_type)
            failures = check_printer(printer)
            status = "ok" if not failures else "FAILED"
            print(f"  {strategy.value:<8} {number_type.name:<10} {status}")
            for msg in failures:
                print(f"    {msg}")
            failed += bool(failures)
    if failed:
        print(f"{failed} printer(s) failed", file=sys.stderr)
        return 1
    return 0


def cmd_bench(args: argparse.Namespace) -> int:
    """Time each strategy over the same range of values."""
    strategies = args.strategies or list(Strategy)
    results = compare_printers(
        args.type, args.start, args.finish, base=args.base,
        strategies=strategies, full=args.full,
    )
    if args.json:
        print(json.dumps([r.to_dict() for r in results], indent=2))
        return 0

    first = results[0]
    print(f"Running the printers on numbers in [{first.start}, {first.finish}], "
          f"{first.number_type}, with base={first.base}:")
    for r in results:
        print(f"  {r.strategy:<8} {r.seconds * 1000:>10.0f} ms  "
              f"{r.ns_per_value:>8.1f} ns/value")
    print(f"Last converted number: {first.last}")
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    settings = load_settings()

    parser = argparse.ArgumentParser(
        prog="natprint",
        description="Print natural numbers in any base, four ways",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    def add_type_arg(p):
        p.add_argument(
            "--type",
            type=lookup_number_type,
            default=settings.number_type,
            help=f"Number type ({', '.join(NUMBER_TYPES)}; default: {settings.number_type})",
        )

    # Encode command
    encode_parser = subparsers.add_parser("encode", help="Encode values")
    encode_parser.add_argument("values", nargs="+", type=_int, help="Values to encode")
    encode_parser.add_argument("--base", type=int, default=settings.base,
                               help=f"Base (default: {settings.base})")
    encode_parser.add_argument("--strategy", choices=STRATEGY_CHOICES,
                               default=settings.strategy.value,
                               help=f"Strategy (default: {settings.strategy.value})")
    encode_parser.add_argument("--alphabet", help="Digit characters (default: 0-9a-z)")
    encode_parser.add_argument("--max-base", type=int, default=MAX_BASE,
                               help=f"Largest base the printer accepts (default: {MAX_BASE})")
    add_type_arg(encode_parser)
    encode_parser.set_defaults(func=cmd_encode)

    # Check command
    check_parser = subparsers.add_parser("check", help="Run printer smoke checks")
    check_parser.add_argument(
        "--type", dest="types", action="append", type=lookup_number_type,
        help="Number type to check (repeatable; default: int32 and int64)",
    )
    check_parser.set_defaults(func=cmd_check)

    # Bench command
    bench_parser = subparsers.add_parser("bench", help="Compare printer throughput")
    add_type_arg(bench_parser)
    bench_parser.add_argument("--start", type=_int, help="First value")
    bench_parser.add_argument("--finish", type=_int, help="Last value (inclusive)")
    bench_parser.add_argument("--base", type=int, default=settings.base,
                              help=f"Base (default: {settings.base})")
    bench_parser.add_argument("--strategy", dest="strategies", action="append",
                              choices=STRATEGY_CHOICES,
                              help="Strategy to run (repeatable; default: all)")
    bench_parser.add_argument("--full", action="store_true",
                              help="Use the full default range instead of its first million values")
    bench_parser.add_argument("--json", action="store_true", help="Output JSON")
    bench_parser.set_defaults(func=cmd_bench)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    try:
        parser = create_parser()
    except (NatPrintError, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 2

    if args.command == "check" and not args.types:
        args.types = [lookup_number_type("int32"), lookup_number_type("int64")]

    try:
        return args.func(args)
    except NatPrintError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
