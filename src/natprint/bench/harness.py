"""Throughput comparison and smoke checks for the printers.

Usage:
    python -m natprint bench --type int32
    python -m natprint check

run_printer() prints every number of a contiguous range into one buffer and
times it. The default ranges are the ones the printers were first compared
on: 8-digit numbers for 32-bit types and 17-digit numbers for 64-bit types.
"""
from __future__ import annotations

import io
import logging
from dataclasses import asdict, dataclass

from ..core.errors import InvalidRange
from ..core.number_types import INT32, NumberType
from ..printers.base import NaturalPrinter
from ..printers.registry import Strategy, make_printer
from .timer import ElapsedTimer

logger = logging.getLogger(__name__)

RANGE_32 = (10_000_000, 49_000_000)
RANGE_64 = (52_109_000_000_000_000, 52_109_000_049_000_000)

# Values per strategy unless the full range is requested
DEFAULT_COUNT = 1_000_000


def default_range(number_type: NumberType, full: bool = False) -> tuple[int, int]:
    """Benchmark range suited to a number type.

    Starts where the full range starts; only the first DEFAULT_COUNT values
    are used unless full=True.
    """
    if number_type.value_bits >= 63:
        start, finish = RANGE_64
    elif number_type.value_bits >= 26:
        start, finish = RANGE_32
    else:
        # Small types: the whole non-negative range
        start, finish = 0, number_type.max_value
    if not full:
        finish = min(finish, start + DEFAULT_COUNT - 1)
    return start, finish


@dataclass
class BenchResult:
    strategy: str
    number_type: str
    base: int
    start: int
    finish: int
    seconds: float
    last: str

    @property
    def count(self) -> int:
        return self.finish - self.start + 1

    @property
    def ns_per_value(self) -> float:
        return self.seconds * 1e9 / self.count if self.count else 0.0

    def to_dict(self) -> dict:
        d = asdict(self)
        d["count"] = self.count
        d["ns_per_value"] = round(self.ns_per_value, 1)
        return d


def run_printer(printer: NaturalPrinter, start: int, finish: int,
                buffer: bytearray | None = None) -> BenchResult:
    """Print every number in [start, finish] into one buffer, timed."""
    if finish < start:
        raise InvalidRange(f"Empty range [{start}, {finish}]")
    if not (printer.number_type.contains(start) and printer.number_type.contains(finish)):
        raise InvalidRange(
            f"Range [{start}, {finish}] does not fit {printer.number_type} "
            f"(0-{printer.number_type.max_value})")
    if buffer is None:
        buffer = bytearray(printer.number_type.max_digits + 1)
    encode = printer.encode_to_buffer
    length = 0
    with ElapsedTimer() as timer:
        for num in range(start, finish + 1):
            length = encode(num, buffer)
    result = BenchResult(
        strategy=printer.name,
        number_type=printer.number_type.name,
        base=printer.base,
        start=start,
        finish=finish,
        seconds=timer.elapsed,
        last=buffer[:length].decode("ascii"),
    )
    logger.info("%s/%s base %d: %d values in %.3fs",
                result.strategy, result.number_type, result.base,
                result.count, result.seconds)
    return result


def compare_printers(number_type: NumberType = INT32, start: int | None = None,
                     finish: int | None = None, base: int = 10,
                     strategies=None, full: bool = False) -> list[BenchResult]:
    """Run run_printer() for each strategy on the same range."""
    lo, hi = default_range(number_type, full=full)
    if start is None:
        start = lo
    elif finish is None:
        # Window of the default size from the given start
        hi = min(start + DEFAULT_COUNT - 1, number_type.max_value)
    finish = hi if finish is None else finish
    results = []
    for strategy in strategies or list(Strategy):
        printer = make_printer(strategy, base, number_type=number_type)
        results.append(run_printer(printer, start, finish))
    return results


# (base, value, expected) checks, in the order they are run
_BUFFER_CHECKS = [
    (10, 43, "43"),
    (10, 5_607, "5607"),
    (10, 4, "4"),
    (10, 2_147_483_647, "2147483647"),
    (8, 255, "377"),
    (8, 10, "12"),
    (16, 512, "200"),
    (16, 77, "4d"),
]


def check_printer(printer: NaturalPrinter) -> list[str]:
    """Run the standard smoke checks against a printer.

    Changes the printer's base along the way and leaves it in base 10.
    Values the printer's number type cannot hold are skipped.
    Returns a list of failure messages (empty if everything passed).
    """
    failures = []
    buf = bytearray(printer.number_type.max_digits + 1)
    for base, value, expected in _BUFFER_CHECKS:
        if printer.base != base:
            printer.set_base(base)
            if base == 16:
                printer.setup_default_alphabet()
        if not printer.number_type.contains(value):
            continue
        length = printer.encode_to_buffer(value, buf)
        got = buf[:length].decode("ascii")
        if got != expected or buf[length] != 0:
            failures.append(f"{printer.name}: {value} in base {base}: "
                            f"expected {expected!r}, got {got!r}")

    printer.set_base(10)
    stream = io.StringIO()
    printer.encode_to_stream(123, stream)
    stream.write(" ")
    printer.encode_to_stream(0, stream)
    stream.write(" ")
    if printer.number_type.contains(10_000):
        printer.encode_to_stream(10_000, stream)
        expected = "123 0 10000"
    else:
        expected = "123 0 "
    if stream.getvalue() != expected:
        failures.append(f"{printer.name}: stream output expected {expected!r}, "
                        f"got {stream.getvalue()!r}")

    for msg in failures:
        logger.warning(msg)
    return failures
