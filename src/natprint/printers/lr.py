"""Left-to-right printers: digits from the most significant end.

The value is divided by the leading power of the base (1'000'000, then
100'000, ...) and the quotient is the next digit. What remains for the next
step is obtained by subtraction, never by the remainder operator. Powers
come from a PowerCache that grows only as far as the printed values need.

LRPairPrinter divides by every second power and emits two digits per step
from the digit-pair table.
"""
from __future__ import annotations

from ..core.errors import EncodingInvariantBroken
from ..core.power_cache import PowerCache
from .base import NaturalPrinter


class LRPrinter(NaturalPrinter):
    """Most-significant-first, one digit per division."""

    name = "lr"

    def _on_base_change(self) -> None:
        cache = getattr(self, "_powers", None)
        if cache is None:
            self._powers = PowerCache(self.number_type, self.base)
        else:
            cache.reset(self.base)

    @property
    def power_cache(self) -> PowerCache:
        return self._powers

    def _extract(self, value: int) -> tuple[int, int]:
        buf = self._buffer
        digits = self._config.digits
        if value == 0:
            buf[0] = digits[0]
            return 0, 1
        base = self.base
        powers = self._powers
        pos = 0
        for index in range(powers.ensure_covers(value), -1, -1):
            power = powers[index]
            digit = value // power
            if digit >= base:
                raise EncodingInvariantBroken(
                    f"Digit {digit} out of range for base {base} at power {power}")
            buf[pos] = digits[digit]
            pos += 1
            value -= digit * power
        if value != 0:
            raise EncodingInvariantBroken(f"Value not exhausted, {value} left")
        return 0, pos


class LRPairPrinter(LRPrinter):
    """Most-significant-first, two digits per division."""

    name = "lr2"
    pairs = True

    def _extract(self, value: int) -> tuple[int, int]:
        buf = self._buffer
        digits = self._config.digits
        if value == 0:
            buf[0] = digits[0]
            return 0, 1
        base = self.base
        base_sqr = base * base
        table = self._config.pair_table
        powers = self._powers
        pos = 0
        # Power for the two leading digits; -1 when value has one digit
        index = powers.ensure_covers(value) - 1
        while index >= 1:
            power = powers[index]
            digits_2 = value // power
            if digits_2 >= base_sqr:
                raise EncodingInvariantBroken(
                    f"Digit pair {digits_2} out of range for base {base}")
            offset = digits_2 * 2
            buf[pos] = table[offset]
            buf[pos + 1] = table[offset + 1]
            pos += 2
            value -= digits_2 * power
            index -= 2
        # Even digit count ends on base**0 with a pair left, odd one on a digit
        if index == 0:
            if value >= base_sqr:
                raise EncodingInvariantBroken(f"Trailing pair {value} out of range")
            offset = value * 2
            buf[pos] = table[offset]
            buf[pos + 1] = table[offset + 1]
            pos += 2
        else:
            if value >= base:
                raise EncodingInvariantBroken(f"Trailing digit {value} out of range")
            buf[pos] = digits[value]
            pos += 1
        return 0, pos
