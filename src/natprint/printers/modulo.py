"""Right-to-left printers: digits from the least significant end.

Each step takes value % base as the next digit and truncates value by base.
Digits are written into the scratch buffer from its end backwards, so the
finished span already reads left to right and needs no reversal.
ModuloPairPrinter works modulo base**2 and copies two characters per step
from the digit-pair table.

The last byte of the scratch buffer is reserved for the terminator, so the
span always ends at len(buffer) - 1.
"""
from __future__ import annotations

from .base import NaturalPrinter


class ModuloPrinter(NaturalPrinter):
    """Least-significant-first, one digit per step."""

    name = "modulo"

    def _extract(self, value: int) -> tuple[int, int]:
        buf = self._buffer
        digits = self._config.digits
        end = len(buf) - 1
        pos = end
        if value == 0:
            pos -= 1
            buf[pos] = digits[0]
            return pos, end
        base = self.base
        while value != 0:
            pos -= 1
            buf[pos] = digits[value % base]
            value //= base
        return pos, end


class ModuloPairPrinter(NaturalPrinter):
    """Least-significant-first, two digits per step."""

    name = "modulo2"
    pairs = True

    def _extract(self, value: int) -> tuple[int, int]:
        buf = self._buffer
        digits = self._config.digits
        end = len(buf) - 1
        pos = end
        if value == 0:
            pos -= 1
            buf[pos] = digits[0]
            return pos, end
        base = self.base
        base_sqr = base * base
        table = self._config.pair_table
        while value >= base:
            offset = 2 * (value % base_sqr)
            buf[pos - 1] = table[offset + 1]
            buf[pos - 2] = table[offset]
            pos -= 2
            value //= base_sqr
        if value > 0:  # odd digit count, one left
            pos -= 1
            buf[pos] = digits[value]
        return pos, end
