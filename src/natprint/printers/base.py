"""Common surface of the natural-number printers.

A printer turns a non-negative integer into its digits in a configurable
base and alphabet. Strategies differ only in how they extract digits into
the printer's scratch buffer; configuration and delivery (buffer, text
stream, file) live here.

A printer instance keeps mutable scratch state (buffer, power cache,
digit-pair table). Do not share one instance between threads without
locking; separate instances are independent.
"""
from __future__ import annotations

import operator
from typing import BinaryIO, ClassVar, TextIO

from ..core.alphabet import MAX_BASE, AlphabetConfig
from ..core.errors import ValueOutOfRange
from ..core.number_types import INT32, NumberType
from ..core.sinks import to_buffer, to_file, to_stream


class NaturalPrinter:
    """Base class for the four digit-extraction strategies."""

    # Whether this strategy keeps a digit-pair table
    pairs: ClassVar[bool] = False
    name: ClassVar[str] = "natural"

    def __init__(self, base: int = 10, alphabet: str | None = None, *,
                 number_type: NumberType = INT32,
                 max_base: int = MAX_BASE) -> None:
        self.number_type = number_type
        self._config = AlphabetConfig(base, alphabet, max_base=max_base,
                                      pairs=self.pairs)
        # Longest output (base 2) plus a terminator slot
        self._buffer = bytearray(number_type.max_digits + 1)
        self._on_base_change()

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(base={self.base}, "
                f"alphabet={self.alphabet!r}, number_type={self.number_type})")

    # ---- Configuration ----

    @property
    def base(self) -> int:
        return self._config.base

    @property
    def alphabet(self) -> str:
        return self._config.alphabet

    @property
    def max_base(self) -> int:
        return self._config.max_base

    def get_base(self) -> int:
        return self._config.base

    def set_base(self, base: int) -> None:
        self._config.set_base(base)
        self._on_base_change()

    def get_alphabet(self) -> str:
        return self._config.alphabet

    def set_alphabet(self, chars: str) -> None:
        self._config.set_alphabet(chars)

    def setup_default_alphabet(self) -> None:
        """Use 0-9 then a-z for the current base."""
        self._config.setup_default_alphabet()

    def _on_base_change(self) -> None:
        """Hook for strategies holding base-dependent state."""

    # ---- Encoding ----

    def _check_value(self, value) -> int:
        value = operator.index(value)
        if not self.number_type.contains(value):
            raise ValueOutOfRange(
                f"{value} is not a non-negative {self.number_type} value "
                f"(0-{self.number_type.max_value})"
            )
        return value

    def _extract(self, value: int) -> tuple[int, int]:
        """Write the digits of value into the scratch buffer.

        Returns (start, end) of the digit span.
        """
        raise NotImplementedError

    def _span(self, value) -> memoryview:
        start, end = self._extract(self._check_value(value))
        return memoryview(self._buffer)[start:end]

    def encode(self, value) -> str:
        """Return the digits of value as a string."""
        return self._span(value).tobytes().decode("ascii")

    def encode_to_buffer(self, value, out) -> int:
        """Write digits plus a NUL terminator into out; return the digit count."""
        return to_buffer(self._span(value), out)

    def encode_to_stream(self, value, stream: TextIO) -> int:
        """Write digits to a text stream; return the digit count."""
        return to_stream(self._span(value), stream)

    def encode_to_file(self, value, fh: BinaryIO | TextIO) -> int:
        """Write digits to an open file; return the digit count."""
        return to_file(self._span(value), fh)
