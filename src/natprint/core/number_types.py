"""Fixed-width integer types the printers can be instantiated for.

Python integers never overflow, so each printer is told which machine
integer it is printing. The type fixes the value range, the scratch buffer
size (longest base-2 representation) and how a product behaves when it no
longer fits: bounded types wrap like two's-complement hardware does, which
is what the power cache relies on to detect its ceiling.
"""
from __future__ import annotations

from dataclasses import dataclass

# Bit budget for the unbounded type. Large enough for any 128-bit value in
# any base with room to spare.
UNBOUNDED_CAPACITY_BITS = 256


@dataclass(frozen=True, slots=True)
class NumberType:
    """A named integer type: width in bits and signedness.

    bits=None means unbounded (plain Python int): multiplication never
    wraps, and the representable range is capped by UNBOUNDED_CAPACITY_BITS.
    """
    name: str
    bits: int | None
    signed: bool = False

    @property
    def bounded(self) -> bool:
        return self.bits is not None

    @property
    def value_bits(self) -> int:
        """Bits available for non-negative values (sign bit excluded)."""
        if self.bits is None:
            return UNBOUNDED_CAPACITY_BITS
        return self.bits - 1 if self.signed else self.bits

    @property
    def max_value(self) -> int:
        return (1 << self.value_bits) - 1

    @property
    def max_digits(self) -> int:
        """Length of the longest representation, reached in base 2."""
        return self.value_bits

    def wrap(self, value: int) -> int:
        """Reduce value to this type's width, two's-complement style."""
        if self.bits is None:
            return value
        mask = (1 << self.bits) - 1
        value &= mask
        if self.signed and value >> (self.bits - 1):
            value -= 1 << self.bits
        return value

    def multiply(self, a: int, b: int) -> int:
        """Multiply as the native type would, overflow included."""
        return self.wrap(a * b)

    def contains(self, value: int) -> bool:
        """True if value is a non-negative number this type can hold."""
        return 0 <= value <= self.max_value

    def __str__(self) -> str:
        return self.name


INT8 = NumberType("int8", 8, signed=True)
UINT8 = NumberType("uint8", 8)
INT16 = NumberType("int16", 16, signed=True)
UINT16 = NumberType("uint16", 16)
INT32 = NumberType("int32", 32, signed=True)
UINT32 = NumberType("uint32", 32)
INT64 = NumberType("int64", 64, signed=True)
UINT64 = NumberType("uint64", 64)
INT128 = NumberType("int128", 128, signed=True)
UINT128 = NumberType("uint128", 128)
UNBOUNDED = NumberType("unbounded", None)

NUMBER_TYPES = {
    t.name: t
    for t in (INT8, UINT8, INT16, UINT16, INT32, UINT32,
              INT64, UINT64, INT128, UINT128, UNBOUNDED)
}

# C type spellings
_ALIASES = {
    "int": INT32,
    "long long": INT64,
    "long_long": INT64,
    "unsigned": UINT32,
    "bigint": UNBOUNDED,
}


def lookup_number_type(name: str) -> NumberType:
    """Resolve a type name such as 'int32', 'uint64' or 'long long'."""
    key = name.strip().lower()
    if key in NUMBER_TYPES:
        return NUMBER_TYPES[key]
    if key in _ALIASES:
        return _ALIASES[key]
    known = ", ".join(sorted(NUMBER_TYPES))
    raise ValueError(f"Unknown number type {name!r} (known: {known})")
