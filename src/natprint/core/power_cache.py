"""Lazily grown table of base powers for most-significant-first printing.

Holds base**0, base**1, ... as far as the number type can represent them.
Entries are appended only when a value needs a power not yet cached, so
printing small numbers never pays for the whole table. Once the next power
would overflow the type, the cache is SATURATED and stops trying until the
base changes.

Encoding a value mutates this cache even though the printer's visible state
does not change: logically const, physically caching.
"""
from __future__ import annotations

import logging
from enum import Enum

from .errors import EncodingInvariantBroken
from .number_types import NumberType

logger = logging.getLogger(__name__)

# Powers computed eagerly on reset (1, b, b^2, b^3)
INITIAL_LENGTH = 4


class PowerCacheState(Enum):
    GROWING = "growing"
    SATURATED = "saturated"


class PowerCache:
    """Powers of one base that fit in one number type."""

    def __init__(self, number_type: NumberType, base: int,
                 initial_length: int = INITIAL_LENGTH,
                 capacity: int | None = None) -> None:
        self.number_type = number_type
        self.initial_length = initial_length
        # One entry per digit of the longest (base-2) representation
        self.capacity = capacity if capacity is not None else number_type.max_digits
        self.base = base
        self._powers: list[int] = []
        self.state = PowerCacheState.GROWING
        self.reset(base)

    def reset(self, base: int) -> None:
        """Reseed for `base`: entry 0 = 1, then grow the first few entries."""
        self.base = base
        self._powers = [1]
        self.state = PowerCacheState.GROWING
        while len(self._powers) < self.initial_length:
            if not self.grow():
                break

    @property
    def saturated(self) -> bool:
        return self.state is PowerCacheState.SATURATED

    @property
    def powers(self) -> tuple[int, ...]:
        return tuple(self._powers)

    @property
    def top(self) -> int:
        return self._powers[-1]

    def __len__(self) -> int:
        return len(self._powers)

    def __getitem__(self, index: int) -> int:
        return self._powers[index]

    def grow(self) -> bool:
        """Append the next power. Returns False (and saturates) on overflow."""
        if self.saturated:
            return False
        prev = self._powers[-1]
        if len(self._powers) >= self.capacity:
            self._saturate("capacity reached")
            return False
        new_power = self.number_type.multiply(prev, self.base)
        # A wrapped product never divides back to the previous power
        if new_power // self.base != prev or not self.number_type.contains(new_power):
            self._saturate("next power overflows")
            return False
        self._powers.append(new_power)
        return True

    def _saturate(self, reason: str) -> None:
        self.state = PowerCacheState.SATURATED
        logger.debug("Power cache saturated for %s base %d at %d entries (%s)",
                     self.number_type, self.base, len(self._powers), reason)

    def ensure_covers(self, value: int) -> int:
        """Index of the leading power: the largest cached power <= value.

        Extends the table while its top entry is still <= value. For a
        saturated cache the top entry is the largest representable power,
        so it leads any value at or above it.
        """
        if value < 1:
            raise EncodingInvariantBroken(f"No leading power for {value}")
        powers = self._powers
        if self.saturated:
            if powers[-1] <= value:
                return len(powers) - 1
        else:
            while powers[-1] <= value:
                if not self.grow():
                    return len(powers) - 1
        # Top entry now exceeds value; scan up from base**0
        index = 0
        while powers[index] <= value:
            index += 1
        return index - 1
