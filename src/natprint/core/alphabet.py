"""Digit alphabets and the base/alphabet configuration shared by all printers.

Default alphabet: 0-9 followed by a-z, so bases up to 36.
Digit value = index into the alphabet. Paired printers also keep a
digit-pair table: for every (i, j) the two characters alphabet[i] alphabet[j],
stored contiguously at offset 2 * (i * base + j).
"""
from __future__ import annotations

import logging

from .errors import AlphabetTooShort, InvalidAlphabet, InvalidBase

logger = logging.getLogger(__name__)

DEFAULT_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
MIN_BASE = 2
MAX_BASE = len(DEFAULT_DIGITS)  # 36

# Cap the paired printers historically shipped with (table sized for 17
# symbols). Not the default; pass it as max_base to reproduce that sizing.
COMPACT_PAIR_MAX_BASE = 17


def validate_base(base: int, max_base: int = MAX_BASE) -> int:
    """Return base if it lies in [MIN_BASE, max_base], else raise InvalidBase."""
    if isinstance(base, bool) or not isinstance(base, int):
        raise InvalidBase(base, max_base)
    if not MIN_BASE <= base <= max_base:
        raise InvalidBase(base, max_base)
    return base


def default_alphabet(base: int) -> str:
    """First `base` characters of the default 0-9a-z alphabet."""
    validate_base(base, MAX_BASE)
    return DEFAULT_DIGITS[:base]


def validate_alphabet(chars: str, base: int) -> str:
    """Check chars can serve as digits for base; return the active part.

    Only the first `base` characters are used. They must be distinct and
    single-byte (ASCII), since digits are written into byte buffers.
    """
    if len(chars) < base:
        raise AlphabetTooShort(len(chars), base)
    active = chars[:base]
    if not active.isascii():
        raise InvalidAlphabet(f"Alphabet must be ASCII, got {active!r}")
    if len(set(active)) != base:
        raise InvalidAlphabet(f"Alphabet digits must be distinct, got {active!r}")
    return active


def build_pair_table(digits: bytes) -> bytes:
    """Build the digit-pair table for an alphabet given as bytes."""
    base = len(digits)
    table = bytearray(2 * base * base)
    pos = 0
    for hi in digits:
        for lo in digits:
            table[pos] = hi
            table[pos + 1] = lo
            pos += 2
    return bytes(table)


class AlphabetConfig:
    """Active base, alphabet and derived lookup tables of one printer.

    Shared by the four printer strategies; `pairs=True` additionally keeps
    the digit-pair table in sync with base and alphabet.
    """

    def __init__(self, base: int = 10, alphabet: str | None = None,
                 max_base: int = MAX_BASE, pairs: bool = False) -> None:
        if not MIN_BASE <= max_base <= MAX_BASE:
            raise InvalidBase(max_base, MAX_BASE,
                              f"max_base must be {MIN_BASE}-{MAX_BASE}, got {max_base}")
        self.max_base = max_base
        self.pairs = pairs
        self.base = validate_base(base, max_base)
        # Full alphabet as supplied; only the first `base` chars are active
        self._chars = ""
        self.alphabet = ""
        self.digits = b""
        self.pair_table: bytes | None = None
        if alphabet is None:
            self.setup_default_alphabet()
        else:
            self.set_alphabet(alphabet)

    @property
    def base_sqr(self) -> int:
        return self.base * self.base

    def set_base(self, base: int) -> None:
        """Switch base.

        The supplied alphabet is kept when it has enough characters for the
        new base (a custom alphabet survives going from base 10 to base 8);
        otherwise the default alphabet for the new base takes over.
        """
        base = validate_base(base, self.max_base)
        if len(self._chars) >= base:
            active = validate_alphabet(self._chars, base)
            self.base = base
            self._store(active)
        else:
            self.base = base
            self.setup_default_alphabet()

    def set_alphabet(self, chars: str) -> None:
        active = validate_alphabet(chars, self.base)
        self._chars = chars
        self._store(active)

    def setup_default_alphabet(self) -> None:
        self._chars = default_alphabet(self.base)
        self._store(self._chars)

    def _store(self, active: str) -> None:
        self.alphabet = active
        self.digits = active.encode("ascii")
        if self.pairs:
            self.pair_table = build_pair_table(self.digits)
            logger.debug("Rebuilt digit-pair table for base %d (%d bytes)",
                         self.base, len(self.pair_table))
