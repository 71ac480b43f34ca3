"""Exceptions raised by the printers.

Everything the caller can cause derives from NatPrintError (and ValueError,
so code that already guards against bad arguments keeps working).
EncodingInvariantBroken is not a NatPrintError: it signals a defect in the
printer itself and is not meant to be caught.
"""


class NatPrintError(Exception):
    """Base class for recoverable printer errors."""


class InvalidBase(NatPrintError, ValueError):
    """Base is outside the range supported by the printer."""

    def __init__(self, base, max_base, message=None):
        super().__init__(message or f"Base must be 2-{max_base}, got {base}")
        self.base = base
        self.max_base = max_base


class AlphabetTooShort(NatPrintError, ValueError):
    """Alphabet has fewer characters than the active base needs."""

    def __init__(self, length, base):
        super().__init__(
            f"Alphabet needs at least {base} characters for base {base}, got {length}"
        )
        self.length = length
        self.base = base


class InvalidAlphabet(NatPrintError, ValueError):
    """Alphabet contains characters that cannot serve as digits."""


class BufferTooSmall(NatPrintError, ValueError):
    """Destination buffer cannot hold the digits plus the terminator."""

    def __init__(self, needed, capacity):
        super().__init__(
            f"Buffer too small: need {needed} bytes (digits + terminator), have {capacity}"
        )
        self.needed = needed
        self.capacity = capacity


class ValueOutOfRange(NatPrintError, ValueError):
    """Value is negative or does not fit the printer's number type."""


class EncodingInvariantBroken(AssertionError):
    """Digit extraction ended in an impossible state."""


class InvalidRange(NatPrintError, ValueError):
    """Benchmark range is empty or outside the number type."""
