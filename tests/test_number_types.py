"""Tests for natprint.core.number_types."""
import pytest

from natprint.core.number_types import (
    INT8,
    INT32,
    INT64,
    UINT8,
    UINT64,
    UNBOUNDED,
    UNBOUNDED_CAPACITY_BITS,
    lookup_number_type,
)


class TestRanges:
    def test_int32_max(self):
        assert INT32.max_value == 2_147_483_647
        assert INT32.max_digits == 31

    def test_uint64_max(self):
        assert UINT64.max_value == 2**64 - 1
        assert UINT64.max_digits == 64

    def test_int8(self):
        assert INT8.max_value == 127
        assert UINT8.max_value == 255

    def test_unbounded_capacity(self):
        assert not UNBOUNDED.bounded
        assert UNBOUNDED.max_value == 2**UNBOUNDED_CAPACITY_BITS - 1

    def test_contains(self):
        assert INT32.contains(0)
        assert INT32.contains(2_147_483_647)
        assert not INT32.contains(2_147_483_648)
        assert not INT32.contains(-1)


class TestWrappingMultiply:
    """Bounded types wrap like machine integers."""

    def test_no_overflow(self):
        assert INT32.multiply(1000, 1000) == 1_000_000

    def test_unsigned_wraps_modulo(self):
        assert UINT8.multiply(16, 16) == 0
        assert UINT8.multiply(100, 3) == 44

    def test_signed_wraps_negative(self):
        assert INT32.multiply(2**30, 2) == -(2**31)
        assert INT8.multiply(64, 2) == -128

    def test_int64_overflow(self):
        assert INT64.multiply(10**18, 10) != 10**19

    def test_unbounded_never_wraps(self):
        assert UNBOUNDED.multiply(2**200, 2**100) == 2**300


class TestLookup:
    def test_by_name(self):
        assert lookup_number_type("int32") is INT32
        assert lookup_number_type("UINT64") is UINT64

    def test_c_aliases(self):
        assert lookup_number_type("int") is INT32
        assert lookup_number_type("long long") is INT64

    def test_unknown_raises(self):
        with pytest.raises(ValueError, match="Unknown number type"):
            lookup_number_type("float")
