"""
Tests for Arrow-based folds (catfold.arrow_fold).
"""

import pyarrow as pa
import pytest
from hypothesis import given, strategies as st

from catfold.arrow_fold import arrow_mconcat, ensure_array, kernel_for
from catfold.catpy import Just, Nothing
from catfold.monoid import (
    ALL, ANY, FIRST, LAST, MAX, MIN, PRODUCT, STRING, SUM, Monoid, mconcat,
)


@pytest.fixture
def numbers():
    """Integer column with a null."""
    return pa.array([3, 1, None, 4, 1, 5])


# =============================================================================
# Kernels
# =============================================================================

class TestArrowKernels:
    """Standard monoids run as pyarrow.compute kernels."""

    def test_sum(self, numbers):
        assert arrow_mconcat(SUM, numbers) == 14

    def test_product(self, numbers):
        assert arrow_mconcat(PRODUCT, numbers) == 60

    def test_min_max_wrap_in_just(self, numbers):
        assert arrow_mconcat(MIN, numbers) == Just(1)
        assert arrow_mconcat(MAX, numbers) == Just(5)

    def test_all_any(self):
        flags = pa.array([True, None, False])
        assert arrow_mconcat(ALL, flags) is False
        assert arrow_mconcat(ANY, flags) is True
        assert arrow_mconcat(ALL, pa.array([True, True])) is True

    def test_chunked_array(self):
        chunked = pa.chunked_array([[1, 2], [3, None], [4]])
        assert arrow_mconcat(SUM, chunked) == 10

    def test_plain_iterable_is_converted(self):
        assert arrow_mconcat(SUM, [1, 2, 3]) == 6
        assert isinstance(ensure_array([1, 2]), pa.Array)

    def test_ensure_array_keeps_arrow_input(self, numbers):
        assert ensure_array(numbers) is numbers

    def test_kernel_lookup(self):
        assert kernel_for(SUM) is not None
        assert kernel_for(Monoid("sum", SUM.combine, 0)) is not None
        assert kernel_for(STRING) is None

    def test_kernel_lookup_checks_column_type(self, numbers):
        assert kernel_for(SUM, numbers) is not None
        assert kernel_for(ALL, numbers) is None
        assert kernel_for(ALL, pa.array([True])) is not None
        assert kernel_for(MAX, pa.array([1.5, 2.5])) is None


# =============================================================================
# Identity on empty input
# =============================================================================

class TestArrowEmpty:
    """Empty and all-null columns give the identity."""

    def test_empty_typed_array(self):
        assert arrow_mconcat(SUM, pa.array([], type=pa.int64())) == 0
        assert arrow_mconcat(PRODUCT, pa.array([], type=pa.int64())) == 1

    def test_all_null(self):
        assert arrow_mconcat(SUM, pa.array([None, None], type=pa.int64())) == 0
        assert arrow_mconcat(MAX, pa.array([None], type=pa.int64())) == Nothing()

    def test_empty_iterable(self):
        assert arrow_mconcat(ALL, []) is True
        assert arrow_mconcat(ANY, []) is False


# =============================================================================
# Python fallback
# =============================================================================

class TestArrowFallback:
    """Monoids without a kernel fold in Python over non-null values."""

    def test_string_monoid(self):
        assert arrow_mconcat(STRING, pa.array(["fo", None, "ld"])) == "fold"

    def test_first_last(self):
        words = pa.array([None, "a", "b", "c"])
        assert arrow_mconcat(FIRST, words) == Just("a")
        assert arrow_mconcat(LAST, words) == Just("c")

    def test_custom_monoid(self):
        bitwise_or = Monoid("bitwise_or", lambda a, b: a | b, 0)
        assert arrow_mconcat(bitwise_or, pa.array([1, 2, 8])) == 11


# =============================================================================
# Agreement with mconcat
# =============================================================================

small_ints = st.lists(st.one_of(st.none(), st.integers(min_value=-10, max_value=10)), max_size=12)
int64s = st.lists(
    st.one_of(st.none(), st.integers(min_value=-(2 ** 63), max_value=2 ** 63 - 1)), max_size=8,
)


class TestArrowMatchesMconcat:
    """arrow_mconcat agrees with mconcat over the non-null values."""

    @given(small_ints)
    def test_sum(self, values):
        present = [v for v in values if v is not None]
        assert arrow_mconcat(SUM, pa.array(values, type=pa.int64())) == mconcat(SUM, present)

    @given(small_ints)
    def test_product(self, values):
        present = [v for v in values if v is not None]
        assert arrow_mconcat(PRODUCT, pa.array(values, type=pa.int64())) == mconcat(PRODUCT, present)

    @given(small_ints)
    def test_max(self, values):
        present = [Just(v) for v in values if v is not None]
        assert arrow_mconcat(MAX, pa.array(values, type=pa.int64())) == mconcat(MAX, present)

    @given(st.lists(st.one_of(st.none(), st.booleans()), max_size=12))
    def test_all_any(self, values):
        present = [v for v in values if v is not None]
        flags = pa.array(values, type=pa.bool_())
        assert arrow_mconcat(ALL, flags) == mconcat(ALL, present)
        assert arrow_mconcat(ANY, flags) == mconcat(ANY, present)

    @given(int64s)
    def test_sum_full_int64_range(self, values):
        present = [v for v in values if v is not None]
        assert arrow_mconcat(SUM, pa.array(values, type=pa.int64())) == mconcat(SUM, present)

    @given(int64s)
    def test_product_full_int64_range(self, values):
        present = [v for v in values if v is not None]
        assert arrow_mconcat(PRODUCT, pa.array(values, type=pa.int64())) == mconcat(PRODUCT, present)


# =============================================================================
# Results outside int64
# =============================================================================

class TestArrowOverflow:
    """Integer folds never wrap around."""

    def test_product_beyond_int64(self):
        assert arrow_mconcat(PRODUCT, [2 ** 40, 2 ** 40]) == 2 ** 80

    def test_sum_beyond_int64(self):
        big = 2 ** 62
        assert arrow_mconcat(SUM, pa.array([big, big, big], type=pa.int64())) == 3 * big

    def test_negative_product_beyond_int64(self):
        assert arrow_mconcat(PRODUCT, [-(2 ** 33), 2 ** 33, 3]) == -3 * 2 ** 66

    def test_sum_at_int64_limit_uses_kernel(self):
        limit = 2 ** 63 - 1
        column = pa.array([limit], type=pa.int64())
        assert kernel_for(SUM, column) is not None
        assert arrow_mconcat(SUM, column) == limit

    def test_unsigned_column(self):
        column = pa.array([2 ** 63, 2 ** 63], type=pa.uint64())
        assert arrow_mconcat(SUM, column) == 2 ** 64


# =============================================================================
# Columns without a matching kernel
# =============================================================================

class TestArrowTypeFallback:
    """Monoids with a kernel still fall back when the column type has none."""

    def test_all_over_integers(self):
        assert arrow_mconcat(ALL, [1, 2]) == mconcat(ALL, [1, 2]) == 2

    def test_any_over_integers(self):
        assert arrow_mconcat(ANY, pa.array([0, None, 3])) == mconcat(ANY, [0, 3]) == 3

    def test_sum_over_floats(self):
        values = [0.1, 0.2, 0.3]
        assert arrow_mconcat(SUM, values) == mconcat(SUM, values)

    def test_max_over_floats(self):
        assert arrow_mconcat(MAX, [1.5, None, 0.5]) == Just(1.5)
