"""
Arrow-based folds.

Vectorized mconcat over PyArrow arrays. The standard SUM, PRODUCT, ALL,
ANY, MIN and MAX monoids are reduced with pyarrow.compute kernels when
the column type has an exact kernel; any other monoid or column falls
back to mconcat over the Python values. Nulls are skipped either way, and
empty or all-null input yields the monoid's identity, so the result
always equals mconcat over the non-null values.

Integer SUM and PRODUCT only take the kernel path when the column's
magnitude bounds rule out int64 overflow; larger values are folded as
Python ints, which never wrap.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Optional, Tuple, Union

import pyarrow as pa
import pyarrow.compute as pc

from .catpy import Just, Nothing
from .logging_config import get_logger
from .monoid import ALL, ANY, MAX, MIN, PRODUCT, SUM, Monoid, mconcat

logger = get_logger(__name__)

ArrowValues = Union[pa.Array, pa.ChunkedArray]
Kernel = Callable[..., pa.Scalar]
Guard = Callable[[ArrowValues], bool]

INT64_MAX = 2 ** 63 - 1


def _magnitude(array: ArrowValues) -> int:
    """Largest absolute value among the non-null integers."""
    bounds = pc.min_max(array).as_py()
    return max(abs(bounds["min"]), abs(bounds["max"]))


def _sum_fits(array: ArrowValues) -> bool:
    if not pa.types.is_integer(array.type):
        return False
    count = len(array) - array.null_count
    return _magnitude(array) * count <= INT64_MAX


def _product_fits(array: ArrowValues) -> bool:
    if not pa.types.is_integer(array.type):
        return False
    magnitude = _magnitude(array)
    if magnitude <= 1:
        return True
    count = len(array) - array.null_count
    if magnitude.bit_length() * count > 64:
        return False
    return magnitude ** count <= INT64_MAX


def _is_boolean(array: ArrowValues) -> bool:
    return pa.types.is_boolean(array.type)


def _is_orderable(array: ArrowValues) -> bool:
    # UTF-8 byte order is code point order, so string comparisons agree with Python
    return (
        pa.types.is_integer(array.type)
        or pa.types.is_string(array.type)
        or pa.types.is_large_string(array.type)
    )


ARROW_KERNELS: Tuple[Tuple[Monoid[Any], Kernel, Guard], ...] = (
    (SUM, pc.sum, _sum_fits),
    (PRODUCT, pc.product, _product_fits),
    (ALL, pc.all, _is_boolean),
    (ANY, pc.any, _is_boolean),
    (MIN, pc.min, _is_orderable),
    (MAX, pc.max, _is_orderable),
)


def kernel_for(monoid: Monoid[Any], array: Optional[ArrowValues] = None) -> Optional[Kernel]:
    """
    The pyarrow.compute kernel implementing a monoid, if there is one.

    With an array, the kernel is only returned when it gives exactly the
    mconcat result for that column.
    """
    for candidate, kernel, guard in ARROW_KERNELS:
        if candidate == monoid:
            if array is not None and not guard(array):
                return None
            return kernel
    return None


def ensure_array(values: Union[ArrowValues, Iterable[Any]]) -> ArrowValues:
    """Convert to a PyArrow array if needed."""
    if isinstance(values, (pa.Array, pa.ChunkedArray)):
        return values
    return pa.array(list(values))


def arrow_mconcat(monoid: Monoid[Any], values: Union[ArrowValues, Iterable[Any]]) -> Any:
    """
    Combine a column of values with a monoid.

    Monoids over Maybe (identity Nothing()) take plain column values and
    return Just(result), matching mconcat over Just-wrapped values.

    Args:
        monoid: Monoid to combine with
        values: PyArrow Array/ChunkedArray, or any iterable of scalars

    Returns:
        Same value as mconcat(monoid, non-null values)
    """
    array = ensure_array(values)
    if len(array) - array.null_count == 0:
        return monoid.identity

    wraps = isinstance(monoid.identity, Nothing)
    kernel = kernel_for(monoid, array)
    if kernel is None:
        logger.debug(
            "No exact Arrow kernel for %r over %s, folding %d values in Python",
            monoid, array.type, len(array),
        )
        python_values = [v for v in array.to_pylist() if v is not None]
        if wraps:
            python_values = [Just(v) for v in python_values]
        return mconcat(monoid, python_values)

    result = kernel(array).as_py()
    return Just(result) if wraps else result
