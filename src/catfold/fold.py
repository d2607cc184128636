"""
Folds: sequential accumulation of a sequence into a single value.

Every fold here takes combine(accumulator, element), whatever the
direction:

    fold([1, 2, 3, 4], lambda acc, x: acc + x, 0)            == 10
    fold_right(["a", "b", "c"], lambda acc, x: acc + x, "")  == "cba"

Exceptions raised by combine propagate unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Iterator, TypeVar

from .catpy import Nothing
from .logging_config import get_logger
from .sequence import LazySequence, Source, cursor_of, to_list

if TYPE_CHECKING:
    from .monoid import Monoid

A = TypeVar("A")
E = TypeVar("E")
M = TypeVar("M")

logger = get_logger(__name__)


def fold_left(sequence: Source, combine: Callable[[A, E], A], initial: A) -> A:
    """
    Fold from the first element forward.

    Args:
        sequence: Finite sequence (iterable, Traversable or Cursor)
        combine: combine(accumulator, element) -> accumulator
        initial: Starting accumulator, returned as-is for an empty sequence

    Returns:
        The final accumulator
    """
    cursor = cursor_of(sequence)
    accumulator = initial
    while True:
        step = cursor.advance()
        if isinstance(step, Nothing):
            return accumulator
        accumulator = combine(accumulator, step.value)


fold = fold_left


def fold_right(sequence: Source, combine: Callable[[A, E], A], initial: A) -> A:
    """
    Fold from the last element backward.

    The sequence is materialized first, so it must be finite.
    """
    elements = to_list(sequence)
    logger.debug("fold_right materialized %d elements", len(elements))
    accumulator = initial
    for element in reversed(elements):
        accumulator = combine(accumulator, element)
    return accumulator


def scan_left(sequence: Source, combine: Callable[[A, E], A], initial: A) -> LazySequence[A]:
    """
    Running accumulators of a left fold: initial, then one per element.

    Lazy, so it can run over infinite sequences when bounded with take().
    """
    def produce() -> Iterator[A]:
        cursor = cursor_of(sequence)
        accumulator = initial
        yield accumulator
        while True:
            step = cursor.advance()
            if isinstance(step, Nothing):
                return
            accumulator = combine(accumulator, step.value)
            yield accumulator
    return LazySequence(produce)


def fold_map(sequence: Source, f: Callable[[E], M], monoid: "Monoid[M]") -> M:
    """Map every element into a monoid and combine the results."""
    return fold_left(sequence, lambda acc, element: monoid.combine(acc, f(element)), monoid.identity)
