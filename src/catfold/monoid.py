"""
Monoids: an associative combine with an identity element.

A monoid is exactly what a fold needs to run without a caller-chosen
initial value, so mconcat(SUM, xs) == fold(xs, operator.add, 0).

FIRST, LAST, MIN and MAX work on Maybe values with Nothing() as the
identity, which makes them total on empty input:

    mconcat(MAX, [Just(3), Just(7), Nothing()]) == Just(7)
    mconcat(MAX, []) == Nothing()
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from .catpy import Just, Maybe, Nothing
from .fold import fold_left
from .sequence import Source

T = TypeVar("T")


@dataclass(frozen=True)
class Monoid(Generic[T]):
    """
    Associative binary operation with an identity element.

    Laws (for all a, b, c):
      1) Left identity:  combine(identity, a) == a
      2) Right identity: combine(a, identity) == a
      3) Associativity:  combine(combine(a, b), c) == combine(a, combine(b, c))

    ::: This is-in-layer Core-Layer.
    ::: This is a value-object.
    ::: This is stateless.
    """
    name: str
    combine: Callable[[T, T], T]
    identity: T

    def __repr__(self) -> str:
        return f"Monoid({self.name!r})"


def mconcat(monoid: Monoid[T], sequence: Source) -> T:
    """Combine every element of a finite sequence, starting from the identity."""
    return fold_left(sequence, monoid.combine, monoid.identity)


def option_monoid(name: str, semigroup_op: Callable[[T, T], T]) -> Monoid[Maybe[T]]:
    """
    Lift an associative operation without an identity into a monoid over Maybe.

    Nothing() is the identity; two Just values combine with semigroup_op.
    """
    def combine(a: Maybe[T], b: Maybe[T]) -> Maybe[T]:
        if isinstance(a, Nothing):
            return b
        if isinstance(b, Nothing):
            return a
        return Just(semigroup_op(a.value, b.value))  # type: ignore[union-attr]
    return Monoid(name, combine, Nothing())


SUM: Monoid[Any] = Monoid("sum", operator.add, 0)
PRODUCT: Monoid[Any] = Monoid("product", operator.mul, 1)
ALL: Monoid[bool] = Monoid("all", lambda a, b: a and b, True)
ANY: Monoid[bool] = Monoid("any", lambda a, b: a or b, False)
STRING: Monoid[str] = Monoid("string", operator.add, "")
TUPLE: Monoid[tuple] = Monoid("tuple", operator.add, ())

FIRST: Monoid[Maybe[Any]] = option_monoid("first", lambda a, b: a)
LAST: Monoid[Maybe[Any]] = option_monoid("last", lambda a, b: b)
MIN: Monoid[Maybe[Any]] = option_monoid("min", min)
MAX: Monoid[Maybe[Any]] = option_monoid("max", max)
