"""
Zips: positional pairing of two sequences, truncated to the shorter.

zip_pairs is lazy and stops silently as soon as either source runs out,
so zipping against an infinite sequence is fine:

    to_list(zip_pairs(naturals(1), ["a", "b"])) == [(1, "a"), (2, "b")]
"""

from __future__ import annotations

from typing import Any, Callable, Iterator, List, Optional, Tuple, TypeVar

from .catpy import Applicative, Nothing
from .config_loader import get_settings
from .exceptions import InvalidIndexOriginError
from .sequence import LazySequence, Source, cursor_of, drain, naturals, repeat, take, to_list

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
T = TypeVar("T")
U = TypeVar("U")


def zip_pairs(seq_a: Source, seq_b: Source) -> LazySequence[Tuple[Any, Any]]:
    """
    Lazily pair elements positionally: (a_0, b_0), (a_1, b_1), ...

    seq_a is advanced before seq_b on every step. Each traversal of the
    result starts fresh traversals of both sources, so the result is
    restartable exactly when the sources are.
    """
    def produce() -> Iterator[Tuple[Any, Any]]:
        cursor_a = cursor_of(seq_a)
        cursor_b = cursor_of(seq_b)
        while True:
            a = cursor_a.advance()
            if isinstance(a, Nothing):
                return
            b = cursor_b.advance()
            if isinstance(b, Nothing):
                return
            yield a.value, b.value
    return LazySequence(produce)


def zip_with_index(sequence: Source, origin: Optional[int] = None) -> LazySequence[Tuple[int, Any]]:
    """
    Pair each element with its position: (origin, e_0), (origin + 1, e_1), ...

    Args:
        sequence: Source sequence, possibly infinite
        origin: 0 or 1; None uses the configured index_origin

    Raises:
        InvalidIndexOriginError: If origin is not the int 0 or 1
    """
    if origin is None:
        origin = get_settings().index_origin
    if type(origin) is not int or origin not in (0, 1):
        raise InvalidIndexOriginError(f"origin must be 0 or 1, got {origin!r}")
    return zip_pairs(naturals(origin), sequence)


def zip_with(f: Callable[[A, B], C], seq_a: Source, seq_b: Source) -> List[C]:
    """Eagerly apply f to each positional pair. At least one source must be finite."""
    return [f(a, b) for a, b in zip_pairs(seq_a, seq_b)]


def _lazy_map(f: Callable[[T], U], source: Source) -> LazySequence[U]:
    return LazySequence(lambda: (f(x) for x in drain(cursor_of(source))))


class ZipList(Applicative[T]):
    """
    The zipping applicative over a (possibly infinite) sequence.

    pure repeats a value forever so that it lines up with any other
    ZipList; ap applies the i-th function to the i-th value:

        ZipList([f, g]).ap(ZipList([1, 2])).to_list() == [f(1), g(2)]

    ::: This is-in-layer Core-Layer.
    ::: This is a applicative.
    ::: This is stateless.
    """

    def __init__(self, source: Source):
        self.source = source

    @classmethod
    def pure(cls, x: U) -> "ZipList[U]":  # type: ignore[override]
        return cls(repeat(x))

    def fmap(self, f: Callable[[T], U]) -> "ZipList[U]":  # type: ignore[override]
        return ZipList(_lazy_map(f, self.source))

    def ap(self, xs: "ZipList[Any]") -> "ZipList[Any]":  # type: ignore[override]
        return ZipList(_lazy_map(lambda pair: pair[0](pair[1]), zip_pairs(self.source, xs.source)))

    def take(self, n: int) -> List[T]:
        """The first n elements as a list."""
        return to_list(take(n, self.source))

    def to_list(self) -> List[T]:
        """All elements; the ZipList must be finite."""
        return to_list(self.source)

    def __iter__(self) -> Iterator[T]:
        return drain(cursor_of(self.source))

    def __repr__(self) -> str:
        return f"ZipList({self.source!r})"
