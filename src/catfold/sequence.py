"""
Sequences and cursors.

A Traversable hands out fresh Cursors; a Cursor's advance() returns
Just(element) when it produced one and Nothing() once the sequence is
exhausted. Any Python iterable can stand in for a Traversable through
cursor_of(), so folds and zips accept lists, generators and lazy
sequences alike.

Infinite sequences (naturals, iterate, repeat) are produced on demand;
take(n, ...) bounds them.
"""

from __future__ import annotations

import itertools
from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, Iterable, Iterator, List, TypeVar, Union

from .catpy import Just, Maybe, Nothing

T = TypeVar("T")


class Cursor(ABC, Generic[T]):
    """
    A single traversal position over a sequence.

    ::: This is-in-layer Core-Layer.
    ::: This is a cursor.
    ::: This is stateful.
    """

    @abstractmethod
    def advance(self) -> Maybe[T]:
        """Produce the next element as Just(element), or Nothing() when exhausted."""
        raise NotImplementedError


class IteratorCursor(Cursor[T]):
    """Cursor over a Python iterator. Stays exhausted once exhausted."""

    def __init__(self, iterator: Iterator[T]):
        self._iterator = iterator
        self._exhausted = False

    def advance(self) -> Maybe[T]:
        if self._exhausted:
            return Nothing()
        try:
            return Just(next(self._iterator))
        except StopIteration:
            self._exhausted = True
            return Nothing()


class Traversable(ABC, Generic[T]):
    """
    Anything that can hand out a fresh cursor.

    ::: This is-in-layer Core-Layer.
    ::: This is a sequence.
    ::: This is stateless.
    """

    @abstractmethod
    def cursor(self) -> Cursor[T]:
        """Start a new traversal."""
        raise NotImplementedError

    def __iter__(self) -> Iterator[T]:
        return drain(self.cursor())


class LazySequence(Traversable[T]):
    """
    Restartable lazy sequence.

    factory is called once per cursor() and must return a fresh iterable;
    nothing is produced until the cursor is advanced.
    """

    def __init__(self, factory: Callable[[], Iterable[T]]):
        self._factory = factory

    def cursor(self) -> Cursor[T]:
        return IteratorCursor(iter(self._factory()))

    def __repr__(self) -> str:
        name = getattr(self._factory, "__name__", None) or repr(self._factory)
        return f"LazySequence({name})"


Source = Union[Cursor[T], Traversable[T], Iterable[T]]


def cursor_of(source: Source) -> Cursor[Any]:
    """Cursor for a Cursor, a Traversable or any Python iterable."""
    if isinstance(source, Cursor):
        return source
    if isinstance(source, Traversable):
        return source.cursor()
    return IteratorCursor(iter(source))


def drain(cursor: Cursor[T]) -> Iterator[T]:
    """Python iterator over the remaining elements of a cursor."""
    while True:
        step = cursor.advance()
        if isinstance(step, Nothing):
            return
        yield step.value


def from_iterable(iterable: Iterable[T]) -> LazySequence[T]:
    """Wrap an iterable; restartable exactly when the iterable is re-iterable."""
    return LazySequence(lambda: iterable)


def naturals(start: int = 0) -> LazySequence[int]:
    """start, start + 1, start + 2, ... forever."""
    return LazySequence(lambda: itertools.count(start))


def iterate(f: Callable[[T], T], seed: T) -> LazySequence[T]:
    """seed, f(seed), f(f(seed)), ... forever."""
    def produce() -> Iterator[T]:
        value = seed
        while True:
            yield value
            value = f(value)
    return LazySequence(produce)


def repeat(value: T) -> LazySequence[T]:
    """value, value, value, ... forever."""
    return LazySequence(lambda: itertools.repeat(value))


def take(n: int, sequence: Source) -> LazySequence[Any]:
    """
    The first n elements of a sequence, lazily.

    The source is advanced at most n times per traversal, so take is safe
    on infinite sequences.
    """
    if n < 0:
        raise ValueError(f"take expects a non-negative count, got {n}")

    def produce() -> Iterator[Any]:
        cursor = cursor_of(sequence)
        for _ in range(n):
            step = cursor.advance()
            if isinstance(step, Nothing):
                return
            yield step.value
    return LazySequence(produce)


def to_list(sequence: Source) -> List[Any]:
    """Materialize a finite sequence."""
    return list(drain(cursor_of(sequence)))
