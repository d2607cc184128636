"""
catpy.py - Category-theory-inspired foundations for catfold.

This module provides the core typeclasses and value types used throughout
the library:
- Core typeclasses: Functor, Applicative, Monad
- Concrete instances: Maybe (Just/Nothing), Result (Ok/Err)
- Helpers: compose, identity, const, flip

Maybe and Result are immutable tagged variants: every operation returns a
new value and nothing is ever mutated after construction.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from .exceptions import UnwrapError

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")
E = TypeVar("E")

# ---------------------------------------------------------------------------
# Core typeclasses
# ---------------------------------------------------------------------------

class Functor(ABC, Generic[T]):
    """
    A structure that supports mapping a function over the values it contains.

    Laws (for all f: a->b, g: b->c):
      1) Identity:     fmap(id)      == id
      2) Composition:  fmap(g)∘fmap(f) == fmap(g∘f)

    ::: This is-in-layer Core-Layer.
    ::: This is a type-class.
    ::: This is stateless.
    """

    @abstractmethod
    def fmap(self, f: Callable[[T], U]) -> "Functor[U]":
        """Map a pure function over the structure."""
        raise NotImplementedError

    # Convenience alias
    def map(self, f: Callable[[T], U]) -> "Functor[U]":
        return self.fmap(f)


class Applicative(Functor[T], ABC):
    """
    A Functor that can lift pure values and apply wrapped functions.

    Laws (for all x, y and wrapped functions u, v):
      1) Identity:     pure(id).ap(v) == v
      2) Homomorphism: pure(f).ap(pure(x)) == pure(f(x))
      3) Interchange:  u.ap(pure(y)) == pure(lambda f: f(y)).ap(u)

    ::: This is-in-layer Core-Layer.
    ::: This is a type-class.
    ::: This is stateless.
    """

    @classmethod
    @abstractmethod
    def pure(cls, x: U) -> "Applicative[U]":
        """Lift a value into the applicative context."""
        raise NotImplementedError

    @abstractmethod
    def ap(self: "Applicative[Callable[[T], U]]", x: "Applicative[T]") -> "Applicative[U]":
        """Apply a wrapped function to a wrapped value."""
        raise NotImplementedError

    @classmethod
    def liftA2(cls, f: Callable[[T, U], V], a: "Applicative[T]", b: "Applicative[U]") -> "Applicative[V]":
        """
        Lift a binary function into the applicative context.
        Equivalent to: pure(curried f).ap(a).ap(b)
        """
        return cls.pure(lambda x: lambda y: f(x, y)).ap(a).ap(b)  # type: ignore[misc]


class Monad(Applicative[T], ABC):
    """
    A structure that supports sequencing (bind).

    Laws (for all x and functions f: a -> m b, g: b -> m c):
      1) Left identity:  pure(x).bind(f) == f(x)
      2) Right identity: m.bind(pure)    == m
      3) Associativity:  m.bind(f).bind(g) == m.bind(lambda x: f(x).bind(g))

    ::: This is-in-layer Core-Layer.
    ::: This is a type-class.
    ::: This is stateless.
    """

    @abstractmethod
    def bind(self, f: Callable[[T], "Monad[U]"]) -> "Monad[U]":
        """Chain a function that returns a wrapped value (aka flatMap)."""
        raise NotImplementedError

    # Default implementations in terms of bind/pure
    def fmap(self, f: Callable[[T], U]) -> "Monad[U]":  # type: ignore[override]
        return self.bind(lambda a: self.__class__.pure(f(a)))  # type: ignore[misc]

    def ap(self: "Monad[Callable[[T], U]]", x: "Monad[T]") -> "Monad[U]":  # type: ignore[override]
        return self.bind(lambda f: x.bind(lambda a: self.__class__.pure(f(a))))  # type: ignore[misc]

    def flat_map(self, f: Callable[[T], "Monad[U]"]) -> "Monad[U]":
        return self.bind(f)

    def __rshift__(self, f: Callable[[T], "Monad[U]"]) -> "Monad[U]":
        """Syntactic sugar: m >> f == m.bind(f)"""
        return self.bind(f)


# ---------------------------------------------------------------------------
# Maybe
# ---------------------------------------------------------------------------

class Maybe(Monad[T], ABC):
    """
    Optional value: either Just(value) or Nothing().

    fmap and bind only call their function on Just; on Nothing they
    return Nothing untouched. unwrap() is the single operation that can
    fail on absence.

    ::: This is-in-layer Core-Layer.
    ::: This is a monad.
    ::: This is stateless.
    """

    @classmethod
    def pure(cls, x: U) -> "Maybe[U]":  # type: ignore[override]
        return Just(x)

    def is_just(self) -> bool:
        return isinstance(self, Just)

    def is_nothing(self) -> bool:
        return isinstance(self, Nothing)

    def get_or_else(self, default: T) -> T:
        """Get the value or return default if Nothing."""
        if isinstance(self, Just):
            return self.value
        return default

    def or_else(self, alternative: "Maybe[T]") -> "Maybe[T]":
        """Return self if Just, otherwise return alternative."""
        if isinstance(self, Just):
            return self
        return alternative

    def unwrap(self) -> T:
        """Get the value or raise UnwrapError if Nothing."""
        if isinstance(self, Just):
            return self.value
        raise UnwrapError("Cannot unwrap Nothing()", source=self)

    def to_result(self, error: E) -> "Result[T, E]":
        """Ok(value) for Just, Err(error) for Nothing."""
        if isinstance(self, Just):
            return Ok(self.value)
        return Err(error)


@dataclass(frozen=True)
class Just(Maybe[T]):
    """Represents a present value in a Maybe context."""
    value: T

    def bind(self, f: Callable[[T], Maybe[U]]) -> Maybe[U]:
        return f(self.value)

    def fmap(self, f: Callable[[T], U]) -> Maybe[U]:  # type: ignore[override]
        return Just(f(self.value))

    def ap(self, x: Maybe[T]) -> Maybe[U]:  # type: ignore[override]
        # self is expected to hold a function
        if callable(self.value):
            if isinstance(x, Just):
                return Just(self.value(x.value))  # type: ignore[misc]
            return Nothing()
        raise TypeError("Just.ap expects a Just(function).")

    def __repr__(self) -> str:
        return f"Just({self.value!r})"


@dataclass(frozen=True)
class Nothing(Maybe[Any]):
    """Represents an absent value in a Maybe context. All instances are equal."""

    def bind(self, f: Callable[[Any], Maybe[U]]) -> Maybe[U]:
        return self  # type: ignore[return-value]

    def fmap(self, f: Callable[[Any], U]) -> Maybe[U]:  # type: ignore[override]
        return self  # type: ignore[return-value]

    def ap(self, x: Maybe[Any]) -> Maybe[Any]:  # type: ignore[override]
        return self

    def __repr__(self) -> str:
        return "Nothing()"


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------

class Result(Monad[T], ABC, Generic[T, E]):
    """
    Tagged union for success or failure with an error value.
    - Ok(value)
    - Err(error)

    Prefer Result over Maybe when you want to keep *why* it failed.

    ::: This is-in-layer Core-Layer.
    ::: This is a monad.
    ::: This is stateless.
    """

    @classmethod
    def pure(cls, x: U) -> "Result[U, E]":  # type: ignore[override]
        return Ok(x)

    def is_ok(self) -> bool:
        return isinstance(self, Ok)

    def is_err(self) -> bool:
        return isinstance(self, Err)

    def unwrap(self) -> T:
        """Get the value or raise UnwrapError if Err."""
        if isinstance(self, Ok):
            return self.value
        raise UnwrapError(f"Cannot unwrap {self!r}", source=self)

    def unwrap_or(self, default: T) -> T:
        """Get the value or return default if Err."""
        if isinstance(self, Ok):
            return self.value
        return default

    def map_err(self, f: Callable[[E], E]) -> "Result[T, E]":
        """Map a function over the error value."""
        if isinstance(self, Err):
            return Err(f(self.error))
        return self

    def to_maybe(self) -> Maybe[T]:
        """Just(value) for Ok, Nothing() for Err; the error is dropped."""
        if isinstance(self, Ok):
            return Just(self.value)
        return Nothing()


@dataclass(frozen=True)
class Ok(Result[T, E]):
    """Represents a successful result."""
    value: T

    def bind(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return f(self.value)

    def fmap(self, f: Callable[[T], U]) -> Result[U, E]:  # type: ignore[override]
        return Ok(f(self.value))

    def ap(self, x: Result[T, E]) -> Result[U, E]:  # type: ignore[override]
        if callable(self.value):
            if isinstance(x, Ok):
                return Ok(self.value(x.value))  # type: ignore[misc]
            return x  # Err propagates
        raise TypeError("Ok.ap expects an Ok(function).")

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True)
class Err(Result[Any, E]):
    """Represents a failed result with error information."""
    error: E

    def bind(self, f: Callable[[Any], Result[U, E]]) -> Result[U, E]:
        return self  # type: ignore[return-value]

    def fmap(self, f: Callable[[Any], U]) -> Result[U, E]:  # type: ignore[override]
        return self  # type: ignore[return-value]

    def ap(self, x: Result[Any, E]) -> Result[Any, E]:  # type: ignore[override]
        return self

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def compose(f: Callable[[U], V], g: Callable[[T], U]) -> Callable[[T], V]:
    """Function composition: compose(f, g)(x) == f(g(x))"""
    return lambda x: f(g(x))


def identity(x: T) -> T:
    """Identity function."""
    return x


def const(x: T) -> Callable[[Any], T]:
    """Constant function: const(x)(y) == x for all y."""
    return lambda _: x


def flip(f: Callable[[T, U], V]) -> Callable[[U, T], V]:
    """Flip argument order: flip(f)(x, y) == f(y, x)."""
    return lambda x, y: f(y, x)
