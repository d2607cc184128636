"""
Optional-value composition as free functions over Maybe.

    chain(lookup(user_id), find_email, normalize_email)

runs each step in turn and stops at the first Nothing(); later steps are
never called.
"""

from typing import Any, Callable, Optional, TypeVar

from .catpy import Just, Maybe, Nothing
from .logging_config import get_logger

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")

logger = get_logger(__name__)


def pure(value: T) -> Maybe[T]:
    """Wrap a value as present."""
    return Just(value)


def absent() -> Maybe[Any]:
    """The absent value."""
    return Nothing()


def from_nullable(value: Optional[T]) -> Maybe[T]:
    """Nothing() for None, Just(value) otherwise."""
    if value is None:
        return Nothing()
    return Just(value)


def fmap(opt: Maybe[T], f: Callable[[T], U]) -> Maybe[U]:
    """Just(f(v)) for Just(v); Nothing() without calling f otherwise."""
    return opt.fmap(f)


def bind(opt: Maybe[T], f: Callable[[T], Maybe[U]]) -> Maybe[U]:
    """f(v) for Just(v); Nothing() without calling f otherwise."""
    return opt.bind(f)


def chain(opt: Maybe[T], *steps: Callable[[Any], Maybe[Any]]) -> Maybe[Any]:
    """
    Bind each step in order, short-circuiting at the first Nothing().

    Args:
        opt: Starting value
        *steps: Functions T -> Maybe[U], applied left to right

    Returns:
        Result of the last step, or Nothing() from the first absent step
    """
    current: Maybe[Any] = opt
    for position, step in enumerate(steps):
        if isinstance(current, Nothing):
            logger.debug("chain short-circuited before step %d of %d", position + 1, len(steps))
            return current
        current = current.bind(step)
    return current


def lift_a2(f: Callable[[T, U], V], a: Maybe[T], b: Maybe[U]) -> Maybe[V]:
    """Apply a binary function to two optional values; Nothing() if either is absent."""
    return Maybe.liftA2(f, a, b)  # type: ignore[return-value]


def unwrap(opt: Maybe[T]) -> T:
    """
    Extract the value of a Just.

    Raises:
        UnwrapError: If opt is Nothing()
    """
    return opt.unwrap()


def get_or_else(opt: Maybe[T], default: T) -> T:
    """Value of a Just, or default."""
    return opt.get_or_else(default)
