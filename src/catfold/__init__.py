"""
catfold - folds, zips and optional values

Small functional-programming building blocks: generalized folds over
(possibly lazy, possibly infinite) sequences, positional zips, and a
Maybe type whose composition short-circuits on absence.
"""

__version__ = "0.1.0"

from .catpy import (
    Functor, Applicative, Monad,
    Maybe, Just, Nothing,
    Result, Ok, Err,
    compose, identity, const, flip,
)
from .exceptions import CatfoldError, UnwrapError, InvalidIndexOriginError, ConfigError
from .sequence import (
    Cursor, Traversable, LazySequence, IteratorCursor,
    cursor_of, from_iterable, naturals, iterate, repeat, take, to_list,
)
from .fold import fold, fold_left, fold_right, scan_left, fold_map
from .zips import zip_pairs, zip_with_index, zip_with, ZipList
from .optional import pure, absent, from_nullable, fmap, bind, chain, lift_a2, unwrap
from .monoid import (
    Monoid, mconcat, option_monoid,
    SUM, PRODUCT, ALL, ANY, STRING, TUPLE, FIRST, LAST, MIN, MAX,
)

# arrow_fold is lazy-imported (it depends on pyarrow)
_ARROW_ATTRS = {"arrow_mconcat", "ensure_array"}


def __getattr__(name):
    if name in _ARROW_ATTRS:
        from . import arrow_fold
        return getattr(arrow_fold, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    # Category theory
    "Functor", "Applicative", "Monad",
    "Maybe", "Just", "Nothing",
    "Result", "Ok", "Err",
    "compose", "identity", "const", "flip",
    # Exceptions
    "CatfoldError", "UnwrapError", "InvalidIndexOriginError", "ConfigError",
    # Sequences
    "Cursor", "Traversable", "LazySequence", "IteratorCursor",
    "cursor_of", "from_iterable", "naturals", "iterate", "repeat", "take", "to_list",
    # Folds
    "fold", "fold_left", "fold_right", "scan_left", "fold_map",
    # Zips
    "zip_pairs", "zip_with_index", "zip_with", "ZipList",
    # Optional
    "pure", "absent", "from_nullable", "fmap", "bind", "chain", "lift_a2", "unwrap",
    # Monoids
    "Monoid", "mconcat", "option_monoid",
    "SUM", "PRODUCT", "ALL", "ANY", "STRING", "TUPLE", "FIRST", "LAST", "MIN", "MAX",
    # Arrow
    "arrow_mconcat", "ensure_array",
]
