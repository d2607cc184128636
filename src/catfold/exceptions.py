"""
catfold Exception Hierarchy

Contains all exception classes raised by catfold itself. Exceptions raised
by caller-supplied functions (combine, fmap, bind ...) are never wrapped.
"""


class CatfoldError(Exception):
    """
    Base exception for all catfold operations.

    ::: This is-in-layer Utility-Layer.
    ::: This is a exception.
    ::: This is stateless.
    """
    pass


class UnwrapError(CatfoldError):
    """
    Raised when a value is extracted directly from Nothing() or Err(...).

    Composition (fmap, bind, chain) never raises this; only the explicit
    unwrap operations do.

    ::: This is-in-layer Utility-Layer.
    ::: This is a exception.
    ::: This is stateless.
    """
    kind = "unwrap_of_absent"

    def __init__(self, message: str = "Cannot unwrap an absent value", source=None):
        super().__init__(message)
        self.source = source


class InvalidIndexOriginError(CatfoldError, ValueError):
    """
    Raised when zip_with_index is asked for an origin other than 0 or 1.

    ::: This is-in-layer Utility-Layer.
    ::: This is a exception.
    ::: This is stateless.
    """
    pass


class ConfigError(CatfoldError):
    """
    Raised when configuration values fail validation.

    ::: This is-in-layer Utility-Layer.
    ::: This is a exception.
    ::: This is stateless.
    """
    pass


__all__ = [
    "CatfoldError",
    "UnwrapError",
    "InvalidIndexOriginError",
    "ConfigError",
]
