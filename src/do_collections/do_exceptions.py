"""
Do Exception Hierarchy

Contains the exception classes raised by the do_collections library.
"""


class DoError(Exception):
    """
    Base exception for all do_collections operations.

    ::: This is-in-layer Utility-Layer.
    ::: This is a exception.
    ::: This is stateless.
    """
    pass


class MissingSeedError(DoError, RuntimeError):
    """
    Raised when reduce() is called on a wrapper with no starting value.

    ::: This is-in-layer Utility-Layer.
    ::: This is a exception.
    ::: This is stateless.

    The chain has to be restarted with with_initial_value(start) before
    reducing; the library never retries or supplies a default seed.
    """

    DEFAULT_MESSAGE = "must set starting value before reducing"

    def __init__(self, message: str = DEFAULT_MESSAGE):
        super().__init__(message)


__all__ = [
    "DoError",
    "MissingSeedError",
]
