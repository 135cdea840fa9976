"""
do_collections - work with collections in a functional way

A chainable wrapper that maps, filters, de-duplicates and reduces in-memory
collections.
"""

__version__ = "0.1.0"

from .functional import (
    Do,
    Maybe, Just, Nothing,
    ReduceToTextBuffer,
    with_collection,
    with_array,
)
from .do_exceptions import (
    # Exception hierarchy
    DoError,
    MissingSeedError,
)

__all__ = [
    "Do",
    "Maybe",
    "Just",
    "Nothing",
    "ReduceToTextBuffer",
    "with_collection",
    "with_array",
    # Exceptions
    "DoError",
    "MissingSeedError",
]
