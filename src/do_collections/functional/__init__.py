"""
Functional collection helpers.

A fluent wrapper for mapping, filtering, de-duplicating and reducing
in-memory collections.

Example:
    from do_collections.functional import Do, ReduceToTextBuffer

    Do.with_array("a", "b", "c").select(lambda s: s != "b").to_list()
    # ["a", "c"]

    Do.with_array(1, 2, 3).with_initial_value(0).reduce(lambda acc, n: acc + n)
    # 6
"""

from .catpy import (
    Functor,
    Maybe, Just, Nothing
)

from .core import (
    Do,
    MapExpression, BooleanExpression, ReduceExpression,
    with_collection, with_array
)

from .reducers import ReduceToTextBuffer

__all__ = [
    # From catpy
    "Functor",
    "Maybe",
    "Just",
    "Nothing",
    # Core
    "Do",
    "MapExpression",
    "BooleanExpression",
    "ReduceExpression",
    "with_collection",
    "with_array",
    # Reducers
    "ReduceToTextBuffer",
]
