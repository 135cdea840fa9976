"""
catpy.py — The two abstractions Do is built on.

- Functor: anything a function can be mapped over; Do is one
- Maybe (Just/Nothing): a value that may be absent, used for the reduce
  accumulator and for find()
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar
from abc import ABC, abstractmethod

T = TypeVar("T")
U = TypeVar("U")


class Functor(ABC, Generic[T]):
    """
    Something whose contents can be transformed by fmap.

    Expected laws: fmap(lambda x: x) leaves the contents alone, and
    fmap(f).fmap(g) equals fmap(lambda x: g(f(x))).

    ::: This is-in-layer Functional-Layer.
    ::: This is a type-class.
    ::: This is stateless.
    """

    @abstractmethod
    def fmap(self, f: Callable[[T], U]) -> "Functor[U]":
        """Transform the contents with f."""
        raise NotImplementedError


class Maybe(Functor[T], ABC):
    """
    A value that is either there (Just) or not (Nothing).

    Just(None) counts as there. Do uses this to keep a reduce seeded with
    None apart from one that was never seeded.

    ::: This is-in-layer Functional-Layer.
    ::: This is a value-object.
    ::: This is stateless.
    """

    def is_just(self) -> bool:
        return isinstance(self, Just)

    def is_nothing(self) -> bool:
        return isinstance(self, Nothing)

    def get_or_else(self, default: T) -> T:
        """The held value, or default for Nothing."""
        if isinstance(self, Just):
            return self.value
        return default


@dataclass(frozen=True)
class Just(Maybe[T]):
    """A value that is there, even when it is None.

    ::: This is-in-layer Functional-Layer.
    ::: This is a value-object.
    ::: This is stateless.
    """
    value: T

    def fmap(self, f: Callable[[T], U]) -> Maybe[U]:
        return Just(f(self.value))

    def __repr__(self) -> str:
        return f"Just({self.value!r})"


@dataclass(frozen=True)
class Nothing(Maybe[Any]):
    """No value; fmap leaves it as it is.

    ::: This is-in-layer Functional-Layer.
    ::: This is a value-object.
    ::: This is stateless.
    """
    def fmap(self, f: Callable[[Any], U]) -> Maybe[U]:
        return self  # type: ignore[return-value]

    def __repr__(self) -> str:
        return "Nothing()"
