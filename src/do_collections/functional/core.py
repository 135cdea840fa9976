"""
Do Core - Chainable Collection Wrapper

This module provides the fluent wrapper used to work with collections in a
functional way, built on the Functor/Maybe foundations from catpy:

- Do: wraps a collection and an optional reduce accumulator
- MapExpression / BooleanExpression / ReduceExpression: the callables the
  chain accepts

Map:
    Do.with_collection(words).map_to(str.upper)
    Do.with_collection(digits).map_to_type(int).collect(int)

Filter:
    Do.with_collection(words).select(lambda w: w.startswith("a"))
    Do.with_collection(words).reject(lambda w: w.startswith("a"))
    Do.with_collection(words).detect(lambda w: w.startswith("a"))

Reduce:
    Do.with_array(1, 2, 3).with_initial_value(0).reduce(operator.add)

Every transformation returns a new Do over a freshly built list. The
collection protocol methods (add, remove, clear, ...) act on the wrapped
collection in place.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable, Iterator, MutableSequence, MutableSet
from dataclasses import dataclass
from typing import (
    TypeVar, Generic, Callable, List, Any, Optional, Set, Tuple, Type, Union
)

# PyArrow for columnar snapshots
import pyarrow as pa

from .catpy import Functor, Maybe, Just, Nothing
from ..config import get_config
from ..do_exceptions import MissingSeedError
from ..logging_config import configure_logger_for_debug_trace

logger = configure_logger_for_debug_trace(__name__)

E = TypeVar("E")
R = TypeVar("R")
S = TypeVar("S")


# =============================================================================
# Expressions
# =============================================================================

# Returning None drops the element from the mapped result.
MapExpression = Callable[[E], Optional[S]]
BooleanExpression = Callable[[E], bool]
ReduceExpression = Callable[[R, E], R]


__all__ = [
    "Do",
    "MapExpression", "BooleanExpression", "ReduceExpression",
    "with_collection", "with_array",
]


@dataclass(frozen=True)
class _DictKey:
    """Hashable stand-in for a dict row; only ever equal to another _DictKey."""
    items: frozenset


def _dedupe_key(item: Any) -> Any:
    """Hashable key equal exactly when the items are equal; raises TypeError if there is none."""
    if isinstance(item, dict):
        key = _DictKey(frozenset(item.items()))
    else:
        key = item
    hash(key)
    return key


# =============================================================================
# Do
# =============================================================================

class Do(Functor[E], Collection, Generic[E, R]):
    """
    A chainable wrapper over a collection of E, carrying an optional reduce
    accumulator of type R.

    Example:
        total = (
            Do.with_array("1", "2", "3")
            .map_to_type(int)
            .collect(int)
            .and_().then()
            .with_initial_value(0)
            .reduce(lambda acc, n: acc + n)
        )  # 6

    ::: This is-in-layer Functional-Layer.
    ::: This is a functor (laws hold for None-free mappings).
    ::: This is stateful.
    """

    def __init__(self, collection: Collection[E],
                 accumulator: Optional[Maybe[R]] = None,
                 target_type: Optional[Type[R]] = None):
        self._elements = collection
        self._accumulator: Maybe[R] = accumulator if accumulator is not None else Nothing()
        self._target_type = target_type

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def with_collection(cls, collection: Iterable[E]) -> "Do[E, E]":
        """Wrap a collection. Collections are wrapped by reference, other iterables are copied to a list."""
        if not isinstance(collection, Collection):
            collection = list(collection)
        return cls(collection)

    @classmethod
    def with_array(cls, *elements: E) -> "Do[E, E]":
        """Wrap the given elements, in argument order."""
        return cls(list(elements))

    @classmethod
    def from_collection(cls, collection: Iterable[E]) -> "Do[E, E]":
        """Alias for with_collection."""
        return cls.with_collection(collection)

    @classmethod
    def of(cls, *elements: E) -> "Do[E, E]":
        """Alias for with_array."""
        return cls.with_array(*elements)

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def elements(self) -> Collection[E]:
        """The wrapped collection (not a copy)."""
        return self._elements

    @property
    def accumulator(self) -> Maybe[R]:
        return self._accumulator

    @property
    def target_type(self) -> Optional[Type[R]]:
        return self._target_type

    # -------------------------------------------------------------------------
    # Map
    # -------------------------------------------------------------------------

    def map_to_type(self, target: Type[S]) -> "Do[E, S]":
        """
        Set the target type for a following collect() or with_initial_value().

        Values are neither converted nor filtered; the type is only recorded.
        """
        return Do(self._elements, target_type=target)

    def collect(self, expression: MapExpression[E, R]) -> "Do[R, R]":
        """
        Returns:
            A new Do containing the elements mapped by the expression
        """
        return self.map_to(expression)

    def map_to(self, expression: MapExpression[E, S]) -> "Do[S, S]":
        """
        Returns:
            A new Do containing the elements mapped by the expression.
            Elements mapped to None are left out.
        """
        result: List[S] = []
        for element in self._elements:
            mapped = expression(element)
            if mapped is not None:
                result.append(mapped)
        return Do(result)

    def map(self, expression: MapExpression[E, S]) -> "Do[S, S]":
        """Alias for map_to."""
        return self.map_to(expression)

    def fmap(self, f: MapExpression[E, S]) -> "Do[S, S]":
        """
        Functor map, same as map_to.

        Because None results are dropped, the functor laws only hold for
        elements and functions that never produce None:
        Do.with_array(None, 1).fmap(lambda x: x) keeps just [1].
        """
        return self.map_to(f)

    # -------------------------------------------------------------------------
    # Filter
    # -------------------------------------------------------------------------

    def select(self, expression: BooleanExpression[E]) -> "Do[E, E]":
        """Returns a new Do with all elements matching the expression."""
        return Do([element for element in self._elements if expression(element)])

    def reject(self, expression: BooleanExpression[E]) -> "Do[E, E]":
        """Returns a new Do with all elements except those matching the expression."""
        return Do([element for element in self._elements if not expression(element)])

    def detect(self, expression: BooleanExpression[E]) -> Optional[E]:
        """
        Returns:
            First element matching the expression, or None if nothing matches
        """
        for element in self._elements:
            if expression(element):
                return element
        return None

    def find(self, expression: BooleanExpression[E]) -> Maybe[E]:
        """Like detect, but Just(element) / Nothing() so a matching None is visible."""
        for element in self._elements:
            if expression(element):
                return Just(element)
        return Nothing()

    def reject_element(self, *elements: E) -> "Do[E, E]":
        """
        Remove the first element equal to each given element.

        To remove every occurrence call unique() first.
        """
        result = list(self._elements)
        for element in elements:
            try:
                result.remove(element)
            except ValueError:
                continue
        return Do(result)

    def inject_element(self, *elements: E) -> "Do[E, E]":
        """Returns a new Do with the elements appended."""
        result = list(self._elements)
        result.extend(elements)
        return Do(result)

    # -------------------------------------------------------------------------
    # Reduce
    # -------------------------------------------------------------------------

    def with_initial_value(self, start: S) -> "Do[E, S]":
        """
        Args:
            start: initial value in a reduce operation. None is a valid seed.
        """
        return Do(self._elements, accumulator=Just(start), target_type=self._target_type)

    def reduce(self, expression: ReduceExpression[E, R]) -> R:
        """
        Fold the elements from left to right, starting at the initial value.

        The wrapper keeps the result as its accumulator, so reducing the same
        wrapper again continues from it.

        Raises:
            MissingSeedError: if no starting value is set
        """
        seed = self._accumulator
        if get_config().null_seed_is_unset and seed.get_or_else(None) is None:
            seed = Nothing()
        if seed.is_nothing():
            logger.debug("reduce without starting value over %d elements", len(self._elements))
            raise MissingSeedError()

        value = seed.get_or_else(None)
        for element in self._elements:
            value = expression(value, element)
        self._accumulator = Just(value)
        return value

    # -------------------------------------------------------------------------
    # Chain connectors
    # -------------------------------------------------------------------------

    def and_(self) -> "Do[E, R]":
        return self

    def then(self) -> "Do[E, R]":
        return self

    # -------------------------------------------------------------------------
    # Deduplication and snapshots
    # -------------------------------------------------------------------------

    def unique(self) -> "Do[E, E]":
        """
        Keep one of each equal element. Callers should not rely on the order.

        Unhashable elements (lists, dicts holding lists) are compared with ==
        against everything kept so far.
        """
        seen = set()
        unhashable: List[E] = []
        result = []
        for element in self._elements:
            try:
                key = _dedupe_key(element)
            except TypeError:
                if any(element == kept for kept in result):
                    continue
                unhashable.append(element)
                result.append(element)
                continue
            if key in seen or any(element == kept for kept in unhashable):
                continue
            seen.add(key)
            result.append(element)
        logger.debug("unique: %d -> %d elements", len(self._elements), len(result))
        return Do(result)

    def remove_duplicates(self) -> "Do[E, E]":
        """Alias for unique."""
        return self.unique()

    def to_set(self) -> Set[E]:
        return set(self._elements)

    def to_list(self) -> List[E]:
        return list(self._elements)

    def to_array(self) -> Tuple[E, ...]:
        return tuple(self._elements)

    def to_arrow(self) -> Union[pa.Table, pa.Array]:
        """Snapshot as a PyArrow Table when every element is a dict row, else as an Array."""
        items = list(self._elements)
        if items and all(isinstance(item, dict) for item in items):
            return pa.Table.from_pylist(items)
        return pa.array(items)

    # -------------------------------------------------------------------------
    # Collection implementation
    # -------------------------------------------------------------------------

    def add(self, element: E) -> bool:
        if isinstance(self._elements, MutableSet):
            if element in self._elements:
                return False
            self._elements.add(element)
            return True
        if isinstance(self._elements, MutableSequence):
            self._elements.append(element)
            return True
        # Other collections with their own add(), e.g. a wrapped Do
        changed = self._elements.add(element)
        return True if changed is None else bool(changed)

    def add_all(self, elements: Iterable[E]) -> bool:
        changed = False
        for element in list(elements):
            if self.add(element):
                changed = True
        return changed

    def clear(self) -> None:
        self._elements.clear()

    def contains(self, element: Any) -> bool:
        return element in self._elements

    def contains_all(self, elements: Iterable[Any]) -> bool:
        return all(element in self._elements for element in elements)

    def is_empty(self) -> bool:
        return len(self._elements) == 0

    def iterator(self) -> Iterator[E]:
        return iter(self._elements)

    def remove(self, element: Any) -> bool:
        if isinstance(self._elements, MutableSet):
            if element not in self._elements:
                return False
            self._elements.discard(element)
            return True
        if isinstance(self._elements, Do):
            return self._elements.remove(element)
        try:
            self._elements.remove(element)
        except ValueError:
            return False
        return True

    def remove_all(self, elements: Iterable[Any]) -> bool:
        targets = list(elements)
        return self._replace_contents([e for e in self._elements if e not in targets])

    def retain_all(self, elements: Iterable[Any]) -> bool:
        targets = list(elements)
        return self._replace_contents([e for e in self._elements if e in targets])

    def size(self) -> int:
        return len(self._elements)

    def _replace_contents(self, kept: List[E]) -> bool:
        """Swap the wrapped collection's contents in place; True if anything was dropped."""
        if len(kept) == len(self._elements):
            return False
        if isinstance(self._elements, MutableSet):
            self._elements.clear()
            self._elements |= set(kept)
        elif isinstance(self._elements, MutableSequence):
            self._elements.clear()
            self._elements.extend(kept)
        elif isinstance(self._elements, Do):
            self._elements.clear()
            self._elements.add_all(kept)
        else:
            raise TypeError(
                f"cannot modify {type(self._elements).__name__} in place"
            )
        return True

    def __iter__(self) -> Iterator[E]:
        return iter(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __contains__(self, element: object) -> bool:
        return element in self._elements

    def __repr__(self) -> str:
        return f"Do({list(self._elements)!r}, accumulator={self._accumulator!r})"


# =============================================================================
# Builders
# =============================================================================

def with_collection(collection: Iterable[E]) -> Do[E, E]:
    """Start a chain over an existing collection."""
    return Do.with_collection(collection)


def with_array(*elements: E) -> Do[E, E]:
    """Start a chain over the given elements."""
    return Do.with_array(*elements)
