from __future__ import annotations

from abc import ABC, abstractmethod
from .sequence import Cursor, Producer
from .types import *

# --- core functionality ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.set import SetAccessor
from .extensions.join import JoinAccessor
from .extensions.grouping import GroupingAccessor
from .extensions.terminal import TerminalAccessor
from .extensions.zip import ZipAccessor

# --- abstract base class ---

class IEnumerable(ABC, Generic[T]):
    @abstractmethod
    def __iter__(self) -> Iterator[T]:
        """start a new, independent pass over the elements"""
        pass

# --- base enumerable implementation ---

class _BaseEnumerable(IEnumerable[T]):
    def __init__(self, producer_factory: Callable[[], Producer], backward: Optional[Iterable[T]] = None):
        """init with a function that creates a fresh next-producer for every pass"""
        self._producer_factory = producer_factory
        self._backward = backward

    def _backward_source(self) -> Optional[Iterable[T]]:
        """reversible object walking the same elements, if backward traversal is possible"""
        return self._backward

    def __iter__(self) -> Iterator[T]:
        return Cursor(self._producer_factory())

# --- main enumerable class ---

class Enumerable(
    _BaseEnumerable[T],
    _CoreOperations[T]
):
    """a lazy, linq-inspired sequence. nothing is computed until it is iterated."""
    def __init__(self, producer_factory: Callable[[], Producer], backward: Optional[Iterable[T]] = None):
        super().__init__(producer_factory, backward)
        # --- initialize accessors ---
        self.set = SetAccessor(self)
        self.join = JoinAccessor(self)
        self.zip = ZipAccessor(self)
        self.group = GroupingAccessor(self)
        self.to = TerminalAccessor(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(backward={self._backward is not None})"

# --- ordered enumerable class ---

class OrderedEnumerable(Enumerable[T]):
    """represents a sorted sequence, allowing for subsequent orderings."""

    def __init__(self, source: Enumerable[T], comparator: Comparer[T]):
        from .operators.ordering import sorted_producer_factory
        super().__init__(sorted_producer_factory(source, comparator))
        self._unordered_source = source
        self._comparator = comparator

    def then_by(self, key_selector: KeySelector[T, K], less: Optional[LessThan[K]] = None) -> 'OrderedEnumerable[T]':
        """secondary sort ascending"""
        from .operators import then_by
        return then_by(key_selector, less)(self)

    def then_by_descending(self, key_selector: KeySelector[T, K],
                           less: Optional[LessThan[K]] = None) -> 'OrderedEnumerable[T]':
        """secondary sort descending"""
        from .operators import then_by_descending
        return then_by_descending(key_selector, less)(self)
