from __future__ import annotations
import typing
from .. import operators as ops
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class SetAccessor(Generic[T]):
    """
    set-theoretic operations.

    distinct and union compare elements with python equality by default, or with
    a strict weak order when `less` is given. except_ and intersect always sort
    the second sequence once and binary-search it, so they need an ordering
    (natural `<` unless `less` is given).
    """
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def distinct(self, key_selector: Optional[KeySelector[T, K]] = None,
                 less: Optional[LessThan[Any]] = None) -> 'Enumerable[T]':
        """return distinct elements. preserves order of first appearance."""
        return ops.distinct(key_selector, less)(self._enumerable)

    def union(self, other: Iterable[T], key_selector: Optional[KeySelector[T, K]] = None,
              less: Optional[LessThan[Any]] = None) -> 'Enumerable[T]':
        """return the order-preserving union of two sequences (distinct elements)."""
        return ops.union(other, key_selector, less)(self._enumerable)

    def intersect(self, other: Iterable[T], less: Optional[LessThan[T]] = None) -> 'Enumerable[T]':
        """return the elements of this sequence found in the second one, in order."""
        return ops.intersect(other, less)(self._enumerable)

    def except_(self, other: Iterable[T], less: Optional[LessThan[T]] = None) -> 'Enumerable[T]':
        """return elements from the first sequence not in the second (set difference)."""
        return ops.except_(other, less)(self._enumerable)

    def concat(self, other: Iterable[T]) -> 'Enumerable[T]':
        """concatenate with another sequence, preserving all elements and order."""
        return ops.concat(other)(self._enumerable)
