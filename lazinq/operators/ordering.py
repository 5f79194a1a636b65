"""
comparators and the order_by / then_by family.

every sort key becomes a leaf comparator returning a negative, zero or positive
int. adding a key composes the current chain with the new leaf into a tie-break
node that only consults the new key when everything before it compares equal.
the source is sorted once, with a stable sort over the full chain, on first pull.
"""
from __future__ import annotations
import typing
from functools import cmp_to_key
from ..state import BufferState, buffer_producer
from ..types import *
from .base import Operator

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable, OrderedEnumerable


def natural_less(left: Any, right: Any) -> bool:
    """default ordering predicate"""
    return left < right


def comparator_from_less(less: LessThan[T]) -> Comparer[T]:
    """turns a strict weak order into a three-way comparator"""
    def compare(left: T, right: T) -> int:
        if less(left, right):
            return -1
        if less(right, left):
            return 1
        return 0
    return compare


def sort_key(less: Optional[LessThan[T]] = None) -> Callable[[T], Any]:
    """key function usable with sorted() and bisect for a given ordering predicate"""
    return cmp_to_key(comparator_from_less(less or natural_less))


def key_comparator(key_selector: KeySelector[T, K], less: Optional[LessThan[K]] = None,
                   descending: bool = False) -> Comparer[T]:
    """leaf comparator ordering elements by a key, direction fixed at construction"""
    less = less or natural_less
    before = 1 if descending else -1

    def compare(left: T, right: T) -> int:
        left_key, right_key = key_selector(left), key_selector(right)
        if less(left_key, right_key):
            return before
        if less(right_key, left_key):
            return -before
        return 0

    return compare


def compose(primary: Comparer[T], secondary: Comparer[T]) -> Comparer[T]:
    """tie-break node: secondary only decides when primary reports equality"""
    def compare(left: T, right: T) -> int:
        result = primary(left, right)
        if result == 0:
            result = secondary(left, right)
        return result
    return compare


class OrderBy(Operator[T]):
    """sorts a sequence by a key; applied to an ordered sequence it adds a tie-breaker"""
    name = 'order_by'

    def __init__(self, key_selector: KeySelector[T, K], less: Optional[LessThan[K]] = None,
                 descending: bool = False):
        super().__init__()
        self._comparator = key_comparator(key_selector, less, descending)

    def _apply(self, source: 'Enumerable[T]') -> 'OrderedEnumerable[T]':
        from ..enumerable import OrderedEnumerable
        return OrderedEnumerable(source, self._comparator)


class ThenBy(OrderBy[T]):
    name = 'then_by'

    def _apply(self, source: 'Enumerable[T]') -> 'OrderedEnumerable[T]':
        from ..enumerable import OrderedEnumerable
        if not isinstance(source, OrderedEnumerable):
            raise TypeError("then_by requires a sequence produced by order_by")
        return OrderedEnumerable(source._unordered_source, compose(source._comparator, self._comparator))


def sorted_buffer(source: Iterable[T], comparator: Comparer[T]) -> BufferState:
    """shared state holding a stable sort of source, built on first pull"""
    return BufferState('order_by', lambda: sorted(source, key=cmp_to_key(comparator)))


def sorted_producer_factory(source: Iterable[T], comparator: Comparer[T]) -> Callable[[], Callable[[], Any]]:
    state = sorted_buffer(source, comparator)
    return lambda: buffer_producer(state)
