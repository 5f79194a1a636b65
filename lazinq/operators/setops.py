from __future__ import annotations
import typing
from bisect import bisect_left
from ..sequence import END
from ..state import SharedState
from ..types import *
from .base import Operator
from .ordering import natural_less, sort_key

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class _HashedSeen:
    """seen-set using python equality and hashing"""

    def __init__(self):
        self._seen = set()

    def add(self, value: Any) -> bool:
        if value in self._seen:
            return False
        self._seen.add(value)
        return True


class _OrderedSeen:
    """
    seen-set kept sorted by a caller-owned ordering predicate.
    two values are the same when neither precedes the other. inserting a new
    value shifts the list, o(n) per distinct value.
    """

    def __init__(self, less: LessThan[Any]):
        self._less = less
        self._key = sort_key(less)
        self._items: List[Any] = []

    def add(self, value: Any) -> bool:
        position = bisect_left(self._items, self._key(value), key=self._key)
        if position < len(self._items) and not self._less(value, self._items[position]):
            return False
        self._items.insert(position, value)
        return True


def _seen_set(less: Optional[LessThan[Any]]):
    return _HashedSeen() if less is None else _OrderedSeen(less)


def _distinct_producer(sources: List[Iterable[T]], key_selector: Optional[KeySelector[T, K]],
                       less: Optional[LessThan[Any]]):
    """drains sources in order through one continuous seen-set"""
    iterators = [iter(source) for source in sources]
    seen = _seen_set(less)
    current = 0

    def next_item():
        nonlocal current
        while current < len(iterators):
            for item in iterators[current]:
                if seen.add(item if key_selector is None else key_selector(item)):
                    return item
            current += 1
        return END

    return next_item


class Distinct(Operator[T]):
    """first occurrence of every equivalence class, in source order"""
    name = 'distinct'

    def __init__(self, key_selector: Optional[KeySelector[T, K]] = None,
                 less: Optional[LessThan[Any]] = None):
        super().__init__()
        self._key_selector = key_selector
        self._less = less

    def _apply(self, source: 'Enumerable[T]') -> 'Enumerable[T]':
        from ..enumerable import Enumerable
        key_selector, less = self._key_selector, self._less
        return Enumerable(lambda: _distinct_producer([source], key_selector, less))


class Union(Operator[T]):
    """distinct elements of the source followed by those of other"""
    name = 'union'

    def __init__(self, other: Iterable[T], key_selector: Optional[KeySelector[T, K]] = None,
                 less: Optional[LessThan[Any]] = None):
        super().__init__()
        self._other = other
        self._key_selector = key_selector
        self._less = less

    def _apply(self, source: 'Enumerable[T]') -> 'Enumerable[T]':
        from ..enumerable import Enumerable
        from ..factories import from_iterable
        other = from_iterable(self._other)
        key_selector, less = self._key_selector, self._less
        return Enumerable(lambda: _distinct_producer([source, other], key_selector, less))


class _SortedLookupState(SharedState):
    """elements of the second sequence, sorted once for binary search"""

    def __init__(self, operation: str, other: Iterable[T], less: Optional[LessThan[T]]):
        super().__init__()
        self.operation = operation
        self._other = other
        self._less = less or natural_less
        self._key = sort_key(self._less)
        self._items: List[T] = []

    def build(self) -> None:
        self._items = sorted(self._other, key=self._key)

    def size(self) -> int:
        return len(self._items)

    def contains(self, value: T) -> bool:
        items = self.ensure()._items
        position = bisect_left(items, self._key(value), key=self._key)
        return position < len(items) and not self._less(value, items[position])


def _lookup_filter(source: Iterable[T], state: _SortedLookupState, keep_found: bool):
    def make_producer():
        iterator = iter(source)

        def next_item():
            for item in iterator:
                if state.contains(item) == keep_found:
                    return item
            return END

        return next_item

    return make_producer


class Except(Operator[T]):
    """elements of the source that have no equivalent in other"""
    name = 'except'

    def __init__(self, other: Iterable[T], less: Optional[LessThan[T]] = None):
        super().__init__()
        self._other = other
        self._less = less

    def _apply(self, source: 'Enumerable[T]') -> 'Enumerable[T]':
        from ..enumerable import Enumerable
        from ..factories import from_iterable
        state = _SortedLookupState(self.name, from_iterable(self._other), self._less)
        return Enumerable(_lookup_filter(source, state, keep_found=False))


class Intersect(Operator[T]):
    """elements of the source that have an equivalent in other"""
    name = 'intersect'

    def __init__(self, other: Iterable[T], less: Optional[LessThan[T]] = None):
        super().__init__()
        self._other = other
        self._less = less

    def _apply(self, source: 'Enumerable[T]') -> 'Enumerable[T]':
        from ..enumerable import Enumerable
        from ..factories import from_iterable
        state = _SortedLookupState(self.name, from_iterable(self._other), self._less)
        return Enumerable(_lookup_filter(source, state, keep_found=True))
