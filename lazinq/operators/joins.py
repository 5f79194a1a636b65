"""
group_by, join and group_join.

a true streaming join is not possible, so every operator here indexes one side
in a single pass on first pull. join and group_join then stream the outer side
against that index; group_by materializes its results since they come out in
key order.
"""
from __future__ import annotations
import typing
from bisect import bisect_left
from ..sequence import END
from ..state import BufferState, SharedState, buffer_producer
from ..types import *
from .base import Operator
from .ordering import natural_less, sort_key

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class KeyIndex(Generic[K, V]):
    """
    ordered map from keys to insertion-ordered lists of values.
    keys are kept sorted by the ordering predicate; two keys are the same
    when neither precedes the other. lookups are o(log n); adding a new key
    shifts the key list, so building over n distinct keys is o(n^2) worst case.
    """

    def __init__(self, less: Optional[LessThan[K]] = None):
        self._less = less or natural_less
        self._key = sort_key(self._less)
        self._keys: List[K] = []
        self._groups: List[List[V]] = []

    def _find(self, key: K) -> Tuple[int, bool]:
        position = bisect_left(self._keys, self._key(key), key=self._key)
        found = position < len(self._keys) and not self._less(key, self._keys[position])
        return position, found

    def add(self, key: K, value: V) -> None:
        position, found = self._find(key)
        if not found:
            self._keys.insert(position, key)
            self._groups.insert(position, [])
        self._groups[position].append(value)

    def get(self, key: K) -> Optional[List[V]]:
        position, found = self._find(key)
        return self._groups[position] if found else None

    def items(self) -> Iterator[Tuple[K, List[V]]]:
        return zip(self._keys, self._groups)

    def __len__(self) -> int:
        return len(self._keys)


class _InnerIndexState(SharedState):
    """index of the inner sequence by key, shared by join and group_join cursors"""

    def __init__(self, operation: str, inner: Iterable[U], inner_key_selector: KeySelector[U, K],
                 less: Optional[LessThan[K]]):
        super().__init__()
        self.operation = operation
        self._inner = inner
        self._inner_key_selector = inner_key_selector
        self._less = less
        self.index: KeyIndex[K, U] = KeyIndex(less)

    def build(self) -> None:
        index = KeyIndex(self._less)
        for item in self._inner:
            index.add(self._inner_key_selector(item), item)
        self.index = index

    def size(self) -> int:
        return len(self.index)


class GroupBy(Operator[T]):
    """
    groups elements by key. result_selector(key, values) is called once per
    distinct key, in key order; values is a lazy view over the group's
    projected elements in source order.
    """
    name = 'group_by'

    def __init__(self, key_selector: KeySelector[T, K],
                 value_selector: Selector[T, V] = identity,
                 result_selector: Callable[[K, 'Enumerable[V]'], Any] = pair_of,
                 less: Optional[LessThan[K]] = None):
        super().__init__()
        self._key_selector = key_selector
        self._value_selector = value_selector
        self._result_selector = result_selector
        self._less = less

    def _apply(self, source: 'Enumerable[T]') -> 'Enumerable[Any]':
        from ..enumerable import Enumerable
        from ..factories import from_iterable
        key_selector, value_selector = self._key_selector, self._value_selector
        result_selector, less = self._result_selector, self._less

        def build_results():
            groups = KeyIndex(less)
            for item in source:
                groups.add(key_selector(item), value_selector(item))
            return [result_selector(key, from_iterable(values)) for key, values in groups.items()]

        state = BufferState(self.name, build_results)
        return Enumerable(lambda: buffer_producer(state))


class Join(Operator[T]):
    """inner equi-join: one result per matching (outer, inner) pair"""
    name = 'join'

    def __init__(self, inner: Iterable[U], outer_key_selector: KeySelector[T, K],
                 inner_key_selector: KeySelector[U, K],
                 result_selector: Callable[[T, U], V] = pair_of,
                 less: Optional[LessThan[K]] = None):
        super().__init__()
        self._inner = inner
        self._outer_key_selector = outer_key_selector
        self._inner_key_selector = inner_key_selector
        self._result_selector = result_selector
        self._less = less

    def _apply(self, outer: 'Enumerable[T]') -> 'Enumerable[V]':
        from ..enumerable import Enumerable
        from ..factories import from_iterable
        state = _InnerIndexState(self.name, from_iterable(self._inner), self._inner_key_selector, self._less)
        outer_key_selector, result_selector = self._outer_key_selector, self._result_selector

        def make_producer():
            iterator = iter(outer)
            current = None
            matches: List[U] = []
            position = 0

            def next_item():
                nonlocal current, matches, position
                while position >= len(matches):
                    item = next(iterator, END)
                    if item is END:
                        return END
                    current = item
                    matches = state.ensure().index.get(outer_key_selector(item)) or []
                    position = 0
                match = matches[position]
                position += 1
                return result_selector(current, match)

            return next_item

        return Enumerable(make_producer)


class GroupJoin(Operator[T]):
    """one result per outer element, paired with a view over its inner matches"""
    name = 'group_join'

    def __init__(self, inner: Iterable[U], outer_key_selector: KeySelector[T, K],
                 inner_key_selector: KeySelector[U, K],
                 result_selector: Callable[[T, 'Enumerable[U]'], V] = pair_of,
                 less: Optional[LessThan[K]] = None):
        super().__init__()
        self._inner = inner
        self._outer_key_selector = outer_key_selector
        self._inner_key_selector = inner_key_selector
        self._result_selector = result_selector
        self._less = less

    def _apply(self, outer: 'Enumerable[T]') -> 'Enumerable[V]':
        from ..enumerable import Enumerable
        from ..factories import empty, from_iterable
        state = _InnerIndexState(self.name, from_iterable(self._inner), self._inner_key_selector, self._less)
        outer_key_selector, result_selector = self._outer_key_selector, self._result_selector

        def make_producer():
            iterator = iter(outer)

            def next_item():
                item = next(iterator, END)
                if item is END:
                    return END
                matches = state.ensure().index.get(outer_key_selector(item))
                return result_selector(item, from_iterable(matches) if matches else empty())

            return next_item

        return Enumerable(make_producer)
