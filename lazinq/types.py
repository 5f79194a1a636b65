from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
IndexedPredicate = Callable[[T, int], bool]
Selector = Callable[[T], U]
IndexedSelector = Callable[[T, int], U]
KeySelector = Callable[[T], K]
Comparer = Callable[[T, T], int]
LessThan = Callable[[T, T], bool]
Accumulator = Callable[[U, T], U]


def identity(item: T) -> T:
    """returns its argument unchanged (default value selector)"""
    return item


def pair_of(first: T, second: U) -> Tuple[T, U]:
    """pairs two arguments (default result selector for joins, groups and zip)"""
    return first, second


def indexless(func: Callable[[T], U]) -> Callable[[T, int], U]:
    """adapts a unary callable to the indexed (element, index) form"""
    def call(item: T, index: int) -> U:
        return func(item)
    return call


class MemoizedSource(Generic[T]):
    """
    replayable view over a one-shot iterator.
    elements are pulled from the iterator only when a reader needs them and are
    kept, so several readers can walk the same data independently.
    """

    def __init__(self, iterator: Iterator[T]):
        self._source_iterator = iterator
        self._cache: List[T] = []
        self._is_fully_enumerated = False

    def _materialize_to_index(self, target_index: int) -> bool:
        """pull until the cache holds target_index; false if the source ran dry first"""
        while len(self._cache) <= target_index and not self._is_fully_enumerated:
            try:
                self._cache.append(next(self._source_iterator))
            except StopIteration:
                self._is_fully_enumerated = True
        return target_index < len(self._cache)

    def __iter__(self) -> Iterator[T]:
        index = 0
        while self._materialize_to_index(index):
            yield self._cache[index]
            index += 1

    def __repr__(self) -> str:
        state = "complete" if self._is_fully_enumerated else "partial"
        return f"MemoizedSource(cached={len(self._cache)}, {state})"
