from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from functools import reduce
from ..errors import EmptySequenceError, OutOfRangeError
from ..operators import positional
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

_MISSING = object()

class TerminalAccessor(Generic[T]):
    """eager accessors: each one pulls the sequence and returns a plain value"""
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def list(self) -> List[T]:
        """convert to list"""
        return [item for item in self._enumerable]

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self.list())

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._enumerable)

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary"""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._enumerable}

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self.list())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self.list())

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        if predicate is None: return sum(1 for _ in self._enumerable)
        return sum(1 for x in self._enumerable if predicate(x))

    def any(self, predicate: Optional[Predicate[T]] = None) -> bool:
        """check if any element satisfies condition"""
        if predicate is None: return next(iter(self._enumerable), _MISSING) is not _MISSING
        return any(predicate(x) for x in self._enumerable)

    def all(self, predicate: Predicate[T]) -> bool:
        """check if all elements satisfy condition"""
        return all(predicate(x) for x in self._enumerable)

    def first(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get first element"""
        iterator = iter(self._enumerable)
        item = next(iterator, _MISSING)
        if item is _MISSING: raise EmptySequenceError()
        if predicate is None: return item
        while item is not _MISSING:
            if predicate(item): return item
            item = next(iterator, _MISSING)
        raise OutOfRangeError()

    def first_or_default(self, predicate: Optional[Predicate[T]] = None,
                         default: Optional[T] = None) -> Optional[T]:
        """get first element or default"""
        try: return self.first(predicate)
        except (EmptySequenceError, OutOfRangeError): return default

    def last(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get last element, walking backwards when the source allows it"""
        return positional.last(self._enumerable, predicate)

    def last_or_default(self, predicate: Optional[Predicate[T]] = None,
                        default: Optional[T] = None) -> Optional[T]:
        """get last element or default"""
        return positional.last_or_default(self._enumerable, predicate, default)

    def single(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get single element, erroring if not exactly one"""
        iterator = iter(self._enumerable)
        item = next(iterator, _MISSING)
        if item is _MISSING: raise EmptySequenceError()
        if predicate is not None:
            while item is not _MISSING and not predicate(item):
                item = next(iterator, _MISSING)
            if item is _MISSING: raise OutOfRangeError("sequence contains no matching elements")
            iterator = (x for x in iterator if predicate(x))
        if next(iterator, _MISSING) is not _MISSING:
            raise ValueError("sequence contains more than one matching element")
        return item

    def aggregate(self, accumulator: Accumulator[T, T], seed: Optional[T] = None) -> T:
        """applies accumulator function over sequence"""
        if seed is not None: return reduce(accumulator, self._enumerable, seed)
        iterator = iter(self._enumerable)
        first = next(iterator, _MISSING)
        if first is _MISSING: raise EmptySequenceError("cannot aggregate empty sequence without seed")
        return reduce(accumulator, iterator, first)

    def aggregate_with_selector(self, seed: U, accumulator: Accumulator[U, T],
                                result_selector: Selector[U, V]) -> V:
        """aggregate with seed and final transformation"""
        return result_selector(reduce(accumulator, self._enumerable, seed))
