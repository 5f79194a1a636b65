import itertools
import typing
from collections.abc import Iterator as _IteratorABC, Reversible
from .sequence import end_producer, iter_producer
from .types import *

if typing.TYPE_CHECKING:
    from .enumerable import Enumerable

_EMPTY = None

def from_iterable(data: Iterable[T]) -> 'Enumerable[T]':
    """
    create enumerable from iterable.
    enumerables are returned unchanged. one-shot iterators (generators, file
    objects) are wrapped in a replay buffer so the result can be iterated again.
    """
    from .enumerable import Enumerable
    if isinstance(data, Enumerable):
        return data
    if isinstance(data, _IteratorABC):
        data = MemoizedSource(data)
    backward = data if isinstance(data, Reversible) else None
    return Enumerable(lambda: iter_producer(data), backward=backward)

def from_range(start: int, count: int) -> 'Enumerable[int]':
    """create enumerable from range"""
    return from_iterable(range(start, start + count))

def repeat(item: T, count: int) -> 'Enumerable[T]':
    """create enumerable with repeated item"""
    from .enumerable import Enumerable
    return Enumerable(lambda: iter_producer(itertools.repeat(item, max(count, 0))))

def empty() -> 'Enumerable[Any]':
    """the shared always-empty enumerable"""
    global _EMPTY
    if _EMPTY is None:
        from .enumerable import Enumerable
        _EMPTY = Enumerable(lambda: end_producer, backward=())
    return _EMPTY

def generate(generator_func: Callable[[], T], count: int) -> 'Enumerable[T]':
    """generate sequence using a function, called lazily for every element of every pass"""
    from .enumerable import Enumerable

    def make_producer():
        return iter_producer(generator_func() for _ in range(count))

    return Enumerable(make_producer)

# --- aliases ---
lazinq = from_iterable
P = from_iterable
p = from_iterable
