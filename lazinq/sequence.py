"""
pull protocol shared by every operator.

a next-producer is a zero-argument callable returning the next element, or the
END marker once the data runs out. cursors adapt producers to python's iterator
protocol so results can be consumed by ordinary for loops.
"""
from __future__ import annotations
import logging
import typing
from collections.abc import Reversible
from .config import get_settings
from .types import *

if typing.TYPE_CHECKING:
    from .enumerable import Enumerable

logger = logging.getLogger(__name__)


class _EndMarker:
    """singleton returned by producers when no element is left."""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'END'

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_EndMarker, ())


END = _EndMarker()

Producer = Callable[[], Any]


class Cursor(Iterator[T]):
    """iterator over the elements a single producer yields."""
    __slots__ = ('_producer', '_done', '_trace', '_pulls')

    def __init__(self, producer: Producer):
        self._producer = producer
        self._done = False
        self._trace = get_settings().trace_pulls
        self._pulls = 0

    def __iter__(self) -> 'Cursor[T]':
        return self

    def __next__(self) -> T:
        if self._done:
            raise StopIteration
        item = self._producer()
        self._pulls += 1
        if item is END:
            # producers are not pulled again once they signalled the end
            self._done = True
            self._producer = None
            if self._trace:
                logger.debug("cursor %#x exhausted after %d pulls", id(self), self._pulls)
            raise StopIteration
        if self._trace:
            logger.debug("cursor %#x pull %d -> %r", id(self), self._pulls, item)
        return item


def iter_producer(iterable: Iterable[T]) -> Producer:
    """producer walking a python iterable with a live iterator"""
    iterator = iter(iterable)

    def next_item():
        return next(iterator, END)

    return next_item


def end_producer() -> Any:
    return END


def backward_view(source: Any) -> Optional[Iterable[T]]:
    """
    capability probe for backward traversal.
    returns an object whose reversed() walks the source from its end, or none
    when the source only supports forward traversal.
    """
    from .enumerable import Enumerable
    if isinstance(source, Enumerable):
        return source._backward_source()
    if isinstance(source, Reversible):
        return source
    return None
