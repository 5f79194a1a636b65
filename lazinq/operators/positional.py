"""
last, last_or_default and reverse.

each has two strategies picked by probing the source: a direct walk from the
end when the source supports backward traversal, and a forward fallback that
works on anything iterable.
"""
from __future__ import annotations
import logging
import typing
from ..errors import EmptySequenceError, OutOfRangeError
from ..sequence import backward_view, iter_producer
from ..state import BufferState, buffer_producer
from ..types import *
from .base import Operator

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

logger = logging.getLogger(__name__)

_MISSING = object()


def _search_last(source: Iterable[T], predicate: Optional[Predicate[T]]) -> Tuple[bool, Any]:
    """returns (source had elements, last qualifying element or _MISSING)"""
    backward = backward_view(source)
    if backward is not None:
        any_element = False
        for item in reversed(backward):
            any_element = True
            if predicate is None or predicate(item):
                return True, item
        return any_element, _MISSING

    # forward only: remember the latest match, o(1) extra memory
    any_element = False
    found = _MISSING
    for item in source:
        any_element = True
        if predicate is None or predicate(item):
            found = item
    return any_element, found


def last(source: Iterable[T], predicate: Optional[Predicate[T]] = None) -> T:
    """last element (satisfying predicate)"""
    any_element, found = _search_last(source, predicate)
    if not any_element:
        raise EmptySequenceError()
    if found is _MISSING:
        raise OutOfRangeError()
    return found


def last_or_default(source: Iterable[T], predicate: Optional[Predicate[T]] = None,
                    default: Optional[T] = None) -> Optional[T]:
    """last element (satisfying predicate), or default when there is none"""
    _, found = _search_last(source, predicate)
    return default if found is _MISSING else found


class _ReversedView(Generic[T]):
    """reversible view iterating a reversible source from its end"""

    def __init__(self, source: Iterable[T]):
        self._source = source

    def __iter__(self) -> Iterator[T]:
        return reversed(self._source)

    def __reversed__(self) -> Iterator[T]:
        return iter(self._source)


class Reverse(Operator[T]):
    name = 'reverse'

    def _apply(self, source: 'Enumerable[T]') -> 'Enumerable[T]':
        from ..enumerable import Enumerable
        backward = backward_view(source)
        if backward is not None:
            logger.debug("reverse over %s walks the source backwards", type(backward).__name__)
            view = _ReversedView(backward)
            return Enumerable(lambda: iter_producer(view), backward=view)

        def fill():
            items = list(source)
            items.reverse()
            return items

        state = BufferState(self.name, fill)
        return Enumerable(lambda: buffer_producer(state))
