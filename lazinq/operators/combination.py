from __future__ import annotations
import typing
from ..sequence import END
from ..types import *
from .base import Operator

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class Concat(Operator[T]):
    """every element of the source, then every element of other"""
    name = 'concat'

    def __init__(self, other: Iterable[T]):
        super().__init__()
        self._other = other

    def _apply(self, source: 'Enumerable[T]') -> 'Enumerable[T]':
        from ..enumerable import Enumerable
        from ..factories import from_iterable
        other = from_iterable(self._other)

        def make_producer():
            first, second = iter(source), iter(other)

            def next_item():
                item = next(first, END)
                if item is END:
                    item = next(second, END)
                return item

            return next_item

        return Enumerable(make_producer)


class Zip(Operator[T]):
    """combines elements pairwise, stopping with the shorter sequence"""
    name = 'zip'

    def __init__(self, other: Iterable[U], result_selector: Callable[[T, U], V] = pair_of):
        super().__init__()
        self._other = other
        self._result_selector = result_selector

    def _apply(self, source: 'Enumerable[T]') -> 'Enumerable[V]':
        from ..enumerable import Enumerable
        from ..factories import from_iterable
        other = from_iterable(self._other)
        result_selector = self._result_selector

        def make_producer():
            first, second = iter(source), iter(other)

            def next_item():
                left = next(first, END)
                if left is END:
                    return END
                right = next(second, END)
                if right is END:
                    return END
                return result_selector(left, right)

            return next_item

        return Enumerable(make_producer)


class ZipLongest(Operator[T]):
    """combines elements pairwise, padding the shorter sequence with defaults"""
    name = 'zip_longest'

    def __init__(self, other: Iterable[U], result_selector: Callable[[Optional[T], Optional[U]], V] = pair_of,
                 default_self: Optional[T] = None, default_other: Optional[U] = None):
        super().__init__()
        self._other = other
        self._result_selector = result_selector
        self._default_self = default_self
        self._default_other = default_other

    def _apply(self, source: 'Enumerable[T]') -> 'Enumerable[V]':
        from ..enumerable import Enumerable
        from ..factories import from_iterable
        other = from_iterable(self._other)
        result_selector = self._result_selector
        default_self, default_other = self._default_self, self._default_other

        def make_producer():
            first, second = iter(source), iter(other)

            def next_item():
                left, right = next(first, END), next(second, END)
                if left is END and right is END:
                    return END
                return result_selector(default_self if left is END else left,
                                       default_other if right is END else right)

            return next_item

        return Enumerable(make_producer)
