from __future__ import annotations
import typing
from collections import deque
from itertools import islice
from ..sequence import END, iter_producer
from ..state import SharedState
from ..types import *
from .base import Operator

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class Where(Operator[T]):
    """streams the elements satisfying predicate(element, index)"""
    name = 'where'

    def __init__(self, predicate: IndexedPredicate[T]):
        super().__init__()
        self._predicate = predicate

    def _apply(self, source: 'Enumerable[T]') -> 'Enumerable[T]':
        from ..enumerable import Enumerable
        predicate = self._predicate

        def make_producer():
            iterator = iter(source)
            index = 0

            def next_item():
                nonlocal index
                for item in iterator:
                    matched = predicate(item, index)
                    index += 1
                    if matched:
                        return item
                return END

            return next_item

        return Enumerable(make_producer)


class Select(Operator[T]):
    """maps every element through selector(element, index)"""
    name = 'select'

    def __init__(self, selector: IndexedSelector[T, U]):
        super().__init__()
        self._selector = selector

    def _apply(self, source: 'Enumerable[T]') -> 'Enumerable[U]':
        from ..enumerable import Enumerable
        selector = self._selector

        def make_producer():
            iterator = iter(source)
            index = 0

            def next_item():
                nonlocal index
                item = next(iterator, END)
                if item is END:
                    return END
                result = selector(item, index)
                index += 1
                return result

            return next_item

        return Enumerable(make_producer)


class SelectMany(Operator[T]):
    """
    flattens the sub-sequences returned by selector(element, index).
    each cursor keeps its own queue of pending sub-elements and only pulls the
    source again once that queue is empty.
    """
    name = 'select_many'

    def __init__(self, selector: IndexedSelector[T, Iterable[U]]):
        super().__init__()
        self._selector = selector

    def _apply(self, source: 'Enumerable[T]') -> 'Enumerable[U]':
        from ..enumerable import Enumerable
        selector = self._selector

        def make_producer():
            iterator = iter(source)
            pending = deque()
            index = 0

            def next_item():
                nonlocal index
                while not pending:
                    item = next(iterator, END)
                    if item is END:
                        return END
                    pending.extend(selector(item, index))
                    index += 1
                return pending.popleft()

            return next_item

        return Enumerable(make_producer)


class _TakePrefixState(SharedState):
    """
    leading run of elements satisfying a predicate, collected lazily.
    one upstream pass feeds every cursor; each element is tested once.
    """

    def __init__(self, operation: str, source: Iterable[T], predicate: IndexedPredicate[T]):
        super().__init__()
        self.operation = operation
        self._source = source
        self._predicate = predicate
        self._iterator = None
        self._pending = END
        self.items: List[T] = []
        self.complete = False

    def build(self) -> None:
        self._iterator = iter(self._source)

    def size(self) -> int:
        return len(self.items)

    def item_at(self, position: int) -> Any:
        while position >= len(self.items) and not self.complete:
            if self._pending is END:
                self._pending = next(self._iterator, END)
                if self._pending is END:
                    self._finish()
                    break
            # the candidate stays pending until the predicate has answered
            if not self._predicate(self._pending, len(self.items)):
                self._finish()
                break
            self.items.append(self._pending)
            self._pending = END
        return self.items[position] if position < len(self.items) else END

    def _finish(self) -> None:
        self.complete = True
        self._iterator = None
        self._pending = END


class _SkipPrefixState(SharedState):
    """
    length of the leading run of elements satisfying a predicate.
    the cursor whose pull runs the scan keeps streaming from the scanning
    iterator; later cursors skip the known count without testing anything.
    """

    def __init__(self, operation: str, source: Iterable[T], predicate: IndexedPredicate[T]):
        super().__init__()
        self.operation = operation
        self._source = source
        self._predicate = predicate
        self._scanned = None
        self.length = 0

    def build(self) -> None:
        iterator = iter(self._source)
        length = 0
        item = next(iterator, END)
        while item is not END and self._predicate(item, length):
            length += 1
            item = next(iterator, END)
        self.length = length
        self._scanned = (iterator, item)

    def size(self) -> int:
        return self.length

    def claim_scan(self) -> Optional[Tuple[Iterator[T], Any]]:
        """hands the scanning iterator and the first kept element to one cursor"""
        scanned, self._scanned = self._scanned, None
        return scanned


class Skip(Operator[T]):
    """bypasses the first count elements"""
    name = 'skip'

    def __init__(self, count: int):
        super().__init__()
        self._count = max(count, 0)

    def _apply(self, source: 'Enumerable[T]') -> 'Enumerable[T]':
        from ..enumerable import Enumerable
        count = self._count
        return Enumerable(lambda: iter_producer(islice(source, count, None)))


class SkipWhile(Operator[T]):
    """bypasses the leading elements for which predicate(element, index) holds"""
    name = 'skip_while'

    def __init__(self, predicate: IndexedPredicate[T]):
        super().__init__()
        self._predicate = predicate

    def _apply(self, source: 'Enumerable[T]') -> 'Enumerable[T]':
        from ..enumerable import Enumerable
        state = _SkipPrefixState(self.name, source, self._predicate)

        def make_producer():
            iterator = None

            def next_item():
                nonlocal iterator
                if iterator is None:
                    scanned = state.ensure().claim_scan()
                    if scanned is not None:
                        iterator, first_kept = scanned
                        return first_kept
                    iterator = islice(source, state.length, None)
                return next(iterator, END)

            return next_item

        return Enumerable(make_producer)


class Take(Operator[T]):
    """returns the first count elements"""
    name = 'take'

    def __init__(self, count: int):
        super().__init__()
        self._count = max(count, 0)

    def _apply(self, source: 'Enumerable[T]') -> 'Enumerable[T]':
        from ..enumerable import Enumerable
        count = self._count
        return Enumerable(lambda: iter_producer(islice(source, count)))


class TakeWhile(Operator[T]):
    """returns the leading elements for which predicate(element, index) holds"""
    name = 'take_while'

    def __init__(self, predicate: IndexedPredicate[T]):
        super().__init__()
        self._predicate = predicate

    def _apply(self, source: 'Enumerable[T]') -> 'Enumerable[T]':
        from ..enumerable import Enumerable
        state = _TakePrefixState(self.name, source, self._predicate)

        def make_producer():
            position = 0

            def next_item():
                nonlocal position
                item = state.ensure().item_at(position)
                if item is not END:
                    position += 1
                return item

            return next_item

        return Enumerable(make_producer)


class DefaultIfEmpty(Operator[T]):
    """streams the source, or a single default value when the source is empty"""
    name = 'default_if_empty'

    def __init__(self, default_value: T):
        super().__init__()
        self._default_value = default_value

    def _apply(self, source: 'Enumerable[T]') -> 'Enumerable[T]':
        from ..enumerable import Enumerable
        default_value = self._default_value

        def make_producer():
            iterator = iter(source)
            produced = False
            defaulted = False

            def next_item():
                nonlocal produced, defaulted
                item = next(iterator, END)
                if item is not END:
                    produced = True
                    return item
                if produced or defaulted:
                    return END
                defaulted = True
                return default_value

            return next_item

        return Enumerable(make_producer)
