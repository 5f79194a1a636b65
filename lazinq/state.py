from __future__ import annotations
import logging
from .types import *

logger = logging.getLogger(__name__)


class SharedState:
    """
    precomputed data shared by every cursor of one operator application.

    the state object itself is created when the operator is applied, which is
    cheap and never calls user code. the expensive part (sorting, indexing,
    buffering) runs in build() on the first pull of any cursor and exactly once.
    later cursors reuse the result. the state lives as long as some enumerable
    or cursor still references it.
    """
    operation = 'operation'

    def __init__(self):
        self._built = False
        self.build_count = 0

    def build(self) -> None:
        """populate the precomputed data, called at most once"""
        raise NotImplementedError

    def size(self) -> int:
        """number of buffered items, for logging"""
        return 0

    def ensure(self) -> 'SharedState':
        if not self._built:
            self.build()
            # a build that raised is retried on the next pull
            self._built = True
            self.build_count += 1
            logger.debug("built shared state for %s (%d items)", self.operation, self.size())
        return self

    @property
    def is_built(self) -> bool:
        return self._built


class BufferState(SharedState):
    """shared state holding a single list of values"""

    def __init__(self, operation: str, fill: Callable[[], List[Any]]):
        super().__init__()
        self.operation = operation
        self._fill = fill
        self.items: List[Any] = []

    def build(self) -> None:
        self.items = self._fill()
        self._fill = None

    def size(self) -> int:
        return len(self.items)


def buffer_producer(state: BufferState) -> Callable[[], Any]:
    """producer walking a buffer state; the buffer is built on the first pull"""
    from .sequence import END
    position = 0

    def next_item():
        nonlocal position
        items = state.ensure().items
        if position >= len(items):
            return END
        item = items[position]
        position += 1
        return item

    return next_item
