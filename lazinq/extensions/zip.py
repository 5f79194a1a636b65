from __future__ import annotations
import typing
from .. import operators as ops
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class ZipAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def zip_with(self, other: Iterable[U], result_selector: Callable[[T, U], V] = pair_of) -> 'Enumerable[V]':
        """zip two sequences with custom result selector, stopping at the shorter one"""
        return ops.zip_with(other, result_selector)(self._enumerable)

    def zip_longest_with(self, other: Iterable[U],
                         result_selector: Callable[[Optional[T], Optional[U]], V] = pair_of,
                         default_self: Optional[T] = None, default_other: Optional[U] = None) -> 'Enumerable[V]':
        """zip sequences padding shorter with defaults"""
        return ops.zip_longest_with(other, result_selector, default_self, default_other)(self._enumerable)
