from __future__ import annotations
import typing
from .. import operators as ops
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class JoinAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def join(self, inner: Iterable[U], outer_key_selector: KeySelector[T, K],
             inner_key_selector: KeySelector[U, K],
             result_selector: Callable[[T, U], V] = pair_of,
             less: Optional[LessThan[K]] = None) -> 'Enumerable[V]':
        """inner join two sequences based on matching keys"""
        return ops.join(inner, outer_key_selector, inner_key_selector,
                        result_selector, less)(self._enumerable)

    def group_join(self, inner: Iterable[U], outer_key_selector: KeySelector[T, K],
                   inner_key_selector: KeySelector[U, K],
                   result_selector: Callable[[T, 'Enumerable[U]'], V] = pair_of,
                   less: Optional[LessThan[K]] = None) -> 'Enumerable[V]':
        """
        group join - pairs every outer element with the inner elements sharing its key.
        outer elements without matches are paired with an empty sequence.
        """
        return ops.group_join(inner, outer_key_selector, inner_key_selector,
                              result_selector, less)(self._enumerable)
