from __future__ import annotations
import typing
from .. import operators as ops
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class GroupingAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def group_by(self, key_selector: KeySelector[T, K],
                 value_selector: Selector[T, V] = identity,
                 result_selector: Callable[[K, 'Enumerable[V]'], Any] = pair_of,
                 less: Optional[LessThan[K]] = None) -> 'Enumerable[Any]':
        """
        group elements by a key. yields result_selector(key, values) per key, in key order.
        by default each result is a (key, values) pair where values is a lazy sequence.
        """
        return ops.group_by(key_selector, value_selector, result_selector, less)(self._enumerable)

    def group_values_by(self, key_selector: KeySelector[T, K], value_selector: Selector[T, V],
                        less: Optional[LessThan[K]] = None) -> 'Enumerable[Tuple[K, Enumerable[V]]]':
        """group projected values by a key"""
        return self.group_by(key_selector, value_selector, less=less)

    def group_by_and_fold(self, key_selector: KeySelector[T, K],
                          result_selector: Callable[[K, 'Enumerable[T]'], V],
                          less: Optional[LessThan[K]] = None) -> 'Enumerable[V]':
        """group by key then transform each group"""
        return self.group_by(key_selector, identity, result_selector, less)

    def to_dict(self, key_selector: KeySelector[T, K]) -> Dict[K, List[T]]:
        """eager: group into a dict of lists, keyed in key order"""
        return {key: values.to.list() for key, values in self.group_by(key_selector)}
