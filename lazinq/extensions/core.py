from __future__ import annotations
import typing
from .. import operators as ops
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable, OrderedEnumerable
    from ..operators import Operator

class _CoreOperations(Generic[T]):
    def apply(self: 'Enumerable[T]', operator: 'Operator[T]') -> 'Enumerable[Any]':
        """apply an operator descriptor to this sequence"""
        return operator(self)

    def where(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """filter elements based on a predicate"""
        return ops.where(predicate)(self)

    def where_with_index(self: 'Enumerable[T]', predicate: IndexedPredicate[T]) -> 'Enumerable[T]':
        """filter elements based on a predicate that also receives the element's index"""
        return ops.where_with_index(predicate)(self)

    def select(self: 'Enumerable[T]', selector: Selector[T, U]) -> 'Enumerable[U]':
        """project each element to a new form"""
        return ops.select(selector)(self)

    def select_with_index(self: 'Enumerable[T]', selector: IndexedSelector[T, U]) -> 'Enumerable[U]':
        """project each element to a new form, using the element's index"""
        return ops.select_with_index(selector)(self)

    def select_many(self: 'Enumerable[T]', selector: Selector[T, Iterable[U]]) -> 'Enumerable[U]':
        """project and flatten sequences"""
        return ops.select_many(selector)(self)

    def select_many_with_index(self: 'Enumerable[T]', selector: IndexedSelector[T, Iterable[U]]) -> 'Enumerable[U]':
        return ops.select_many_with_index(selector)(self)

    def order_by(self: 'Enumerable[T]', key_selector: Callable[[T], K],
                 less: Optional[LessThan[K]] = None) -> 'OrderedEnumerable[T]':
        """sort elements by a key"""
        return ops.order_by(key_selector, less)(self)

    def order_by_descending(self: 'Enumerable[T]', key_selector: Callable[[T], K],
                            less: Optional[LessThan[K]] = None) -> 'OrderedEnumerable[T]':
        """sort elements by a key in descending order"""
        return ops.order_by_descending(key_selector, less)(self)

    def take(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """take the first 'count' elements"""
        return ops.take(count)(self)

    def skip(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """skip the first 'count' elements"""
        return ops.skip(count)(self)

    def take_while(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """take elements while predicate is true"""
        return ops.take_while(predicate)(self)

    def take_while_with_index(self: 'Enumerable[T]', predicate: IndexedPredicate[T]) -> 'Enumerable[T]':
        return ops.take_while_with_index(predicate)(self)

    def skip_while(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """skip elements while predicate is true"""
        return ops.skip_while(predicate)(self)

    def skip_while_with_index(self: 'Enumerable[T]', predicate: IndexedPredicate[T]) -> 'Enumerable[T]':
        return ops.skip_while_with_index(predicate)(self)

    def reverse(self: 'Enumerable[T]') -> 'Enumerable[T]':
        """inverts the order of the elements in a sequence"""
        return ops.reverse()(self)

    def append(self: 'Enumerable[T]', element: T) -> 'Enumerable[T]':
        """appends a value to the end of the sequence"""
        return ops.concat((element,))(self)

    def prepend(self: 'Enumerable[T]', element: T) -> 'Enumerable[T]':
        """adds a value to the beginning of the sequence"""
        from ..factories import from_iterable
        return ops.concat(self)(from_iterable((element,)))

    def default_if_empty(self: 'Enumerable[T]', default_value: T) -> 'Enumerable[T]':
        """returns the elements of a sequence, or a default value in a singleton collection if the sequence is empty"""
        return ops.default_if_empty(default_value)(self)

    def of_type(self: 'Enumerable[T]', type_filter: Type[U]) -> 'Enumerable[U]':
        """filters the elements of a sequence based on a specified type"""
        # the type hint Type[U] ensures the user passes a class/type, not an instance
        return self.where(lambda item: isinstance(item, type_filter))
