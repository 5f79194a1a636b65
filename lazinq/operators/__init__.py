"""
operator descriptors.

each function below captures an operator's parameters and returns a one-shot
descriptor. calling the descriptor with a sequence returns a lazy Enumerable:

    evens = where(lambda x: x % 2 == 0)
    result = evens([1, 2, 3, 4])
"""
from ..types import *
from .base import Operator
from .combination import Concat, Zip, ZipLongest
from .filtering import (
    Where, Select, SelectMany, Skip, SkipWhile, Take, TakeWhile, DefaultIfEmpty
)
from .joins import GroupBy, Join, GroupJoin, KeyIndex
from .ordering import OrderBy, ThenBy, compose, key_comparator, comparator_from_less, natural_less
from .positional import Reverse, last, last_or_default
from .setops import Distinct, Union, Except, Intersect


def where(predicate: Predicate[T]) -> Where:
    return Where(indexless(predicate))


def where_with_index(predicate: IndexedPredicate[T]) -> Where:
    return Where(predicate)


def select(selector: Selector[T, U]) -> Select:
    return Select(indexless(selector))


def select_with_index(selector: IndexedSelector[T, U]) -> Select:
    return Select(selector)


def select_many(selector: Selector[T, Iterable[U]]) -> SelectMany:
    return SelectMany(indexless(selector))


def select_many_with_index(selector: IndexedSelector[T, Iterable[U]]) -> SelectMany:
    return SelectMany(selector)


def skip(count: int) -> Skip:
    return Skip(count)


def skip_while(predicate: Predicate[T]) -> SkipWhile:
    return SkipWhile(indexless(predicate))


def skip_while_with_index(predicate: IndexedPredicate[T]) -> SkipWhile:
    return SkipWhile(predicate)


def take(count: int) -> Take:
    return Take(count)


def take_while(predicate: Predicate[T]) -> TakeWhile:
    return TakeWhile(indexless(predicate))


def take_while_with_index(predicate: IndexedPredicate[T]) -> TakeWhile:
    return TakeWhile(predicate)


def distinct(key_selector: Optional[KeySelector[T, K]] = None,
             less: Optional[LessThan[Any]] = None) -> Distinct:
    return Distinct(key_selector, less)


def union(other: Iterable[T], key_selector: Optional[KeySelector[T, K]] = None,
          less: Optional[LessThan[Any]] = None) -> Union:
    return Union(other, key_selector, less)


def except_(other: Iterable[T], less: Optional[LessThan[T]] = None) -> Except:
    return Except(other, less)


def intersect(other: Iterable[T], less: Optional[LessThan[T]] = None) -> Intersect:
    return Intersect(other, less)


def order_by(key_selector: KeySelector[T, K], less: Optional[LessThan[K]] = None) -> OrderBy:
    return OrderBy(key_selector, less)


def order_by_descending(key_selector: KeySelector[T, K], less: Optional[LessThan[K]] = None) -> OrderBy:
    return OrderBy(key_selector, less, descending=True)


def then_by(key_selector: KeySelector[T, K], less: Optional[LessThan[K]] = None) -> ThenBy:
    return ThenBy(key_selector, less)


def then_by_descending(key_selector: KeySelector[T, K], less: Optional[LessThan[K]] = None) -> ThenBy:
    return ThenBy(key_selector, less, descending=True)


def group_by(key_selector: KeySelector[T, K], value_selector: Selector[T, V] = identity,
             result_selector: Callable[[K, Any], Any] = pair_of,
             less: Optional[LessThan[K]] = None) -> GroupBy:
    return GroupBy(key_selector, value_selector, result_selector, less)


def join(inner: Iterable[U], outer_key_selector: KeySelector[T, K], inner_key_selector: KeySelector[U, K],
         result_selector: Callable[[T, U], V] = pair_of, less: Optional[LessThan[K]] = None) -> Join:
    return Join(inner, outer_key_selector, inner_key_selector, result_selector, less)


def group_join(inner: Iterable[U], outer_key_selector: KeySelector[T, K], inner_key_selector: KeySelector[U, K],
               result_selector: Callable[[T, Any], V] = pair_of, less: Optional[LessThan[K]] = None) -> GroupJoin:
    return GroupJoin(inner, outer_key_selector, inner_key_selector, result_selector, less)


def concat(other: Iterable[T]) -> Concat:
    return Concat(other)


def zip_with(other: Iterable[U], result_selector: Callable[[T, U], V] = pair_of) -> Zip:
    return Zip(other, result_selector)


def zip_longest_with(other: Iterable[U], result_selector: Callable[[Optional[T], Optional[U]], V] = pair_of,
                     default_self: Optional[T] = None, default_other: Optional[U] = None) -> ZipLongest:
    return ZipLongest(other, result_selector, default_self, default_other)


def reverse() -> Reverse:
    return Reverse()


def default_if_empty(default_value: T) -> DefaultIfEmpty:
    return DefaultIfEmpty(default_value)


__all__ = [
    "Operator",
    "where", "where_with_index", "select", "select_with_index",
    "select_many", "select_many_with_index",
    "skip", "skip_while", "skip_while_with_index",
    "take", "take_while", "take_while_with_index",
    "distinct", "union", "except_", "intersect",
    "order_by", "order_by_descending", "then_by", "then_by_descending",
    "group_by", "join", "group_join",
    "concat", "zip_with", "zip_longest_with",
    "reverse", "default_if_empty", "last", "last_or_default",
    "KeyIndex", "compose", "key_comparator", "comparator_from_less", "natural_less",
]
