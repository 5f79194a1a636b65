import itertools
import suite
from lazinq import P, empty, EmptySequenceError, OutOfRangeError
from lazinq.operators import last, last_or_default, reverse
from lazinq.sequence import backward_view

test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal
assert_raises = suite.assert_raises

sample = [3, 1, 4, 1, 5, 9, 2, 6]


def counted(predicate, calls):
    def wrapper(item):
        calls.append(item)
        return predicate(item)
    return wrapper


# --- concat ---

@test("concat yields the first sequence then the second")
def test_concat_basic():
    assert_equal(P([1, 2]).set.concat([3, 4]).to.list(), [1, 2, 3, 4])
    assert_equal(empty().set.concat([1]).to.list(), [1])
    assert_equal(P([1]).set.concat(empty()).to.list(), [1])


@test("concat with an endless second sequence stays lazy")
def test_concat_infinite():
    assert_equal(P([1, 2]).set.concat(itertools.count(10)).take(5).to.list(), [1, 2, 10, 11, 12])


@test("concat can be iterated more than once")
def test_concat_repeat():
    query = P([1]).set.concat(x for x in [2, 3])
    assert_equal(query.to.list(), [1, 2, 3])
    assert_equal(query.to.list(), [1, 2, 3])


# --- zip ---

@test("zip stops with the shorter sequence")
def test_zip_min_length():
    assert_equal(P([1, 2, 3]).zip.zip_with(['a', 'b']).to.list(), [(1, 'a'), (2, 'b')])
    assert_equal(P(['a']).zip.zip_with([1, 2, 3], lambda s, n: s * n).to.list(), ['a'])


@test("zip with an endless sequence")
def test_zip_infinite():
    result = P(['x', 'y', 'z']).zip.zip_with(itertools.count(), lambda s, i: f"{i}:{s}").to.list()
    assert_equal(result, ['0:x', '1:y', '2:z'])


@test("zip_longest pads the shorter side with defaults")
def test_zip_longest():
    assert_equal(P([1, 2, 3]).zip.zip_longest_with(['a']).to.list(), [(1, 'a'), (2, None), (3, None)])
    result = P([1]).zip.zip_longest_with([10, 20], lambda a, b: a + b, default_self=0).to.list()
    assert_equal(result, [11, 20])


# --- reverse ---

@test("reverse returns elements back to front")
def test_reverse_basic():
    assert_equal(P(sample).reverse().to.list(), [6, 2, 9, 5, 1, 4, 1, 3])
    assert_equal(empty().reverse().to.list(), [])


@test("reversing twice restores the original order")
def test_reverse_twice():
    assert_equal(P(sample).reverse().reverse().to.list(), sample)
    generated = P(x for x in sample)
    assert_equal(generated.reverse().reverse().to.list(), sample)


@test("reverse over a list is a live view")
def test_reverse_list_view():
    data = [1, 2, 3]
    reversed_data = P(data).reverse()
    data.append(4)
    assert_equal(reversed_data.to.list(), [4, 3, 2, 1])
    assert_that(backward_view(reversed_data) is not None, "reversed view should itself walk backwards")


@test("reverse over a forward-only source buffers it once")
def test_reverse_generator():
    pulled = []
    source = P(pulled.append(x) or x for x in range(4))
    reversed_source = source.reverse()
    assert_equal(pulled, [], "nothing is buffered before the first pull")
    assert_equal(reversed_source.to.list(), [3, 2, 1, 0])
    assert_equal(reversed_source.to.list(), [3, 2, 1, 0])
    assert_equal(pulled, [0, 1, 2, 3])


@test("descriptor form of reverse accepts plain lists")
def test_reverse_descriptor():
    assert_equal(reverse()(['a', 'b']).to.list(), ['b', 'a'])


@test("backward capability probe")
def test_backward_view_probe():
    assert_that(backward_view([1, 2]) is not None, "lists walk backwards")
    assert_that(backward_view(range(3)) is not None, "ranges walk backwards")
    assert_that(backward_view(iter([1, 2])) is None, "iterators are forward only")
    assert_that(backward_view(P([1]).where(lambda x: True)) is None, "filtered sequences are forward only")


# --- last ---

@test("last walks a list from its end")
def test_last_backward():
    assert_equal(P(sample).to.last(), 6)
    calls = []
    assert_equal(last(sample, counted(lambda x: x % 2 == 0, calls)), 6)
    assert_equal(calls, [6], "predicate should only see the final element")


@test("last scans a forward-only source to the end")
def test_last_forward():
    calls = []
    source = P(x for x in [1, 2, 3])
    assert_equal(source.to.last(counted(lambda x: x < 3, calls)), 2)
    assert_equal(calls, [1, 2, 3])


@test("last distinguishes empty sequences from missing matches")
def test_last_errors():
    with assert_raises(EmptySequenceError):
        empty().to.last()
    with assert_raises(OutOfRangeError):
        P([1, 3]).to.last(lambda x: x % 2 == 0)
    with assert_raises(OutOfRangeError):
        P(x for x in [1, 3]).to.last(lambda x: x > 5)


@test("last_or_default substitutes the default")
def test_last_or_default():
    assert_equal(P(sample).to.last_or_default(), 6)
    assert_equal(empty().to.last_or_default(), None)
    assert_equal(last_or_default([1, 3], lambda x: x % 2 == 0, default=-1), -1)
    assert_equal(P(sample).where(lambda x: x < 3).to.last_or_default(), 2)


@test("last of a reversed sequence is the first element")
def test_last_of_reversed():
    assert_equal(P(sample).reverse().to.last(), 3)
    assert_equal(P(x for x in sample).reverse().to.last(), 3)


if __name__ == "__main__":
    suite.run(title="lazinq combination and positional test suite")
