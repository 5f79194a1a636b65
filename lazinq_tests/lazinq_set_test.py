import suite
from dgen import from_schema
from lazinq import P, empty

test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal

# --- test data schemas ---
person_schema = {
    'id': ('pyint', {'min_value': 1, 'max_value': 5}),
    'name': 'word',
    'city': {'_qen_provider': 'choice', 'from': ['ny', 'la', 'chi']},
}

sample = [3, 1, 4, 1, 5, 9, 2, 6]


class CountingIterable:
    """re-iterable source recording how many passes were started over it"""
    def __init__(self, items):
        self.items = list(items)
        self.passes = 0

    def __iter__(self):
        self.passes += 1
        return iter(self.items)


def case_insensitive(a, b):
    return a.lower() < b.lower()


# --- distinct ---

@test("distinct keeps first occurrences in order")
def test_distinct_example():
    assert_equal(P(sample).set.distinct().to.list(), [3, 1, 4, 5, 9, 2, 6])


@test("distinct with key selector works on objects")
def test_distinct_with_key():
    people = from_schema(person_schema, seed=42).take(20)
    unique_cities = people.set.distinct(lambda p: p['city']).to.list()
    city_names = P(unique_cities).select(lambda p: p['city']).to.set()
    assert_that(len(city_names) <= 3, "should have at most 3 unique cities")
    assert_that(len(unique_cities) == len(city_names), "each city should appear once")


@test("distinct with an ordering predicate treats equivalent values as duplicates")
def test_distinct_with_less():
    result = P([1.0, 1.2, 2.5, 2.1, 0.3]).set.distinct(less=lambda a, b: int(a) < int(b)).to.list()
    assert_equal(result, [1.0, 2.5, 0.3])


@test("distinct with ordering predicate on strings")
def test_distinct_case_insensitive():
    result = P(['Apple', 'apple', 'Banana', 'APPLE', 'banana']).set.distinct(less=case_insensitive).to.list()
    assert_equal(result, ['Apple', 'Banana'])


@test("distinct handles empty sequences and repeated passes")
def test_distinct_empty_and_repeat():
    assert_equal(empty().set.distinct().to.list(), [])
    query = P([5, 5, 5]).set.distinct()
    assert_equal(query.to.list(), [5])
    assert_equal(query.to.list(), [5], "every pass starts with an empty seen-set")


# --- union ---

@test("union combines sequences removing duplicates")
def test_union_basic():
    assert_equal(P([1, 2]).set.union([2, 3, 4]).to.list(), [1, 2, 3, 4])


@test("union preserves order from first sequence")
def test_union_order():
    assert_equal(P([3, 1, 2]).set.union([2, 4, 1]).to.list(), [3, 1, 2, 4])


@test("union removes duplicates inside each side too")
def test_union_inner_duplicates():
    assert_equal(P([1, 1, 2]).set.union([2, 2, 3, 3]).to.list(), [1, 2, 3])


@test("union equals distinct over concat")
def test_union_is_distinct_concat():
    left, right = [4, 2, 4, 7], [7, 1, 2, 8, 1]
    union = P(left).set.union(right).to.list()
    distinct_concat = P(left).set.concat(right).set.distinct().to.list()
    assert_equal(union, distinct_concat)


@test("union with an ordering predicate")
def test_union_with_less():
    result = P(['a', 'B']).set.union(['b', 'C', 'A'], less=case_insensitive).to.list()
    assert_equal(result, ['a', 'B', 'C'])


# --- except / intersect ---

@test("except keeps elements missing from the second sequence")
def test_except_basic():
    assert_equal(P([1, 2, 3, 4, 1]).set.except_([1, 3]).to.list(), [2, 4])


@test("intersect keeps elements found in the second sequence, duplicates included")
def test_intersect_basic():
    assert_equal(P([1, 2, 3, 4, 1]).set.intersect([3, 1, 1, 1]).to.list(), [1, 3, 1])


@test("except and intersect partition the first sequence")
def test_except_intersect_partition():
    other = [1, 9, 7]
    excepted = P(sample).set.except_(other).to.list()
    intersected = P(sample).set.intersect(other).to.list()
    assert_that(set(excepted).isdisjoint(intersected), "classes must be disjoint")
    assert_equal(sorted(excepted + intersected), sorted(sample))


@test("except with an empty second sequence returns everything")
def test_except_empty_other():
    assert_equal(P(sample).set.except_([]).to.list(), sample)
    assert_equal(P(sample).set.intersect(empty()).to.list(), [])


@test("except and intersect honour a custom ordering predicate")
def test_except_with_less():
    words = P(['Apple', 'banana', 'Cherry'])
    assert_equal(words.set.except_(['apple', 'CHERRY'], less=case_insensitive).to.list(), ['banana'])
    assert_equal(words.set.intersect(['BANANA'], less=case_insensitive).to.list(), ['banana'])


@test("except sorts the second sequence only once per application")
def test_except_buffer_built_once():
    other = CountingIterable([2, 3])
    query = P([1, 2, 3, 4]).set.except_(other)
    assert_equal(other.passes, 0, "nothing should be read before the first pull")
    assert_equal(query.to.list(), [1, 4])
    assert_equal(query.to.list(), [1, 4])
    assert_equal(other.passes, 1)


@test("separate applications build separate buffers")
def test_intersect_independent_applications():
    other = CountingIterable([2, 3])
    first = P([1, 2]).set.intersect(other)
    second = P([3, 4]).set.intersect(other)
    assert_equal(first.to.list(), [2])
    assert_equal(second.to.list(), [3])
    assert_equal(other.passes, 2)


@test("except accepts a one-shot generator as second sequence")
def test_except_generator_other():
    query = P(range(6)).set.except_(x for x in range(0, 6, 2))
    assert_equal(query.to.list(), [1, 3, 5])
    assert_equal(query.to.list(), [1, 3, 5])


if __name__ == "__main__":
    suite.run(title="lazinq set operations test suite")
