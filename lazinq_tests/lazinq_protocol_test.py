import copy
import logging
import suite
from lazinq import (
    P, END, Cursor, MemoizedSource, OperatorReuseError, Settings, configure, get_settings
)
from lazinq import operators as ops
from lazinq.state import BufferState, buffer_producer

test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal
assert_raises = suite.assert_raises


class CountingIterable:
    def __init__(self, items):
        self.items = list(items)
        self.passes = 0

    def __iter__(self):
        self.passes += 1
        return iter(self.items)


class RecordingHandler(logging.Handler):
    def __init__(self):
        super().__init__(level=logging.DEBUG)
        self.messages = []

    def emit(self, record):
        self.messages.append(record.getMessage())


def list_producer(items, calls):
    iterator = iter(items)

    def next_item():
        calls.append(1)
        return next(iterator, END)

    return next_item


# --- pull protocol ---

@test("the end marker is a falsy singleton")
def test_end_marker():
    assert_that(not END, "END should be falsy")
    assert_equal(repr(END), 'END')
    assert_that(copy.deepcopy(END) is END, "END should survive copying")


@test("a cursor stops pulling once its producer signalled the end")
def test_cursor_stops_after_end():
    calls = []
    cursor = Cursor(list_producer([1, 2], calls))
    assert_equal(list(cursor), [1, 2])
    assert_equal(len(calls), 3, "two elements and one end signal")
    with assert_raises(StopIteration):
        next(cursor)
    assert_equal(len(calls), 3, "an exhausted cursor must not call its producer")


@test("cursors over the same sequence are independent")
def test_interleaved_cursors():
    query = P([1, 2, 3, 4]).where(lambda x: x % 2 == 0).select(lambda x: x * 10)
    first, second = iter(query), iter(query)
    assert_equal(next(first), 20)
    assert_equal(next(second), 20)
    assert_equal(next(first), 40)
    assert_equal(list(second), [40])
    assert_equal(list(first), [])


@test("building a pipeline never calls user code")
def test_construction_is_inert():
    calls = []

    def track(name):
        def callback(*args):
            calls.append(name)
            return args[0] if len(args) == 1 else args
        return callback

    source = CountingIterable(range(10))
    (P(source)
     .where(track('where'))
     .select(track('select'))
     .take_while(track('take_while'))
     .order_by(track('order_by'))
     .then_by(track('then_by'))
     .set.distinct(track('distinct'))
     .set.except_([3])
     .join.group_join([1, 2], track('outer'), track('inner'))
     .group.group_by(track('group_key'))
     .reverse())
    assert_equal(calls, [])
    assert_equal(source.passes, 0)


# --- shared state ---

@test("shared state is built once per application")
def test_state_built_once():
    source = CountingIterable([3, 1, 2])
    ordered = P(source).order_by(lambda x: x)
    for _ in range(3):
        assert_equal(ordered.to.list(), [1, 2, 3])
    assert_equal(source.passes, 1)


@test("separate applications own separate state")
def test_state_per_application():
    source = CountingIterable([3, 1, 2])
    base = P(source)
    ascending = base.order_by(lambda x: x)
    descending = base.order_by_descending(lambda x: x)
    assert_equal(ascending.to.list(), [1, 2, 3])
    assert_equal(descending.to.list(), [3, 2, 1])
    assert_equal(source.passes, 2)


@test("a build that fails is attempted again on the next pull")
def test_failed_build_retried():
    attempts = []

    def fill():
        attempts.append(1)
        if len(attempts) == 1:
            raise RuntimeError("source unavailable")
        return ['ok']

    state = BufferState('flaky', fill)
    with assert_raises(RuntimeError):
        next(Cursor(buffer_producer(state)))
    assert_that(not state.is_built, "failed build must not be marked as built")
    assert_equal(list(Cursor(buffer_producer(state))), ['ok'])
    assert_equal(state.build_count, 1)
    assert_equal(len(attempts), 2)


# --- operator descriptors ---

@test("a descriptor can be applied exactly once")
def test_operator_reuse():
    evens = ops.where(lambda x: x % 2 == 0)
    assert_that(not evens.applied, "fresh descriptor is pending")
    assert_equal(evens([1, 2, 3, 4]).to.list(), [2, 4])
    assert_that(evens.applied, "descriptor should be marked as applied")
    with assert_raises(OperatorReuseError) as caught:
        evens([6, 8])
    assert_equal(caught['error'].operator_name, 'where')


@test("descriptors refuse to be copied")
def test_operator_copy():
    descriptor = ops.take(2)
    with assert_raises(TypeError):
        copy.copy(descriptor)
    with assert_raises(TypeError):
        copy.deepcopy(descriptor)


@test("descriptors compose through Enumerable.apply")
def test_apply():
    result = (P(range(10))
              .apply(ops.where(lambda x: x > 2))
              .apply(ops.select_with_index(lambda x, i: x * i))
              .apply(ops.take(3))
              .to.list())
    assert_equal(result, [0, 4, 10])


@test("the functional form accepts plain iterables")
def test_descriptor_on_plain_iterables():
    assert_equal(ops.distinct()([1, 1, 2]).to.list(), [1, 2])
    assert_equal(ops.zip_with('ab')(range(5)).to.list(), [(0, 'a'), (1, 'b')])
    assert_equal(ops.skip_while(lambda c: c == ' ')('  hi').to.list(), ['h', 'i'])


# --- replay buffer ---

@test("memoized source pulls lazily and replays cached elements")
def test_memoized_source():
    pulled = []
    memo = MemoizedSource(pulled.append(x) or x for x in range(5))
    first = iter(memo)
    assert_equal([next(first), next(first)], [0, 1])
    assert_equal(pulled, [0, 1])
    assert_equal(list(memo), [0, 1, 2, 3, 4])
    assert_equal(list(first), [2, 3, 4])
    assert_equal(pulled, [0, 1, 2, 3, 4])
    assert_that('complete' in repr(memo), "source should be reported as fully read")


# --- configuration and logging ---

@test("settings are read from the environment")
def test_settings_from_env():
    settings = Settings.from_env({'LAZINQ_LOG_LEVEL': 'debug', 'LAZINQ_TRACE_PULLS': 'yes'})
    assert_equal(settings, Settings(log_level='DEBUG', trace_pulls=True))
    assert_equal(Settings.from_env({}), Settings())


@test("configure rejects unknown log levels and keeps the old settings")
def test_configure_invalid_level():
    before = get_settings()
    with assert_raises(ValueError):
        configure(log_level='LOUD')
    assert_equal(get_settings(), before)


@test("configure accepts log levels in any case")
def test_configure_lowercase_level():
    previous = get_settings()
    try:
        assert_equal(configure(log_level='debug').log_level, 'DEBUG')
        assert_equal(logging.getLogger('lazinq').level, logging.DEBUG)
    finally:
        configure(log_level=previous.log_level)


@test("pull tracing and state builds are logged at debug level")
def test_trace_logging():
    previous = get_settings()
    handler = RecordingHandler()
    package_logger = logging.getLogger('lazinq')
    package_logger.addHandler(handler)
    try:
        configure(log_level='DEBUG', trace_pulls=True)
        assert_equal(P([2, 1]).order_by(lambda x: x).to.list(), [1, 2])
    finally:
        package_logger.removeHandler(handler)
        configure(log_level=previous.log_level, trace_pulls=previous.trace_pulls)

    assert_that(any('built shared state for order_by' in m for m in handler.messages), "build should be logged")
    assert_that(any('pull 1 -> 1' in m for m in handler.messages), "pulls should be traced")
    assert_that(any('exhausted after 3 pulls' in m for m in handler.messages), "exhaustion should be traced")
    assert_equal(logging.getLogger('lazinq').level, logging.getLevelName(previous.log_level))


@test("rejected descriptor reuse is logged as a warning")
def test_reuse_warning_logged():
    handler = RecordingHandler()
    package_logger = logging.getLogger('lazinq')
    package_logger.addHandler(handler)
    try:
        descriptor = ops.reverse()
        descriptor([1])
        with assert_raises(OperatorReuseError):
            descriptor([1])
    finally:
        package_logger.removeHandler(handler)
    assert_that(any("'reverse'" in m for m in handler.messages), "warning should name the operator")


if __name__ == "__main__":
    suite.run(title="lazinq pull protocol test suite")
