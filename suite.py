"""
tiny test runner used by the lazinq test files.

tests register with @test("description") and are executed by run(). test
functions keep their test_ names, so pytest can collect the same files.
"""
import time
import traceback
from contextlib import contextmanager
from functools import wraps
from typing import List, Dict, Any, Callable, Iterator, Type

_suite_state: Dict[str, List[Dict[str, Any]]] = {
    'tests': [],
    'results': []
}

PASS_MARK = '(^ ω ^)'
FAIL_MARK = '(ﾉಥДಥ)ﾉ'


class _c:
    ok = '\033[92m'
    fail = '\033[91m'
    warn = '\033[93m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


class TestAssertionError(AssertionError):
    """assertion failure raised by the helpers below."""
    pass

# --- registration and assertions ---

def test(description: str) -> Callable:
    """decorator to register a function as a test case."""

    def decorator(func: Callable) -> Callable:
        _suite_state['tests'].append({'func': func, 'description': description})

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        return wrapper

    return decorator


# keep pytest from collecting the decorator itself
test.__test__ = False


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    if not condition:
        raise TestAssertionError(message)


def assert_equal(actual: Any, expected: Any, message: str = "") -> None:
    if actual != expected:
        detail = f"expected {expected!r}, got {actual!r}"
        raise TestAssertionError(f"{message}: {detail}" if message else detail)


@contextmanager
def assert_raises(error_type: Type[BaseException], message: str = "") -> Iterator[Dict[str, Any]]:
    """context manager failing unless the block raises error_type; the error is stored under 'error'"""
    caught: Dict[str, Any] = {}
    try:
        yield caught
    except error_type as e:
        caught['error'] = e
        return
    raise TestAssertionError(message or f"expected {error_type.__name__} to be raised")

# --- running ---

def run(title: str = "test run", verbose_errors: bool = False) -> bool:
    """executes all registered tests, prints a report and returns true when everything passed."""
    print(f"\n{_c.info}--- starting: {title} ---{_c.reset}")
    start_time = time.perf_counter()
    results = []

    for test_item in _suite_state['tests']:
        description = test_item['description']
        error = None
        try:
            test_item['func']()
        except TestAssertionError as e:
            error = f"assertion failed: {e}"
        except Exception as e:
            error = f"{type(e).__name__}: {e}"
            if verbose_errors:
                traceback.print_exc()

        results.append({'passed': error is None, 'description': description, 'error': error})
        if error is None:
            print(f"  {_c.ok}✔ pass{_c.reset}  {PASS_MARK}  {description}")
        else:
            print(f"  {_c.fail}✖ fail{_c.reset}  {FAIL_MARK}  {description}")
            print(f"    {_c.grey}└─> {error}{_c.reset}")

    _suite_state['results'] = results
    # clear tests after run to allow for multiple, separate suite runs in a single script
    _suite_state['tests'] = []
    return _print_summary(results, start_time)


def _print_summary(results: List[Dict[str, Any]], start_time: float) -> bool:
    duration = (time.perf_counter() - start_time) * 1000
    failed_count = sum(1 for r in results if not r['passed'])
    summary_color = _c.ok if failed_count == 0 else _c.fail

    print(f"\n{summary_color}--- summary ---{_c.reset}")
    print(f"  ran {_c.info}{len(results)}{_c.reset} tests in {_c.warn}{duration:.2f}ms{_c.reset}")
    print(f"  {_c.ok}passed: {len(results) - failed_count}{_c.reset}, {_c.fail}failed: {failed_count}{_c.reset}")
    print(f"{summary_color}---------------{_c.reset}\n")
    return failed_count == 0
