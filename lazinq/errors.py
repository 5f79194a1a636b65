"""
error types raised by lazinq.

Exception
 └── LinqError
     ├── EmptySequenceError   accessor invoked on a sequence with no elements
     ├── OutOfRangeError      predicate-constrained accessor found nothing
     └── OperatorReuseError   operator descriptor applied more than once

running out of elements is never an error inside the engine; these are only
raised by accessors that must return an element, and by descriptor misuse.
"""


class LinqError(Exception):
    """base class for every error raised by lazinq itself."""
    pass


class EmptySequenceError(LinqError, ValueError):
    def __init__(self, message: str = "sequence contains no elements"):
        super().__init__(message)


class OutOfRangeError(LinqError, IndexError):
    def __init__(self, message: str = "no element satisfies the condition"):
        super().__init__(message)


class OperatorReuseError(LinqError, RuntimeError):
    def __init__(self, operator_name: str):
        self.operator_name = operator_name
        super().__init__(f"operator '{operator_name}' has already been applied to a sequence")
