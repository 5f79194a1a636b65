from __future__ import annotations
import logging
import typing
from ..errors import OperatorReuseError
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

logger = logging.getLogger(__name__)


class Operator(Generic[T]):
    """
    one-shot descriptor capturing an operator's parameters.

    calling the descriptor with a sequence applies it and returns a new lazy
    enumerable. applying never calls user code; that only happens when the
    result is pulled. a descriptor can be applied once: parameters belong to the
    application that consumed them, so a second application raises
    OperatorReuseError. descriptors cannot be copied either.
    """
    name = 'operator'

    def __init__(self):
        self._applied = False

    @property
    def applied(self) -> bool:
        return self._applied

    def __call__(self, source: Iterable[T]) -> 'Enumerable[Any]':
        from ..factories import from_iterable
        if self._applied:
            logger.warning("rejected second application of '%s'", self.name)
            raise OperatorReuseError(self.name)
        self._applied = True
        return self._apply(from_iterable(source))

    def _apply(self, source: 'Enumerable[T]') -> 'Enumerable[Any]':
        raise NotImplementedError

    def __copy__(self):
        raise TypeError(f"operator '{self.name}' cannot be copied")

    def __deepcopy__(self, memo):
        raise TypeError(f"operator '{self.name}' cannot be copied")

    def __repr__(self) -> str:
        state = 'applied' if self._applied else 'pending'
        return f"{type(self).__name__}({state})"
