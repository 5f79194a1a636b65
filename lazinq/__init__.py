r"""
'  _      _   ___ ___ _  _  ___
' | |    /_\ |_  )_ _| \| |/ _ \
' | |__ / _ \ / / | || .` | (_) |
' |____/_/ \_\/___|___|_|\_|\__\_\
"""
import logging

# library logging stays silent unless the application configures handlers
logging.getLogger(__name__).addHandler(logging.NullHandler())

from .config import Settings, configure, get_settings

# expose the main classes
from .enumerable import Enumerable, OrderedEnumerable

# expose the factory functions
from .factories import (
    from_iterable,
    from_range,
    repeat,
    empty,
    generate,
    lazinq,
    P,
)

# expose the pull protocol and errors
from .sequence import END, Cursor
from .errors import LinqError, EmptySequenceError, OutOfRangeError, OperatorReuseError
from .types import MemoizedSource

# define what `import *` does
__all__ = [
    "Enumerable",
    "OrderedEnumerable",
    "from_iterable",
    "from_range",
    "repeat",
    "empty",
    "generate",
    "lazinq",
    "P",
    "END",
    "Cursor",
    "LinqError",
    "EmptySequenceError",
    "OutOfRangeError",
    "OperatorReuseError",
    "MemoizedSource",
    "Settings",
    "configure",
    "get_settings",
]
