r"""
'    ______ _   _ _    _       ___ _   _  _____
'    | ___ \ | | | |  | |     |_ _| \ | ||  _  |
'    | |_/ / | | | |  | |      | ||  \| || | | |
'    |  __/| |_| | |__| |___   | || |\  || \/' /
'    |_|    \___/|____|_____| |___|_| \_| \_/\_\
'
'    lazy, pull based sequences
"""

# expose the main classes
from .enumerable import Enumerable, OrderedEnumerable, Grouping

# expose the factory functions
from .factories import (
    from_iterable,
    create,
    empty,
    from_string,
    from_range,
    repeat,
    build,
    build_many,
    random,
    pop_from,
    shift_from,
    sort,
    sort_desc,
    is_enumerable,
    is_sequence,
    pullinq,
    P,
    p
)

# expose markers, protocol types and errors
from .types import (
    Marker,
    IS_EMPTY,
    NOT_FOUND,
    is_empty,
    not_found,
    PullResult,
    JoinedItems
)
from .enumerators import IEnumerator, IteratorEnumerator, ArrayEnumerator
from .async_driver import AsyncState, AsyncActionContext, AsyncDriver
from .errors import (
    PullinqError,
    ElementNotFoundError,
    MoreThanOneMatchError,
    NotSupportedError,
    ConditionFailedError,
    FunctionError,
    AggregateError,
    AsyncRejectedError
)

# define what `import *` does
__all__ = [
    "Enumerable",
    "OrderedEnumerable",
    "Grouping",
    "from_iterable",
    "create",
    "empty",
    "from_string",
    "from_range",
    "repeat",
    "build",
    "build_many",
    "random",
    "pop_from",
    "shift_from",
    "sort",
    "sort_desc",
    "is_enumerable",
    "is_sequence",
    "pullinq",
    "P",
    "p",
    "Marker",
    "IS_EMPTY",
    "NOT_FOUND",
    "is_empty",
    "not_found",
    "PullResult",
    "JoinedItems",
    "IEnumerator",
    "IteratorEnumerator",
    "ArrayEnumerator",
    "AsyncState",
    "AsyncActionContext",
    "AsyncDriver",
    "PullinqError",
    "ElementNotFoundError",
    "MoreThanOneMatchError",
    "NotSupportedError",
    "ConditionFailedError",
    "FunctionError",
    "AggregateError",
    "AsyncRejectedError"
]
