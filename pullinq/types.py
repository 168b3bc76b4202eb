from enum import Enum
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type, NamedTuple, Sequence
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Comparer = Callable[[T, T], int]
EqualityComparer = Callable[[T, Any], bool]
Accumulator = Callable[[U, T], U]
EachAction = Callable[[T, int], Any]
ItemMessage = Union[str, Callable[[T, int], Any]]
CancelableFactory = Callable[[Callable[..., None], int], U]


class Marker(Enum):
    """
    distinguished results that can never collide with item values.
    IS_EMPTY comes back from aggregates over an empty sequence,
    NOT_FOUND from the "or default" lookups when no default was given.
    """
    IS_EMPTY = 'is_empty'
    NOT_FOUND = 'not_found'

    def __repr__(self) -> str:
        return f"<{self.name}>"


IS_EMPTY = Marker.IS_EMPTY
NOT_FOUND = Marker.NOT_FOUND


def is_empty(value: Any) -> bool:
    """true if value is the empty-sequence marker"""
    return value is Marker.IS_EMPTY


def not_found(value: Any) -> bool:
    """true if value is the not-found marker"""
    return value is Marker.NOT_FOUND


class PullResult(NamedTuple):
    """one answer of the pull protocol. value is None once done is set."""
    done: bool
    value: Any = None


DONE = PullResult(True, None)


class JoinedItems(Generic[T, U]):
    """default result of join / group_join when no result selector is given"""

    def __init__(self, outer: T, inner: U):
        self.outer = outer
        self.inner = inner

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, JoinedItems):
            return NotImplemented
        return self.outer == other.outer and self.inner == other.inner

    def __repr__(self) -> str:
        return f"JoinedItems(outer={self.outer!r}, inner={self.inner!r})"
