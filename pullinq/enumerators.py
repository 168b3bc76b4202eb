"""
the pull protocol. an enumerator answers pull() with a PullResult and is owned by
exactly one Enumerable. once it has reported done it keeps reporting done.
"""
from abc import ABC, abstractmethod

from .errors import NotSupportedError
from .types import *


class IEnumerator(ABC, Generic[T]):
    @abstractmethod
    def pull(self) -> PullResult:
        """produce the next result"""
        pass

    @property
    def can_reset(self) -> bool:
        return False

    def reset(self) -> None:
        raise NotSupportedError(f"{type(self).__name__} is single-pass and cannot be reset")

    def length(self) -> Optional[int]:
        """size of the underlying collection if it is known without pulling"""
        return None


class IteratorEnumerator(IEnumerator[T]):
    """
    single-pass enumerator over an iterator. the iterator is obtained from data_func
    on the first pull, so generator based operators do not start before they are pulled.
    """

    def __init__(self, data_func: Callable[[], Iterable[T]]):
        self._data_func = data_func
        self._iterator: Optional[Iterator[T]] = None
        self._is_done = False

    def pull(self) -> PullResult:
        if self._is_done:
            return DONE
        if self._iterator is None:
            self._iterator = iter(self._data_func())
        try:
            return PullResult(False, next(self._iterator))
        except StopIteration:
            # some iterators resume after StopIteration, latch so they cannot
            self._is_done = True
            self._iterator = None
            return DONE


class ArrayEnumerator(IEnumerator[T]):
    """indexed enumerator over a sequence. reads the collection live and can rewind."""

    def __init__(self, items: Sequence[T]):
        self._items = items
        self._index = -1
        self._is_done = False

    def _get_items(self) -> Sequence[T]:
        return self._items

    def pull(self) -> PullResult:
        if self._is_done:
            return DONE
        items = self._get_items()
        next_index = self._index + 1
        if next_index >= len(items):
            # items appended later are only visible after a reset
            self._is_done = True
            return DONE
        self._index = next_index
        return PullResult(False, items[next_index])

    @property
    def can_reset(self) -> bool:
        return True

    def reset(self) -> None:
        self._index = -1
        self._is_done = False

    def length(self) -> Optional[int]:
        return len(self._get_items())


class DeferredArrayEnumerator(ArrayEnumerator[T]):
    """array enumerator whose items are produced by items_func on first use and kept"""

    def __init__(self, items_func: Callable[[], Sequence[T]]):
        super().__init__([])
        self._items_func = items_func
        self._is_materialized = False

    def _get_items(self) -> Sequence[T]:
        if not self._is_materialized:
            self._items = self._items_func()
            self._is_materialized = True
        return self._items
