from __future__ import annotations

from functools import cmp_to_key
from .types import *
from .enumerators import IEnumerator, IteratorEnumerator, ArrayEnumerator, DeferredArrayEnumerator
from .functions import to_selector_safe, to_comparer_safe

# --- core functionality ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.set import SetAccessor
from .extensions.join import JoinAccessor
from .extensions.grouping import GroupingAccessor
from .extensions.stats import StatsAccessor
from .extensions.utility import UtilityAccessor
from .extensions.terminal import TerminalAccessor
from .extensions.zip import ZipAccessor

# --- base enumerable implementation ---

class _BaseEnumerable(Generic[T]):
    def __init__(self, data_func: Optional[Callable[[], Iterable[T]]] = None,
                 enumerator: Optional[IEnumerator[T]] = None):
        """
        init with a function that returns an iterable when first pulled,
        or with a ready enumerator (indexed sources pass one in).
        """
        if enumerator is None:
            enumerator = IteratorEnumerator(data_func if data_func is not None else tuple)
        self._enumerator = enumerator
        self._index = -1
        self._current: Optional[PullResult] = None

    # --- pull protocol ---

    def pull(self) -> PullResult:
        """request the next item. keeps answering done once exhausted."""
        result = self._enumerator.pull()
        self._current = result
        if not result.done:
            self._index += 1
        return result

    def reset(self) -> 'Enumerable[T]':
        """rewind to the first item. raises NotSupportedError for single-pass sequences."""
        self._enumerator.reset()
        self._index = -1
        self._current = None
        return self

    @property
    def can_reset(self) -> bool:
        return self._enumerator.can_reset

    @property
    def index(self) -> int:
        """zero based index of the last pulled item, -1 before the first pull"""
        return self._index

    @property
    def current(self) -> Optional[PullResult]:
        return self._current

    # a sequence is its own iterator, so `for` loops consume it through pull().
    # no __len__ on purpose: list() would call it for a length hint and drain the source.

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        result = self.pull()
        if result.done:
            raise StopIteration
        return result.value

# --- main enumerable class ---

class Enumerable(
    _BaseEnumerable[T],
    _CoreOperations[T]
):
    """a lazy, pull based, linq-inspired sequence."""
    def __init__(self, data_func: Optional[Callable[[], Iterable[T]]] = None,
                 enumerator: Optional[IEnumerator[T]] = None):
        super().__init__(data_func, enumerator)
        # --- initialize accessors ---
        self.set = SetAccessor(self)
        self.join = JoinAccessor(self)
        self.zip = ZipAccessor(self)
        self.group = GroupingAccessor(self)
        self.stats = StatsAccessor(self)
        self.util = UtilityAccessor(self)
        self.to = TerminalAccessor(self)

    @classmethod
    def from_items(cls, items: Sequence[T]) -> 'Enumerable[T]':
        """resettable sequence over an indexed collection"""
        return cls(enumerator=ArrayEnumerator(items))

# --- grouping ---

class Grouping(Enumerable[T], Generic[K, T]):
    """the items sharing one key. the items can be re-read after reset()."""

    def __init__(self, key: K, items: Sequence[T]):
        super().__init__(enumerator=ArrayEnumerator(items))
        self._key = key

    @property
    def key(self) -> K:
        return self._key

    def __repr__(self) -> str:
        return f"Grouping(key={self._key!r})"

# --- ordered enumerable class ---

class _OriginalItems(Generic[T]):
    """the unsorted input of an order_by chain, pulled once and shared by every then_by level"""

    def __init__(self, source: Enumerable[T]):
        self._source = source
        self._items: Optional[List[T]] = None

    def get(self) -> List[T]:
        if self._items is None:
            self._items = list(self._source)
        return self._items


class OrderedEnumerable(Enumerable[T]):
    """
    represents a sorted sequence, allowing for subsequent orderings.
    nothing is pulled from the source until the first item is requested; then the
    whole source is materialized, decorated with its sort keys and stable-sorted.
    """

    def __init__(self, source: Union[Enumerable[T], _OriginalItems[T]],
                 selector: Optional[Selector[T, Any]] = None,
                 comparer: Optional[Comparer[Any]] = None):
        self._original_items = source if isinstance(source, _OriginalItems) else _OriginalItems(source)
        self._order_selector = to_selector_safe(selector)
        self._order_comparer = to_comparer_safe(comparer)
        super().__init__(enumerator=DeferredArrayEnumerator(self._sort_items))

    def _sort_items(self) -> List[T]:
        decorated = [(self._order_selector(item), item) for item in self._original_items.get()]
        compare = self._order_comparer
        # list.sort is stable, equal keys keep their source order in both directions
        decorated.sort(key=cmp_to_key(lambda x, y: compare(x[0], y[0])))
        return [item for _, item in decorated]

    @property
    def selector(self) -> Selector[T, Any]:
        return self._order_selector

    @property
    def comparer(self) -> Comparer[Any]:
        return self._order_comparer

    def then_by(self, selector: Optional[Selector[T, Any]] = None,
                comparer: Optional[Comparer[Any]] = None) -> 'OrderedEnumerable[T]':
        """
        secondary sort ascending. re-sorts the original, unsorted items with a
        composite (previous key, new key) compared level by level.
        """
        selector = to_selector_safe(selector)
        comparer = to_comparer_safe(comparer)
        previous_selector = self._order_selector
        previous_comparer = self._order_comparer

        def composite_key(item: T) -> Tuple[Any, Any]:
            return previous_selector(item), selector(item)

        def composite_comparer(x: Tuple[Any, Any], y: Tuple[Any, Any]) -> int:
            result = previous_comparer(x[0], y[0])
            if result != 0:
                return result
            return comparer(x[1], y[1])

        return OrderedEnumerable(self._original_items, composite_key, composite_comparer)

    def then_by_descending(self, selector: Optional[Selector[T, Any]] = None,
                           comparer: Optional[Comparer[Any]] = None) -> 'OrderedEnumerable[T]':
        """secondary sort descending"""
        comparer = to_comparer_safe(comparer)
        return self.then_by(selector, lambda x, y: comparer(y, x))

    def then(self, comparer: Optional[Comparer[T]] = None) -> 'OrderedEnumerable[T]':
        """secondary sort by the items themselves"""
        return self.then_by(None, comparer)

    def then_descending(self, comparer: Optional[Comparer[T]] = None) -> 'OrderedEnumerable[T]':
        return self.then_by_descending(None, comparer)
