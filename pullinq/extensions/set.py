from __future__ import annotations
import typing
from ..types import *
from ..functions import to_selector_safe, to_equality_comparer_safe

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class SetAccessor(Generic[T]):
    """
    set-theoretic operations driven by an equality comparer instead of hashing,
    so unhashable items and custom equality work. every comparer argument takes
    a function (x, y) -> bool, None for ==, or True for strict (same type) equality.
    """
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def distinct(self, comparer: Union[EqualityComparer[T], bool, None] = None) -> 'Enumerable[T]':
        """return distinct elements. preserves order of first appearance."""
        return self.distinct_by(None, comparer)

    def distinct_by(self, selector: Optional[KeySelector[T, K]],
                    comparer: Union[EqualityComparer[K], bool, None] = None) -> 'Enumerable[T]':
        """return the first element of every distinct key"""
        from ..enumerable import Enumerable
        selector = to_selector_safe(selector)
        comparer = to_equality_comparer_safe(comparer)
        def distinct_data():
            seen_keys: List[K] = []
            for item in self._enumerable:
                key = selector(item)
                if any(comparer(key, seen) for seen in seen_keys):
                    continue
                seen_keys.append(key)
                yield item
        return Enumerable(distinct_data)

    def union(self, other: Iterable[T],
              comparer: Union[EqualityComparer[T], bool, None] = None) -> 'Enumerable[T]':
        """return the order-preserving union of two sequences (distinct elements)."""
        return self._enumerable.concat(other).set.distinct(comparer)

    def _distinct_list(self, other: Iterable[T]) -> List[T]:
        from ..factories import from_iterable
        return from_iterable(other).set.distinct().to.list()

    def intersect(self, other: Iterable[T],
                  comparer: Union[EqualityComparer[T], bool, None] = None) -> 'Enumerable[T]':
        """elements that also occur in other. duplicates of this sequence are kept."""
        from ..enumerable import Enumerable
        comparer = to_equality_comparer_safe(comparer)
        def intersect_data():
            # other is buffered on the first pull, not when the operator is built
            second = self._distinct_list(other)
            for item in self._enumerable:
                if any(comparer(item, second_item) for second_item in second):
                    yield item
        return Enumerable(intersect_data)

    def except_(self, other: Iterable[T],
                comparer: Union[EqualityComparer[T], bool, None] = None) -> 'Enumerable[T]':
        """return elements from the first sequence not in the second (set difference)."""
        from ..enumerable import Enumerable
        comparer = to_equality_comparer_safe(comparer)
        def except_data():
            second = self._distinct_list(other)
            for item in self._enumerable:
                if not any(comparer(item, second_item) for second_item in second):
                    yield item
        return Enumerable(except_data)
