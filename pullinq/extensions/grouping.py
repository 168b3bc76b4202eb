from __future__ import annotations
import typing
from itertools import batched
from ..types import *
from ..functions import to_selector_safe, to_equality_comparer_safe, to_count_safe

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable, Grouping

class _Bucket(Generic[K, T]):
    """one key and the items collected for it, in arrival order"""
    __slots__ = ('key', 'items')

    def __init__(self, key: K):
        self.key = key
        self.items: List[T] = []


def collect_buckets(source: Iterable[T], key_selector: KeySelector[T, K],
                    key_comparer: EqualityComparer[K]) -> List[_Bucket[K, T]]:
    """
    drains source into buckets in first-seen key order.
    bucket lookup is a linear scan with key_comparer, so keys need not be hashable.
    """
    buckets: List[_Bucket[K, T]] = []
    for item in source:
        key = key_selector(item)
        bucket = next((b for b in buckets if key_comparer(key, b.key)), None)
        if bucket is None:
            bucket = _Bucket(key)
            buckets.append(bucket)
        bucket.items.append(item)
    return buckets


class GroupingAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def group_by(self, key_selector: Optional[KeySelector[T, K]] = None,
                 key_comparer: Union[EqualityComparer[K], bool, None] = None) -> 'Enumerable[Grouping[K, T]]':
        """
        group elements by a key. the whole source is drained before the first group
        comes out, since a late item can still belong to an early group.
        """
        from ..enumerable import Enumerable, Grouping
        key_selector = to_selector_safe(key_selector)
        key_comparer = to_equality_comparer_safe(key_comparer)
        def group_data():
            for bucket in collect_buckets(self._enumerable, key_selector, key_comparer):
                yield Grouping(bucket.key, bucket.items)
        return Enumerable(group_data)

    def chunk(self, size: int = 1) -> 'Enumerable[Enumerable[T]]':
        """
        split into resettable sub-sequences of up to 'size' elements.
        each chunk is pulled only when requested; the last one may be shorter.
        """
        from ..enumerable import Enumerable
        size = to_count_safe(size)
        if size <= 0:
            raise ValueError("chunk size must be positive")
        def chunk_data():
            for batch in batched(self._enumerable, size):
                yield Enumerable.from_items(list(batch))
        return Enumerable(chunk_data)
