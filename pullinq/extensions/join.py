from __future__ import annotations
import typing
from ..types import *
from ..functions import identity, to_equality_comparer_safe, loose_equals
from .grouping import collect_buckets

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


def _resolve_key_selectors(outer_key_selector: Optional[KeySelector[Any, Any]],
                           inner_key_selector: Optional[KeySelector[Any, Any]]) -> Tuple[KeySelector[Any, Any], KeySelector[Any, Any]]:
    """both missing -> identity for both, one missing -> reuse the other"""
    if outer_key_selector is None and inner_key_selector is None:
        return identity, identity
    if outer_key_selector is None:
        return inner_key_selector, inner_key_selector
    if inner_key_selector is None:
        return outer_key_selector, outer_key_selector
    return outer_key_selector, inner_key_selector


class JoinAccessor(Generic[T]):
    """
    joins over key buckets. both sides are bucketed by key in first-seen order,
    then outer buckets are walked in order and matched against every inner bucket.
    """
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def _matching_buckets(self, inner: Iterable[U], outer_key_selector, inner_key_selector, key_comparer):
        from ..factories import from_iterable
        outer_key_selector, inner_key_selector = _resolve_key_selectors(outer_key_selector, inner_key_selector)
        key_comparer = to_equality_comparer_safe(key_comparer)
        outer_buckets = collect_buckets(self._enumerable, outer_key_selector, loose_equals)
        inner_buckets = collect_buckets(from_iterable(inner), inner_key_selector, loose_equals)
        for outer_bucket in outer_buckets:
            for inner_bucket in inner_buckets:
                if key_comparer(outer_bucket.key, inner_bucket.key):
                    yield outer_bucket, inner_bucket

    def join(self, inner: Iterable[U],
             outer_key_selector: Optional[KeySelector[T, K]] = None,
             inner_key_selector: Optional[KeySelector[U, K]] = None,
             result_selector: Optional[Callable[[T, U], V]] = None,
             key_comparer: Union[EqualityComparer[K], bool, None] = None) -> 'Enumerable[V]':
        """inner join: one result per outer item and matching inner item"""
        from ..enumerable import Enumerable
        if result_selector is None:
            result_selector = JoinedItems
        def join_data():
            for outer_bucket, inner_bucket in self._matching_buckets(inner, outer_key_selector,
                                                                     inner_key_selector, key_comparer):
                for outer_item in outer_bucket.items:
                    for inner_item in inner_bucket.items:
                        yield result_selector(outer_item, inner_item)
        return Enumerable(join_data)

    def group_join(self, inner: Iterable[U],
                   outer_key_selector: Optional[KeySelector[T, K]] = None,
                   inner_key_selector: Optional[KeySelector[U, K]] = None,
                   result_selector: Optional[Callable[[T, 'Enumerable[U]'], V]] = None,
                   key_comparer: Union[EqualityComparer[K], bool, None] = None) -> 'Enumerable[V]':
        """group join: one result per outer item with a sequence of all matching inner items"""
        from ..enumerable import Enumerable
        if result_selector is None:
            result_selector = JoinedItems
        def group_join_data():
            for outer_bucket, inner_bucket in self._matching_buckets(inner, outer_key_selector,
                                                                     inner_key_selector, key_comparer):
                for outer_item in outer_bucket.items:
                    yield result_selector(outer_item, Enumerable.from_items(inner_bucket.items))
        return Enumerable(group_join_data)
