from __future__ import annotations
import typing
import random
from itertools import count as itertools_count
from ..types import *
from ..functions import UNSET, to_predicate_safe, to_selector_safe, to_comparer_safe, to_count_safe

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable, OrderedEnumerable

class _CoreOperations(Generic[T]):
    def where(self: 'Enumerable[T]', predicate: Optional[Predicate[T]] = None) -> 'Enumerable[T]':
        """filter elements based on a predicate. a non-callable predicate acts as a constant."""
        from ..enumerable import Enumerable
        predicate = to_predicate_safe(predicate)
        def where_data():
            for item in self:
                if predicate(item):
                    yield item
        return Enumerable(where_data)

    def select(self: 'Enumerable[T]', selector: Optional[Selector[T, U]] = None) -> 'Enumerable[U]':
        """project each element to a new form"""
        selector = to_selector_safe(selector)
        return self.select_many(lambda item: (selector(item),))

    def select_many(self: 'Enumerable[T]', selector: Optional[Selector[T, Iterable[U]]] = None) -> 'Enumerable[U]':
        """project and flatten sequences. each sub-sequence is drained before the next upstream pull."""
        from ..enumerable import Enumerable
        from ..factories import from_iterable
        if selector is None:
            selector = lambda item: (item,)
        def select_many_data():
            for item in self:
                yield from from_iterable(selector(item))
        return Enumerable(select_many_data)

    def take(self: 'Enumerable[T]', count: int = 1) -> 'Enumerable[T]':
        """take the first 'count' elements. never pulls past the last one taken."""
        from ..enumerable import Enumerable
        count = to_count_safe(count)
        def take_data():
            remaining = count
            while remaining > 0:
                result = self.pull()
                if result.done:
                    return
                remaining -= 1
                yield result.value
        return Enumerable(take_data)

    def take_while(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """take elements while predicate is true, stop for good at the first miss"""
        from ..enumerable import Enumerable
        predicate = to_predicate_safe(predicate)
        def take_while_data():
            for item in self:
                if not predicate(item):
                    return
                yield item
        return Enumerable(take_while_data)

    def skip(self: 'Enumerable[T]', count: int = 1) -> 'Enumerable[T]':
        """skip the first 'count' elements"""
        remaining = itertools_count(to_count_safe(count), -1)
        return self.skip_while(lambda item: next(remaining) > 0)

    def skip_while(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """skip elements while predicate is true, then yield everything unconditionally"""
        from ..enumerable import Enumerable
        predicate = to_predicate_safe(predicate)
        def skip_while_data():
            returning = False
            for item in self:
                if not returning and not predicate(item):
                    returning = True
                if returning:
                    yield item
        return Enumerable(skip_while_data)

    def skip_last(self: 'Enumerable[T]') -> 'Enumerable[T]':
        """every element except the last one"""
        from ..enumerable import Enumerable
        def skip_last_data():
            held = UNSET
            for item in self:
                if held is not UNSET:
                    yield held
                held = item
        return Enumerable(skip_last_data)

    def concat(self: 'Enumerable[T]', *sequences: Iterable[U]) -> 'Enumerable[Union[T, U]]':
        """this sequence followed by each argument sequence in order"""
        return self.concat_array(sequences)

    def concat_array(self: 'Enumerable[T]', sequences: Iterable[Iterable[U]]) -> 'Enumerable[Union[T, U]]':
        from ..enumerable import Enumerable
        from ..factories import from_iterable
        def concat_data():
            yield from self
            for sequence in sequences or ():
                yield from from_iterable(sequence)
        return Enumerable(concat_data)

    def append(self: 'Enumerable[T]', *sequences: Iterable[U]) -> 'Enumerable[Union[T, U]]':
        """alias of concat"""
        return self.concat_array(sequences)

    def append_array(self: 'Enumerable[T]', sequences: Iterable[Iterable[U]]) -> 'Enumerable[Union[T, U]]':
        return self.concat_array(sequences)

    def prepend(self: 'Enumerable[T]', *sequences: Iterable[U]) -> 'Enumerable[Union[T, U]]':
        """each argument sequence in order, followed by this sequence"""
        return self.prepend_array(sequences)

    def prepend_array(self: 'Enumerable[T]', sequences: Iterable[Iterable[U]]) -> 'Enumerable[Union[T, U]]':
        from ..enumerable import Enumerable
        from ..factories import from_iterable
        def prepend_data():
            for sequence in sequences or ():
                yield from from_iterable(sequence)
            yield from self
        return Enumerable(prepend_data)

    def default_if_empty(self: 'Enumerable[T]', *default_items: T) -> 'Enumerable[T]':
        """the elements of the sequence, or default_items if it has none"""
        return self.default_sequence_if_empty(default_items)

    def default_sequence_if_empty(self: 'Enumerable[T]', default_sequence: Iterable[T]) -> 'Enumerable[T]':
        from ..enumerable import Enumerable
        from ..factories import from_iterable
        def default_data():
            has_items = False
            for item in self:
                has_items = True
                yield item
            if not has_items:
                yield from from_iterable(default_sequence)
        return Enumerable(default_data)

    def of_type(self: 'Enumerable[T]', type_filter: Union[Type[U], Tuple[Type, ...]]) -> 'Enumerable[U]':
        """filters the elements of a sequence based on a specified type"""
        return self.where(lambda item: isinstance(item, type_filter))

    def not_(self: 'Enumerable[T]', predicate: Any = UNSET) -> 'Enumerable[T]':
        """inverse of where. without a predicate the falsy elements are kept."""
        if predicate is UNSET:
            return self.where(lambda item: not item)
        predicate = to_predicate_safe(predicate)
        return self.where(lambda item: not predicate(item))

    def not_empty(self: 'Enumerable[T]') -> 'Enumerable[T]':
        """keeps the truthy elements"""
        return self.where(lambda item: bool(item))

    # --- ordering ---

    def order_by(self: 'Enumerable[T]', selector: Optional[Selector[T, K]] = None,
                 comparer: Optional[Comparer[K]] = None) -> 'OrderedEnumerable[T]':
        """stable sort by a key"""
        from ..enumerable import OrderedEnumerable
        return OrderedEnumerable(self, selector, comparer)

    def order_by_descending(self: 'Enumerable[T]', selector: Optional[Selector[T, K]] = None,
                            comparer: Optional[Comparer[K]] = None) -> 'OrderedEnumerable[T]':
        """stable sort by a key in descending order (the comparer arguments are swapped)"""
        comparer = to_comparer_safe(comparer)
        return self.order_by(selector, lambda x, y: comparer(y, x))

    def order(self: 'Enumerable[T]', comparer: Optional[Comparer[T]] = None) -> 'OrderedEnumerable[T]':
        """sort the elements themselves"""
        return self.order_by(None, comparer)

    def order_descending(self: 'Enumerable[T]', comparer: Optional[Comparer[T]] = None) -> 'OrderedEnumerable[T]':
        return self.order_by_descending(None, comparer)

    def reverse(self: 'Enumerable[T]') -> 'OrderedEnumerable[T]':
        """inverts the order of the elements: descending by arrival index"""
        arrival = itertools_count()
        return self.order_by_descending(lambda item: next(arrival))

    def shuffle(self: 'Enumerable[T]', sort_value_provider: Optional[Callable[[], Any]] = None) -> 'OrderedEnumerable[T]':
        """random order, one sort value per element"""
        provider = sort_value_provider if sort_value_provider is not None else random.random
        return self.order_by(lambda item: provider())

    def make_resettable(self: 'Enumerable[T]') -> 'Enumerable[T]':
        """this sequence if it can reset, otherwise a resettable copy of its remaining items"""
        from ..enumerable import Enumerable
        if self.can_reset:
            return self
        return Enumerable.from_items(list(self))
