from __future__ import annotations
import typing
import operator
import numpy as np
import pandas as pd
from ..types import *
from ..errors import ElementNotFoundError, MoreThanOneMatchError
from ..functions import UNSET, to_predicate_safe, to_equality_comparer_safe, get_or_default_arguments

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable, Grouping

class TerminalAccessor(Generic[T]):
    """operations that drive the sequence and return a plain value"""
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    # --- materialization ---

    def list(self) -> List[T]:
        """convert to list"""
        return [item for item in self._enumerable]

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self.list())

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._enumerable)

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary, later keys overwrite earlier ones"""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._enumerable}

    def object(self, key_selector: Optional[Callable[[T, int], K]] = None) -> Dict[K, T]:
        """map key_selector(item, index) -> item. keys default to the zero based index."""
        if key_selector is None:
            key_selector = lambda item, index: index
        return {key_selector(item, index): item for index, item in enumerate(self._enumerable)}

    def lookup(self, key_selector: Optional[KeySelector[T, K]] = None,
               key_comparer: Union[EqualityComparer[K], bool, None] = None) -> Dict[K, 'Grouping[K, T]']:
        """map each group key to its grouping"""
        return {grouping.key: grouping
                for grouping in self._enumerable.group.group_by(key_selector, key_comparer)}

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self.list())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self.list())

    def string(self, separator: Any = '') -> str:
        """join the string forms of all elements"""
        separator = '' if separator is None else str(separator)
        return separator.join(str(item) for item in self._enumerable)

    # --- counting and tests ---

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        predicate = to_predicate_safe(predicate)
        return sum(1 for item in self._enumerable if predicate(item))

    def length(self) -> int:
        """size of an indexed source without pulling, otherwise a full count"""
        known = self._enumerable._enumerator.length()
        return known if known is not None else self.count()

    def is_empty(self) -> bool:
        return self.length() < 1

    def any(self, predicate: Optional[Predicate[T]] = None) -> bool:
        """check if any element satisfies condition"""
        predicate = to_predicate_safe(predicate)
        return any(predicate(item) for item in self._enumerable)

    def all(self, predicate: Optional[Predicate[T]] = None) -> bool:
        """check if all elements satisfy condition"""
        predicate = to_predicate_safe(predicate)
        return all(predicate(item) for item in self._enumerable)

    def index_of(self, item: Any, comparer: Union[EqualityComparer[T], bool, None] = None) -> int:
        """zero based index of the first equal element, -1 if there is none"""
        comparer = to_equality_comparer_safe(comparer)
        for index, this_item in enumerate(self._enumerable):
            if comparer(this_item, item):
                return index
        return -1

    def last_index_of(self, item: Any, comparer: Union[EqualityComparer[T], bool, None] = None) -> int:
        comparer = to_equality_comparer_safe(comparer)
        last_index = -1
        for index, this_item in enumerate(self._enumerable):
            if comparer(this_item, item):
                last_index = index
        return last_index

    def contains(self, item: Any, comparer: Union[EqualityComparer[T], bool, None] = None) -> bool:
        return self.index_of(item, comparer) > -1

    # --- element lookups ---

    def first(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get first element, stops at the first match"""
        result = self.first_or_default(to_predicate_safe(predicate), Marker.NOT_FOUND)
        if result is Marker.NOT_FOUND:
            raise ElementNotFoundError()
        return result

    def first_or_default(self, predicate_or_default: Any = UNSET, default: Any = UNSET) -> Union[T, Any]:
        """
        get first element or default.
        a single non-callable argument is the default, a missing default is NOT_FOUND.
        """
        predicate, default = get_or_default_arguments(predicate_or_default, default)
        for item in self._enumerable:
            if predicate(item):
                return item
        return default

    def last(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get last element"""
        result = self.last_or_default(to_predicate_safe(predicate), Marker.NOT_FOUND)
        if result is Marker.NOT_FOUND:
            raise ElementNotFoundError()
        return result

    def last_or_default(self, predicate_or_default: Any = UNSET, default: Any = UNSET) -> Union[T, Any]:
        """get last element or default. always scans to the end."""
        predicate, default = get_or_default_arguments(predicate_or_default, default)
        result = UNSET
        for item in self._enumerable:
            if predicate(item):
                result = item
        return default if result is UNSET else result

    def single(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get single element, erroring if not exactly one"""
        result = self.single_or_default(to_predicate_safe(predicate), Marker.NOT_FOUND)
        if result is Marker.NOT_FOUND:
            raise ElementNotFoundError()
        return result

    def single_or_default(self, predicate_or_default: Any = UNSET, default: Any = UNSET) -> Union[T, Any]:
        """
        get the only matching element or default. scans to the end, since a second
        match can show up after the first one.
        """
        predicate, default = get_or_default_arguments(predicate_or_default, default)
        result = UNSET
        for item in self._enumerable:
            if not predicate(item):
                continue
            if result is not UNSET:
                raise MoreThanOneMatchError()
            result = item
        return default if result is UNSET else result

    def element_at(self, index: int) -> T:
        """element at a zero based position"""
        result = self.element_at_or_default(index, Marker.NOT_FOUND)
        if result is Marker.NOT_FOUND:
            raise ElementNotFoundError(f"no element at index {index}")
        return result

    def element_at_or_default(self, index: int, default: Any = Marker.NOT_FOUND) -> Union[T, Any]:
        # exact integer positions only, floats and strings are rejected
        index = operator.index(index)
        if index < 0:
            return default
        for position, item in enumerate(self._enumerable):
            if position == index:
                return item
        return default

    # --- folding and comparison ---

    def aggregate(self, func: Optional[Accumulator[Any, T]] = None, seed: Any = UNSET,
                  result_selector: Optional[Selector[Any, V]] = None) -> Union[V, Marker]:
        """
        left fold. without a seed the first element starts the fold and an empty
        sequence gives IS_EMPTY. func defaults to acc + item.
        """
        if func is None:
            func = lambda acc, item: acc + item
        acc = seed
        for item in self._enumerable:
            acc = item if acc is UNSET else func(acc, item)
        if acc is UNSET:
            return Marker.IS_EMPTY
        return result_selector(acc) if result_selector else acc

    def sequence_equal(self, other: Iterable[Any],
                       comparer: Union[EqualityComparer[T], bool, None] = None) -> bool:
        """pairwise comparison, both sides must also end together"""
        from ..factories import from_iterable
        second = from_iterable(other)
        comparer = to_equality_comparer_safe(comparer)
        while True:
            x = self._enumerable.pull()
            if x.done:
                break
            y = second.pull()
            if y.done or not comparer(x.value, y.value):
                return False
        return second.pull().done
