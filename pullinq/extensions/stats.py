from __future__ import annotations
import typing
import numbers
from ..types import *
from ..functions import to_selector_safe, to_comparer_safe

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class StatsAccessor(Generic[T]):
    """
    numeric aggregates. an empty sequence yields the IS_EMPTY marker instead of
    0, 1 or nan, callers check for it with pullinq.is_empty().
    """
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def sum(self) -> Union[T, Marker]:
        """calc sum, IS_EMPTY doubles as the identity"""
        return self._enumerable.to.aggregate(
            lambda acc, item: item if acc is Marker.IS_EMPTY else acc + item,
            Marker.IS_EMPTY)

    def product(self) -> Union[T, Marker]:
        """calc product, IS_EMPTY doubles as the identity"""
        return self._enumerable.to.aggregate(
            lambda acc, item: item if acc is Marker.IS_EMPTY else acc * item,
            Marker.IS_EMPTY)

    def average(self, selector: Optional[Selector[T, Union[int, float]]] = None) -> Union[float, Marker]:
        """calc average. values that are not numbers are parsed as floats."""
        selector = to_selector_safe(selector)
        count, total = 0, 0.0
        for item in self._enumerable:
            value = selector(item)
            if value is None:
                value = float('nan')
            elif not isinstance(value, numbers.Number):
                value = float(str(value).strip())
            count += 1
            total += value
        return total / count if count > 0 else Marker.IS_EMPTY

    def _best(self, value_selector: Optional[Selector[T, Any]], comparer: Optional[Comparer[Any]],
              wins: Callable[[int], bool]) -> Union[T, Marker]:
        """single pass keeping the item whose value wins against the best so far"""
        value_selector = to_selector_safe(value_selector)
        comparer = to_comparer_safe(comparer)
        result: Union[T, Marker] = Marker.IS_EMPTY
        best_value = None
        for item in self._enumerable:
            value = value_selector(item)
            if result is Marker.IS_EMPTY or wins(comparer(value, best_value)):
                result, best_value = item, value
        return result

    def max(self, value_selector: Optional[Selector[T, Any]] = None,
            comparer: Optional[Comparer[Any]] = None) -> Union[T, Marker]:
        """find the element with the largest value, the first one on ties"""
        return self._best(value_selector, comparer, lambda c: c > 0)

    def min(self, value_selector: Optional[Selector[T, Any]] = None,
            comparer: Optional[Comparer[Any]] = None) -> Union[T, Marker]:
        """find the element with the smallest value, the first one on ties"""
        return self._best(value_selector, comparer, lambda c: c < 0)
