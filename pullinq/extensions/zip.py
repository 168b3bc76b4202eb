from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


def _add(x: Any, y: Any) -> Any:
    return x + y


class ZipAccessor(Generic[T]):
    """
    lockstep pairing of two sequences. one item is pulled from each side per step
    and the pairing stops as soon as either side is exhausted.
    without a result selector the two items are added (numbers) or concatenated (strings).
    """
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def _zip_data(self, other: Iterable[U], result_selector: Callable[[T, U, int], V]) -> Iterator[V]:
        from ..factories import from_iterable
        second = from_iterable(other)
        index = 0
        while True:
            first_result = self._enumerable.pull()
            if first_result.done:
                return
            second_result = second.pull()
            if second_result.done:
                return
            yield result_selector(first_result.value, second_result.value, index)
            index += 1

    def zip_with(self, other: Iterable[U],
                 result_selector: Optional[Callable[[T, U], V]] = None) -> 'Enumerable[V]':
        """zip two sequences with custom result selector"""
        from ..enumerable import Enumerable
        selector = result_selector if result_selector is not None else _add
        return Enumerable(lambda: self._zip_data(other, lambda x, y, index: selector(x, y)))

    def zip_with_index(self, other: Iterable[U],
                       result_selector: Optional[Callable[[T, U, int], V]] = None) -> 'Enumerable[V]':
        """zip two sequences, the selector also receives the zero based step index"""
        from ..enumerable import Enumerable
        selector = result_selector if result_selector is not None else (lambda x, y, index: x + y)
        return Enumerable(lambda: self._zip_data(other, selector))
