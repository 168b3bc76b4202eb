import typing
import itertools
import numpy as np
from collections.abc import Sequence as SequenceABC
from .types import *
from .enumerators import IteratorEnumerator, ArrayEnumerator

if typing.TYPE_CHECKING:
    from .enumerable import Enumerable, OrderedEnumerable

def from_iterable(data: Any) -> 'Enumerable[Any]':
    """
    create enumerable from (almost) anything:
    None -> empty, Enumerable -> itself, str -> its characters,
    list/tuple/range/numpy array -> resettable indexed sequence,
    other iterables and iterators -> single-pass sequence,
    any other value -> sequence with that one value.
    """
    from .enumerable import Enumerable
    if data is None:
        return Enumerable.from_items(())
    if isinstance(data, Enumerable):
        return data
    if isinstance(data, (SequenceABC, np.ndarray)):
        return Enumerable.from_items(data)
    if hasattr(data, '__iter__') or hasattr(data, '__next__'):
        return Enumerable(enumerator=IteratorEnumerator(lambda: data))
    return Enumerable.from_items((data,))

def create(*items: T) -> 'Enumerable[T]':
    """create enumerable from the arguments"""
    from .enumerable import Enumerable
    return Enumerable.from_items(list(items))

def empty() -> 'Enumerable[Any]':
    """create empty enumerable"""
    from .enumerable import Enumerable
    return Enumerable.from_items(())

def from_string(value: Any) -> 'Enumerable[str]':
    """one item per character of str(value)"""
    return from_iterable(None if value is None else str(value))

def from_range(start: int = 0, count: Optional[int] = None) -> 'Enumerable[int]':
    """start, start + 1, ... 'count' numbers, or endlessly without a count"""
    from .enumerable import Enumerable
    if count is None:
        return Enumerable(lambda: itertools.count(start))
    return from_iterable(range(start, start + max(count, 0)))

def repeat(item: T, count: Optional[int] = None) -> 'Enumerable[T]':
    """create enumerable with repeated item, endless without a count"""
    from .enumerable import Enumerable
    if count is None:
        return Enumerable(lambda: itertools.repeat(item))
    return Enumerable(lambda: itertools.repeat(item, max(count, 0)))

def build(factory: CancelableFactory[T], count: Optional[int] = None) -> 'Enumerable[T]':
    """
    one item per factory(cancel, index) call. calling cancel() (or cancel(True))
    ends the sequence; the value returned by the call that cancelled is dropped.
    """
    from .enumerable import Enumerable
    def build_data():
        state = {'run': True}
        def cancel(flag: bool = True) -> None:
            state['run'] = not flag
        index = 0
        while state['run'] and (count is None or index < count):
            item = factory(cancel, index)
            if state['run']:
                yield item
            index += 1
    return Enumerable(build_data)

def build_many(factory: CancelableFactory[Iterable[T]], count: Optional[int] = None) -> 'Enumerable[T]':
    """like build, but each call returns a sub-sequence that is flattened into the result"""
    return build(factory, count).select_many(from_iterable)

def random(count: Optional[int] = None, value_provider: Optional[Callable[[], Any]] = None,
           seed: Optional[int] = None) -> 'Enumerable[Any]':
    """random floats in [0, 1) (or value_provider() results), endless without a count"""
    from .enumerable import Enumerable
    def random_data():
        provider = value_provider
        if provider is None:
            provider = np.random.default_rng(seed).random
        produced = 0
        while count is None or produced < count:
            produced += 1
            yield provider()
    return Enumerable(random_data)

def pop_from(stack: Any) -> 'Enumerable[Any]':
    """pops items off the end of a stack until it is empty, as they are pulled"""
    from .enumerable import Enumerable
    def pop_data():
        while len(stack) > 0:
            yield stack.pop()
    return Enumerable(pop_data)

def shift_from(stack: Any) -> 'Enumerable[Any]':
    """takes items off the front of a list or deque until it is empty"""
    from .enumerable import Enumerable
    def shift_data():
        while len(stack) > 0:
            yield stack.popleft() if hasattr(stack, 'popleft') else stack.pop(0)
    return Enumerable(shift_data)

def sort(items: Any, selector: Optional[Selector[Any, Any]] = None,
         comparer: Optional[Comparer[Any]] = None) -> 'OrderedEnumerable[Any]':
    return from_iterable(items).order_by(selector, comparer)

def sort_desc(items: Any, selector: Optional[Selector[Any, Any]] = None,
              comparer: Optional[Comparer[Any]] = None) -> 'OrderedEnumerable[Any]':
    return from_iterable(items).order_by_descending(selector, comparer)

def is_enumerable(value: Any) -> bool:
    from .enumerable import Enumerable
    return isinstance(value, Enumerable)

def is_sequence(value: Any) -> bool:
    """true for values from_iterable treats as a collection of items rather than as one item"""
    return value is None or hasattr(value, '__iter__') or hasattr(value, '__next__')

# --- aliases ---
pullinq = from_iterable
P = from_iterable
p = from_iterable
