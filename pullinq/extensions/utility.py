from __future__ import annotations
import typing
import logging
from collections.abc import Mapping
from concurrent.futures import Future
from ..types import *
from ..errors import AggregateError, ConditionFailedError, FunctionError
from ..functions import to_predicate_safe, to_item_message_safe

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable
    from ..async_driver import AsyncActionContext

logger = logging.getLogger(__name__)


def _default_trace_formatter(item: Any) -> Any:
    return item if item is None else str(item)


class UtilityAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    # --- eager per-item actions ---

    def for_each(self, action: Optional[EachAction[T]]) -> 'Enumerable[T]':
        """
        performs action(item, index) on each element. this is an EAGER operation;
        the first error aborts the pass and propagates.
        returns the original enumerable to allow chaining.
        """
        for index, item in enumerate(self._enumerable):
            if action:
                action(item, index)
        return self._enumerable

    def each(self, action: Optional[EachAction[T]]) -> 'Enumerable[T]':
        """alias of for_each"""
        return self.for_each(action)

    def for_all(self, action: Optional[EachAction[T]]) -> 'Enumerable[T]':
        """
        like for_each, but keeps going after a failing item. every failure is wrapped
        in a FunctionError and raised together as one AggregateError after the pass.
        """
        errors: List[FunctionError] = []
        for index, item in enumerate(self._enumerable):
            try:
                if action:
                    action(item, index)
            except Exception as e:
                errors.append(FunctionError(e, action, index))
        if errors:
            logger.debug(f"for_all collected {len(errors)} failing item(s)")
            raise AggregateError(errors)
        return self._enumerable

    def each_all(self, action: Optional[EachAction[T]]) -> 'Enumerable[T]':
        """alias of for_all"""
        return self.for_all(action)

    def assert_(self, predicate: Optional[Predicate[T]],
                message: Optional[ItemMessage[T]] = None) -> 'Enumerable[T]':
        """raise ConditionFailedError for the first element that fails the predicate"""
        predicate = to_predicate_safe(predicate)
        message = to_item_message_safe(message)
        for index, item in enumerate(self._enumerable):
            if not predicate(item):
                raise ConditionFailedError(message(item, index), item, index)
        return self._enumerable

    def assert_all(self, predicate: Optional[Predicate[T]],
                   message: Optional[ItemMessage[T]] = None) -> 'Enumerable[T]':
        """check every element, then raise one AggregateError listing all failures"""
        predicate = to_predicate_safe(predicate)
        message = to_item_message_safe(message)
        errors = [ConditionFailedError(message(item, index), item, index)
                  for index, item in enumerate(self._enumerable) if not predicate(item)]
        if errors:
            logger.debug(f"assert_all found {len(errors)} failing item(s)")
            raise AggregateError(errors)
        return self._enumerable

    def async_(self, action: Optional[Callable[['AsyncActionContext[T]'], Any]] = None,
               previous_value: Any = None) -> Future:
        """
        walks the sequence one item at a time; each step waits until the action
        calls ctx.resolve(), possibly much later. see AsyncDriver.
        """
        from ..async_driver import AsyncDriver
        return AsyncDriver(self._enumerable, action, previous_value).start()

    def push_to(self, stack: Any) -> 'Enumerable[T]':
        """push every element onto an external stack (anything with extend or append)"""
        items = list(self._enumerable)
        if hasattr(stack, 'extend'):
            stack.extend(items)
        else:
            for item in items:
                stack.append(item)
        return self._enumerable

    def consume(self) -> 'Enumerable[T]':
        """pull until exhausted, discarding the elements"""
        for _ in self._enumerable:
            pass
        return self._enumerable

    # --- lazy helpers ---

    def side_effect(self, action: Optional[EachAction[T]]) -> 'Enumerable[T]':
        """
        performs action(item, index) for each element as it passes through the sequence
        without modifying it. this operation is lazy and is primarily used for debugging
        pipelines without materializing the data.
        """
        from ..enumerable import Enumerable
        def lazy_side_effect_generator():
            for index, item in enumerate(self._enumerable):
                if action:
                    action(item, index)
                yield item
        return Enumerable(lazy_side_effect_generator)

    def trace(self, formatter: Optional[Callable[[T], Any]] = None,
              level: int = logging.INFO) -> 'Enumerable[T]':
        """log every element as it passes through"""
        formatter = formatter if formatter is not None else _default_trace_formatter
        return self.side_effect(lambda item, index: logger.log(level, f"trace #{index}: {formatter(item)}"))

    def intersperse(self, *separators: U) -> 'Enumerable[Union[T, U]]':
        """insert the separators between consecutive elements"""
        return self.intersperse_array(separators)

    def intersperse_array(self, separators: Iterable[U]) -> 'Enumerable[Union[T, U]]':
        from ..enumerable import Enumerable
        from ..factories import from_iterable
        def intersperse_data():
            separator_items = from_iterable(separators).to.list()
            is_first = True
            for item in self._enumerable:
                if not is_first:
                    yield from separator_items
                is_first = False
                yield item
        return Enumerable(intersperse_data)

    def flatten(self) -> 'Enumerable[Any]':
        """flatten nested sequences one level. strings, bytes and mappings stay whole."""
        def as_sequence(item):
            if isinstance(item, (str, bytes, Mapping)) or not hasattr(item, '__iter__'):
                return (item,)
            return item
        return self._enumerable.select_many(as_sequence)

    def clone(self, count: Optional[int] = None,
              item_selector: Optional[Selector[T, U]] = None) -> 'Enumerable[Enumerable[U]]':
        """
        snapshot the elements once, then hand out fresh resettable copies of them,
        'count' times or endlessly.
        """
        from ..enumerable import Enumerable
        def clone_data():
            items = list(self._enumerable)
            produced = 0
            while count is None or produced < count:
                produced += 1
                copy = Enumerable.from_items(items)
                yield copy.select(item_selector) if item_selector else copy
        return Enumerable(clone_data)
