"""
normalization of the callables every operator accepts.
operators take a proper function, a constant (used as an always-same result) or
nothing at all, and turn it into a plain function here before the first pull.
"""
from typing import Any, Callable, Optional, Tuple

from .types import Marker, T, U, Predicate, Selector, Comparer, EqualityComparer, ItemMessage

# marks an argument the caller did not pass at all (None is a legitimate value)
UNSET = object()


def identity(item: T) -> T:
    return item


def to_predicate_safe(predicate: Any, default_value: bool = True) -> Predicate[Any]:
    """none -> constant default, non-callable -> constant truthiness of the value"""
    if predicate is None:
        result = bool(default_value)
        return lambda item: result
    if not callable(predicate):
        result = bool(predicate)
        return lambda item: result
    return predicate


def to_selector_safe(selector: Optional[Selector[T, U]]) -> Selector[T, U]:
    return selector if selector is not None else identity


def default_comparer(x: Any, y: Any) -> int:
    """natural ordering. values that are neither equal nor ordered compare as equal."""
    if x == y:
        return 0
    if x < y:
        return -1
    if x > y:
        return 1
    return 0


def to_comparer_safe(comparer: Optional[Comparer[T]]) -> Comparer[T]:
    return comparer if comparer is not None else default_comparer


def loose_equals(x: Any, y: Any) -> bool:
    return x == y


def strict_equals(x: Any, y: Any) -> bool:
    # 1 == 1.0 == True under plain equality, strict mode also requires the same type
    return type(x) is type(y) and x == y


def to_equality_comparer_safe(comparer: Any) -> EqualityComparer[Any]:
    """none -> ==, True -> strict (same type and ==), otherwise the given function"""
    if comparer is None or comparer is False:
        return loose_equals
    if comparer is True:
        return strict_equals
    return comparer


def to_count_safe(count: Any, default_value: int = 1) -> int:
    """numbers and numeric strings are truncated to int, None or anything else becomes default_value"""
    try:
        return int(count)
    except (TypeError, ValueError):
        return default_value


def to_item_message_safe(message: Optional[ItemMessage[T]]) -> Callable[[T, int], str]:
    if message is None:
        return lambda item, index: f"condition failed at index {index}"
    if not callable(message):
        text = str(message)
        return lambda item, index: text
    return lambda item, index: str(message(item, index))


def get_or_default_arguments(predicate_or_default: Any = UNSET,
                             default_value: Any = UNSET) -> Tuple[Predicate[Any], Any]:
    """
    resolves the (predicate_or_default, default) pair of the "or default" lookups:
    no argument -> match everything, NOT_FOUND;
    one callable -> predicate, NOT_FOUND;
    one value -> match everything, that value as default;
    both -> predicate and default.
    """
    if predicate_or_default is UNSET:
        predicate = None
        default = Marker.NOT_FOUND if default_value is UNSET else default_value
    elif default_value is UNSET:
        if callable(predicate_or_default):
            predicate, default = predicate_or_default, Marker.NOT_FOUND
        else:
            predicate, default = None, predicate_or_default
    else:
        predicate, default = predicate_or_default, default_value
    return to_predicate_safe(predicate), default
