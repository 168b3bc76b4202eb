import traceback
from typing import Any, Callable, List, Optional


class PullinqError(Exception):
    """base class for every error raised by the library"""


class ElementNotFoundError(PullinqError, ValueError):
    """no item satisfied first / last / single / element_at"""

    def __init__(self, message: str = "sequence contains no matching element"):
        super().__init__(message)


class MoreThanOneMatchError(PullinqError, ValueError):
    """single / single_or_default found a second matching item"""

    def __init__(self, message: str = "sequence contains more than one matching element"):
        super().__init__(message)


class NotSupportedError(PullinqError):
    """operation the underlying sequence cannot perform, e.g. reset of a single-pass source"""


class ConditionFailedError(PullinqError, AssertionError):
    """an item did not satisfy the condition given to assert_ / assert_all"""

    def __init__(self, message: str, item: Any = None, index: int = -1):
        super().__init__(message)
        self.item = item
        self.index = index


class AsyncRejectedError(PullinqError):
    """wraps a rejection reason of the async driver that is not an exception itself"""

    def __init__(self, reason: Any, result: Any = None):
        super().__init__(f"async operation rejected: {reason!r}")
        self.reason = reason
        self.result = result


def _banner(title: str) -> str:
    return f"{title}\n{'=' * (len(title) + 5)}"


def _format_traceback(error: BaseException) -> str:
    return ''.join(traceback.format_exception(type(error), error, error.__traceback__))


class FunctionError(PullinqError):
    """an error raised by a user function for the item at a specific index"""

    def __init__(self, inner_error: BaseException,
                 function: Optional[Callable] = None, index: Optional[int] = None):
        super().__init__(str(inner_error))
        self.inner_error = inner_error
        self.function = function
        self.index = index

    @property
    def stack(self) -> str:
        return _format_traceback(self.inner_error)

    def __str__(self) -> str:
        title = 'ACTION ERROR'
        if self.index is not None:
            title += f' #{self.index}'
        return f"{_banner(title)}\n{self.inner_error}"


class AggregateError(PullinqError):
    """
    collects every per-item error of a pass that continues on failure.
    the errors keep their order of occurrence; str() and stack list all of them.
    """

    def __init__(self, errors: Optional[List[BaseException]] = None):
        self.errors: List[BaseException] = [e for e in (errors or []) if e is not None]
        super().__init__(f"{len(self.errors)} error(s) occurred")

    @property
    def stack(self) -> str:
        parts = []
        for i, error in enumerate(self.errors):
            text = error.stack if isinstance(error, FunctionError) else _format_traceback(error)
            parts.append(f"{_banner(f'STACK #{i + 1}')}\n{text}")
        return "\n\n".join(parts)

    def __str__(self) -> str:
        return "\n\n".join(f"{_banner(f'ERROR #{i + 1}')}\n{error}" for i, error in enumerate(self.errors))
