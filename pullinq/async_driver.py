"""
cooperative, externally paced walk over a sequence.

exactly one item is in flight at any time: the driver pulls an item, hands a
context to the action and waits until that context is resolved, rejected or
cancelled. resolve() may come synchronously from inside the action or at any
later point; the next item is pulled only then. the returned future settles
exactly once.
"""
import logging
from concurrent.futures import Future
from enum import Enum
from typing import Any, Callable, Generic, Optional

from .errors import AsyncRejectedError
from .functions import UNSET
from .types import T

logger = logging.getLogger(__name__)


class AsyncState(Enum):
    AWAITING_STEP = 'awaiting_step'
    STEP_IN_FLIGHT = 'step_in_flight'
    RESOLVED = 'resolved'
    REJECTED = 'rejected'


class AsyncActionContext(Generic[T]):
    """what the action sees for one step"""

    def __init__(self, driver: 'AsyncDriver[T]', step: int, item: T, previous_value: Any):
        self._driver = driver
        self._step = step
        self.item = item
        self.index = step
        self.is_first = step == 0
        self.previous_value = previous_value

    @property
    def sequence(self):
        return self._driver.sequence

    @property
    def value(self) -> Any:
        """shared by this step and all upcoming ones"""
        return self._driver.value

    @value.setter
    def value(self, new_value: Any) -> None:
        self._driver.value = new_value

    @property
    def result(self) -> Any:
        """what the whole operation resolves with"""
        return self._driver.result

    @result.setter
    def result(self, new_value: Any) -> None:
        self._driver.result = new_value

    def resolve(self, next_value: Any = None) -> None:
        """finish this step, next_value becomes previous_value of the next one"""
        self._driver.resolve_step(self._step, next_value)

    def reject(self, reason: Any, result: Any = UNSET) -> None:
        """fail the whole operation"""
        self._driver.reject_step(self._step, reason, result)

    def cancel(self, result: Any = UNSET) -> None:
        """stop early, the operation still succeeds"""
        self._driver.cancel_step(self._step, result)


class AsyncDriver(Generic[T]):
    """
    state machine behind Enumerable.util.async_():

        AWAITING_STEP --pull item--> STEP_IN_FLIGHT --resolve--> AWAITING_STEP
        AWAITING_STEP --source done--> RESOLVED
        STEP_IN_FLIGHT --cancel--> RESOLVED
        STEP_IN_FLIGHT --reject / action raises--> REJECTED
    """

    def __init__(self, sequence, action: Optional[Callable[[AsyncActionContext[T]], Any]] = None,
                 previous_value: Any = None):
        self.sequence = sequence
        self.value: Any = None
        self.result: Any = None
        self.state = AsyncState.AWAITING_STEP
        self._action = action
        self._previous_value = previous_value
        self._step = -1
        self._in_action = False
        self._future: Future = Future()

    @property
    def future(self) -> Future:
        return self._future

    @property
    def is_finished(self) -> bool:
        return self.state in (AsyncState.RESOLVED, AsyncState.REJECTED)

    def start(self) -> Future:
        self._future.set_running_or_notify_cancel()
        self._run()
        return self._future

    def _run(self) -> None:
        # loop instead of recursing, so actions that resolve synchronously
        # do not grow the stack with every item
        while self.state is AsyncState.AWAITING_STEP:
            try:
                pulled = self.sequence.pull()
            except Exception as e:
                self._finish(AsyncState.REJECTED, e)
                return
            if pulled.done:
                self._finish(AsyncState.RESOLVED)
                return

            self._step += 1
            self.state = AsyncState.STEP_IN_FLIGHT
            logger.debug(f"async step #{self._step} in flight")
            context = AsyncActionContext(self, self._step, pulled.value, self._previous_value)

            self._in_action = True
            try:
                if self._action is not None:
                    self._action(context)
                else:
                    context.resolve()
            except Exception as e:
                self.reject_step(self._step, e)
            finally:
                self._in_action = False

    def _accepts(self, step: int) -> bool:
        if self.is_finished:
            logger.debug(f"async step #{step} ignored, operation already {self.state.value}")
            return False
        return step == self._step and self.state is AsyncState.STEP_IN_FLIGHT

    def resolve_step(self, step: int, next_value: Any = None) -> None:
        if not self._accepts(step):
            return
        self._previous_value = next_value
        self.state = AsyncState.AWAITING_STEP
        if not self._in_action:
            self._run()

    def reject_step(self, step: int, reason: Any, result: Any = UNSET) -> None:
        if self.is_finished or step != self._step:
            return
        if result is not UNSET:
            self.result = result
        error = reason if isinstance(reason, BaseException) else AsyncRejectedError(reason, self.result)
        self._finish(AsyncState.REJECTED, error)

    def cancel_step(self, step: int, result: Any = UNSET) -> None:
        if not self._accepts(step):
            return
        if result is not UNSET:
            self.result = result
        self._finish(AsyncState.RESOLVED)

    def _finish(self, state: AsyncState, error: Optional[BaseException] = None) -> None:
        self.state = state
        logger.debug(f"async operation {state.value} after {self._step + 1} step(s)")
        if error is not None:
            self._future.set_exception(error)
        else:
            self._future.set_result(self.result)
