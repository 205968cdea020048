"""
Async data controller — wraps a fetch coroutine and exposes
{data, loading, error, refetch}.

States:
    Idle     data=None,     loading=False, error=None
    Pending  data=previous, loading=True,  error=None
    Ready    data=result,   loading=False, error=None
    Failed   data=previous, loading=False, error=message

Previously held data survives both Pending and Failed (stale-while-revalidate).

Concurrent refetch() calls race; each one takes a request sequence number
and only the most recently started request may write state. After
dispose(), results still in flight are discarded.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Generic, TypeVar

from gridkit.kernel.types import UNKNOWN_ERROR, FetchState

logger = logging.getLogger(__name__)

T = TypeVar("T")

Fetcher = Callable[[], Awaitable[T]]
Listener = Callable[[FetchState[T]], None]


def error_message(exc: BaseException) -> str:
    """Normalize any failure to a single display string."""
    message = getattr(exc, "message", None)
    if isinstance(message, str) and message:
        return message
    text = str(exc)
    return text or UNKNOWN_ERROR


class DataController(Generic[T]):
    """Fetch/loading/error/refetch lifecycle behind one view."""

    def __init__(
        self,
        fetcher: Fetcher[T],
        initial_load: bool = True,
        on_change: Listener[T] | None = None,
    ) -> None:
        self._fetcher = fetcher
        self._initial_load = initial_load
        self._state: FetchState[T] = FetchState()
        self._listeners: list[Listener[T]] = []
        self._sequence = 0
        self._initialized = False
        self._disposed = False
        self._tasks: set[asyncio.Task[None]] = set()
        if on_change is not None:
            self._listeners.append(on_change)

    # -- state ---------------------------------------------------------------

    @property
    def state(self) -> FetchState[T]:
        return self._state

    @property
    def data(self) -> T | None:
        return self._state.data

    @property
    def loading(self) -> bool:
        return self._state.loading

    @property
    def error(self) -> str | None:
        return self._state.error

    @property
    def initial_load(self) -> bool:
        return self._initial_load

    @property
    def disposed(self) -> bool:
        return self._disposed

    # -- lifecycle -----------------------------------------------------------

    def initialize(self) -> asyncio.Task[None] | None:
        """
        Attach the controller. With initial_load set, schedules exactly one
        refetch on the running loop and returns its task. Calling it again
        does nothing.
        """
        if self._initialized or self._disposed:
            return None
        self._initialized = True
        if self._initial_load:
            return self._schedule_refetch()
        return None

    def dispose(self) -> None:
        """Detach the controller. Results arriving afterwards are discarded."""
        if self._disposed:
            return
        self._disposed = True
        self._listeners.clear()
        logger.debug("data_controller: disposed with %d request(s) in flight", len(self._tasks))

    def set_initial_load(self, initial_load: bool) -> asyncio.Task[None] | None:
        """A False → True change on an initialized controller fetches once more."""
        previous = self._initial_load
        self._initial_load = initial_load
        if self._initialized and not self._disposed and initial_load and not previous:
            return self._schedule_refetch()
        return None

    def set_fetcher(self, fetcher: Fetcher[T]) -> None:
        """Swap the fetch operation. Does not refetch; call refetch() for that."""
        self._fetcher = fetcher

    # -- observers -----------------------------------------------------------

    def subscribe(self, listener: Listener[T]) -> Callable[[], None]:
        """Register for state changes. Returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # -- fetching ------------------------------------------------------------

    async def refetch(self) -> None:
        """
        Run the fetcher once. Never raises for fetch failures; the outcome
        lands in state. Cancellation propagates.
        """
        if self._disposed:
            return

        self._sequence += 1
        request_id = self._sequence
        fetcher = self._fetcher

        self._set_state(FetchState(data=self._state.data, loading=True, error=None))

        try:
            result = await fetcher()
        except asyncio.CancelledError:
            if self._is_current(request_id):
                self._set_state(FetchState(data=self._state.data, loading=False, error=None))
            raise
        except Exception as e:
            if not self._is_current(request_id):
                logger.debug("data_controller: dropping stale failure of request %d", request_id)
                return
            message = error_message(e)
            logger.warning("data_controller: fetch failed: %s", message)
            self._set_state(FetchState(data=self._state.data, loading=False, error=message))
            return

        if not self._is_current(request_id):
            logger.debug("data_controller: dropping stale result of request %d", request_id)
            return
        self._set_state(FetchState(data=result, loading=False, error=None))

    def _is_current(self, request_id: int) -> bool:
        return not self._disposed and request_id == self._sequence

    def _schedule_refetch(self) -> asyncio.Task[None]:
        loop = asyncio.get_running_loop()
        task = loop.create_task(self.refetch())
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def _set_state(self, state: FetchState[T]) -> None:
        self._state = state
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                logger.exception("data_controller: listener failed")
