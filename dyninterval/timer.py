import asyncio
import math
import threading
from collections.abc import Callable, Hashable
from typing import Any, Protocol

TimerId = Hashable


class TimerProtocol(Protocol):
    """
    The host facility used to arm and cancel one-shot timers.

    Delays are expressed in milliseconds. The identifiers returned by `arm()` are
    opaque to the caller.
    """

    def arm(self, delay: float, function: Callable[[], Any]) -> TimerId: ...

    def cancel(self, timer_id: TimerId) -> None: ...


class ThreadingTimerHost:
    """
    Arms each timer as a daemon `threading.Timer`. The function runs on the timer's
    own thread.

    An infinite delay, or one too long for the platform's wait primitives, arms a
    timer that only ends when cancelled.
    """

    def arm(self, delay: float, function: Callable[[], Any]) -> threading.Timer:
        interval = delay / 1000.0
        if math.isinf(interval) or interval > threading.TIMEOUT_MAX:
            timer = threading.Timer(None, function)  # type: ignore[arg-type]
        else:
            timer = threading.Timer(interval, function)
        timer.daemon = True
        timer.start()
        return timer

    def cancel(self, timer_id: TimerId) -> None:
        if isinstance(timer_id, threading.Timer):
            timer_id.cancel()


class AsyncioTimerHost:
    """
    Arms timers with `call_later()` on an asyncio event loop.

    Args:
        loop: The loop to schedule on. If None, the loop running at the time a timer
            is armed is used, which means intervals must then be scheduled from
            inside a coroutine or loop callback.
    """

    _loop: asyncio.AbstractEventLoop | None

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def arm(self, delay: float, function: Callable[[], Any]) -> asyncio.TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(delay / 1000.0, function)

    def cancel(self, timer_id: TimerId) -> None:
        if isinstance(timer_id, asyncio.TimerHandle):
            timer_id.cancel()


_default_host: TimerProtocol = ThreadingTimerHost()
_default_host_lock = threading.Lock()


def defaultTimerHost() -> TimerProtocol:
    """
    Returns the timer host used by intervals that are not given one explicitly.
    """

    with _default_host_lock:
        return _default_host


def setDefaultTimerHost(host: TimerProtocol | None) -> None:
    """
    Replaces the process-wide default timer host.

    Intervals that are already running keep the host they were created with.

    Args:
        host: The new default host. If None, a new ThreadingTimerHost is installed.
    """

    global _default_host  # noqa: PLW0603

    with _default_host_lock:
        _default_host = host if host is not None else ThreadingTimerHost()
