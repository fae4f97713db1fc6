import logging
import threading
from collections.abc import Callable
from typing import Any

from .delays import (
    DelayProducer,
    DelaySource,
    makeDelayProducer,
    shouldTerminate,
    toDelay,
)
from .timer import TimerId, TimerProtocol, defaultTimerHost


class DynamicInterval:
    """
    A handle on a dynamically delayed interval.

    Instances are created by `scheduleDynamicInterval()`. They are updated in place
    each time the interval ticks, and when it is cleared.

    Attributes:
        calls: How many times the callback was invoked so far.

        timers: The identifiers of the host timers currently pending for this
            interval. At most one timer is pending at any given time.

        cleared: Whether `clear()` was called. Once True, the interval will never
            tick again.
    """

    calls: int
    timers: list[TimerId]
    cleared: bool

    _callback: Callable[..., Any]
    _args: tuple[Any, ...]
    _next_delay: DelayProducer
    _host: TimerProtocol
    _logger: logging.Logger
    _lock: threading.RLock
    _tick_lock: threading.RLock

    def __init__(
        self,
        callback: Callable[..., Any],
        next_delay: DelayProducer,
        args: tuple[Any, ...] = (),
        *,
        host: TimerProtocol | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.calls = 0
        self.timers = []
        self.cleared = False

        self._callback = callback
        self._args = args
        self._next_delay = next_delay
        self._host = host if host is not None else defaultTimerHost()
        self._logger = logger or logging.getLogger()
        self._lock = threading.RLock()
        self._tick_lock = threading.RLock()

    def clear(self) -> "DynamicInterval":
        """
        Cancels the pending timer, if any. The callback will not be invoked again.

        Calling this more than once is harmless.

        Returns:
            This same interval.
        """

        with self._lock:
            for timer_id in self.timers:
                self._host.cancel(timer_id)

            if not self.cleared:
                self._logger.debug(
                    "Cleared dynamic interval after %d call(s), %d timer(s) cancelled.",
                    self.calls,
                    len(self.timers),
                )

            self.cleared = True
            self.timers = []

        return self

    def _scheduleNext(self) -> None:
        with self._lock:
            value = self._next_delay()
            delay = toDelay(value)

            # The delay producer may have cleared this interval.
            if self.cleared:
                return

            if shouldTerminate(delay):
                self._logger.debug(
                    "Dynamic interval terminated after %d call(s) on delay %r.",
                    self.calls,
                    value,
                )
                return

            timer_id: TimerId = None

            def fire() -> None:
                # Ticks of one interval never overlap. A timer that fires while the
                # previous callback still runs waits here, then finds out whether
                # that callback cleared the interval.
                with self._tick_lock:
                    with self._lock:
                        ticked = self._tick(timer_id)

                    if ticked:
                        self._callback(*self._args)

            timer_id = self._host.arm(delay, fire)
            self.timers.append(timer_id)

            self._logger.debug("Next dynamic interval tick in %s ms.", delay)

    def _tick(self, timer_id: TimerId) -> bool:
        # A threaded host may run a timer whose cancellation came too late.
        if self.cleared:
            return False

        self.calls += 1

        # Only the first occurrence, and only if it is still there.
        try:
            self.timers.remove(timer_id)
        except ValueError:
            pass

        self._scheduleNext()

        return True


def scheduleDynamicInterval(
    callback: Callable[..., Any],
    delays: DelaySource,
    *args: Any,  # noqa: ANN401
    host: TimerProtocol | None = None,
    logger: logging.Logger | None = None,
) -> DynamicInterval:
    """
    Invokes a callback repeatedly, computing each delay just before it is needed.

    The first timer is armed before this function returns. Every time a timer fires,
    the next one is armed first, and then the callback is invoked. The interval stops
    on its own when the next delay is NaN, negative, or not a number at all.

    Args:
        callback: The callable to invoke on each tick.

        delays: Where to get the delays from, in milliseconds. Either a callable
            that returns the next delay, a sequence of delays (a copy of which is
            consumed from the front), an iterator, or a constant delay.

        *args: The positional arguments to pass to the callback on each tick.

        host: The timer facility to use. If none is given, the default host is
            used, which runs ticks on threading timers.

        logger: A logger for debug messages. If none is given, the root logger is
            used.

    Returns:
        A DynamicInterval handle, which can be used to inspect and clear the
        interval.

    Example:

    >>> from dyninterval import clearDynamicInterval, scheduleDynamicInterval
    >>> interval = scheduleDynamicInterval(print, [100, 200, 400], "tick")
    >>> interval.calls
    0
    >>> clearDynamicInterval(interval)
    >>> interval.cleared
    True
    """

    interval = DynamicInterval(
        callback, makeDelayProducer(delays), args, host=host, logger=logger
    )
    interval._scheduleNext()  # noqa: SLF001

    return interval


# Older name of scheduleDynamicInterval().
setDynamicInterval = scheduleDynamicInterval


def clearDynamicInterval(reference: object = None) -> None:
    """
    Clears a dynamic interval.

    Anything that is not a dynamic interval, None included, is silently ignored.

    Args:
        reference: The interval to clear.
    """

    clear = getattr(reference, "clear", None)
    if reference is not None and callable(clear):
        clear()
