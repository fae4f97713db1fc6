import math
from collections import deque
from collections.abc import Callable, Iterator, Sequence
from typing import Any, Union

DelayProducer = Callable[[], Any]
DelaySource = Union[DelayProducer, Sequence[Any], Iterator[Any], Any]


def toDelay(value: Any) -> float:  # noqa: ANN401
    """
    Coerces a value returned by a delay producer into a delay in milliseconds.

    Args:
        value: Anything. Numbers, numeric strings and objects that implement
            `__float__` are converted. An empty or blank string counts as 0.

    Returns:
        A float, or NaN if the value has no numeric interpretation.
    """

    if value is None:
        return math.nan

    if isinstance(value, str) and not value.strip():
        return 0.0

    try:
        return float(value)
    except (TypeError, ValueError, OverflowError):
        return math.nan


def shouldTerminate(delay: float) -> bool:
    """
    Whether an interval should stop instead of arming a timer for this delay.

    Zero is a valid delay.
    """

    return math.isnan(delay) or delay < 0


def _sequenceProducer(values: Sequence[Any]) -> DelayProducer:
    remaining = deque(values)

    def producer() -> Any:  # noqa: ANN401
        return remaining.popleft() if remaining else None

    return producer


def _iteratorProducer(values: Iterator[Any]) -> DelayProducer:
    def producer() -> Any:  # noqa: ANN401
        return next(values, None)

    return producer


def _constantProducer(value: Any) -> DelayProducer:  # noqa: ANN401
    def producer() -> Any:  # noqa: ANN401
        return value

    return producer


def makeDelayProducer(source: DelaySource) -> DelayProducer:
    """
    Turns a delay source into a zero-argument callable that returns the next delay.

    - A callable is returned unchanged.
    - A sequence (other than a string or bytes) is copied, and the producer pops its
      first remaining element on each call, returning None once it is exhausted.
    - An iterator is consumed lazily, one element per call, with None once
      exhausted.
    - Anything else becomes a producer that always returns that value.

    Args:
        source: The delay source.

    Returns:
        A delay producer.
    """

    if callable(source):
        return source

    if isinstance(source, Sequence) and not isinstance(
        source, (str, bytes, bytearray)
    ):
        return _sequenceProducer(source)

    if isinstance(source, Iterator):
        return _iteratorProducer(source)

    return _constantProducer(source)
