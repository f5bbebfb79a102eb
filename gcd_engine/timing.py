"""Elapsed-time wrapper for the GCD entry points."""
import time
from functools import wraps
from typing import Callable, NamedTuple

# monotonic, nanosecond ticks
now_ns = time.perf_counter_ns


class TimedResult(NamedTuple):
    value: int
    elapsed_ns: int


def timed(fn: Callable[..., int]) -> Callable[..., TimedResult]:
    """
    Wrap fn so it returns (result, elapsed_ns) measured over the whole call,
    validation included. Exceptions from fn pass through untouched.
    """

    @wraps(fn)
    def wrapper(*args: int) -> TimedResult:
        start = now_ns()
        value = fn(*args)
        return TimedResult(value, now_ns() - start)

    wrapper.__name__ = f"timed_{fn.__name__}"
    wrapper.__qualname__ = wrapper.__name__
    return wrapper
