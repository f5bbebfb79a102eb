import pytest

from gcd_engine import (
    InvalidArgumentError,
    OutOfRangeError,
    INT_MIN,
    TimedResult,
    timed,
    timed_gcd2_euclidean,
    timed_gcd2_stein,
    timed_gcd3_euclidean,
    timed_gcd3_stein,
    timed_gcdn_euclidean,
    timed_gcdn_stein,
)
from gcd_engine import timing


@pytest.mark.parametrize("fn", [timed_gcd2_euclidean, timed_gcd2_stein])
def test_timed_gcd2_returns_value_and_duration(fn):
    value, elapsed = fn(12, 18)
    assert value == 6
    assert isinstance(elapsed, int)
    assert elapsed >= 0


@pytest.mark.parametrize("fn", [timed_gcd3_euclidean, timed_gcd3_stein])
def test_timed_gcd3(fn):
    res = fn(12, 18, 24)
    assert isinstance(res, TimedResult)
    assert res.value == 6
    assert res.elapsed_ns >= 0


@pytest.mark.parametrize("fn", [timed_gcdn_euclidean, timed_gcdn_stein])
def test_timed_gcdn(fn):
    assert fn(48, 18, 30, 12).value == 6


def test_timed_variants_raise_like_untimed():
    with pytest.raises(InvalidArgumentError):
        timed_gcd3_stein(0, 0, 0)
    with pytest.raises(OutOfRangeError):
        timed_gcdn_euclidean(1, 2, INT_MIN)


def test_timed_wrapper_measures_whole_call(monkeypatch):
    ticks = iter([1000, 1750])
    monkeypatch.setattr(timing, "now_ns", lambda: next(ticks))

    def seven(*args):
        return 7

    assert timed(seven)(1, 2) == TimedResult(7, 750)


def test_timed_wrapper_names():
    assert timed_gcd2_euclidean.__name__ == "timed_gcd2_euclidean"
    assert timed_gcdn_stein.__name__ == "timed_gcdn_stein"
