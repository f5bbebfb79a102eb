from gcd_engine.errors import GcdError, InvalidArgumentError, OutOfRangeError
from gcd_engine.euclidean import gcd_euclidean
from gcd_engine.reduce import reduce_gcd
from gcd_engine.stein import gcd_stein
from gcd_engine.timing import TimedResult, timed
from gcd_engine.validation import INT_MAX, INT_MIN, validate_operands

ALGORITHMS = {
    "euclidean": gcd_euclidean,
    "stein": gcd_stein,
}


def get_algorithm(name: str):
    try:
        return ALGORITHMS[name]
    except KeyError:
        raise InvalidArgumentError(
            f"Unknown algorithm {name!r}, expected one of {sorted(ALGORITHMS)}."
        ) from None


# ---------------- EUCLIDEAN ----------------
def gcdn_euclidean(a: int, b: int, *rest: int) -> int:
    return reduce_gcd(gcd_euclidean, a, b, *rest)

def gcd2_euclidean(a: int, b: int) -> int:
    return gcdn_euclidean(a, b)

def gcd3_euclidean(a: int, b: int, c: int) -> int:
    return gcdn_euclidean(a, b, c)


# ---------------- STEIN ----------------
def gcdn_stein(a: int, b: int, *rest: int) -> int:
    return reduce_gcd(gcd_stein, a, b, *rest)

def gcd2_stein(a: int, b: int) -> int:
    return gcdn_stein(a, b)

def gcd3_stein(a: int, b: int, c: int) -> int:
    return gcdn_stein(a, b, c)


# ---------------- TIMED ----------------
timed_gcd2_euclidean = timed(gcd2_euclidean)
timed_gcd3_euclidean = timed(gcd3_euclidean)
timed_gcdn_euclidean = timed(gcdn_euclidean)

timed_gcd2_stein = timed(gcd2_stein)
timed_gcd3_stein = timed(gcd3_stein)
timed_gcdn_stein = timed(gcdn_stein)


__all__ = [
    "ALGORITHMS",
    "GcdError",
    "INT_MAX",
    "INT_MIN",
    "InvalidArgumentError",
    "OutOfRangeError",
    "TimedResult",
    "gcd2_euclidean",
    "gcd2_stein",
    "gcd3_euclidean",
    "gcd3_stein",
    "gcd_euclidean",
    "gcd_stein",
    "gcdn_euclidean",
    "gcdn_stein",
    "get_algorithm",
    "reduce_gcd",
    "timed",
    "timed_gcd2_euclidean",
    "timed_gcd2_stein",
    "timed_gcd3_euclidean",
    "timed_gcd3_stein",
    "timed_gcdn_euclidean",
    "timed_gcdn_stein",
    "validate_operands",
]
