from functools import reduce
from typing import Callable

from gcd_engine.validation import validate_operands


def reduce_gcd(gcd2: Callable[[int, int], int], a: int, b: int, *rest: int) -> int:
    """
    Validate every operand once, then fold gcd2 left to right over [a, b, *rest]
    """

    operands = [a, b, *rest]
    validate_operands(operands)
    return reduce(gcd2, operands)
