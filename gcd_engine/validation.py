from gcd_engine.errors import InvalidArgumentError, OutOfRangeError

INT_MIN = -2**31
INT_MAX = 2**31-1


def validate_operands(operands: list[int]) -> None:
    """
    Range is checked before the all-zero rule, so gcd(INT_MIN, 0) is OutOfRange
    """

    for x in operands:
        if isinstance(x, bool) or not isinstance(x, int):
            raise TypeError(f"Number must be an int, got {type(x).__name__}.")

    for x in operands:
        # |INT_MIN| does not fit in 32 bits
        if x == INT_MIN or not INT_MIN <= x <= INT_MAX:
            raise OutOfRangeError(f"Number cannot be {x}, allowed range is [{-INT_MAX}, {INT_MAX}].")

    if all(x == 0 for x in operands):
        raise InvalidArgumentError("All numbers cannot be 0 at the same time.")
