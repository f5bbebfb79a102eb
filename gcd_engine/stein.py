
"""

Stein's Algorithm (binary GCD):

Computes the GCD with shifts and subtraction only, no division.
    gcd(2a, 2b) = 2 * gcd(a, b)
    gcd(2a, b)  = gcd(a, b)         when b is odd
    gcd(a, b)   = gcd(|a - b|, min(a, b))  when both are odd

Every branch keeps reducing until one side hits zero, so the whole method is
binary all the way down and never hands off to the Euclidean algorithm.

"""


def gcd_stein(a: int, b: int) -> int:
    """
    GCD logic, no validation: gcd(0, 0) gives 0
    """

    a, b = abs(a), abs(b)

    if a == 0 or b == 0:
        return max(a,b)

    # common power of two
    shift = 0
    while (a|b) & 1 == 0:
        a >>= 1
        b >>= 1
        shift += 1

    while a & 1 == 0:
        a >>= 1

    # a stays odd from here on
    while b>0:
        while b & 1 == 0:
            b >>= 1
        if a>b:
            a, b = b, a
        b -= a

    return a << shift


# ------------------ Basic Tests ------------------
def run_tests():
    test_cases = [
        (0, 5, 5),
        (5, 0, 5),
        (1, 1, 1),
        (12, 18, 6),
        (18, 12, 6),
        (17, 13, 1),
        (100, 10, 10),
        (270, 192, 6),
        (64, 48, 16),
        (-12, 18, 6),
        (12, -18, 6),
        (-270, -192, 6),
        (2**31-1, 2**30, 1),
        (2**30, 2**20, 2**20),
    ]

    for a, b, expected in test_cases:
        result = gcd_stein(a, b)
        assert result == expected, (
            f"FAILED: gcd_stein({a}, {b})\n"
            f"Expected: {expected}\n"
            f"Got: {result}"
        )

    print("✅ All tests passed")


if __name__ == "__main__":
    run_tests()
