
"""

Euclidean Algorithm:

The Euclidean Algorithm is a method for finding the greatest common divisor (GCD)
of two numbers. It operates on the principle that the GCD of two numbers remains
the same even if the smaller number is subtracted from the larger number.

Repeated subtraction collapses into a single modulo step, and the loop below
replaces the textbook recursion gcd(a, b) = gcd(b, a % b) so the stack never grows.

"""


def gcd_euclidean(a: int, b: int) -> int:
    """
    GCD logic, no validation: gcd(0, 0) gives 0
    """

    a, b = abs(a), abs(b)

    while b>0:
        a, b = b, a%b # a%b < b, so b strictly decreases

    return a


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
        (-12, 18, 6),
        (12, -18, 6),
        (-270, -192, 6),
        (2**31-1, 2**30, 1),
    ]

    for a, b, expected in test_cases:
        result = gcd_euclidean(a, b)
        assert result == expected, (
            f"FAILED: gcd_euclidean({a}, {b})\n"
            f"Expected: {expected}\n"
            f"Got: {result}"
        )

    print("✅ All tests passed")


if __name__ == "__main__":
    run_tests()
