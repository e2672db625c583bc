"""Small integer utilities: divisors, primes, roots, digits and bits."""

from __future__ import annotations

import math

_INT_LIMIT_TENTH = (2**31 - 1) // 10


def _trunc_rem(a: int, b: int) -> int:
    r = abs(a) % abs(b)
    return -r if a < 0 else r


def _trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return -q if (a < 0) != (b < 0) else q


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm, truncating remainders."""
    while b != 0:
        a, b = b, _trunc_rem(a, b)
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple; raises ZeroDivisionError when both are zero."""
    return _trunc_div(a, gcd(a, b)) * b


def factorial(n: int) -> int:
    """Product of 1 to ``n``; 1 for 0 and 1."""
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers")
    return math.factorial(n)


def triangular(n: int) -> int:
    """Sum of 1 to ``n``, that is n(n+1)/2."""
    return n * (n + 1) // 2


def is_prime(x: int) -> bool:
    """Trial division by 2 up to the square root of ``x``.

    Values below 4 have no candidate divisor and so count as prime.
    """
    if x < 4:
        return True
    return all(x % i for i in range(2, math.isqrt(x) + 1))


def is_perfect_square(x: float) -> bool:
    """Tell whether the square root of ``x`` is a whole number."""
    if x < 0:
        return False
    if isinstance(x, int):
        return math.isqrt(x) ** 2 == x
    return math.sqrt(x).is_integer()


def integer_sqrt(x: int) -> int:
    """Square root rounded down; -1 for negative input."""
    if x < 0:
        return -1
    return math.isqrt(x)


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of ``x``, keeping the sign.

    Returns 0 when the result would not fit a signed 32-bit integer.
    """
    sign = -1 if x < 0 else 1
    remaining = abs(x)
    result = 0
    while remaining:
        if result > _INT_LIMIT_TENTH:
            return 0
        remaining, digit = divmod(remaining, 10)
        result = result * 10 + digit
    return sign * result


def hamming_weight(n: int) -> int:
    """Number of set bits in ``n`` taken as an unsigned 32-bit value."""
    return (n & 0xFFFFFFFF).bit_count()