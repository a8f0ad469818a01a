"""Elementary number theory over plain Python ints.

Every function is stateless. Python's ``int`` is arbitrary precision, so
Fibonacci, factorial and power never overflow; results render exactly via
``str()``.
"""

from __future__ import annotations

from math import isqrt

from .errors import InvalidArgument


def _require_int(x: object, *, name: str) -> int:
    if not isinstance(x, int) or isinstance(x, bool):
        raise TypeError(f"{name} must be an int")
    return x


# -- Divisibility ------------------------------------------------------------

def gcd(a: int, b: int) -> int:
    """Greatest common divisor of ``|a|`` and ``|b|`` (iterative Euclid).

    ``gcd(0, 0) == 0``.
    """
    x = abs(_require_int(a, name="a"))
    y = abs(_require_int(b, name="b"))
    while y != 0:
        x, y = y, x % y
    return x


def lcm(a: int, b: int) -> int:
    """Least common multiple, non-negative. Zero if either input is zero."""
    _require_int(a, name="a")
    _require_int(b, name="b")
    if a == 0 or b == 0:
        return 0
    return abs(a * b) // gcd(a, b)


# -- Sequences ---------------------------------------------------------------

def fibonacci(n: int) -> int:
    """The nth Fibonacci number, 0-based: ``fibonacci(0) == 0``, ``fibonacci(1) == 1``."""
    _require_int(n, name="n")
    if n < 0:
        raise InvalidArgument("n", n, "Fibonacci position must be non-negative")
    if n <= 1:
        return n

    prev, cur = 0, 1
    for _ in range(2, n + 1):
        prev, cur = cur, prev + cur
    return cur


def factorial(n: int) -> int:
    """``n!`` for ``n >= 0``."""
    _require_int(n, name="n")
    if n < 0:
        raise InvalidArgument("n", n, "factorial is not defined for negative numbers")
    result = 1
    for i in range(2, n + 1):
        result *= i
    return result


# -- Primality / powers ------------------------------------------------------

def is_prime(n: int) -> bool:
    """Trial division by 2, 3 and then candidates ``6k ± 1`` up to ``isqrt(n)``.

    Returns False for every ``n <= 1``; never raises for an int.
    """
    _require_int(n, name="n")
    if n <= 1:
        return False
    if n <= 3:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False

    limit = isqrt(n)
    i = 5
    while i <= limit:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True


def power(base: int, exponent: int) -> int:
    """``base ** exponent`` for a non-negative exponent. ``power(0, 0) == 1``."""
    _require_int(base, name="base")
    _require_int(exponent, name="exponent")
    if exponent < 0:
        raise InvalidArgument("exponent", exponent, "exponent must be non-negative")
    return base**exponent
