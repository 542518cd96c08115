"""Integer puzzles: digits, roots, parsing, counting and sums of squares."""

from __future__ import annotations

import re
from math import isqrt

I32_MIN = -(2**31)
I32_MAX = 2**31 - 1

_ATOI_PATTERN = re.compile(r"([+-]?)([0-9]*)")


def _clamp_i32(value: int) -> int:
    return max(I32_MIN, min(I32_MAX, value))


def is_palindrome(x: int) -> bool:
    """Whether the decimal digits of ``x`` read the same both ways."""
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]


def plus_one(digits: list[int]) -> list[int]:
    """Add one to a number given as a list of decimal digits, most significant first."""
    if not digits:
        raise ValueError("plus_one() needs at least one digit")
    prefix = list(digits)
    trailing_nines = 0
    while prefix and prefix[-1] >= 9:
        prefix.pop()
        trailing_nines += 1
    if prefix:
        prefix[-1] += 1
    result = prefix + [0] * trailing_nines
    if result[0] == 0:
        result.insert(0, 1)
    return result


def my_sqrt(x: int) -> int:
    """Integer square root of ``x``, rounded down; values up to 1 come back unchanged."""
    if x <= 1:
        return x
    return isqrt(x)


def number_of_steps(num: int) -> int:
    """Steps to reach zero by halving even values and decrementing odd ones."""
    if num < 0:
        raise ValueError("number_of_steps() needs a non-negative number")
    if num == 0:
        return 0
    return num.bit_length() + bin(num).count("1") - 1


def distribute_candies(n: int, limit: int) -> int:
    """Ways to share ``n`` candies among three children, each getting at most ``limit``."""
    return sum(
        1
        for first in range(limit + 1)
        for second in range(limit + 1)
        if 0 <= n - first - second <= limit
    )


def reverse(x: int) -> int:
    """Reverse the decimal digits of ``x``; 0 if the result leaves the 32-bit range."""
    sign = -1 if x < 0 else 1
    result = sign * int(str(abs(x))[::-1])
    return result if I32_MIN <= result <= I32_MAX else 0


def my_atoi(s: str) -> int:
    """Parse a leading signed decimal integer, clamped to the 32-bit range."""
    match = _ATOI_PATTERN.match(s.lstrip())
    assert match is not None
    sign, digits = match.groups()
    if not digits:
        return 0
    return _clamp_i32(int(sign + digits))


def judge_square_sum(c: int) -> bool:
    """Whether ``c`` is the sum of two perfect squares."""
    if c < 0:
        return False
    for a in range(isqrt(c) + 1):
        rest = c - a * a
        if isqrt(rest) ** 2 == rest:
            return True
    return False