"""Small integer and number helpers."""

from __future__ import annotations

import re

_INTEGER = re.compile(r"[+-]?[0-9]+")


def string_to_int(st: str) -> int:
    """Convert a decimal string with an optional sign to an int.

    Raises ValueError if the string is not such a number. Surrounding
    whitespace and digit separators are not accepted.
    """
    if not _INTEGER.fullmatch(st):
        raise ValueError(f"invalid integer literal: {st!r}")
    return int(st)


def abs_value(n):
    """Return the absolute value of a number."""
    return -n if n < 0 else n


def _truncated_remainder(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend (truncated division)."""
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of two integers.

    Raises ZeroDivisionError when the smaller argument is zero.
    """
    if a < b:
        a, b = b, a
    while True:
        remainder = _truncated_remainder(a, b)
        if remainder == 0:
            return b
        a, b = b, remainder
        if a < b:
            a, b = b, a


def lcm(a: int, b: int) -> int:
    """Return the least common multiple of two integers."""
    return a // gcd(a, b) * b