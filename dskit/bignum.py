"""Arithmetic on numbers held as sequences of decimal digits, most significant first."""

from __future__ import annotations

import re
from itertools import chain, repeat, zip_longest
from typing import Sequence, Union


class NegativeResultError(ValueError):
    """Raised when a subtraction would give a negative result."""


def parse_digits(text: str) -> list[int]:
    """Return the decimal digits in ``text``, ignoring every other character."""
    return [int(ch) for ch in text if "0" <= ch <= "9"]


def format_digits(digits: Sequence[int]) -> str:
    """Render digits as text, dropping leading zeros but keeping a final one."""
    text = "".join(map(str, digits))
    stripped = text.lstrip("0")
    if text and not stripped:
        return "0"
    return stripped


def _significant(digits: Sequence[int]) -> list[int]:
    values = list(digits)
    start = next((i for i, d in enumerate(values) if d != 0), len(values))
    return values[start:]


def compare_digits(a: Sequence[int], b: Sequence[int]) -> int:
    """Return 1, 0 or -1 as ``a`` is greater than, equal to or less than ``b``."""
    a, b = _significant(a), _significant(b)
    if len(a) != len(b):
        return 1 if len(a) > len(b) else -1
    for x, y in zip(a, b):
        if x != y:
            return 1 if x > y else -1
    return 0


def add_digits(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return the digits of ``a + b``."""
    result: list[int] = []
    carry = 0
    for x, y in zip_longest(reversed(a), reversed(b), fillvalue=0):
        carry, digit = divmod(x + y + carry, 10)
        result.append(digit)
    while carry:
        carry, digit = divmod(carry, 10)
        result.append(digit)
    result.reverse()
    return result


def subtract_digits(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return the digits of ``a - b``, as many as ``a`` has.

    Raises NegativeResultError when ``b`` is greater than ``a``.
    """
    if compare_digits(a, b) < 0:
        raise NegativeResultError("Negative result not supported")
    result: list[int] = []
    borrow = 0
    for x, y in zip(reversed(a), chain(reversed(b), repeat(0))):
        diff = x - borrow - y
        borrow = 1 if diff < 0 else 0
        result.append(diff + 10 * borrow)
    result.reverse()
    return result


def multiply_digits(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return the digits of ``a * b`` without leading zeros."""
    result = [0] * (len(a) + len(b))
    for i, x in enumerate(reversed(a)):
        carry = 0
        for j, y in enumerate(reversed(b)):
            carry, result[i + j] = divmod(x * y + result[i + j] + carry, 10)
        if carry:
            result[i + len(b)] += carry
    result.reverse()
    significant = _significant(result)
    if result and not significant:
        return [0]
    return significant


_LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")


def _to_integer(value: Union[str, int]) -> int:
    if isinstance(value, int):
        return value
    match = _LEADING_INTEGER.match(value)
    return int(match.group(1)) if match else 0


def divide(num1: Union[str, int], num2: Union[str, int]) -> tuple[int, int]:
    """Return the quotient and remainder of two integers, truncating toward zero.

    Text is read as its leading integer, or zero when it has none.
    """
    n1, n2 = _to_integer(num1), _to_integer(num2)
    if n2 == 0:
        raise ZeroDivisionError("Division by zero")
    quotient = abs(n1) // abs(n2)
    if (n1 < 0) != (n2 < 0):
        quotient = -quotient
    return quotient, n1 - quotient * n2