"""Checking command-line numbers and ranking them."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence
from itertools import pairwise

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_DIGITS = frozenset("0123456789")
_SPACES = frozenset(" \t\n\v\f\r")


class InputError(ValueError):
    """Raised when the arguments are not distinct integers in int range."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value > INT_MAX else value


def atoi(text: str) -> int:
    """Read a leading integer after blanks and an optional sign, as a 32-bit int.

    Stops at the first non-digit; values outside the int range wrap around.
    """
    rest = text.lstrip("".join(_SPACES))
    negative = False
    if rest[:1] in ("+", "-"):
        negative = rest[0] == "-"
        rest = rest[1:]
    number = 0
    for char in rest:
        if char not in _DIGITS:
            break
        number = number * 10 + int(char)
    number = _to_int32(number)
    return _to_int32(-number if negative else number)


def _is_valid_number(text: str) -> bool:
    body = text[1:] if text.startswith(("+", "-")) else text
    return bool(body) and all(char in _DIGITS for char in body)


def parse_numbers(args: Iterable[str]) -> list[int]:
    """Turn arguments into distinct ints, raising InputError on bad input."""
    numbers = []
    for text in args:
        if not _is_valid_number(text) or not INT_MIN <= int(text) <= INT_MAX:
            raise InputError()
        numbers.append(atoi(text))
    if len(set(numbers)) != len(numbers):
        raise InputError()
    return numbers


def is_sorted(values: Iterable[int]) -> bool:
    """True when the values are in non-decreasing order."""
    return all(x <= y for x, y in pairwise(values))


def normalize(values: Sequence[int]) -> list[int]:
    """Replace each value by its rank, 0 for the smallest."""
    ordered = sorted(values)
    return [bisect_left(ordered, value) for value in values]