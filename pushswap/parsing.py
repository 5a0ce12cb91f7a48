"""Reading and validating the integers given on the command line."""

from __future__ import annotations

from collections.abc import Sequence

from pushswap.stack import Stack

INT_MIN = -2147483648
INT_MAX = 2147483647

_SPACE_CHARS = frozenset("\t\n\v\f\r ")


class ParseError(ValueError):
    """Raised when the arguments are not a valid list of distinct integers."""


def atol(text: str) -> int:
    """Read a leading integer, skipping whitespace; any '-' among the signs negates."""
    pos = 0
    while pos < len(text) and text[pos] in _SPACE_CHARS:
        pos += 1
    sign = 1
    while pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    while pos < len(text) and "0" <= text[pos] <= "9":
        result = result * 10 + (ord(text[pos]) - ord("0"))
        pos += 1
    return result * sign


def is_number(text: str) -> bool:
    """True for a non-empty string of digits with an optional leading sign."""
    if not text:
        return False
    if text[0] in "+-":
        text = text[1:]
    return all("0" <= ch <= "9" for ch in text)


def is_within_limits(text: str) -> bool:
    """True when the value fits a 32-bit signed integer."""
    return INT_MIN <= atol(text) <= INT_MAX


def parse_args(args: Sequence[str]) -> Stack:
    """Build stack a from arguments; a single argument is split on spaces."""
    if len(args) == 1:
        tokens = [token for token in args[0].split(" ") if token]
    else:
        tokens = list(args)
    stack = Stack()
    seen: set[int] = set()
    for token in tokens:
        if not is_number(token) or not is_within_limits(token):
            raise ParseError(f"invalid integer: {token!r}")
        value = atol(token)
        if value in seen:
            raise ParseError(f"duplicate value: {value}")
        seen.add(value)
        stack.append(value)
    return stack