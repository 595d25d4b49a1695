"""Turning command-line arguments into a list of distinct 32-bit integers."""

from __future__ import annotations

from collections.abc import Iterable

from .textutils import atoi, check_args, split

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)
MAX_TOKEN_LENGTH = 11


class ParseError(ValueError):
    """Raised when the arguments are not a valid set of numbers.

    ``report`` holds the message to show on standard output, or None when
    the failure is silent.
    """

    def __init__(self, reason: str, report: str | None = None) -> None:
        super().__init__(reason)
        self.reason = reason
        self.report = report


def parse_numbers(args: Iterable[str]) -> list[int]:
    """Read every space-separated integer in ``args``, in order."""
    numbers: list[int] = []
    seen: set[int] = set()
    for arg in args:
        if not check_args(arg):
            raise ParseError(f"not a number: {arg!r}", "Error: not number")
        tokens = split(arg, " ")
        if not tokens:
            raise ParseError("empty argument")
        for token in tokens:
            if len(token) > MAX_TOKEN_LENGTH:
                raise ParseError(f"token too long: {token!r}", "Error")
            value = atoi(token)
            if not INT_MIN <= value <= INT_MAX:
                raise ParseError(f"out of range: {token!r}", "Error")
            if value in seen:
                raise ParseError(f"duplicate value: {value}")
            seen.add(value)
            numbers.append(value)
    return numbers