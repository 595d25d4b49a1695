"""Small text helpers used when reading numbers from the command line."""

from __future__ import annotations

INT_MIN = -(2**31)
LONG_MIN = -(2**63)

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


def atoi(text: str) -> int:
    """Read a leading signed decimal integer from ``text``.

    Leading whitespace is skipped, an optional sign is read, and digits are
    consumed until the first non-digit.  A text with no digits reads as 0.
    A negative value that falls below the 32-bit minimum makes the result
    the 64-bit minimum.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for char in rest:
        if char not in _DIGITS:
            break
        value = value * 10 + int(char)
        if sign < 0 and -value < INT_MIN:
            return LONG_MIN
    return sign * value


def check_args(text: str) -> bool:
    """Tell whether ``text`` holds only spaces, digits and signed digits.

    Every sign must be followed directly by a digit.
    """
    for char, following in zip(text, text[1:] + "\0"):
        if char != " " and char not in _DIGITS and char not in "+-":
            return False
        if char in "+-" and following not in _DIGITS:
            return False
    return True


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty pieces."""
    return [word for word in text.split(sep) if word]