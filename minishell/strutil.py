"""Small string helpers with C-library semantics used throughout the shell."""

from __future__ import annotations

import re
from itertools import zip_longest

_INT_MAX = 2147483647
_ATOI_RE = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty fields."""
    return [part for part in text.split(sep) if part]


def atoi(text: str) -> int:
    """Parse a leading decimal integer; values past the 32-bit range give 0."""
    match = _ATOI_RE.match(text)
    sign, digits = match.group(1), match.group(2)
    value = int(digits) if digits else 0
    if value > _INT_MAX:
        return 0
    return -value if sign == "-" else value


def strncmp(left: str, right: str, length: int) -> int:
    """Compare at most ``length`` characters; return -1, 0 or 1."""
    if length <= 0:
        return 0
    for a, b in zip_longest(left[:length], right[:length], fillvalue="\0"):
        if a > b:
            return 1
        if b > a:
            return -1
        if b == "\0":
            return 0
    return 0