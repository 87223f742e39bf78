"""Integer helpers with 32-bit limits."""

from __future__ import annotations

from typing import Optional

from .textutil import is_space, to_upper

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)
_DIGITS = "0123456789ABCDEF"


def abs_diff(a: int, b: int) -> int:
    """Distance between ``a`` and ``b`` as a 32-bit int.

    Returns -1 when ``a - b`` does not fit an int. A difference of exactly
    INT_MIN has no positive counterpart and comes back as INT_MIN.
    """
    diff = a - b
    if diff < INT_MIN or diff > INT_MAX:
        return -1
    result = abs(diff)
    return result if result <= INT_MAX else INT_MIN


def parse_int(text: Optional[str], base: int = 10) -> int:
    """Parse a whole string as an int in ``base``.

    Base 16 requires a ``0x`` or ``0X`` prefix. Blanks may follow the
    prefix, then an optional sign and at least one digit; nothing may
    trail. Values outside the 32-bit range raise ValueError.
    """
    if not 2 <= base <= 16:
        raise ValueError(f"unsupported base {base}")
    if text is None:
        raise ValueError("no text to parse")
    rest = text
    if base == 16:
        if not rest.startswith(("0x", "0X")):
            raise ValueError(f"hexadecimal value without 0x prefix: {text!r}")
        rest = rest[2:]
    rest = rest.lstrip("".join(c for c in rest if is_space(c)) or None) if rest else rest
    sign = 1
    if rest[:1] in ("-", "+"):
        sign = -1 if rest[0] == "-" else 1
        rest = rest[1:]
    if not rest:
        raise ValueError(f"no digits in {text!r}")
    limit = INT_MAX if sign > 0 else INT_MAX + 1
    digits = _DIGITS[:base]
    value = 0
    for char in rest:
        digit = digits.find(to_upper(char))
        if digit < 0:
            raise ValueError(f"invalid digit {char!r} in {text!r}")
        value = value * base + digit
        if value > limit:
            raise ValueError(f"value out of range: {text!r}")
    return sign * value