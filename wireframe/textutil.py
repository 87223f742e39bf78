"""Small character and string helpers with C-library semantics."""

from __future__ import annotations

from itertools import zip_longest
from typing import Optional, Union

Char = Union[str, int]


def _code(c: Char) -> int:
    return c if isinstance(c, int) else ord(c)


def is_digit(c: Char) -> bool:
    """True for the ASCII digits '0'..'9'."""
    return ord("0") <= _code(c) <= ord("9")


def is_space(c: Char) -> bool:
    """True for a blank or any of the control characters TAB..CR."""
    code = _code(c)
    return code == ord(" ") or ord("\t") <= code <= ord("\r")


def to_upper(c: Char) -> Char:
    """Upper-case an ASCII letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= ord("a") - ord("A")
    return code if isinstance(c, int) else chr(code)


def fill(buffer: bytearray, value: int, length: Optional[int] = None) -> bytearray:
    """Set the first ``length`` bytes of ``buffer`` to ``value`` (mod 256)."""
    if length is None:
        length = len(buffer)
    if length < 0 or length > len(buffer):
        raise ValueError(f"length {length} out of range for buffer of {len(buffer)} bytes")
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def split_fields(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty fields."""
    return [field for field in text.split(sep) if field]


def trim(text: Optional[str], chars: Optional[str]) -> Optional[str]:
    """Strip any of ``chars`` from both ends of ``text``; None if either is None."""
    if text is None or chars is None:
        return None
    return text.strip(chars) if chars else text


def substring(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` from ``start``; empty past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def bounded_copy(text: str, size: int) -> tuple[str, int]:
    """Copy that fits a buffer of ``size`` including its terminator.

    Returns the copied text and the full length of ``text``, so a result
    shorter than the returned length means truncation.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return "", len(text)
    return text[:size - 1], len(text)


def compare_prefix(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters; negative, zero or positive like strncmp."""
    for ca, cb in zip_longest(a[:n], b[:n], fillvalue=""):
        oa = ord(ca) if ca else 0
        ob = ord(cb) if cb else 0
        if oa != ob:
            return oa - ob
        if oa == 0:
            return 0
    return 0