"""printf-style formatting for the conversions c, s, d, i, u, x, X, p and %.

Flags '-', '+', ' ', '#' and '0' are read in that order, followed by an
optional width and precision, either of which may be '*' to take the
value from the arguments. A conversion character that is not recognised
is written out literally.
"""

from __future__ import annotations

import operator
import sys
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, TextIO

from .textutil import is_digit

INT_MAX = 2**31 - 1
_UINT32_MASK = 0xFFFF_FFFF
_SIZE_MASK = 0xFFFF_FFFF_FFFF_FFFF
CONVERSIONS = "%csidupxX"


@dataclass
class _Spec:
    align: bool = False
    plus: bool = False
    space: bool = False
    sharp: bool = False
    zero: bool = False
    width: int = 0
    precision: int = 0
    has_precision: bool = False


def _int32(value: Any) -> int:
    number = operator.index(value) & _UINT32_MASK
    return number - (1 << 32) if number > INT_MAX else number


class _Formatter:
    def __init__(self, fmt: str, args: Iterable[Any]) -> None:
        self._fmt = fmt
        self._pos = 0
        self._args = iter(args)
        self._parts: List[str] = []
        self._total = 0

    def format(self) -> str:
        fmt = self._fmt
        while self._pos < len(fmt):
            percent = fmt.find("%", self._pos)
            if percent < 0:
                self._emit(fmt[self._pos:])
                break
            self._emit(fmt[self._pos:percent])
            if percent + 1 == len(fmt):
                raise ValueError("format string ends with a lone '%'")
            self._pos = percent + 1
            spec = _Spec()
            self._read_flags(spec)
            self._read_width_precision(spec)
            self._convert(spec)
        return "".join(self._parts)

    # output ---------------------------------------------------------------

    def _reserve(self, count: int) -> None:
        self._total += count
        if self._total > INT_MAX:
            raise OverflowError("formatted output exceeds INT_MAX characters")

    def _emit(self, text: str) -> None:
        if text:
            self._reserve(len(text))
            self._parts.append(text)

    def _pad(self, char: str, count: int) -> None:
        if count > 0:
            self._reserve(count)
            self._parts.append(char * count)

    def _output(self, spec: _Spec, body: str, sign: str = "",
                numeric: bool = False, precision_zeros: int = 0) -> None:
        pad = max(spec.width, 0)
        if not spec.align and not spec.zero:
            self._pad(" ", pad)
        if numeric:
            if not sign and spec.space:
                self._emit(" ")
            self._emit(sign)
        self._pad("0", precision_zeros)
        if not spec.align and spec.zero:
            self._pad("0", pad)
        self._emit(body)
        if spec.align:
            self._pad("0" if spec.zero else " ", pad)

    # parsing --------------------------------------------------------------

    def _peek(self) -> str:
        return self._fmt[self._pos] if self._pos < len(self._fmt) else ""

    def _at_digit(self) -> bool:
        char = self._peek()
        return bool(char) and is_digit(char)

    def _read_number(self) -> int:
        start = self._pos
        while self._at_digit():
            self._pos += 1
        value = int(self._fmt[start:self._pos])
        if value > INT_MAX:
            raise OverflowError(f"field value {value} exceeds INT_MAX")
        return value

    def _next_arg(self) -> Any:
        try:
            return next(self._args)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None

    def _read_flags(self, spec: _Spec) -> None:
        while self._peek() in ("-", "+", " "):
            char = self._peek()
            if char == "-":
                spec.align = True
            if char == "+":
                spec.plus = True
            spec.space = char == " " and not spec.plus
            self._pos += 1
        if self._peek() == "#":
            spec.sharp = True
            self._pos += 1
        if self._peek() == "0":
            spec.zero = True
            self._pos += 1

    def _read_width_precision(self, spec: _Spec) -> None:
        if self._peek() == "*":
            spec.width = _int32(self._next_arg())
            self._pos += 1
        if self._at_digit():
            spec.width = self._read_number()
        if self._peek() == ".":
            self._pos += 1
            spec.has_precision = True
            if self._peek() == "*":
                spec.precision = _int32(self._next_arg()) & _SIZE_MASK
                self._pos += 1
            if self._at_digit():
                spec.precision = self._read_number()

    # conversions ----------------------------------------------------------

    def _convert(self, spec: _Spec) -> None:
        conversion = self._peek()
        if not conversion or conversion not in CONVERSIONS:
            return
        self._pos += 1
        if conversion in "%c":
            self._character(spec, conversion)
        elif conversion == "s":
            self._string(spec)
        else:
            self._integer(spec, conversion)

    def _char_arg(self) -> str:
        arg = self._next_arg()
        if isinstance(arg, str):
            if len(arg) != 1:
                raise TypeError("%c expects a single character or an integer")
            return arg
        return chr(operator.index(arg) & 0xFF)

    def _character(self, spec: _Spec, conversion: str) -> None:
        char = "%" if conversion == "%" else self._char_arg()
        if spec.width:
            spec.width -= 1
        self._output(spec, char)

    def _string(self, spec: _Spec) -> None:
        arg: Optional[Any] = self._next_arg()
        if arg is None:
            arg = "(null)"
        elif not isinstance(arg, str):
            raise TypeError("%s expects a string or None")
        length = 0 if spec.has_precision and spec.precision == 0 else len(arg)
        if spec.precision and spec.precision < length:
            length = spec.precision
        if spec.width:
            spec.width -= length
        self._output(spec, arg[:length])

    def _integer(self, spec: _Spec, conversion: str) -> None:
        sign = ""
        if conversion in "di":
            value = _int32(self._next_arg())
            if value < 0:
                sign = "-"
                value = -value
        elif conversion == "p":
            value = operator.index(self._next_arg()) & _SIZE_MASK
        else:
            value = operator.index(self._next_arg()) & _UINT32_MASK
        if spec.plus and sign != "-":
            sign = "+"

        if conversion in "di" or conversion == "u":
            digits = str(value)
        else:
            digits = format(value, "X" if conversion == "X" else "x")
        prefix = ""
        if conversion == "p" or (spec.sharp and conversion == "x" and value):
            prefix = "0x"
        elif spec.sharp and conversion == "X" and value:
            prefix = "0X"
        body = prefix + digits

        extra = bool(sign) + spec.space
        if spec.precision + extra > INT_MAX + 1:
            raise OverflowError("precision exceeds INT_MAX")
        if spec.zero and (spec.has_precision or spec.align):
            spec.zero = False
        if body.startswith("0") and spec.has_precision and spec.precision == 0:
            body = ""
        length = len(body)
        if spec.width and spec.precision and length < spec.precision:
            spec.width -= spec.precision + extra
        elif spec.width:
            spec.width -= length + extra
        precision_zeros = spec.precision - length if length < spec.precision else 0
        self._output(spec, body, sign, numeric=True, precision_zeros=precision_zeros)


def sprintf(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the text."""
    return _Formatter(fmt, args).format()


def fprintf(stream: TextIO, fmt: str, *args: Any) -> int:
    """Write the formatted text to ``stream``; return the number of characters."""
    text = sprintf(fmt, *args)
    stream.write(text)
    return len(text)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return the number of characters."""
    return fprintf(sys.stdout, fmt, *args)