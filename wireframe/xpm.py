"""Reading of XPM pixmaps into rows of 0xRRGGBB pixel values."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Union

from .colornames import NO_COLOR_NAME, lookup_color

TRANSPARENT = 0xFF000000

_ATOI = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")
_QUOTED = re.compile(r'"([^"]*)"')
_WORD_SEPARATORS = re.compile(r"[ \t]+")


@dataclass
class XpmImage:
    """A decoded pixmap: ``pixels`` holds ``height`` rows of ``width`` colours."""

    width: int
    height: int
    pixels: List[List[int]] = field(default_factory=list)


def split_words(text: str) -> List[str]:
    """Words of ``text`` separated by blanks and tabs."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def find_unquoted(text: str, needle: str) -> int:
    """Index of the first ``needle`` outside double quotes, or -1."""
    if not needle:
        raise ValueError("needle must not be empty")
    quoted = False
    for pos, char in enumerate(text[:len(text) - len(needle) + 1]):
        if char == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1


def strip_comments(text: str) -> str:
    """Blank out C comments outside quoted strings, keeping every offset."""
    while (begin := find_unquoted(text, "/*")) != -1:
        end = text.find("*/", begin + 2)
        stop = end + 2 if end != -1 else begin + 3
        stop = min(stop, len(text))
        text = text[:begin] + " " * (stop - begin) + text[stop:]
    while (begin := find_unquoted(text, "//")) != -1:
        end = text.find("\n", begin + 2)
        stop = end + 1 if end != -1 else begin + 2
        stop = min(stop, len(text))
        text = text[:begin] + " " * (stop - begin) + text[stop:]
    return text


def _atoi(text: str) -> int:
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


def _next_line(rows: Iterator[str], what: str) -> str:
    try:
        return next(rows)
    except StopIteration:
        raise ValueError(f"XPM data ends before the {what}") from None


def _read_palette(rows: Iterator[str], count: int, cpp: int) -> Dict[str, int]:
    palette: Dict[str, int] = {}
    first_wins = cpp > 2
    for _ in range(count):
        line = _next_line(rows, "colour definitions")
        words = split_words(line[cpp:])
        try:
            index = words.index("c")
        except ValueError:
            raise ValueError(f"colour definition without 'c' key: {line!r}") from None
        if index + 1 >= len(words):
            raise ValueError(f"colour definition without a colour: {line!r}")
        extra: Optional[str] = words[index + 2] if index + 2 < len(words) else None
        value = lookup_color(words[index + 1], extra)
        key = line[:cpp]
        if first_wins:
            palette.setdefault(key, value)
        else:
            palette[key] = value
    return palette


def parse_xpm(lines: Iterable[str]) -> XpmImage:
    """Decode XPM data given as its strings, header first."""
    rows = iter(lines)
    header = split_words(_next_line(rows, "header"))
    if len(header) < 4:
        raise ValueError(f"XPM header needs four values, got {header!r}")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise ValueError(f"invalid XPM header {header!r}")
    palette = _read_palette(rows, ncolors, cpp)
    pixels: List[List[int]] = []
    for _ in range(height):
        line = _next_line(rows, "pixel rows")
        if len(line) < width * cpp:
            raise ValueError(f"pixel row too short: {line!r}")
        keys = (line[start:start + cpp] for start in range(0, width * cpp, cpp))
        row = [palette.get(key, 0) for key in keys]
        pixels.append([TRANSPARENT if color == NO_COLOR_NAME else color for color in row])
    return XpmImage(width, height, pixels)


def load_xpm(path: Union[str, PathLike]) -> XpmImage:
    """Read and decode an XPM file."""
    text = strip_comments(Path(path).read_text())
    return parse_xpm(_QUOTED.findall(text))