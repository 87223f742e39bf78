"""Reading of height maps: rows of depths, each optionally with a colour.

A map is a text file of rows of blank-separated cells. A cell is a depth
in decimal, optionally followed by a comma and a ``0x`` colour, as in
``12`` or ``12,0xFF0000``. Every row must have the same number of cells.
"""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from typing import Iterable, List, Optional, Tuple, Union

from .linereader import LineReader
from .numeric import INT_MAX, INT_MIN, abs_diff, parse_int
from .textutil import split_fields, trim

_TRIM_CHARS = "\n "
_CELL_SEP = " "
_INFO_SEP = ","
MAX_COLOR = 0xFFFFFF


class MapError(ValueError):
    """A map file that cannot be read or is malformed."""


@dataclass
class HeightMap:
    """Depths and colours of a map; a colour of None means the map gave none."""

    width: int
    height: int
    depths: List[List[int]]
    colors: List[List[Optional[int]]]
    depth_min: int
    depth_max: int


def _split_cell(text: str) -> List[str]:
    info = split_fields(text, _INFO_SEP)
    if len(info) > 2:
        raise MapError("Failed to read map.")
    if not info:
        raise MapError("Invalid map coord.")
    return info


def _parse_depth(field: str) -> int:
    try:
        return parse_int(field, 10)
    except ValueError:
        raise MapError("Invalid map coord.") from None


def _parse_color(field: str) -> int:
    try:
        color = parse_int(field, 16)
    except ValueError:
        raise MapError("Invalid color code.") from None
    if not 0 <= color <= MAX_COLOR:
        raise MapError("Invalid color code.")
    return color


def parse_cell(text: str) -> Tuple[int, Optional[int]]:
    """Depth and colour of one cell; the colour is None when the cell has none."""
    info = _split_cell(text)
    depth = _parse_depth(info[0])
    color = _parse_color(info[1]) if len(info) == 2 else None
    return depth, color


def parse_map(lines: Iterable[str]) -> HeightMap:
    """Build a height map from its lines of text."""
    rows = [split_fields(trim(line, _TRIM_CHARS) or "", _CELL_SEP) for line in lines]
    if not rows:
        raise MapError("Invalid map.")
    width = next((len(row) for row in rows if row), 0)
    if width == 0:
        raise MapError("Invalid map.")
    if any(len(row) != width for row in rows):
        raise MapError("Invalid width in map.")

    depth_min, depth_max = INT_MAX, INT_MIN
    depths: List[List[int]] = []
    colors: List[List[Optional[int]]] = []
    for row in rows:
        depth_row: List[int] = []
        color_row: List[Optional[int]] = []
        for cell in row:
            info = _split_cell(cell)
            depth = _parse_depth(info[0])
            depth_max = max(depth_max, depth)
            depth_min = min(depth_min, depth)
            if abs_diff(depth_max, depth_min) < 0:
                raise MapError("Height difference in depth exceeds the range of int.")
            depth_row.append(depth)
            color_row.append(_parse_color(info[1]) if len(info) == 2 else None)
        depths.append(depth_row)
        colors.append(color_row)
    return HeightMap(width, len(rows), depths, colors, depth_min, depth_max)


def load_map(path: Union[str, PathLike]) -> HeightMap:
    """Read a map file.

    Only lines ended by a newline count: a final line without one is ignored.
    """
    try:
        stream = open(path, encoding="utf-8")
    except OSError as exc:
        raise MapError("Failed to open file.") from exc
    lines: List[str] = []
    try:
        with stream:
            reader = LineReader(stream)
            while True:
                line = reader.read_line()
                if reader.eof or line is None:
                    break
                lines.append(line)
    except (OSError, UnicodeDecodeError) as exc:
        raise MapError("Failed to read map.") from exc
    return parse_map(lines)