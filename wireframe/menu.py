"""The key-help panel shown at the left of the view."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

MENU_X = 10
MENU_TOP = 50
TITLE_COLOR = 0xB0E0E6
TEXT_COLOR = 0xE6E6FA

_LINES = (
    (0, TITLE_COLOR, "       Operation Key       "),
    (60, TEXT_COLOR, "- Exit           =>     ESC"),
    (50, TEXT_COLOR, "- Zoom           =>   + / -"),
    (50, TEXT_COLOR, "- Move"),
    (30, TEXT_COLOR, "   up            =>      K"),
    (30, TEXT_COLOR, "   down          =>      J"),
    (30, TEXT_COLOR, "   left          =>      H"),
    (30, TEXT_COLOR, "   right         =>      L"),
    (50, TEXT_COLOR, "- Rotate"),
    (30, TEXT_COLOR, "   x axis        =>  S / W"),
    (30, TEXT_COLOR, "   y axis        =>  D / E"),
    (30, TEXT_COLOR, "   z axis        =>  F / R"),
    (50, TEXT_COLOR, "- Adjust depth   =>  < / >"),
    (50, TEXT_COLOR, "- Projection"),
    (30, TEXT_COLOR, "   default       =>     I"),
    (30, TEXT_COLOR, "   init axis     =>     U"),
    (30, TEXT_COLOR, "   parallel      =>     P"),
)


@dataclass(frozen=True)
class MenuEntry:
    """One line of text, placed with its baseline at ``y``."""

    x: int
    y: int
    color: int
    text: str


def menu_entries() -> List[MenuEntry]:
    """The lines of the help panel, top to bottom."""
    entries: List[MenuEntry] = []
    y = MENU_TOP
    for step, color, text in _LINES:
        y += step
        entries.append(MenuEntry(MENU_X, y, color, text))
    return entries