"""Screen geometry, palette and key codes shared by the viewer."""

from enum import IntEnum

SCREEN_WIDTH = 1920
SCREEN_HEIGHT = 1080
MENU_WIDTH = 180

NO_COLOR = 0x000000
DEEP_PINK = 0xFF1493
INDIGO = 0x165E83
BLACK_DIAMOND = 0x252A2D


class Key(IntEnum):
    """X11 keysyms of the keys the viewer reacts to."""

    UP = 0xFF52
    DOWN = 0xFF54
    LEFT = 0xFF51
    RIGHT = 0xFF53

    E = 0x0065
    S = 0x0073
    D = 0x0064
    F = 0x0066
    H = 0x0068
    I = 0x0069  # noqa: E741
    J = 0x006A
    K = 0x006B
    L = 0x006C
    R = 0x0072
    P = 0x0070
    U = 0x0075
    W = 0x0077

    ESC = 0xFF1B
    PLUS = 0x003D
    MINUS = 0x002D
    LESS = 0x002C
    GREATER = 0x002E