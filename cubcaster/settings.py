"""Game constants: window geometry, movement tuning, key codes and colours."""

from __future__ import annotations

import math
from enum import IntEnum

SCREEN_WIDTH = 1000
SCREEN_HEIGHT = 1000
TILE_SIZE = 30
FOV = 60
FOV_RADIANS = math.radians(FOV)
ROTATE_SPEED = 0.2
PLAYER_SPEED = 4

# Size of the collision box around the player, in pixels from its centre.
PLAYER_MARGIN = 5

DESTROY_EVENT = 17

WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 832
NUM_RAYS = WINDOW_WIDTH
MINIMAP_SCALE_FACTOR = 0.3
AIM_ZOOM_FPS = 20
AIM_ZOOM_INCREMENT = 0.1


class Key(IntEnum):
    """Keyboard codes delivered by the window system."""

    A = 0
    S = 1
    D = 2
    F = 3
    Z = 6
    X = 7
    C = 8
    Q = 12
    W = 13
    T = 17
    ONE = 18
    TWO = 19
    THREE = 20
    ZOOM_IN = 24
    ZOOM_OUT = 27
    ENTER = 36
    LOOP = 37
    NMESH = 45
    MESH = 46
    ESCAPE = 53
    PLUS = 69
    NUMPAD_ENTER = 76
    MINUS = 78
    LEFT = 123
    RIGHT = 124
    DOWN = 125
    UP = 126
    SHIFT = 258
    REDO = 666


class KeyAction(IntEnum):
    """Kinds of keyboard event."""

    REPEAT = 1
    PRESS = 2
    RELEASE = 3


class Color(IntEnum):
    """Named 32-bit colours (0xAARRGGBB)."""

    NONE = 0xFF000000
    GRAY = 0x808080
    DARK_BLUE = 0x00008B
    WHITE = 0x00FFFFFF
    YELLOW = 0x00FFFF00
    GREEN = 0x0000FF00
    RED = 0x00FF0000
    CYAN = 0x0000FFFF
    BLACK = 0x00000000
    TRANSPARENT_BLACK = 0x33000000
    BLUE = 0x000000FF
    MAGENTA = 0x00FF00FF
    EGYPTIAN_BLUE = 0x1434A4
    DARKER_BLUE = 0x192841
    BRIGHTER_YELLOW = 0xD1D100
    BRIGHT_YELLOW = 0xF1E488
    DARK_BROWN = 0x5C4033
    SKY_BLUE = 0x87CEEB
    MIDNIGHT_BLUE = 0x191970
    AZURE = 0xF0FFFF
    DARK_ORANGE = 0x1D0320
    ORANGE = 0x00FFA500
    PURPLE = 0x800080
    PINK = 0x00FFC0CB
    LIGHT_GRAY = 0xD3D3D3
    DARK_GRAY = 0xA9A9A9
    LIGHT_BLUE = 0xADD8E6
    LIGHT_GREEN = 0x90EE90
    GOLD = 0x00FFD700
    SILVER = 0xC0C0C0
    TEAL = 0x008080
    PEACH = 0xFFDAB9
    TAN = 0xD2B48C
    LAVENDER = 0xE6E6FA
    INDIGO = 0x4B0082
    CORAL = 0xFF7F50
    MINT_GREEN = 0x98FF98
    CHOCOLATE = 0xD2691E
    SLATE_GRAY = 0x708090
    KHAKI = 0xF0E68C
    SALMON = 0xFA8072
    TURQUOISE = 0x40E0D0
    FUCHSIA = 0xFF00FF
    LIME = 0x00FF00
    OLIVE = 0x808000
    NAVY = 0x000080
    BISQUE = 0xFFE4C4
    SADDLE_BROWN = 0x8B4513
    RUST = 0xB7410E
    DARK_SLATE_GRAY = 0x2F4F4F
    VIOLET = 0xEE82EE
    DEEP_PINK = 0xFF1493
    IVORY = 0xFFFFF0