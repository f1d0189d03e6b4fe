"""The map grid, the player's state and its keyboard-driven movement."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, List

from .settings import (
    FOV_RADIANS,
    PLAYER_MARGIN,
    PLAYER_SPEED,
    ROTATE_SPEED,
    TILE_SIZE,
    Key,
)

WALL = "1"
_TWO_PI = 2 * math.pi


class QuitRequested(Exception):
    """Raised when the player asks to leave the game."""


class GameMap:
    """A grid of map characters, one string per row."""

    def __init__(self, rows: Iterable[str]) -> None:
        self.rows: List[str] = [row.rstrip("\n") for row in rows]
        self.height = len(self.rows)
        self.width = max((len(row) for row in self.rows), default=0)

    def cell(self, x: int, y: int) -> str:
        """Character at column ``x`` of row ``y``; short rows read as spaces."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"cell ({x}, {y}) lies outside the map")
        row = self.rows[y]
        return row[x] if x < len(row) else " "

    def __repr__(self) -> str:
        return f"GameMap({self.rows!r})"


def _tile(coordinate: float) -> int:
    """Tile index of a pixel coordinate, truncating towards zero."""
    value = math.trunc(coordinate)
    quotient = abs(value) // TILE_SIZE
    return -quotient if value < 0 else quotient


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def check_collision(game_map: GameMap, x: float, y: float) -> bool:
    """True when the player's box centred on (x, y) leaves the map or touches a wall."""
    left = _tile(x - PLAYER_MARGIN)
    top = _tile(y - PLAYER_MARGIN)
    right = _tile(x + PLAYER_MARGIN)
    bottom = _tile(y + PLAYER_MARGIN)
    for cx in (left, right):
        if not 0 <= cx < game_map.width:
            return True
    for cy in (top, bottom):
        if not 0 <= cy < game_map.height:
            return True
    return any(
        game_map.cell(cx, cy) == WALL for cy in (top, bottom) for cx in (left, right)
    )


@dataclass
class Player:
    """Position in pixels, view angle in radians and the current key state."""

    x: int
    y: int
    angle: float = 0.0
    fov: float = field(default=FOV_RADIANS)
    rotation: int = 0
    strafe: int = 0
    forward: int = 0

    def press(self, key: int) -> None:
        """Update the movement state for a key going down."""
        if key == Key.ESCAPE:
            raise QuitRequested()
        if key == Key.A:
            self.strafe -= 1
        elif key == Key.D:
            self.strafe += 1
        elif key == Key.S:
            self.forward = -1
        elif key == Key.W:
            self.forward = 1
        elif key == Key.LEFT:
            self.rotation = -1
        elif key == Key.RIGHT:
            self.rotation = 1

    def release(self, key: int) -> None:
        """Update the movement state for a key coming up."""
        if key in (Key.A, Key.D):
            self.strafe = 0
        elif key in (Key.S, Key.W):
            self.forward = 0
        elif key in (Key.LEFT, Key.RIGHT):
            self.rotation = 0

    def rotate(self, clockwise: bool) -> None:
        """Turn by one rotation step, keeping the angle within one turn."""
        if clockwise:
            self.angle += ROTATE_SPEED
            if self.angle > _TWO_PI:
                self.angle -= _TWO_PI
        else:
            self.angle -= ROTATE_SPEED
            if self.angle < 0:
                self.angle += _TWO_PI

    def move(self, game_map: GameMap, dx: float, dy: float) -> bool:
        """Move by (dx, dy) unless that would collide; return whether it moved."""
        new_x = _round_half_away(self.x + dx)
        new_y = _round_half_away(self.y + dy)
        if check_collision(game_map, new_x, new_y):
            return False
        self.x = new_x
        self.y = new_y
        return True

    def step(self, game_map: GameMap) -> bool:
        """Apply one frame of rotation and movement; return whether it moved."""
        if self.rotation == 1:
            self.rotate(True)
        elif self.rotation == -1:
            self.rotate(False)
        dx = dy = 0.0
        sin_a = math.sin(self.angle)
        cos_a = math.cos(self.angle)
        if self.strafe == 1:
            dx, dy = -sin_a * PLAYER_SPEED, cos_a * PLAYER_SPEED
        elif self.strafe == -1:
            dx, dy = sin_a * PLAYER_SPEED, -cos_a * PLAYER_SPEED
        if self.forward == 1:
            dx, dy = cos_a * PLAYER_SPEED, sin_a * PLAYER_SPEED
        elif self.forward == -1:
            dx, dy = -cos_a * PLAYER_SPEED, -sin_a * PLAYER_SPEED
        return self.move(game_map, dx, dy)