"""Ray casting against the map grid and drawing the textured 3D view."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .player import WALL, GameMap, Player
from .settings import SCREEN_HEIGHT, SCREEN_WIDTH, TILE_SIZE

_TWO_PI = 2 * math.pi
_HALF_PI = math.pi / 2
_THREE_HALF_PI = 3 * math.pi / 2


@dataclass(frozen=True)
class Texture:
    """A wall image: ``width * height`` colours stored row by row."""

    width: int
    height: int
    pixels: Sequence[int]

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"texture size must be positive: {self.width}x{self.height}")
        if len(self.pixels) != self.width * self.height:
            raise ValueError(
                f"expected {self.width * self.height} pixels, got {len(self.pixels)}"
            )
        object.__setattr__(self, "pixels", tuple(self.pixels))

    def pixel(self, x: int, y: int) -> int:
        """Colour at column ``x`` of row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"texel ({x}, {y}) lies outside the texture")
        return self.pixels[y * self.width + x]


@dataclass(frozen=True)
class TextureSet:
    """The four wall textures and the floor and ceiling colours."""

    north: Texture
    south: Texture
    west: Texture
    east: Texture
    floor_color: int = 0
    ceiling_color: int = 0

    def select(self, angle: float, horizontal: bool) -> Texture:
        """Texture of the wall a ray at ``angle`` hits.

        ``horizontal`` tells whether the wall was met on a horizontal grid line.
        """
        angle = normalize_angle(angle)
        if not horizontal:
            return self.west if _HALF_PI < angle < _THREE_HALF_PI else self.east
        return self.south if 0 < angle < math.pi else self.north


class FrameBuffer:
    """A rectangle of 32-bit colours."""

    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"frame size must be positive: {width}x{height}")
        self.width = width
        self.height = height
        self._pixels: List[int] = [0] * (width * height)

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) lies outside the frame")
        return y * self.width + x

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set the pixel at (x, y), keeping the low 32 bits of ``color``."""
        self._pixels[self._index(x, y)] = color & 0xFFFFFFFF

    def get_pixel(self, x: int, y: int) -> int:
        """Colour of the pixel at (x, y)."""
        return self._pixels[self._index(x, y)]


@dataclass(frozen=True)
class RayHit:
    """Where a ray met a wall.

    ``horizontal`` is true when the wall was met on a horizontal grid line;
    ``distance`` is the straight distance from the player, before any
    perspective correction.
    """

    angle: float
    distance: float
    horizontal: bool
    x: float
    y: float


def normalize_angle(angle: float) -> float:
    """Bring an angle that is at most one turn out of range back into [0, 2*pi]."""
    if angle < 0:
        angle += _TWO_PI
    if angle > _TWO_PI:
        angle -= _TWO_PI
    return angle


def unit_circle(angle: float, axis: str) -> bool:
    """For ``'x'``: the angle points down the screen; for ``'y'``: it points left."""
    if axis == "x":
        return 0 < angle < math.pi
    if axis == "y":
        return _HALF_PI < angle < _THREE_HALF_PI
    raise ValueError(f"axis must be 'x' or 'y', got {axis!r}")


def wall_hit(game_map: GameMap, x: float, y: float) -> bool:
    """True while (x, y) is open space a ray may pass through.

    A point outside the map or inside a wall cell stops the ray.
    """
    if not (math.isfinite(x) and math.isfinite(y)):
        return False
    if x < 0 or y < 0:
        return False
    cx = math.floor(x / TILE_SIZE)
    cy = math.floor(y / TILE_SIZE)
    if cy >= game_map.height or cx >= game_map.width:
        return False
    return game_map.cell(cx, cy) != WALL


def _divide(a: float, b: float) -> float:
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _tile_origin(coordinate: float) -> float:
    return float(math.trunc(coordinate / TILE_SIZE) * TILE_SIZE)


def _distance(player: Player, x: float, y: float) -> float:
    distance = math.hypot(x - player.x, y - player.y)
    return math.inf if math.isnan(distance) else distance


def horizontal_intersection(
    game_map: GameMap, player: Player, angle: float
) -> Tuple[float, float, float]:
    """Follow a ray across horizontal grid lines until it meets a wall.

    Returns the distance and the point of the hit.
    """
    tangent = math.tan(angle)
    y_step = float(TILE_SIZE)
    x_step = _divide(TILE_SIZE, tangent)
    hit_y = _tile_origin(player.y)
    if 0 < angle < math.pi:
        hit_y += TILE_SIZE
        pixel = -1
    else:
        y_step = -y_step
        pixel = 1
    hit_x = player.x + _divide(hit_y - player.y, tangent)
    facing_left = unit_circle(angle, "y")
    if (facing_left and x_step > 0) or (not facing_left and x_step < 0):
        x_step = -x_step
    while wall_hit(game_map, hit_x, hit_y - pixel):
        hit_x += x_step
        hit_y += y_step
    return _distance(player, hit_x, hit_y), hit_x, hit_y


def vertical_intersection(
    game_map: GameMap, player: Player, angle: float
) -> Tuple[float, float, float]:
    """Follow a ray across vertical grid lines until it meets a wall.

    Returns the distance and the point of the hit.
    """
    tangent = math.tan(angle)
    x_step = float(TILE_SIZE)
    y_step = TILE_SIZE * tangent
    hit_x = _tile_origin(player.x)
    if not (_HALF_PI < angle < _THREE_HALF_PI):
        hit_x += TILE_SIZE
        pixel = -1
    else:
        x_step = -x_step
        pixel = 1
    hit_y = player.y + (hit_x - player.x) * tangent
    facing_down = unit_circle(angle, "x")
    if (facing_down and y_step < 0) or (not facing_down and y_step > 0):
        y_step = -y_step
    while wall_hit(game_map, hit_x - pixel, hit_y):
        hit_x += x_step
        hit_y += y_step
    return _distance(player, hit_x, hit_y), hit_x, hit_y


def cast_ray(game_map: GameMap, player: Player, angle: float) -> RayHit:
    """Cast one ray and keep the nearer of its two grid-line hits."""
    angle = normalize_angle(angle)
    h_dist, h_x, h_y = horizontal_intersection(game_map, player, angle)
    v_dist, v_x, v_y = vertical_intersection(game_map, player, angle)
    if v_dist <= h_dist:
        return RayHit(angle, v_dist, False, v_x, v_y)
    return RayHit(angle, h_dist, True, h_x, h_y)


def texture_x(hit: RayHit, texture: Texture) -> float:
    """Texture column matching where along its tile the ray met the wall."""
    coordinate = hit.x if hit.horizontal else hit.y
    if not math.isfinite(coordinate):
        return 0.0
    return (math.fmod(math.trunc(coordinate), TILE_SIZE) / TILE_SIZE) * texture.width


def _draw_wall(
    frame: FrameBuffer,
    texture: Texture,
    hit: RayHit,
    column: int,
    top: int,
    bottom: int,
    wall_height: float,
) -> None:
    half_height = frame.height // 2
    if math.isfinite(wall_height):
        step = texture.height / wall_height
        tex_y = (top - half_height + wall_height / 2) * step
    else:
        step = 0.0
        tex_y = 0.0
    tex_y = max(tex_y, 0.0)
    tex_x = min(max(int(texture_x(hit, texture)), 0), texture.width - 1)
    for y in range(top, bottom):
        row = min(int(tex_y), texture.height - 1)
        frame.put_pixel(column, y, texture.pixel(tex_x, row))
        tex_y += step


def render_column(
    frame: FrameBuffer,
    textures: TextureSet,
    player: Player,
    hit: RayHit,
    column: int,
) -> Tuple[int, int]:
    """Draw ceiling, wall and floor for one screen column.

    Returns the first and one-past-last rows covered by the wall.
    """
    half_width = frame.width // 2
    half_height = frame.height // 2
    distance = hit.distance * math.cos(normalize_angle(hit.angle - player.angle))
    if math.isnan(distance) or math.isinf(distance):
        wall_height = 0.0
    elif distance <= 0:
        wall_height = math.inf
    else:
        wall_height = (TILE_SIZE / distance) * (half_width / math.tan(player.fov / 2))
    top = int(max(half_height - wall_height / 2, 0.0))
    bottom = int(min(half_height + wall_height / 2, float(frame.height)))
    if top < bottom:
        texture = textures.select(hit.angle, hit.horizontal)
        _draw_wall(frame, texture, hit, column, top, bottom, wall_height)
    for y in range(max(bottom, 0), frame.height):
        frame.put_pixel(column, y, textures.floor_color)
    for y in range(0, min(top, frame.height)):
        frame.put_pixel(column, y, textures.ceiling_color)
    return top, bottom


def cast_rays(
    frame: FrameBuffer, game_map: GameMap, player: Player, textures: TextureSet
) -> List[RayHit]:
    """Cast one ray per frame column across the field of view and draw each."""
    hits: List[RayHit] = []
    angle = player.angle - player.fov / 2
    step = player.fov / frame.width
    for column in range(frame.width):
        hit = cast_ray(game_map, player, angle)
        render_column(frame, textures, player, hit, column)
        hits.append(hit)
        angle = hit.angle + step
    return hits


def render_frame(
    frame: FrameBuffer, game_map: GameMap, player: Player, textures: TextureSet
) -> List[RayHit]:
    """Advance the player by one frame, then draw the view into ``frame``."""
    player.step(game_map)
    return cast_rays(frame, game_map, player, textures)