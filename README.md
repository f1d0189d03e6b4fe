# cubcaster

`cubcaster` is a small raycasting engine for grid maps, written in pure Python
with no third-party dependencies. It draws a first-person view of a tile map into
an in-memory frame buffer. Walls are textured, and the floor and ceiling are flat
colours. The package also provides the text, byte-buffer, linked-list and
line-reading helpers that the engine uses.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

- `cubcaster.player`
  - `GameMap(rows)` holds a grid of map characters, one string per row, where
    `'1'` is a wall. Short rows read as spaces through `cell(x, y)`.
  - `Player(x, y, angle=0.0, ...)` holds a position in pixels, an angle in radians
    and the current key state. It offers `press(key)`, `release(key)`,
    `rotate(clockwise)`, `move(game_map, dx, dy)` and `step(game_map)`.
  - `check_collision(game_map, x, y)` is true when the player's 10-pixel box
    centred on `(x, y)` leaves the map or touches a wall tile.
  - `QuitRequested` is raised by `Player.press` for the escape key.
- `cubcaster.raycast`
  - `Texture(width, height, pixels)`, `TextureSet` (four wall textures plus the
    floor and ceiling colours), `FrameBuffer(width, height)` and `RayHit`.
  - `normalize_angle`, `unit_circle`, `wall_hit`, `horizontal_intersection`,
    `vertical_intersection`, `cast_ray`, `texture_x`, `render_column`,
    `cast_rays` and `render_frame`.
- `cubcaster.settings`: the `Key`, `KeyAction` and `Color` enumerations, plus
  the screen size, tile size, field of view and speed constants.
- `cubcaster.linereader`: `LineReader` reads a text or binary stream one line at
  a time through a fixed-size buffer. `get_next_line(fd)` does the same for
  file descriptors and keeps unread data separately for each descriptor.
- `cubcaster.strings`, `cubcaster.chars`, `cubcaster.memory`,
  `cubcaster.lists` and `cubcaster.output` provide helpers for strings
  (`atoi`, `split`, `strtrim`, `strlcpy`, ...), ASCII characters, byte buffers,
  a singly linked list (`LinkedList`) and writing to a text stream.

## Example

```python
from cubcaster.player import GameMap, Player
from cubcaster.raycast import FrameBuffer, Texture, TextureSet, render_frame
from cubcaster.settings import Color, Key

game_map = GameMap(["11111", "10001", "10001", "11111"])
player = Player(x=45, y=45)

wall = Texture(2, 2, [Color.RED, Color.WHITE, Color.WHITE, Color.RED])
textures = TextureSet(
    north=wall, south=wall, west=wall, east=wall,
    floor_color=Color.DARK_BROWN, ceiling_color=Color.SKY_BLUE,
)
frame = FrameBuffer(320, 200)

player.press(Key.W)
hits = render_frame(frame, game_map, player, textures)  # one RayHit per column
print(player.x, player.y, frame.get_pixel(0, 0))
```

`render_frame` first advances the player by one frame, applying the rotation and
movement selected by the held keys. It then casts one ray per frame column and
draws each column. A move is rejected when the player's box would overlap a wall
tile or leave the map.

## What it does not do

`cubcaster` opens no window and runs no event loop. It does not read keyboard
input either. Feed key codes to `Player.press` and `Player.release` yourself, and
display the `FrameBuffer` contents with whatever graphics library you use. It
also does not read scene description files: build the map as a `GameMap` from
strings, the textures as `Texture` objects and the colours yourself. There is no
command-line program.