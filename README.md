# cub3d

Building blocks for a first-person maze explorer: a grid ray caster, a
renderer that draws textured walls, floor and ceiling into an in-memory
pixel buffer, player movement, and a reader for XPM texture images. It uses
only the standard library.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `cub3d.image`

`Image(width, height)` is a 32 bits-per-pixel, little-endian pixel buffer.
A colour `0xAARRGGBB` is stored as the bytes `BB GG RR AA`.

- `put_pixel(x, y, color)` stores a colour (truncated to 32 bits).
- `get_pixel(x, y)` returns the unsigned 32-bit colour.
- `offset(x, y)` gives the byte offset of a pixel in `data`.

Both pixel methods raise `IndexError` outside the image; a non-positive size
raises `ValueError`.

### `cub3d.xpm`

- `load_xpm(path)` reads an XPM file into an `Image`.
- `parse_xpm(lines)` decodes the quoted lines (header, colours, pixel rows).
- `strip_comments(text)` blanks out `/* */` and `//` comments outside quotes.
- `quoted_lines(text)` yields the contents of each pair of double quotes.
- `split_words(text)` splits on spaces and tabs.
- `text_to_rgb(name, qualifier)` turns `#RRGGBB` or a colour name into
  `0xRRGGBB`; unknown names give 0 and `None` gives -1.

Transparent pixels (`None`) are stored as `0xFF000000`. Problems are raised
as `XpmError`, a subclass of `ValueError`.

### `cub3d.colornames`

`color_by_name(name)` looks up an X11 colour name, ignoring case, and raises
`KeyError` for unknown names.

### `cub3d.raycast`

- `Player(x, y, pos_x=50.0, pos_y=50.0, angle=0.0)` holds the map cell, the
  offset inside it (0–100) and the heading in degrees (0 east, 90 north,
  180 west, 270 south). `update_direction()` sets `dirx`/`diry` from it.
- `cast_ray(rows, player, angle)` walks a ray through the map (a sequence of
  strings in which `"1"` is a wall) and returns a `RayHit` with the
  distance in hundredths of a cell and which kind of grid line was hit.
- `angle_add(base, delta)` adds degrees, wrapping into [0, 360).
- `is_open(rows, x, y)` tells whether a point lies in a passable cell.

### `cub3d.render`

`Renderer(rows, textures, floor, ceiling, width=640, height=480, fov=60,
wall_size=64)` draws into `renderer.screen`. `textures` maps `"north"`,
`"south"`, `"east"` and `"west"` to square images of `wall_size` pixels;
`floor` and `ceiling` are `(red, green, blue)` tuples.

- `draw_frame(player)` renders the whole view and returns the screen image.
- `draw_column(hit, height, x)` draws one column.
- `texture_fraction(value)` returns the hundredths of a value, 0–99.

### `cub3d.movement`

`Action` lists the commands (`MOVE_FORWARD`, `MOVE_BACK`, `MOVE_LEFT`,
`MOVE_RIGHT`, `ROTATE_LEFT`, `ROTATE_RIGHT`). `apply_action(player, action)`
turns by 5 degrees or steps by 10 hundredths of a cell and moves the player
into the neighbouring cell when the offset leaves the 0–100 range. The parts
are also available as `rotate`, `step` and `wrap_cell`. `format_position(rows)`
returns a plain listing of the map.

### `cub3d.mathutils`

`degrees_to_radians`, `radians_to_degrees`, `has_fraction`, `find_x`
(`sin(degrees) * length`) and `find_y` (`cos(degrees) * length`).

## Example

```python
from cub3d.image import Image
from cub3d.raycast import Player
from cub3d.render import Renderer
from cub3d.movement import Action, apply_action

rows = ["11111", "10001", "10001", "11111"]
wall = Image(64, 64)
textures = {side: wall for side in ("north", "south", "east", "west")}
renderer = Renderer(rows, textures, floor=(220, 100, 0), ceiling=(225, 30, 0))

player = Player(x=2, y=1, angle=270)
apply_action(player, Action.ROTATE_LEFT)
screen = renderer.draw_frame(player)
print(hex(screen.get_pixel(0, 0)))
```

## What this package does not do

There is no command to run, no window, no keyboard handling and no reading
of scene description files: the package does not parse floor and ceiling
settings, texture paths or the map from a file, and does not check that a map
is closed by walls or has a start position. The caller supplies the map rows,
the textures and the colours, and shows the rendered `Image` however it
chooses.