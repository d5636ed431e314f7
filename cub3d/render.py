"""Drawing the first-person view into a pixel buffer."""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence

from .image import Image
from .mathutils import degrees_to_radians
from .raycast import Player, RayHit, angle_add, cast_ray

SCREEN_WIDTH = 640
SCREEN_HEIGHT = 480
FIELD_OF_VIEW = 60
WALL_SIZE = 64
SIDES = ("north", "south", "east", "west")

_RGB_BYTES = 3


def texture_fraction(value: float) -> int:
    """Return the hundredths of ``value`` (0-99), ignoring its sign."""
    scaled = value * 100
    if not math.isfinite(scaled):
        return 0
    return int(abs(scaled)) % 100


class Renderer:
    """Renders wall columns, floor and ceiling of a map into a screen image.

    ``textures`` maps each side name (north, south, east, west) to a square
    image of ``wall_size`` pixels.  Colours are (red, green, blue) tuples.
    """

    def __init__(
        self,
        rows: Sequence[str],
        textures: Mapping[str, Image],
        floor: tuple[int, int, int],
        ceiling: tuple[int, int, int],
        width: int = SCREEN_WIDTH,
        height: int = SCREEN_HEIGHT,
        fov: float = FIELD_OF_VIEW,
        wall_size: int = WALL_SIZE,
    ) -> None:
        missing = [side for side in SIDES if side not in textures]
        if missing:
            raise ValueError(f"missing textures: {', '.join(missing)}")
        self.rows = tuple(rows)
        self.textures = dict(textures)
        self.floor = floor
        self.ceiling = ceiling
        self.width = width
        self.height = height
        self.fov = fov
        self.wall_size = wall_size
        self.screen = Image(width, height)
        self.screen_distance = (width // 2) / math.tan(degrees_to_radians(fov / 2))

    def _texture_for(self, hit: RayHit) -> Image | None:
        if hit.orientation == -1:
            if hit.dirx == 1:
                return self.textures["east"]
            if hit.dirx == -1:
                return self.textures["west"]
        elif hit.orientation == 1:
            if hit.diry == 1:
                return self.textures["south"]
            if hit.diry == -1:
                return self.textures["north"]
        return None

    def _put_texture(
        self, texture: Image, hit: RayHit, step: int, wall: int, x: int, y: int
    ) -> None:
        size = self.wall_size
        if y - self.height // 2 > 0:
            tex_y = (wall + step) * size // (2 * wall)
        else:
            tex_y = (wall - step) * size // (2 * wall)
        along = hit.hy if hit.orientation == -1 else hit.vx
        tex_x = texture_fraction(along) * size // 100
        source = tex_x * 4 + 4 * size * tex_y
        pixel = texture.data[source:source + _RGB_BYTES]
        if len(pixel) == _RGB_BYTES:
            target = self.screen.offset(x, y)
            self.screen.data[target:target + _RGB_BYTES] = pixel

    def _fill(self, x: int, y: int, color: tuple[int, int, int]) -> None:
        red, green, blue = color
        target = self.screen.offset(x, y)
        self.screen.data[target:target + _RGB_BYTES] = bytes((blue, green, red))

    def draw_column(self, hit: RayHit, height: int, x: int) -> None:
        """Draw screen column ``x`` for a wall ``height`` pixels above and below
        the horizon, then floor below it and ceiling above it."""
        if not 0 <= x < self.width:
            raise IndexError(f"column {x} outside screen of width {self.width}")
        mid = self.height // 2
        drawn = min(height, self.height // 2) if height > 0 else 0
        texture = self._texture_for(hit)
        if texture is not None:
            for step in range(drawn):
                self._put_texture(texture, hit, step, height, x, mid + step)
            for step in range(drawn):
                self._put_texture(texture, hit, step, height, x, mid - step)
        for step in range(drawn, self.height - mid):
            self._fill(x, mid + step, self.floor)
            if mid - step >= 0:
                self._fill(x, mid - step, self.ceiling)

    def _wall_height(self, distance: float) -> int:
        if distance == 0:
            return self.height
        value = self.screen_distance * self.wall_size / distance
        if math.isnan(value):
            return 0
        if math.isinf(value):
            return self.height if value > 0 else 0
        return int(value)

    def _draw_ray(self, player: Player, delta: float, column: int) -> None:
        hit = cast_ray(self.rows, player, angle_add(player.angle, delta))
        distance = hit.distance
        if hit.orientation == 1:
            distance *= math.cos(degrees_to_radians(delta))
        else:
            distance *= math.sin(degrees_to_radians(90.0 + delta))
        self.draw_column(hit, self._wall_height(distance), column)

    def draw_frame(self, player: Player) -> Image:
        """Render the view seen by ``player`` and return the screen image."""
        step = self.fov / self.width
        half = self.width // 2
        for index in range(half):
            self._draw_ray(player, -step * index, half + index)
            self._draw_ray(player, step * index, half - index)
        if self.width % 2 == 0:
            self._draw_ray(player, step * half, half - half)
        return self.screen