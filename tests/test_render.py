import math

import pytest

from cub3d.image import Image
from cub3d.raycast import Player, RayHit
from cub3d.render import Renderer, texture_fraction

COLORS = {
    "north": 0x102030,
    "south": 0x405060,
    "east": 0x708090,
    "west": 0xA0B0C0,
}
FLOOR = (10, 20, 30)
CEILING = (200, 150, 100)


def solid(size, color):
    image = Image(size, size)
    for y in range(size):
        for x in range(size):
            image.put_pixel(x, y, color)
    return image


def textures(size):
    return {side: solid(size, color) for side, color in COLORS.items()}


def rgb_at(image, x, y):
    return image.get_pixel(x, y) & 0xFFFFFF


def test_texture_fraction_positive():
    assert texture_fraction(1.25) == 25


def test_texture_fraction_ignores_sign():
    assert texture_fraction(-3.5) == 50


def test_texture_fraction_non_finite():
    assert texture_fraction(math.nan) == 0
    assert texture_fraction(math.inf) == 0


def test_texture_fraction_range():
    for value in (0.0, 0.3, 7.77, -12.01, 99.99):
        assert 0 <= texture_fraction(value) < 100


def test_missing_texture_rejected():
    partial = textures(4)
    del partial["west"]
    with pytest.raises(ValueError):
        Renderer(["1"], partial, FLOOR, CEILING, width=4, height=6, wall_size=4)


@pytest.mark.parametrize(
    "orientation, dirx, diry, side",
    [
        (-1, 1, 1, "east"),
        (-1, -1, 1, "west"),
        (1, 1, 1, "south"),
        (1, 1, -1, "north"),
    ],
)
def test_draw_column_picks_side(orientation, dirx, diry, side):
    renderer = Renderer(
        ["1"], textures(4), FLOOR, CEILING, width=4, height=6, wall_size=4
    )
    hit = RayHit(50.0, orientation, dirx, diry, 1.25, 1.25, 1.25, 1.25)
    renderer.draw_column(hit, 1, 2)
    assert rgb_at(renderer.screen, 2, 3) == COLORS[side]


def test_draw_column_floor_and_ceiling():
    renderer = Renderer(
        ["1"], textures(4), FLOOR, CEILING, width=4, height=6, wall_size=4
    )
    hit = RayHit(50.0, -1, 1, 1, 1.25, 1.25, 1.25, 1.25)
    renderer.draw_column(hit, 1, 2)
    screen = renderer.screen
    for y in (4, 5):
        start = screen.offset(2, y)
        assert bytes(screen.data[start:start + 3]) == bytes(reversed(FLOOR))
    for y in (1, 2):
        start = screen.offset(2, y)
        assert bytes(screen.data[start:start + 3]) == bytes(reversed(CEILING))
    assert screen.get_pixel(2, 0) == 0
    assert screen.get_pixel(1, 3) == 0


def test_draw_column_without_wall_is_floor_and_ceiling():
    renderer = Renderer(
        ["1"], textures(4), FLOOR, CEILING, width=4, height=6, wall_size=4
    )
    hit = RayHit(50.0, 1, 1, -1, 1.25, 1.25, 1.25, 1.25)
    renderer.draw_column(hit, 0, 0)
    start = renderer.screen.offset(0, 3)
    assert bytes(renderer.screen.data[start:start + 3]) == bytes(reversed(FLOOR))


def test_draw_column_outside_screen():
    renderer = Renderer(
        ["1"], textures(4), FLOOR, CEILING, width=4, height=6, wall_size=4
    )
    hit = RayHit(50.0, 1, 1, -1, 0.0, 0.0, 0.0, 0.0)
    with pytest.raises(IndexError):
        renderer.draw_column(hit, 1, 4)


def test_draw_frame_close_walls_fill_view():
    rows = ["111", "1N1", "111"]
    renderer = Renderer(rows, textures(64), FLOOR, CEILING, width=8, height=6)
    player = Player(x=1, y=1, angle=90.0)
    screen = renderer.draw_frame(player)
    assert screen is renderer.screen
    wall_colors = set(COLORS.values())
    for x in range(8):
        for y in range(1, 6):
            assert rgb_at(screen, x, y) in wall_colors
        assert screen.get_pixel(x, 0) == 0


def test_draw_frame_does_not_move_player():
    rows = ["111", "1N1", "111"]
    renderer = Renderer(rows, textures(64), FLOOR, CEILING, width=8, height=6)
    player = Player(x=1, y=1, angle=90.0)
    renderer.draw_frame(player)
    assert (player.x, player.y, player.angle) == (1, 1, 90.0)