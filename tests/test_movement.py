import pytest

from cub3d.movement import (
    ANGLE_STEP,
    MOVE_STEP,
    Action,
    apply_action,
    format_position,
    rotate,
    step,
    wrap_cell,
)
from cub3d.raycast import Player


def test_rotate_left_adds_step():
    player = Player(x=1, y=1, angle=0.0)
    rotate(player, Action.ROTATE_LEFT)
    assert player.angle == ANGLE_STEP


def test_rotate_right_wraps_below_zero():
    player = Player(x=1, y=1, angle=0.0)
    rotate(player, Action.ROTATE_RIGHT)
    assert player.angle == 360 - ANGLE_STEP


def test_full_turn_returns_to_zero():
    player = Player(x=1, y=1, angle=0.0)
    for _ in range(360 // ANGLE_STEP):
        rotate(player, Action.ROTATE_LEFT)
    assert player.angle == 0


def test_rotate_ignores_movement():
    player = Player(x=1, y=1, angle=90.0)
    rotate(player, Action.MOVE_FORWARD)
    assert player.angle == 90.0


def test_forward_facing_north_decreases_y():
    player = Player(x=1, y=1, angle=90.0)
    apply_action(player, Action.MOVE_FORWARD)
    assert player.pos_y == pytest.approx(50.0 - MOVE_STEP)
    assert player.pos_x == pytest.approx(50.0)
    assert (player.x, player.y) == (1, 1)


def test_forward_then_back_round_trip():
    player = Player(x=2, y=3, angle=35.0)
    apply_action(player, Action.MOVE_FORWARD)
    apply_action(player, Action.MOVE_BACK)
    assert player.pos_x == pytest.approx(50.0)
    assert player.pos_y == pytest.approx(50.0)


def test_left_then_right_round_trip():
    player = Player(x=2, y=3, angle=90.0)
    apply_action(player, Action.MOVE_LEFT)
    moved = player.pos_x
    apply_action(player, Action.MOVE_RIGHT)
    assert moved == pytest.approx(50.0 - MOVE_STEP)
    assert player.pos_x == pytest.approx(50.0)
    assert player.pos_y == pytest.approx(50.0)


def test_step_does_not_turn():
    player = Player(x=1, y=1, angle=45.0)
    player.update_direction()
    step(player, Action.ROTATE_LEFT)
    assert (player.pos_x, player.pos_y, player.angle) == (50.0, 50.0, 45.0)


def test_apply_action_updates_direction():
    player = Player(x=1, y=1, angle=0.0)
    apply_action(player, Action.ROTATE_RIGHT)
    assert (player.dirx, player.diry) == (1, 1)


def test_crossing_cell_boundary():
    player = Player(x=1, y=1, pos_y=5.0, angle=90.0)
    apply_action(player, Action.MOVE_FORWARD)
    assert player.y == 0
    assert 0 <= player.pos_y <= 100


def test_wrap_cell_both_axes():
    player = Player(x=4, y=4, pos_x=105.0, pos_y=-3.0)
    wrap_cell(player)
    assert (player.x, player.y) == (5, 3)
    assert player.pos_x == pytest.approx(5.01)
    assert player.pos_y == pytest.approx(97.0)


def test_wrap_cell_inside_range_unchanged():
    player = Player(x=4, y=4, pos_x=30.0, pos_y=70.0)
    wrap_cell(player)
    assert (player.x, player.y, player.pos_x, player.pos_y) == (4, 4, 30.0, 70.0)


def test_format_position():
    assert format_position(["10", "01"]) == (
        "pos : \n\033[0m1\033[0m0\n\033[0m0\033[0m1\n"
    )