"""Turning and walking the player through the map."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from .mathutils import find_x, find_y
from .raycast import Player

ANGLE_STEP = 5
MOVE_STEP = 10

_RESET = "\033[0m"


class Action(Enum):
    """A player command."""

    MOVE_FORWARD = "forward"
    MOVE_BACK = "back"
    MOVE_LEFT = "left"
    MOVE_RIGHT = "right"
    ROTATE_LEFT = "rotate_left"
    ROTATE_RIGHT = "rotate_right"


def rotate(player: Player, action: Action) -> None:
    """Turn the player for rotation actions, then keep the heading in [0, 360)."""
    if action is Action.ROTATE_LEFT:
        player.angle += ANGLE_STEP
    elif action is Action.ROTATE_RIGHT:
        player.angle -= ANGLE_STEP
    if player.angle < 0:
        player.angle = 360 - ANGLE_STEP
    elif player.angle >= 360:
        player.angle = 0


def step(player: Player, action: Action) -> None:
    """Move the player inside its cell for movement actions.

    Sideways steps use ``dirx``/``diry``, which must match the heading.
    """
    sign = -1 if 180 <= player.angle <= 270 else 1
    heading = player.angle + 270
    if action is Action.MOVE_FORWARD:
        player.pos_y -= find_y(heading, MOVE_STEP)
        player.pos_x -= find_x(heading, MOVE_STEP)
    elif action is Action.MOVE_BACK:
        player.pos_y += find_y(heading, MOVE_STEP)
        player.pos_x += find_x(heading, MOVE_STEP)
    elif action is Action.MOVE_RIGHT:
        player.pos_y -= find_x(heading, MOVE_STEP * player.dirx * sign)
        player.pos_x -= find_y(heading, MOVE_STEP * player.diry * sign)
    elif action is Action.MOVE_LEFT:
        player.pos_y += find_x(heading, MOVE_STEP * player.dirx * sign)
        player.pos_x += find_y(heading, MOVE_STEP * player.diry * sign)


def wrap_cell(player: Player) -> None:
    """Carry an offset that left the 0-100 range over to the next cell."""
    if player.pos_x >= 100:
        player.pos_x = 0.01 + (player.pos_x - 100)
        player.x += 1
    elif player.pos_x < 0:
        player.pos_x = 100 + player.pos_x
        player.x -= 1
    if player.pos_y >= 100:
        player.pos_y = 0.01 + (player.pos_y - 100)
        player.y += 1
    elif player.pos_y < 0:
        player.pos_y = 100 + player.pos_y
        player.y -= 1


def apply_action(player: Player, action: Action) -> None:
    """Rotate, update the direction signs, step and change cell if needed."""
    rotate(player, action)
    player.update_direction()
    step(player, action)
    if not (0 <= player.pos_x <= 100 and 0 <= player.pos_y <= 100):
        wrap_cell(player)


def format_position(rows: Sequence[str]) -> str:
    """Return the map listing printed for position debugging."""
    lines = ["pos : \n"]
    for row in rows:
        lines.append("".join(f"{_RESET}{char}" for char in row) + "\n")
    return "".join(lines)