"""Casting rays through the map grid to find wall distances."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from .mathutils import degrees_to_radians

_FAR_LIMIT = 100000.0
_NO_DIRECTION = 10000.0


def _directions(angle: float) -> tuple[int, int]:
    diry = -1 if angle <= 180 else 1
    dirx = -1 if 90 <= angle <= 270 else 1
    return dirx, diry


@dataclass
class Player:
    """The viewer: a map cell, an offset inside it (0-100) and a heading."""

    x: int
    y: int
    pos_x: float = 50.0
    pos_y: float = 50.0
    angle: float = 0.0
    dirx: int = 0
    diry: int = 0

    def update_direction(self) -> None:
        """Set ``dirx`` and ``diry`` from the current heading."""
        self.dirx, self.diry = _directions(self.angle)


@dataclass(frozen=True)
class RayHit:
    """Result of one ray.

    ``distance`` is in hundredths of a cell; ``orientation`` is 1 when a
    horizontal grid line was hit first and -1 for a vertical one.  ``hx``/``hy``
    and ``vx``/``vy`` are the final points of the two crossing series.
    """

    distance: float
    orientation: int
    dirx: int
    diry: int
    hx: float
    hy: float
    vx: float
    vy: float


def angle_add(base: float, delta: float) -> float:
    """Add ``delta`` degrees to ``base``, wrapping once into [0, 360)."""
    result = base + delta
    if result < 0:
        result = 360 - abs(result)
    if result >= 360:
        result -= 360
    return result


def _divide(numerator: float, denominator: float) -> float:
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _tan(degrees: float) -> float:
    return math.tan(degrees_to_radians(degrees))


def _x_offset(dirx: int, diry: int, dy: float, angle: float) -> float:
    """Horizontal run matching a vertical rise of ``dy`` along the ray."""
    if dirx == 1 and diry == -1:
        return _divide(dy, _tan(angle))
    if dirx == 1 and diry == 1:
        return _divide(dy, _tan(360.0 - angle))
    if dirx == -1 and diry == -1:
        return _divide(dy, _tan(180.0 - angle))
    if dirx == -1 and diry == 1:
        return _divide(dy, _tan(angle - 180.0))
    return _NO_DIRECTION


def _y_offset(dirx: int, diry: int, dx: float, angle: float) -> float:
    """Vertical rise matching a horizontal run of ``dx`` along the ray."""
    if dirx == 1 and diry == -1:
        return _divide(dx, _tan(90.0 - angle))
    if dirx == 1 and diry == 1:
        return _divide(dx, _tan(angle - 270.0))
    if dirx == -1 and diry == -1:
        return _divide(dx, _tan(angle - 90.0))
    if dirx == -1 and diry == 1:
        return _divide(dx, _tan(270.0 - angle))
    return _NO_DIRECTION


def is_open(rows: Sequence[str], x: float, y: float) -> bool:
    """Return True if the point (x, y) lies in a cell a ray can pass through."""
    if not (0 <= x <= _FAR_LIMIT and 0 <= y <= _FAR_LIMIT):
        return False
    row, col = int(y), int(x)
    if row > len(rows) - 1:
        return False
    line = rows[row]
    if col > len(line):
        return False
    return col == len(line) or line[col] != "1"


def cast_ray(rows: Sequence[str], player: Player, angle: float) -> RayHit:
    """Cast a ray from ``player`` at ``angle`` degrees until it meets a wall."""
    dirx, diry = _directions(angle)
    offset_x = player.pos_x / 100.0
    offset_y = player.pos_y / 100.0

    # Crossings of horizontal grid lines.
    vcy = offset_y if diry == -1 else (100.0 - player.pos_y) / 100.0
    vcx = _x_offset(dirx, diry, vcy, angle)
    vr = math.hypot(vcx, vcy)
    vy = float(player.y - 1 if diry == -1 else player.y + 1)
    vx = player.x + offset_x + vcx * dirx
    step_vx = _x_offset(dirx, diry, 1.0, angle)
    step_vr = math.hypot(step_vx, 1.0)

    # Crossings of vertical grid lines.
    hcx = offset_x if dirx == -1 else (100.0 - player.pos_x) / 100.0
    hcy = _y_offset(dirx, diry, hcx, angle)
    hr = math.hypot(hcx, hcy)
    hx = float(player.x + 1 if dirx == 1 else player.x - 1)
    hy = player.y + offset_y + hcy * diry
    step_hy = _y_offset(dirx, diry, 1.0, angle)
    step_hr = math.hypot(1.0, step_hy)

    while is_open(rows, hx, hy):
        hx += dirx
        hy += step_hy * diry
        hr += step_hr
    while is_open(rows, vx, vy):
        vx += step_vx * dirx
        vy += diry
        vr += step_vr

    if vr <= hr:
        distance, orientation = vr, 1
    else:
        distance, orientation = hr, -1
    return RayHit(distance * 100, orientation, dirx, diry, hx, hy, vx, vy)