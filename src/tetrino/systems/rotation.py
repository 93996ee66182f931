"""Bitmap rotation on a discrete grid.

Multiplying by the matrix to rotate by ``a``::

    | cos(a) -sin(a) | | x |   | x cos(a) - y sin(a) |
    | sin(a)  cos(a) | | y | = | x sin(a) + y cos(a) |

Quarter turns are resolved with exact integer coordinate swaps so that four
90 degree rotations always restore the original bitmap. Any other angle goes
through the float matrix and is lossy near the corners.
"""
from __future__ import annotations

import logging
import math

from tetrino.components.bitmap import Bitmap
from tetrino.constants import (
    DEFAULT_ROTATION_DEGREES,
    DEFAULT_ROTATION_RADIANS,
    QUARTER_TURN,
    QUARTER_TURN_TOLERANCE,
)

logger = logging.getLogger(__name__)


def round_half_away(value: float) -> int:
    """Round like ``f32::round``: halves go away from zero, unlike ``round()``."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def quarter_turns(radians: float) -> int | None:
    """Return the angle as quarter turns mod 4, or None for non-right angles."""
    turns = radians / QUARTER_TURN
    nearest = round_half_away(turns)
    if abs(turns - nearest) > QUARTER_TURN_TOLERANCE:
        return None
    return nearest % 4


def rotate_quarter(bitmap: Bitmap, turns: int) -> Bitmap:
    n = bitmap.width
    m = bitmap.height
    turns %= 4
    if turns == 0 or not bitmap.cells:
        return bitmap.copy()
    if turns == 2:
        rotated = Bitmap.empty(n, m)
        for x, y in bitmap.positions():
            rotated.set(n - 1 - x, m - 1 - y)
        return rotated
    rotated = Bitmap.empty(m, n)
    for x, y in bitmap.positions():
        if turns == 1:
            rotated.set(y, n - 1 - x)
        else:
            rotated.set(m - 1 - y, x)
    return rotated


def rotate_matrix(bitmap: Bitmap, radians: float) -> Bitmap:
    """Float rotation around the bitmap's pivot; cells landing outside are dropped."""
    cos = math.cos(radians)
    sin = math.sin(radians)
    n = bitmap.width
    m = bitmap.height

    new_n = round_half_away(abs(m * sin) + abs(n * cos))
    new_m = round_half_away(abs(m * cos) + abs(n * sin))
    rotated = Bitmap.empty(new_n, new_m)
    size = len(rotated)

    for x, y in bitmap.positions():
        new_x = round_half_away((x + 1) * cos - (m - y) * sin + m)
        new_y = n - round_half_away((x + 1) * sin + (m - y) * cos)
        j = abs(new_x + new_y * new_n)
        if j >= size:
            logger.debug("dropping [%d;%d] -> [%d;%d] outside %dx%d", x, y, new_x, new_y, new_n, new_m)
            continue
        rotated.cells[j] = True
    return rotated


def rotate(bitmap: Bitmap, radians: float) -> Bitmap:
    if not math.isfinite(radians):
        raise ValueError(f"rotation angle must be finite, got {radians}")
    turns = quarter_turns(radians)
    if turns is not None:
        return rotate_quarter(bitmap, turns)
    if not bitmap.cells:
        return bitmap.copy()
    return rotate_matrix(bitmap, radians)


def rotate_degrees(bitmap: Bitmap, degrees: float | None = None) -> Bitmap:
    if degrees is None:
        degrees = DEFAULT_ROTATION_DEGREES
    return rotate(bitmap, math.radians(degrees))


def rotate_radians(bitmap: Bitmap, radians: float | None = None) -> Bitmap:
    if radians is None:
        radians = DEFAULT_ROTATION_RADIANS
    return rotate(bitmap, radians)
