from __future__ import annotations

import logging

from tetrino.components.bitmap import Bitmap
from tetrino.components.piece import Piece
from tetrino.constants import DIRECTIONS, DOWN, LEFT, MAX_LEVEL, MIN_LEVEL, RIGHT, UP
from tetrino.errors import InvalidLevelError
from tetrino.utils.random_source import RandomSource, draw_index

logger = logging.getLogger(__name__)


def validate_level(level: int) -> None:
    if level < MIN_LEVEL or level > MAX_LEVEL:
        raise InvalidLevelError(level)


def walk_area(level: int, board_width: int, board_height: int) -> tuple[int, int]:
    """Sub-rectangle the random walk may wander in."""
    return min(level, board_width), min(level, board_height)


def generate_shape(level: int, board_width: int, board_height: int, rng: RandomSource) -> Piece:
    """Grow a connected ``level``-cell shape with a bounded random walk.

    The cursor starts at the top-left corner of an ``mw x mh`` scratch area and
    steps in a random direction until ``level`` distinct cells are marked.
    Moves that would leave the area are re-drawn. Revisited cells are counted
    once, so termination is probabilistic. The result is cropped to the
    farthest extent the walk reached.
    """
    validate_level(level)
    mw, mh = walk_area(level, board_width, board_height)
    if mw * mh < level:
        raise InvalidLevelError(
            level, f"level {level} does not fit a {board_width}x{board_height} board"
        )

    area = Bitmap.empty(mw, mh)
    marked = 0
    tx = ty = 0
    tw = th = 0

    while True:
        if not area.get(tx, ty):
            area.set(tx, ty)
            marked += 1
        if marked >= level:
            break

        while True:
            direction = draw_index(rng, len(DIRECTIONS))
            if direction == UP:
                if ty == 0:
                    continue
                ty -= 1
            elif direction == DOWN:
                if ty == mh - 1:
                    continue
                ty += 1
                th = max(th, ty)
            elif direction == LEFT:
                if tx == 0:
                    continue
                tx -= 1
            elif direction == RIGHT:
                if tx == mw - 1:
                    continue
                tx += 1
                tw = max(tw, tx)
            else:
                continue
            break

    shape = area.crop(tw + 1, th + 1)
    logger.debug("generated level %d shape %dx%d", level, shape.width, shape.height)
    return Piece(level=level, shape=shape)


class ShapeGenerator:
    """Binds a random source and board size to ``generate_shape``."""

    def __init__(self, board_width: int, board_height: int, rng: RandomSource) -> None:
        self.board_width = board_width
        self.board_height = board_height
        self.random = rng

    def generate(self, level: int) -> Piece:
        return generate_shape(level, self.board_width, self.board_height, self.random)
