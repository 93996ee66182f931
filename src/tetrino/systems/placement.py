from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from tetrino.components.board import Board
from tetrino.components.piece import Piece
from tetrino.constants import ROTATION_ATTEMPTS
from tetrino.errors import CannotPlaceError
from tetrino.systems.shape_generator import generate_shape
from tetrino.utils.random_source import RandomSource, draw_index

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Placement:
    """A valid spot for a piece: top-left corner plus the board cells it covers."""
    origin: Tuple[int, int]
    cells: Tuple[int, ...]
    rotations: int = 0
    owner_id: Optional[int] = None


def fits_at(board: Board, piece: Piece, x: int, y: int) -> bool:
    """True when every shape cell lands on the board and every set cell is free."""
    width = board.width()
    height = board.height()
    stride = piece.width()
    for k in range(piece.height()):
        for l in range(stride):
            if x + l >= width or y + k >= height:
                return False
            if piece.cell_at(l + k * stride) and not board.is_free(x + l + (y + k) * width):
                return False
    return True


def covered_cells(board: Board, piece: Piece, x: int, y: int) -> Tuple[int, ...]:
    width = board.width()
    return tuple(x + px + (y + py) * width for px, py in piece.shape.positions())


def scan(board: Board, piece: Piece) -> Optional[Placement]:
    """First fitting top-left corner in raster order (row, then column)."""
    if piece.width() == 0 or piece.height() == 0:
        return None
    for i in range(board.height()):
        for j in range(board.width()):
            if fits_at(board, piece, j, i):
                return Placement(origin=(j, i), cells=covered_cells(board, piece, j, i))
    return None


def find_placement(board: Board, piece: Piece) -> Optional[Placement]:
    """Search positions for up to four orientations, rotating ``piece`` 90 degrees between scans.

    The piece is left in the orientation that fit (or rotated back to its
    starting orientation after four failed scans).
    """
    for attempt in range(ROTATION_ATTEMPTS):
        placement = scan(board, piece)
        if placement is not None:
            placement.rotations = attempt
            return placement
        piece.rotate_degrees(90.0)
    return None


def stamp(board: Board, placement: Placement) -> int:
    """Tag the placement's cells with the board's next owner id and advance it."""
    owner_id = board.next_owner_id
    for index in placement.cells:
        board.field[index] = owner_id
    board.next_owner_id = owner_id + 1
    placement.owner_id = owner_id
    return owner_id


def place_piece(board: Board, piece: Piece) -> Placement:
    placement = find_placement(board, piece)
    if placement is None:
        logger.debug("no fit for level %d on %dx%d board", piece.level, board.width(), board.height())
        raise CannotPlaceError(piece.level)
    stamp(board, placement)
    logger.debug(
        "placed owner %d at %s after %d rotation(s)",
        placement.owner_id,
        placement.origin,
        placement.rotations,
    )
    return placement


def pre_rotate(piece: Piece, rng: RandomSource) -> int:
    """Apply 0-3 random quarter turns for placement variety."""
    turns = draw_index(rng, 4)
    for _ in range(turns):
        piece.rotate_degrees(90.0)
    return turns


def place_random_piece(board: Board, level: int, rng: RandomSource) -> Tuple[Piece, Placement]:
    piece = generate_shape(level, board.width(), board.height(), rng)
    pre_rotate(piece, rng)
    return piece, place_piece(board, piece)
