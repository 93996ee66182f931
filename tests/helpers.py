from __future__ import annotations

from collections import deque

from tetrino.components.bitmap import Bitmap
from tetrino.components.board import Board


def is_connected(bitmap: Bitmap) -> bool:
    """True when all set cells form one 4-connected region."""
    cells = set(bitmap.positions())
    if not cells:
        return True
    start = next(iter(cells))
    seen = {start}
    queue = deque([start])
    while queue:
        x, y = queue.popleft()
        for nx, ny in ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)):
            if (nx, ny) in cells and (nx, ny) not in seen:
                seen.add((nx, ny))
                queue.append((nx, ny))
    return seen == cells


def fill_board(board: Board, positions, owner_id: int = 99) -> None:
    """Mark ``(x, y)`` positions as occupied by ``owner_id``."""
    for x, y in positions:
        board.field[x + y * board.width()] = owner_id
