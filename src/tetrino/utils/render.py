from __future__ import annotations

from typing import Optional, Sequence

from tetrino.components.bitmap import Bitmap
from tetrino.constants import EMPTY_SYMBOL, OWNER_SYMBOL_BASE


def owner_symbol(owner_id: int) -> str:
    return chr(ord(OWNER_SYMBOL_BASE) + owner_id)


def render_bitmap(bitmap: Bitmap) -> str:
    """One line of ``0``/``1`` per bitmap row."""
    lines = ["".join("1" if cell else "0" for cell in row) for row in bitmap.rows()]
    return "".join(f"{line}\n" for line in lines)


def render_field(field: Sequence[Optional[int]], stride: int) -> str:
    """One line per board row, owner symbol or blank per cell."""
    out = []
    for start in range(0, len(field), stride):
        row = field[start:start + stride]
        out.append("".join(EMPTY_SYMBOL if owner is None else owner_symbol(owner) for owner in row))
        out.append("\n")
    return "".join(out)
