from __future__ import annotations

from dataclasses import dataclass

from tetrino.components.bitmap import Bitmap
from tetrino.systems import rotation
from tetrino.utils.render import render_bitmap


@dataclass(slots=True)
class Piece:
    """A generated tetromino: its requested level plus the shape bitmap.

    ``level`` is informational. Rotation swaps the bitmap wholesale.
    """

    level: int
    shape: Bitmap

    def rotate_degrees(self, angle: float | None = None) -> None:
        self.shape = rotation.rotate_degrees(self.shape, angle)

    def rotate_radians(self, angle: float | None = None) -> None:
        self.shape = rotation.rotate_radians(self.shape, angle)

    def width(self) -> int:
        return self.shape.width

    def height(self) -> int:
        return self.shape.height

    def cell_at(self, index: int) -> bool:
        return self.shape.cell_at(index)

    test_pos = cell_at

    def cell_count(self) -> int:
        return self.shape.count()

    def render(self) -> str:
        return render_bitmap(self.shape)

    def __str__(self) -> str:
        return self.render()


Tetromino = Piece
