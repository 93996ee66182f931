from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence, Tuple

Position = Tuple[int, int]


@dataclass(slots=True)
class Bitmap:
    """Flat row-major grid of booleans with an explicit stride.

    Cell ``(x, y)`` lives at index ``x + y * stride``. An empty bitmap is
    allowed and has height 0.
    """

    stride: int
    cells: List[bool] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.stride < 0:
            raise ValueError(f"stride must be non-negative, got {self.stride}")
        if self.stride == 0:
            if self.cells:
                raise ValueError("a zero-stride bitmap cannot hold cells")
        elif len(self.cells) % self.stride != 0:
            raise ValueError(
                f"bitmap length {len(self.cells)} is not a multiple of stride {self.stride}"
            )

    @classmethod
    def empty(cls, width: int, height: int) -> "Bitmap":
        return cls(stride=width, cells=[False] * (width * height))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int | bool] | str]) -> "Bitmap":
        """Build a bitmap from rows such as ``["110", "011"]`` or nested lists."""
        parsed: List[List[bool]] = []
        for row in rows:
            if isinstance(row, str):
                parsed.append([ch == "1" for ch in row])
            else:
                parsed.append([bool(v) for v in row])
        width = len(parsed[0]) if parsed else 0
        if any(len(row) != width for row in parsed):
            raise ValueError("all rows must have the same width")
        return cls(stride=width, cells=[v for row in parsed for v in row])

    @property
    def width(self) -> int:
        return self.stride

    @property
    def height(self) -> int:
        if self.stride == 0:
            return 0
        return len(self.cells) // self.stride

    def __len__(self) -> int:
        return len(self.cells)

    def index_of(self, x: int, y: int) -> int:
        return x + y * self.stride

    def cell_at(self, index: int) -> bool:
        if not 0 <= index < len(self.cells):
            raise IndexError(f"cell index {index} out of range for bitmap of {len(self.cells)} cells")
        return self.cells[index]

    def get(self, x: int, y: int) -> bool:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"cell ({x}, {y}) outside {self.width}x{self.height} bitmap")
        return self.cells[self.index_of(x, y)]

    def set(self, x: int, y: int, value: bool = True) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"cell ({x}, {y}) outside {self.width}x{self.height} bitmap")
        self.cells[self.index_of(x, y)] = value

    def count(self) -> int:
        return sum(1 for v in self.cells if v)

    def positions(self) -> List[Position]:
        """Set cells as ``(x, y)`` in raster order."""
        return [(i % self.stride, i // self.stride) for i, v in enumerate(self.cells) if v]

    def crop(self, width: int, height: int) -> "Bitmap":
        """Top-left ``width x height`` window of this bitmap."""
        if width > self.width or height > self.height:
            raise ValueError(
                f"crop {width}x{height} exceeds bitmap {self.width}x{self.height}"
            )
        cropped = Bitmap.empty(width, height)
        for y in range(height):
            for x in range(width):
                cropped.cells[x + y * width] = self.cells[self.index_of(x, y)]
        return cropped

    def rows(self) -> Iterable[List[bool]]:
        for y in range(self.height):
            start = y * self.stride
            yield self.cells[start:start + self.stride]

    def copy(self) -> "Bitmap":
        return Bitmap(stride=self.stride, cells=list(self.cells))
