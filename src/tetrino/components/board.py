import dataclasses
from dataclasses import dataclass
from typing import List, Optional, Tuple

from tetrino.constants import INITIAL_OWNER_ID
from tetrino.utils.render import render_field

@dataclass(slots=True)
class Board:
    """Occupancy grid: each cell is empty (None) or tagged with an owner id."""
    stride: int
    field: List[Optional[int]] = dataclasses.field(default_factory=list)
    next_owner_id: int = INITIAL_OWNER_ID

    def __post_init__(self) -> None:
        if self.stride <= 0:
            raise ValueError(f"board stride must be positive, got {self.stride}")
        if len(self.field) % self.stride != 0:
            raise ValueError(
                f"board length {len(self.field)} is not a multiple of stride {self.stride}"
            )

    @classmethod
    def new(cls, width: int, height: int) -> "Board":
        if width <= 0 or height <= 0:
            raise ValueError(f"board dimensions must be positive, got {width}x{height}")
        return cls(stride=width, field=[None] * (width * height))

    def width(self) -> int:
        return self.stride

    def height(self) -> int:
        return len(self.field) // self.stride

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.field):
            raise IndexError(f"cell index {index} out of range for board of {len(self.field)} cells")

    def cell_at(self, index: int) -> Optional[int]:
        self._check_index(index)
        return self.field[index]

    def owner_at(self, x: int, y: int) -> Optional[int]:
        if not (0 <= x < self.width() and 0 <= y < self.height()):
            raise IndexError(f"cell ({x}, {y}) outside {self.width()}x{self.height()} board")
        return self.field[x + y * self.stride]

    def is_free(self, index: int) -> bool:
        self._check_index(index)
        return self.field[index] is None

    def free_cells(self) -> List[int]:
        return [i for i, owner in enumerate(self.field) if owner is None]

    def occupied_cells(self, owner_id: Optional[int] = None) -> List[int]:
        if owner_id is None:
            return [i for i, owner in enumerate(self.field) if owner is not None]
        return [i for i, owner in enumerate(self.field) if owner == owner_id]

    def snapshot(self) -> Tuple[Tuple[Optional[int], ...], int]:
        return tuple(self.field), self.next_owner_id

    def render(self) -> str:
        return render_field(self.field, self.stride)
