from dataclasses import dataclass
from typing import Tuple


@dataclass(slots=True)
class PlacedPiece:
    """Record of one successful placement, one entity per stamped piece."""

    owner_id: int
    level: int
    origin: Tuple[int, int]
    rotations: int
    cells: Tuple[int, ...]
