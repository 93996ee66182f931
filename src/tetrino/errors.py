from __future__ import annotations

from tetrino.constants import MAX_LEVEL, MIN_LEVEL


class TetrinoError(Exception):
    """Base class for piece generation and placement failures."""


class InvalidLevelError(TetrinoError, ValueError):
    """Requested level is outside the supported range or cannot fit the walk area."""

    def __init__(self, level: int, message: str | None = None) -> None:
        self.level = level
        self.minimum = MIN_LEVEL
        self.maximum = MAX_LEVEL
        super().__init__(message or f"invalid level {level} (expected {MIN_LEVEL}..{MAX_LEVEL})")


class CannotPlaceError(TetrinoError, RuntimeError):
    """No board position or rotation accepts the piece."""

    def __init__(self, level: int) -> None:
        self.level = level
        super().__init__(f"could not insert tetrino level {level}")
