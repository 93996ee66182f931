from __future__ import annotations

import math
import random
from typing import Protocol, Sequence


class RandomSource(Protocol):
    """Uniform float provider in ``[0, 1)``. ``random.Random`` satisfies it."""

    def random(self) -> float: ...


def draw_index(rng: RandomSource, count: int) -> int:
    """Scale a uniform draw to ``0..count-1`` and floor it."""
    return int(math.floor(rng.random() * count))


def default_source(rng: RandomSource | None = None) -> RandomSource:
    return rng if rng is not None else random.Random()


class ScriptedSource:
    """Replays a fixed sequence of floats, cycling when exhausted."""

    def __init__(self, values: Sequence[float]) -> None:
        if not values:
            raise ValueError("ScriptedSource needs at least one value")
        for value in values:
            if not 0.0 <= value < 1.0:
                raise ValueError(f"scripted value {value} outside [0, 1)")
        self._values = list(values)
        self._index = 0

    def random(self) -> float:
        value = self._values[self._index % len(self._values)]
        self._index += 1
        return value

    @property
    def draws(self) -> int:
        return self._index
