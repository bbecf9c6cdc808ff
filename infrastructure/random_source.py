import random
from typing import Optional

from domain.random_source import RandomSource


class SeededRandomSource(RandomSource):
    """Random source backed by random.Random. Same seed gives the same draws."""

    def __init__(self, seed: Optional[int] = None):
        self._random = random.Random(seed)

    def random(self) -> float:
        return self._random.random()


class FixedRandomSource(RandomSource):
    """Always returns the same draw."""

    def __init__(self, value: float):
        if not 0.0 <= value < 1.0:
            raise ValueError("Draw must be in the range [0, 1)")
        self.value = value

    def random(self) -> float:
        return self.value
