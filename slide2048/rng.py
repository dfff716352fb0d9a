import random
from typing import Optional, Protocol

from slide2048.config import FOUR_PROBABILITY


class RandomSource(Protocol):
    def choice(self, k: int) -> int:
        """Return an index in [0, k) chosen uniformly."""
        ...

    def chance(self, p: float) -> bool:
        """Return True with probability p."""
        ...


class DefaultRandomSource:
    """RandomSource backed by random.Random, seeded from entropy unless given a seed."""

    def __init__(self, seed: Optional[int] = None):
        self._random = random.Random(seed)

    def choice(self, k: int) -> int:
        return self._random.randrange(k)

    def chance(self, p: float) -> bool:
        return self._random.random() < p


def new_tile_value(rng: RandomSource) -> int:
    # 90% chance for 2, 10% chance for 4
    return 4 if rng.chance(FOUR_PROBABILITY) else 2
