import random
from abc import ABC, abstractmethod


class RandomSource(ABC):
    """
    Abstract source of uniform random draws.

    random.Random is registered as a virtual subclass, so a plain
    random.Random instance can be passed anywhere a RandomSource is expected.
    """

    @abstractmethod
    def random(self) -> float:
        """Return the next draw in the range [0, 1)."""
        pass


RandomSource.register(random.Random)
