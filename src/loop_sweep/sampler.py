import random
from typing import Optional

from .errors import InvalidParameter


def generate(x: int, rng: Optional[random.Random] = None) -> int:
    """
    Draw one sample uniformly from [1, x].

    Callers running concurrently must each pass their own rng (or none, in
    which case a fresh OS-seeded stream is used). The module-level `random`
    state is never touched.
    """
    if x < 1:
        raise InvalidParameter(f"x must be >= 1, got {x}")
    if rng is None:
        rng = random.Random()
    return rng.randint(1, x)


class UniformSampler:
    """
    A private random stream producing samples for any bound x.

    One instance belongs to exactly one producer. Two samplers built from the
    same seed produce the same sequence.

    Not thread-safe: do not share an instance between workers.
    """

    def __init__(self, seed=None):
        self._rng = random.Random(seed)
        self.drawn = 0

    def next(self, x: int) -> int:
        v = generate(x, self._rng)
        self.drawn += 1
        return v

    def total(self, x: int, count: int) -> int:
        """
        Draw `count` samples for bound x and return their sum.
        """
        if count < 0:
            raise ValueError("count must be >= 0")

        acc = 0
        for _ in range(count):
            acc += self.next(x)
        return acc
