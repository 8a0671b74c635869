# loop_sweep/common.py

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple
import time

from .errors import InvalidParameter, InvalidTrialCount


BACKENDS = ("thread", "process")
DEFAULT_BLOCK_SIZE = 10_000


@dataclass(frozen=True)
class SweepConfig:
    """
    Parameters for one sweep run.

    step / max_value / trials_per_point define the experiment. The remaining
    fields only change how the work is scheduled (and, for seed, whether the
    random streams are reproducible); they never change the table's shape.
    """
    step: int
    max_value: int
    trials_per_point: int
    workers: Optional[int] = None  # size of the sample-draw pool
    backend: str = "thread"
    block_size: int = DEFAULT_BLOCK_SIZE
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.step <= 0:
            raise InvalidParameter("step must be > 0")
        if self.max_value <= 0:
            raise InvalidParameter("max_value must be > 0")
        if self.trials_per_point <= 0:
            raise InvalidTrialCount("trials_per_point must be > 0")
        if self.workers is not None and self.workers <= 0:
            raise InvalidParameter("workers must be > 0")
        if self.backend not in BACKENDS:
            raise InvalidParameter(
                f"unknown backend '{self.backend}'. Available: {list(BACKENDS)}"
            )
        if self.block_size <= 0:
            raise InvalidParameter("block_size must be > 0")


@dataclass(frozen=True)
class TrialResult:
    """
    Empirical mean of trials_per_point samples drawn for bound x.
    """
    x: int
    avg: float


def parameter_values(step: int, max_value: int) -> List[int]:
    """
    Sweep points {step, 2*step, ...} that are <= max_value.
    Empty when max_value < step.
    """
    if step <= 0:
        raise InvalidParameter("step must be > 0")
    return list(range(step, max_value + 1, step))


def make_blocks(n: int, block_size: int = DEFAULT_BLOCK_SIZE) -> List[Tuple[int, int]]:
    """
    Partition [0, n) into half-open blocks (i, j) of at most block_size.

    >>> make_blocks(5, block_size=2)
    [(0, 2), (2, 4), (4, 5)]
    """
    if block_size <= 0:
        raise ValueError("block_size must be > 0")

    blocks = []
    i = 0
    while i < n:
        j = min(i + block_size, n)
        blocks.append((i, j))
        i = j
    return blocks


class Timer:
    """
    Wall-clock timing helper.
    Usage:
        with Timer() as t:
            ...
        elapsed = t.elapsed_s
    """
    def __init__(self) -> None:
        self._start: Optional[float] = None
        self.elapsed_s: Optional[float] = None

    def __enter__(self) -> "Timer":
        self._start = time.time()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._start is not None:
            self.elapsed_s = time.time() - self._start
