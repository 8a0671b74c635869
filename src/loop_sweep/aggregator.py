# loop_sweep/aggregator.py

from __future__ import annotations

import logging
from concurrent.futures import Executor, ThreadPoolExecutor, wait
from typing import Optional, Tuple

from .common import DEFAULT_BLOCK_SIZE, TrialResult, make_blocks
from .errors import InvalidParameter, InvalidTrialCount
from .sampler import UniformSampler

logger = logging.getLogger(__name__)


def _block_seed(seed: Optional[int], x: int, index: int) -> Optional[str]:
    # None keeps every block on its own OS-seeded stream
    if seed is None:
        return None
    return f"{seed}:{x}:{index}"


def _draw_block(x: int, count: int, seed: Optional[str]) -> Tuple[int, int]:
    """
    Producer: draw `count` samples for bound x from a private stream.

    Module-level so the process backend can pickle it. Returns
    (samples drawn, sum of samples).
    """
    sampler = UniformSampler(seed)
    total = sampler.total(x, count)
    return sampler.drawn, total


def run_trials(
    x: int,
    trials: int,
    executor: Optional[Executor] = None,
    block_size: int = DEFAULT_BLOCK_SIZE,
    seed: Optional[int] = None,
) -> TrialResult:
    """
    Draw `trials` samples from [1, x] concurrently and return their mean.

    Parameters
    ----------
    x:
        Inclusive upper bound of every sample.
    trials:
        Number of samples averaged.
    executor:
        Pool the producers run on. When omitted a private thread pool is
        created and shut down before returning.
    block_size:
        Samples per producer. Each producer owns one random stream.
    seed:
        Optional base seed. Block streams are derived from (seed, x, block).

    Returns
    -------
    TrialResult
    """
    if x < 1:
        raise InvalidParameter(f"x must be >= 1, got {x}")
    if trials < 1:
        raise InvalidTrialCount(f"trials must be >= 1, got {trials}")

    if executor is None:
        with ThreadPoolExecutor() as ex:
            return _collect(x, trials, ex, block_size, seed)
    return _collect(x, trials, executor, block_size, seed)


def _collect(
    x: int,
    trials: int,
    executor: Executor,
    block_size: int,
    seed: Optional[int],
) -> TrialResult:
    blocks = make_blocks(trials, block_size)
    logger.debug("x=%d: launching %d producers for %d trials", x, len(blocks), trials)

    futures = [
        executor.submit(_draw_block, x, j - i, _block_seed(seed, x, k))
        for k, (i, j) in enumerate(blocks)
    ]

    # Barrier: every producer has finished, not merely returned a value.
    done, _ = wait(futures)

    drawn = 0
    total = 0
    for f in done:
        n, s = f.result()  # re-raises a producer's exception
        drawn += n
        total += s

    if drawn != trials:
        raise RuntimeError(
            f"sample count mismatch for x={x}: expected {trials}, got {drawn}"
        )

    avg = total / trials
    logger.debug("x=%d: avg=%f", x, avg)
    return TrialResult(x=x, avg=avg)
