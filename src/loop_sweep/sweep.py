# loop_sweep/sweep.py

from __future__ import annotations

import logging
from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor, as_completed
from typing import List, Optional, Tuple

from .aggregator import run_trials
from .common import DEFAULT_BLOCK_SIZE, SweepConfig, Timer, TrialResult, parameter_values

logger = logging.getLogger(__name__)


SweepTable = List[TrialResult]


def run_sweep(
    step: int,
    max_value: int,
    trials_per_point: int,
    workers: Optional[int] = None,
    backend: str = "thread",
    block_size: int = DEFAULT_BLOCK_SIZE,
    seed: Optional[int] = None,
) -> Tuple[SweepTable, float]:
    """
    Run a full sweep and return (table, elapsed seconds).

    All parameters are validated before any worker is started; see
    SweepConfig for their meaning.
    """
    config = SweepConfig(
        step=step,
        max_value=max_value,
        trials_per_point=trials_per_point,
        workers=workers,
        backend=backend,
        block_size=block_size,
        seed=seed,
    )
    return execute_sweep(config)


def execute_sweep(config: SweepConfig) -> Tuple[SweepTable, float]:
    """
    Run one aggregator per sweep point concurrently, collect the results in
    completion order and sort them by x.

    Aggregators run on their own thread pool and only wait; the sample draws
    run on a second pool (threads or processes). Keeping the two levels on
    separate pools means a waiting aggregator can never occupy a worker that
    one of its producers needs.
    """
    with Timer() as t:
        table = _sweep(config)

    logger.info(
        "sweep of %d points x %d trials finished in %.3fs",
        len(table), config.trials_per_point, t.elapsed_s,
    )
    return table, t.elapsed_s


def _sweep(config: SweepConfig) -> SweepTable:
    xs = parameter_values(config.step, config.max_value)
    if not xs:
        logger.info("max_value %d < step %d: empty sweep", config.max_value, config.step)
        return []

    logger.info(
        "starting sweep: %d points, %d trials each, backend=%s",
        len(xs), config.trials_per_point, config.backend,
    )

    pool_cls = ThreadPoolExecutor if config.backend == "thread" else ProcessPoolExecutor
    with pool_cls(max_workers=config.workers) as samples, \
            ThreadPoolExecutor(max_workers=len(xs), thread_name_prefix="trial") as trials:
        futures = [
            trials.submit(
                run_trials,
                x,
                config.trials_per_point,
                samples,
                config.block_size,
                config.seed,
            )
            for x in xs
        ]
        results = [f.result() for f in as_completed(futures)]

    table = sorted(results, key=lambda r: r.x)

    if [r.x for r in table] != xs:
        raise RuntimeError(
            f"sweep result mismatch: expected points {xs}, got {[r.x for r in table]}"
        )
    return table
