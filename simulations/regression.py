# simulations/regression.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from loop_sweep.common import TrialResult


class InvalidInput(ValueError):
    """The table cannot be fitted (too few points or non-positive values)."""


@dataclass(frozen=True)
class RegressionFit:
    """
    Least-squares coefficients for

        log model: y = log_slope * log(x) + log_intercept
        exp model: y = exp_scale * exp(exp_rate * x)
    """
    log_slope: float
    log_intercept: float
    exp_scale: float
    exp_rate: float


def fit_models(table: Sequence[TrialResult]) -> RegressionFit:
    """
    Fit both models to a sweep table.

    The exponential model is fitted as a straight line through (x, log y), so
    every average must be strictly positive.
    """
    if len(table) < 2:
        raise InvalidInput(f"need at least 2 points to fit, got {len(table)}")

    for r in table:
        if r.avg <= 0.0:
            raise InvalidInput(
                f"cannot fit non-positive average {r.avg} (x={r.x})"
            )

    x = np.array([r.x for r in table], dtype=float)
    y = np.array([r.avg for r in table], dtype=float)

    log_slope, log_intercept = np.polyfit(np.log(x), y, 1)
    exp_rate, log_scale = np.polyfit(x, np.log(y), 1)

    return RegressionFit(
        log_slope=float(log_slope),
        log_intercept=float(log_intercept),
        exp_scale=float(np.exp(log_scale)),
        exp_rate=float(exp_rate),
    )
