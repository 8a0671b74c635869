# simulations/report.py

from __future__ import annotations

from typing import List, Sequence

from loop_sweep.common import TrialResult

from .regression import RegressionFit


def format_run_line(table: Sequence[TrialResult], trials: int, elapsed_s: float) -> str:
    return f"Took {elapsed_s:.3f}s to run {len(table)} points, each with {trials} trials."


def format_series(table: Sequence[TrialResult]) -> List[str]:
    """
    Two comma-separated lines (x values, then averages), ready to paste into a
    spreadsheet or another plotting tool.
    """
    xs = ", ".join(f"{float(r.x):f}" for r in table)
    ys = ", ".join(f"{r.avg:f}" for r in table)
    return [xs, ys]


def format_table(table: Sequence[TrialResult]) -> List[str]:
    lines = [f"{'Rand Max':>8}: {'Average':<8}"]
    for r in table:
        lines.append(f"{r.x:>8d}: {r.avg:<8f}")
    return lines


def format_fit_lines(fit: RegressionFit) -> List[str]:
    return [
        f"Log model: y = {fit.log_slope:f} * log(x) + {fit.log_intercept:f}",
        f"Exp model: y = {fit.exp_scale:f} * exp({fit.exp_rate:f}*x)",
    ]
