# simulations/plot.py

from __future__ import annotations

from pathlib import Path
from typing import Sequence, Union

import matplotlib.pyplot as plt

from loop_sweep.common import TrialResult


def plot_table(table: Sequence[TrialResult], path: Union[str, Path]) -> Path:
    """
    Render the sweep as a line + point chart and save it to `path`.
    """
    if not table:
        raise ValueError("table must be non-empty")

    xs = [r.x for r in table]
    ys = [r.avg for r in table]

    fig = plt.figure(figsize=(4, 4))
    try:
        plt.plot(xs, ys, marker="o", markersize=3, label="Points")
        plt.title("Random Maximum vs. Average Sample")
        plt.xlabel("Maximum Random Number")
        plt.ylabel("Average Sample")
        plt.legend()
        plt.tight_layout()

        out = Path(path)
        fig.savefig(out)
    finally:
        plt.close(fig)
    return out
