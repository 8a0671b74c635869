# simulations/run.py

from __future__ import annotations

import argparse
import logging
import sys

from loop_sweep.common import BACKENDS, SweepConfig, Timer
from loop_sweep.sweep import execute_sweep

from .plot import plot_table
from .regression import InvalidInput, fit_models
from .report import format_fit_lines, format_run_line, format_series, format_table


# 400 points, 100k trials each.
DEFAULT_STEP = 20
DEFAULT_MAX = 8_000
DEFAULT_TRIALS = 100_000


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Monte Carlo sweep: average of uniform samples in [1, x] for x = step..max."
    )
    parser.add_argument("--step", type=int, default=DEFAULT_STEP, help="spacing between sweep points")
    parser.add_argument("--max", type=int, default=DEFAULT_MAX, dest="max_value", help="upper bound of the sweep")
    parser.add_argument("--trials", type=int, default=DEFAULT_TRIALS, help="samples averaged per point")
    parser.add_argument("--workers", type=int, default=None, help="size of the sample-draw pool")
    parser.add_argument("--backend", choices=BACKENDS, default="thread", help="sample-draw pool type")
    parser.add_argument("--seed", type=int, default=None, help="base RNG seed (reproducible runs)")
    parser.add_argument("--plot", metavar="PATH", default=None, help="save a chart of the results to PATH")
    parser.add_argument("--regression", action="store_true", help="fit log and exp models to the results")
    parser.add_argument("--log-results", action="store_true", help="print the full x/average table")
    parser.add_argument("-v", "--verbose", action="store_true", help="log progress to stderr")
    return parser


def main(argv: list[str]) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        config = SweepConfig(
            step=args.step,
            max_value=args.max_value,
            trials_per_point=args.trials,
            workers=args.workers,
            backend=args.backend,
            seed=args.seed,
        )
    except ValueError as e:
        parser.error(str(e))

    with Timer() as total:
        table, elapsed_s = execute_sweep(config)

        print(format_run_line(table, config.trials_per_point, elapsed_s))
        for line in format_series(table):
            print(line)
        print()

        status = 0

        if args.plot:
            if table:
                print("Plotting...")
                plot_table(table, args.plot)
            else:
                print("error: nothing to plot for an empty sweep", file=sys.stderr)
                status = 1

        if args.regression:
            print("Running regression...")
            try:
                fit = fit_models(table)
            except InvalidInput as e:
                print(f"error: {e}", file=sys.stderr)
                status = 1
            else:
                for line in format_fit_lines(fit):
                    print(line)

        if args.log_results:
            for line in format_table(table):
                print(line)

    print(f"Took {total.elapsed_s:.3f}s to finish.")
    return status


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
