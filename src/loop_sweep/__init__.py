"""
Monte Carlo parameter sweeps.

For every x in {step, 2*step, ..., max} draw `trials_per_point` samples from
[1, x] concurrently and report the empirical mean, ordered by x:

    from loop_sweep.sweep import run_sweep
    table, elapsed_s = run_sweep(step=20, max_value=100, trials_per_point=1000)
"""
