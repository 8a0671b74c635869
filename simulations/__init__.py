# simulations/__init__.py
"""
Reporting tools built on top of the loop_sweep engine: text output, charts
and regression fits.

Run a sweep via:
    python -m simulations.run --step ... --max ... --trials ... [--plot out.png] [--regression]
"""
