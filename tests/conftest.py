"""
Root pytest configuration for loop-sweep tests.
"""

import matplotlib

# Charts are written to files only; never open a window.
matplotlib.use("Agg")
