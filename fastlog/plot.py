"""
plot.py

Render the fast logarithm against numpy.log for the positive finite inputs
of a comparison run. Writes a PNG; nothing is shown interactively.
"""

import math
import sys

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np

from .natural_log import natural_log_f32, natural_log_f64


def plot_comparison(values, filename):
    """Plot FNL (FP32 and FP64) and the reference curve; returns False if there is nothing to draw."""
    xs = sorted(v for v in values if math.isfinite(v) and v > 0.0)
    if not xs:
        print("Warning: no positive finite values to plot.", file=sys.stderr)
        return False

    fnl32 = [float(natural_log_f32(v)) for v in xs]
    fnl64 = [float(natural_log_f64(v)) for v in xs]
    ref = np.log(np.asarray(xs, dtype=np.float64))

    plt.figure(figsize=(12, 6))
    plt.plot(xs, ref, 'k-', linewidth=2, label='numpy.log')
    plt.plot(xs, fnl32, 'b--', marker='o', markersize=3, label='FNL fp32')
    plt.plot(xs, fnl64, 'r:', marker='x', markersize=3, label='FNL fp64')
    if xs[-1] / xs[0] > 100.0:
        plt.xscale('log')
    plt.xlabel('x')
    plt.ylabel('ln(x)')
    plt.title('Fast natural log vs numpy.log')
    plt.grid(True, alpha=0.3)
    plt.legend()
    plt.tight_layout()
    plt.savefig(filename, dpi=150)
    plt.close()
    print(f"Plot saved to: {filename}")
    return True
