#!/usr/bin/env python3
"""
compare.py

Print the fast natural log (FP32 and FP64 variants) side by side with
numpy.log for a list of double-precision inputs, including the special
values (+-inf, +-nan, negatives, zero).

Usage:
    python3 -m fastlog.compare
    python3 -m fastlog.compare --bits -- -inf -nan 0 1e-7 2.5
    python3 -m fastlog.compare --values 0.5 1 2 --plot fnl_vs_log.png

Negative inputs must follow `--` (positional form) so argparse does not read
them as options.
"""

import argparse
import math

import numpy as np

from .bits import FP32, FP64, float_to_bits
from .natural_log import natural_log_f32, natural_log_f64

DEFAULT_VALUES = [
    math.inf, -math.inf, math.nan, -math.nan,
    -2.0, -1.5, -1.0, -0.5, 0.0, 0.0000001, 0.01, 0.05, 0.1, 0.2, 0.5, 0.6, 0.85,
    1.0, 1.1, 1.2, 1.3, 1.4, 1.5, 1.6, 1.7, 1.8, 1.9, 2.0, 2.1, 2.2,
    100.0, 1000.0, 10000.0,
]

FP32_DIGITS = 6
FP64_DIGITS = 12
INPUT_W = 10
FP32_W = 11
FP64_W = 18


# ---------- computation ----------

def reference_log(value, layout):
    """numpy.log at the layout's width; NaN / -inf for non-positive inputs, warnings silenced."""
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return np.log(layout.float_type(value))


def comparison_rows(values):
    """One (input, fnl32, ref32, fnl64, ref64) tuple per input value."""
    rows = []
    with np.errstate(over="ignore"):
        for v in values:
            rows.append((
                v,
                natural_log_f32(v),
                reference_log(v, FP32),
                natural_log_f64(v),
                reference_log(v, FP64),
            ))
    return rows


# ---------- formatting ----------

def fmt_num(v, digits, width):
    v = float(v)
    if math.isnan(v):
        s = "-nan" if math.copysign(1.0, v) < 0 else "nan"
    else:
        s = f"{v:.{digits}g}"
    return s.rjust(width)


def fmt_bits(v, layout):
    return f"0x{float_to_bits(v, layout):0{layout.width // 4}X}".rjust(layout.width // 4 + 4)


def format_table(rows, show_bits=False):
    lines = []
    top = " " * INPUT_W + "FP32".rjust(FP32_W) + " " * FP32_W + "FP64".rjust(FP64_W)
    head = ("LN".rjust(INPUT_W) + "FNL".rjust(FP32_W) + "STL".rjust(FP32_W)
            + "FNL".rjust(FP64_W) + "STL".rjust(FP64_W))
    if show_bits:
        head += "FNL32 bits".rjust(FP32.width // 4 + 4) + "FNL64 bits".rjust(FP64.width // 4 + 4)
    lines.append(top)
    lines.append(head)
    for v, f32, r32, f64, r64 in rows:
        line = (fmt_num(v, FP32_DIGITS, INPUT_W)
                + fmt_num(f32, FP32_DIGITS, FP32_W)
                + fmt_num(r32, FP32_DIGITS, FP32_W)
                + fmt_num(f64, FP64_DIGITS, FP64_W)
                + fmt_num(r64, FP64_DIGITS, FP64_W))
        if show_bits:
            line += fmt_bits(f32, FP32) + fmt_bits(f64, FP64)
        lines.append(line)
    return lines


# ---------- CLI ----------

def parse_value(text):
    try:
        return float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a floating-point value: {text!r}")


def main(argv=None):
    p = argparse.ArgumentParser(description="Compare the fast natural log against numpy.log at FP32 and FP64.")
    p.add_argument("values", nargs="*", type=parse_value,
                   help="Inputs (double precision; inf/nan accepted). Defaults to a built-in list.")
    p.add_argument("--values", dest="value_list", nargs="+", type=parse_value, metavar="V",
                   help="Inputs given as an option; combined with any positional inputs.")
    p.add_argument("--bits", action="store_true", help="Also print the result bit patterns in hex.")
    p.add_argument("--plot", metavar="PNG", help="Write a plot of FNL vs numpy.log for the positive finite inputs.")
    args = p.parse_args(argv)

    values = (args.value_list or []) + args.values
    if not values:
        values = DEFAULT_VALUES
    for line in format_table(comparison_rows(values), show_bits=args.bits):
        print(line)

    if args.plot:
        from .plot import plot_comparison
        plot_comparison(values, args.plot)
    return 0


if __name__ == "__main__":
    main()
