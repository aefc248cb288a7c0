"""
natural_log.py

Fast natural logarithm built from the IEEE-754 fields of the argument.

For a normal positive x = 2^e * m with m in [1, 2):
    ln(x) = e * ln(2) + ln(m)
    ln(m) = 2 * atanh(z) = 2 * (z + z^3/3 + z^5/5 + ...),   z = (m - 1) / (m + 1)

z stays in [0, 1/3), so the odd-power series converges quickly and is cut
after a fixed number of terms: through z^11/11 for FP32 and z^19/19 for FP64.
All arithmetic runs in the layout's own float type, so the FP32 variant
rounds like single precision throughout.

Degenerate inputs return fixed bit patterns instead of raising:
    negative (incl. -0.0, -inf)  -> negative NaN sentinel
    +inf / NaN                   -> input unchanged
    +0.0                         -> negative infinity sentinel

Usage:
    natural_log_f64(10.0)              # ~2.302585093
    natural_log(np.float32(2.0))       # FP32 variant picked by type
"""

import numpy as np

from .bits import FP32, FP64, FloatLayout, bits_to_float, float_to_bits
from .bits import normalized_mantissa, to_layout_float, unbiased_exponent
from .classify import Classification, classify

# Literal value, not math.log(2); kept identical across widths.
LN2_LITERAL = 0.69314718056


def natural_log_with(x, layout: FloatLayout):
    """Approximate ln(x) using the field constants and series length of `layout`."""
    x = to_layout_float(x, layout)
    bits = float_to_bits(x, layout)

    kind = classify(bits, layout)
    if kind is Classification.NEGATIVE:
        return bits_to_float(layout.negative_nan, layout)
    if kind is Classification.EXCEPTIONAL:
        return x
    if kind is Classification.ZERO:
        return bits_to_float(layout.negative_inf, layout)

    f = layout.float_type
    nx = normalized_mantissa(bits, layout)
    z = (nx - f(1.0)) / (nx + f(1.0))
    z_sq = z * z
    result = z
    for d in layout.series_denominators:
        z *= z_sq
        result += z * f(1.0 / d)

    result += result
    result += f(unbiased_exponent(bits, layout)) * f(LN2_LITERAL)
    return result


def natural_log_f32(x) -> np.float32:
    return natural_log_with(x, FP32)


def natural_log_f64(x) -> np.float64:
    return natural_log_with(x, FP64)


def natural_log(x):
    """ln(x) in the precision of the argument: numpy.float32 in, numpy.float32 out; anything else as double."""
    if isinstance(x, np.float32):
        return natural_log_f32(x)
    return natural_log_f64(x)
