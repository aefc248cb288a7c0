"""
bits.py

IEEE-754 bit helpers shared by the 32-bit and 64-bit logarithm variants:
 - FloatLayout: per-width field constants (masks, bias, sentinels, series length)
 - float_to_bits / bits_to_float: reinterpret a float as an unsigned integer of
   the same width and back, without any numeric conversion
 - field extraction: sign, all-ones exponent, zero magnitude, normalized
   mantissa in [1.0, 2.0) and the unbiased exponent

Bit patterns are plain Python ints holding the unsigned image of the float.
"""

import struct
from typing import NamedTuple, Tuple

import numpy as np


class FloatLayout(NamedTuple):
    name: str
    width: int
    float_type: type          # numpy scalar type used for all arithmetic
    float_dtype: str          # little-endian numpy dtype of the raw bytes
    int_format: str           # matching little-endian struct code
    one: int                  # bits of 1.0
    mantissa_mask: int
    exponent_mask: int
    abs_value_mask: int
    sign_bit: int
    mantissa_bits: int
    exponent_bias: int
    negative_nan: int         # returned for negative inputs
    negative_inf: int         # returned for zero
    series_denominators: Tuple[int, ...]


# Series runs z + z^3/3 + ... ; the last term of FP32 and the last four
# terms of FP64 are the optional accuracy terms.
FP32 = FloatLayout(
    name="fp32",
    width=32,
    float_type=np.float32,
    float_dtype="<f4",
    int_format="<I",
    one=0x3F800000,
    mantissa_mask=0x007FFFFF,
    exponent_mask=0x7F800000,
    abs_value_mask=0x7FFFFFFF,
    sign_bit=0x80000000,
    mantissa_bits=23,
    exponent_bias=127,
    negative_nan=0xFFC00000,
    negative_inf=0xFF800000,
    series_denominators=(3, 5, 7, 9, 11),
)

FP64 = FloatLayout(
    name="fp64",
    width=64,
    float_type=np.float64,
    float_dtype="<f8",
    int_format="<Q",
    one=0x3FF0000000000000,
    mantissa_mask=0x000FFFFFFFFFFFFF,
    exponent_mask=0x7FF0000000000000,
    abs_value_mask=0x7FFFFFFFFFFFFFFF,
    sign_bit=0x8000000000000000,
    mantissa_bits=52,
    exponent_bias=1023,
    negative_nan=0xFFF8000000000000,
    negative_inf=0xFFF0000000000000,
    series_denominators=(3, 5, 7, 9, 11, 13, 15, 17, 19),
)


# ---------- reinterpretation ----------

def to_layout_float(x, layout: FloatLayout):
    """Coerce x to the layout's numpy scalar (rounds a double to float32 for FP32)."""
    if type(x) is layout.float_type:
        return x
    # out-of-range doubles narrow to +-inf silently
    with np.errstate(over="ignore"):
        return layout.float_type(x)


def float_to_bits(x, layout: FloatLayout) -> int:
    raw = np.asarray(to_layout_float(x, layout), dtype=layout.float_dtype).tobytes()
    return struct.unpack(layout.int_format, raw)[0]


def bits_to_float(u: int, layout: FloatLayout):
    raw = struct.pack(layout.int_format, u)
    return np.frombuffer(raw, dtype=layout.float_dtype)[0].astype(layout.float_type)


# ---------- field extraction ----------

def is_negative(bits: int, layout: FloatLayout) -> bool:
    return (bits & layout.sign_bit) == layout.sign_bit


def is_exceptional(bits: int, layout: FloatLayout) -> bool:
    """All exponent bits set: infinity or NaN."""
    return (bits & layout.exponent_mask) == layout.exponent_mask


def is_zero(bits: int, layout: FloatLayout) -> bool:
    return (bits & layout.abs_value_mask) == 0


def normalized_mantissa(bits: int, layout: FloatLayout):
    """1.mantissa as a float of the layout's width, in [1.0, 2.0)."""
    return bits_to_float((bits & layout.mantissa_mask) | layout.one, layout)


def unbiased_exponent(bits: int, layout: FloatLayout) -> int:
    return ((bits & layout.exponent_mask) >> layout.mantissa_bits) - layout.exponent_bias
