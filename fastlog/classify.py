"""
classify.py

Special-value classification of a float bit pattern, evaluated before any
approximation work. Order matters: the sign test runs first, so -0.0, -inf
and negative-signed NaNs all land in NEGATIVE.
"""

import enum

from .bits import FloatLayout, is_exceptional, is_negative, is_zero


class Classification(enum.Enum):
    NEGATIVE = "negative"
    EXCEPTIONAL = "exceptional"   # +inf or NaN
    ZERO = "zero"
    NORMAL = "normal"


def classify(bits: int, layout: FloatLayout) -> Classification:
    if is_negative(bits, layout):
        return Classification.NEGATIVE
    if is_exceptional(bits, layout):
        return Classification.EXCEPTIONAL
    if is_zero(bits, layout):
        return Classification.ZERO
    return Classification.NORMAL
