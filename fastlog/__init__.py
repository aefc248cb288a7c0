from .bits import FP32, FP64, FloatLayout, bits_to_float, float_to_bits
from .classify import Classification, classify
from .natural_log import LN2_LITERAL, natural_log, natural_log_f32, natural_log_f64, natural_log_with

__all__ = [
    "FP32",
    "FP64",
    "FloatLayout",
    "LN2_LITERAL",
    "Classification",
    "bits_to_float",
    "classify",
    "float_to_bits",
    "natural_log",
    "natural_log_f32",
    "natural_log_f64",
    "natural_log_with",
]

__version__ = "0.1.0"
