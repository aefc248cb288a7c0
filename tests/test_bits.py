import math

import numpy as np
import pytest

from fastlog.bits import (
    FP32,
    FP64,
    bits_to_float,
    float_to_bits,
    is_exceptional,
    is_negative,
    is_zero,
    normalized_mantissa,
    unbiased_exponent,
)


@pytest.mark.parametrize("layout, value, bits", [
    (FP32, 1.0, 0x3F800000),
    (FP32, -2.0, 0xC0000000),
    (FP32, 0.5, 0x3F000000),
    (FP32, -0.0, 0x80000000),
    (FP32, math.inf, 0x7F800000),
    (FP64, 1.0, 0x3FF0000000000000),
    (FP64, -2.0, 0xC000000000000000),
    (FP64, 0.1, 0x3FB999999999999A),
    (FP64, -math.inf, 0xFFF0000000000000),
])
def test_float_to_bits(layout, value, bits):
    assert float_to_bits(value, layout) == bits


def test_bits_to_float_types():
    assert type(bits_to_float(0x3F800000, FP32)) is np.float32
    assert type(bits_to_float(0x3FF0000000000000, FP64)) is np.float64
    assert bits_to_float(0x40490FDB, FP32) == np.float32(3.1415927)


@pytest.mark.parametrize("layout, bits", [
    (FP32, 0x7FC12345),
    (FP32, 0xFFC00000),
    (FP32, 0x00000001),
    (FP64, 0x7FF8000000001234),
    (FP64, 0xFFF8000000000000),
    (FP64, 0x0000000000000001),
])
def test_reinterpretation_keeps_every_bit(layout, bits):
    assert float_to_bits(bits_to_float(bits, layout), layout) == bits


def test_fp32_rounds_double_input():
    # 0.1 is not representable; FP32 sees the nearest float32
    assert float_to_bits(0.1, FP32) == 0x3DCCCCCD


def test_field_predicates_fp32():
    neg_zero = float_to_bits(-0.0, FP32)
    assert is_negative(neg_zero, FP32)
    assert is_zero(neg_zero, FP32)
    assert not is_exceptional(neg_zero, FP32)

    nan = float_to_bits(math.nan, FP32)
    assert is_exceptional(nan, FP32)
    assert not is_negative(nan, FP32)

    one = float_to_bits(1.0, FP32)
    assert not (is_negative(one, FP32) or is_exceptional(one, FP32) or is_zero(one, FP32))


@pytest.mark.parametrize("layout", [FP32, FP64])
@pytest.mark.parametrize("value, mantissa, exponent", [
    (1.0, 1.0, 0),
    (3.0, 1.5, 1),
    (0.75, 1.5, -1),
    (1024.0, 1.0, 10),
    (0.0625, 1.0, -4),
])
def test_mantissa_and_exponent(layout, value, mantissa, exponent):
    bits = float_to_bits(value, layout)
    nx = normalized_mantissa(bits, layout)
    assert type(nx) is layout.float_type
    assert nx == mantissa
    assert unbiased_exponent(bits, layout) == exponent


def test_mantissa_range():
    for value in np.geomspace(1e-30, 1e30, 257):
        bits = float_to_bits(value, FP64)
        nx = normalized_mantissa(bits, FP64)
        assert 1.0 <= nx < 2.0
        assert nx * 2.0 ** unbiased_exponent(bits, FP64) == value
