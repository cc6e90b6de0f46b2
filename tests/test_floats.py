import math

import pytest
from voxreader.floats import decode_float32


@pytest.mark.parametrize(
    "raw, expected",
    [
        (0x3F800000, 1.0),
        (0x3F000000, 0.5),
        (0x40000000, 2.0),
        (0xC0000000, -2.0),
        (0x3E800000, 0.25),
        (0x3FC00000, 1.5),
        (0x41200000, 10.0),
        (0x00000000, 0.0),
    ],
)
def test_decode_float32(raw, expected):
    assert decode_float32(raw) == expected


def test_decode_float32_pi():
    assert decode_float32(0x40490FDB) == pytest.approx(math.pi, rel=1e-7)


def test_decode_float32_subnormal():
    assert decode_float32(0x00000001) == math.ldexp(1.0, -149)


def test_decode_float32_special():
    assert decode_float32(0x7F800000) == math.inf
    assert decode_float32(0xFF800000) == -math.inf
    assert math.isnan(decode_float32(0x7FC00000))
    assert math.copysign(1.0, decode_float32(0x80000000)) == -1.0
