"""Single-precision float decoding for raw 32-bit .vox values."""

import math

EXPONENT_BIAS = 127
FRACTION_BITS = 23


def decode_float32(raw: int) -> float:
    """Decode an IEEE-754 single-precision float from its 32-bit pattern.

    The value is split from its binary representation instead of being
    reinterpreted through struct: bit 0 of the string is the sign, bits 1-8
    the biased exponent and the remaining 23 bits the fraction.
    """
    bits = format(raw & 0xFFFFFFFF, "032b")

    sign = 1.0 if bits[0] == "0" else -1.0
    exponent = int(bits[1:9], 2)
    fraction = int(bits[9:], 2) / (1 << FRACTION_BITS)

    if exponent == 0xFF:
        return math.nan if fraction else sign * math.inf

    if exponent == 0:
        # zero and subnormals have no implicit leading 1
        return sign * math.ldexp(fraction, 1 - EXPONENT_BIAS)

    return sign * math.ldexp(1.0 + fraction, exponent - EXPONENT_BIAS)
