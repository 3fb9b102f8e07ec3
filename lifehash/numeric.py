"""Small numeric helpers shared by the colour and grid code."""

from __future__ import annotations

import math
import struct


def _f32(x: float) -> float:
    """Round a double to the nearest single-precision value."""
    try:
        return struct.unpack("<f", struct.pack("<f", x))[0]
    except OverflowError:
        return math.copysign(math.inf, x)


def _fmod(dividend: float, divisor: float) -> float:
    if math.isinf(dividend) or math.isnan(dividend) or math.isnan(divisor) or divisor == 0:
        return math.nan
    return math.fmod(dividend, divisor)


def lerp_to(to_a: float, to_b: float, t: float) -> float:
    """Interpolate ``t`` from [0..1] to [to_a..to_b]."""
    return t * (to_b - to_a) + to_a


def lerp_from(from_a: float, from_b: float, t: float) -> float:
    """Interpolate ``t`` from [from_a..from_b] to [0..1].

    A degenerate range follows IEEE division: NaN for 0/0, otherwise infinity.
    """
    numerator = from_a - t
    denominator = from_a - from_b
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def lerp(from_a: float, from_b: float, to_c: float, to_d: float, t: float) -> float:
    """Interpolate ``t`` from [from_a..from_b] to [to_c..to_d]."""
    return lerp_to(to_c, to_d, lerp_from(from_a, from_b, t))


def clamped(n: float) -> float:
    """Return ``n`` clamped to [0..1]; NaN clamps to 1."""
    low = n if n < 1 else 1.0
    return low if low > 0 else 0.0


def modulo(dividend: float, divisor: float) -> float:
    """Non-negative remainder, computed at single precision."""
    divisor32 = _f32(divisor)
    inner = _fmod(_f32(dividend), divisor32)
    return _fmod(_f32(inner + divisor), divisor32)