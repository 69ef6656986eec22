# Safe Math and Interpolation Helpers
# Total variants of the arithmetic used by the noise evaluators, plus the
# interpolation curves shared by gradient and cellular noise.
#
# Fallback policy: out-of-domain operands return 0.0, never NaN/Inf.

import math
from typing import Sequence, Tuple


def safe_divide(a: float, b: float) -> float:
    return a / b if b != 0.0 else 0.0


def safe_divide_vector(v: Sequence[float], b: float) -> Tuple[float, ...]:
    if b == 0.0:
        return tuple(0.0 for _ in v)
    return tuple(c / b for c in v)


def safe_modulo(a: float, b: float) -> float:
    """Truncated modulo (sign follows `a`)."""
    if b == 0.0 or not math.isfinite(a):
        return 0.0
    return math.fmod(a, b)


def compatible_mod(a: float, b: float) -> float:
    """Floored modulo (sign follows `b`)."""
    if b == 0.0 or not math.isfinite(a):
        return 0.0
    return a - b * math.floor(a / b)


def safe_power(a: float, b: float) -> float:
    """
    Power that never raises or returns NaN.

    A negative base only accepts integral exponents, and a zero base
    only accepts non-negative exponents.
    """
    if a < 0.0 and not float(b).is_integer():
        return 0.0
    if a == 0.0 and b < 0.0:
        return 0.0
    try:
        return math.pow(a, b)
    except OverflowError:
        return 0.0


def safe_sqrt(a: float) -> float:
    return math.sqrt(a) if a > 0.0 else 0.0


def safe_log(a: float, b: float) -> float:
    """Logarithm of `a` in base `b`."""
    if a <= 0.0 or b <= 0.0:
        return 0.0
    return safe_divide(math.log(a), math.log(b))


def ensure_finite(v: float) -> float:
    return v if math.isfinite(v) else 0.0


def length(v: Sequence[float]) -> float:
    return math.sqrt(sum(c * c for c in v))


def dot(a: Sequence[float], b: Sequence[float]) -> float:
    return sum(x * y for x, y in zip(a, b))


def safe_normalize(v: Sequence[float]) -> Tuple[float, ...]:
    """Unit vector along `v`; the zero vector stays zero."""
    return safe_divide_vector(v, length(v))


def lerp(a: float, b: float, t: float) -> float:
    """a * (1 - t) + b * t."""
    return a * (1.0 - t) + b * t


def lerp_vector(a: Sequence[float], b: Sequence[float], t: float) -> Tuple[float, ...]:
    return tuple(lerp(x, y, t) for x, y in zip(a, b))


def smoothstep(edge0: float, edge1: float, x: float) -> float:
    t = min(max(safe_divide(x - edge0, edge1 - edge0), 0.0), 1.0)
    return t * t * (3.0 - 2.0 * t)


def fade(t: float) -> float:
    """
    Quintic fade curve 6t^5 - 15t^4 + 10t^3.

    Value, first and second derivative vanish at t=0 and match the identity
    at t=1, which keeps gradient noise C2 across lattice cell borders.
    """
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def floor_fraction(x: float) -> Tuple[int, float]:
    """Split `x` into its lattice cell and the offset inside it, in [0, 1)."""
    x_floor = math.floor(x)
    return int(x_floor), x - x_floor


def mix_corners(values: Sequence[float], factors: Sequence[float]) -> float:
    """
    Multilinear interpolation of 2^D corner values.

    Corner index bit k selects the upper end of axis k, so axis 0 varies
    fastest: for D=2 the order is (x0,y0), (x1,y0), (x0,y1), (x1,y1).
    """
    if len(values) != 1 << len(factors):
        raise ValueError(f"Expected {1 << len(factors)} corner values, got {len(values)}")
    if not factors:
        return values[0]
    half = len(values) // 2
    low = mix_corners(values[:half], factors[:-1])
    high = mix_corners(values[half:], factors[:-1])
    return lerp(low, high, factors[-1])


def mix2(v0, v1, v2, v3, x, y):
    """Bilinear mix."""
    return mix_corners((v0, v1, v2, v3), (x, y))


def mix3(v0, v1, v2, v3, v4, v5, v6, v7, x, y, z):
    """Trilinear mix."""
    return mix_corners((v0, v1, v2, v3, v4, v5, v6, v7), (x, y, z))


def mix4(values: Sequence[float], x, y, z, w):
    """Quadrilinear mix of 16 corner values."""
    return mix_corners(values, (x, y, z, w))
