# Hash Functions
# Spatial hashing behind every noise evaluator.
#
# Two families, each bit-exact and deterministic across runs and platforms:
# - Jenkins lookup3 style mixer (hash_uint and the float-keyed helpers built
#   on it), used by gradient noise, white noise and 1D Voronoi.
# - PCG style mixer (hash_pcg / hash_pcg_signed), used by 2D-4D Voronoi to
#   hash integer lattice cells.
# The families do not agree with each other on the same input.

from typing import Sequence, Tuple

import numpy as np

from .errors import DimensionError
from .types import Color, as_coordinate

UINT32_MASK = 0xFFFFFFFF
INT31_MASK = 0x7FFFFFFF
SIGN_BIT = 0x80000000

JENKINS_SEED = 0xDEADBEEF

PCG_MULTIPLIER = 1664525
PCG_INCREMENT = 1013904223

# Single word PCG (RXS-M-XS output permutation)
PCG1_MULTIPLIER = 747796405
PCG1_INCREMENT = 2891336453
PCG1_OUTPUT_MULTIPLIER = 277803737

# Cross multiplication terms (target, factor_a, factor_b) per arity
PCG_CROSS_TERMS = {
    3: ((0, 1, 2), (1, 2, 0), (2, 0, 1)),
    4: ((0, 1, 3), (1, 2, 0), (2, 0, 1), (3, 1, 2)),
}


def _u32(x: int) -> int:
    return x & UINT32_MASK


def _to_int32(x: int) -> int:
    return x - 0x100000000 if x & SIGN_BIT else x


def _shr(x: int, k: int, signed: bool) -> int:
    """Logical (unsigned) or arithmetic (signed int32) right shift."""
    if signed:
        return _u32(_to_int32(x) >> k)
    return x >> k


def rot(x: int, k: int) -> int:
    return _u32((x << k) | (x >> (32 - k)))


def _mix(a: int, b: int, c: int) -> Tuple[int, int, int]:
    a = _u32(a - c); a ^= rot(c, 4); c = _u32(c + b)
    b = _u32(b - a); b ^= rot(a, 6); a = _u32(a + c)
    c = _u32(c - b); c ^= rot(b, 8); b = _u32(b + a)
    a = _u32(a - c); a ^= rot(c, 16); c = _u32(c + b)
    b = _u32(b - a); b ^= rot(a, 19); a = _u32(a + c)
    c = _u32(c - b); c ^= rot(b, 4); b = _u32(b + a)
    return a, b, c


def _final(a: int, b: int, c: int) -> Tuple[int, int, int]:
    c ^= b; c = _u32(c - rot(b, 14))
    a ^= c; a = _u32(a - rot(c, 11))
    b ^= a; b = _u32(b - rot(a, 25))
    c ^= b; c = _u32(c - rot(b, 16))
    a ^= c; a = _u32(a - rot(c, 4))
    b ^= a; b = _u32(b - rot(a, 14))
    c ^= b; c = _u32(c - rot(b, 24))
    return a, b, c


def _check_arity(n: int):
    if not 1 <= n <= 4:
        raise DimensionError(f"Hash keys must have 1 to 4 components, got {n}", dimensions=n)


def hash_uint(*keys: int) -> int:
    """
    Jenkins style hash of 1-4 unsigned 32-bit keys.

    Negative keys are reinterpreted as their two's complement bit pattern.
    """
    n = len(keys)
    _check_arity(n)
    k = [_u32(int(key)) for key in keys]
    a = b = c = _u32(JENKINS_SEED + (n << 2) + 13)

    if n == 4:
        a, b, c = _mix(_u32(a + k[0]), _u32(b + k[1]), _u32(c + k[2]))
        a = _u32(a + k[3])
    else:
        acc = [a, b, c]
        for i, key in enumerate(k):
            acc[i] = _u32(acc[i] + key)
        a, b, c = acc

    a, b, c = _final(a, b, c)
    return c


def hash_uint_to_float(k: int) -> float:
    return float(k) * (1.0 / float(UINT32_MASK))


def float_bits(x: float) -> int:
    """IEEE-754 binary32 bit pattern of `x`."""
    with np.errstate(over='ignore'):
        return int(np.asarray(x, dtype=np.float32).view(np.uint32))


def hash_vector_to_float(k) -> float:
    """Hash a float coordinate of 1-4 components into [0, 1]."""
    k = as_coordinate(k)
    return hash_uint_to_float(hash_uint(*(float_bits(c) for c in k)))


def hash_float_to_float(k: float) -> float:
    return hash_vector_to_float((k,))


hash_vec2_to_float = hash_vector_to_float
hash_vec3_to_float = hash_vector_to_float
hash_vec4_to_float = hash_vector_to_float


def hash_vector_to_vec3(k) -> Color:
    """
    Hash a float coordinate of 1-4 components into three values in [0, 1].

    Below four components the extra channels append 1.0 and 2.0 to the key;
    four component keys are swizzled (xyzw, zxwy, wzyx) instead.
    """
    k = as_coordinate(k)
    if len(k) < 4:
        return (hash_vector_to_float(k),
                hash_vector_to_float(k + (1.0,)),
                hash_vector_to_float(k + (2.0,)))
    x, y, z, w = k
    return (hash_vector_to_float((x, y, z, w)),
            hash_vector_to_float((z, x, w, y)),
            hash_vector_to_float((w, z, y, x)))


def hash_float_to_vec3(k: float) -> Color:
    return hash_vector_to_vec3((k,))


hash_vec2_to_vec3 = hash_vector_to_vec3
hash_vec3_to_vec3 = hash_vector_to_vec3
hash_vec4_to_vec3 = hash_vector_to_vec3


# -----------------------------------------------------------------------------
# PCG hashes
# -----------------------------------------------------------------------------

def _pcg1(x: int, signed: bool) -> int:
    state = _u32(x * PCG1_MULTIPLIER + PCG1_INCREMENT)
    word = _u32((_shr(state, (state >> 28) + 4, signed) ^ state) * PCG1_OUTPUT_MULTIPLIER)
    return _shr(word, 22, signed) ^ word


def _pcg_cross(v: list):
    if len(v) == 2:
        v[0] = _u32(v[0] + v[1] * PCG_MULTIPLIER)
        v[1] = _u32(v[1] + v[0] * PCG_MULTIPLIER)
        return
    for target, i, j in PCG_CROSS_TERMS[len(v)]:
        v[target] = _u32(v[target] + v[i] * v[j])


def _pcg(v: Sequence[int], signed: bool) -> Tuple[int, ...]:
    _check_arity(len(v))
    v = [_u32(int(x)) for x in v]
    if len(v) == 1:
        return (_pcg1(v[0], signed),)

    v = [_u32(x * PCG_MULTIPLIER + PCG_INCREMENT) for x in v]
    _pcg_cross(v)
    v = [x ^ _shr(x, 16, signed) for x in v]
    _pcg_cross(v)
    return tuple(v)


def hash_pcg(v: Sequence[int]) -> Tuple[int, ...]:
    """PCG hash of an unsigned integer vector, components in [0, 2^32)."""
    return _pcg(v, signed=False)


def hash_pcg_signed(v: Sequence[int]) -> Tuple[int, ...]:
    """PCG hash of a signed int32 vector, components are signed int32."""
    return tuple(_to_int32(h) for h in _pcg(v, signed=True))


def hash_int_to_vec(k: Sequence[int]) -> Tuple[float, ...]:
    """Hash an integer vector into [0, 1] per component (sign bit masked off)."""
    return tuple(float(h & INT31_MASK) * (1.0 / float(INT31_MASK))
                 for h in hash_pcg_signed(k))


# -----------------------------------------------------------------------------
# Lattice cell hashes used by Voronoi
# -----------------------------------------------------------------------------

def cell_jitter(cell: Sequence[int]) -> Tuple[float, ...]:
    """Feature point offset of a lattice cell, one value in [0, 1] per axis."""
    if len(cell) == 1:
        return (hash_float_to_float(float(cell[0])),)
    return hash_int_to_vec(cell)


def cell_color(cell: Sequence[int]) -> Color:
    """Pseudo-color of a lattice cell."""
    n = len(cell)
    if n == 1:
        return hash_float_to_vec3(float(cell[0]))
    if n == 2:
        return hash_int_to_vec((cell[0], cell[1], 0))
    return hash_int_to_vec(cell)[:3]
