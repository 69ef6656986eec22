# Perlin Gradient Noise
# Single octave gradient noise over 1D-4D lattices.
#
# Each of the 2^D cell corners hashes its integer address with hash_uint,
# picks a gradient from the low bits of that hash, and contributes the dot
# product of the gradient with the corner-to-sample vector. Contributions
# are blended with the quintic fade of the local offset.

import math
from typing import Sequence, Tuple

from ..hash import hash_uint
from ..safe_math import compatible_mod, ensure_finite, fade, floor_fraction, mix_corners
from ..types import Coordinate, as_coordinate

# Empirical factors bringing each dimensionality to roughly [-1, 1]
NOISE_SCALE = {1: 0.2500, 2: 0.6616, 3: 0.9820, 4: 0.8344}

# Coordinates are wrapped into this period to keep float precision in check
PRECISION_PERIOD = 100000.0
PRECISION_LIMIT = 1000000.0


def _corner_bits(dims: int) -> Tuple[Tuple[int, ...], ...]:
    # Corner index bit k selects the upper end of axis k (axis 0 fastest)
    return tuple(tuple((index >> axis) & 1 for axis in range(dims))
                 for index in range(1 << dims))


CORNERS = {dims: _corner_bits(dims) for dims in range(1, 5)}


def negate_if(value: float, condition: int) -> float:
    return -value if condition != 0 else value


def noise_grad(hash_value: int, offset: Sequence[float]) -> float:
    """Dot product of the hashed gradient with `offset`."""
    dims = len(offset)
    if dims == 1:
        h = hash_value & 15
        g = 1 + (h & 7)
        return negate_if(g, h & 8) * offset[0]

    if dims == 2:
        x, y = offset
        h = hash_value & 7
        u = x if h < 4 else y
        v = 2.0 * (y if h < 4 else x)
        return negate_if(u, h & 1) + negate_if(v, h & 2)

    if dims == 3:
        x, y, z = offset
        h = hash_value & 15
        u = x if h < 8 else y
        vt = x if h in (12, 14) else z
        v = y if h < 4 else vt
        return negate_if(u, h & 1) + negate_if(v, h & 2)

    x, y, z, w = offset
    h = hash_value & 31
    u = x if h < 24 else y
    v = y if h < 16 else z
    s = z if h < 8 else w
    return negate_if(u, h & 1) + negate_if(v, h & 2) + negate_if(s, h & 4)


def perlin_noise(coord: Coordinate) -> float:
    """Unscaled Perlin noise at `coord`."""
    coord = as_coordinate(coord)
    cells, fractions = zip(*(floor_fraction(c) for c in coord))
    weights = [fade(f) for f in fractions]

    values = []
    for bits in CORNERS[len(coord)]:
        corner = [cell + bit for cell, bit in zip(cells, bits)]
        offset = [f - bit for f, bit in zip(fractions, bits)]
        values.append(noise_grad(hash_uint(*corner), offset))

    return mix_corners(values, weights)


def _precision_wrap(p: float) -> float:
    correction = 0.5 if abs(p) >= PRECISION_LIMIT else 0.0
    return compatible_mod(p, PRECISION_PERIOD) + correction


def signed_gradient_noise(coord: Coordinate) -> float:
    """Gradient noise in approximately [-1, 1]."""
    coord = as_coordinate(coord)
    if not all(math.isfinite(c) for c in coord):
        return 0.0
    p = tuple(_precision_wrap(c) for c in coord)
    return NOISE_SCALE[len(p)] * ensure_finite(perlin_noise(p))


def gradient_noise(coord: Coordinate) -> float:
    """Gradient noise remapped to approximately [0, 1]."""
    return 0.5 * signed_gradient_noise(coord) + 0.5
