# Fractal Noise
# Multi-octave gradient noise (fBM) and the noise texture built on it.

import math

from ..hash import hash_float_to_float, hash_vec2_to_float
from ..safe_math import lerp
from ..types import MAX_DETAIL, Coordinate, NoiseOutput, Vector, as_coordinate, clamp
from .perlin import signed_gradient_noise


def _scaled(p: Vector, factor: float) -> Vector:
    return tuple(c * factor for c in p)


def noise_fbm(p: Vector, detail: float, roughness: float, lacunarity: float,
              normalize: bool) -> float:
    """
    Sum `floor(detail) + 1` octaves of signed gradient noise, then blend in
    one more octave by the fractional part of `detail`.

    Inputs are expected to be clamped already (see `fractal_noise`).
    """
    if detail == 0.0 or roughness == 0.0:
        # Only the first octave carries weight: max amplitude is 1
        t = signed_gradient_noise(p)
        return 0.5 * t + 0.5 if normalize else t

    fscale = 1.0
    amp = 1.0
    maxamp = 0.0
    total = 0.0

    for _ in range(int(detail) + 1):
        t = signed_gradient_noise(_scaled(p, fscale))
        total += t * amp
        maxamp += amp
        amp *= roughness
        fscale *= lacunarity

    rmd = detail - math.floor(detail)
    if rmd != 0.0:
        t = signed_gradient_noise(_scaled(p, fscale))
        total2 = total + t * amp
        if normalize:
            return lerp(0.5 * total / maxamp + 0.5, 0.5 * total2 / (maxamp + amp) + 0.5, rmd)
        return lerp(total, total2, rmd)

    return 0.5 * total / maxamp + 0.5 if normalize else total


def fractal_noise(coord: Coordinate, detail: float = 2.0, roughness: float = 0.5,
                  lacunarity: float = 2.0, normalize: bool = True) -> float:
    """
    Fractal gradient noise at `coord`.

    Args:
        coord: 1-4 component coordinate
        detail: Octave count above the first, fractional values blend (clamped to [0, 15])
        roughness: Amplitude ratio between octaves (clamped to [0, 1])
        lacunarity: Frequency ratio between octaves
        normalize: Remap to [0, 1] by the accumulated amplitude, otherwise
            return the raw signed sum

    With detail=0 this equals `gradient_noise(coord)` when normalized and
    `signed_gradient_noise(coord)` otherwise.
    """
    p = as_coordinate(coord)
    return noise_fbm(p,
                     clamp(float(detail), 0.0, MAX_DETAIL),
                     clamp(float(roughness), 0.0, 1.0),
                     float(lacunarity),
                     bool(normalize))


def random_offset(seed: float, dims: int) -> Vector:
    """Per-texture domain offset in [100, 200) used to decorrelate color channels."""
    if dims == 1:
        return (100.0 + hash_float_to_float(seed) * 100.0,)
    return tuple(100.0 + hash_vec2_to_float((seed, float(i))) * 100.0 for i in range(dims))


def noise_texture(coord: Coordinate, scale: float = 5.0, detail: float = 2.0,
                  roughness: float = 0.5, lacunarity: float = 2.0,
                  normalize: bool = True) -> NoiseOutput:
    """
    Noise texture: fractal value plus a color whose green and blue channels
    are the same fractal sampled at two hashed domain offsets.
    """
    p = _scaled(as_coordinate(coord), float(scale))
    dims = len(p)
    detail = clamp(float(detail), 0.0, MAX_DETAIL)
    roughness = clamp(float(roughness), 0.0, 1.0)
    lacunarity = float(lacunarity)
    normalize = bool(normalize)

    value = noise_fbm(p, detail, roughness, lacunarity, normalize)
    channels = []
    for seed in (float(dims), float(dims + 1)):
        offset = random_offset(seed, dims)
        shifted = tuple(c + o for c, o in zip(p, offset))
        channels.append(noise_fbm(shifted, detail, roughness, lacunarity, normalize))

    return NoiseOutput(value=value, color=(value, channels[0], channels[1]))
