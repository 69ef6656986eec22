# Fractal Voronoi
# Multi-octave composition of the single octave Voronoi features.
#
# Octaves 0..floor(detail) are accumulated with weight `amplitude`, which is
# multiplied by roughness after each octave while the frequency `scale` is
# multiplied by lacunarity. One extra octave is blended by the fractional
# part of detail. detail == 0 or roughness == 0 evaluates a single octave.
# Composition stops at the first octave whose coordinate is no longer finite.

import math

from ..safe_math import lerp, lerp_vector, safe_divide, safe_divide_vector
from ..types import Vector, VoronoiFeature, VoronoiOutput, VoronoiParams
from .core import voronoi_distance_to_edge, voronoi_f1, voronoi_f2, voronoi_smooth_f1


def _octave(params: VoronoiParams, coord: Vector) -> VoronoiOutput:
    if params.feature == VoronoiFeature.F2:
        return voronoi_f2(params, coord)
    if params.feature == VoronoiFeature.SMOOTH_F1 and params.smoothness != 0.0:
        return voronoi_smooth_f1(params, coord)
    return voronoi_f1(params, coord)


def _scaled(coord: Vector, factor: float) -> Vector:
    return tuple(c * factor for c in coord)


def _is_finite(coord: Vector) -> bool:
    return all(math.isfinite(c) for c in coord)


def fractal_voronoi_x_fx(params: VoronoiParams, coord: Vector) -> VoronoiOutput:
    """
    Fractal F1, F2 or smooth F1.

    Distance and color are summed with the octave amplitude; the position
    is blended towards each octave's position (brought back to octave 0
    space by dividing by the octave frequency). The position is returned
    in `coord` space, the caller divides it by the texture scale.
    """
    amplitude = 1.0
    max_amplitude = 0.0
    scale = 1.0
    distance = 0.0
    color = (0.0, 0.0, 0.0)
    position = (0.0,) * len(coord)

    zero_input = params.detail == 0.0 or params.roughness == 0.0
    for i in range(int(math.ceil(params.detail)) + 1):
        octave_coord = _scaled(coord, scale)
        if not _is_finite(octave_coord):
            break
        octave = _octave(params, octave_coord)
        if zero_input:
            max_amplitude = 1.0
            distance, color, position = octave.distance, octave.color, octave.position
            break
        elif i <= params.detail:
            max_amplitude += amplitude
            distance += octave.distance * amplitude
            color = tuple(c + o * amplitude for c, o in zip(color, octave.color))
            position = lerp_vector(position, safe_divide_vector(octave.position, scale), amplitude)
            scale *= params.lacunarity
            amplitude *= params.roughness
        else:
            remainder = params.detail - math.floor(params.detail)
            if remainder != 0.0:
                max_amplitude = lerp(max_amplitude, max_amplitude + amplitude, remainder)
                distance = lerp(distance, distance + octave.distance * amplitude, remainder)
                color = lerp_vector(
                    color, tuple(c + o * amplitude for c, o in zip(color, octave.color)),
                    remainder)
                position = lerp_vector(
                    position,
                    lerp_vector(position, safe_divide_vector(octave.position, scale), amplitude),
                    remainder)

    if params.normalize:
        distance = safe_divide(distance, max_amplitude * params.max_distance)
        color = safe_divide_vector(color, max_amplitude)

    return VoronoiOutput(distance=distance, color=color, position=position)


def fractal_voronoi_distance_to_edge(params: VoronoiParams, coord: Vector) -> float:
    """
    Fractal distance to edge.

    Keeps a running minimum over octaves rather than a sum; each octave
    distance is brought back to octave 0 space by dividing by its frequency.
    """
    amplitude = 1.0
    max_amplitude = params.max_distance
    scale = 1.0
    distance = 8.0

    zero_input = params.detail == 0.0 or params.roughness == 0.0
    for i in range(int(math.ceil(params.detail)) + 1):
        octave_coord = _scaled(coord, scale)
        if not _is_finite(octave_coord):
            break
        octave_distance = voronoi_distance_to_edge(params, octave_coord)
        if zero_input:
            distance = octave_distance
            break
        elif i <= params.detail:
            max_amplitude = lerp(max_amplitude, safe_divide(params.max_distance, scale), amplitude)
            distance = lerp(distance, min(distance, safe_divide(octave_distance, scale)), amplitude)
            scale *= params.lacunarity
            amplitude *= params.roughness
        else:
            remainder = params.detail - math.floor(params.detail)
            if remainder != 0.0:
                lerp_amplitude = lerp(max_amplitude, safe_divide(params.max_distance, scale), amplitude)
                max_amplitude = lerp(max_amplitude, lerp_amplitude, remainder)
                lerp_distance = lerp(distance, min(distance, safe_divide(octave_distance, scale)), amplitude)
                distance = lerp(distance, min(distance, lerp_distance), remainder)

    if params.normalize:
        distance = safe_divide(distance, max_amplitude)
    return distance
