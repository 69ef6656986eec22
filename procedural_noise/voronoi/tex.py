# Voronoi Texture
# Public entry point: clamps the raw inputs, derives the normalization
# distance for the requested feature and dispatches to the fractal layer.

import logging
import math
from dataclasses import replace

from ..safe_math import safe_divide_vector
from ..types import (Coordinate, VoronoiFeature, VoronoiMetric, VoronoiOutput, VoronoiParams,
                     as_coordinate)
from .core import voronoi_distance, voronoi_n_sphere_radius
from .fractal import fractal_voronoi_distance_to_edge, fractal_voronoi_x_fx

logger = logging.getLogger(__name__)


def max_distance_for(params: VoronoiParams, dims: int) -> float:
    """
    Largest expected distance, used to bring normalized output to [0, 1].

    F1 and smooth F1 use the distance from the origin to the furthest
    jittered corner, F2 doubles it, distance to edge uses the per-axis
    jitter bound alone.
    """
    corner = 0.5 + 0.5 * params.randomness
    if params.feature == VoronoiFeature.DISTANCE_TO_EDGE:
        return corner
    distance = voronoi_distance((0.0,) * dims, (corner,) * dims, params)
    if params.feature == VoronoiFeature.F2:
        return distance * 2.0
    return distance


def voronoi(coord: Coordinate, scale: float = 5.0, detail: float = 0.0,
            roughness: float = 0.5, lacunarity: float = 2.0, smoothness: float = 1.0,
            exponent: float = 0.5, randomness: float = 1.0,
            feature=VoronoiFeature.F1, metric=VoronoiMetric.EUCLIDEAN, normalize: bool = False) -> VoronoiOutput:
    """
    Evaluate the Voronoi texture at `coord`.

    Args:
        coord: 1-4 component coordinate
        scale: Frequency of the cell lattice
        detail: Extra octaves, fractional values blend (clamped to [0, 15])
        roughness: Amplitude ratio between octaves (clamped to [0, 1])
        lacunarity: Frequency ratio between octaves
        smoothness: Smooth F1 blend width (halved, clamped to [0, 0.5])
        exponent: Minkowski exponent
        randomness: Feature point jitter (clamped to [0, 1])
        feature: VoronoiFeature member, int or name
        metric: VoronoiMetric member, int or name
        normalize: Divide distance by its expected maximum

    Returns:
        VoronoiOutput. `distance`, `color` and `position` are filled for
        F1/F2/smooth F1, `distance` for distance to edge and `radius` for
        n-sphere radius. `position` is expressed in input coordinates.
    """
    coord = as_coordinate(coord)
    params = VoronoiParams.from_inputs(
        scale=scale, detail=detail, roughness=roughness, lacunarity=lacunarity,
        smoothness=smoothness, exponent=exponent, randomness=randomness,
        feature=feature, metric=metric, normalize=normalize)

    p = tuple(c * params.scale for c in coord)
    if not all(math.isfinite(c) for c in p):
        logger.debug(f"Non-finite Voronoi coordinate {coord}, returning empty output")
        return VoronoiOutput(position=(0.0,) * len(coord))

    if params.feature == VoronoiFeature.N_SPHERE_RADIUS:
        return VoronoiOutput(position=(0.0,) * len(coord),
                             radius=voronoi_n_sphere_radius(params, p))

    params = replace(params, max_distance=max_distance_for(params, len(p)))

    if params.feature == VoronoiFeature.DISTANCE_TO_EDGE:
        return VoronoiOutput(position=(0.0,) * len(coord),
                             distance=fractal_voronoi_distance_to_edge(params, p))

    output = fractal_voronoi_x_fx(params, p)
    output.position = safe_divide_vector(output.position, params.scale)
    return output
