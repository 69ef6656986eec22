# Voronoi Core
# Single octave cellular noise features for 1D-4D coordinates.
#
# Every feature searches the lattice cells around the query cell. Each cell
# owns one feature point: its corner plus a hashed jitter scaled by
# `randomness`. Offsets are visited in NEIGHBOR_OFFSETS order (axis 0
# fastest); F2 tie-breaks and the smooth F1 seed depend on that order.

import itertools
import math
from typing import Sequence, Tuple

from ..hash import cell_color, cell_jitter
from ..safe_math import dot, lerp, safe_divide, safe_normalize, safe_power, smoothstep
from ..types import Vector, VoronoiMetric, VoronoiOutput, VoronoiParams

FLT_MAX = 3.402823466e+38

# Pairs closer than this (squared) have no usable bisector
EDGE_EPSILON = 1e-4


def _neighbor_offsets(dims: int, radius: int) -> Tuple[Tuple[int, ...], ...]:
    span = range(-radius, radius + 1)
    # product() varies its last element fastest, reverse to make axis 0 fastest
    return tuple(tuple(reversed(p)) for p in itertools.product(span, repeat=dims))


NEIGHBOR_OFFSETS = {(dims, radius): _neighbor_offsets(dims, radius)
                    for dims in range(1, 5) for radius in (1, 2)}


def voronoi_distance(a: Sequence[float], b: Sequence[float], params: VoronoiParams) -> float:
    """Distance between two points under `params.metric`."""
    if len(a) == 1:
        return abs(a[0] - b[0])

    diffs = [abs(x - y) for x, y in zip(a, b)]
    metric = params.metric
    if metric == VoronoiMetric.EUCLIDEAN:
        return math.sqrt(sum(d * d for d in diffs))
    elif metric == VoronoiMetric.MANHATTAN:
        return sum(diffs)
    elif metric == VoronoiMetric.CHEBYCHEV:
        return max(diffs)
    elif metric == VoronoiMetric.MINKOWSKI:
        exponent = params.exponent
        return safe_power(sum(safe_power(d, exponent) for d in diffs),
                          safe_divide(1.0, exponent))
    return 0.0


def split_cell(coord: Vector) -> Tuple[Tuple[int, ...], Vector, Vector]:
    """Return (cell address, floored cell as floats, local offset)."""
    floors = tuple(math.floor(c) for c in coord)
    local = tuple(c - f for c, f in zip(coord, floors))
    return tuple(int(f) for f in floors), tuple(float(f) for f in floors), local


def _add(a: Sequence[float], b: Sequence[float]) -> tuple:
    return tuple(x + y for x, y in zip(a, b))


def _sub(a: Sequence[float], b: Sequence[float]) -> tuple:
    return tuple(x - y for x, y in zip(a, b))


def feature_point(cell: Sequence[int], offset: Sequence[int], randomness: float) -> Vector:
    """Feature point of the cell at `cell + offset`, relative to `cell`."""
    jitter = cell_jitter(_add(cell, offset))
    return tuple(o + j * randomness for o, j in zip(offset, jitter))


def voronoi_f1(params: VoronoiParams, coord: Vector) -> VoronoiOutput:
    cell, cell_f, local = split_cell(coord)
    min_distance = FLT_MAX
    target_offset = (0,) * len(coord)
    target_position = (0.0,) * len(coord)

    for offset in NEIGHBOR_OFFSETS[len(coord), 1]:
        p = feature_point(cell, offset, params.randomness)
        d = voronoi_distance(p, local, params)
        if d < min_distance:
            target_offset = offset
            min_distance = d
            target_position = p

    return VoronoiOutput(distance=min_distance,
                         color=cell_color(_add(cell, target_offset)),
                         position=_add(target_position, cell_f))


def voronoi_smooth_f1(params: VoronoiParams, coord: Vector) -> VoronoiOutput:
    """
    Smooth minimum of the distances over a 5^D neighborhood.

    The first candidate seeds the running values (h = 1); every later one
    is folded in with a polynomial smooth minimum of width `smoothness`.
    """
    cell, cell_f, local = split_cell(coord)
    smoothness = params.smoothness
    smooth_distance = 0.0
    smooth_color = (0.0, 0.0, 0.0)
    smooth_position = (0.0,) * len(coord)
    first = True

    for offset in NEIGHBOR_OFFSETS[len(coord), 2]:
        p = feature_point(cell, offset, params.randomness)
        d = voronoi_distance(p, local, params)
        if first:
            h = 1.0
            first = False
        else:
            h = smoothstep(0.0, 1.0, 0.5 + 0.5 * safe_divide(smooth_distance - d, smoothness))
        correction = smoothness * h * (1.0 - h)
        smooth_distance = lerp(smooth_distance, d, h) - correction
        correction /= 1.0 + 3.0 * smoothness
        color = cell_color(_add(cell, offset))
        smooth_color = tuple(lerp(s, c, h) - correction for s, c in zip(smooth_color, color))
        smooth_position = tuple(lerp(s, c, h) - correction for s, c in zip(smooth_position, p))

    return VoronoiOutput(distance=smooth_distance,
                         color=smooth_color,
                         position=_add(cell_f, smooth_position))


def voronoi_f2(params: VoronoiParams, coord: Vector) -> VoronoiOutput:
    cell, cell_f, local = split_cell(coord)
    dims = len(coord)
    d1 = d2 = FLT_MAX
    o1 = o2 = (0,) * dims
    p1 = p2 = (0.0,) * dims

    for offset in NEIGHBOR_OFFSETS[dims, 1]:
        p = feature_point(cell, offset, params.randomness)
        d = voronoi_distance(p, local, params)
        if d < d1:
            d2, o2, p2 = d1, o1, p1
            d1, o1, p1 = d, offset, p
        elif d < d2:
            d2, o2, p2 = d, offset, p

    return VoronoiOutput(distance=d2,
                         color=cell_color(_add(cell, o2)),
                         position=_add(p2, cell_f))


def voronoi_distance_to_edge(params: VoronoiParams, coord: Vector) -> float:
    """Distance from `coord` to the nearest edge of its Voronoi cell."""
    cell, _, local = split_cell(coord)
    vectors = [_sub(feature_point(cell, offset, params.randomness), local)
               for offset in NEIGHBOR_OFFSETS[len(coord), 1]]

    closest = vectors[0]
    min_distance = FLT_MAX
    for v in vectors:
        d = dot(v, v)
        if d < min_distance:
            min_distance = d
            closest = v

    min_distance = FLT_MAX
    for v in vectors:
        perp = _sub(v, closest)
        if dot(perp, perp) > EDGE_EPSILON:
            midpoint = tuple((c + x) / 2.0 for c, x in zip(closest, v))
            min_distance = min(min_distance, dot(midpoint, safe_normalize(perp)))
    return min_distance


def voronoi_n_sphere_radius(params: VoronoiParams, coord: Vector) -> float:
    """
    Half the Euclidean distance from the nearest feature point to its own
    nearest neighbor, whatever the configured metric.
    """
    cell, _, local = split_cell(coord)
    dims = len(coord)
    closest = (0.0,) * dims
    closest_offset = (0,) * dims
    min_distance = FLT_MAX

    for offset in NEIGHBOR_OFFSETS[dims, 1]:
        p = feature_point(cell, offset, params.randomness)
        d = math.dist(p, local)
        if d < min_distance:
            min_distance = d
            closest = p
            closest_offset = offset

    min_distance = FLT_MAX
    closest_to_closest = (0.0,) * dims
    for offset in NEIGHBOR_OFFSETS[dims, 1]:
        if not any(offset):
            continue
        p = feature_point(cell, _add(offset, closest_offset), params.randomness)
        d = math.dist(closest, p)
        if d < min_distance:
            min_distance = d
            closest_to_closest = p

    return math.dist(closest_to_closest, closest) / 2.0
