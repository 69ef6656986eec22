"""
Value types shared by the noise evaluators.

Everything here is created per call and never mutated afterwards:
coordinates are normalized into plain tuples, parameter bundles are frozen
dataclasses and results are small records returned by value.
"""

import logging
import math
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Sequence, Tuple, Union

from .errors import DimensionError

logger = logging.getLogger(__name__)

Coordinate = Union[float, Sequence[float]]
Vector = Tuple[float, ...]
Color = Tuple[float, float, float]

MAX_DETAIL = 15.0


class VoronoiFeature(IntEnum):
    F1 = 0
    F2 = 1
    SMOOTH_F1 = 2
    DISTANCE_TO_EDGE = 3
    N_SPHERE_RADIUS = 4

    @classmethod
    def coerce(cls, value) -> 'VoronoiFeature':
        """Map an int, name or member onto a feature, defaulting to F1."""
        return _coerce_enum(cls, value, cls.F1)


class VoronoiMetric(IntEnum):
    EUCLIDEAN = 0
    MANHATTAN = 1
    CHEBYCHEV = 2
    MINKOWSKI = 3

    @classmethod
    def coerce(cls, value) -> 'VoronoiMetric':
        """Map an int, name or member onto a metric, defaulting to Euclidean."""
        return _coerce_enum(cls, value, cls.EUCLIDEAN)


def _coerce_enum(enum_cls, value, default):
    if isinstance(value, enum_cls):
        return value
    try:
        if isinstance(value, str):
            return enum_cls[value.strip().upper()]
        return enum_cls(int(value))
    except (KeyError, ValueError, TypeError, OverflowError):
        logger.warning(f"Unknown {enum_cls.__name__} {value!r}, using {default.name}")
        return default


def as_coordinate(coord: Coordinate) -> Vector:
    """
    Normalize a scalar or a sequence of 1-4 components into a float tuple.

    Raises:
        DimensionError: If the coordinate has no components or more than four.
    """
    if isinstance(coord, (int, float)):
        return (float(coord),)
    components = tuple(float(c) for c in coord)
    if not 1 <= len(components) <= 4:
        raise DimensionError(
            f"Coordinates must have 1 to 4 components, got {len(components)}",
            dimensions=len(components))
    return components


def clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


@dataclass(frozen=True)
class VoronoiParams:
    """
    Configuration bundle of one Voronoi evaluation.

    `smoothness` is already halved and clamped to [0, 0.5] and
    `max_distance` is only used when `normalize` is set. Build instances
    through `from_inputs` so that the public clamps are applied.
    """
    scale: float = 5.0
    detail: float = 0.0
    roughness: float = 0.5
    lacunarity: float = 2.0
    smoothness: float = 0.5
    exponent: float = 0.5
    randomness: float = 1.0
    max_distance: float = 0.0
    normalize: bool = False
    feature: VoronoiFeature = VoronoiFeature.F1
    metric: VoronoiMetric = VoronoiMetric.EUCLIDEAN

    @classmethod
    def from_inputs(cls, scale: float = 5.0, detail: float = 0.0, roughness: float = 0.5,
                    lacunarity: float = 2.0, smoothness: float = 1.0, exponent: float = 0.5,
                    randomness: float = 1.0, feature=VoronoiFeature.F1,
                    metric=VoronoiMetric.EUCLIDEAN, normalize: bool = False) -> 'VoronoiParams':
        """Build params from raw node inputs, clamping the way the texture node does."""
        params = cls(
            scale=float(scale),
            detail=clamp(float(detail), 0.0, MAX_DETAIL),
            roughness=clamp(float(roughness), 0.0, 1.0),
            lacunarity=float(lacunarity),
            smoothness=clamp(float(smoothness) / 2.0, 0.0, 0.5),
            exponent=float(exponent),
            randomness=clamp(float(randomness), 0.0, 1.0),
            normalize=bool(normalize),
            feature=VoronoiFeature.coerce(feature),
            metric=VoronoiMetric.coerce(metric),
        )
        if params.detail != detail or params.randomness != randomness:
            logger.debug(f"Voronoi inputs clamped: detail={params.detail}, "
                         f"randomness={params.randomness}")
        return params


@dataclass
class VoronoiOutput:
    distance: float = 0.0
    color: Color = (0.0, 0.0, 0.0)
    position: Vector = ()
    radius: float = 0.0

    @property
    def is_finite(self) -> bool:
        values = (self.distance, self.radius) + tuple(self.color) + tuple(self.position)
        return all(math.isfinite(v) for v in values)


@dataclass
class NoiseOutput:
    value: float = 0.0
    color: Color = field(default=(0.0, 0.0, 0.0))
