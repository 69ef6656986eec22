# Voronoi Package
# Re-exports the cellular noise evaluators

from .core import (
    NEIGHBOR_OFFSETS,
    feature_point,
    voronoi_distance,
    voronoi_distance_to_edge,
    voronoi_f1,
    voronoi_f2,
    voronoi_n_sphere_radius,
    voronoi_smooth_f1,
)
from .fractal import fractal_voronoi_distance_to_edge, fractal_voronoi_x_fx
from .tex import max_distance_for, voronoi

__all__ = [
    'NEIGHBOR_OFFSETS',
    'feature_point',
    'voronoi_distance',
    'voronoi_distance_to_edge',
    'voronoi_f1',
    'voronoi_f2',
    'voronoi_n_sphere_radius',
    'voronoi_smooth_f1',
    'fractal_voronoi_distance_to_edge',
    'fractal_voronoi_x_fx',
    'max_distance_for',
    'voronoi',
]
