"""
Tests for the Voronoi features, their fractal composition and the public
texture entry point.

Most exact expectations use randomness=0, where every feature point sits on
its cell corner and distances can be worked out by hand.
"""

import logging
import math

import pytest

from procedural_noise.errors import DimensionError
from procedural_noise.hash import cell_color
from procedural_noise.safe_math import lerp, smoothstep
from procedural_noise.types import VoronoiFeature, VoronoiMetric, VoronoiParams
from procedural_noise.voronoi import (
    NEIGHBOR_OFFSETS,
    feature_point,
    max_distance_for,
    voronoi,
    voronoi_distance,
    voronoi_f1,
    voronoi_f2,
    voronoi_smooth_f1,
)

CORNER_POINT = (0.3, 0.4)


def corner_voronoi(coord=CORNER_POINT, **kwargs):
    kwargs.setdefault('scale', 1.0)
    kwargs.setdefault('randomness', 0.0)
    return voronoi(coord, **kwargs)


class TestNeighborOrder:

    def test_axis_0_varies_fastest(self):
        offsets = NEIGHBOR_OFFSETS[2, 1]
        assert offsets[:4] == ((-1, -1), (0, -1), (1, -1), (-1, 0))

    @pytest.mark.parametrize("dims,radius,count", [(1, 1, 3), (2, 1, 9), (3, 2, 125), (4, 1, 81)])
    def test_counts(self, dims, radius, count):
        assert len(NEIGHBOR_OFFSETS[dims, radius]) == count


class TestDistanceMetrics:

    @pytest.mark.parametrize("metric,expected", [
        (VoronoiMetric.EUCLIDEAN, 0.5),
        (VoronoiMetric.MANHATTAN, 0.7),
        (VoronoiMetric.CHEBYCHEV, 0.4),
    ])
    def test_f1_on_corners(self, metric, expected):
        out = corner_voronoi(metric=metric)
        assert out.distance == pytest.approx(expected)

    def test_minkowski_matches_euclidean_and_manhattan(self, points_2d):
        for p in points_2d:
            euclid = voronoi(p, metric=VoronoiMetric.EUCLIDEAN).distance
            mink2 = voronoi(p, metric=VoronoiMetric.MINKOWSKI, exponent=2.0).distance
            assert mink2 == pytest.approx(euclid)
            manhattan = voronoi(p, metric='manhattan').distance
            mink1 = voronoi(p, metric=VoronoiMetric.MINKOWSKI, exponent=1.0).distance
            assert mink1 == pytest.approx(manhattan)

    def test_1d_ignores_metric(self):
        params = VoronoiParams(metric=VoronoiMetric.CHEBYCHEV)
        assert voronoi_distance((0.25,), (1.0,), params) == 0.75

    def test_unknown_metric_falls_back_to_euclidean(self, caplog):
        with caplog.at_level(logging.WARNING, logger='procedural_noise'):
            out = corner_voronoi(metric=99)
        assert out.distance == pytest.approx(0.5)
        assert "Unknown VoronoiMetric" in caplog.text

    @pytest.mark.parametrize("metric", [math.inf, -math.inf, math.nan, 1.0e300])
    def test_non_finite_metric_falls_back_to_euclidean(self, metric):
        """Float enumerants from a host socket are defaulted, never rejected."""
        assert VoronoiMetric.coerce(metric) is VoronoiMetric.EUCLIDEAN
        assert VoronoiFeature.coerce(metric) is VoronoiFeature.F1
        assert corner_voronoi(metric=metric).distance == pytest.approx(0.5)

    def test_metric_names_are_accepted(self):
        assert VoronoiMetric.coerce('chebychev') is VoronoiMetric.CHEBYCHEV
        assert VoronoiFeature.coerce('Smooth_F1') is VoronoiFeature.SMOOTH_F1
        assert VoronoiFeature.coerce(3) is VoronoiFeature.DISTANCE_TO_EDGE


class TestFeatures:

    def test_f1_position_and_color(self):
        """
        Given: randomness 0 and a point in cell (0, 0)
        When: F1 is evaluated
        Then: the nearest feature point is the cell corner itself
        """
        out = corner_voronoi()
        assert out.position == pytest.approx((0.0, 0.0))
        assert out.color == cell_color((0, 0))

    def test_position_in_input_space(self):
        out = corner_voronoi(scale=2.0)
        assert out.distance == pytest.approx(math.sqrt(0.2))
        assert out.position == pytest.approx((0.5, 0.5))

    def test_f2_on_corners(self):
        out = corner_voronoi(feature=VoronoiFeature.F2)
        assert out.distance == pytest.approx(math.sqrt(0.45))
        assert out.position == pytest.approx((0.0, 1.0))
        assert out.color == cell_color((0, 1))

    def test_distance_to_edge_on_corners(self):
        assert corner_voronoi(feature=VoronoiFeature.DISTANCE_TO_EDGE).distance == pytest.approx(0.1)
        assert corner_voronoi(0.3, feature=VoronoiFeature.DISTANCE_TO_EDGE).distance == pytest.approx(0.2)

    def test_n_sphere_radius_on_corners(self):
        out = corner_voronoi(feature=VoronoiFeature.N_SPHERE_RADIUS)
        assert out.radius == pytest.approx(0.5)
        assert out.distance == 0.0

    def test_n_sphere_radius_ignores_metric(self, points_2d):
        for p in points_2d[:8]:
            euclid = voronoi(p, feature='n_sphere_radius').radius
            chebychev = voronoi(p, feature='n_sphere_radius', metric='chebychev').radius
            assert chebychev == euclid

    def test_1d_f1(self):
        out = corner_voronoi(0.3)
        assert out.distance == pytest.approx(0.3)
        assert out.position == pytest.approx((0.0,))

    def test_f1_matches_brute_force(self, points_by_dims, brute_force_f1):
        for dims in (2, 3, 4):
            for p in points_by_dims[dims][:6]:
                out = voronoi(p, scale=1.0)
                distance, position = brute_force_f1(p)
                assert out.distance == pytest.approx(distance, abs=1e-5)
                assert out.position == pytest.approx(position, abs=1e-5)

    def test_f1_not_above_f2(self, points_3d):
        for p in points_3d:
            f1 = voronoi(p).distance
            f2 = voronoi(p, feature=VoronoiFeature.F2).distance
            assert f1 <= f2

    def test_smooth_f1_not_above_f1(self, points_2d):
        for p in points_2d:
            f1 = voronoi(p).distance
            smooth = voronoi(p, feature=VoronoiFeature.SMOOTH_F1, smoothness=0.8).distance
            assert smooth <= f1 + 1e-9

    def test_smooth_f1_with_zero_smoothness_is_f1(self, points_2d):
        for p in points_2d[:8]:
            assert voronoi(p, feature=VoronoiFeature.SMOOTH_F1, smoothness=0.0) == voronoi(p)

    def test_position_arity(self, points_by_dims):
        for dims, points in points_by_dims.items():
            for feature in (VoronoiFeature.F1, VoronoiFeature.F2, VoronoiFeature.SMOOTH_F1):
                assert len(voronoi(points[0], feature=feature).position) == dims

    def test_outputs_finite(self, points_by_dims):
        for dims, points in points_by_dims.items():
            for feature in VoronoiFeature:
                out = voronoi(points[1], detail=2.5, feature=feature, normalize=True)
                assert out.is_finite, f"dims={dims} feature={feature.name}"


class TestFractal:

    def test_zero_detail_is_single_octave(self, points_2d):
        params = VoronoiParams.from_inputs(scale=1.0)
        for p in points_2d[:8]:
            assert voronoi(p, scale=1.0).distance == voronoi_f1(params, p).distance

    def test_two_octaves_sum(self):
        """
        Given: detail 1, roughness 0.5, lacunarity 2
        When: F1 is evaluated without normalization
        Then: distance is F1(p) + 0.5 * F1(2p)
        """
        p = (1.37, -0.62)
        params = VoronoiParams.from_inputs(scale=1.0)
        expected = voronoi_f1(params, p).distance + 0.5 * voronoi_f1(params, (2.74, -1.24)).distance
        out = voronoi(p, scale=1.0, detail=1.0, roughness=0.5, lacunarity=2.0)
        assert out.distance == pytest.approx(expected)

    def test_normalized_two_octaves(self):
        p = (1.37, -0.62)
        raw = voronoi(p, scale=1.0, detail=1.0).distance
        normalized = voronoi(p, scale=1.0, detail=1.0, normalize=True).distance
        assert normalized == pytest.approx(raw / (1.5 * math.sqrt(2.0)))

    def test_normalized_single_octave_on_corners(self):
        out = corner_voronoi(normalize=True)
        assert out.distance == pytest.approx(0.5 / math.sqrt(0.5))

    def test_distance_to_edge_octaves_never_grow(self, points_2d):
        for p in points_2d[:8]:
            single = voronoi(p, feature=VoronoiFeature.DISTANCE_TO_EDGE).distance
            fractal = voronoi(p, feature=VoronoiFeature.DISTANCE_TO_EDGE, detail=3.0,
                              roughness=1.0).distance
            assert fractal <= single + 1e-9

    def test_zero_lacunarity_stays_finite(self):
        out = voronoi((0.4, 0.8), detail=3.0, lacunarity=0.0, normalize=True)
        assert out.is_finite


class TestClamping:

    def test_detail_clamped(self):
        p = (0.21, 0.77)
        assert voronoi(p, detail=100.0) == voronoi(p, detail=15.0)

    def test_randomness_clamped(self, points_2d):
        for p in points_2d[:8]:
            assert voronoi(p, randomness=5.0) == voronoi(p, randomness=1.0)

    def test_smoothness_halved_and_clamped(self):
        assert VoronoiParams.from_inputs(smoothness=0.6).smoothness == pytest.approx(0.3)
        p = (0.21, 0.77)
        smooth = VoronoiFeature.SMOOTH_F1
        assert voronoi(p, feature=smooth, smoothness=3.0) == voronoi(p, feature=smooth, smoothness=1.0)

    def test_max_distance(self):
        f1 = VoronoiParams.from_inputs()
        assert max_distance_for(f1, 2) == pytest.approx(math.sqrt(2.0))
        f2 = VoronoiParams.from_inputs(feature=VoronoiFeature.F2)
        assert max_distance_for(f2, 2) == pytest.approx(2.0 * math.sqrt(2.0))
        edge = VoronoiParams.from_inputs(feature=VoronoiFeature.DISTANCE_TO_EDGE, randomness=0.0)
        assert max_distance_for(edge, 3) == 0.5
        manhattan = VoronoiParams.from_inputs(metric=VoronoiMetric.MANHATTAN)
        assert max_distance_for(manhattan, 3) == pytest.approx(3.0)


class TestInvalidInput:

    @pytest.mark.parametrize("coord", [(), (1.0, 2.0, 3.0, 4.0, 5.0)])
    def test_bad_dimensions(self, coord):
        with pytest.raises(DimensionError):
            voronoi(coord)

    def test_non_finite_coordinate(self):
        out = voronoi((math.nan, 0.5))
        assert out.distance == 0.0
        assert out.position == (0.0, 0.0)
        assert out.is_finite


class TestReferenceScenarios:

    def test_3d_f1_against_brute_force(self, brute_force_f1):
        p = (0.3, 0.3, 0.3)
        out = voronoi(p, scale=1.0, detail=0.0, roughness=0.5, metric=VoronoiMetric.EUCLIDEAN,
                      feature=VoronoiFeature.F1, randomness=1.0)
        distance, _ = brute_force_f1(p)
        assert out.distance == pytest.approx(distance, abs=1e-5)

    def test_zero_randomness_points_on_lattice(self, points_2d):
        for p in points_2d:
            position = voronoi(p, scale=1.0, randomness=0.0).position
            assert all(c == math.floor(c) for c in position)


def fold_smooth_f1(params, coord, seed_first=True):
    """Smooth F1 distance folded by hand over the 5^D neighborhood."""
    cell = tuple(math.floor(c) for c in coord)
    local = tuple(c - f for c, f in zip(coord, cell))
    running = 0.0
    for index, offset in enumerate(NEIGHBOR_OFFSETS[len(coord), 2]):
        d = voronoi_distance(feature_point(cell, offset, params.randomness), local, params)
        if seed_first and index == 0:
            h = 1.0
        else:
            h = smoothstep(0.0, 1.0, 0.5 + 0.5 * (running - d) / params.smoothness)
        running = lerp(running, d, h) - params.smoothness * h * (1.0 - h)
    return running


class TestOrdering:

    def test_f2_tie_keeps_first_seen(self):
        """
        Given: randomness 0 and a query at the centre of a cell
        When: F2 is evaluated with all four corners equally distant
        Then: (0, 0) wins F1 and (1, 0), the next corner visited, keeps F2
        """
        params = VoronoiParams.from_inputs(scale=1.0, randomness=0.0)
        assert voronoi_f1(params, (0.5, 0.5)).position == (0.0, 0.0)
        out = voronoi_f2(params, (0.5, 0.5))
        assert out.position == (1.0, 0.0)
        assert out.distance == pytest.approx(math.sqrt(0.5))
        assert out.color == cell_color((1, 0))

    def test_smooth_f1_matches_hand_fold(self, points_2d):
        params = VoronoiParams.from_inputs(scale=1.0, smoothness=1.0)
        for p in points_2d[:8]:
            assert voronoi_smooth_f1(params, p).distance == pytest.approx(
                fold_smooth_f1(params, p), abs=1e-12)

    def test_smooth_f1_first_candidate_seeds(self):
        """
        Given: randomness 0 where every candidate is at least `smoothness` away
        When: the fold starts from 0 instead of taking the first candidate
        Then: no candidate is ever blended in and the result stays 0
        """
        params = VoronoiParams.from_inputs(scale=1.0, smoothness=1.0, randomness=0.0)
        seeded = voronoi_smooth_f1(params, CORNER_POINT).distance
        assert seeded == pytest.approx(fold_smooth_f1(params, CORNER_POINT), abs=1e-12)
        assert fold_smooth_f1(params, CORNER_POINT, seed_first=False) == 0.0
        assert 0.3 < seeded <= 0.5


class TestOverflow:

    @pytest.mark.parametrize("feature", [VoronoiFeature.F1, VoronoiFeature.F2,
                                         VoronoiFeature.SMOOTH_F1, VoronoiFeature.DISTANCE_TO_EDGE])
    def test_octave_overflow_stops_composition(self, feature):
        """
        Given: a finite coordinate that overflows once multiplied by lacunarity
        When: a two octave texture is evaluated
        Then: only the finite octave contributes and the result stays finite
        """
        p = (1e308, 0.25)
        fractal = voronoi(p, scale=1.0, detail=1.0, feature=feature)
        single = voronoi(p, scale=1.0, detail=0.0, feature=feature)
        assert fractal.is_finite
        assert fractal.distance == pytest.approx(single.distance)

    def test_nan_from_zero_times_inf_lacunarity(self):
        out = voronoi((0.0, 0.5), scale=1.0, detail=2.0, lacunarity=math.inf, normalize=True)
        assert out.is_finite
