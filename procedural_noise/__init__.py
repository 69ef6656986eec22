# procedural_noise
# Deterministic hash, gradient and cellular noise evaluators.
#
# Every function is pure: same coordinate and parameters, same result, on
# any thread, in any process.

from .errors import DimensionError, ProceduralNoiseError, UnknownEvaluatorError
from .logger import get_logger, setup_logger
from .hash import (
    hash_float_to_float,
    hash_float_to_vec3,
    hash_int_to_vec,
    hash_pcg,
    hash_pcg_signed,
    hash_uint,
    hash_uint_to_float,
    hash_vec2_to_float,
    hash_vec2_to_vec3,
    hash_vec3_to_float,
    hash_vec3_to_vec3,
    hash_vec4_to_float,
    hash_vec4_to_vec3,
    hash_vector_to_float,
    hash_vector_to_vec3,
)
from .noise import fractal_noise, gradient_noise, noise_texture, signed_gradient_noise
from .registry import available_evaluators, get_evaluator
from .types import NoiseOutput, VoronoiFeature, VoronoiMetric, VoronoiOutput, VoronoiParams
from .voronoi import voronoi
from .white_noise import white_noise

__version__ = "0.1.0"

__all__ = [
    'DimensionError',
    'ProceduralNoiseError',
    'UnknownEvaluatorError',
    'get_logger',
    'setup_logger',
    'hash_float_to_float',
    'hash_float_to_vec3',
    'hash_int_to_vec',
    'hash_pcg',
    'hash_pcg_signed',
    'hash_uint',
    'hash_uint_to_float',
    'hash_vec2_to_float',
    'hash_vec2_to_vec3',
    'hash_vec3_to_float',
    'hash_vec3_to_vec3',
    'hash_vec4_to_float',
    'hash_vec4_to_vec3',
    'hash_vector_to_float',
    'hash_vector_to_vec3',
    'fractal_noise',
    'gradient_noise',
    'noise_texture',
    'signed_gradient_noise',
    'available_evaluators',
    'get_evaluator',
    'NoiseOutput',
    'VoronoiFeature',
    'VoronoiMetric',
    'VoronoiOutput',
    'VoronoiParams',
    'voronoi',
    'white_noise',
]
