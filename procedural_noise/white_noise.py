# White Noise
# Uncorrelated per-coordinate values straight from the float hash family.

from .hash import hash_vector_to_float, hash_vector_to_vec3
from .types import Coordinate, NoiseOutput, as_coordinate


def white_noise(coord: Coordinate) -> NoiseOutput:
    k = as_coordinate(coord)
    return NoiseOutput(value=hash_vector_to_float(k), color=hash_vector_to_vec3(k))
