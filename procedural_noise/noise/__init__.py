# Gradient Noise Package
# Re-exports the single octave and fractal gradient noise evaluators

from .perlin import gradient_noise, signed_gradient_noise, perlin_noise, noise_grad, NOISE_SCALE
from .fractal import fractal_noise, noise_fbm, noise_texture, random_offset

__all__ = [
    'gradient_noise',
    'signed_gradient_noise',
    'perlin_noise',
    'noise_grad',
    'NOISE_SCALE',
    'fractal_noise',
    'noise_fbm',
    'noise_texture',
    'random_offset',
]
