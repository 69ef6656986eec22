"""
Evaluator Registry

Maps the evaluator names used by host texture nodes to the pure functions
that implement them, together with the outputs each one produces.
"""

from typing import Callable, Dict, List, Tuple

from .errors import UnknownEvaluatorError
from .noise import fractal_noise, gradient_noise, noise_texture, signed_gradient_noise
from .voronoi import voronoi
from .white_noise import white_noise

# =============================================================================
# EVALUATORS
# =============================================================================

EVALUATORS: Dict[str, Dict] = {
    'noise': {
        'func': gradient_noise,
        'outputs': ('value',),
    },
    'signed_noise': {
        'func': signed_gradient_noise,
        'outputs': ('value',),
    },
    'fractal_noise': {
        'func': fractal_noise,
        'outputs': ('value',),
    },
    'noise_texture': {
        'func': noise_texture,
        'outputs': ('value', 'color'),
    },
    'white_noise': {
        'func': white_noise,
        'outputs': ('value', 'color'),
    },
    'voronoi': {
        'func': voronoi,
        'outputs': ('distance', 'color', 'position', 'radius'),
    },
}


def _entry(name: str) -> Dict:
    try:
        return EVALUATORS[name]
    except KeyError:
        raise UnknownEvaluatorError(
            f"Unknown evaluator '{name}', expected one of {available_evaluators()}",
            name=name) from None


def get_evaluator(name: str) -> Callable:
    """Get the evaluation function registered under `name`."""
    return _entry(name)['func']


def get_outputs(name: str) -> Tuple[str, ...]:
    """Get the output names of an evaluator, the first one being the default."""
    return _entry(name)['outputs']


def available_evaluators() -> List[str]:
    return sorted(EVALUATORS)
