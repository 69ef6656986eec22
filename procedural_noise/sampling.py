"""
Grid sampling for procedural_noise.

Evaluates any registered evaluator at the pixel centres of a regular 2D
grid and returns the samples as a numpy array. Handy for previews, tests
and baking small lookup textures on the CPU.

Usage:
    from procedural_noise.sampling import sample_grid

    # 256x256 fractal noise over the unit square
    heights = sample_grid('fractal_noise', 256, 256, detail=4.0)

    # Voronoi cell colors of a 3D slice at z=0.5, shape (64, 64, 3)
    cells = sample_grid('voronoi', 64, 64, z=0.5, output='color', scale=8.0)
"""

import logging
from typing import Callable, Optional, Tuple, Union

import numpy as np

from .registry import get_evaluator, get_outputs

logger = logging.getLogger(__name__)


def _extract(result, output: Optional[str]):
    if isinstance(result, (int, float)):
        return float(result)
    return getattr(result, output)


def sample_grid(evaluator: Union[str, Callable], width: int, height: int, *,
                output: Optional[str] = None, z: Optional[float] = None,
                w: Optional[float] = None, extent: Tuple[float, float] = (1.0, 1.0),
                **params) -> np.ndarray:
    """
    Sample an evaluator on a width x height grid.

    Args:
        evaluator: Registry name or a callable taking a coordinate
        width: Number of samples along x
        height: Number of samples along y
        output: Result field to keep for record outputs (default: the
            evaluator's first output)
        z: Optional third coordinate component
        w: Optional fourth coordinate component (appended after z)
        extent: Size of the sampled domain along x and y
        **params: Forwarded to the evaluator

    Returns:
        numpy.ndarray of shape (height, width) for scalar outputs, or
        (height, width, k) for k-component outputs.
    """
    if isinstance(evaluator, str):
        if output is None:
            output = get_outputs(evaluator)[0]
        func = get_evaluator(evaluator)
    else:
        func = evaluator

    if width <= 0 or height <= 0:
        raise ValueError(f"Grid size must be positive, got {width}x{height}")

    tail = tuple(c for c in (z, w) if c is not None)
    xs = (np.arange(width) + 0.5) / width * extent[0]
    ys = (np.arange(height) + 0.5) / height * extent[1]

    rows = []
    for y in ys:
        rows.append([_extract(func((float(x), float(y)) + tail, **params), output) for x in xs])

    result = np.asarray(rows, dtype=np.float64)
    logger.debug(f"Sampled {evaluator} on {width}x{height} grid -> {result.shape}")
    return result
