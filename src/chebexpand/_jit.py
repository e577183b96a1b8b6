"""Numba JIT-compiled kernel for barycentric interpolation."""

import numpy as np
from numba import njit


@njit(cache=True)
def barycentric_eval_jit(x: float, nodes: np.ndarray, values: np.ndarray,
                         weights: np.ndarray) -> float:
    """Single-pass barycentric evaluation with an exact node-hit check.

    Returns ``values[i]`` when ``x == nodes[i]`` exactly. No tolerance is
    applied, so points a few ulps away from a node go through the formula.

    Parameters
    ----------
    x : float
        Evaluation point.
    nodes : ndarray
        Interpolation nodes.
    values : ndarray
        Function values at nodes.
    weights : ndarray
        Barycentric weights.

    Returns
    -------
    float
        Interpolated value.
    """
    num = 0.0
    den = 0.0
    for i in range(nodes.shape[0]):
        d = x - nodes[i]
        if d == 0.0:
            return values[i]
        t = weights[i] / d
        num += t * values[i]
        den += t
    return num / den
