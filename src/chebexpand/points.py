"""Chebyshev-Lobatto grid generation and function sampling on [-1, 1].

The grid used throughout this package is the set of extrema of the
degree-(n-1) Chebyshev polynomial of the first kind,

    x_i = cos(i * pi / (n - 1)),  i = 0, ..., n - 1,

which includes both endpoints and is ordered from +1 down to -1.

References
----------
- Trefethen (2013), "Approximation Theory and Approximation Practice",
  SIAM, Chapter 2.
"""

from __future__ import annotations

from typing import Callable

import numpy as np


def _check_grid_size(n: int) -> None:
    if not isinstance(n, (int, np.integer)):
        raise TypeError(f"grid size must be an int, got {type(n).__name__}")
    if n <= 1:
        raise ValueError(f"grid size must exceed 1, got {n}")


def chebyshev_points(n: int) -> np.ndarray:
    """Return the *n* Chebyshev-Lobatto points on [-1, 1].

    Parameters
    ----------
    n : int
        Number of points (must be > 1).

    Returns
    -------
    ndarray of shape (n,)
        ``cos(i * pi / (n - 1))`` for ``i = 0..n-1``, strictly decreasing
        from 1 to -1.

    Raises
    ------
    ValueError
        If ``n <= 1``.

    Examples
    --------
    >>> np.round(chebyshev_points(5), 4)
    array([ 1.    ,  0.7071,  0.    , -0.7071, -1.    ])
    """
    _check_grid_size(n)
    return np.cos(np.pi * np.arange(n) / (n - 1))


def sample_at_chebyshev_points(f: Callable[[float], float], n: int) -> np.ndarray:
    """Evaluate *f* at each of the *n* Chebyshev-Lobatto points.

    ``f`` is called once per point, in grid order, with a scalar argument.
    Any exception it raises is propagated unchanged.

    Parameters
    ----------
    f : callable
        Scalar function ``f(x) -> float``.
    n : int
        Number of grid points (must be > 1).

    Returns
    -------
    ndarray of shape (n,)
        ``samples[i] == f(chebyshev_points(n)[i])``.
    """
    if not callable(f):
        raise TypeError(f"f must be callable, got {type(f).__name__}")
    nodes = chebyshev_points(n)
    samples = np.empty(n)
    for i, x in enumerate(nodes):
        samples[i] = f(x)
    return samples
