"""Barycentric interpolation on the Chebyshev-Lobatto grid.

For the points ``x_i = cos(i*pi/(n-1))`` the barycentric weights reduce,
up to a common factor that cancels, to Salzer's weights

    w_i = (-1)^i,  halved for i = 0 and i = n - 1,

and the interpolant through samples ``f_i`` is

    p(x) = sum_i (w_i f_i / (x - x_i)) / sum_i (w_i / (x - x_i)).

The formula is 0/0 exactly at a node, where the stored sample is returned
instead. The test is exact floating-point equality: points extremely
close to a node are evaluated through the formula as usual.

References
----------
- Salzer (1972), "Lagrangian interpolation at the Chebyshev points
  x_{n,v} = cos(v pi/n), v = 0(1)n; some unnoted advantages",
  The Computer Journal 15(2):156-159
- Berrut & Trefethen (2004), "Barycentric Lagrange Interpolation",
  SIAM Review 46(3):501-517
"""

from __future__ import annotations

from typing import Callable

import numpy as np

from chebexpand._jit import barycentric_eval_jit
from chebexpand.points import chebyshev_points, sample_at_chebyshev_points
from chebexpand.transforms import samples_from_coefficients


def salzer_weights(n: int) -> np.ndarray:
    """Barycentric weights for the *n*-point Chebyshev-Lobatto grid.

    Parameters
    ----------
    n : int
        Number of nodes (must be > 1).

    Returns
    -------
    ndarray of shape (n,)
        ``[1/2, -1, 1, -1, ..., (-1)^(n-1) / 2]``.
    """
    if n <= 1:
        raise ValueError(f"grid size must exceed 1, got {n}")
    weights = np.ones(n)
    weights[1::2] = -1.0
    weights[0] *= 0.5
    weights[-1] *= 0.5
    return weights


def barycentric_interpolate(x: float, nodes: np.ndarray, values: np.ndarray,
                            weights: np.ndarray) -> float:
    """Evaluate barycentric interpolation at a single point.

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
        Interpolated value p(x). If ``x`` equals a node exactly, the
        corresponding entry of ``values``.
    """
    return float(barycentric_eval_jit(float(x), nodes, values, weights))


class ChebyshevInterpolant:
    """Polynomial interpolant through samples on the Chebyshev-Lobatto grid.

    Owns read-only copies of its samples, grid and weights. Evaluation is
    O(n) per point via the barycentric formula.

    Parameters
    ----------
    values : array_like of shape (n,)
        Samples at ``chebyshev_points(n)``, in grid order. ``n`` must be
        > 1.

    Examples
    --------
    >>> p = ChebyshevInterpolant.from_function(lambda x: x**2, 5)
    >>> round(p(0.5), 12)
    0.25
    """

    def __init__(self, values):
        values = np.array(values, dtype=np.float64)
        if values.ndim != 1:
            raise ValueError(f"values must be 1-D, got shape {values.shape}")
        if values.size == 0:
            raise ValueError("cannot interpolate an empty sample sequence")

        self.n_nodes: int = values.shape[0]
        self.nodes: np.ndarray = chebyshev_points(self.n_nodes)
        self.weights: np.ndarray = salzer_weights(self.n_nodes)
        self.values: np.ndarray = values
        for arr in (self.nodes, self.weights, self.values):
            arr.flags.writeable = False

    @classmethod
    def from_function(cls, f: Callable[[float], float], n: int) -> "ChebyshevInterpolant":
        """Sample *f* on the *n*-point grid and interpolate."""
        return cls(sample_at_chebyshev_points(f, n))

    @classmethod
    def from_coefficients(cls, coefficients) -> "ChebyshevInterpolant":
        """Interpolant of the Chebyshev series ``sum_k c_k T_k``.

        The series is converted to samples on the grid with as many
        points as there are coefficients.
        """
        return cls(samples_from_coefficients(coefficients))

    def eval(self, x):
        """Evaluate the interpolant.

        Parameters
        ----------
        x : float or array_like
            Evaluation point(s), normally in [-1, 1].

        Returns
        -------
        float or ndarray
            A float for scalar input, otherwise an array of the same shape
            as ``x``.
        """
        x = np.asarray(x, dtype=np.float64)
        if x.ndim == 0:
            return barycentric_interpolate(
                float(x), self.nodes, self.values, self.weights
            )

        flat = x.ravel()
        diff = flat[:, np.newaxis] - self.nodes
        with np.errstate(divide="ignore", invalid="ignore"):
            c = self.weights / diff
            result = (c @ self.values) / c.sum(axis=1)

        # Exact node hits: replace the 0/0 rows by the stored samples
        rows, cols = np.nonzero(diff == 0.0)
        result[rows] = self.values[cols]
        return result.reshape(x.shape)

    __call__ = eval

    def __repr__(self) -> str:
        return f"ChebyshevInterpolant(n_nodes={self.n_nodes})"

    def __str__(self) -> str:
        lines = [
            f"ChebyshevInterpolant ({self.n_nodes} Chebyshev-Lobatto nodes on [-1, 1])",
            f"  Values:  min {self.values.min():.6g}, max {self.values.max():.6g}",
        ]
        return "\n".join(lines)


def build_interpolant(samples) -> ChebyshevInterpolant:
    """Build the barycentric interpolant through *samples*.

    Parameters
    ----------
    samples : array_like of shape (n,)
        Samples at ``chebyshev_points(n)``, ``n > 1``.

    Returns
    -------
    ChebyshevInterpolant
        Callable evaluating the interpolating polynomial.
    """
    return ChebyshevInterpolant(samples)
