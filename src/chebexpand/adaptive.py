"""Adaptive construction of a Chebyshev series.

Samples a function on successively finer Chebyshev-Lobatto grids
(17, 33, 65, ... points) until :func:`~chebexpand.chop.coefficient_cutoff`
detects that the coefficients have reached the noise floor, then keeps
only the significant coefficients.

References
----------
- Aurentz & Trefethen (2017), "Chopping a Chebyshev series",
  ACM Transactions on Mathematical Software 43(4):33
- Driscoll, Hale & Trefethen (2014), "Chebfun Guide", Chapter 1.
"""

from __future__ import annotations

import time
import warnings
from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np

from chebexpand.barycentric import ChebyshevInterpolant
from chebexpand.chop import DEFAULT_TOL, MIN_CHOP_LENGTH, coefficient_cutoff
from chebexpand.points import sample_at_chebyshev_points
from chebexpand.transforms import chebyshev_coefficients


@dataclass(frozen=True)
class AdaptiveResult:
    """Outcome of :func:`chebyshev_adaptive`. Immutable, including ``coefficients``."""

    coefficients: np.ndarray
    n_samples: int
    cutoff: Optional[int]
    converged: bool
    build_time: float = 0.0

    def __post_init__(self):
        coeffs = np.array(self.coefficients)
        coeffs.flags.writeable = False
        object.__setattr__(self, "coefficients", coeffs)

    def interpolant(self) -> ChebyshevInterpolant:
        """Interpolant of the (truncated) series on a grid of matching size."""
        coeffs = self.coefficients
        if len(coeffs) < 2:
            coeffs = np.concatenate([coeffs, np.zeros(2 - len(coeffs))])
        return ChebyshevInterpolant.from_coefficients(coeffs)


def _grid_sizes(min_n: int, max_n: int):
    """Yield 2^k + 1 grid sizes from the first one >= min_n, capped at max_n."""
    n = MIN_CHOP_LENGTH
    while n < min_n:
        n = 2 * n - 1
    while n < max_n:
        yield n
        n = 2 * n - 1
    yield max_n


def chebyshev_adaptive(
    f: Callable[[float], float],
    tol: float = DEFAULT_TOL,
    min_n: int = MIN_CHOP_LENGTH,
    max_n: int = 65537,
    verbose: bool = False,
) -> AdaptiveResult:
    """Resolve *f* on [-1, 1] to relative accuracy *tol*.

    Parameters
    ----------
    f : callable
        Scalar function ``f(x) -> float``.
    tol : float, optional
        Relative tolerance for chopping. Default is 1e-15.
    min_n : int, optional
        Smallest grid size to try. Default is 17.
    max_n : int, optional
        Largest grid size to try. Default is 65537.
    verbose : bool, optional
        If True, print progress. Default is False.

    Returns
    -------
    AdaptiveResult
        Truncated coefficients and construction details.

    Warns
    -----
    UserWarning
        If no cutoff was found on any grid up to ``max_n`` points; the
        untruncated coefficients of the last grid are returned.
    """
    if min_n < 2:
        raise ValueError(f"min_n must be >= 2, got {min_n}")
    if max_n < min_n:
        raise ValueError(f"max_n must be >= min_n, got max_n={max_n}, min_n={min_n}")

    start = time.time()
    coeffs = None
    n = min_n
    for n in _grid_sizes(min_n, max_n):
        if verbose:
            print(f"Sampling on {n} Chebyshev points...")
        coeffs = chebyshev_coefficients(sample_at_chebyshev_points(f, n))
        cutoff = coefficient_cutoff(coeffs, tol)
        if cutoff is not None:
            build_time = time.time() - start
            if verbose:
                print(f"  Resolved with {cutoff + 1} coefficients "
                      f"in {build_time:.3f}s")
            return AdaptiveResult(
                coefficients=coeffs[:cutoff + 1].copy(),
                n_samples=n,
                cutoff=cutoff,
                converged=True,
                build_time=build_time,
            )

    warnings.warn(
        f"Function not resolved to tol={tol:g} with {n} points; "
        f"returning all {n} coefficients.",
        UserWarning,
        stacklevel=2,
    )
    return AdaptiveResult(
        coefficients=coeffs,
        n_samples=n,
        cutoff=None,
        converged=False,
        build_time=time.time() - start,
    )
