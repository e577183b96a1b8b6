"""Coefficient chopping: where does a Chebyshev series reach the noise floor?

Implements the "standard chop" heuristic of Aurentz & Trefethen. Given a
coefficient sequence and a relative tolerance, the magnitudes are turned
into a monotone envelope, a plateau (the level where decay stops) is
located, and the cutoff is placed at the point that minimises the
envelope tilted by a linear ramp. The constants 1.25, 5, 3, 7/6 and 1/3
are those of the published algorithm.

References
----------
- Aurentz & Trefethen (2017), "Chopping a Chebyshev series",
  ACM Transactions on Mathematical Software 43(4):33
"""

from __future__ import annotations

import math
from typing import Optional

import numpy as np

DEFAULT_TOL = 1e-15
MIN_CHOP_LENGTH = 17


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _envelope(coefficients: np.ndarray, max_abs: float) -> np.ndarray:
    """Running maximum of |c| taken from the right, normalised by ``max_abs``."""
    magnitudes = np.abs(coefficients)
    return np.maximum.accumulate(magnitudes[::-1])[::-1] / max_abs


def coefficient_cutoff(coefficients, tol: float = DEFAULT_TOL) -> Optional[int]:
    """Index of the last significant coefficient of a Chebyshev series.

    Parameters
    ----------
    coefficients : array_like of shape (n,)
        Chebyshev coefficients (real or complex).
    tol : float, optional
        Relative tolerance, ``tol > 0``. Default is 1e-15.

    Returns
    -------
    int or None
        Cutoff index in ``[0, n-1]``. ``0`` when nothing is significant
        (``tol >= 1`` or an all-zero series). ``None`` when no reliable
        cutoff can be determined: fewer than 17 coefficients, or no
        plateau in the decay.

    Raises
    ------
    ValueError
        If ``tol <= 0``.

    Examples
    --------
    >>> coefficient_cutoff(np.zeros(20))
    0
    >>> coefficient_cutoff(np.ones(10)) is None
    True
    """
    if tol <= 0:
        raise ValueError(f"tol must be positive, got {tol}")
    if tol >= 1:
        return 0

    coefficients = np.asarray(coefficients)
    n = coefficients.shape[0]
    if n < MIN_CHOP_LENGTH:
        return None

    max_abs = float(np.max(np.abs(coefficients)))
    if max_abs == 0.0:
        return 0

    envelope = _envelope(coefficients, max_abs)
    log_tol = math.log(tol)

    # Plateau scan
    plateau_idx = None
    j2 = 0
    for j1 in range(1, n):
        j2 = _round_half_up(1.25 * j1 + 5)
        if j2 >= n:
            return None
        e1 = envelope[j1]
        e2 = envelope[j2]
        if e1 == 0.0:
            plateau_idx = j1 - 1
            break
        r = 3.0 * (1.0 - math.log(e1) / log_tol)
        if r < e2 / e1:
            plateau_idx = j1 - 1
            break
    if plateau_idx is None:
        return None

    if envelope[plateau_idx] == 0.0:
        return plateau_idx

    floor_level = tol ** (7.0 / 6.0)
    j3 = int(np.count_nonzero(envelope >= floor_level))
    if j3 < j2:
        j2 = j3 + 1
        envelope[j2] = floor_level

    ramp = np.arange(j2 + 1) * (-1.0 / 3.0) * math.log10(tol) / j2
    with np.errstate(divide="ignore"):
        cc = np.log10(envelope[:j2 + 1]) + ramp
    idx = int(np.argmin(cc))
    return max(idx - 1, 1)


def chop_coefficients(coefficients, tol: float = DEFAULT_TOL) -> np.ndarray:
    """Truncate a Chebyshev series after its cutoff index.

    Parameters
    ----------
    coefficients : array_like of shape (n,)
        Chebyshev coefficients.
    tol : float, optional
        Relative tolerance passed to :func:`coefficient_cutoff`.

    Returns
    -------
    ndarray
        ``coefficients[:cutoff + 1]``, or a copy of the full sequence when
        no cutoff is found.
    """
    coefficients = np.asarray(coefficients)
    cutoff = coefficient_cutoff(coefficients, tol)
    if cutoff is None:
        return coefficients.copy()
    return coefficients[:cutoff + 1].copy()
