"""Forward and inverse Chebyshev transforms on the Chebyshev-Lobatto grid.

Both directions go through the complex FFT of ``scipy.fft`` with an
*unscaled* convention in each direction:

- forward: ``scipy.fft.fft(x)`` (``norm="backward"``, no 1/N factor)
- inverse: ``scipy.fft.ifft(x, norm="forward")`` (no 1/N factor)

Samples ``f(x_i)`` at ``x_i = cos(i*pi/(n-1))`` are values of the even,
2(n-1)-periodic sequence ``g(theta_i) = f(cos(theta_i))``. Reflecting the
samples therefore turns the Chebyshev expansion into a cosine series
whose coefficients fall out of one FFT of length 2(n-1).

References
----------
- Trefethen (2000), "Spectral Methods in MATLAB", SIAM, Chapter 8.
"""

from __future__ import annotations

import numpy as np
from scipy import fft


def _check_length(n: int, what: str) -> None:
    if n <= 1:
        raise ValueError(f"{what} length must exceed 1, got {n}")


def chebyshev_coefficients(samples) -> np.ndarray:
    """Convert samples on the Chebyshev-Lobatto grid to Chebyshev coefficients.

    Parameters
    ----------
    samples : array_like of shape (n,)
        Function values at ``chebyshev_points(n)``, in grid order
        (descending nodes). ``n`` must be >= 2.

    Returns
    -------
    ndarray of shape (n,)
        Coefficients ``c_0..c_{n-1}`` such that
        ``f(x) ~ sum_k c_k T_k(x)``. Real (float64) for real input,
        complex otherwise.

    Examples
    --------
    >>> np.round(chebyshev_coefficients([1.0, 0.5, 0.0, 0.5, 1.0]), 12) + 0.0
    array([0.5, 0. , 0.5, 0. , 0. ])
    """
    samples = np.asarray(samples)
    if samples.ndim != 1:
        raise ValueError(f"samples must be 1-D, got shape {samples.shape}")
    n = samples.shape[0]
    _check_length(n, "samples")

    # Even extension: interior points mirrored, endpoints are fixed points
    reflected = np.concatenate([samples, samples[-2:0:-1]])
    coeffs = fft.fft(reflected)[:n] / (n - 1)

    # Endpoint terms were not duplicated by the reflection
    coeffs[0] /= 2
    coeffs[n - 1] /= 2

    if not np.iscomplexobj(samples):
        return coeffs.real.copy()
    return coeffs


def samples_from_coefficients(coefficients) -> np.ndarray:
    """Convert Chebyshev coefficients back to samples on the Chebyshev-Lobatto grid.

    Inverse of :func:`chebyshev_coefficients`.

    Parameters
    ----------
    coefficients : array_like of shape (n,)
        Chebyshev coefficients ``c_0..c_{n-1}`` (real or complex),
        ``n >= 2``.

    Returns
    -------
    ndarray of shape (n,)
        Real parts of ``sum_k c_k T_k(x_i)`` at ``chebyshev_points(n)``.
    """
    coefficients = np.asarray(coefficients)
    if coefficients.ndim != 1:
        raise ValueError(
            f"coefficients must be 1-D, got shape {coefficients.shape}"
        )
    n = coefficients.shape[0]
    _check_length(n, "coefficients")

    padded = np.zeros(2 * (n - 1), dtype=np.complex128)
    padded[:n] = coefficients
    values = fft.ifft(padded, norm="forward")[:n]
    return values.real.copy()
