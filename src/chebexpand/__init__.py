"""chebexpand: Chebyshev expansions of functions on [-1, 1].

Provides the Chebyshev-Lobatto grid, sampling, the FFT-based forward and
inverse Chebyshev transforms, barycentric evaluation of the interpolant
through the :class:`ChebyshevInterpolant` class, and the Aurentz-Trefethen
coefficient chopping heuristic used to truncate a series at its noise
floor.

Example
-------
>>> from chebexpand import (chebyshev_coefficients, chebyshev_points,
...                         sample_at_chebyshev_points)
>>> samples = sample_at_chebyshev_points(lambda x: x**2, 5)
>>> [round(float(c), 12) + 0.0 for c in chebyshev_coefficients(samples)]
[0.5, 0.0, 0.5, 0.0, 0.0]
"""

from chebexpand._version import __version__
from chebexpand.adaptive import AdaptiveResult, chebyshev_adaptive
from chebexpand.barycentric import (
    ChebyshevInterpolant,
    barycentric_interpolate,
    build_interpolant,
    salzer_weights,
)
from chebexpand.chop import chop_coefficients, coefficient_cutoff
from chebexpand.points import chebyshev_points, sample_at_chebyshev_points
from chebexpand.transforms import chebyshev_coefficients, samples_from_coefficients

__all__ = [
    "AdaptiveResult",
    "ChebyshevInterpolant",
    "barycentric_interpolate",
    "build_interpolant",
    "chebyshev_adaptive",
    "chebyshev_coefficients",
    "chebyshev_points",
    "chop_coefficients",
    "coefficient_cutoff",
    "salzer_weights",
    "sample_at_chebyshev_points",
    "samples_from_coefficients",
    "__version__",
]
