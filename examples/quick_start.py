"""Quick start example: expand a function, chop the series, evaluate."""

import math

import numpy as np

from chebexpand import (
    ChebyshevInterpolant,
    chebyshev_adaptive,
    chebyshev_coefficients,
    coefficient_cutoff,
    sample_at_chebyshev_points,
    samples_from_coefficients,
)


def f(x):
    """A smooth function on [-1, 1]: exp(x) * cos(3x)."""
    return math.exp(x) * math.cos(3.0 * x)


# Sample on 33 Chebyshev points and transform
samples = sample_at_chebyshev_points(f, 33)
coeffs = chebyshev_coefficients(samples)
cutoff = coefficient_cutoff(coeffs)
print(f"Cutoff index: {cutoff} ({cutoff + 1} significant coefficients)")

# Round trip back to samples
back = samples_from_coefficients(coeffs)
print(f"Round-trip error: {np.max(np.abs(back - samples)):.2e}")

# Evaluate the interpolant off the grid
p = ChebyshevInterpolant(samples)
x = 0.3
print(f"\nExact:  {f(x):.15f}")
print(f"Approx: {p(x):.15f}")
print(f"Error:  {abs(p(x) - f(x)):.2e}")

# Let the grid size be chosen automatically
result = chebyshev_adaptive(f, verbose=True)
print(f"\nConverged: {result.converged}, {len(result.coefficients)} coefficients "
      f"from {result.n_samples} samples")
