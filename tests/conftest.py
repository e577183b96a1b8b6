"""Shared test fixtures for chebexpand tests."""

import math

import numpy as np
import pytest

from chebexpand import ChebyshevInterpolant, chebyshev_coefficients, sample_at_chebyshev_points


# ---------------------------------------------------------------------------
# Test functions
# ---------------------------------------------------------------------------

def square(x):
    """x^2 = (T_0 + T_2) / 2"""
    return x * x


def cubic(x):
    """4x^3 - 3x = T_3"""
    return 4.0 * x**3 - 3.0 * x


def runge(x):
    """1 / (1 + 25 x^2), analytic but slowly converging."""
    return 1.0 / (1.0 + 25.0 * x * x)


def smooth(x):
    """exp(x) * sin(5x)"""
    return math.exp(x) * math.sin(5.0 * x)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def rng():
    return np.random.default_rng(20240611)


@pytest.fixture
def interp_square():
    """5-point interpolant of x^2."""
    return ChebyshevInterpolant.from_function(square, 5)


@pytest.fixture
def interp_smooth():
    """41-point interpolant of exp(x) sin(5x)."""
    return ChebyshevInterpolant.from_function(smooth, 41)


@pytest.fixture
def exp_coeffs_33():
    """Chebyshev coefficients of exp(x) from 33 samples."""
    return chebyshev_coefficients(sample_at_chebyshev_points(math.exp, 33))
