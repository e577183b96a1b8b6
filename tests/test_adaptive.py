"""Tests for adaptive construction of Chebyshev series."""

import dataclasses
import math
import warnings

import numpy as np
import pytest

from chebexpand import AdaptiveResult, ChebyshevInterpolant, chebyshev_adaptive
from conftest import smooth, square


class TestAdaptive:
    def test_exp_resolved(self):
        result = chebyshev_adaptive(math.exp)
        assert isinstance(result, AdaptiveResult)
        assert result.converged
        assert result.n_samples == 33
        assert result.cutoff is not None
        assert len(result.coefficients) == result.cutoff + 1
        assert abs(result.coefficients[0] - 1.2660658777520082) < 1e-14

    def test_interpolant_accuracy(self):
        result = chebyshev_adaptive(smooth)
        p = result.interpolant()
        assert isinstance(p, ChebyshevInterpolant)
        for x in [-0.9, -0.2, 0.35, 0.77]:
            assert abs(p(x) - smooth(x)) < 1e-12

    def test_polynomial(self):
        result = chebyshev_adaptive(square)
        assert result.converged
        np.testing.assert_allclose(result.coefficients[:3], [0.5, 0.0, 0.5], atol=1e-14)
        assert abs(result.interpolant()(0.5) - 0.25) < 1e-13

    def test_min_n_rounds_up(self):
        result = chebyshev_adaptive(math.exp, min_n=40)
        assert result.n_samples == 65
        assert result.converged

    def test_not_resolved_warns(self):
        with pytest.warns(UserWarning, match="not resolved"):
            result = chebyshev_adaptive(abs, max_n=65)
        assert not result.converged
        assert result.cutoff is None
        assert result.n_samples == 65
        assert len(result.coefficients) == 65

    def test_no_warning_when_resolved(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            chebyshev_adaptive(math.cos)

    def test_verbose(self, capsys):
        chebyshev_adaptive(math.exp, verbose=True)
        out = capsys.readouterr().out
        assert "Sampling on 17 Chebyshev points" in out
        assert "Resolved with" in out

    def test_silent_by_default(self, capsys):
        chebyshev_adaptive(math.exp)
        assert capsys.readouterr().out == ""

    def test_result_is_immutable(self):
        result = chebyshev_adaptive(math.exp)
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.converged = False
        with pytest.raises(ValueError):
            result.coefficients[0] = 0.0

    def test_result_does_not_alias_input(self):
        coeffs = np.array([1.0, 0.5, 0.25])
        result = AdaptiveResult(coeffs, n_samples=17, cutoff=2, converged=True)
        coeffs[0] = 9.0
        assert result.coefficients[0] == 1.0

    def test_build_time_recorded(self):
        assert chebyshev_adaptive(math.exp).build_time >= 0.0

    def test_user_error_propagates(self):
        def f(x):
            raise ZeroDivisionError("bad sample")

        with pytest.raises(ZeroDivisionError, match="bad sample"):
            chebyshev_adaptive(f)

    def test_invalid_min_n(self):
        with pytest.raises(ValueError, match="min_n"):
            chebyshev_adaptive(math.exp, min_n=1)

    def test_invalid_max_n(self):
        with pytest.raises(ValueError, match="max_n"):
            chebyshev_adaptive(math.exp, min_n=33, max_n=17)
