"""
Tests for the fit calculator.

Covers best_fit, least_squares, mean and the fit() pipeline: backend
selection, degenerate input and the solution wrapper.
"""

import numpy as np
import pytest

from pybestfit.core.compute.tolerances import AGREEMENT
from pybestfit.core.exceptions import DegenerateInputError, NumericalError, ValidationError
from pybestfit.regression import (
    LineSolution,
    PointDesign,
    best_fit,
    fit,
    fit_source,
    least_squares,
    mean,
)
from pybestfit.sources import ArgumentPairsSource, DelimitedFileSource


# ═══════════════════════════════════════════════════════════════════════
# Known answers
# ═══════════════════════════════════════════════════════════════════════


class TestKnownAnswers:

    def test_collinear_best_fit_exact(self, collinear_points):
        b, m = best_fit(collinear_points)
        assert m == 2.0
        assert b == 0.0

    def test_collinear_least_squares_exact(self, collinear_points):
        a, b = least_squares(collinear_points)
        assert b == 2.0
        assert a == 0.0

    def test_reference_least_squares(self, reference_points):
        a, b = least_squares(reference_points)
        assert a == pytest.approx(484979 / 7445, rel=1e-12)
        assert b == pytest.approx(2868 / 7445, rel=1e-12)
        assert f"{a:.6f}" == "65.141572"
        assert f"{b:.6f}" == "0.385225"

    def test_reference_best_fit(self, reference_points):
        b, m = best_fit(reference_points)
        assert b == pytest.approx(484979 / 7445, rel=1e-12)
        assert m == pytest.approx(2868 / 7445, rel=1e-12)

    def test_two_points(self):
        b, m = best_fit([(0.0, 1.0), (2.0, 5.0)])
        assert m == pytest.approx(2.0)
        assert b == pytest.approx(1.0)

    def test_negative_slope(self):
        b, m = best_fit([(-1, 3), (0, 2), (1, 1)])
        assert m == pytest.approx(-1.0)
        assert b == pytest.approx(2.0)

    def test_recovers_noisy_line(self, noisy_line):
        x, y = noisy_line
        b, m = best_fit(PointDesign.from_arrays(x, y))
        assert m == pytest.approx(-0.5, abs=0.01)
        assert b == pytest.approx(3.0, abs=0.05)

    def test_matches_numpy_polyfit(self, noisy_line):
        x, y = noisy_line
        slope, intercept = np.polyfit(x, y, 1)
        b, m = best_fit(PointDesign.from_arrays(x, y))
        assert m == pytest.approx(slope, rel=1e-9)
        assert b == pytest.approx(intercept, rel=1e-9)


# ═══════════════════════════════════════════════════════════════════════
# Agreement between parameterizations
# ═══════════════════════════════════════════════════════════════════════


class TestAgreement:

    @pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
    def test_best_fit_matches_least_squares(self, seed):
        rng = np.random.default_rng(seed)
        x = rng.uniform(-50, 50, 30)
        y = rng.normal(size=30) * 10 + 4 * x
        design = PointDesign.from_arrays(x, y)
        b, m = best_fit(design)
        a, slope = least_squares(design)
        assert AGREEMENT.close(m, slope)
        assert AGREEMENT.close(b, a)

    def test_duplicates_allowed(self):
        b, m = best_fit([(1, 1), (1, 1), (2, 2), (3, 3)])
        assert m == pytest.approx(1.0)
        assert b == pytest.approx(0.0, abs=1e-12)


# ═══════════════════════════════════════════════════════════════════════
# mean
# ═══════════════════════════════════════════════════════════════════════


class TestMean:

    def test_mean_of_x(self):
        assert mean([(1, 0), (2, 0), (3, 0)]) == 2.0

    def test_mean_ignores_y(self):
        assert mean([(1, 100), (3, -100)]) == 2.0

    def test_single_point(self):
        assert mean([(7.5, 1.0)]) == 7.5

    def test_empty_is_degenerate(self):
        with pytest.raises(DegenerateInputError, match="empty dataset"):
            mean([])


# ═══════════════════════════════════════════════════════════════════════
# Degenerate input
# ═══════════════════════════════════════════════════════════════════════


class TestDegenerate:

    @pytest.mark.parametrize("func", [best_fit, least_squares])
    def test_constant_x(self, func, constant_x_points):
        with pytest.raises(DegenerateInputError, match="zero x-variance") as exc_info:
            func(constant_x_points)
        assert exc_info.value.n == 3

    @pytest.mark.parametrize("func", [best_fit, least_squares])
    def test_empty(self, func):
        with pytest.raises(DegenerateInputError, match="empty dataset"):
            func([])

    def test_single_point_is_degenerate(self):
        with pytest.raises(DegenerateInputError):
            fit([(1.0, 2.0)])

    def test_repeated_fraction_x(self):
        with pytest.raises(DegenerateInputError):
            fit([(0.1, 1.0), (0.1, 2.0), (0.1, 3.0)])

    def test_never_returns_nan(self, constant_x_points):
        with pytest.raises(DegenerateInputError):
            fit(constant_x_points, method='least_squares')

    @pytest.mark.parametrize("method", ['best_fit', 'least_squares'])
    def test_overflowing_sums_rejected(self, method):
        with pytest.raises(NumericalError, match="fit overflowed"):
            fit([(0, 1e308), (1, 1e308), (2, 1e308)], method=method)

    def test_overflowing_tuple_api_rejected(self):
        with pytest.raises(NumericalError):
            best_fit([(0, 1e308), (1, 1e308), (2, 1e308)])
        with pytest.raises(NumericalError):
            least_squares([(0, 1e308), (1, 1e308), (2, 1e308)])

    def test_mean_overflow_rejected(self):
        with pytest.raises(NumericalError, match="mean_x"):
            mean([(1e308, 0.0), (1e308, 0.0)])

    def test_non_numeric_rejected(self):
        with pytest.raises(ValidationError):
            fit([("a", 1.0), ("b", 2.0)])


# ═══════════════════════════════════════════════════════════════════════
# fit() and LineSolution
# ═══════════════════════════════════════════════════════════════════════


class TestFitPipeline:

    def test_returns_solution(self, collinear_points):
        result = fit(collinear_points)
        assert isinstance(result, LineSolution)
        assert result.slope == 2.0
        assert result.intercept == 0.0
        assert result.mean_x == 2.0
        assert result.n == 3

    @pytest.mark.parametrize("method, backend", [
        ('best_fit', 'cpu_best_fit'),
        ('least_squares', 'cpu_least_squares'),
    ])
    def test_backend_selection(self, collinear_points, method, backend):
        result = fit(collinear_points, method=method)
        assert result.backend_name == backend
        assert result.info['method'] == method
        assert result.info['n'] == 3

    def test_unknown_method(self, collinear_points):
        with pytest.raises(ValueError, match="Unknown method"):
            fit(collinear_points, method='lasso')

    def test_timing_recorded(self, collinear_points):
        timing = fit(collinear_points).timing
        assert timing['total_seconds'] >= 0.0
        assert 'sums' in timing
        assert 'solve' in timing

    def test_predict(self, collinear_points):
        result = fit(collinear_points)
        assert result.predict(10.0) == 20.0
        assert result.y_at_mean == 4.0

    def test_y_at_mean_is_mean_y(self, reference_points):
        result = fit(reference_points)
        assert result.y_at_mean == pytest.approx(486 / 6, rel=1e-12)

    def test_no_warnings(self, collinear_points):
        assert fit(collinear_points).warnings == ()

    def test_report(self, collinear_points):
        assert fit(collinear_points).report() == (
            "Best fit (OLS):\n"
            "b=0.000000\n"
            "m=2.000000\n"
            "\n"
            "y=4.000000 at x=x̄=2.000000"
        )

    def test_report_is_fixed_point(self):
        result = fit([(0.0, 1e-9), (1.0, 2e-9)])
        assert "e-" not in result.report()
        assert "m=0.000000" in result.report()

    def test_summary(self, reference_points):
        text = fit(reference_points).summary()
        assert "Points: 6" in text
        assert "Backend: cpu_best_fit" in text
        assert "247.000000" in text

    def test_repr(self, collinear_points):
        assert repr(fit(collinear_points)) == "LineSolution(n=3, intercept=0, slope=2)"


# ═══════════════════════════════════════════════════════════════════════
# fit_source()
# ═══════════════════════════════════════════════════════════════════════


class TestFitSource:

    def test_carries_source_warnings(self):
        result = fit_source(ArgumentPairsSource(["1", "2", "2", "4", "3", "6", "7"]))
        assert result.slope == 2.0
        assert result.has_warning("Ignoring last param")
        assert result.info['source'] == 'arguments'

    def test_file_source(self, tmp_path):
        path = tmp_path / "data.txt"
        path.write_text("2 1\n4 2\n6 3\n")
        result = fit_source(DelimitedFileSource(path, swap=True), method='least_squares')
        assert result.slope == 2.0
        assert result.intercept == 0.0
        assert result.warnings == ()
        assert result.info['source'] == str(path)
