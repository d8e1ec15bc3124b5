"""Tests for the lmfit fitting backend."""

import numpy as np
import pytest
from lmfit.minimizer import MinimizerResult

from fitfunctions import FitFunction, InvalidArgument, ShapeMismatch, fit, make_fit_function
from fitfunctions.core.fitting import (
    FitFunctionFitter,
    calculate_statistics,
    extract_lmfit_statistics,
    format_statistics,
    lmfit_parameter_names,
)
from tests.conftest import linear


def test_fit_line(line_fit_function):
    ff = line_fit_function
    ff.set_initial_parameters({'slope': 1.0, 'offset': 0.0})
    x = np.linspace(0, 10, 50)

    result = fit(ff, x, 2.0 * x + 1.0)

    assert isinstance(result, MinimizerResult)
    assert ff.get_backend_result() is result
    assert result.success
    fitted = ff.get_fitted_parameters()
    assert list(fitted) == ['slope', 'offset']
    assert fitted['slope'] == pytest.approx(2.0, rel=1e-6)
    assert fitted['offset'] == pytest.approx(1.0, abs=1e-6)
    assert ff.get_initial_parameters() == {'slope': 1.0, 'offset': 0.0}


def test_fit_gaussian_profile():
    ff = make_fit_function('gaussian', (0, 20), amplitude=8.0, center=9.0, sigma=3.0)
    x = np.linspace(0, 20, 201)
    y = 10.0 * np.exp(-(x - 10.0)**2 / (2 * 2.0**2))

    fit(ff, x, y)

    fitted = ff.fitted_parameters
    np.testing.assert_allclose(fitted, [10.0, 10.0, 2.0], rtol=1e-4)


def test_fit_only_uses_points_inside_the_fit_range(line_fit_function):
    ff = line_fit_function
    ff.set_initial_parameters([1.0, 0.0])
    x = np.linspace(0, 20, 81)
    y = np.where(x <= 10, 2.0 * x + 1.0, 100.0)

    fitter = FitFunctionFitter(ff, x, y)
    assert fitter.fit_mask().sum() == 41
    fitter.fit()

    np.testing.assert_allclose(ff.fitted_parameters, [2.0, 1.0], atol=1e-6)


def test_reversed_fit_range_selects_the_same_points(line_fit_function):
    ff = line_fit_function
    ff.set_fit_ranges([(10, 0)])
    x = np.linspace(0, 20, 81)
    assert FitFunctionFitter(ff, x, x).fit_mask().sum() == 41


def test_parameter_bounds_are_passed_to_lmfit(line_fit_function):
    ff = line_fit_function
    ff.set_initial_parameters({'slope': 1.0, 'offset': 0.0})
    ff.set_parameter_bounds([(0, 1.5), (-5, 5)])
    x = np.linspace(0, 10, 50)

    params = FitFunctionFitter(ff, x, x).make_params()
    assert params['p0_slope'].min == 0
    assert params['p0_slope'].max == 1.5
    assert params['p1_offset'].min == -5

    fit(ff, x, 2.0 * x)
    assert ff.get_fitted_parameters()['slope'] <= 1.5


def test_default_bounds_are_unbounded_for_lmfit(line_fit_function):
    ff = line_fit_function
    ff.set_initial_parameters([1.0, 0.0])
    params = FitFunctionFitter(ff, [0.0, 1.0], [0.0, 1.0]).make_params()
    for param in params.values():
        assert param.min == -np.inf
        assert param.max == np.inf


def test_unset_initial_parameters_are_rejected(line_fit_function):
    x = np.linspace(0, 10, 10)
    with pytest.raises(InvalidArgument):
        fit(line_fit_function, x, x)
    assert line_fit_function.get_backend_result() is None
    assert np.all(np.isnan(line_fit_function.fitted_parameters))


def test_empty_fit_window_is_rejected(line_fit_function):
    line_fit_function.set_initial_parameters([1.0, 0.0])
    x = np.linspace(20, 30, 10)
    with pytest.raises(InvalidArgument):
        fit(line_fit_function, x, x)


def test_data_shape_is_checked(line_fit_function):
    with pytest.raises(ShapeMismatch):
        FitFunctionFitter(line_fit_function, np.arange(5), np.arange(4))
    with pytest.raises(ShapeMismatch):
        FitFunctionFitter(line_fit_function, np.arange(5), np.arange(5), weights=np.ones(3))
    with pytest.raises(ShapeMismatch):
        FitFunctionFitter(line_fit_function, np.arange(5), np.ones((5, 2)))


def test_fit_two_dimensional_model():
    def plane(x, par):
        return par[0] * x[0] + par[1] * x[1] + par[2]

    ff = FitFunction(plane, 2, 3)
    ff.set_fit_ranges([(0, 5), (0, 5)])
    ff.set_initial_parameters({'a': 1.0, 'b': 1.0, 'c': 0.0})
    rng = np.random.default_rng(0)
    x = rng.uniform(0, 10, size=(2, 200))
    y = 3.0 * x[0] - 2.0 * x[1] + 0.5
    y[(x[0] > 5) | (x[1] > 5)] = 0.0

    with pytest.raises(ShapeMismatch):
        FitFunctionFitter(ff, x[0], y)

    fit(ff, x, y)
    np.testing.assert_allclose(ff.fitted_parameters, [3.0, -2.0, 0.5], atol=1e-6)


def test_weights_scale_residuals(line_fit_function):
    ff = line_fit_function
    ff.set_initial_parameters([1.0, 0.0])
    x = np.linspace(0, 10, 11)
    y = 2.0 * x
    weights = np.full(x.size, 2.0)

    fitter = FitFunctionFitter(ff, x, y + 1.0, weights=weights)
    ff._set_fitted_parameters([2.0, 0.0])
    stats = fitter.get_statistics()
    assert stats['chi_squared'] == pytest.approx(4.0 * 11)


def test_statistics_and_report(line_fit_function):
    ff = line_fit_function
    ff.set_initial_parameters({'slope': 1.0, 'offset': 0.0})
    rng = np.random.default_rng(1)
    x = np.linspace(0, 10, 100)
    y = 2.0 * x + 1.0 + rng.normal(0, 0.1, x.size)

    fitter = FitFunctionFitter(ff, x, y)
    assert fitter.get_fit_report() == "No fit performed yet."
    fitter.fit()

    stats = fitter.get_statistics()
    assert stats['r_squared'] > 0.99
    assert stats['n_data'] == 100
    assert stats['n_params'] == 2
    assert stats['dof'] == 98

    lmfit_stats = extract_lmfit_statistics(ff.get_backend_result())
    assert lmfit_stats['chi_squared'] == pytest.approx(stats['chi_squared'])
    assert lmfit_stats['dof'] == 98

    assert 'p0_slope' in fitter.get_fit_report()
    assert 'R² =' in format_statistics(stats)

    initial_stats = fitter.get_statistics(use_initial_parameters=True)
    assert initial_stats['chi_squared'] > stats['chi_squared']


def test_calculate_statistics_for_perfect_model():
    y = np.array([1.0, 2.0, 3.0, 4.0])
    stats = calculate_statistics(y, y, 1)
    assert stats['r_squared'] == 1.0
    assert stats['chi_squared'] == 0.0
    assert stats['rmse'] == 0.0
    assert stats['aic'] == -np.inf
    assert stats['reduced_chi_squared'] == 0.0


def test_calculate_statistics_shape_mismatch():
    with pytest.raises(ShapeMismatch):
        calculate_statistics([1.0, 2.0], [1.0], 1)


def test_format_statistics_skips_missing_entries():
    text = format_statistics({'chi_squared': 1.5, 'n_data': 10})
    assert text.splitlines() == ["=== Fit Statistics ===", "χ² = 1.500000e+00", "N data = 10"]


def test_lmfit_parameter_names():
    assert lmfit_parameter_names(['peak height', 'a', 'a', 'σ-x']) == [
        'p0_peak_height', 'p1_a', 'p2_a', 'p3___x']
