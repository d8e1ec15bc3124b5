"""
Fitting backend for fit functions using lmfit.
"""

import re

import numpy as np
from lmfit import Parameters, fit_report, minimize

from ..errors import InvalidArgument, ShapeMismatch
from ..interval import default_bounds
from .statistics import calculate_statistics
from ...utils.logger import log_error, log_info


def lmfit_parameter_names(parameter_names):
    """
    lmfit-compatible, unique names for the parameters of a fit function.

    lmfit only accepts identifiers, so every name is prefixed with its
    position and stripped of other characters: ``'peak height'`` at
    position 0 becomes ``'p0_peak_height'``.
    """
    return [f"p{i}_{re.sub(r'[^0-9a-zA-Z_]', '_', name)}"
            for i, name in enumerate(parameter_names)]


class FitFunctionFitter:
    """
    Fits the model of a fit function to data and stores the result on it.

    The fit reads the model, fit ranges, initial parameters and parameter
    bounds of the fit function and reports back through
    ``_set_fitted_parameters`` and ``set_backend_result``; the stored
    backend result is the ``lmfit.minimizer.MinimizerResult``.

    Attributes
    ----------
    fit_function : FitFunction
        Fit function to fit
    x : ndarray
        Independent variable, shape ``(n,)`` for one-dimensional fit
        functions and ``(ndims, n)`` otherwise
    y : ndarray
        Dependent variable, shape ``(n,)``
    weights : ndarray or None
        Residual weights (e.g. 1/sigma)
    result : lmfit.minimizer.MinimizerResult or None
        Result of the last fit
    """

    def __init__(self, fit_function, x_data, y_data, weights=None):
        self.fit_function = fit_function
        self.x = np.asarray(x_data, dtype=float)
        self.y = np.asarray(y_data, dtype=float)
        self.weights = None if weights is None else np.asarray(weights, dtype=float)
        self.result = None
        self._check_data()

    def _check_data(self):
        ndims = self.fit_function.get_ndims()
        if self.y.ndim != 1:
            raise ShapeMismatch("y data must be one-dimensional", expected=1, actual=self.y.ndim)
        n = self.y.size

        expected_shape = (n,) if ndims == 1 else (ndims, n)
        if self.x.shape != expected_shape:
            raise ShapeMismatch(f"x data must have shape {expected_shape}, got {self.x.shape}")
        if self.weights is not None and self.weights.shape != (n,):
            raise ShapeMismatch("Wrong number of weights", expected=n, actual=self.weights.size)

    def fit_mask(self):
        """Boolean mask of the data points inside every fit range."""
        x_axes = self.x[np.newaxis, :] if self.x.ndim == 1 else self.x
        mask = np.ones(self.y.size, dtype=bool)
        for axis, (first, last) in enumerate(self.fit_function.fit_ranges):
            lo, hi = min(first, last), max(first, last)
            mask &= (x_axes[axis] >= lo) & (x_axes[axis] <= hi)
        return mask

    def _windowed_data(self):
        mask = self.fit_mask()
        if not np.any(mask):
            raise InvalidArgument("No data points inside the fit ranges")
        x = self.x[mask] if self.x.ndim == 1 else self.x[:, mask]
        weights = None if self.weights is None else self.weights[mask]
        return x, self.y[mask], weights

    def make_params(self):
        """
        Build lmfit parameters from the initial parameters and bounds.

        Bounds left at their effectively unbounded default are passed to
        lmfit as infinite.

        Raises
        ------
        InvalidArgument
            If an initial parameter has not been set
        """
        ff = self.fit_function
        names = ff.parameter_names
        initial = ff.initial_parameters
        unset = [name for name, value in zip(names, initial) if np.isnan(value)]
        if unset:
            raise InvalidArgument(f"Initial parameters not set: {unset}")

        unbounded = default_bounds(ff.get_precision_type())
        params = Parameters()
        for key, value, bound in zip(lmfit_parameter_names(names), initial, ff.parameter_bounds):
            lo = -np.inf if bound.left <= unbounded.left else float(bound.left)
            hi = np.inf if bound.right >= unbounded.right else float(bound.right)
            params.add(key, value=float(value), min=lo, max=hi)
        return params

    def fit(self, method='leastsq', max_nfev=None, iter_cb=None, **fit_kws):
        """
        Execute the fitting procedure.

        Parameters
        ----------
        method : str, optional
            Fitting method: 'leastsq', 'least_squares', 'nelder', etc.
            Default: 'leastsq' (Levenberg-Marquardt)
        max_nfev : int, optional
            Maximum number of function evaluations
        iter_cb : callable, optional
            Passed to ``lmfit.minimize``
        **fit_kws
            Additional keyword arguments for lmfit.minimize

        Returns
        -------
        result : lmfit.minimizer.MinimizerResult
            Fitting result object, also stored as the backend result
        """
        ff = self.fit_function
        x, y, weights = self._windowed_data()
        params = self.make_params()
        keys = list(params.keys())

        def objective(params):
            par = np.array([params[key].value for key in keys])
            residual = y - np.asarray(ff.model(x, par), dtype=float)
            if weights is not None:
                residual = residual * weights
            return residual

        log_info(f"Fitting {ff!r} to {y.size} data points with method '{method}'")
        try:
            result = minimize(objective, params, method=method, max_nfev=max_nfev,
                              iter_cb=iter_cb, **fit_kws)
        except Exception as e:
            log_error(f"Fit of {ff!r} failed", e)
            raise

        ff._set_fitted_parameters([result.params[key].value for key in keys])
        ff.set_backend_result(result)
        self.result = result
        log_info(f"Fit finished: success={result.success}, nfev={result.nfev}, "
                 f"reduced chi-square={result.redchi:.6g}")
        return result

    def get_statistics(self, use_initial_parameters=False):
        """
        Goodness-of-fit statistics over the data inside the fit ranges.

        Parameters
        ----------
        use_initial_parameters : bool, optional
            Evaluate the model with the initial instead of the fitted
            parameters
        """
        ff = self.fit_function
        x, y, weights = self._windowed_data()
        par = ff.initial_parameters if use_initial_parameters else ff.fitted_parameters
        y_model = np.asarray(ff.model(x, par), dtype=float)
        return calculate_statistics(y, y_model, ff.get_nparams(), weights=weights)

    def get_fit_report(self):
        """lmfit text report of the last fit."""
        if self.result is None:
            return "No fit performed yet."
        return fit_report(self.result)


def fit(fit_function, x_data, y_data, weights=None, method='leastsq', max_nfev=None, **fit_kws):
    """
    Fit ``fit_function`` to data and store the result on it.

    Shortcut for ``FitFunctionFitter(fit_function, x_data, y_data,
    weights).fit(method, max_nfev, **fit_kws)``.
    """
    fitter = FitFunctionFitter(fit_function, x_data, y_data, weights=weights)
    return fitter.fit(method=method, max_nfev=max_nfev, **fit_kws)
