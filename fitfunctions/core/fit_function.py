"""
Fit function: a model together with its fit ranges and parameters.
"""

import numbers
from abc import ABC, abstractmethod
from collections.abc import Mapping

import numpy as np

from .errors import InvalidArgument, ShapeMismatch
from .interval import Interval, default_bounds
from .precision import resolve_precision, to_precision
from .rendering import CurveSeries, DEFAULT_NPOINTS
from ..utils.logger import log_debug


def _check_count(name, value):
    if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value < 1:
        raise InvalidArgument(f"{name} must be a positive integer, got {value!r}")
    return int(value)


def _as_list(values, what):
    if isinstance(values, (str, bytes)):
        raise InvalidArgument(f"{what} must be a sequence, got {values!r}")
    try:
        return list(values)
    except TypeError as e:
        raise InvalidArgument(f"{what} must be a sequence, got {values!r}") from e


def model_name(model):
    """Human readable identifier of a model callable."""
    return getattr(model, '__name__', None) or repr(model)


class AbstractFitFunction(ABC):
    """
    Base class for an ``ndims``-dimensional fit with ``nparams`` parameters.

    The dimensionality, the number of parameters and the precision type are
    fixed at construction.

    Parameters
    ----------
    ndims : int
        Number of independent variable axes
    nparams : int
        Number of fit parameters
    precision : type, optional
        Floating point type all values are stored as, default ``numpy.float64``
    """

    def __init__(self, ndims, nparams, precision=np.float64):
        self._ndims = _check_count('ndims', ndims)
        self._nparams = _check_count('nparams', nparams)
        self._precision = resolve_precision(precision)
        self._backend_result = None

    @property
    def ndims(self):
        return self._ndims

    @property
    def nparams(self):
        return self._nparams

    @property
    def precision(self):
        return self._precision

    def get_ndims(self):
        return self._ndims

    def get_nparams(self):
        return self._nparams

    def get_precision_type(self):
        return self._precision

    def get_backend_result(self):
        """Result object stored by the fitting backend, or None."""
        return self._backend_result

    def set_backend_result(self, result):
        """Replace the stored backend result. ``None`` clears it."""
        self._backend_result = result

    @abstractmethod
    def get_fitted_parameters(self):
        """Mapping of parameter name to fitted value."""

    @abstractmethod
    def get_initial_parameters(self):
        """Mapping of parameter name to initial value."""


class FitFunction(AbstractFitFunction):
    """
    Model function with fit ranges, named parameters, bounds and results.

    Parameters
    ----------
    model : callable
        ``model(x, par)`` returning the dependent variable at ``x`` for the
        parameter vector ``par`` (length ``nparams``)
    ndims : int
        Number of independent variable axes
    nparams : int
        Number of fit parameters
    precision : type, optional
        Floating point type, default ``numpy.float64``

    Notes
    -----
    Fresh instances have the fit range ``[-inf, inf]`` on every axis,
    parameter names ``par1 .. parN``, NaN initial and fitted parameters
    (NaN means "not set") and effectively unbounded parameter bounds.

    Every setter validates its whole input before writing anything, so a
    rejected call leaves the fit function unchanged. Properties return
    copies of the stored values.

    Examples
    --------
    >>> ff = FitFunction(lambda x, p: p[0] * x + p[1], 1, 2)
    >>> ff.set_fit_ranges([(0, 10)])
    >>> ff.set_initial_parameters({'slope': 1.0, 'offset': 0.0})
    >>> ff.parameter_names
    ['slope', 'offset']
    """

    def __init__(self, model, ndims, nparams, precision=np.float64):
        if not callable(model):
            raise InvalidArgument(f"model must be callable, got {model!r}")
        super().__init__(ndims, nparams, precision)
        dtype = self._precision

        self._model = model
        self._fit_ranges = tuple(np.array([-np.inf, np.inf], dtype=dtype)
                                 for _ in range(self._ndims))
        self._parameter_names = [f"par{i}" for i in range(1, self._nparams + 1)]
        self._fitted_parameters = np.full(self._nparams, np.nan, dtype=dtype)
        self._initial_parameters = np.full(self._nparams, np.nan, dtype=dtype)
        self._parameter_bounds = [default_bounds(dtype) for _ in range(self._nparams)]

    # ===================== Read access =====================
    @property
    def model(self):
        return self._model

    @property
    def fit_ranges(self):
        """Tuple with one ``[first, last]`` array per axis."""
        return tuple(r.copy() for r in self._fit_ranges)

    @property
    def parameter_names(self):
        return list(self._parameter_names)

    @property
    def initial_parameters(self):
        return self._initial_parameters.copy()

    @property
    def fitted_parameters(self):
        return self._fitted_parameters.copy()

    @property
    def parameter_bounds(self):
        return list(self._parameter_bounds)

    def get_fitted_parameters(self):
        return dict(zip(self._parameter_names, self._fitted_parameters.copy()))

    def get_initial_parameters(self):
        return dict(zip(self._parameter_names, self._initial_parameters.copy()))

    def get_parameter_bounds(self):
        """Mapping of parameter name to its bound interval."""
        return dict(zip(self._parameter_names, self._parameter_bounds))

    # ===================== Validation helpers =====================
    def _convert_vector(self, values, what):
        values = _as_list(values, what)
        if len(values) != self._nparams:
            raise ShapeMismatch(f"Wrong number of {what}",
                                expected=self._nparams, actual=len(values))
        return to_precision(values, self._precision)

    def _convert_pair(self, values, what, **where):
        values = _as_list(values, what)
        if len(values) != 2:
            raise ShapeMismatch(f"{what} must have length 2",
                                expected=2, actual=len(values), **where)
        return to_precision([values[0], values[-1]], self._precision)

    # ===================== Setters =====================
    def set_parameter_bounds(self, bounds):
        """
        Replace all parameter bounds.

        Parameters
        ----------
        bounds : sequence
            ``nparams`` entries, each an ``Interval`` or a ``(min, max)`` pair

        Raises
        ------
        ShapeMismatch
            If the number of bounds is not ``nparams`` or an entry does not
            have two endpoints
        """
        bounds = _as_list(bounds, 'parameter bounds')
        if len(bounds) != self._nparams:
            raise ShapeMismatch("Wrong number of parameter bounds",
                                expected=self._nparams, actual=len(bounds))
        converted = [Interval(*self._convert_pair(bound, 'Parameter bounds', index=i))
                     for i, bound in enumerate(bounds)]
        self._parameter_bounds[:] = converted
        log_debug(f"Parameter bounds set to {[str(b) for b in converted]}")

    def set_fit_ranges(self, fit_ranges):
        """
        Replace the fit range of every axis.

        Parameters
        ----------
        fit_ranges : sequence
            ``ndims`` entries, each a ``(first, last)`` pair or a sequence of
            length 2. Values are stored in the given order.

        Raises
        ------
        ShapeMismatch
            If the number of entries is not ``ndims`` or an axis entry does
            not have length 2
        """
        fit_ranges = _as_list(fit_ranges, 'fit ranges')
        if len(fit_ranges) != self._ndims:
            raise ShapeMismatch("Wrong number of fit ranges",
                                expected=self._ndims, actual=len(fit_ranges))
        converted = [self._convert_pair(axis_range, 'All fit ranges', axis=axis)
                     for axis, axis_range in enumerate(fit_ranges)]
        for current, new in zip(self._fit_ranges, converted):
            current[:] = new
        log_debug(f"Fit ranges set to {[r.tolist() for r in converted]}")

    def set_parameter_names(self, names):
        """
        Replace the parameter names.

        Raises
        ------
        ShapeMismatch
            If the number of names is not ``nparams``
        """
        names = [str(name) for name in _as_list(names, 'parameter names')]
        if len(names) != self._nparams:
            raise ShapeMismatch("Wrong number of parameter names",
                                expected=self._nparams, actual=len(names))
        self._parameter_names[:] = names

    def set_initial_parameters(self, initial_parameters):
        """
        Set the initial parameters from a mapping or a sequence.

        A mapping also replaces the parameter names with its keys, see
        :meth:`set_initial_parameters_from_mapping`. A plain sequence only
        replaces the values.
        """
        if isinstance(initial_parameters, Mapping):
            self.set_initial_parameters_from_mapping(initial_parameters)
        else:
            self.set_initial_parameters_from_sequence(initial_parameters)

    def set_initial_parameters_from_mapping(self, initial_parameters):
        """
        Set parameter names and initial values from a name to value mapping.

        Names are taken from the keys and values from the values, both in
        mapping order.
        """
        names = [str(name) for name in initial_parameters.keys()]
        values = self._convert_vector(initial_parameters.values(), 'initial parameters')
        self._parameter_names[:] = names
        self._initial_parameters[:] = values
        log_debug(f"Initial parameters set to {dict(zip(names, values.tolist()))}")

    def set_initial_parameters_from_sequence(self, initial_parameters):
        """Set the initial values, leaving the parameter names unchanged."""
        values = self._convert_vector(initial_parameters, 'initial parameters')
        self._initial_parameters[:] = values
        log_debug(f"Initial parameters set to {values.tolist()}")

    def _set_fitted_parameters(self, fitted_parameters):
        """
        Store fitted parameters reported by a fitting backend.

        Unlike :meth:`set_initial_parameters`, a mapping never changes the
        parameter names; its values are taken in mapping order.
        """
        if isinstance(fitted_parameters, Mapping):
            self._set_fitted_parameters_from_mapping(fitted_parameters)
        else:
            self._set_fitted_parameters_from_sequence(fitted_parameters)

    def _set_fitted_parameters_from_mapping(self, fitted_parameters):
        self._set_fitted_parameters_from_sequence(fitted_parameters.values())

    def _set_fitted_parameters_from_sequence(self, fitted_parameters):
        values = self._convert_vector(fitted_parameters, 'fitted parameters')
        self._fitted_parameters[:] = values
        log_debug(f"Fitted parameters set to {values.tolist()}")

    # ===================== Rendering =====================
    def curve(self, npoints=DEFAULT_NPOINTS, use_initial_parameters=False, bin_width=1.0):
        """
        Samples of the model over the first fit range axis for plotting.

        Parameters
        ----------
        npoints : int, optional
            Number of samples, default 501
        use_initial_parameters : bool, optional
            Evaluate with the initial instead of the fitted parameters
        bin_width : float, optional
            Scale factor applied to the model values, default 1.0

        Returns
        -------
        CurveSeries
            Lazy ``(x, y)`` series with a ``style`` hint
        """
        return CurveSeries(self, npoints=npoints,
                           use_initial_parameters=use_initial_parameters,
                           bin_width=bin_width)

    # ===================== Text =====================
    def __str__(self):
        lines = [
            f"Model: {model_name(self._model)}",
            f"  fit ranges: {', '.join(str(r.tolist()) for r in self._fit_ranges)}",
            "  Parameters: value (initial value)",
        ]
        for name, fitted, initial in zip(self._parameter_names,
                                         self._fitted_parameters,
                                         self._initial_parameters):
            lines.append(f"    {name}: {fitted} ({initial})")
        return '\n'.join(lines)

    def __repr__(self):
        return (f"<FitFunction {np.dtype(self._precision).name} ndims={self._ndims} "
                f"nparams={self._nparams} model={model_name(self._model)}>")
