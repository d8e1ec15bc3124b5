"""
Curve samples of a fit function for plotting.
"""

import numbers

import numpy as np

from .errors import InvalidArgument, ShapeMismatch
from ..utils.logger import log_warning


DEFAULT_NPOINTS = 501

INITIAL_STYLE = {'color': 'green', 'label': 'Fit model with initial parameters'}
FITTED_STYLE = {'color': 'red', 'label': 'Fit model with fitted parameters'}


class CurveSeries:
    """
    Lazy sequence of ``(x, y)`` samples of a fit function.
    
    Nothing is evaluated until the series is iterated or ``x``/``y`` are
    requested, and every evaluation reads the current state of the fit
    function, so a series can be iterated any number of times.
    
    Attributes
    ----------
    fit_function : FitFunction
        Fit function to sample
    npoints : int
        Number of samples across the first fit range axis
    use_initial_parameters : bool
        Evaluate with the initial instead of the fitted parameters
    bin_width : float
        Scale factor applied to the model values
    """
    
    def __init__(self, fit_function, npoints=DEFAULT_NPOINTS,
                 use_initial_parameters=False, bin_width=1.0):
        if isinstance(npoints, bool) or not isinstance(npoints, numbers.Integral) or npoints < 1:
            raise InvalidArgument(f"npoints must be a positive integer, got {npoints!r}")
        self.fit_function = fit_function
        self.npoints = int(npoints)
        self.use_initial_parameters = bool(use_initial_parameters)
        self.bin_width = bin_width
        
        if fit_function.get_ndims() > 1:
            log_warning(
                f"Rendering a {fit_function.get_ndims()}-dimensional fit function is not "
                "supported; sampling the first fit range axis only"
            )
    
    @property
    def style(self):
        """Suggested line color and label for the selected parameter set."""
        return dict(INITIAL_STYLE if self.use_initial_parameters else FITTED_STYLE)
    
    def evaluate(self):
        """
        Sample the model over the first fit range axis.
        
        Returns
        -------
        x : ndarray
            ``npoints`` evenly spaced samples from the first to the last
            value of the first fit range
        y : ndarray
            ``bin_width * model(x, parameters)``
        
        Raises
        ------
        InvalidArgument
            If the first fit range is not finite
        ShapeMismatch
            If the model output cannot be matched to the samples
        """
        ff = self.fit_function
        dtype = ff.get_precision_type()
        start, stop = ff.fit_ranges[0]
        if not (np.isfinite(start) and np.isfinite(stop)):
            raise InvalidArgument(
                f"Cannot render over the unbounded fit range [{start}, {stop}]; "
                "set a finite fit range first"
            )
        
        x = np.linspace(start, stop, self.npoints, dtype=dtype)
        par = ff.initial_parameters if self.use_initial_parameters else ff.fitted_parameters
        y = self.bin_width * np.asarray(ff.model(x, par))
        try:
            y = np.broadcast_to(y, x.shape)
        except ValueError as e:
            raise ShapeMismatch("Model output does not match the samples",
                                expected=x.size, actual=y.size) from e
        return x, y
    
    @property
    def x(self):
        return self.evaluate()[0]
    
    @property
    def y(self):
        return self.evaluate()[1]
    
    def __iter__(self):
        x, y = self.evaluate()
        yield from zip(x, y)
    
    def __len__(self):
        return self.npoints
    
    def __repr__(self):
        source = 'initial' if self.use_initial_parameters else 'fitted'
        return f"<CurveSeries npoints={self.npoints} parameters={source} bin_width={self.bin_width}>"
