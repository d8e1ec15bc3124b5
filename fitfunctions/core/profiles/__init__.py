"""
Profile models for peak fitting.

Every model has the signature ``f(x, par)`` and declares the names of the
entries of ``par`` in its ``parameter_names`` attribute.
"""

import numpy as np

from ..errors import InvalidArgument
from ..fit_function import FitFunction
from .gaussian import gaussian
from .lorentzian import lorentzian
from .voigt import voigt, pseudo_voigt
from .custom import load_custom_profile


# Profile registry - maps profile names to model functions
PROFILE_REGISTRY = {
    'gaussian': gaussian,
    'lorentzian': lorentzian,
    'voigt': voigt,
    'pseudo_voigt': pseudo_voigt,
}


def get_profile(name):
    """
    Get profile model by name.
    
    Raises
    ------
    KeyError
        If profile name not found in registry
    """
    if name not in PROFILE_REGISTRY:
        raise KeyError(f"Profile '{name}' not found. Available: {list_profiles()}")
    return PROFILE_REGISTRY[name]


def list_profiles():
    """List all available profile names."""
    return list(PROFILE_REGISTRY.keys())


def register_profile(name, func, parameter_names=None):
    """
    Register a custom profile model.
    
    Parameters
    ----------
    name : str
        Profile name
    func : callable
        Model with signature ``func(x, par)``
    parameter_names : sequence of str, optional
        Names of the entries of ``par``. Required unless ``func`` already
        has a ``parameter_names`` attribute.
    """
    if parameter_names is not None:
        func.parameter_names = tuple(parameter_names)
    if not getattr(func, 'parameter_names', None):
        raise InvalidArgument(f"Profile '{name}' does not declare its parameter names")
    PROFILE_REGISTRY[name] = func


def make_fit_function(profile, fit_range=None, precision=np.float64, **initial_params):
    """
    Build a one-dimensional fit function from a profile model.
    
    Parameters
    ----------
    profile : str or callable
        Registered profile name or a model with ``parameter_names``
    fit_range : tuple of float, optional
        ``(min, max)`` of the fit range
    precision : type, optional
        Floating point type, default ``numpy.float64``
    **initial_params
        Initial parameter values by name; parameters not given stay unset
    
    Returns
    -------
    FitFunction
        Fit function with the profile's parameter names
    
    Examples
    --------
    >>> ff = make_fit_function('gaussian', (0, 10), amplitude=1, center=5, sigma=1)
    >>> ff.parameter_names
    ['amplitude', 'center', 'sigma']
    """
    func = get_profile(profile) if isinstance(profile, str) else profile
    names = getattr(func, 'parameter_names', None)
    if not names:
        raise InvalidArgument(f"Profile {profile!r} does not declare its parameter names")
    
    unknown = set(initial_params) - set(names)
    if unknown:
        raise InvalidArgument(f"Unknown parameters for {profile!r}: {sorted(unknown)}")
    
    ff = FitFunction(func, 1, len(names), precision=precision)
    ff.set_parameter_names(names)
    if fit_range is not None:
        ff.set_fit_ranges([fit_range])
    if initial_params:
        ff.set_initial_parameters_from_sequence(
            [initial_params.get(name, np.nan) for name in names])
    return ff


__all__ = [
    'gaussian',
    'lorentzian', 
    'voigt',
    'pseudo_voigt',
    'load_custom_profile',
    'get_profile',
    'list_profiles',
    'register_profile',
    'make_fit_function',
    'PROFILE_REGISTRY',
]
