"""
Parametric fit functions: a model with fit ranges, named parameters,
bounds, initial and fitted values.
"""

__version__ = '0.1.0'

from .core import (
    AbstractFitFunction,
    FitFunction,
    CurveSeries,
    Interval,
    FitFunctionError,
    ShapeMismatch,
    InvalidArgument,
    ConversionError,
)
from .core.profiles import make_fit_function
from .core.fitting import fit

__all__ = [
    'AbstractFitFunction',
    'FitFunction',
    'CurveSeries',
    'Interval',
    'FitFunctionError',
    'ShapeMismatch',
    'InvalidArgument',
    'ConversionError',
    'make_fit_function',
    'fit',
]
