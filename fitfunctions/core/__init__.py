"""Core package initialization."""

from .errors import FitFunctionError, ShapeMismatch, InvalidArgument, ConversionError
from .interval import Interval, default_bounds
from .fit_function import AbstractFitFunction, FitFunction
from .rendering import CurveSeries
from . import profiles
from . import fitting
from . import config

__all__ = [
    'FitFunctionError',
    'ShapeMismatch',
    'InvalidArgument',
    'ConversionError',
    'Interval',
    'default_bounds',
    'AbstractFitFunction',
    'FitFunction',
    'CurveSeries',
    'profiles',
    'fitting',
    'config',
]
