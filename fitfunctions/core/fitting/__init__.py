"""Fitting backend for fit functions."""

from .fitter import FitFunctionFitter, fit, lmfit_parameter_names
from .statistics import calculate_statistics, extract_lmfit_statistics, format_statistics

__all__ = [
    'FitFunctionFitter',
    'fit',
    'lmfit_parameter_names',
    'calculate_statistics',
    'extract_lmfit_statistics',
    'format_statistics',
]
