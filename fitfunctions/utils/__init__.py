"""Logging helpers shared by the fitfunctions package."""

from .logger import LOGGER_NAME, get_logger, setup_logger, log_error, log_warning, log_info, log_debug

__all__ = [
    'LOGGER_NAME',
    'get_logger',
    'setup_logger',
    'log_error',
    'log_warning',
    'log_info',
    'log_debug',
]
