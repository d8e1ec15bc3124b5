"""
Precision type handling for fit functions.
"""

import numpy as np

from .errors import ConversionError, InvalidArgument


SUPPORTED_PRECISIONS = (np.float16, np.float32, np.float64, np.longdouble)


def resolve_precision(precision):
    """
    Normalize a precision specification to a numpy floating type.

    Parameters
    ----------
    precision : type, numpy.dtype or str
        Floating point type such as ``numpy.float32``, ``'float64'`` or
        the builtin ``float``

    Returns
    -------
    type
        numpy scalar type (e.g. ``numpy.float64``)

    Raises
    ------
    InvalidArgument
        If ``precision`` is not a floating point type
    """
    try:
        dtype = np.dtype(precision)
    except TypeError as e:
        raise InvalidArgument(f"Unknown precision type: {precision!r}") from e
    if dtype.kind != 'f':
        raise InvalidArgument(f"Precision type must be a floating point type, got {dtype}")
    return dtype.type


def to_precision(values, dtype):
    """
    Convert ``values`` to an array of ``dtype``.

    Raises
    ------
    ConversionError
        If a value is a string or not numeric, or a finite value overflows
        ``dtype``
    """
    try:
        elements = np.asarray(values, dtype=object).ravel()
        if any(isinstance(v, (str, bytes)) for v in elements):
            raise TypeError("strings are not numeric values")
        source = np.asarray(values, dtype=np.longdouble)
    except (TypeError, ValueError, OverflowError) as e:
        raise ConversionError(f"Cannot convert {values!r} to {np.dtype(dtype).name}: {e}") from e

    with np.errstate(over='ignore'):
        converted = source.astype(dtype)

    overflow = np.isinf(converted) & np.isfinite(source)
    if np.any(overflow):
        raise ConversionError(
            f"Value(s) {source[overflow].tolist()} out of range for {np.dtype(dtype).name}"
        )
    return converted


def to_scalar(value, dtype):
    """Convert a single value to a ``dtype`` scalar."""
    converted = to_precision(value, dtype)
    if converted.ndim != 0:
        raise ConversionError(f"Expected a scalar, got {value!r}")
    return converted[()]
