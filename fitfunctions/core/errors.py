"""
Exceptions raised by fit functions.
"""


class FitFunctionError(Exception):
    """Base class for all fit function errors."""


class ShapeMismatch(FitFunctionError, ValueError):
    """
    A supplied sequence does not have the length the fit function requires.

    Parameters
    ----------
    message : str
        Description of the offending input
    expected : int, optional
        Required length
    actual : int, optional
        Length that was supplied
    axis : int, optional
        Fit range axis the mismatch was found in
    index : int, optional
        Position of the offending entry (e.g. a parameter bound)
    """

    def __init__(self, message, expected=None, actual=None, axis=None, index=None):
        self.expected = expected
        self.actual = actual
        self.axis = axis
        self.index = index
        details = []
        if axis is not None:
            details.append(f"axis {axis}")
        if index is not None:
            details.append(f"index {index}")
        if expected is not None:
            details.append(f"expected length {expected}")
        if actual is not None:
            details.append(f"got {actual}")
        if details:
            message = f"{message} ({', '.join(details)})"
        super().__init__(message)


class InvalidArgument(FitFunctionError, ValueError):
    """An argument is outside the values a fit function accepts."""


class ConversionError(FitFunctionError, TypeError):
    """A value cannot be represented in the precision type of a fit function."""
