"""
Closed intervals used as parameter bounds.
"""

from collections import namedtuple

import numpy as np


class Interval(namedtuple('Interval', ['left', 'right'])):
    """
    Closed interval ``[left, right]``.

    The endpoint order is not checked; an interval with ``left > right``
    is empty.

    ``value in interval`` tests whether ``value`` lies inside the interval,
    not whether it equals one of the endpoints as for a plain tuple.
    """

    __slots__ = ()

    @property
    def width(self):
        return self.right - self.left

    def __contains__(self, value):
        return self.left <= value <= self.right

    def __str__(self):
        return f"{self.left}..{self.right}"


def default_bounds(dtype):
    """
    Effectively unbounded interval for the floating type ``dtype``.

    Both endpoints are half of the largest finite magnitude so that
    arithmetic on the bounds cannot overflow.
    """
    info = np.finfo(dtype)
    return Interval(dtype(info.min) / dtype(2), dtype(info.max) / dtype(2))
