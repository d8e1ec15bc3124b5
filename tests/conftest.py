import matplotlib
matplotlib.use('Agg')

import numpy as np
import pytest


def linear(x, par):
    return par[0] * np.asarray(x) + par[1]


@pytest.fixture
def line_fit_function():
    from fitfunctions import FitFunction
    ff = FitFunction(linear, 1, 2)
    ff.set_fit_ranges([(0, 10)])
    return ff
