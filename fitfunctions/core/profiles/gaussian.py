"""
Gaussian profile model.
"""

import numpy as np


def gaussian(x, par):
    """
    Gaussian peak profile.
    
    Parameters
    ----------
    x : array_like
        Independent variable (x-axis data)
    par : array_like
        ``(amplitude, center, sigma)``: peak height, mean (μ) and
        standard deviation (σ)
    
    Returns
    -------
    array_like
        Gaussian peak values at x positions
    
    Notes
    -----
    Mathematical form: f(x) = A * exp(-((x - μ)² / (2σ²)))
    
    FWHM (Full Width at Half Maximum) = 2.355 * sigma
    """
    amplitude, center, sigma = par
    x = np.asarray(x)
    return amplitude * np.exp(-((x - center)**2) / (2 * sigma**2))


gaussian.parameter_names = ('amplitude', 'center', 'sigma')
