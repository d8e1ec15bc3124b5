"""
Voigt profile models.
"""

import numpy as np
from scipy.special import wofz

from .gaussian import gaussian
from .lorentzian import lorentzian


def voigt(x, par):
    """
    Voigt peak profile (convolution of Gaussian and Lorentzian).
    
    Parameters
    ----------
    x : array_like
        Independent variable (x-axis data)
    par : array_like
        ``(amplitude, center, sigma, gamma)``: peak area, center, Gaussian
        standard deviation and Lorentzian HWHM
    
    Returns
    -------
    array_like
        Voigt peak values at x positions
    
    Notes
    -----
    Uses the Faddeeva function (scipy.special.wofz).
    """
    amplitude, center, sigma, gamma = par
    x = np.asarray(x)
    z = ((x - center) + 1j * gamma) / (sigma * np.sqrt(2))
    return amplitude * np.real(wofz(z)) / (sigma * np.sqrt(2 * np.pi))


def pseudo_voigt(x, par):
    """
    Pseudo-Voigt profile (weighted sum of Gaussian and Lorentzian).
    
    Parameters
    ----------
    x : array_like
        Independent variable (x-axis data)
    par : array_like
        ``(amplitude, center, sigma, gamma, fraction)`` where ``fraction``
        mixes the two shapes (0 = pure Gaussian, 1 = pure Lorentzian)
    
    Returns
    -------
    array_like
        Pseudo-Voigt peak values at x positions
    """
    amplitude, center, sigma, gamma, fraction = par
    gauss = gaussian(x, (amplitude, center, sigma))
    lorentz = lorentzian(x, (amplitude, center, gamma))
    return (1 - fraction) * gauss + fraction * lorentz


voigt.parameter_names = ('amplitude', 'center', 'sigma', 'gamma')
pseudo_voigt.parameter_names = ('amplitude', 'center', 'sigma', 'gamma', 'fraction')
